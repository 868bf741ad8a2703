"""List Schools Query.

기준 좌표로부터 가까운 순서로 전체 학교를 조회하는 Query 입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from schools.application.common.exceptions import PersistenceError, SchoolRetrievalFailedError
from schools.application.nearby.dto import SchoolDistanceDTO
from schools.application.nearby.validation import parse_proximity_query
from schools.domain.value_objects import Coordinates

if TYPE_CHECKING:
    from schools.application.nearby.ports import SchoolReader

logger = logging.getLogger(__name__)


class ListSchoolsQuery:
    """거리순 학교 목록 Query."""

    def __init__(self, school_reader: "SchoolReader") -> None:
        self._reader = school_reader

    async def execute(self, params: Mapping[str, Any] | None) -> list[SchoolDistanceDTO]:
        """거리 오름차순 학교 목록을 반환합니다.

        Raises:
            SchoolValidationError: lat/lon 검증 실패
            SchoolRetrievalFailedError: 저장소 오류
        """
        query = parse_proximity_query(params)
        origin = Coordinates(latitude=query.lat, longitude=query.lon)
        logger.info(
            "School proximity search started",
            extra={"lat": origin.latitude, "lon": origin.longitude},
        )

        try:
            rows = await self._reader.list_by_distance(origin)
        except PersistenceError as exc:
            logger.exception("Database error while listing schools")
            raise SchoolRetrievalFailedError() from exc

        entries = [SchoolDistanceDTO.from_entity(school, distance) for school, distance in rows]
        logger.info("School proximity search completed", extra={"results_count": len(entries)})
        return entries
