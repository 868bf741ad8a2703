"""School Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from schools.domain.entities import School
from schools.domain.value_objects import Coordinates


class SchoolReader(ABC):
    """학교 조회 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def list_by_distance(self, origin: Coordinates) -> Sequence[tuple[School, float]]:
        """모든 학교를 origin 으로부터의 거리 오름차순으로 조회합니다.

        Args:
            origin: 기준 좌표

        Returns:
            (School, 거리_km) 튜플 목록

        Raises:
            PersistenceError: 저장소 오류
        """
        ...
