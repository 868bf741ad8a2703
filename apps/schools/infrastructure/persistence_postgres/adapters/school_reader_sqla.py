"""SQLAlchemy School Reader Implementation."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schools.application.common.exceptions import PersistenceError
from schools.application.nearby.ports import SchoolReader
from schools.domain.entities import School
from schools.domain.services import EARTH_RADIUS_KM, great_circle_km
from schools.domain.value_objects import Coordinates
from schools.infrastructure.persistence_postgres.models import SchoolModel

# radians/acos/least/greatest 를 SQL 에서 지원하는 dialect
SQL_DISTANCE_DIALECTS = frozenset({"postgresql", "mysql", "mariadb"})


class SqlaSchoolReader(SchoolReader):
    """SQLAlchemy 기반 학교 Reader.

    SchoolReader Port를 구현합니다.
    SQL 거리 계산을 지원하지 않는 dialect(SQLite)에서는 Python 으로 계산합니다.
    """

    def __init__(self, session: AsyncSession, dialect_name: str = "postgresql") -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
            dialect_name: 엔진 dialect 이름
        """
        self._session = session
        self._sql_distance = dialect_name in SQL_DISTANCE_DIALECTS

    async def list_by_distance(self, origin: Coordinates) -> Sequence[tuple[School, float]]:
        """모든 학교를 거리 오름차순으로 조회합니다."""
        try:
            if self._sql_distance:
                return await self._list_sql(origin)
            return await self._list_in_memory(origin)
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc)) from exc

    async def _list_sql(self, origin: Coordinates) -> list[tuple[School, float]]:
        distance_expr = self.distance_expr(origin.latitude, origin.longitude)
        query = select(SchoolModel, distance_expr).order_by(
            distance_expr.asc(), SchoolModel.id.asc()
        )
        result = await self._session.execute(query)
        return [(self._to_domain(row), float(distance)) for row, distance in result.all()]

    async def _list_in_memory(self, origin: Coordinates) -> list[tuple[School, float]]:
        result = await self._session.execute(select(SchoolModel).order_by(SchoolModel.id.asc()))
        rows = [self._to_domain(model) for model in result.scalars().all()]
        ranked = [(school, great_circle_km(origin, school.coordinates())) for school in rows]
        ranked.sort(key=lambda pair: pair[1])
        return ranked

    @staticmethod
    def _to_domain(model: SchoolModel) -> School:
        """ORM 모델을 도메인 엔티티로 변환합니다."""
        return School(
            id=int(model.id),
            name=model.name,
            address=model.address,
            latitude=float(model.latitude),
            longitude=float(model.longitude),
        )

    @staticmethod
    def distance_expr(latitude: float, longitude: float):
        """구면 코사인 법칙 거리 표현식 (km, acos 인자 clamp)."""
        cosine = func.cos(func.radians(latitude)) * func.cos(
            func.radians(SchoolModel.latitude)
        ) * func.cos(
            func.radians(SchoolModel.longitude) - func.radians(longitude)
        ) + func.sin(
            func.radians(latitude)
        ) * func.sin(
            func.radians(SchoolModel.latitude)
        )
        clamped = func.least(1.0, func.greatest(-1.0, cosine))
        return (EARTH_RADIUS_KM * func.acos(clamped)).label("distance")
