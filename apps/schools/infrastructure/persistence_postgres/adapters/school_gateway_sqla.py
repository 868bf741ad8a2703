"""SQLAlchemy implementation of the school command gateway."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schools.application.common.exceptions import PersistenceError
from schools.application.registry.dto import NewSchool
from schools.application.registry.ports import SchoolCommandGateway
from schools.infrastructure.persistence_postgres.models import SchoolModel


class SqlaSchoolCommandGateway(SchoolCommandGateway):
    """학교 등록 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, school: NewSchool) -> int:
        """INSERT 후 생성된 ID를 반환합니다 (커밋은 TransactionManager)."""
        model = SchoolModel(
            name=school.name,
            address=school.address,
            latitude=school.latitude,
            longitude=school.longitude,
        )
        try:
            self._session.add(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc)) from exc
        return int(model.id)
