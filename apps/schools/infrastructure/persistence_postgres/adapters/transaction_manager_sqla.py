"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from schools.application.common.exceptions import PersistenceError


class SqlaTransactionManager:
    """트랜잭션 관리자 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        """트랜잭션을 커밋합니다."""
        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc)) from exc

    async def rollback(self) -> None:
        """트랜잭션을 롤백합니다."""
        try:
            await self._session.rollback()
        except SQLAlchemyError as exc:
            raise PersistenceError(str(exc)) from exc
