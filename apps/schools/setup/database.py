"""Database Setup.

엔진(커넥션 풀)은 lifespan 에서 한 번 생성해 app.state 에 보관하고,
요청마다 세션을 주입합니다.
"""

from __future__ import annotations

from typing import Any, AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from schools.setup.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """설정으로부터 비동기 엔진을 생성합니다.

    SQLite 는 pool_size/max_overflow 를 받지 않으므로 제외합니다.
    """
    kwargs: dict[str, Any] = {"echo": settings.db_echo}
    if not settings.database_url.startswith("sqlite"):
        kwargs.update(pool_size=10, max_overflow=20, pool_pre_ping=True)
    return create_async_engine(settings.database_url, **kwargs)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """세션 팩토리를 생성합니다."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """DB 세션을 반환합니다."""
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


def get_dialect_name(request: Request) -> str:
    """현재 엔진의 dialect 이름을 반환합니다."""
    engine: AsyncEngine = request.app.state.engine
    return engine.dialect.name
