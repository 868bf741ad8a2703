"""Test fixtures for schools tests."""

from __future__ import annotations

from typing import AsyncIterator
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from schools.domain.entities import School
from schools.jobs.init_db import create_schema
from schools.setup.config import Settings
from schools.setup.database import build_engine, build_session_factory


@pytest.fixture
def mock_school_reader() -> AsyncMock:
    """SchoolReader mock."""
    reader = AsyncMock()
    reader.list_by_distance = AsyncMock(return_value=[])
    return reader


@pytest.fixture
def mock_school_gateway() -> AsyncMock:
    """SchoolCommandGateway mock."""
    gateway = AsyncMock()
    gateway.add = AsyncMock(return_value=1)
    return gateway


@pytest.fixture
def mock_transaction_manager() -> AsyncMock:
    """TransactionManager mock."""
    tx = AsyncMock()
    tx.commit = AsyncMock()
    tx.rollback = AsyncMock()
    return tx


@pytest.fixture
def valid_payload() -> dict:
    """유효한 등록 요청 본문."""
    return {
        "name": "Springfield Elementary",
        "address": "19 Plympton St, Springfield",
        "latitude": 39.7817,
        "longitude": -89.6501,
    }


@pytest.fixture
def sample_school() -> School:
    """테스트용 School."""
    return School(
        id=1,
        name="Springfield Elementary",
        address="19 Plympton St, Springfield",
        latitude=39.7817,
        longitude=-89.6501,
    )


@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    """임시 SQLite 파일을 사용하는 설정."""
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'schools.db'}")


@pytest.fixture
async def sqlite_engine(sqlite_settings: Settings) -> AsyncIterator[AsyncEngine]:
    """스키마가 생성된 SQLite 엔진."""
    engine = build_engine(sqlite_settings)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """SQLite 세션 팩토리."""
    return build_session_factory(sqlite_engine)
