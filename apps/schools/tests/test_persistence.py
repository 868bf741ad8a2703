"""SQLAlchemy adapter 통합 테스트 (SQLite)."""

from __future__ import annotations

import asyncio
import math
from typing import AsyncIterator
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import event, func, select
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from schools.application.common.exceptions import PersistenceError, SchoolValidationError
from schools.application.registry import AddSchoolCommand, NewSchool
from schools.domain.services import great_circle_km
from schools.domain.value_objects import Coordinates
from schools.infrastructure.persistence_postgres import (
    SchoolModel,
    SqlaSchoolCommandGateway,
    SqlaSchoolReader,
    SqlaTransactionManager,
)
from schools.jobs.init_db import create_schema
from schools.setup.config import Settings
from schools.setup.database import build_engine, build_session_factory

pytestmark = pytest.mark.asyncio


async def _add(factory: async_sessionmaker[AsyncSession], school: NewSchool) -> int:
    async with factory() as session:
        command = AddSchoolCommand(
            SqlaSchoolCommandGateway(session), SqlaTransactionManager(session)
        )
        return await command.execute(
            {
                "name": school.name,
                "address": school.address,
                "latitude": school.latitude,
                "longitude": school.longitude,
            }
        )


async def _count(factory: async_sessionmaker[AsyncSession]) -> int:
    async with factory() as session:
        result = await session.execute(select(func.count()).select_from(SchoolModel))
        return int(result.scalar_one())


async def _list(factory: async_sessionmaker[AsyncSession], origin: Coordinates):
    async with factory() as session:
        return await SqlaSchoolReader(session, dialect_name="sqlite").list_by_distance(origin)


def _register_math_functions(dbapi_connection, _connection_record) -> None:
    """PostgreSQL 거리 식에 필요한 함수를 SQLite 연결에 등록합니다."""
    for name in ("radians", "cos", "sin", "acos"):
        dbapi_connection.create_function(name, 1, getattr(math, name))
    dbapi_connection.create_function("least", 2, min)
    dbapi_connection.create_function("greatest", 2, max)


@pytest.fixture
async def sql_distance_factory(
    sqlite_settings: Settings,
) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """SQL 거리 식을 실행할 수 있는 SQLite 세션 팩토리."""
    engine = build_engine(sqlite_settings)
    event.listen(engine.sync_engine, "connect", _register_math_functions)
    await create_schema(engine)
    yield build_session_factory(engine)
    await engine.dispose()


class TestSqlaSchoolCommandGateway:
    """등록 게이트웨이 테스트."""

    async def test_add_returns_positive_distinct_ids(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        first = await _add(session_factory, NewSchool("A", "a st", 0.0, 0.0))
        second = await _add(session_factory, NewSchool("B", "b st", 0.0, 1.0))

        assert first > 0
        assert second > 0
        assert first != second
        assert await _count(session_factory) == 2

    async def test_flush_error_is_wrapped(self) -> None:
        session = AsyncMock()
        session.add = lambda model: None
        session.flush.side_effect = OperationalError("INSERT", {}, Exception("db down"))

        gateway = SqlaSchoolCommandGateway(session)
        with pytest.raises(PersistenceError):
            await gateway.add(NewSchool("A", "a st", 0.0, 0.0))

    async def test_invalid_payload_persists_nothing(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        await _add(session_factory, NewSchool("A", "a st", 0.0, 0.0))
        before = await _count(session_factory)

        async with session_factory() as session:
            command = AddSchoolCommand(
                SqlaSchoolCommandGateway(session), SqlaTransactionManager(session)
            )
            with pytest.raises(SchoolValidationError):
                await command.execute({"name": "B", "address": "b st", "latitude": 200})

        assert await _count(session_factory) == before

    async def test_concurrent_inserts_get_distinct_ids(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """세션별 동시 등록 N 건은 저장소가 발급한 서로 다른 ID N 개."""
        schools = [NewSchool(f"School {i}", f"{i} Road", float(i), float(-i)) for i in range(10)]

        ids = await asyncio.gather(*(_add(session_factory, school) for school in schools))

        assert len(set(ids)) == len(schools)
        assert all(school_id > 0 for school_id in ids)
        assert await _count(session_factory) == len(schools)


class TestSqlaSchoolReader:
    """거리순 조회 테스트."""

    async def test_empty_store(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        assert await _list(session_factory, Coordinates(0, 0)) == []

    async def test_orders_by_distance(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """A(0,0), B(0,1) 에서 (0,0) 기준이면 A 가 먼저."""
        b_id = await _add(session_factory, NewSchool("B", "b st", 0.0, 1.0))
        a_id = await _add(session_factory, NewSchool("A", "a st", 0.0, 0.0))

        rows = await _list(session_factory, Coordinates(0, 0))

        assert [school.id for school, _ in rows] == [a_id, b_id]
        assert rows[0][1] == pytest.approx(0.0, abs=1e-6)
        assert rows[1][1] > 0

    async def test_identical_coordinates_distance_is_zero(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        await _add(session_factory, NewSchool("Seoul", "Jung-gu", 37.5665, 126.978))

        rows = await _list(session_factory, Coordinates(37.5665, 126.978))

        assert rows[0][1] == pytest.approx(0.0, abs=1e-3)

    async def test_round_trip_preserves_fields(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        school_id = await _add(
            session_factory, NewSchool("Lycée Henri-IV", "23 Rue Clovis, Paris", 48.8462, 2.3477)
        )

        rows = await _list(session_factory, Coordinates(51.5074, -0.1278))

        school, distance = rows[0]
        assert school.id == school_id
        assert school.name == "Lycée Henri-IV"
        assert school.address == "23 Rue Clovis, Paris"
        assert school.latitude == 48.8462
        assert school.longitude == 2.3477
        assert distance >= 0
        assert distance == pytest.approx(343, abs=5)

    async def test_read_error_is_wrapped(self) -> None:
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT", {}, Exception("db down"))

        reader = SqlaSchoolReader(session, dialect_name="postgresql")
        with pytest.raises(PersistenceError):
            await reader.list_by_distance(Coordinates(0, 0))


class TestDistanceExpression:
    """SQL 거리 표현식 테스트."""

    def test_postgres_expression_clamps_acos_argument(self) -> None:
        expr = SqlaSchoolReader.distance_expr(10.0, 20.0)
        sql = str(select(expr).compile(dialect=postgresql.dialect()))

        assert "acos(least(" in sql
        assert "greatest(" in sql
        assert "radians(schools.latitude)" in sql
        assert "radians(schools.longitude)" in sql
        assert "AS distance" in sql

    def test_dialect_selection(self) -> None:
        session = AsyncMock()
        assert SqlaSchoolReader(session, dialect_name="postgresql")._sql_distance is True
        assert SqlaSchoolReader(session, dialect_name="sqlite")._sql_distance is False


class TestSqlDistanceQuery:
    """SQL 거리 식 경로 (_list_sql) 실행 테스트."""

    @staticmethod
    async def _list_sql(factory: async_sessionmaker[AsyncSession], origin: Coordinates):
        async with factory() as session:
            reader = SqlaSchoolReader(session, dialect_name="postgresql")
            return await reader.list_by_distance(origin)

    async def test_orders_by_distance(
        self, sql_distance_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        b_id = await _add(sql_distance_factory, NewSchool("B", "b st", 0.0, 1.0))
        a_id = await _add(sql_distance_factory, NewSchool("A", "a st", 0.0, 0.0))

        rows = await self._list_sql(sql_distance_factory, Coordinates(0, 0))

        assert [school.id for school, _ in rows] == [a_id, b_id]
        assert rows[0][1] == pytest.approx(0.0, abs=1e-6)
        assert rows[1][1] == pytest.approx(111.19, abs=0.01)

    async def test_identical_coordinates_distance_is_zero(
        self, sql_distance_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """acos 인자 clamp 로 같은 좌표는 오류 없이 0."""
        for _ in range(3):
            await _add(sql_distance_factory, NewSchool("Seoul", "Jung-gu", 37.5665, 126.978))

        rows = await self._list_sql(sql_distance_factory, Coordinates(37.5665, 126.978))

        assert len(rows) == 3
        assert all(distance == pytest.approx(0.0, abs=1e-3) for _, distance in rows)
        assert [school.id for school, _ in rows] == sorted(school.id for school, _ in rows)

    async def test_matches_python_distance(
        self, sql_distance_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        await _add(sql_distance_factory, NewSchool("Lycée", "Paris", 48.8462, 2.3477))
        origin = Coordinates(51.5074, -0.1278)

        [(school, distance)] = await self._list_sql(sql_distance_factory, origin)

        assert isinstance(distance, float)
        assert school.name == "Lycée"
        assert distance == pytest.approx(great_circle_km(origin, school.coordinates()))
