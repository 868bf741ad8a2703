"""Dependency Injection for FastAPI."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from schools.application.nearby import ListSchoolsQuery
from schools.application.nearby.ports import SchoolReader
from schools.application.registry import AddSchoolCommand
from schools.infrastructure.persistence_postgres import (
    SqlaSchoolCommandGateway,
    SqlaSchoolReader,
    SqlaTransactionManager,
)
from schools.setup.database import get_db_session, get_dialect_name

SessionDep = Annotated[AsyncSession, Depends(get_db_session)]


async def get_school_reader(
    session: SessionDep,
    dialect_name: Annotated[str, Depends(get_dialect_name)],
) -> SchoolReader:
    """School Reader를 주입합니다."""
    return SqlaSchoolReader(session, dialect_name=dialect_name)


async def get_list_schools_query(
    reader: Annotated[SchoolReader, Depends(get_school_reader)],
) -> ListSchoolsQuery:
    """ListSchoolsQuery를 주입합니다."""
    return ListSchoolsQuery(reader)


async def get_add_school_command(session: SessionDep) -> AddSchoolCommand:
    """AddSchoolCommand를 주입합니다."""
    return AddSchoolCommand(
        gateway=SqlaSchoolCommandGateway(session),
        transaction_manager=SqlaTransactionManager(session),
    )
