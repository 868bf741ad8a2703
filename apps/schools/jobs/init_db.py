"""Initialize database schema for the schools service."""

from __future__ import annotations

import asyncio
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from schools.infrastructure.persistence_postgres.models import Base
from schools.setup.config import get_settings
from schools.setup.database import build_engine
from schools.setup.logging import setup_logging

logger = logging.getLogger(__name__)


async def create_schema(engine: AsyncEngine) -> None:
    """schools 테이블을 생성합니다 (이미 있으면 건너뜀)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def init_db() -> int:
    """Create tables for the configured database."""
    settings = get_settings()
    url = settings.database_url
    logger.info(f"Connecting to database: {url.split('@')[1] if '@' in url else 'database'}")

    engine = build_engine(settings)
    try:
        await create_schema(engine)
    except SQLAlchemyError:
        logger.exception("Error initializing database")
        return 1
    finally:
        await engine.dispose()

    logger.info("Database initialization completed (tables: schools)")
    return 0


def main() -> None:
    """Entry point for database initialization."""
    setup_logging(get_settings().log_level)
    sys.exit(asyncio.run(init_db()))


if __name__ == "__main__":
    main()
