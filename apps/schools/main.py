"""Schools API - FastAPI application entry point.

- POST /addSchool: 학교 등록
- GET /listSchools: 기준 좌표로부터 거리순 학교 목록
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from schools.infrastructure.observability import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from schools.presentation.http.controllers import health_router, schools_router
from schools.presentation.http.errors import register_exception_handlers
from schools.setup.config import Settings, get_settings
from schools.setup.database import build_engine, build_session_factory
from schools.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리.

    커넥션 풀(엔진)은 여기서 한 번 생성되고 종료 시 정리됩니다.
    """
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.service_name} ({settings.environment})")

    engine = build_engine(settings)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    if settings.otel_enabled:
        setup_tracing(
            settings.service_name,
            endpoint=settings.otel_exporter_otlp_endpoint,
            environment=settings.environment,
        )
        instrument_sqlalchemy(engine)

    logger.info(f"Server is running on port {settings.port}")

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await engine.dispose()
    shutdown_tracing()


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Schools API",
        description="Register schools and list them by distance",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(schools_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "schools.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )
