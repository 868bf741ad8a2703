"""OpenTelemetry Tracing - Schools Service.

otel_enabled 설정이 꺼져 있거나 패키지가 없으면 아무 것도 하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

_tracer_provider = None


def setup_tracing(service_name: str, endpoint: str, environment: str = "development") -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        endpoint: OTLP gRPC 수집기 주소
        environment: 배포 환경

    Returns:
        설정 성공 여부
    """
    global _tracer_provider  # noqa: PLW0603

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False

    resource = Resource.create(
        {
            "service.name": service_name,
            "deployment.environment": environment,
        }
    )
    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(endpoint=endpoint, insecure=True)
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(
        "OpenTelemetry tracing configured",
        extra={"service": service_name, "endpoint": endpoint},
    )
    return True


def instrument_fastapi(app: "FastAPI") -> None:
    """FastAPI 자동 계측."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    except ImportError:
        logger.warning("FastAPIInstrumentor not available")
        return

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
    logger.info("FastAPI instrumentation enabled")


def instrument_sqlalchemy(engine: "AsyncEngine") -> None:
    """SQLAlchemy 자동 계측 (INSERT/SELECT span)."""
    try:
        from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
    except ImportError:
        logger.warning("SQLAlchemyInstrumentor not available")
        return

    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    logger.info("SQLAlchemy instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료 (대기 중인 span flush)."""
    global _tracer_provider  # noqa: PLW0603

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
