"""Observability - OpenTelemetry Tracing."""

from schools.infrastructure.observability.tracing import (
    instrument_fastapi,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    "setup_tracing",
    "instrument_fastapi",
    "instrument_sqlalchemy",
    "shutdown_tracing",
]
