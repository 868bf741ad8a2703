"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from schools.application.common.exceptions import (
    ApplicationError,
    SchoolValidationError,
    StoreError,
)


def request_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """FastAPI 검증 오류를 FieldError 와 같은 형태로 변환합니다."""
    entries: list[dict[str, Any]] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        location = loc[0] if loc else "body"
        entries.append(
            {
                "type": "field",
                "value": error.get("input"),
                "msg": error.get("msg", "Invalid value"),
                "path": ".".join(loc[1:]),
                "location": location,
            }
        )
    return entries


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(SchoolValidationError)
    async def school_validation_handler(request: Request, exc: SchoolValidationError):
        return JSONResponse(
            status_code=400,
            content=jsonable_encoder({"errors": [e.to_dict() for e in exc.errors]}),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content=jsonable_encoder({"errors": request_validation_errors(exc)}),
        )

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
