"""근접 조회 요청 검증 스키마."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from schools.application.common.validation import (
    FieldError,
    PayloadSchema,
    coerce_number,
    parse,
    validate,
)

PROXIMITY_MESSAGES: dict[str, str] = {
    "lat": "Valid user latitude (lat) is required.",
    "lon": "Valid user longitude (lon) is required.",
}


class ProximityParams(PayloadSchema):
    """GET /listSchools 쿼리 스키마."""

    lat: float = Field(..., ge=-90, le=90, description="사용자 위도")
    lon: float = Field(..., ge=-180, le=180, description="사용자 경도")

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _numbers_only(cls, value: Any) -> Any:
        return coerce_number(value)


def validate_proximity_query(params: Any) -> list[FieldError]:
    """GET 쿼리 파라미터를 검증합니다."""
    return validate(params, ProximityParams, PROXIMITY_MESSAGES, "query")


def parse_proximity_query(params: Any) -> ProximityParams:
    return parse(params, ProximityParams, PROXIMITY_MESSAGES, "query")
