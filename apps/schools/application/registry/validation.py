"""등록 요청 검증 스키마."""

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

NEW_SCHOOL_MESSAGES: dict[str, str] = {
    "name": "Name is required.",
    "address": "Address is required.",
    "latitude": "Valid latitude is required.",
    "longitude": "Valid longitude is required.",
}


class NewSchoolPayload(PayloadSchema):
    """POST /addSchool 본문 스키마."""

    name: str = Field(..., min_length=1, description="학교 이름")
    address: str = Field(..., min_length=1, description="주소")
    latitude: float = Field(..., ge=-90, le=90, description="위도")
    longitude: float = Field(..., ge=-180, le=180, description="경도")

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _numbers_only(cls, value: Any) -> Any:
        return coerce_number(value)


def validate_new_school(payload: Any) -> list[FieldError]:
    """POST 본문을 검증합니다."""
    return validate(payload, NewSchoolPayload, NEW_SCHOOL_MESSAGES, "body")


def parse_new_school(payload: Any) -> NewSchoolPayload:
    """검증을 통과한 본문을 반환합니다. 실패 시 SchoolValidationError."""
    return parse(payload, NewSchoolPayload, NEW_SCHOOL_MESSAGES, "body")
