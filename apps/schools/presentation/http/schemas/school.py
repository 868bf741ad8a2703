"""School HTTP Schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SchoolEntry(BaseModel):
    """거리 정보가 포함된 학교 응답 스키마."""

    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float

    model_config = ConfigDict(from_attributes=True)


class SchoolCreated(BaseModel):
    """학교 등록 응답 스키마."""

    message: str = "School added successfully!"
    school_id: int = Field(alias="schoolId")

    model_config = ConfigDict(populate_by_name=True)


class FieldErrorEntry(BaseModel):
    type: str = "field"
    value: Any = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    """400 응답 스키마."""

    errors: list[FieldErrorEntry]


class StoreErrorResponse(BaseModel):
    """500 응답 스키마."""

    error: str
