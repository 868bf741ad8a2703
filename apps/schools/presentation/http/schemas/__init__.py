"""HTTP Schemas."""

from schools.presentation.http.schemas.school import (
    SchoolCreated,
    SchoolEntry,
    StoreErrorResponse,
    ValidationErrorResponse,
)

__all__ = ["SchoolCreated", "SchoolEntry", "StoreErrorResponse", "ValidationErrorResponse"]
