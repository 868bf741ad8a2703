"""Field Validation."""

from schools.application.common.validation.rules import (
    FieldError,
    PayloadSchema,
    coerce_number,
    field_errors,
    parse,
    validate,
)

__all__ = [
    "FieldError",
    "PayloadSchema",
    "coerce_number",
    "field_errors",
    "parse",
    "validate",
]
