"""검증 관련 예외."""

from __future__ import annotations

from typing import TYPE_CHECKING

from schools.application.common.exceptions.base import ApplicationError

if TYPE_CHECKING:
    from schools.application.common.validation import FieldError


class SchoolValidationError(ApplicationError):
    """입력 필드 검증 실패.

    실패한 필드마다 FieldError 하나를 가집니다.
    """

    def __init__(self, errors: list["FieldError"]) -> None:
        self.errors = errors
        fields = ", ".join(e.path for e in errors)
        super().__init__(f"Validation failed: {fields}")
