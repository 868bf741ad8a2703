"""Application Exceptions."""

from schools.application.common.exceptions.base import ApplicationError
from schools.application.common.exceptions.persistence import (
    PersistenceError,
    SchoolCreationFailedError,
    SchoolRetrievalFailedError,
    StoreError,
)
from schools.application.common.exceptions.validation import SchoolValidationError

__all__ = [
    "ApplicationError",
    "PersistenceError",
    "SchoolCreationFailedError",
    "SchoolRetrievalFailedError",
    "SchoolValidationError",
    "StoreError",
]
