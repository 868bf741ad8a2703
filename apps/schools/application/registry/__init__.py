"""School Registry Application Layer (Record Writer)."""

from schools.application.registry.commands import AddSchoolCommand
from schools.application.registry.dto import NewSchool
from schools.application.registry.ports import SchoolCommandGateway
from schools.application.registry.validation import (
    NEW_SCHOOL_MESSAGES,
    NewSchoolPayload,
    parse_new_school,
    validate_new_school,
)

__all__ = [
    "AddSchoolCommand",
    "NewSchool",
    "SchoolCommandGateway",
    "NEW_SCHOOL_MESSAGES",
    "NewSchoolPayload",
    "parse_new_school",
    "validate_new_school",
]
