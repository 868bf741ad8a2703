"""Nearby Schools Application Layer (Proximity Lister)."""

from schools.application.nearby.dto import SchoolDistanceDTO
from schools.application.nearby.ports import SchoolReader
from schools.application.nearby.queries import ListSchoolsQuery
from schools.application.nearby.validation import (
    PROXIMITY_MESSAGES,
    ProximityParams,
    parse_proximity_query,
    validate_proximity_query,
)

__all__ = [
    "SchoolDistanceDTO",
    "SchoolReader",
    "ListSchoolsQuery",
    "PROXIMITY_MESSAGES",
    "ProximityParams",
    "parse_proximity_query",
    "validate_proximity_query",
]
