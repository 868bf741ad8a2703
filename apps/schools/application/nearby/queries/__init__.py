"""Nearby Queries."""

from schools.application.nearby.queries.list_schools import ListSchoolsQuery

__all__ = ["ListSchoolsQuery"]
