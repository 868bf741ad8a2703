"""Nearby DTOs."""

from schools.application.nearby.dto.school_distance import SchoolDistanceDTO

__all__ = ["SchoolDistanceDTO"]
