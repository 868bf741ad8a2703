"""Nearby Ports."""

from schools.application.nearby.ports.school_reader import SchoolReader

__all__ = ["SchoolReader"]
