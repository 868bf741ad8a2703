"""Domain Entities."""

from schools.domain.entities.school import School

__all__ = ["School"]
