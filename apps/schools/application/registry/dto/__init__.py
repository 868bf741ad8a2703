"""Registry DTOs."""

from schools.application.registry.dto.new_school import NewSchool

__all__ = ["NewSchool"]
