"""Schools Domain Layer."""

from schools.domain.entities import School
from schools.domain.value_objects import Coordinates

__all__ = ["School", "Coordinates"]
