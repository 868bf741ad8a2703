"""Value Objects."""

from schools.domain.value_objects.coordinates import Coordinates

__all__ = ["Coordinates"]
