"""Domain Services."""

from schools.domain.services.distance import EARTH_RADIUS_KM, great_circle_km

__all__ = ["EARTH_RADIUS_KM", "great_circle_km"]
