"""School Distance DTO."""

from __future__ import annotations

from dataclasses import dataclass

from schools.domain.entities import School


@dataclass
class SchoolDistanceDTO:
    """거리 정보가 포함된 학교 응답 DTO."""

    id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance: float

    @classmethod
    def from_entity(cls, school: School, distance_km: float) -> "SchoolDistanceDTO":
        return cls(
            id=school.id,
            name=school.name,
            address=school.address,
            latitude=school.latitude,
            longitude=school.longitude,
            distance=distance_km,
        )
