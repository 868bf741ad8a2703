"""School Entity."""

from __future__ import annotations

from dataclasses import dataclass

from schools.domain.value_objects import Coordinates


@dataclass(frozen=True)
class School:
    """저장된 학교 엔티티.

    생성 후 변경되지 않습니다.
    """

    id: int
    name: str
    address: str
    latitude: float
    longitude: float

    def coordinates(self) -> Coordinates:
        """좌표 Value Object를 반환합니다."""
        return Coordinates(latitude=self.latitude, longitude=self.longitude)
