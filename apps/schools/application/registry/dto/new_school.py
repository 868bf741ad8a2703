"""New School DTO."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from schools.application.registry.validation import NewSchoolPayload


@dataclass(frozen=True)
class NewSchool:
    """등록 요청 DTO (검증 완료)."""

    name: str
    address: str
    latitude: float
    longitude: float

    @classmethod
    def from_payload(cls, payload: "NewSchoolPayload") -> "NewSchool":
        """검증된 본문 스키마에서 DTO 를 만듭니다."""
        return cls(
            name=payload.name,
            address=payload.address,
            latitude=payload.latitude,
            longitude=payload.longitude,
        )
