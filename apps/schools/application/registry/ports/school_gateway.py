"""School Command Gateway Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from schools.application.registry.dto import NewSchool


class SchoolCommandGateway(ABC):
    """학교 등록 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def add(self, school: NewSchool) -> int:
        """학교를 저장하고 생성된 ID를 반환합니다.

        Raises:
            PersistenceError: 저장소 오류
        """
        ...
