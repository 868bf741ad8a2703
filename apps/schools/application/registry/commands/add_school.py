"""Add School Command.

학교 한 건을 검증 후 저장합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from schools.application.common.exceptions import PersistenceError, SchoolCreationFailedError
from schools.application.registry.dto import NewSchool
from schools.application.registry.validation import parse_new_school

if TYPE_CHECKING:
    from schools.application.common.ports import TransactionManager
    from schools.application.registry.ports import SchoolCommandGateway

logger = logging.getLogger(__name__)


class AddSchoolCommand:
    """학교 등록 유스케이스.

    Workflow:
        1. 필드 검증 (실패 시 저장소 접근 없음)
        2. INSERT 1회 (Port)
        3. 커밋, 실패 시 롤백 후 고정 메시지 예외
    """

    def __init__(
        self,
        gateway: "SchoolCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._gateway = gateway
        self._tx = transaction_manager

    async def execute(self, payload: Mapping[str, Any] | None) -> int:
        """학교를 등록하고 생성된 ID를 반환합니다.

        Args:
            payload: 요청 본문 (name, address, latitude, longitude)

        Returns:
            생성된 학교 ID

        Raises:
            SchoolValidationError: 필드 검증 실패
            SchoolCreationFailedError: 저장소 오류
        """
        school = NewSchool.from_payload(parse_new_school(payload))

        try:
            school_id = await self._gateway.add(school)
            await self._tx.commit()
        except PersistenceError as exc:
            logger.exception(
                "Database error while adding school",
                extra={"school_name": school.name},
            )
            await self._rollback()
            raise SchoolCreationFailedError() from exc

        logger.info("School added", extra={"school_id": school_id})
        return school_id

    async def _rollback(self) -> None:
        try:
            await self._tx.rollback()
        except PersistenceError:
            logger.warning("Rollback failed after insert error", exc_info=True)
