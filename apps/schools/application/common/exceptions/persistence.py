"""저장소 관련 예외."""

from schools.application.common.exceptions.base import ApplicationError


class PersistenceError(ApplicationError):
    """저장소 어댑터가 던지는 예외.

    원인(SQLAlchemyError 등)은 __cause__ 로 연결됩니다.
    """

    def __init__(self, message: str = "Persistence operation failed") -> None:
        super().__init__(message)


class StoreError(ApplicationError):
    """클라이언트에 고정 메시지로 노출되는 저장소 실패."""


class SchoolCreationFailedError(StoreError):
    """학교 등록 실패."""

    def __init__(self) -> None:
        super().__init__("Failed to add school to the database.")


class SchoolRetrievalFailedError(StoreError):
    """학교 목록 조회 실패."""

    def __init__(self) -> None:
        super().__init__("Failed to retrieve schools.")
