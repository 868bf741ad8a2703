"""애플리케이션 예외 베이스 클래스."""


class ApplicationError(Exception):
    """Schools 애플리케이션 예외의 베이스 클래스.

    message 는 클라이언트 응답에 그대로 쓰일 수 있습니다.
    """

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)
