"""Application Base Exception."""


class ApplicationError(Exception):
    """Application 계층 예외 베이스 클래스."""

    def __init__(self, message: str = "Application error") -> None:
        self.message = message
        super().__init__(message)
