"""Auth Outcome.

로그인 시도 1회의 결과입니다. 모든 시도는 정확히 하나의 AuthOutcome으로 끝납니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from apps.social_auth.application.common.exceptions.auth import AuthError, AuthErrorKind


class OutcomeStatus(Enum):
    """로그인 시도 결과 상태."""

    SUCCESS = auto()
    FAILURE = auto()


@dataclass(frozen=True)
class AuthOutcome:
    """로그인 시도 결과.

    성공 시 세션 상태는 세션 변경 알림으로만 전달되므로 uid를 담지 않습니다.
    """

    status: OutcomeStatus
    error: AuthError | None = None

    @property
    def is_success(self) -> bool:
        """성공 여부."""
        return self.status == OutcomeStatus.SUCCESS

    @property
    def kind(self) -> AuthErrorKind | None:
        """실패 종류 (성공이면 None)."""
        return self.error.kind if self.error is not None else None

    @classmethod
    def success(cls) -> AuthOutcome:
        """성공 결과 생성."""
        return cls(status=OutcomeStatus.SUCCESS)

    @classmethod
    def failure(cls, error: AuthError) -> AuthOutcome:
        """실패 결과 생성."""
        return cls(status=OutcomeStatus.FAILURE, error=error)
