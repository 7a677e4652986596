"""Auth Exceptions.

로그인 파이프라인의 모든 실패는 아래 종류 중 정확히 하나로 분류되며,
상위 계층은 하위 계층의 분류를 바꾸지 않고 그대로 전달합니다.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar

from apps.social_auth.application.common.exceptions.base import ApplicationError


class AuthErrorKind(str, Enum):
    """인증 에러 분류."""

    INVALID_CREDENTIAL = "invalid_credential"
    UNSUPPORTED_PROVIDER = "unsupported_provider"
    USER_NOT_FOUND = "user_not_found"
    PROVIDER_SDK_ERROR = "provider_sdk_error"
    NETWORK = "network"
    INVALID_RESPONSE = "invalid_response"
    MISSING_TOKEN = "missing_token"
    AUTH_FAILED = "auth_failed"


class AuthError(ApplicationError):
    """인증 에러 베이스 클래스."""

    kind: ClassVar[AuthErrorKind]
    user_message: ClassVar[str] = "로그인 중 문제가 발생했습니다."


class InvalidCredentialError(AuthError):
    """로그인에 필요한 인증 정보를 만들 수 없음.

    (예: Apple identityToken 없음, nonce 유실, 표시할 화면 없음)
    """

    kind = AuthErrorKind.INVALID_CREDENTIAL
    user_message = "인증 정보를 확인할 수 없습니다."

    def __init__(self, reason: str = "Invalid credential") -> None:
        super().__init__(reason)


class FailedToGetTokenError(InvalidCredentialError):
    """Kakao SDK가 accessToken을 돌려주지 않음."""

    def __init__(self, reason: str = "Failed to get Kakao access token") -> None:
        super().__init__(reason)


class UnsupportedProviderError(AuthError):
    """연결된 핸들러가 없는 프로바이더."""

    kind = AuthErrorKind.UNSUPPORTED_PROVIDER
    user_message = "아직 지원하지 않는 로그인 방식입니다."

    def __init__(self, reason: str = "Unsupported provider") -> None:
        super().__init__(reason)


class UserNotFoundError(AuthError):
    """로그인된 사용자가 없음 (예: 로그아웃 상태에서 탈퇴 시도)."""

    kind = AuthErrorKind.USER_NOT_FOUND
    user_message = "로그인된 사용자를 찾을 수 없습니다."

    def __init__(self, reason: str = "No authenticated user") -> None:
        super().__init__(reason)


class ProviderSDKError(AuthError):
    """프로바이더 SDK 고유 에러 (원본은 cause로 보존)."""

    kind = AuthErrorKind.PROVIDER_SDK_ERROR
    user_message = "소셜 로그인에 실패했습니다."

    def __init__(self, provider: str, cause: BaseException) -> None:
        self.provider = provider
        self.cause = cause
        super().__init__(f"Provider SDK error ({provider}): {cause}")


class NetworkError(AuthError):
    """전송 계층 실패 (구조화된 응답을 받기 전)."""

    kind = AuthErrorKind.NETWORK
    user_message = "네트워크 연결을 확인해 주세요."

    def __init__(self, reason: str = "Network error", *, status: str | None = None) -> None:
        self.status = status
        super().__init__(reason)


class InvalidResponseError(AuthError):
    """전송은 성공했으나 응답 형식이 올바르지 않음."""

    kind = AuthErrorKind.INVALID_RESPONSE

    def __init__(self, reason: str = "Invalid response") -> None:
        super().__init__(reason)


class MissingTokenError(AuthError):
    """응답은 올바르나 customToken 필드가 없거나 비어 있음."""

    kind = AuthErrorKind.MISSING_TOKEN

    def __init__(self, reason: str = "customToken missing in response") -> None:
        super().__init__(reason)


class AuthFailedError(AuthError):
    """백엔드 인증 계층이 로그인/로그아웃/탈퇴를 거부함."""

    kind = AuthErrorKind.AUTH_FAILED
    user_message = "인증에 실패했습니다."

    def __init__(self, reason: str = "Authentication failed", *, code: str | None = None) -> None:
        self.code = code
        super().__init__(reason)
