"""Provider SDK Ports.

모든 SDK 로그인은 콜백 기반입니다. 앱 전환(백그라운드/포그라운드) 중에도
콜백 소유권을 잃지 않도록 코루틴으로 감싸지 않습니다.
콜백은 (value, error) 중 하나만 채워서 호출됩니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Optional, Protocol, TypeVar

T = TypeVar("T")

SDKCompletion = Callable[[Optional[T], Optional[BaseException]], None]


# ============================================================
# Apple (AuthenticationServices)
# ============================================================


@dataclass(frozen=True)
class AppleIDRequest:
    """Apple ID 인증 요청."""

    nonce: str  # SHA-256 해시된 nonce
    requested_scopes: tuple[str, ...] = ("full_name", "email")


@dataclass(frozen=True)
class AppleIDCredential:
    """Apple ID 인증 결과."""

    user: str
    identity_token: bytes | None = None
    full_name: str | None = None
    email: str | None = None


class AppleSignInSDK(Protocol):
    """Sign in with Apple 인터페이스."""

    def perform_request(
        self,
        request: AppleIDRequest,
        presentation_context: Any,
        completion: SDKCompletion[AppleIDCredential],
    ) -> None:
        """인증 시트를 띄우고 결과를 completion으로 전달합니다."""
        ...


# ============================================================
# Google (GoogleSignIn)
# ============================================================


@dataclass(frozen=True)
class GoogleSignInResult:
    """Google 로그인 결과."""

    id_token: str | None
    access_token: str | None
    email: str | None = None


class GoogleSignInSDK(Protocol):
    """GoogleSignIn 인터페이스."""

    def sign_in(
        self,
        presenting: Any,
        completion: SDKCompletion[GoogleSignInResult],
    ) -> None:
        ...

    def handle_url(self, url: str) -> bool:
        ...


# ============================================================
# Kakao (KakaoSDKAuth / KakaoSDKUser)
# ============================================================


@dataclass(frozen=True)
class KakaoOAuthToken:
    """Kakao OAuth 토큰."""

    access_token: str | None
    refresh_token: str | None = None
    scopes: tuple[str, ...] = field(default_factory=tuple)


class KakaoSDK(Protocol):
    """Kakao SDK 인터페이스."""

    def init_sdk(self, app_key: str) -> None:
        ...

    def is_kakao_talk_login_available(self) -> bool:
        """카카오톡 앱 설치 여부."""
        ...

    def login_with_kakao_talk(self, completion: SDKCompletion[KakaoOAuthToken]) -> None:
        """카카오톡 앱으로 로그인."""
        ...

    def login_with_kakao_account(self, completion: SDKCompletion[KakaoOAuthToken]) -> None:
        """카카오 계정(웹)으로 로그인."""
        ...

    def is_kakao_talk_login_url(self, url: str) -> bool:
        ...

    def handle_open_url(self, url: str) -> bool:
        ...


# ============================================================
# Naver (NidThirdPartyLogin)
# ============================================================


class NaverLoginBehavior(str, Enum):
    """네이버 로그인 동작 방식."""

    APP = "app"
    IN_APP_BROWSER = "in_app_browser"
    APP_PREFERRED_WITH_IN_APP_BROWSER_FALLBACK = "app_preferred_with_in_app_browser_fallback"


@dataclass(frozen=True)
class NaverLoginResult:
    """네이버 로그인 결과 (accessToken 포함)."""

    access_token: str | None
    refresh_token: str | None = None
    raw: Any = None


class NaverSDK(Protocol):
    """Naver SDK 인터페이스."""

    def initialize(
        self,
        *,
        app_name: str,
        client_id: str,
        client_secret: str,
        url_scheme: str,
    ) -> None:
        ...

    def set_login_behavior(self, behavior: NaverLoginBehavior) -> None:
        ...

    def request_login(self, completion: SDKCompletion[NaverLoginResult]) -> None:
        ...

    def handle_url(self, url: str) -> bool:
        ...
