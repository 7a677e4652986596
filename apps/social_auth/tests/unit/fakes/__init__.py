"""Test Fakes.

프로바이더 SDK, UI 스레드, 백엔드 세션의 테스트용 가짜 구현.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Coroutine, Optional

from jose import jwt

from apps.social_auth.application.acquisition.ports import (
    AppleIDCredential,
    AppleIDRequest,
    GoogleSignInResult,
    KakaoOAuthToken,
    NaverLoginBehavior,
    NaverLoginResult,
)


# ============================================================
# Dispatcher
# ============================================================


class InlineDispatcher:
    """모든 작업을 즉시 실행하는 디스패처 (테스트 스레드 = UI 스레드)."""

    def __init__(self) -> None:
        self.tasks: list[asyncio.Future[Any]] = []
        self.dispatched = 0

    def is_main_thread(self) -> bool:
        return True

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        self.dispatched += 1
        callback(*args)

    def run_on_main(self, callback: Callable[..., Any], *args: Any) -> None:
        callback(*args)

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Future[Any]:
        task = asyncio.ensure_future(coro)
        self.tasks.append(task)
        return task

    async def drain(self) -> None:
        """spawn 된 작업이 모두 끝날 때까지 대기."""
        while any(not task.done() for task in self.tasks):
            await asyncio.gather(*self.tasks, return_exceptions=True)


# ============================================================
# Provider SDKs
# ============================================================


class FakeAppleSDK:
    def __init__(self) -> None:
        self.requests: list[AppleIDRequest] = []
        self.completions: list[Callable[..., None]] = []

    def perform_request(self, request, presentation_context, completion) -> None:
        self.requests.append(request)
        self.completions.append(completion)

    def complete(
        self,
        credential: Optional[AppleIDCredential] = None,
        error: Optional[BaseException] = None,
        *,
        index: int = -1,
    ) -> None:
        self.completions[index](credential, error)

    def complete_with_nonce(
        self,
        nonce: str,
        *,
        index: int = -1,
        full_name: str | None = None,
    ) -> None:
        """주어진 nonce 클레임을 가진 identity token으로 응답."""
        token = make_jwt({"sub": "apple-user", "nonce": nonce})
        self.complete(
            AppleIDCredential(
                user="apple-user",
                identity_token=token.encode("utf-8"),
                full_name=full_name,
                email=None,
            ),
            index=index,
        )

    def complete_matching(self, *, index: int = -1, full_name: str | None = None) -> None:
        """요청의 nonce 해시를 그대로 담아 응답."""
        self.complete_with_nonce(self.requests[index].nonce, index=index, full_name=full_name)


class FakeGoogleSDK:
    def __init__(self) -> None:
        self.completions: list[Callable[..., None]] = []
        self.handled_urls: list[str] = []
        self.claims_urls = False

    def sign_in(self, presenting, completion) -> None:
        self.completions.append(completion)

    def complete(
        self,
        result: Optional[GoogleSignInResult] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.completions[-1](result, error)

    def handle_url(self, url: str) -> bool:
        self.handled_urls.append(url)
        return self.claims_urls


class FakeKakaoSDK:
    def __init__(self, *, talk_available: bool = False) -> None:
        self.talk_available = talk_available
        self.app_key: str | None = None
        self.routes: list[str] = []
        self.completions: list[Callable[..., None]] = []
        self.opened_urls: list[str] = []

    def init_sdk(self, app_key: str) -> None:
        self.app_key = app_key

    def is_kakao_talk_login_available(self) -> bool:
        return self.talk_available

    def login_with_kakao_talk(self, completion) -> None:
        self.routes.append("kakao_talk")
        self.completions.append(completion)

    def login_with_kakao_account(self, completion) -> None:
        self.routes.append("kakao_account")
        self.completions.append(completion)

    def complete(
        self,
        access_token: Optional[str] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        token = None
        if access_token is not None:
            token = KakaoOAuthToken(access_token=access_token, refresh_token="refresh")
        self.completions[-1](token, error)

    def is_kakao_talk_login_url(self, url: str) -> bool:
        return url.startswith("kakao")

    def handle_open_url(self, url: str) -> bool:
        self.opened_urls.append(url)
        return True


class FakeNaverSDK:
    def __init__(self) -> None:
        self.config: dict[str, str] | None = None
        self.behaviors: list[NaverLoginBehavior] = []
        self.completions: list[Callable[..., None]] = []
        self.handled_urls: list[str] = []
        self.claims_urls = False

    def initialize(
        self,
        *,
        app_name: str,
        client_id: str,
        client_secret: str,
        url_scheme: str,
    ) -> None:
        self.config = {
            "app_name": app_name,
            "client_id": client_id,
            "client_secret": client_secret,
            "url_scheme": url_scheme,
        }

    def set_login_behavior(self, behavior: NaverLoginBehavior) -> None:
        self.behaviors.append(behavior)

    def request_login(self, completion) -> None:
        self.completions.append(completion)

    def complete(
        self,
        access_token: Optional[str] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        result = NaverLoginResult(access_token=access_token) if error is None else None
        self.completions[-1](result, error)

    def handle_url(self, url: str) -> bool:
        self.handled_urls.append(url)
        return self.claims_urls


class Surface:
    """로그인 UI를 띄울 수 있는 화면."""

    def __init__(self) -> None:
        self.presented: list[Any] = []

    def presentation_anchor(self) -> Any:
        return self

    def present(self, view: Any) -> None:
        self.presented.append(view)


class Anchor:
    """표시 기준만 제공하는 컨텍스트 (present 불가)."""

    def presentation_anchor(self) -> Any:
        return self


# ============================================================
# Backend
# ============================================================


class FakeBackendAuthGateway:
    """메모리 기반 백엔드 세션 (리스너는 동기 호출)."""

    def __init__(self) -> None:
        self.uid: str | None = None
        self.listeners: dict[int, Callable[[Optional[str]], None]] = {}
        self.custom_tokens: list[str] = []
        self.assertions: list[Any] = []
        self.delete_calls = 0
        self._next_handle = 0

    async def sign_in_with_custom_token(self, token) -> str:
        self.custom_tokens.append(token.value)
        self._set(f"uid-{token.value}")
        return self.uid

    async def sign_in_with_credential(self, assertion) -> str:
        self.assertions.append(assertion)
        await asyncio.sleep(0)
        self._set(f"uid-{assertion.provider.value}-{len(self.assertions)}")
        return self.uid

    def sign_out(self) -> None:
        self._set(None)

    async def delete_current_user(self) -> None:
        self.delete_calls += 1
        self._set(None)

    async def refresh_session(self) -> str:
        return "refreshed"

    def add_session_change_listener(self, handler) -> int:
        self._next_handle += 1
        self.listeners[self._next_handle] = handler
        handler(self.uid)
        return self._next_handle

    def remove_session_change_listener(self, handle) -> None:
        self.listeners.pop(handle, None)

    def current_user(self) -> str | None:
        return self.uid

    def _set(self, uid: str | None) -> None:
        self.uid = uid
        for handler in list(self.listeners.values()):
            handler(uid)


# ============================================================
# Helpers
# ============================================================


def make_jwt(claims: dict[str, Any]) -> str:
    """서명 검증 없이 클레임만 읽히는 테스트용 JWT."""
    return jwt.encode(claims, "test-secret", algorithm="HS256")


SETTINGS_VALUES = {
    "firebase_api_key": "api-key",
    "firebase_project_id": "pulseboard",
    "kakao_native_app_key": "kakao-key",
    "naver_app_name": "PulseBoard",
    "naver_client_id": "naver-id",
    "naver_client_secret": "naver-secret",
    "naver_url_scheme": "pulseboardnaver",
}
