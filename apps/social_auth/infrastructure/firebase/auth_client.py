"""Firebase Auth REST Client.

BackendAuthGateway 포트의 구현체입니다.
Identity Toolkit / Secure Token REST API를 사용하며,
현재 세션(SessionUser)과 세션 변경 리스너를 보유합니다.
"""

from __future__ import annotations

import dataclasses
import itertools
import logging
import threading
import time
from typing import TYPE_CHECKING, Any, Optional
from urllib.parse import urlencode

import httpx
from jose import JWTError, jwt

from apps.social_auth.application.common.exceptions import (
    AuthFailedError,
    NetworkError,
    UserNotFoundError,
)
from apps.social_auth.domain.value_objects import SessionUser

if TYPE_CHECKING:
    from apps.social_auth.application.common.ports import MainThreadDispatcher
    from apps.social_auth.application.session.ports import SessionChangeHandler
    from apps.social_auth.domain.value_objects import BackendSessionToken, IdentityAssertion

logger = logging.getLogger(__name__)

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1"
SECURE_TOKEN_URL = "https://securetoken.googleapis.com/v1"
IDP_REQUEST_URI = "http://localhost"
DEFAULT_EXPIRES_IN = 3600

# 백엔드가 세션을 무효화했음을 뜻하는 에러 코드
SESSION_INVALIDATING_ERRORS = frozenset(
    {
        "TOKEN_EXPIRED",
        "USER_DISABLED",
        "USER_NOT_FOUND",
        "INVALID_ID_TOKEN",
        "INVALID_REFRESH_TOKEN",
    }
)


class FirebaseAuthClient:
    """Firebase Auth 클라이언트.

    세션 변경 리스너는 등록 직후 현재 상태로 한 번, 이후 로그인/로그아웃/
    탈퇴/무효화 때마다 UI 스레드에서 호출됩니다.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient,
        api_key: str,
        dispatcher: "MainThreadDispatcher",
        emulator_host: str | None = None,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._dispatcher = dispatcher
        if emulator_host:
            self._identity_url = f"http://{emulator_host}/identitytoolkit.googleapis.com/v1"
            self._secure_token_url = f"http://{emulator_host}/securetoken.googleapis.com/v1"
        else:
            self._identity_url = IDENTITY_TOOLKIT_URL
            self._secure_token_url = SECURE_TOKEN_URL

        self._user: Optional[SessionUser] = None
        self._listeners: dict[int, SessionChangeHandler] = {}
        self._handles = itertools.count(1)
        self._lock = threading.Lock()

    # ============================================================
    # Session state
    # ============================================================

    def current_user(self) -> str | None:
        user = self._user
        return user.uid if user else None

    @property
    def id_token(self) -> str | None:
        """현재 세션의 ID 토큰 (callable 호출 인증용)."""
        user = self._user
        return user.id_token if user else None

    @property
    def session_user(self) -> SessionUser | None:
        return self._user

    def add_session_change_listener(self, handler: "SessionChangeHandler") -> int:
        with self._lock:
            handle = next(self._handles)
            self._listeners[handle] = handler
        self._dispatcher.dispatch(handler, self.current_user())
        return handle

    def remove_session_change_listener(self, handle: Any) -> None:
        with self._lock:
            self._listeners.pop(handle, None)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _set_user(self, user: SessionUser | None) -> None:
        with self._lock:
            self._user = user
            listeners = list(self._listeners.values())
        uid = user.uid if user else None
        for handler in listeners:
            self._dispatcher.dispatch(handler, uid)

    # ============================================================
    # Sign in / out
    # ============================================================

    async def sign_in_with_custom_token(self, token: "BackendSessionToken") -> str:
        body = await self._post_identity(
            "accounts:signInWithCustomToken",
            {"token": token.value, "returnSecureToken": True},
        )
        user = self._user_from_response(body, provider_id="custom")
        self._set_user(user)
        return user.uid

    async def sign_in_with_credential(self, assertion: "IdentityAssertion") -> str:
        post_body = {"id_token": assertion.id_token, "providerId": assertion.provider_id}
        if assertion.access_token:
            post_body["access_token"] = assertion.access_token
        if assertion.raw_nonce:
            post_body["nonce"] = assertion.raw_nonce

        body = await self._post_identity(
            "accounts:signInWithIdp",
            {
                "postBody": urlencode(post_body),
                "requestUri": IDP_REQUEST_URI,
                "returnIdpCredential": True,
                "returnSecureToken": True,
            },
        )
        user = self._user_from_response(
            body,
            provider_id=assertion.provider_id,
            # Apple은 최초 로그인 때만 이름을 준다
            display_name=assertion.full_name or body.get("displayName"),
        )
        self._set_user(user)
        return user.uid

    def sign_out(self) -> None:
        # 로컬 세션 정리만 수행 (서버 호출 없음)
        uid = self.current_user()
        self._set_user(None)
        logger.info("Session cleared", extra={"uid": uid})

    async def delete_current_user(self) -> None:
        user = self._require_user()
        await self._post_identity(
            "accounts:delete",
            {"idToken": user.id_token},
            session_bound=True,
        )
        self._set_user(None)

    async def refresh_session(self) -> str:
        """ID 토큰 갱신.

        Raises:
            UserNotFoundError: 로그인된 사용자 없음
            AuthFailedError: 백엔드가 갱신 거부 (무효화 코드면 세션도 비움)
            NetworkError: 전송 실패
        """
        user = self._require_user()
        body = await self._post(
            f"{self._secure_token_url}/token",
            data={"grant_type": "refresh_token", "refresh_token": user.refresh_token},
            session_bound=True,
        )
        id_token = body.get("id_token")
        refresh_token = body.get("refresh_token")
        if not id_token or not refresh_token:
            raise AuthFailedError("Token refresh response missing tokens", code="malformed_response")

        refreshed = dataclasses.replace(
            user,
            id_token=id_token,
            refresh_token=refresh_token,
            expires_at=_expires_at(body.get("expires_in")),
        )
        with self._lock:
            # 갱신 도중 로그아웃되었으면 되살리지 않음
            if self._user is not None and self._user.uid == user.uid:
                self._user = refreshed
        return id_token

    # ============================================================
    # HTTP
    # ============================================================

    async def _post_identity(
        self,
        endpoint: str,
        payload: dict[str, Any],
        *,
        session_bound: bool = False,
    ) -> dict[str, Any]:
        return await self._post(
            f"{self._identity_url}/{endpoint}",
            json=payload,
            session_bound=session_bound,
        )

    async def _post(
        self,
        url: str,
        *,
        json: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        session_bound: bool = False,
    ) -> dict[str, Any]:
        try:
            response = await self._client.post(
                url,
                params={"key": self._api_key},
                json=json,
                data=data,
            )
        except httpx.HTTPError as e:
            logger.warning("Auth request failed", extra={"endpoint": _endpoint(url), "error": repr(e)})
            raise NetworkError(f"Auth request failed: {e!r}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code >= 500:
            raise NetworkError(
                f"Auth backend unavailable (HTTP {response.status_code})",
                status=str(response.status_code),
            )

        if response.is_error:
            code = _error_code(body)
            logger.warning(
                "Auth backend rejected request",
                extra={"endpoint": _endpoint(url), "status_code": response.status_code, "code": code},
            )
            if session_bound and code in SESSION_INVALIDATING_ERRORS:
                logger.warning("Session invalidated by backend", extra={"code": code})
                self._set_user(None)
            raise AuthFailedError(f"Auth backend rejected request: {code}", code=code)

        if not isinstance(body, dict):
            raise AuthFailedError("Auth response is not a JSON object", code="malformed_response")
        return body

    def _require_user(self) -> SessionUser:
        user = self._user
        if user is None:
            raise UserNotFoundError()
        return user

    def _user_from_response(
        self,
        body: dict[str, Any],
        *,
        provider_id: str,
        display_name: str | None = None,
    ) -> SessionUser:
        id_token = body.get("idToken")
        refresh_token = body.get("refreshToken")
        if not id_token or not refresh_token:
            raise AuthFailedError("Sign-in response missing tokens", code="malformed_response")

        return SessionUser(
            uid=body.get("localId") or _uid_from_id_token(id_token),
            id_token=id_token,
            refresh_token=refresh_token,
            provider_id=provider_id,
            display_name=display_name,
            expires_at=_expires_at(body.get("expiresIn")),
        )


def _uid_from_id_token(id_token: str) -> str:
    try:
        claims = jwt.get_unverified_claims(id_token)
    except JWTError as e:
        raise AuthFailedError("Malformed ID token", code="malformed_response") from e
    uid = claims.get("user_id") or claims.get("sub")
    if not uid:
        raise AuthFailedError("ID token has no user id", code="malformed_response")
    return str(uid)


def _expires_at(expires_in: Any) -> int:
    try:
        seconds = int(expires_in)
    except (TypeError, ValueError):
        seconds = DEFAULT_EXPIRES_IN
    return int(time.time()) + seconds


def _error_code(body: Any) -> str:
    """{"error": {"message": "INVALID_CUSTOM_TOKEN : detail"}} → INVALID_CUSTOM_TOKEN

    Secure Token API는 {"error": {"message": ...}} 또는 {"error": "..."} 형태.
    """
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        message = str(error.get("message", ""))
    elif isinstance(error, str):
        message = error
    else:
        return "UNKNOWN"
    return message.split(" ", 1)[0].strip().upper() or "UNKNOWN"


def _endpoint(url: str) -> str:
    return url.rsplit("/", 1)[-1]
