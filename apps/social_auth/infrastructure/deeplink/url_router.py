"""Open URL Router.

앱으로 들어온 활성화 URL을 프로바이더 URL 핸들러에 우선순위대로 전달합니다.
처음으로 URL을 처리한 핸들러에서 멈춥니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Protocol
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from apps.social_auth.application.acquisition.ports import (
        GoogleSignInSDK,
        KakaoSDK,
        NaverSDK,
    )

logger = logging.getLogger(__name__)


class URLHandler(Protocol):
    """URL 핸들러 인터페이스."""

    name: str

    def handle(self, url: str) -> bool:
        """URL을 처리했으면 True."""
        ...


class KakaoURLHandler:
    """카카오톡 로그인 복귀 URL 처리."""

    name = "kakao"

    def __init__(self, sdk: "KakaoSDK") -> None:
        self._sdk = sdk

    def handle(self, url: str) -> bool:
        if not self._sdk.is_kakao_talk_login_url(url):
            return False
        # 카카오 로그인 URL이면 SDK 결과와 무관하게 여기서 처리 종료
        self._sdk.handle_open_url(url)
        return True


class NaverURLHandler:
    """네이버 로그인 복귀 URL 처리."""

    name = "naver"

    def __init__(self, sdk: "NaverSDK") -> None:
        self._sdk = sdk

    def handle(self, url: str) -> bool:
        return bool(self._sdk.handle_url(url))


class GoogleURLHandler:
    """Google Sign-In 복귀 URL 처리."""

    name = "google"

    def __init__(self, sdk: "GoogleSignInSDK") -> None:
        self._sdk = sdk

    def handle(self, url: str) -> bool:
        return bool(self._sdk.handle_url(url))


class OpenURLRouter:
    """활성화 URL 라우터."""

    def __init__(self, handlers: Iterable[URLHandler]) -> None:
        self._handlers = list(handlers)

    @classmethod
    def for_sdks(
        cls,
        *,
        kakao: "KakaoSDK | None" = None,
        naver: "NaverSDK | None" = None,
        google: "GoogleSignInSDK | None" = None,
    ) -> "OpenURLRouter":
        """Kakao → Naver → Google 순서로 라우터 구성."""
        handlers: list[URLHandler] = []
        if kakao is not None:
            handlers.append(KakaoURLHandler(kakao))
        if naver is not None:
            handlers.append(NaverURLHandler(naver))
        if google is not None:
            handlers.append(GoogleURLHandler(google))
        return cls(handlers)

    @property
    def handler_names(self) -> list[str]:
        return [handler.name for handler in self._handlers]

    def route(self, url: str) -> bool:
        """URL을 처리할 핸들러를 찾습니다.

        Returns:
            처리한 핸들러가 있으면 True
        """
        parts = urlsplit(url)
        # 쿼리에 인증 코드가 실릴 수 있으므로 scheme/host만 기록
        target = {"scheme": parts.scheme, "host": parts.netloc}

        for handler in self._handlers:
            if handler.handle(url):
                logger.info("Incoming URL handled", extra={**target, "handler": handler.name})
                return True

        logger.warning("Unknown incoming URL", extra=target)
        return False
