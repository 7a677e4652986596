"""Naver Credential Acquirer.

네이버 로그인은 네이버 앱 또는 인앱 브라우저로 전환되는 UI 흐름이므로
SDK의 콜백 API를 그대로 사용합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from apps.social_auth.application.acquisition.ports import NaverLoginBehavior
from apps.social_auth.application.acquisition.services.base import (
    AcquireCompletion,
    ProviderCredentialAcquirer,
)
from apps.social_auth.application.common.exceptions import InvalidCredentialError
from apps.social_auth.domain.enums import SocialProvider
from apps.social_auth.domain.value_objects import AccessTokenCredential

if TYPE_CHECKING:
    from apps.social_auth.application.acquisition.ports import NaverLoginResult, NaverSDK
    from apps.social_auth.application.common.ports import MainThreadDispatcher

logger = logging.getLogger(__name__)


class NaverCredentialAcquirer(ProviderCredentialAcquirer):
    """Naver 인증 정보 획득."""

    provider = SocialProvider.NAVER
    login_behavior = NaverLoginBehavior.APP_PREFERRED_WITH_IN_APP_BROWSER_FALLBACK

    def __init__(self, *, sdk: "NaverSDK", dispatcher: "MainThreadDispatcher") -> None:
        super().__init__(dispatcher=dispatcher)
        self._sdk = sdk

    def _start(self, presentation_context: Any, completion: AcquireCompletion) -> None:
        # 네이버 앱 우선 → 없으면 인앱 브라우저
        self._sdk.set_login_behavior(self.login_behavior)
        logger.info("Naver login started", extra={"behavior": self.login_behavior.value})

        def on_complete(
            result: "NaverLoginResult | None",
            error: BaseException | None,
        ) -> None:
            if error is not None:
                self._fail(completion, self._sdk_error(error))
                return
            if result is None or not result.access_token:
                self._fail(completion, InvalidCredentialError("Naver access token missing"))
                return
            self._succeed(
                completion,
                AccessTokenCredential(
                    provider=self.provider,
                    access_token=result.access_token,
                    raw_result=result,
                ),
            )

        self._sdk.request_login(on_complete)
