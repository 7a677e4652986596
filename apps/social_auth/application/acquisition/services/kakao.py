"""Kakao Credential Acquirer.

책임:
    1. 카카오톡 설치 여부 판단
    2. 카카오톡 / 카카오계정 로그인 분기
    3. 로그인 성공 시 accessToken 전달

서버 통신(Custom Token)은 여기서 다루지 않습니다.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Any

from apps.social_auth.application.acquisition.services.base import (
    AcquireCompletion,
    ProviderCredentialAcquirer,
)
from apps.social_auth.application.common.exceptions import FailedToGetTokenError
from apps.social_auth.domain.enums import SocialProvider
from apps.social_auth.domain.value_objects import AccessTokenCredential

if TYPE_CHECKING:
    from apps.social_auth.application.acquisition.ports import KakaoOAuthToken, KakaoSDK
    from apps.social_auth.application.common.ports import MainThreadDispatcher

logger = logging.getLogger(__name__)


class KakaoCredentialAcquirer(ProviderCredentialAcquirer):
    """Kakao 인증 정보 획득 (카카오톡 앱 → 카카오계정 웹 fallback)."""

    provider = SocialProvider.KAKAO

    def __init__(self, *, sdk: "KakaoSDK", dispatcher: "MainThreadDispatcher") -> None:
        super().__init__(dispatcher=dispatcher)
        self._sdk = sdk

    def _start(self, presentation_context: Any, completion: AcquireCompletion) -> None:
        if self._sdk.is_kakao_talk_login_available():
            logger.info("Kakao login started", extra={"route": "kakao_talk"})
            self._sdk.login_with_kakao_talk(partial(self._on_token, completion))
        else:
            logger.info("Kakao login started", extra={"route": "kakao_account"})
            self._sdk.login_with_kakao_account(partial(self._on_token, completion))

    def _on_token(
        self,
        completion: AcquireCompletion,
        token: "KakaoOAuthToken | None",
        error: BaseException | None,
    ) -> None:
        if error is not None:
            self._fail(completion, self._sdk_error(error))
            return

        access_token = token.access_token if token is not None else None
        if not access_token:
            self._fail(completion, FailedToGetTokenError())
            return

        self._succeed(
            completion,
            AccessTokenCredential(
                provider=self.provider,
                access_token=access_token,
                raw_result=token,
            ),
        )
