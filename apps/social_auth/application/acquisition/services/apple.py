"""Apple Credential Acquirer.

nonce 생성, SHA-256 해싱, identity token 검증 등 Apple 로그인 특유의 처리를 담당합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from jose import JWTError, jwt

from apps.social_auth.application.acquisition.ports import AppleIDCredential, AppleIDRequest
from apps.social_auth.application.acquisition.services.base import (
    AcquireCompletion,
    ProviderCredentialAcquirer,
)
from apps.social_auth.application.common.exceptions import InvalidCredentialError
from apps.social_auth.domain.enums import SocialProvider
from apps.social_auth.domain.services.nonce import random_nonce, sha256
from apps.social_auth.domain.value_objects import AppleCredential

if TYPE_CHECKING:
    from apps.social_auth.application.acquisition.ports import AppleSignInSDK
    from apps.social_auth.application.common.ports import MainThreadDispatcher

logger = logging.getLogger(__name__)


class AppleCredentialAcquirer(ProviderCredentialAcquirer):
    """Sign in with Apple 인증 정보 획득.

    nonce는 시도마다 새로 만들어 해당 시도의 콜백에만 묶습니다.
    동시에 여러 시도가 진행되어도 서로의 nonce를 덮어쓰지 않습니다.
    """

    provider = SocialProvider.APPLE

    def __init__(
        self,
        *,
        sdk: "AppleSignInSDK",
        dispatcher: "MainThreadDispatcher",
        nonce_factory: Callable[[], str] = random_nonce,
    ) -> None:
        super().__init__(dispatcher=dispatcher)
        self._sdk = sdk
        self._nonce_factory = nonce_factory

    def _start(self, presentation_context: Any, completion: AcquireCompletion) -> None:
        # "이번 요청은 우리 앱이 만든 요청"이라는 증거
        raw_nonce = self._nonce_factory()
        request = AppleIDRequest(nonce=sha256(raw_nonce) if raw_nonce else "")

        def on_complete(
            credential: AppleIDCredential | None,
            error: BaseException | None,
        ) -> None:
            if error is not None:
                self._fail(completion, self._sdk_error(error))
                return
            try:
                result = self._verify(credential, raw_nonce, request.nonce)
            except InvalidCredentialError as e:
                self._fail(completion, e)
                return
            self._succeed(completion, result)

        logger.info(
            "Apple sign-in requested",
            extra={"scopes": list(request.requested_scopes)},
        )
        self._sdk.perform_request(request, presentation_context, on_complete)

    def _verify(
        self,
        credential: AppleIDCredential | None,
        raw_nonce: str | None,
        hashed_nonce: str,
    ) -> AppleCredential:
        """응답이 이번 요청에서 나온 것인지 검증합니다."""
        if credential is None or credential.identity_token is None:
            raise InvalidCredentialError("Apple identity token missing")
        if not raw_nonce:
            raise InvalidCredentialError("Apple nonce was never set")

        try:
            id_token = credential.identity_token.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidCredentialError("Apple identity token is not UTF-8") from e

        try:
            claims = jwt.get_unverified_claims(id_token)
        except JWTError as e:
            raise InvalidCredentialError("Apple identity token is malformed") from e

        if claims.get("nonce") != hashed_nonce:
            raise InvalidCredentialError("Apple identity token nonce mismatch")

        return AppleCredential(
            identity_token=id_token,
            raw_nonce=raw_nonce,
            full_name=credential.full_name,
        )
