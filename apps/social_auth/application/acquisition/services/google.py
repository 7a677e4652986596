"""Google Credential Acquirer."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from apps.social_auth.application.acquisition.services.base import (
    AcquireCompletion,
    ProviderCredentialAcquirer,
)
from apps.social_auth.application.common.exceptions import InvalidCredentialError
from apps.social_auth.application.common.ports import DisplayableSurface
from apps.social_auth.domain.enums import SocialProvider
from apps.social_auth.domain.value_objects import GoogleCredential

if TYPE_CHECKING:
    from apps.social_auth.application.acquisition.ports import (
        GoogleSignInResult,
        GoogleSignInSDK,
    )
    from apps.social_auth.application.common.ports import MainThreadDispatcher

logger = logging.getLogger(__name__)


class GoogleCredentialAcquirer(ProviderCredentialAcquirer):
    """Google Sign-In 인증 정보 획득."""

    provider = SocialProvider.GOOGLE

    def __init__(self, *, sdk: "GoogleSignInSDK", dispatcher: "MainThreadDispatcher") -> None:
        super().__init__(dispatcher=dispatcher)
        self._sdk = sdk

    def validate_context(self, presentation_context: Any) -> None:
        # Google 로그인 UI는 화면 위에 present 되어야 함
        if not isinstance(presentation_context, DisplayableSurface):
            raise InvalidCredentialError("Google sign-in requires a displayable surface")

    def _start(self, presentation_context: Any, completion: AcquireCompletion) -> None:
        def on_complete(
            result: "GoogleSignInResult | None",
            error: BaseException | None,
        ) -> None:
            if error is not None:
                self._fail(completion, self._sdk_error(error))
                return
            if result is None or not result.id_token or not result.access_token:
                self._fail(completion, InvalidCredentialError("Google token missing"))
                return
            self._succeed(
                completion,
                GoogleCredential(id_token=result.id_token, access_token=result.access_token),
            )

        logger.info("Google sign-in requested")
        self._sdk.sign_in(presentation_context, on_complete)
