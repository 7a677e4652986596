"""Authenticate Command.

소셜 로그인 Use Case입니다.

Architecture:
    - UseCase(지휘자): AuthenticateInteractor
    - Services(연주자): Acquirer, TokenExchangeService, SessionAuthenticator

Workflow (시도 1회):
    idle → acquiring → [exchanging →] signing_in → succeeded | failed

    - Direct (apple, google): 획득 → IdentityAssertion → 로그인
    - Indirect (kakao, naver): 획득 → 토큰 교환 → Custom Token 로그인
"""

from __future__ import annotations

import logging
import threading
import uuid
from enum import Enum
from functools import partial
from typing import TYPE_CHECKING, Any, Callable

from apps.social_auth.application.common.dto import AuthOutcome
from apps.social_auth.application.common.exceptions import AuthError, AuthFailedError
from apps.social_auth.domain.value_objects import (
    AccessTokenCredential,
    AppleCredential,
    GoogleCredential,
    IdentityAssertion,
)

if TYPE_CHECKING:
    from apps.social_auth.application.acquisition.services import AcquirerRegistry
    from apps.social_auth.application.common.ports import MainThreadDispatcher
    from apps.social_auth.application.exchange.services import TokenExchangeService
    from apps.social_auth.application.session.services import SessionAuthenticator
    from apps.social_auth.domain.enums import SocialProvider
    from apps.social_auth.domain.value_objects import ProviderCredential

logger = logging.getLogger(__name__)

OutcomeCompletion = Callable[[AuthOutcome], None]


class AttemptState(str, Enum):
    """로그인 시도 상태."""

    IDLE = "idle"
    ACQUIRING = "acquiring"
    EXCHANGING = "exchanging"
    SIGNING_IN = "signing_in"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class AuthAttempt:
    """로그인 시도 1회.

    결과는 UI 스레드에서 정확히 한 번 전달되며, 이후 결과는 버립니다.
    """

    def __init__(
        self,
        provider: str,
        completion: OutcomeCompletion,
        dispatcher: "MainThreadDispatcher",
    ) -> None:
        self.attempt_id = uuid.uuid4().hex[:8]
        self.provider = provider
        self.state = AttemptState.IDLE
        self._completion = completion
        self._dispatcher = dispatcher
        self._resolved = False
        self._acquired = False
        self._lock = threading.Lock()

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    def accept_acquisition(self) -> bool:
        """획득 결과를 한 번만 받아들입니다. 이후 SDK 콜백은 False."""
        with self._lock:
            if self._acquired or self._resolved:
                return False
            self._acquired = True
            return True

    def transition(self, state: AttemptState) -> None:
        logger.info(
            "Auth attempt state changed",
            extra={
                "attempt_id": self.attempt_id,
                "provider": self.provider,
                "from_state": self.state.value,
                "to_state": state.value,
            },
        )
        self.state = state

    def resolve(self, outcome: AuthOutcome) -> None:
        with self._lock:
            if self._resolved:
                logger.warning(
                    "Auth attempt already resolved, dropping outcome",
                    extra={"attempt_id": self.attempt_id, "provider": self.provider},
                )
                return
            self._resolved = True

        if outcome.is_success:
            self.transition(AttemptState.SUCCEEDED)
        else:
            self.transition(AttemptState.FAILED)
            logger.warning(
                "Auth attempt failed",
                extra={
                    "attempt_id": self.attempt_id,
                    "provider": self.provider,
                    "error_kind": outcome.kind.value if outcome.kind else None,
                    "error": str(outcome.error),
                },
            )
        self._dispatcher.run_on_main(self._completion, outcome)


class AuthenticateInteractor:
    """소셜 로그인 Interactor (지휘자).

    세 단계(획득, 교환, 로그인)는 순차적이며, 첫 실패에서 중단하고
    해당 에러를 그대로 전달합니다. 세션 상태는 직접 바꾸지 않고
    백엔드 세션 변경 알림(SessionStatePublisher)에 맡깁니다.

    같은 프로바이더로 동시에 호출해도 직렬화하지 않습니다.
    각 시도는 서로 독립적으로 끝납니다.
    """

    def __init__(
        self,
        *,
        registry: "AcquirerRegistry",
        exchange_service: "TokenExchangeService",
        authenticator: "SessionAuthenticator",
        dispatcher: "MainThreadDispatcher",
    ) -> None:
        self._registry = registry
        self._exchange_service = exchange_service
        self._authenticator = authenticator
        self._dispatcher = dispatcher

    def execute(
        self,
        provider: "SocialProvider | str",
        presentation_context: Any,
        completion: OutcomeCompletion,
    ) -> AuthAttempt:
        """로그인 시도를 시작합니다.

        Args:
            provider: 사용자가 선택한 프로바이더
            presentation_context: 로그인 UI를 띄울 기준 화면
            completion: 결과 콜백 (UI 스레드에서 정확히 한 번 호출)

        Returns:
            진행 중인 시도 (상태 조회용)
        """
        label = getattr(provider, "value", str(provider))
        attempt = AuthAttempt(label, completion, self._dispatcher)

        try:
            acquirer = self._registry.get(provider)
            acquirer.validate_context(presentation_context)
        except AuthError as e:
            attempt.resolve(AuthOutcome.failure(e))
            return attempt

        attempt.transition(AttemptState.ACQUIRING)
        acquirer.acquire(presentation_context, partial(self._on_credential, attempt))
        return attempt

    def _on_credential(
        self,
        attempt: AuthAttempt,
        credential: "ProviderCredential | None",
        error: AuthError | None,
    ) -> None:
        if not attempt.accept_acquisition():
            logger.warning(
                "Duplicate credential callback, dropping",
                extra={
                    "attempt_id": attempt.attempt_id,
                    "provider": attempt.provider,
                    "state": attempt.state.value,
                    "has_error": error is not None,
                },
            )
            return
        if error is not None:
            attempt.resolve(AuthOutcome.failure(error))
            return
        self._dispatcher.spawn(self._complete(attempt, credential))

    async def _complete(self, attempt: AuthAttempt, credential: "ProviderCredential") -> None:
        try:
            if isinstance(credential, (AppleCredential, GoogleCredential)):
                await self._sign_in_direct(attempt, credential)
            elif isinstance(credential, AccessTokenCredential):
                await self._sign_in_indirect(attempt, credential)
            else:
                raise AuthFailedError(
                    f"Unexpected credential type: {type(credential).__name__}",
                    code="unexpected_credential",
                )
        except AuthError as e:
            attempt.resolve(AuthOutcome.failure(e))
            return
        except Exception as e:
            logger.exception(
                "Unclassified failure during sign-in",
                extra={"attempt_id": attempt.attempt_id, "provider": attempt.provider},
            )
            attempt.resolve(AuthOutcome.failure(AuthFailedError(str(e), code="unclassified")))
            return

        attempt.resolve(AuthOutcome.success())

    async def _sign_in_direct(
        self,
        attempt: AuthAttempt,
        credential: AppleCredential | GoogleCredential,
    ) -> None:
        # Apple / Google 토큰은 백엔드가 직접 인식하므로 교환 단계 없음
        attempt.transition(AttemptState.SIGNING_IN)
        await self._authenticator.sign_in_with_assertion(
            IdentityAssertion.from_credential(credential)
        )

    async def _sign_in_indirect(
        self,
        attempt: AuthAttempt,
        credential: AccessTokenCredential,
    ) -> None:
        attempt.transition(AttemptState.EXCHANGING)
        token = await self._exchange_service.exchange(
            credential.access_token,
            credential.provider,
        )
        attempt.transition(AttemptState.SIGNING_IN)
        await self._authenticator.sign_in(token)
