"""Provider Credential Acquirer Base Class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional

from apps.social_auth.application.common.exceptions import AuthError, ProviderSDKError

if TYPE_CHECKING:
    from apps.social_auth.application.common.ports import MainThreadDispatcher
    from apps.social_auth.domain.enums import SocialProvider
    from apps.social_auth.domain.value_objects import ProviderCredential

logger = logging.getLogger(__name__)

AcquireCompletion = Callable[[Optional["ProviderCredential"], Optional[AuthError]], None]


class ProviderCredentialAcquirer(ABC):
    """프로바이더 인증 정보 획득 추상 클래스.

    SDK 호출은 항상 UI 스레드에서 시작하고, SDK 콜백 결과도
    UI 스레드로 되돌려 completion(credential, error)을 한 번 호출합니다.
    """

    provider: "SocialProvider"

    def __init__(self, *, dispatcher: "MainThreadDispatcher") -> None:
        self._dispatcher = dispatcher

    def validate_context(self, presentation_context: Any) -> None:
        """SDK 호출 전에 표시 컨텍스트를 검증합니다.

        Raises:
            InvalidCredentialError: 로그인 UI를 띄울 수 없는 컨텍스트
        """
        return None

    def acquire(self, presentation_context: Any, completion: AcquireCompletion) -> None:
        """인증 정보 획득을 시작합니다.

        SDK 호출이 동기적으로 예외를 던져도 completion으로 실패를 전달합니다.
        """
        self._dispatcher.run_on_main(self._guarded_start, presentation_context, completion)

    def _guarded_start(self, presentation_context: Any, completion: AcquireCompletion) -> None:
        try:
            self._start(presentation_context, completion)
        except Exception as e:
            self._fail(completion, self._sdk_error(e))

    @abstractmethod
    def _start(self, presentation_context: Any, completion: AcquireCompletion) -> None:
        """UI 스레드에서 SDK 로그인 플로우 시작."""
        raise NotImplementedError

    def _succeed(self, completion: AcquireCompletion, credential: "ProviderCredential") -> None:
        self._dispatcher.run_on_main(completion, credential, None)

    def _fail(self, completion: AcquireCompletion, error: AuthError) -> None:
        logger.warning(
            "Credential acquisition failed",
            extra={
                "provider": self.provider.value,
                "error_kind": error.kind.value,
                "error": str(error),
            },
        )
        self._dispatcher.run_on_main(completion, None, error)

    def _sdk_error(self, cause: BaseException) -> AuthError:
        """SDK 에러를 그대로 감싸 전달 (이미 분류된 에러는 유지)."""
        if isinstance(cause, AuthError):
            return cause
        return ProviderSDKError(self.provider.value, cause)
