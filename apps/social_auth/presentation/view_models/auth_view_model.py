"""AuthViewModel.

로그인 화면과 설정 화면이 사용하는 뷰 모델입니다.
세션 상태 변화를 UI에 중계하고, 모든 실패를 on_error로 노출합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from apps.social_auth.application.common.exceptions import AuthError

if TYPE_CHECKING:
    from apps.social_auth.application.commands import AuthAttempt
    from apps.social_auth.application.common.dto import AuthOutcome
    from apps.social_auth.application.services import AuthService
    from apps.social_auth.domain.enums import SocialProvider

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[AuthError], None]
StateHandler = Callable[[Optional[str]], None]


class AuthViewModel:
    """Auth 뷰 모델.

    Attributes:
        current_user_uid: 마지막으로 관찰된 사용자 uid (로그아웃이면 None)
        is_loading: 로그인 시도 진행 여부
    """

    def __init__(
        self,
        service: "AuthService",
        *,
        on_auth_state_changed: StateHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> None:
        self._service = service
        self._on_auth_state_changed = on_auth_state_changed
        self._on_error = on_error
        self.current_user_uid: str | None = service.current_user_uid
        self.is_loading = False
        service.observe_auth_state(self._handle_state)

    @property
    def is_logged_in(self) -> bool:
        return self.current_user_uid is not None

    def login(
        self,
        provider: "SocialProvider | str",
        presentation_context: Any,
    ) -> "AuthAttempt":
        self.is_loading = True
        return self._service.login(provider, presentation_context, self._handle_outcome)

    def logout(self) -> None:
        try:
            self._service.logout()
        except AuthError as e:
            self._report(e)

    async def delete_account(self) -> None:
        try:
            await self._service.delete_account()
        except AuthError as e:
            self._report(e)

    def _handle_state(self, uid: str | None) -> None:
        self.current_user_uid = uid
        if self._on_auth_state_changed is not None:
            self._on_auth_state_changed(uid)

    def _handle_outcome(self, outcome: "AuthOutcome") -> None:
        self.is_loading = False
        if not outcome.is_success and outcome.error is not None:
            self._report(outcome.error)

    def _report(self, error: AuthError) -> None:
        logger.info(
            "Auth error surfaced to UI",
            extra={"error_kind": error.kind.value, "error": str(error)},
        )
        if self._on_error is not None:
            self._on_error(error)
