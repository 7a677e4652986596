"""AuthService - Auth 모듈 Facade.

UI(세션 소비자)는 이 클래스에만 의존하며, 프로바이더 SDK나
백엔드 연동의 구현 디테일은 알 필요가 없습니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from apps.social_auth.application.commands import (
        AuthAttempt,
        AuthenticateInteractor,
        DeleteAccountInteractor,
        LogoutInteractor,
    )
    from apps.social_auth.application.commands.authenticate import OutcomeCompletion
    from apps.social_auth.application.session.ports import SessionChangeHandler
    from apps.social_auth.application.session.services import SessionStatePublisher
    from apps.social_auth.domain.enums import SocialProvider


class AuthService:
    """Auth Facade.

    Responsibilities:
        - 현재 사용자 조회 / 세션 상태 관찰
        - 프로바이더 로그인
        - 로그아웃 / 탈퇴
    """

    def __init__(
        self,
        *,
        publisher: "SessionStatePublisher",
        authenticate: "AuthenticateInteractor",
        logout: "LogoutInteractor",
        delete_account: "DeleteAccountInteractor",
    ) -> None:
        self._publisher = publisher
        self._authenticate = authenticate
        self._logout = logout
        self._delete_account = delete_account

    @property
    def current_user_uid(self) -> str | None:
        """현재 로그인된 사용자의 UID (로그아웃 상태면 None)."""
        return self._publisher.current_user()

    def observe_auth_state(self, handler: "SessionChangeHandler") -> None:
        """세션 상태 변화를 관찰합니다."""
        self._publisher.observe(handler)

    def login(
        self,
        provider: "SocialProvider | str",
        presentation_context: Any,
        completion: "OutcomeCompletion",
    ) -> "AuthAttempt":
        """지정된 프로바이더로 로그인을 시도합니다."""
        return self._authenticate.execute(provider, presentation_context, completion)

    def logout(self) -> None:
        """로그아웃."""
        self._logout.execute()

    async def delete_account(self) -> None:
        """회원 탈퇴."""
        await self._delete_account.execute()
