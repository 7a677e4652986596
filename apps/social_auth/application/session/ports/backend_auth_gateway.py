"""BackendAuthGateway Port.

백엔드 인증 커넥터(BaaS Auth) 인터페이스입니다.
세션은 이 커넥터가 소유하는 프로세스 단위 상태이며, 코어는 직접 쓰지 않습니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Hashable, Optional, Protocol

if TYPE_CHECKING:
    from apps.social_auth.domain.value_objects import BackendSessionToken, IdentityAssertion

SessionChangeHandler = Callable[[Optional[str]], None]
ListenerHandle = Hashable


class BackendAuthGateway(Protocol):
    """백엔드 인증 Gateway 인터페이스.

    구현체:
        - FirebaseAuthClient (infrastructure/firebase/)
    """

    async def sign_in_with_custom_token(self, token: "BackendSessionToken") -> str:
        """Custom Token으로 로그인하고 uid를 반환합니다.

        Raises:
            AuthFailedError: 백엔드가 토큰을 거부
            NetworkError: 전송 실패
        """
        ...

    async def sign_in_with_credential(self, assertion: "IdentityAssertion") -> str:
        """프로바이더 identity assertion으로 로그인하고 uid를 반환합니다.

        Raises:
            AuthFailedError: 백엔드가 assertion을 거부
            NetworkError: 전송 실패
        """
        ...

    def sign_out(self) -> None:
        """현재 세션을 종료합니다.

        Raises:
            AuthFailedError: 로그아웃 거부
        """
        ...

    async def delete_current_user(self) -> None:
        """현재 사용자 계정을 삭제합니다 (되돌릴 수 없음).

        Raises:
            UserNotFoundError: 로그인된 사용자 없음
            AuthFailedError: 백엔드가 삭제를 거부
            NetworkError: 전송 실패
        """
        ...

    async def refresh_session(self) -> str:
        """ID 토큰을 갱신합니다. 백엔드가 세션을 무효화하면 세션을 비웁니다."""
        ...

    def add_session_change_listener(self, handler: SessionChangeHandler) -> ListenerHandle:
        """세션 변경 리스너 등록. 등록 직후 현재 상태로 한 번 호출됩니다."""
        ...

    def remove_session_change_listener(self, handle: ListenerHandle) -> None:
        ...

    def current_user(self) -> str | None:
        """현재 사용자 uid (로그아웃 상태면 None)."""
        ...
