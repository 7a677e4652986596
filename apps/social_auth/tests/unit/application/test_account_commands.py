"""Logout / DeleteAccount / AuthService 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.social_auth.application.commands import DeleteAccountInteractor, LogoutInteractor
from apps.social_auth.application.common.exceptions import (
    AuthErrorKind,
    AuthFailedError,
    UserNotFoundError,
)
from apps.social_auth.application.services import AuthService
from apps.social_auth.application.session.services import SessionStatePublisher


class TestLogoutInteractor:
    """LogoutInteractor 테스트."""

    def test_logout_then_snapshot_is_none(self, backend, dispatcher) -> None:
        """로그아웃 후 세션 변경 알림이 오면 현재 사용자는 None."""
        # Arrange
        backend.uid = "uid-1"
        publisher = SessionStatePublisher(backend, dispatcher)
        publisher.start()
        seen: list[str | None] = []
        publisher.observe(seen.append)

        # Act
        LogoutInteractor(backend).execute()

        # Assert
        assert seen[-1] is None
        assert publisher.current_user() is None

    def test_backend_rejection_propagates(self) -> None:
        gateway = MagicMock()
        gateway.sign_out.side_effect = AuthFailedError("keychain error")

        with pytest.raises(AuthFailedError):
            LogoutInteractor(gateway).execute()


class TestDeleteAccountInteractor:
    """DeleteAccountInteractor 테스트."""

    @pytest.fixture
    def mock_gateway(self) -> MagicMock:
        gateway = MagicMock()
        gateway.delete_current_user = AsyncMock()
        return gateway

    @pytest.mark.asyncio
    async def test_no_session_fails_without_network(self, mock_gateway) -> None:
        """로그아웃 상태에서 탈퇴 → user_not_found, 네트워크 호출 없음."""
        # Arrange
        mock_gateway.current_user.return_value = None

        # Act & Assert
        with pytest.raises(UserNotFoundError) as exc_info:
            await DeleteAccountInteractor(mock_gateway).execute()

        assert exc_info.value.kind == AuthErrorKind.USER_NOT_FOUND
        mock_gateway.delete_current_user.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_current_user(self, mock_gateway) -> None:
        mock_gateway.current_user.return_value = "uid-1"

        await DeleteAccountInteractor(mock_gateway).execute()

        mock_gateway.delete_current_user.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_backend_rejection_propagates(self, mock_gateway) -> None:
        mock_gateway.current_user.return_value = "uid-1"
        mock_gateway.delete_current_user.side_effect = AuthFailedError(
            code="CREDENTIAL_TOO_OLD_LOGIN_AGAIN"
        )

        with pytest.raises(AuthFailedError):
            await DeleteAccountInteractor(mock_gateway).execute()


class TestAuthService:
    """AuthService 테스트."""

    @pytest.fixture
    def mocks(self) -> dict[str, MagicMock]:
        delete_account = MagicMock()
        delete_account.execute = AsyncMock()
        return {
            "publisher": MagicMock(),
            "authenticate": MagicMock(),
            "logout": MagicMock(),
            "delete_account": delete_account,
        }

    @pytest.fixture
    def service(self, mocks) -> AuthService:
        return AuthService(**mocks)

    def test_current_user_uid(self, service, mocks) -> None:
        mocks["publisher"].current_user.return_value = "uid-1"

        assert service.current_user_uid == "uid-1"

    def test_observe_auth_state(self, service, mocks) -> None:
        handler = MagicMock()

        service.observe_auth_state(handler)

        mocks["publisher"].observe.assert_called_once_with(handler)

    def test_login_delegates(self, service, mocks) -> None:
        completion, context = MagicMock(), object()

        service.login("kakao", context, completion)

        mocks["authenticate"].execute.assert_called_once_with("kakao", context, completion)

    def test_logout_delegates(self, service, mocks) -> None:
        service.logout()

        mocks["logout"].execute.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_delete_account_delegates(self, service, mocks) -> None:
        await service.delete_account()

        mocks["delete_account"].execute.assert_awaited_once()
