"""Logout Command.

로그아웃 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.social_auth.application.session.ports import BackendAuthGateway

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """로그아웃 Interactor.

    세션을 비우기만 하며, 화면 전환은 세션 변경 알림이 담당합니다.
    """

    def __init__(self, gateway: "BackendAuthGateway") -> None:
        self._gateway = gateway

    def execute(self) -> None:
        """로그아웃 처리.

        Raises:
            AuthFailedError: 백엔드가 로그아웃을 거부
        """
        self._gateway.sign_out()
        logger.info("User logged out")
