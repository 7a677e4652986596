"""DeleteAccount Command.

회원 탈퇴 Use Case입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.social_auth.application.common.exceptions import UserNotFoundError

if TYPE_CHECKING:
    from apps.social_auth.application.session.ports import BackendAuthGateway

logger = logging.getLogger(__name__)


class DeleteAccountInteractor:
    """회원 탈퇴 Interactor.

    Workflow:
        1. 로그인된 사용자 확인 (없으면 네트워크 호출 없이 실패)
        2. 계정 삭제 요청 (되돌릴 수 없음)
        3. 세션 정리는 백엔드 커넥터가 수행
    """

    def __init__(self, gateway: "BackendAuthGateway") -> None:
        self._gateway = gateway

    async def execute(self) -> None:
        """현재 사용자 계정을 삭제합니다.

        Raises:
            UserNotFoundError: 로그인된 사용자 없음
            AuthFailedError: 백엔드가 삭제를 거부
            NetworkError: 전송 실패
        """
        uid = self._gateway.current_user()
        if uid is None:
            raise UserNotFoundError()

        await self._gateway.delete_current_user()
        logger.info("User account deleted", extra={"uid": uid})
