"""SessionAuthenticator - 백엔드 세션 로그인."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.social_auth.application.session.ports import BackendAuthGateway
    from apps.social_auth.domain.value_objects import BackendSessionToken, IdentityAssertion

logger = logging.getLogger(__name__)


class SessionAuthenticator:
    """백엔드 인증 계층에 로그인합니다.

    호출은 정확히 한 번이며 재시도하지 않습니다. 에러는 그대로 전파합니다.
    """

    def __init__(self, gateway: "BackendAuthGateway") -> None:
        self._gateway = gateway

    async def sign_in(self, token: "BackendSessionToken") -> None:
        """Custom Token 로그인 (Indirect path)."""
        uid = await self._gateway.sign_in_with_custom_token(token)
        logger.info("Signed in with custom token", extra={"uid": uid})

    async def sign_in_with_assertion(self, assertion: "IdentityAssertion") -> None:
        """프로바이더 assertion 로그인 (Direct path)."""
        uid = await self._gateway.sign_in_with_credential(assertion)
        logger.info(
            "Signed in with identity assertion",
            extra={"uid": uid, "provider": assertion.provider.value},
        )
