"""TokenExchangeService - 프로바이더 토큰 → 백엔드 Custom Token 교환.

Kakao / Naver accessToken은 백엔드 인증 계층이 직접 검증할 수 없으므로
서버 측 검증(socialLogin)을 거쳐 Custom Token으로 바꿉니다.

실패는 세 가지로 구분해 기록합니다:
    - network: 전송/호출 자체가 실패
    - invalid_response: 응답은 왔으나 구조가 올바르지 않음
    - missing_token: 구조는 올바르나 customToken이 없음
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from apps.social_auth.application.common.exceptions import (
    AuthError,
    InvalidResponseError,
    MissingTokenError,
)
from apps.social_auth.domain.value_objects import BackendSessionToken, ExchangeRequest

if TYPE_CHECKING:
    from apps.social_auth.application.exchange.ports import CallableFunctionsGateway
    from apps.social_auth.domain.enums import SocialProvider

logger = logging.getLogger(__name__)

SOCIAL_LOGIN_FUNCTION = "socialLogin"


class SocialLoginResponse(BaseModel):
    """socialLogin 응답 모델."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    custom_token: Optional[str] = Field(default=None, alias="customToken")


class TokenExchangeService:
    """토큰 교환 서비스.

    Collaborators:
        - CallableFunctionsGateway: callable 함수 호출
    """

    def __init__(self, gateway: "CallableFunctionsGateway") -> None:
        self._gateway = gateway

    async def exchange(self, access_token: str, provider: "SocialProvider") -> BackendSessionToken:
        """accessToken으로 백엔드 Custom Token을 요청합니다.

        Raises:
            NetworkError: 호출 실패
            InvalidResponseError: 응답 형식 오류
            MissingTokenError: customToken 누락
        """
        request = ExchangeRequest(credential=access_token, provider=provider)
        trace = {"function": SOCIAL_LOGIN_FUNCTION, "provider": provider.value}

        logger.info(
            "Calling token exchange function",
            extra={**trace, "stage": "pre_call", "access_token_length": len(access_token)},
        )
        try:
            result = await self._gateway.call(SOCIAL_LOGIN_FUNCTION, request.to_payload())
        except AuthError as e:
            logger.error(
                "Token exchange call failed",
                extra={**trace, "stage": "failed", "error_kind": e.kind.value, "error": str(e)},
            )
            raise

        logger.info(
            "Token exchange raw result received",
            extra={**trace, "stage": "post_call", "result_type": type(result).__name__},
        )

        response = self._parse(result, trace)
        if not response.custom_token:
            logger.error(
                "customToken missing in response",
                extra={**trace, "stage": "failed", "error_kind": "missing_token"},
            )
            raise MissingTokenError()

        token = BackendSessionToken(response.custom_token)
        logger.info(
            "customToken received",
            extra={**trace, "stage": "token_extracted", "custom_token_length": len(token)},
        )
        return token

    def _parse(self, result: Any, trace: dict[str, str]) -> SocialLoginResponse:
        if not isinstance(result, dict):
            logger.error(
                "Token exchange result is not an object",
                extra={
                    **trace,
                    "stage": "failed",
                    "error_kind": "invalid_response",
                    "result_type": type(result).__name__,
                },
            )
            raise InvalidResponseError(
                f"Expected an object from {SOCIAL_LOGIN_FUNCTION}, got {type(result).__name__}"
            )

        try:
            response = SocialLoginResponse.model_validate(result)
        except ValidationError as e:
            logger.error(
                "Token exchange result has unexpected shape",
                extra={
                    **trace,
                    "stage": "failed",
                    "error_kind": "invalid_response",
                    "error": str(e),
                },
            )
            raise InvalidResponseError(f"Unexpected {SOCIAL_LOGIN_FUNCTION} response shape") from e

        logger.info(
            "Token exchange response parsed",
            extra={**trace, "stage": "parsed", "fields": sorted(result.keys())},
        )
        return response
