"""Token exchange services."""

from apps.social_auth.application.exchange.services.token_exchange_service import (
    SOCIAL_LOGIN_FUNCTION,
    SocialLoginResponse,
    TokenExchangeService,
)

__all__ = ["SOCIAL_LOGIN_FUNCTION", "SocialLoginResponse", "TokenExchangeService"]
