"""Domain Value Objects."""

from apps.social_auth.domain.value_objects.credentials import (
    AccessTokenCredential,
    AppleCredential,
    BackendSessionToken,
    ExchangeRequest,
    GoogleCredential,
    IdentityAssertion,
    ProviderCredential,
)
from apps.social_auth.domain.value_objects.session_user import SessionUser

__all__ = [
    "AccessTokenCredential",
    "AppleCredential",
    "BackendSessionToken",
    "ExchangeRequest",
    "GoogleCredential",
    "IdentityAssertion",
    "ProviderCredential",
    "SessionUser",
]
