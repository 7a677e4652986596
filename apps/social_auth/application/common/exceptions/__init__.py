"""Application Exceptions."""

from apps.social_auth.application.common.exceptions.auth import (
    AuthError,
    AuthErrorKind,
    AuthFailedError,
    FailedToGetTokenError,
    InvalidCredentialError,
    InvalidResponseError,
    MissingTokenError,
    NetworkError,
    ProviderSDKError,
    UnsupportedProviderError,
    UserNotFoundError,
)
from apps.social_auth.application.common.exceptions.base import ApplicationError

__all__ = [
    "ApplicationError",
    "AuthError",
    "AuthErrorKind",
    "AuthFailedError",
    "FailedToGetTokenError",
    "InvalidCredentialError",
    "InvalidResponseError",
    "MissingTokenError",
    "NetworkError",
    "ProviderSDKError",
    "UnsupportedProviderError",
    "UserNotFoundError",
]
