"""Application Services."""

from apps.social_auth.application.services.auth_service import AuthService

__all__ = ["AuthService"]
