"""View Models."""

from apps.social_auth.presentation.view_models.auth_view_model import AuthViewModel

__all__ = ["AuthViewModel"]
