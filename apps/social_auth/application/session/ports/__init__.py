"""Session ports."""

from apps.social_auth.application.session.ports.backend_auth_gateway import (
    BackendAuthGateway,
    ListenerHandle,
    SessionChangeHandler,
)

__all__ = ["BackendAuthGateway", "ListenerHandle", "SessionChangeHandler"]
