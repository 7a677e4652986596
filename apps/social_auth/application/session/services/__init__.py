"""Session services."""

from apps.social_auth.application.session.services.session_authenticator import (
    SessionAuthenticator,
)
from apps.social_auth.application.session.services.session_state_publisher import (
    SessionStatePublisher,
)

__all__ = ["SessionAuthenticator", "SessionStatePublisher"]
