"""Commands.

인증 관련 유스케이스(Command)입니다.
"""

from apps.social_auth.application.commands.authenticate import (
    AttemptState,
    AuthAttempt,
    AuthenticateInteractor,
)
from apps.social_auth.application.commands.delete_account import DeleteAccountInteractor
from apps.social_auth.application.commands.logout import LogoutInteractor

__all__ = [
    "AttemptState",
    "AuthAttempt",
    "AuthenticateInteractor",
    "DeleteAccountInteractor",
    "LogoutInteractor",
]
