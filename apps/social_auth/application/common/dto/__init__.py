"""Common DTOs."""

from apps.social_auth.application.common.dto.outcome import AuthOutcome, OutcomeStatus

__all__ = ["AuthOutcome", "OutcomeStatus"]
