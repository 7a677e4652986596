"""Domain Enums."""

from apps.social_auth.domain.enums.social_provider import SocialProvider

__all__ = ["SocialProvider"]
