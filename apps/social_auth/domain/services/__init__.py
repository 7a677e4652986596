"""Domain Services."""

from apps.social_auth.domain.services.nonce import random_nonce, sha256

__all__ = ["random_nonce", "sha256"]
