"""Nonce utilities for Sign in with Apple."""

from __future__ import annotations

import hashlib
import secrets

NONCE_CHARSET = "0123456789ABCDEFGHIJKLMNOPQRSTUVXYZabcdefghijklmnopqrstuvwxyz-._"
DEFAULT_NONCE_LENGTH = 32


def random_nonce(length: int = DEFAULT_NONCE_LENGTH) -> str:
    """암호학적으로 안전한 1회용 nonce 생성."""
    if length <= 0:
        raise ValueError("Nonce length must be positive")
    return "".join(secrets.choice(NONCE_CHARSET) for _ in range(length))


def sha256(value: str) -> str:
    """SHA-256 hex digest (Apple 요청에는 해시만 전달)."""
    return hashlib.sha256(value.encode()).hexdigest()
