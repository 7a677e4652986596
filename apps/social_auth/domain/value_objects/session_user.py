"""Session User Value Object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SessionUser:
    """백엔드 세션의 현재 사용자.

    백엔드 커넥터만 보유하며, UI에는 uid만 노출됩니다.
    """

    uid: str
    id_token: str
    refresh_token: str
    provider_id: str | None = None
    display_name: str | None = None
    expires_at: int | None = None
