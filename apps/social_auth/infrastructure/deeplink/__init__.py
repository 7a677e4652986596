"""Deep-link / URL callback routing."""

from apps.social_auth.infrastructure.deeplink.url_router import (
    GoogleURLHandler,
    KakaoURLHandler,
    NaverURLHandler,
    OpenURLRouter,
    URLHandler,
)

__all__ = [
    "GoogleURLHandler",
    "KakaoURLHandler",
    "NaverURLHandler",
    "OpenURLRouter",
    "URLHandler",
]
