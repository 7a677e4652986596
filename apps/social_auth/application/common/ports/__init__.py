"""Common Ports."""

from apps.social_auth.application.common.ports.dispatcher import MainThreadDispatcher
from apps.social_auth.application.common.ports.presentation import (
    DisplayableSurface,
    PresentationContext,
)

__all__ = [
    "DisplayableSurface",
    "MainThreadDispatcher",
    "PresentationContext",
]
