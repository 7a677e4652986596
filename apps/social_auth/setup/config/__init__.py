"""Configuration."""

from apps.social_auth.setup.config.settings import (
    ConfigurationError,
    Settings,
    get_settings,
    load_settings,
)

__all__ = ["ConfigurationError", "Settings", "get_settings", "load_settings"]
