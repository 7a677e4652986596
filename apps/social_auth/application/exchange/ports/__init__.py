"""Token exchange ports."""

from apps.social_auth.application.exchange.ports.callable_gateway import (
    CallableFunctionsGateway,
)

__all__ = ["CallableFunctionsGateway"]
