"""UI thread dispatch."""

from apps.social_auth.infrastructure.dispatch.event_loop_dispatcher import EventLoopDispatcher

__all__ = ["EventLoopDispatcher"]
