"""SessionStatePublisher - 세션 상태 단일 진실 공급원.

백엔드 세션 변경 알림에 정확히 하나의 구독을 걸고,
변경될 때마다 모든 구독자에게 현재 사용자 uid(또는 None)를 전달합니다.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from apps.social_auth.application.common.ports import MainThreadDispatcher
    from apps.social_auth.application.session.ports import (
        BackendAuthGateway,
        ListenerHandle,
        SessionChangeHandler,
    )

logger = logging.getLogger(__name__)


class SessionStatePublisher:
    """세션 상태 퍼블리셔.

    Lifecycle:
        start() → 백엔드 리스너 1개 등록
        stop()  → 리스너 해제 (여러 번 호출해도 안전)

    세션 값을 캐시하지 않습니다. current_user()는 항상 백엔드를 읽습니다.
    """

    def __init__(
        self,
        gateway: "BackendAuthGateway",
        dispatcher: "MainThreadDispatcher",
    ) -> None:
        self._gateway = gateway
        self._dispatcher = dispatcher
        self._handlers: list[SessionChangeHandler] = []
        self._handle: Optional[ListenerHandle] = None
        self._primed = False
        # 백엔드가 등록 중에 동기적으로 알림을 보낼 수 있음
        self._lock = threading.RLock()

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        """백엔드 세션 변경 구독 시작."""
        with self._lock:
            if self._handle is not None:
                return
            self._handle = self._gateway.add_session_change_listener(self._publish)
        logger.info("Session state publisher started")

    def stop(self) -> None:
        """구독 해제. 이미 멈춘 상태면 아무것도 하지 않습니다."""
        with self._lock:
            handle, self._handle = self._handle, None
            self._primed = False
        if handle is None:
            return
        self._gateway.remove_session_change_listener(handle)
        logger.info("Session state publisher stopped")

    def observe(self, handler: "SessionChangeHandler") -> None:
        """구독자 등록.

        백엔드의 첫 알림이 이미 전달된 뒤라면 등록 시점의 상태로 한 번
        알려줍니다. 첫 알림이 아직 대기 중이면 그 알림으로 받습니다.
        """
        with self._lock:
            self._handlers.append(handler)
            notify_now = self._handle is not None and self._primed
        if notify_now:
            self._dispatcher.dispatch(self._notify, handler, self._gateway.current_user())

    def current_user(self) -> str | None:
        """현재 사용자 uid 스냅샷 (부작용 없음)."""
        return self._gateway.current_user()

    def _publish(self, uid: str | None) -> None:
        with self._lock:
            self._primed = True
            handlers = list(self._handlers)
        logger.info(
            "Session state changed",
            extra={"authenticated": uid is not None, "subscribers": len(handlers)},
        )
        for handler in handlers:
            self._notify(handler, uid)

    def _notify(self, handler: "SessionChangeHandler", uid: str | None) -> None:
        try:
            handler(uid)
        except Exception:
            logger.exception("Session state handler raised")
