"""EventLoopDispatcher.

MainThreadDispatcher 포트의 구현체입니다.
asyncio 이벤트 루프를 돌리는 스레드를 UI 소유 스레드로 간주합니다.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import logging
from typing import Any, Callable, Coroutine

logger = logging.getLogger(__name__)


class EventLoopDispatcher:
    """이벤트 루프 기반 UI 스레드 디스패처.

    다른 스레드(SDK 콜백 등)에서 온 작업은 call_soon_threadsafe로 루프에 넘깁니다.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop) -> None:
        self._loop = loop
        self._tasks: set[asyncio.Task[Any]] = set()

    @classmethod
    def from_running_loop(cls) -> "EventLoopDispatcher":
        """현재 실행 중인 루프에 묶인 디스패처 생성."""
        return cls(asyncio.get_running_loop())

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        return self._loop

    def is_main_thread(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        if self.is_main_thread():
            self._loop.call_soon(callback, *args)
        else:
            self._loop.call_soon_threadsafe(callback, *args)

    def run_on_main(self, callback: Callable[..., Any], *args: Any) -> None:
        if self.is_main_thread():
            callback(*args)
        else:
            self._loop.call_soon_threadsafe(callback, *args)

    def spawn(
        self, coro: Coroutine[Any, Any, Any]
    ) -> "asyncio.Task[Any] | concurrent.futures.Future[Any]":
        if not self.is_main_thread():
            return asyncio.run_coroutine_threadsafe(coro, self._loop)

        task = self._loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    async def wait_idle(self) -> None:
        """진행 중인 네트워크 작업이 모두 끝날 때까지 대기 (종료 시)."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _on_task_done(self, task: "asyncio.Task[Any]") -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "Background task failed",
                exc_info=(type(exc), exc, exc.__traceback__),
            )
