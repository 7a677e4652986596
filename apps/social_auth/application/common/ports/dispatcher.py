"""MainThreadDispatcher Port.

UI를 소유한 단일 스레드로 작업을 전달하는 인터페이스입니다.
"""

from __future__ import annotations

from typing import Any, Callable, Coroutine, Protocol


class MainThreadDispatcher(Protocol):
    """UI 스레드 디스패처 인터페이스.

    구현체:
        - EventLoopDispatcher (infrastructure/dispatch/)
    """

    def is_main_thread(self) -> bool:
        """현재 스레드가 UI 스레드인지 여부."""
        ...

    def dispatch(self, callback: Callable[..., Any], *args: Any) -> None:
        """UI 스레드에서 다음 차례에 실행하도록 예약합니다 (스레드 안전)."""
        ...

    def run_on_main(self, callback: Callable[..., Any], *args: Any) -> None:
        """UI 스레드이면 즉시 실행, 아니면 dispatch 합니다."""
        ...

    def spawn(self, coro: Coroutine[Any, Any, Any]) -> Any:
        """네트워크 코루틴을 UI 스레드의 이벤트 루프에 예약합니다."""
        ...
