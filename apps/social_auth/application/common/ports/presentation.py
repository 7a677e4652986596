"""Presentation Context Ports.

프로바이더 로그인 UI를 띄울 기준 화면입니다. 렌더링은 외부 협력자 책임입니다.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PresentationContext(Protocol):
    """로그인 시트를 띄울 앵커 (Apple)."""

    def presentation_anchor(self) -> Any:
        ...


@runtime_checkable
class DisplayableSurface(PresentationContext, Protocol):
    """다른 화면을 직접 present 할 수 있는 표면 (Google)."""

    def present(self, view: Any) -> None:
        ...
