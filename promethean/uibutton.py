"""Plain clickable button that invokes a callback."""

from __future__ import annotations

from typing import Any, Callable, Optional

from promethean.events import MouseButton, MouseButtonDown, MouseButtonUp, Rect
from promethean.widget import Renderer, Vec2, Widget

__all__ = ["UIButton"]


class UIButton(Widget):
    """Button calling ``on_click`` when pressed and released inside it."""

    def __init__(self, button_id: str, on_click: Optional[Callable[[], None]] = None) -> None:
        self.button_id = button_id
        self.on_click = on_click
        self.rect = Rect(0, 0, 100, 40)
        self._pressed = False

    def draw(self, renderer: Renderer) -> None:
        r = self.rect
        renderer.draw_quad((r.x, r.y), (r.w, r.h))

    def handle_event(self, event: Any) -> bool:
        """Track left-button presses; True when a press starts or a click completes."""
        if isinstance(event, MouseButtonDown):
            if event.button == MouseButton.LEFT and self.rect.contains(event.x, event.y):
                self._pressed = True
                return True
        elif isinstance(event, MouseButtonUp):
            if self._pressed and event.button == MouseButton.LEFT:
                self._pressed = False
                if self.rect.contains(event.x, event.y):
                    if self.on_click is not None:
                        self.on_click()
                    return True
        return False

    def set_position(self, pos: Vec2) -> None:
        self.rect.x = int(pos[0])
        self.rect.y = int(pos[1])

    def set_size(self, size: Vec2) -> None:
        self.rect.w = int(size[0])
        self.rect.h = int(size[1])