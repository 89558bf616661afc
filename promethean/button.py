"""Three-state push button that announces clicks on the event bus."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from promethean.eventbus import EventBus
from promethean.events import (
    MouseButton,
    MouseButtonDown,
    MouseButtonUp,
    MouseMotion,
    Rect,
)
from promethean.log import get_logger
from promethean.widget import Renderer, Vec2, Widget

__all__ = ["ButtonState", "ButtonClickedEvent", "Button"]


class ButtonState(Enum):
    """Visual state of a button."""

    NORMAL = 0
    HOVER = 1
    PRESSED = 2


@dataclass(frozen=True)
class ButtonClickedEvent:
    """Published when a button is clicked."""

    button_id: str


class Button(Widget):
    """Button with normal, hover and pressed textures."""

    def __init__(
        self,
        button_id: str,
        texture_normal: str,
        texture_hover: str,
        texture_pressed: str,
        *,
        load_texture: Optional[Callable[[str], Any]] = None,
    ) -> None:
        self.button_id = button_id
        load = load_texture if load_texture is not None else (lambda path: None)
        self.texture_normal = load(texture_normal)
        self.texture_hover = load(texture_hover)
        self.texture_pressed = load(texture_pressed)
        self.bounds = Rect(0, 0, 100, 50)
        self._state = ButtonState.NORMAL

    @property
    def state(self) -> ButtonState:
        return self._state

    def _set_state(self, state: ButtonState, message: str) -> None:
        self._state = state
        get_logger().debug(message, self.button_id)

    def draw(self, renderer: Renderer) -> None:
        b = self.bounds
        renderer.draw_quad((b.x, b.y), (b.w, b.h))

    def handle_event(self, event: Any) -> bool:
        """Update the state from a mouse event; always reports it as handled."""
        if not isinstance(event, (MouseMotion, MouseButtonDown, MouseButtonUp)):
            return True
        inside = self.bounds.contains(event.x, event.y)

        if isinstance(event, MouseMotion):
            if inside and self._state is ButtonState.NORMAL:
                self._set_state(ButtonState.HOVER, "Button %s state -> HOVER")
            elif not inside and self._state is ButtonState.HOVER:
                self._set_state(ButtonState.NORMAL, "Button %s state -> NORMAL")
        elif isinstance(event, MouseButtonDown):
            if inside and event.button == MouseButton.LEFT:
                self._set_state(ButtonState.PRESSED, "Button %s state -> PRESSED")
        elif self._state is ButtonState.PRESSED:
            if inside and event.button == MouseButton.LEFT:
                self._set_state(ButtonState.HOVER, "Button %s clicked")
                EventBus.instance().publish(ButtonClickedEvent(self.button_id))
            else:
                self._set_state(ButtonState.NORMAL, "Button %s state -> NORMAL")
        return True

    def set_position(self, pos: Vec2) -> None:
        self.bounds.x = int(pos[0])
        self.bounds.y = int(pos[1])

    def set_size(self, size: Vec2) -> None:
        self.bounds.w = int(size[0])
        self.bounds.h = int(size[1])