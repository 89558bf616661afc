"""Horizontal slider with a draggable knob and a normalised value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from promethean.eventbus import EventBus
from promethean.events import (
    Key,
    KeyDown,
    MouseButton,
    MouseButtonDown,
    MouseButtonUp,
    MouseMotion,
    Rect,
)
from promethean.widget import Renderer, Vec2, Widget

__all__ = ["SliderValueChangedEvent", "Slider"]

_KEY_STEP = 0.02
_MIN_CHANGE = 0.01


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


@dataclass(frozen=True)
class SliderValueChangedEvent:
    """Published when a slider's value changes; ``new_value`` lies in [0, 1]."""

    slider_id: str
    new_value: float


class Slider(Widget):
    """Slider whose value is set by dragging the knob or with arrow keys."""

    def __init__(
        self,
        slider_id: str,
        track_texture: str,
        knob_texture: str,
        initial_value: float = 0.5,
    ) -> None:
        self.slider_id = slider_id
        self.track_texture = track_texture
        self.knob_texture = knob_texture
        self._value = _clamp(float(initial_value), 0.0, 1.0)
        self.track_rect = Rect(0, 0, 100, 10)
        self.knob_rect = Rect(0, 0, 10, 10)
        self._dragging = False

    @property
    def value(self) -> float:
        """Normalised value in [0, 1]."""
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        value = _clamp(float(value), 0.0, 1.0)
        if abs(value - self._value) < _MIN_CHANGE:
            return
        self._value = value
        self._place_knob()
        EventBus.instance().publish(SliderValueChangedEvent(self.slider_id, self._value))

    def _place_knob(self) -> None:
        travel = self.track_rect.w - self.knob_rect.w
        self.knob_rect.x = self.track_rect.x + int(travel * self._value)

    def set_position(self, pos: Vec2) -> None:
        self.track_rect.x = int(pos[0])
        self.track_rect.y = int(pos[1])
        self.knob_rect.y = self.track_rect.y
        self._place_knob()

    def set_size(self, size: Vec2) -> None:
        self.track_rect.w = int(size[0])
        self.track_rect.h = int(size[1])
        self.knob_rect.w = self.track_rect.h
        self.knob_rect.h = self.track_rect.h
        self._place_knob()
        self.knob_rect.y = self.track_rect.y

    def draw(self, renderer: Renderer) -> None:
        for r in (self.track_rect, self.knob_rect):
            renderer.draw_quad((r.x, r.y), (r.w, r.h))

    def _update_from_position(self, x: int) -> None:
        left = self.track_rect.x
        right = self.track_rect.x + self.track_rect.w - self.knob_rect.w
        clamped = int(_clamp(x - self.knob_rect.w // 2, left, right))
        self.value = 0.0 if right == left else (clamped - left) / (right - left)

    def handle_event(self, event: Any) -> bool:
        """Handle drags and arrow keys; True if the event affected the slider."""
        if isinstance(event, MouseButtonDown):
            if event.button == MouseButton.LEFT and self.knob_rect.contains(event.x, event.y):
                self._dragging = True
                return True
        elif isinstance(event, MouseButtonUp):
            if event.button == MouseButton.LEFT and self._dragging:
                self._dragging = False
                return True
        elif isinstance(event, MouseMotion):
            if self._dragging:
                self._update_from_position(event.x)
                return True
        elif isinstance(event, KeyDown):
            if event.key == Key.RIGHT:
                self.value = self._value + _KEY_STEP
                return True
            if event.key == Key.LEFT:
                self.value = self._value - _KEY_STEP
                return True
        return False