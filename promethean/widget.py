"""Widget interface, a container of widgets and a quad-collecting renderer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Tuple

__all__ = ["Renderer", "Widget", "WidgetContainer"]

Vec2 = Tuple[float, float]


class Renderer:
    """Receives quads to draw and keeps them in submission order."""

    def __init__(self) -> None:
        self.quads: List[Tuple[Vec2, Vec2]] = []

    def draw_quad(self, pos: Vec2, size: Vec2) -> None:
        """Submit an axis-aligned quad at ``pos`` with ``size``."""
        self.quads.append(((float(pos[0]), float(pos[1])), (float(size[0]), float(size[1]))))


class Widget(ABC):
    """Base class for UI widgets."""

    @abstractmethod
    def draw(self, renderer: Renderer) -> None:
        """Draw the widget using the renderer."""

    @abstractmethod
    def handle_event(self, event: Any) -> bool:
        """Handle an input event; return True if it was consumed."""

    @abstractmethod
    def set_position(self, pos: Vec2) -> None:
        """Set the top-left position in pixels."""

    @abstractmethod
    def set_size(self, size: Vec2) -> None:
        """Set the size in pixels."""


class WidgetContainer(Widget):
    """Widget holding child widgets and forwarding drawing and events to them."""

    def __init__(self) -> None:
        self.position: Vec2 = (0.0, 0.0)
        self.size: Vec2 = (0.0, 0.0)
        self.children: List[Widget] = []

    def add_child(self, child: Widget) -> None:
        self.children.append(child)

    def draw(self, renderer: Renderer) -> None:
        for child in self.children:
            child.draw(renderer)

    def handle_event(self, event: Any) -> bool:
        """Offer the event to every child; True if any child consumed it."""
        handled = False
        for child in self.children:
            handled = child.handle_event(event) or handled
        return handled

    def set_position(self, pos: Vec2) -> None:
        self.position = (float(pos[0]), float(pos[1]))

    def set_size(self, size: Vec2) -> None:
        self.size = (float(size[0]), float(size[1]))