"""Input events delivered to widgets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "MouseButton",
    "Key",
    "Rect",
    "MouseMotion",
    "MouseButtonDown",
    "MouseButtonUp",
    "KeyDown",
]


class MouseButton(IntEnum):
    """Mouse buttons, numbered as the windowing layer reports them."""

    LEFT = 1
    MIDDLE = 2
    RIGHT = 3


class Key(IntEnum):
    """Keyboard keys that widgets react to."""

    RIGHT = 1073741903
    LEFT = 1073741904
    DOWN = 1073741905
    UP = 1073741906


@dataclass
class Rect:
    """Integer rectangle with a top-left corner and a size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def contains(self, x: int, y: int) -> bool:
        """True if the point lies inside; right and bottom edges excluded."""
        return self.x <= x < self.x + self.w and self.y <= y < self.y + self.h


@dataclass(frozen=True)
class MouseMotion:
    """The pointer moved to ``(x, y)``."""

    x: int
    y: int


@dataclass(frozen=True)
class MouseButtonDown:
    """A mouse button was pressed at ``(x, y)``."""

    x: int
    y: int
    button: MouseButton = MouseButton.LEFT


@dataclass(frozen=True)
class MouseButtonUp:
    """A mouse button was released at ``(x, y)``."""

    x: int
    y: int
    button: MouseButton = MouseButton.LEFT


@dataclass(frozen=True)
class KeyDown:
    """A key was pressed."""

    key: Key