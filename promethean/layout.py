"""Containers that split their area evenly between their children."""

from __future__ import annotations

from promethean.widget import Renderer, Vec2, Widget, WidgetContainer

__all__ = ["HorizontalLayout", "VerticalLayout"]


def _require_children(layout: WidgetContainer) -> None:
    if not layout.children:
        raise RuntimeError("Layout has no children")


class HorizontalLayout(WidgetContainer):
    """Arranges children left to right with equal widths and fixed spacing."""

    def __init__(self, spacing: float = 5.0) -> None:
        super().__init__()
        self.spacing = float(spacing)

    def add_child(self, child: Widget) -> None:
        self.children.append(child)
        self._recompute()

    def set_position(self, pos: Vec2) -> None:
        super().set_position(pos)
        self._recompute()

    def set_size(self, size: Vec2) -> None:
        super().set_size(size)
        self._recompute()

    def draw(self, renderer: Renderer) -> None:
        """Draw every child; a layout without children is an error."""
        _require_children(self)
        super().draw(renderer)

    def _recompute(self) -> None:
        if not self.children:
            return
        count = len(self.children)
        width = (self.size[0] - self.spacing * (count - 1)) / count
        x, y = self.position
        for child in self.children:
            child.set_position((x, y))
            child.set_size((width, self.size[1]))
            x += width + self.spacing


class VerticalLayout(WidgetContainer):
    """Arranges children top to bottom with equal heights and fixed spacing."""

    def __init__(self, spacing: float = 5.0) -> None:
        super().__init__()
        self.spacing = float(spacing)

    def add_child(self, child: Widget) -> None:
        self.children.append(child)
        self._recompute()

    def set_position(self, pos: Vec2) -> None:
        super().set_position(pos)
        self._recompute()

    def set_size(self, size: Vec2) -> None:
        super().set_size(size)
        self._recompute()

    def draw(self, renderer: Renderer) -> None:
        """Draw every child; a layout without children is an error."""
        _require_children(self)
        super().draw(renderer)

    def _recompute(self) -> None:
        if not self.children:
            return
        count = len(self.children)
        height = (self.size[1] - self.spacing * (count - 1)) / count
        x, y = self.position
        for child in self.children:
            child.set_position((x, y))
            child.set_size((self.size[0], height))
            y += height + self.spacing