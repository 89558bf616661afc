"""Windows of widgets, a window stack and a game state hosting it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from promethean.widget import Renderer, WidgetContainer

__all__ = ["UIWindow", "UIManager", "State", "UIOverlay"]

Callback = Callable[[], None]


class UIWindow(WidgetContainer):
    """Container of widgets that can be shown or hidden."""

    def __init__(
        self,
        on_show: Optional[Callback] = None,
        on_hide: Optional[Callback] = None,
    ) -> None:
        super().__init__()
        self.on_show = on_show
        self.on_hide = on_hide
        self._visible = False

    @property
    def visible(self) -> bool:
        return self._visible

    def show(self) -> None:
        """Make the window visible, calling ``on_show`` if it was hidden."""
        if not self._visible:
            self._visible = True
            if self.on_show is not None:
                self.on_show()

    def hide(self) -> None:
        """Hide the window, calling ``on_hide`` if it was visible."""
        if self._visible:
            self._visible = False
            if self.on_hide is not None:
                self.on_hide()

    def draw(self, renderer: Renderer) -> None:
        if self._visible:
            super().draw(renderer)

    def handle_event(self, event: Any) -> bool:
        if not self._visible:
            return False
        return super().handle_event(event)


class UIManager:
    """Stack of windows; only the top one receives events, all are drawn."""

    def __init__(self) -> None:
        self._stack: List[UIWindow] = []

    def push_window(self, window: Optional[UIWindow]) -> None:
        """Show ``window`` and put it on top of the stack."""
        if window is None:
            return
        window.show()
        self._stack.append(window)

    def pop_window(self) -> None:
        """Hide and remove the top window, if any."""
        if self._stack:
            self._stack.pop().hide()

    def top_window(self) -> Optional[UIWindow]:
        return self._stack[-1] if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)

    def handle_event(self, event: Any) -> None:
        top = self.top_window()
        if top is not None:
            top.handle_event(event)

    def render(self, renderer: Renderer) -> None:
        for window in self._stack:
            window.draw(renderer)


class State(ABC):
    """A game state driven by the state stack.

    The default lifecycle hooks record whether the state is active and
    whether it is paused; subclasses overriding them may call ``super()``.
    """

    active: bool = False
    paused: bool = False

    def on_enter(self) -> None:
        """Called when the state becomes active."""
        self.active = True
        self.paused = False

    def on_exit(self) -> None:
        """Called when the state is leaving."""
        self.active = False
        self.paused = False

    def pause(self) -> None:
        """Called when another state is pushed on top."""
        self.paused = True

    def resume(self) -> None:
        """Called when the state becomes active again."""
        self.paused = False

    def handle_event(self, event: Any) -> None:
        """Receive an input event."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance logic by ``dt`` seconds."""

    @abstractmethod
    def render(self, renderer: Renderer) -> None:
        """Draw the state."""


class UIOverlay(State):
    """State that hosts windows managed by a UIManager."""

    def __init__(self) -> None:
        self.manager = UIManager()
        self.elapsed = 0.0

    def handle_event(self, event: Any) -> None:
        self.manager.handle_event(event)

    def update(self, dt: float) -> None:
        """Accumulate elapsed time; the windows themselves need no update."""
        self.elapsed += dt

    def render(self, renderer: Renderer) -> None:
        self.manager.render(renderer)