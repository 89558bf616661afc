"""2D UI widgets, layouts, window stack, event bus, logging and ECS components."""

__version__ = "1.0.0"

__all__ = [
    "button",
    "components",
    "eventbus",
    "events",
    "layout",
    "log",
    "slider",
    "uibutton",
    "widget",
    "window",
]