"""Process-wide publish/subscribe event bus."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, List, Optional

from promethean.log import get_logger

__all__ = ["EventBus"]

Handler = Callable[[Any], None]


@dataclass(frozen=True)
class _Subscription:
    id: int
    handler: Handler


class EventBus:
    """Thread-safe bus dispatching events synchronously by their exact type."""

    _instance: ClassVar[Optional["EventBus"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._subs: Dict[type, List[_Subscription]] = {}
        self._lock = threading.Lock()
        self._ids = itertools.count()

    @classmethod
    def instance(cls) -> "EventBus":
        """Return the shared bus, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def subscribe(self, event_type: type, handler: Handler) -> int:
        """Register ``handler`` for events of ``event_type``; return its id."""
        with self._lock:
            sub_id = next(self._ids)
            self._subs.setdefault(event_type, []).append(_Subscription(sub_id, handler))
        get_logger().debug("Subscribed handler %d for %s", sub_id, event_type.__name__)
        return sub_id

    def unsubscribe(self, subscription_id: int) -> None:
        """Remove the subscription with the given id; warn if it is unknown."""
        with self._lock:
            for event_type, subs in self._subs.items():
                remaining = [s for s in subs if s.id != subscription_id]
                if len(remaining) != len(subs):
                    if remaining:
                        self._subs[event_type] = remaining
                    else:
                        del self._subs[event_type]
                    break
            else:
                found = False
        if "found" in locals():
            get_logger().warning("Unsubscribe: unknown subscription id %d", subscription_id)
            return
        get_logger().debug("Unsubscribed handler %d", subscription_id)

    def publish(self, event: Any) -> None:
        """Deliver ``event`` to every handler subscribed to its type."""
        with self._lock:
            subs = list(self._subs.get(type(event), ()))
        get_logger().debug(
            "Publishing %s to %d subscriber(s)", type(event).__name__, len(subs)
        )
        for sub in subs:
            try:
                sub.handler(event)
            except Exception:
                get_logger().error("Exception in event handler %d", sub.id, exc_info=True)