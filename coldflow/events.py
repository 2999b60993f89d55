"""
coldflow Events - Minimal In-Process Event Target
=================================================

`EventEmitter` stands in for environment event sources (UI events, I/O
callbacks) that `sources.from_event` binds to. It keeps a listener list per
event name and calls every listener when an event is emitted.
"""

import logging
import threading
from collections import defaultdict
from typing import Any, Callable, Dict, List, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

Listener = Callable[[Any], Any]


@runtime_checkable
class EventTarget(Protocol):
    """Anything listeners can be registered on by event name."""

    def add_listener(self, event_name: str, listener: Listener) -> None:
        ...


class EventEmitter:
    """
    Simple synchronous event emitter.

    Listeners are called in registration order on the thread that calls
    `emit`. Registering the same listener twice calls it twice.

    Example:
        ```python
        clicks = EventEmitter()
        clicks.add_listener("click", print)
        clicks.emit("click", (10, 20))  # prints (10, 20)
        ```
    """

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)
        self._lock = threading.RLock()

    def add_listener(self, event_name: str, listener: Listener) -> None:
        """Register ``listener`` for ``event_name``."""
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener).__name__}")
        with self._lock:
            self._listeners[event_name].append(listener)

    def emit(self, event_name: str, value: Any = None) -> int:
        """
        Call every listener registered for ``event_name`` with ``value``.

        Returns:
            The number of listeners called
        """
        with self._lock:
            listeners = tuple(self._listeners.get(event_name, ()))

        for listener in listeners:
            listener(value)
        return len(listeners)

    def listener_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._listeners.get(event_name, ()))
