"""
Test helpers for observing streams.

Examples:
    Recording emissions:

        >>> recorder = Recorder()
        >>> of(1, 2).subscribe(recorder)
        >>> recorder.values
        [1, 2]

    Controlling deferred emission by hand:

        >>> queue = DeferredQueue()
        >>> create(lambda observer: queue.call_later(observer, 1)).subscribe(recorder)
        >>> queue.run_all()
"""

import threading
from collections import deque
from typing import Any, Callable, List


class Recorder:
    """Observer that records every value it receives."""

    def __init__(self) -> None:
        self.values: List[Any] = []

    def __call__(self, value: Any) -> None:
        self.values.append(value)

    @property
    def count(self) -> int:
        return len(self.values)


class WaitingRecorder(Recorder):
    """Recorder that can block until a number of values has arrived."""

    def __init__(self, expected: int) -> None:
        super().__init__()
        self.expected = expected
        self._lock = threading.Lock()
        self._done = threading.Event()

    def __call__(self, value: Any) -> None:
        with self._lock:
            self.values.append(value)
            if len(self.values) >= self.expected:
                self._done.set()

    def wait(self, timeout: float = 5.0) -> bool:
        return self._done.wait(timeout)


class DeferredQueue:
    """A stand-in event loop: callbacks run only when the test drains it."""

    def __init__(self) -> None:
        self._pending: deque = deque()

    def call_later(self, callback: Callable[..., Any], *args: Any) -> None:
        self._pending.append((callback, args))

    def run_all(self) -> int:
        ran = 0
        while self._pending:
            callback, args = self._pending.popleft()
            callback(*args)
            ran += 1
        return ran

    def __len__(self) -> int:
        return len(self._pending)
