"""
coldflow Sources - Base Observable Constructors
===============================================

Constructors for the streams operators are built on. All of them return a
`Stream` and all of them are cold: each subscription runs its own copy of the
producer, with its own counters and its own listener registrations.

- `create(procedure)` - wrap a subscription procedure
- `of(*values)` - emit the given values synchronously
- `from_iterable(iterable)` - emit the items of an iterable synchronously
- `interval(period)` - emit a counter from a repeating timer
- `from_event(target, name)` - emit whatever an event target reports
"""

import logging
import numbers
import threading
from typing import Any, Iterable, Optional

from coldflow.config import get_config
from coldflow.events import EventTarget
from coldflow.exceptions import InvalidArgumentError, InvalidPeriodError, InvalidSourceError
from coldflow.observable.stream import Stream
from coldflow.observable.types import Observer, SubscribeProcedure

logger = logging.getLogger(__name__)


def create(procedure: SubscribeProcedure) -> Stream[Any]:
    """
    Build a stream from a subscription procedure.

    Example:
        ```python
        def produce(observer):
            observer("hello")
            observer("world")

        create(produce).subscribe(print)
        ```
    """
    return Stream(procedure, label=getattr(procedure, "__name__", "create"))


def of(*values: Any) -> Stream[Any]:
    """Emit each of ``values`` in order, synchronously, on every subscription."""

    def subscribe_values(observer: Observer) -> None:
        for value in values:
            observer(value)

    return Stream(subscribe_values, label="of")


def from_iterable(iterable: Iterable[Any]) -> Stream[Any]:
    """
    Emit the items of ``iterable`` synchronously on every subscription.

    The iterable is iterated again for each subscription, so a one-shot
    iterator (such as a generator) only emits for the first subscriber.
    """
    try:
        iter(iterable)
    except TypeError:
        raise InvalidSourceError(
            f"from_iterable() needs an iterable, got {type(iterable).__name__}"
        ) from None

    def subscribe_iterable(observer: Observer) -> None:
        for value in iterable:
            observer(value)

    return Stream(subscribe_iterable, label="from_iterable")


def interval(period: float, *, count: Optional[int] = None, start: int = 0) -> Stream[int]:
    """
    Emit ``start``, ``start + 1``, ... every ``period`` seconds.

    Ticks come from a chain of ``threading.Timer`` objects, so the observer
    is called from a timer thread after `subscribe` returns. Each
    subscription keeps its own counter.

    Args:
        period: Seconds between ticks, must be positive
        count: Stop after this many ticks; ``None`` ticks forever
        start: First value emitted

    Raises:
        InvalidPeriodError: If ``period`` is not positive
    """
    if isinstance(period, bool) or not isinstance(period, numbers.Real):
        raise InvalidArgumentError(
            f"interval() period must be a number, got {type(period).__name__}"
        )
    if period <= 0:
        raise InvalidPeriodError(f"interval() period must be positive, got {period!r}")
    if count is not None and count < 0:
        raise InvalidArgumentError(f"interval() count must be >= 0, got {count!r}")

    def subscribe_interval(observer: Observer) -> None:
        daemon = get_config().daemon_timers
        state = {"next": start, "emitted": 0}

        def schedule() -> None:
            if count is not None and state["emitted"] >= count:
                return
            timer = threading.Timer(period, tick)
            timer.daemon = daemon
            logger.debug(f"Scheduling interval tick {state['next']} in {period}s")
            timer.start()

        def tick() -> None:
            value = state["next"]
            state["next"] += 1
            state["emitted"] += 1
            # Ticks of one subscription never overlap: the next timer starts
            # only after the observer returns.
            try:
                observer(value)
            finally:
                schedule()

        logger.debug(f"Starting interval of {period}s (count={count})")
        schedule()

    return Stream(subscribe_interval, label=f"interval({period!r})")


def from_event(target: EventTarget, event_name: str) -> Stream[Any]:
    """
    Emit every value ``target`` reports for ``event_name``.

    Each subscription registers its own listener with
    ``target.add_listener(event_name, observer)``; two subscribers mean two
    registrations.
    """
    if not isinstance(target, EventTarget):
        raise InvalidSourceError(
            f"from_event() needs an object with add_listener(), got {type(target).__name__}"
        )

    def subscribe_event(observer: Observer) -> None:
        logger.debug(f"Registering listener for {event_name!r} on {type(target).__name__}")
        target.add_listener(event_name, observer)

    return Stream(subscribe_event, label=f"from_event({event_name!r})")
