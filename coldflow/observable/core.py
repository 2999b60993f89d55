"""
coldflow Observable - Core Subscribable Value Stream
====================================================

An Observable wraps exactly one subscription procedure and exposes exactly one
operation, `subscribe(observer)`, which runs that procedure with the observer.

Observables are cold and lazy:

- constructing one emits nothing
- every `subscribe` call runs the procedure again from scratch, so two
  subscriptions never share execution state
- nothing is queued or replayed; an observer only sees what the procedure
  emits after it was handed over

There is no error channel and no completion signal. The only thing an
Observable ever does to its observer is call it with the next value.

Example:
    ```python
    def count_to_three(observer):
        for n in (1, 2, 3):
            observer(n)

    numbers = Observable(count_to_three)
    numbers.subscribe(print)  # prints 1, 2, 3
    numbers.subscribe(print)  # runs again: 1, 2, 3
    ```
"""

import logging
from typing import Any, Generic, Optional

from coldflow.exceptions import InvalidObserverError, InvalidSourceError

from .types import Observer, Subscribable, SubscribeProcedure, T

logger = logging.getLogger(__name__)


def ensure_observer(observer: Any) -> Observer:
    """Return ``observer`` unchanged if it is callable, raise otherwise."""
    if not callable(observer):
        raise InvalidObserverError(
            f"Observer must be callable with one value, got {type(observer).__name__}"
        )
    return observer


class Observable(Generic[T]):
    """
    A cold stream defined by a single subscription procedure.

    Instances are immutable. ``upstream`` records the Observable this one was
    derived from by an operator (``None`` for sources); it is used for
    introspection only and never points back at consumers.
    """

    __slots__ = ("_procedure", "_label", "_upstream")

    def __init__(
        self,
        procedure: SubscribeProcedure,
        *,
        label: str = "source",
        upstream: Optional["Observable[Any]"] = None,
    ) -> None:
        if not callable(procedure):
            raise InvalidSourceError(
                f"Subscription procedure must be callable, got {type(procedure).__name__}"
            )
        object.__setattr__(self, "_procedure", procedure)
        object.__setattr__(self, "_label", label)
        object.__setattr__(self, "_upstream", upstream)

    @property
    def procedure(self) -> SubscribeProcedure:
        """The wrapped subscription procedure."""
        return self._procedure

    @property
    def label(self) -> str:
        return self._label

    @property
    def upstream(self) -> Optional["Observable[Any]"]:
        return self._upstream

    def subscribe(self, observer: Observer) -> Any:
        """
        Run the subscription procedure with ``observer``.

        Values may reach the observer before this call returns, after it
        returns (from a timer or event callback), or both.

        Args:
            observer: Callable invoked once per emitted value

        Returns:
            Whatever the subscription procedure returns
        """
        ensure_observer(observer)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Subscribing observer to {self._describe()}")
        return self._procedure(observer)

    def _describe(self) -> str:
        from coldflow.util.chain import describe

        return describe(self)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._describe()})"


def as_observable(source: Any) -> Observable[Any]:
    """
    Normalise an operator input into an Observable.

    Accepts an Observable (returned unchanged), any object implementing the
    `Subscribable` protocol (wrapped through its ``subscribe`` method) or a
    bare subscription procedure.

    Raises:
        InvalidSourceError: If ``source`` is none of the above
    """
    if isinstance(source, Observable):
        return source
    if isinstance(source, Subscribable):
        return Observable(source.subscribe, label=type(source).__name__)
    if callable(source):
        return Observable(source, label=getattr(source, "__name__", "source"))
    raise InvalidSourceError(
        f"Expected an Observable, a Subscribable or a subscription procedure, "
        f"got {type(source).__name__}"
    )
