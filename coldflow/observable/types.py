"""
coldflow Observable Types
=========================

Type aliases and protocols shared across the stream core.

- `Observer` - anything invocable with one value; its return value is ignored
- `SubscribeProcedure` - anything invocable with an observer; defines what an
  Observable does when subscribed to
- `Policy` - an operator's per-value rule, returning the values to forward
- `Subscribable` - the single-method interface accepted wherever a source is
  expected
"""

from typing import Any, Callable, Iterable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
U = TypeVar("U")

Observer = Callable[[Any], Any]
SubscribeProcedure = Callable[[Observer], Any]
Policy = Callable[[Any], Iterable[Any]]
PolicyFactory = Callable[[], Policy]


@runtime_checkable
class Subscribable(Protocol[T]):
    """
    Protocol for anything that accepts an observer and pushes values to it.

    Example:
        ```python
        class Ticker:
            def subscribe(self, observer):
                for n in range(3):
                    observer(n)

        assert isinstance(Ticker(), Subscribable)
        ```
    """

    def subscribe(self, observer: Observer) -> Any:
        ...
