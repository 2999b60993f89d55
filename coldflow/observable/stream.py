"""
coldflow Stream - Chainable Observable Wrapper
==============================================

`Stream` exposes the bare operators as methods so chains read left to right:

    of(1, 2, 3, 4, 5).ignore_even().multiply(10).subscribe(print)

Each method applies the matching bare operator to the current stream and
wraps the result in a new `Stream`. Nothing is mutated and nothing runs until
`subscribe` is called; a method chain is the same program as the nested
operator calls

    multiply(ignore_even(of(1, 2, 3, 4, 5)), 10).subscribe(print)
"""

from typing import Any, Callable

from coldflow.operators.compose import UnaryOperator, pipe
from coldflow.operators.filtering import ignore_even, keep_if
from coldflow.operators.projection import multiply, project

from .core import Observable, as_observable
from .types import T


class Stream(Observable[T]):
    """An Observable with fluent operator methods."""

    __slots__ = ()

    @classmethod
    def from_observable(cls, source: Any) -> "Stream[Any]":
        """Wrap an Observable, Subscribable or subscription procedure."""
        if isinstance(source, cls):
            return source
        observable = as_observable(source)
        return cls(observable.procedure, label=observable.label, upstream=observable.upstream)

    def multiply(self, factor: Any) -> "Stream[Any]":
        """Multiply every value by ``factor``."""
        return self._chain(multiply(self, factor))

    def ignore_even(self) -> "Stream[T]":
        """Keep only odd values."""
        return self._chain(ignore_even(self))

    def map(self, fn: Callable[[T], Any]) -> "Stream[Any]":
        """Transform every value with ``fn``."""
        return self._chain(project(self, fn))

    def filter(self, predicate: Callable[[T], Any]) -> "Stream[T]":
        """Keep values for which ``predicate`` is truthy."""
        return self._chain(keep_if(self, predicate))

    def pipe(self, *operators: UnaryOperator) -> "Stream[Any]":
        """Apply bare unary operators in order and return the result as a Stream."""
        return type(self).from_observable(pipe(self, *operators))

    def _chain(self, derived: Observable[Any]) -> "Stream[Any]":
        return type(self)(derived.procedure, label=derived.label, upstream=self)
