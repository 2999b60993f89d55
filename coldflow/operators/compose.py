"""
coldflow Operator Composition
=============================

`pipe` applies unary operators left to right, so

    pipe(source, ignore_even, lambda s: multiply(s, 10))

is the same Observable program as

    multiply(ignore_even(source), 10)
"""

import functools
from typing import Any, Callable

from coldflow.exceptions import InvalidArgumentError
from coldflow.observable.core import Observable, as_observable

UnaryOperator = Callable[[Observable[Any]], Observable[Any]]


def pipe(source: Any, *operators: UnaryOperator) -> Observable[Any]:
    """
    Apply ``operators`` to ``source`` in order.

    Each operator takes an Observable and returns a new one. Operators that
    need configuration are adapted with a lambda or ``functools.partial``.

    Raises:
        InvalidArgumentError: If any operator is not callable
    """
    for op in operators:
        if not callable(op):
            raise InvalidArgumentError(
                f"pipe() operators must be callable, got {type(op).__name__}"
            )
    return functools.reduce(
        lambda observable, op: as_observable(op(observable)),
        operators,
        as_observable(source),
    )
