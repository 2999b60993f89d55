"""
coldflow Projection Operators
=============================

Operators that emit exactly one downstream value per upstream value.

- `multiply(source, factor)` - scale each value by a numeric factor
- `project(source, fn)` - transform each value with a function
"""

import numbers
from typing import Any, Callable

from coldflow.exceptions import InvalidArgumentError

from .primitive import operator


def _require_number(factor: Any) -> None:
    if not isinstance(factor, numbers.Number):
        raise InvalidArgumentError(
            f"multiply() factor must be a number, got {type(factor).__name__}"
        )


def _require_callable(fn: Any) -> None:
    if not callable(fn):
        raise InvalidArgumentError(
            f"project() needs a callable, got {type(fn).__name__}"
        )


@operator("multiply", validate=_require_number)
def multiply(factor):
    """
    Multiply every upstream value by ``factor``.

    Uses Python's ``*``: floats follow IEEE-754 double precision and ints
    never overflow.

    Example:
        ```python
        multiply(of(1, 2, 3), 5).subscribe(print)  # 5, 10, 15
        ```
    """

    def policy(value):
        return (value * factor,)

    return policy


@operator("project", validate=_require_callable)
def project(fn: Callable[[Any], Any]):
    """Emit ``fn(value)`` for every upstream value."""

    def policy(value):
        return (fn(value),)

    return policy
