"""
coldflow Filtering Operators
============================

Operators that emit zero or one downstream value per upstream value, keeping
the relative order of the values they let through.

- `ignore_even(source)` - keep odd values only
- `keep_if(source, predicate)` - keep values the predicate accepts
"""

from typing import Any, Callable

from coldflow.exceptions import InvalidArgumentError

from .primitive import operator


def is_odd(value: Any) -> bool:
    """
    Parity test used by `ignore_even`.

    Python's ``%`` takes the sign of the divisor, so ``-3 % 2 == 1`` and
    negative odd integers count as odd. Floats are odd only when they are
    odd whole numbers (``3.0`` is odd, ``2.5`` is not).
    """
    return value % 2 == 1


def _require_predicate(predicate: Any) -> None:
    if not callable(predicate):
        raise InvalidArgumentError(
            f"keep_if() needs a callable predicate, got {type(predicate).__name__}"
        )


@operator("ignore_even")
def ignore_even():
    """
    Drop even values and forward odd ones.

    Example:
        ```python
        ignore_even(of(1, 2, 3, 4, 5)).subscribe(print)  # 1, 3, 5
        ```
    """

    def policy(value):
        return (value,) if is_odd(value) else ()

    return policy


@operator("keep_if", validate=_require_predicate)
def keep_if(predicate: Callable[[Any], Any]):
    """Forward values for which ``predicate(value)`` is truthy."""

    def policy(value):
        return (value,) if predicate(value) else ()

    return policy
