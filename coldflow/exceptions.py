"""
coldflow Exceptions
===================

Exception classes raised by the coldflow core.

Composition-time mistakes (a non-callable observer, a factor that is not a
number) raise subclasses of the matching builtin so callers can keep catching
``TypeError``/``ValueError``. Failures inside an operator while it handles a
value surface as ``OperatorError`` when the error policy is ``propagate``.
"""

from typing import Any


class ColdflowError(Exception):
    """Base class for all coldflow errors."""

    pass


class InvalidSourceError(ColdflowError, TypeError):
    """Raised when something that cannot be subscribed to is used as a source."""

    pass


class InvalidObserverError(ColdflowError, TypeError):
    """Raised when subscribe() is given an observer that is not callable."""

    pass


class InvalidArgumentError(ColdflowError, TypeError):
    """Raised when an operator is configured with an argument of the wrong type."""

    pass


class InvalidPeriodError(ColdflowError, ValueError):
    """Raised when a timed source is given a period that is not positive."""

    pass


class OperatorError(ColdflowError):
    """
    Raised when an operator's per-value policy fails.

    The original exception is chained as ``__cause__``.

    Attributes:
        operator: Label of the operator whose policy failed
        value: The upstream value being processed at the time
    """

    def __init__(self, operator: str, value: Any, message: str = "") -> None:
        self.operator = operator
        self.value = value
        super().__init__(
            message or f"Operator {operator!r} failed while processing {value!r}"
        )
