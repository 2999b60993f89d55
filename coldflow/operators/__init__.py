"""
coldflow Operators
==================

Bare operators: pure functions from an Observable (plus configuration) to a
new Observable. They accept Observables, Subscribables or bare subscription
procedures as their source and never modify it.
"""

from .compose import pipe
from .filtering import ignore_even, is_odd, keep_if
from .primitive import derive, format_label, operator
from .projection import multiply, project

__all__ = [
    "derive",
    "format_label",
    "ignore_even",
    "is_odd",
    "keep_if",
    "multiply",
    "operator",
    "pipe",
    "project",
]
