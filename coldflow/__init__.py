"""
coldflow - Cold Push-Based Observable Streams
=============================================

A small reactive core: an Observable wraps a subscription procedure, an
observer is any one-argument callable, and operators are pure functions that
derive new Observables from existing ones.

    from coldflow import of

    of(1, 2, 3, 4, 5).ignore_even().multiply(10).subscribe(print)  # 10, 30, 50

Streams are lazy (nothing runs before `subscribe`) and cold (every
subscription runs the whole chain again, independently).
"""

# The observable package must load before the operators it wraps.
from .observable import (
    Observable,
    Observer,
    Stream,
    Subscribable,
    SubscribeProcedure,
    as_observable,
)
from .operators import (
    derive,
    ignore_even,
    is_odd,
    keep_if,
    multiply,
    operator,
    pipe,
    project,
)

from .config import ErrorPolicy, FlowConfig, configure, get_config, override, reset_config
from .events import EventEmitter, EventTarget
from .exceptions import (
    ColdflowError,
    InvalidArgumentError,
    InvalidObserverError,
    InvalidPeriodError,
    InvalidSourceError,
    OperatorError,
)
from .sources import create, from_event, from_iterable, interval, of
from .util import describe, find_ultimate_source, iter_lineage

__version__ = "0.1.0"

__all__ = [
    # Core
    "Observable",
    "Observer",
    "Stream",
    "Subscribable",
    "SubscribeProcedure",
    "as_observable",
    # Operators
    "derive",
    "operator",
    "multiply",
    "project",
    "ignore_even",
    "keep_if",
    "is_odd",
    "pipe",
    # Sources
    "create",
    "of",
    "from_iterable",
    "interval",
    "from_event",
    "EventEmitter",
    "EventTarget",
    # Configuration
    "ErrorPolicy",
    "FlowConfig",
    "configure",
    "get_config",
    "override",
    "reset_config",
    # Exceptions
    "ColdflowError",
    "InvalidArgumentError",
    "InvalidObserverError",
    "InvalidPeriodError",
    "InvalidSourceError",
    "OperatorError",
    # Introspection
    "describe",
    "find_ultimate_source",
    "iter_lineage",
]
