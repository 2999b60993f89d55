"""
coldflow Observable Package
===========================

- `Observable` - a cold stream wrapping one subscription procedure
- `Stream` - an Observable with chainable operator methods
- `Subscribable` - the protocol accepted wherever a source is expected
"""

from .types import Observer, Policy, PolicyFactory, Subscribable, SubscribeProcedure
from .core import Observable, as_observable, ensure_observer
from .stream import Stream

__all__ = [
    "Observable",
    "Observer",
    "Policy",
    "PolicyFactory",
    "Stream",
    "Subscribable",
    "SubscribeProcedure",
    "as_observable",
    "ensure_observer",
]
