"""
coldflow Chain Utilities
========================

Every operator records the Observable it was derived from, so a composed
stream forms a chain back to its original source:

    source <- ignore_even <- multiply(10)

These helpers walk that chain. They only read the ``upstream`` references and
never subscribe to anything.
"""

from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from coldflow.observable.core import Observable


def iter_lineage(observable: "Observable[Any]") -> Iterator["Observable[Any]"]:
    """
    Yield ``observable`` followed by each of its ancestors, nearest first.

    Stops early if a cycle is found.
    """
    visited = set()
    current = observable

    while current is not None:
        if id(current) in visited:
            break  # Cycle detected
        visited.add(id(current))
        yield current
        current = getattr(current, "upstream", None)


def find_ultimate_source(observable: "Observable[Any]") -> "Observable[Any]":
    """Return the root Observable of the chain ``observable`` belongs to."""
    root = observable
    for root in iter_lineage(observable):
        pass
    return root


def describe(observable: "Observable[Any]") -> str:
    """
    Render the chain as labels joined by ``<-``, most derived first.

    Example:
        ```python
        stream = of(1, 2, 3).ignore_even().multiply(10)
        describe(stream)  # "multiply(10) <- ignore_even <- of"
        ```
    """
    return " <- ".join(node.label for node in iter_lineage(observable))
