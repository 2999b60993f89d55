"""Unit tests for chain introspection helpers."""

import pytest

from coldflow import Observable, describe, find_ultimate_source, iter_lineage, multiply, of


@pytest.mark.unit
@pytest.mark.observable
def test_iter_lineage_walks_from_derived_to_source():
    """Lineage lists the stream and its ancestors, nearest first"""
    source = of(1, 2, 3)
    odd = source.ignore_even()
    scaled = odd.multiply(10)

    assert list(iter_lineage(scaled)) == [scaled, odd, source]


@pytest.mark.unit
@pytest.mark.observable
def test_find_ultimate_source():
    """The root of a chain is its original source"""
    source = of(1)

    assert find_ultimate_source(source.multiply(2).ignore_even()) is source
    assert find_ultimate_source(source) is source


@pytest.mark.unit
@pytest.mark.observable
def test_describe_renders_labels():
    """describe() joins labels with arrows, most derived first"""
    stream = of(1, 2, 3).ignore_even().multiply(10)

    assert describe(stream) == "multiply(10) <- ignore_even <- of"
    assert repr(stream) == "Stream(multiply(10) <- ignore_even <- of)"


@pytest.mark.unit
@pytest.mark.observable
def test_describe_names_callables_and_bare_procedures():
    """Callable arguments and wrapped procedures appear by name"""

    def numbers(observer):
        observer(1)

    assert describe(multiply(numbers, 2)) == "multiply(2) <- numbers"
    assert describe(of(1).map(str)) == "project(str) <- of"


@pytest.mark.unit
@pytest.mark.observable
def test_iter_lineage_stops_on_cycles():
    """A malformed cycle of upstream references does not loop forever"""

    class Node:
        def __init__(self, label):
            self.label = label
            self.upstream = None

    a, b = Node("a"), Node("b")
    a.upstream, b.upstream = b, a

    assert [node.label for node in iter_lineage(a)] == ["a", "b"]


@pytest.mark.unit
@pytest.mark.observable
def test_lineage_never_subscribes():
    """Introspection does not run any procedure"""
    runs = []
    stream = multiply(Observable(lambda observer: runs.append(observer)), 3)

    describe(stream)
    list(iter_lineage(stream))

    assert runs == []
