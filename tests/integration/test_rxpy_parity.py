"""Compare emitted sequences with equivalent RxPY pipelines."""

import pytest

from coldflow import from_iterable, ignore_even, multiply

rx = pytest.importorskip("rx")
ops = pytest.importorskip("rx.operators")


def collect_rxpy(observable):
    received = []
    observable.subscribe(on_next=received.append)
    return received


def collect_coldflow(stream):
    received = []
    stream.subscribe(received.append)
    return received


SEQUENCES = [
    [],
    [1, 2, 3],
    [1, 2, 3, 4, 5],
    [-3, -2, -1, 0, 1],
    list(range(50)),
]


@pytest.mark.integration
@pytest.mark.operators
@pytest.mark.parametrize("values", SEQUENCES)
def test_multiply_matches_rxpy_map(values):
    """multiply() emits what RxPY's map emits"""
    expected = collect_rxpy(rx.from_iterable(values).pipe(ops.map(lambda v: v * 7)))

    assert collect_coldflow(multiply(from_iterable(values), 7)) == expected


@pytest.mark.integration
@pytest.mark.operators
@pytest.mark.parametrize("values", SEQUENCES)
def test_ignore_even_matches_rxpy_filter(values):
    """ignore_even() emits what RxPY's parity filter emits"""
    expected = collect_rxpy(
        rx.from_iterable(values).pipe(ops.filter(lambda v: v % 2 == 1))
    )

    assert collect_coldflow(ignore_even(from_iterable(values))) == expected


@pytest.mark.integration
@pytest.mark.operators
@pytest.mark.parametrize("values", SEQUENCES)
def test_chain_matches_rxpy_pipe(values):
    """ignore_even().multiply(10) emits what the equivalent RxPY pipe emits"""
    expected = collect_rxpy(
        rx.from_iterable(values).pipe(
            ops.filter(lambda v: v % 2 == 1), ops.map(lambda v: v * 10)
        )
    )

    assert collect_coldflow(from_iterable(values).ignore_even().multiply(10)) == expected
