"""Unit tests for projection operators."""

from fractions import Fraction

import pytest

from coldflow import InvalidArgumentError, OperatorError, multiply, of, project
from tests.utils import Recorder


@pytest.mark.unit
@pytest.mark.operators
def test_multiply_scales_each_value():
    """[1, 2, 3] multiplied by 5 emits [5, 10, 15] in order"""
    recorder = Recorder()

    multiply(of(1, 2, 3), 5).subscribe(recorder)

    assert recorder.values == [5, 10, 15]


@pytest.mark.unit
@pytest.mark.operators
def test_multiply_emits_exactly_one_value_per_upstream_value():
    """Projection never drops or duplicates values"""
    recorder = Recorder()

    multiply(of(0, 0, 7, -1), 0).subscribe(recorder)

    assert recorder.values == [0, 0, 0, 0]


@pytest.mark.unit
@pytest.mark.operators
def test_multiply_uses_float_arithmetic_for_floats():
    """Float results follow IEEE-754 double precision"""
    recorder = Recorder()

    multiply(of(0.1), 3).subscribe(recorder)

    assert recorder.values == [0.30000000000000004]


@pytest.mark.unit
@pytest.mark.operators
def test_multiply_does_not_overflow_integers():
    """Integer products are exact"""
    recorder = Recorder()

    multiply(of(2**62), 2**62).subscribe(recorder)

    assert recorder.values == [2**124]


@pytest.mark.unit
@pytest.mark.operators
def test_multiply_accepts_any_number_type():
    """Factors may be any numbers.Number"""
    recorder = Recorder()

    multiply(of(3), Fraction(1, 3)).subscribe(recorder)

    assert recorder.values == [Fraction(1)]


@pytest.mark.unit
@pytest.mark.operators
def test_multiply_rejects_non_numeric_factor():
    """A non-numeric factor fails when the operator is applied"""
    with pytest.raises(InvalidArgumentError):
        multiply(of(1), "3")


@pytest.mark.unit
@pytest.mark.operators
def test_multiply_reports_values_that_cannot_be_multiplied():
    """Multiplying an unsupported value raises OperatorError"""
    with pytest.raises(OperatorError) as excinfo:
        multiply(of(None), 2).subscribe(Recorder())

    assert excinfo.value.operator == "multiply(2)"
    assert isinstance(excinfo.value.__cause__, TypeError)


@pytest.mark.unit
@pytest.mark.operators
def test_project_applies_function():
    """project() emits fn(value) for each value"""
    recorder = Recorder()

    project(of(1, 2, 3), lambda n: n * n).subscribe(recorder)

    assert recorder.values == [1, 4, 9]


@pytest.mark.unit
@pytest.mark.operators
def test_project_rejects_non_callable():
    """project() needs a callable"""
    with pytest.raises(InvalidArgumentError):
        project(of(1), 5)
