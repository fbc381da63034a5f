"""Tests for digitroll.precision."""

from decimal import Decimal

import pytest

from digitroll.errors import DivisionByZero
from digitroll.precision import (
    add,
    divide,
    fraction_digits,
    multiply,
    subtract,
    to_decimal,
)


def test_add_avoids_float_drift():
    assert add(0.1, 0.2) == Decimal("0.3")
    assert str(add(0.1, 0.2)) == "0.3"


def test_add_rolls_over_to_integer():
    result = add(99.99, 0.01)
    assert result == 100
    assert str(result) == "100"


def test_add_mixed_int_and_fraction():
    assert add(1, 0.25) == Decimal("1.25")
    assert add(Decimal("1.005"), 2) == Decimal("3.005")


def test_chained_increments_do_not_drift():
    total = Decimal(0)
    for _ in range(1000):
        total = add(total, 0.1)
    assert total == 100


def test_subtract():
    assert subtract(0.3, 0.1) == Decimal("0.2")
    assert subtract(1, 1.5) == Decimal("-0.5")


def test_multiply():
    assert multiply(0.1, 3) == Decimal("0.3")
    assert multiply(1.1, 1.1) == Decimal("1.21")
    assert multiply(-2.5, 4) == -10


def test_divide_terminating_is_exact():
    assert divide(0.3, 0.1) == 3
    assert divide(1, 8) == Decimal("0.125")
    assert divide(99.99, 3) == Decimal("33.33")


def test_divide_non_terminating_rounds():
    result = divide(1, 3)
    assert str(result).startswith("0.3333333333")
    assert len(result.as_tuple().digits) == 28


@pytest.mark.parametrize("dividend", [0, 1, -5, 0.1, Decimal("123.456")])
def test_divide_by_zero(dividend):
    with pytest.raises(DivisionByZero):
        divide(dividend, 0)
    with pytest.raises(ZeroDivisionError):
        divide(dividend, 0.0)


def test_to_decimal_reads_float_repr():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("  2.50 ") == Decimal("2.50")


def test_to_decimal_rejects_bad_input():
    with pytest.raises(TypeError):
        to_decimal(True)
    with pytest.raises(TypeError):
        to_decimal([1])
    with pytest.raises(ValueError):
        to_decimal(float("inf"))
    with pytest.raises(ValueError):
        to_decimal("abc")


def test_fraction_digits():
    assert fraction_digits(1) == 0
    assert fraction_digits(0.125) == 3
    assert fraction_digits(Decimal("1E+3")) == 0
