"""Exact decimal arithmetic for accumulated display values.

Every operand is split into an integer mantissa and a base-10 scale, the
operation runs on Python ints, and the result is rescaled back into a
``Decimal``. Floats are read through their shortest repr, so ``0.1`` means
one tenth and not the nearest binary fraction::

    >>> add(0.1, 0.2)
    Decimal('0.3')
    >>> add(99.99, 0.01)
    Decimal('100')
"""

import decimal
from decimal import Decimal
from fractions import Fraction
from typing import Union

from .errors import DivisionByZero

Number = Union[int, float, Decimal, str]

# Significant digits kept when a quotient does not terminate.
DIVISION_PRECISION = 28


def to_decimal(value: Number) -> Decimal:
    """Convert *value* to a finite ``Decimal`` without binary rounding error.

    Raises:
        TypeError: *value* is not a supported numeric type.
        ValueError: *value* is nan/inf or an unparseable string.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a numeric value")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except decimal.InvalidOperation:
            raise ValueError(f"not a number: {value!r}") from None
    else:
        raise TypeError(f"unsupported numeric type: {type(value).__name__}")
    if not result.is_finite():
        raise ValueError(f"value must be finite, got {value!r}")
    return result


def fraction_digits(value: Number) -> int:
    """Number of digits after the decimal point in *value*'s exact form."""
    return _split(value)[1]


def _split(value: Number) -> tuple[int, int]:
    """Return ``(mantissa, scale)`` with ``value == mantissa / 10**scale``."""
    sign, digits, exponent = to_decimal(value).as_tuple()
    mantissa = int("".join(str(d) for d in digits) or "0")
    if sign:
        mantissa = -mantissa
    if exponent >= 0:
        return mantissa * 10 ** exponent, 0
    return mantissa, -exponent


def _join(mantissa: int, scale: int) -> Decimal:
    """Rebuild a Decimal, dropping trailing fractional zeros."""
    while scale > 0 and mantissa % 10 == 0:
        mantissa //= 10
        scale -= 1
    if scale == 0:
        return Decimal(mantissa)
    return Decimal(f"{mantissa}E-{scale}")


def _align(a: Number, b: Number) -> tuple[int, int, int]:
    ma, sa = _split(a)
    mb, sb = _split(b)
    scale = max(sa, sb)
    return ma * 10 ** (scale - sa), mb * 10 ** (scale - sb), scale


def add(a: Number, b: Number) -> Decimal:
    """Exact ``a + b``."""
    ma, mb, scale = _align(a, b)
    return _join(ma + mb, scale)


def subtract(a: Number, b: Number) -> Decimal:
    """Exact ``a - b``."""
    ma, mb, scale = _align(a, b)
    return _join(ma - mb, scale)


def multiply(a: Number, b: Number) -> Decimal:
    """Exact ``a * b``."""
    ma, sa = _split(a)
    mb, sb = _split(b)
    return _join(ma * mb, sa + sb)


def divide(a: Number, b: Number) -> Decimal:
    """``a / b``, exact whenever the quotient terminates in base 10.

    Non-terminating quotients are rounded half-even to
    ``DIVISION_PRECISION`` significant digits.

    Raises:
        DivisionByZero: *b* is zero.
    """
    ma, sa = _split(a)
    mb, sb = _split(b)
    if mb == 0:
        raise DivisionByZero(f"cannot divide {a!r} by zero")

    quotient = Fraction(ma * 10 ** sb, mb * 10 ** sa)
    num, den = quotient.numerator, quotient.denominator

    twos = fives = 0
    rest = den
    while rest % 2 == 0:
        rest //= 2
        twos += 1
    while rest % 5 == 0:
        rest //= 5
        fives += 1

    if rest == 1:
        scale = max(twos, fives)
        return _join(num * 10 ** scale // den, scale)

    with decimal.localcontext() as ctx:
        ctx.prec = DIVISION_PRECISION
        ctx.rounding = decimal.ROUND_HALF_EVEN
        rounded = Decimal(num) / Decimal(den)
    return _join(*_split(rounded))
