"""Exceptions raised by digitroll."""


class DigitrollError(Exception):
    """Base class for all digitroll errors."""


class InvalidConfig(DigitrollError, ValueError):
    """A format or animation configuration was rejected at construction."""


class DivisionByZero(DigitrollError, ZeroDivisionError):
    """Exact division with a zero divisor."""
