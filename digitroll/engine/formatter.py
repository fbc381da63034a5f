"""Number -> display string pipeline.

The sign is reported separately and never appears in the display string,
so a value crossing zero keeps the same slot layout.
"""

from dataclasses import dataclass
from decimal import Decimal

from ..config import FormatConfig
from ..precision import Number, to_decimal

DEFAULT_FORMAT = FormatConfig()


@dataclass(frozen=True)
class FormattedValue:
    """A display string plus the sign it was stripped of."""

    text: str
    negative: bool = False

    def __len__(self) -> int:
        return len(self.text)


def group_digits(digits: str, symbol: str, size: int) -> str:
    """Insert *symbol* between groups of *size* digits, counted from the right.

    >>> group_digits("1234567", ",", 3)
    '1,234,567'
    """
    if not symbol or len(digits) <= size:
        return digits
    groups = []
    end = len(digits)
    while end > 0:
        groups.append(digits[max(end - size, 0):end])
        end -= size
    return symbol.join(reversed(groups))


def _fit_fraction(fraction: str, count: int) -> str:
    # Truncates, never rounds: 0.987 at two digits shows "98".
    if len(fraction) >= count:
        return fraction[:count]
    return fraction + "0" * (count - len(fraction))


def format_number(value: Number, config: FormatConfig = DEFAULT_FORMAT) -> FormattedValue:
    """Format *value* into slot characters according to *config*."""
    number = to_decimal(value)
    negative = number < 0
    plain = format(abs(number), "f")
    integer, _, fraction = plain.partition(".")
    integer = integer.lstrip("0") or "0"

    if config.enable_grouping:
        integer = group_digits(integer, config.grouping_symbol, config.group_size)

    if config.fraction_digits > 0:
        text = (
            integer
            + config.decimal_separator
            + _fit_fraction(fraction, config.fraction_digits)
        )
    else:
        text = integer

    if config.custom_formatter is not None:
        text = config.custom_formatter(text)
    return FormattedValue(text=text, negative=negative)


def parse_display(text: str, config: FormatConfig = DEFAULT_FORMAT, negative: bool = False) -> Decimal:
    """Read the digits of a display string back into a ``Decimal``.

    Only the default pipeline is invertible; output of a custom formatter is
    not understood.
    """
    if config.enable_grouping and config.grouping_symbol:
        text = text.replace(config.grouping_symbol, "")
    if config.fraction_digits > 0 and config.decimal_separator:
        integer, _, fraction = text.rpartition(config.decimal_separator)
        text = f"{integer}.{fraction}"
    result = Decimal(text)
    return -result if negative else result
