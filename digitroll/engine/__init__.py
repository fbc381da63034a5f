"""Formatting, diffing and per-slot animation."""

from .formatter import FormattedValue, format_number, group_digits, parse_display
from .diff import Patch, Rebuild, DiffOutcome, diff_display
from .slot import SlotAnimator, SlotPhase, SlotState, is_numeric, scroll_delta
from .strip import SlotStrip

__all__ = [
    "FormattedValue",
    "format_number",
    "group_digits",
    "parse_display",
    "Patch",
    "Rebuild",
    "DiffOutcome",
    "diff_display",
    "SlotAnimator",
    "SlotPhase",
    "SlotState",
    "is_numeric",
    "scroll_delta",
    "SlotStrip",
]
