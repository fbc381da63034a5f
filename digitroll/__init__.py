"""digitroll - odometer-style animated numbers for the terminal."""

__version__ = "0.1.0"

from .config import AnimationConfig, ConfigManager, FormatConfig
from .controller import ValueChanged, ValueController
from .engine import FormattedValue, Patch, Rebuild, SlotAnimator, SlotStrip, diff_display, format_number
from .errors import DigitrollError, DivisionByZero, InvalidConfig

__all__ = [
    "AnimationConfig",
    "ConfigManager",
    "FormatConfig",
    "ValueChanged",
    "ValueController",
    "FormattedValue",
    "Patch",
    "Rebuild",
    "SlotAnimator",
    "SlotStrip",
    "diff_display",
    "format_number",
    "DigitrollError",
    "DivisionByZero",
    "InvalidConfig",
]
