"""digitroll Textual widgets."""

from .digits import AnimatedDigits

__all__ = [
    "AnimatedDigits",
]
