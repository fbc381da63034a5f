"""digitroll color system.

All hex values live here. Renderers never hardcode colors.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    """Text colors used when drawing slots."""

    text_bright: str = "#e8e8f0"
    text_primary: str = "#c9d1d9"
    text_dim: str = "#6e7681"
    rolling: str = "#00d4e5"    # digits mid-transition
    negative: str = "#e55a6e"


PALETTE = Palette()


@dataclass(frozen=True)
class DigitStyles:
    """Rich style strings for each part of a rendered number."""

    digit: str = f"bold {PALETTE.text_bright}"
    rolling: str = f"bold {PALETTE.rolling}"
    symbol: str = PALETTE.text_primary
    sign: str = f"bold {PALETTE.negative}"
    affix: str = f"dim {PALETTE.text_dim}"


DEFAULT_STYLES = DigitStyles()
