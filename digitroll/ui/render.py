"""Rich rendering of a slot strip.

A terminal cell cannot show half a digit, so each numeric slot draws the
digit nearest its current scroll position, styled as ``rolling`` while the
slot is moving.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from rich.text import Text

from ..engine.slot import SlotAnimator
from ..engine.strip import SlotStrip
from ..theme import DEFAULT_STYLES, DigitStyles


@dataclass(frozen=True)
class SlotSize:
    width: float
    height: float


# (slot size, character, is_numeric, default content) -> content to draw
SlotBuilder = Callable[[SlotSize, str, bool, Text], Text]


def slot_char(slot: SlotAnimator) -> str:
    """Character drawn for *slot* at its current position."""
    digit = slot.visible_digit
    return slot.char if digit is None else str(digit)


def render_slot(
    slot: SlotAnimator,
    size: SlotSize,
    builder: Optional[SlotBuilder] = None,
    styles: DigitStyles = DEFAULT_STYLES,
) -> Text:
    """Render one slot, passing the default content through *builder* if given."""
    char = slot_char(slot)
    if not slot.is_numeric:
        style = styles.symbol
    elif slot.animating:
        style = styles.rolling
    else:
        style = styles.digit
    content = Text(char, style=style)
    if builder is None:
        return content
    return builder(size, char, slot.is_numeric, content)


def render_strip(
    strip: SlotStrip,
    builder: Optional[SlotBuilder] = None,
    styles: DigitStyles = DEFAULT_STYLES,
) -> Text:
    """Render prefix, sign, every slot and suffix on one line."""
    animation = strip.animation
    size = SlotSize(width=animation.slot_width, height=animation.slot_height)

    t = Text()
    if animation.prefix:
        t.append(animation.prefix, style=styles.affix)
    if strip.negative:
        t.append("-", style=styles.sign)
    for slot in strip:
        t.append_text(render_slot(slot, size, builder, styles))
    if animation.suffix:
        t.append(animation.suffix, style=styles.affix)
    return t
