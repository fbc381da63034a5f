"""Rich rendering for slot strips."""

from .render import SlotSize, SlotBuilder, render_slot, render_strip, slot_char
from .preview import play_values

__all__ = [
    "SlotSize",
    "SlotBuilder",
    "render_slot",
    "render_strip",
    "slot_char",
    "play_values",
]
