"""Animated number widget.

Binds a value (or a ``ValueController``) to a slot strip and ticks the
strip at ~30fps while any slot is rolling; the timer pauses once every
slot is at rest.
"""

from decimal import Decimal
from typing import Optional

from rich.text import Text
from textual.widgets import Static

from ..config import AnimationConfig, FormatConfig
from ..controller import ValueController
from ..engine.strip import SlotStrip
from ..precision import Number, to_decimal
from ..theme import DEFAULT_STYLES, DigitStyles
from ..ui.render import SlotBuilder, render_strip


class AnimatedDigits(Static):
    """Odometer-style number; each character rolls independently."""

    DEFAULT_CSS = """
    AnimatedDigits {
        height: 1;
        width: auto;
    }
    """

    def __init__(
        self,
        value: Optional[Number] = None,
        *,
        controller: Optional[ValueController] = None,
        format_config: Optional[FormatConfig] = None,
        animation: Optional[AnimationConfig] = None,
        builder: Optional[SlotBuilder] = None,
        styles: DigitStyles = DEFAULT_STYLES,
        **kwargs,
    ) -> None:
        if value is None and controller is None:
            raise ValueError("AnimatedDigits needs a value or a controller")
        super().__init__(**kwargs)
        # The controller wins when both are given.
        self._controller = controller
        self._number = controller.value if controller is not None else to_decimal(value)
        self._slot_builder = builder
        self._digit_styles = styles
        self._digit_strip = SlotStrip(format_config, animation)
        self._digit_strip.update(self._number)
        self._unsubscribe = None
        self._roll_timer = None

    @property
    def value(self) -> Decimal:
        return self._number

    @property
    def digit_strip(self) -> SlotStrip:
        return self._digit_strip

    @property
    def display_text(self) -> str:
        return self._digit_strip.text

    def on_mount(self) -> None:
        if self._controller is not None:
            self._unsubscribe = self._controller.subscribe(self.set_value)
            # Catch up on changes made between construction and mount.
            if self._controller.value != self._number:
                self.set_value(self._controller.value)
        self._roll_timer = self.set_interval(1 / 30, self._step, pause=not self._digit_strip.animating)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._roll_timer is not None:
            self._roll_timer.stop()

    def set_value(self, value: Number) -> None:
        """Show *value*, rolling the slots that changed."""
        self._number = to_decimal(value)
        self._digit_strip.update(self._number)
        self._kick()

    def reconfigure(
        self,
        format_config: Optional[FormatConfig] = None,
        animation: Optional[AnimationConfig] = None,
    ) -> None:
        """Swap configuration and rebuild every slot at rest."""
        self._digit_strip.reconfigure(format_config, animation)
        self._digit_strip.update(self._number)
        self.refresh()

    def skip_animation(self) -> None:
        """Jump to the final value immediately."""
        self._digit_strip.settle()
        if self._roll_timer is not None:
            self._roll_timer.pause()
        self.refresh()

    def _kick(self) -> None:
        if self._digit_strip.animating and self._roll_timer is not None:
            self._roll_timer.resume()
        self.refresh()

    def _step(self) -> None:
        if not self._digit_strip.tick() and self._roll_timer is not None:
            self._roll_timer.pause()
        self.refresh()

    def render(self) -> Text:
        return render_strip(self._digit_strip, self._slot_builder, self._digit_styles)
