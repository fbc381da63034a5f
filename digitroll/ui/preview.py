"""Play a sequence of values through a slot strip in the terminal.

Renders with ``rich.live.Live`` at ~30fps. Setting *skip* jumps every
remaining transition straight to its final value.
"""

import threading
import time
from typing import Callable, Iterable, Optional

from rich.console import Console
from rich.live import Live

from ..config import AnimationConfig, FormatConfig
from ..engine.strip import SlotStrip
from ..precision import Number
from ..theme import DEFAULT_STYLES, DigitStyles
from .render import SlotBuilder, render_strip

FPS = 30


def play_values(
    values: Iterable[Number],
    format_config: Optional[FormatConfig] = None,
    animation: Optional[AnimationConfig] = None,
    console: Optional[Console] = None,
    builder: Optional[SlotBuilder] = None,
    styles: DigitStyles = DEFAULT_STYLES,
    hold: float = 0.0,
    skip: Optional[threading.Event] = None,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> SlotStrip:
    """Animate *values* one after another and return the final strip.

    Args:
        values: Numbers to show, in order.
        format_config: Formatting for every value.
        animation: Timing, slot size, prefix and suffix.
        console: Rich Console (defaults to a new one).
        builder: Optional slot render hook.
        styles: Rich styles for digits, symbols, sign and affixes.
        hold: Seconds to pause on each settled value.
        skip: Event that, once set, disables animation.
        clock: Time source for transitions.
        sleep: Frame delay function.
    """
    con = console or Console()
    strip = SlotStrip(format_config, animation, clock=clock)
    skip = skip or threading.Event()
    frame = 1 / FPS

    with Live(console=con, refresh_per_second=FPS, transient=False) as live:
        for value in values:
            strip.update(value)
            while strip.animating:
                if skip.is_set():
                    strip.settle()
                    break
                strip.tick()
                live.update(render_strip(strip, builder, styles))
                sleep(frame)
            live.update(render_strip(strip, builder, styles))
            if hold and not skip.is_set():
                sleep(hold)
    return strip
