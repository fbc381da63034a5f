"""Tests for digitroll.ui.preview."""

import threading
from io import StringIO

from rich.console import Console

from digitroll.config import AnimationConfig, FormatConfig
from digitroll.theme import DigitStyles
from digitroll.ui.preview import play_values


def _capture_console() -> Console:
    return Console(file=StringIO(), width=60, force_terminal=False)


class SteppingClock:
    """Clock that advances whenever the preview sleeps."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = 0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps += 1
        self.now += seconds


def test_plays_every_value_to_the_end():
    clock = SteppingClock()
    con = _capture_console()
    strip = play_values(
        [95, 96, 101],
        FormatConfig(),
        AnimationConfig(duration=0.2, suffix=" pts"),
        console=con,
        clock=clock,
        sleep=clock.sleep,
    )
    assert strip.text == "101"
    assert not strip.animating
    assert clock.sleeps > 0
    assert "101 pts" in con.file.getvalue()


def test_skip_settles_immediately():
    clock = SteppingClock()
    skip = threading.Event()
    skip.set()
    strip = play_values(
        [0, 9],
        FormatConfig(),
        AnimationConfig(duration=5.0),
        console=_capture_console(),
        skip=skip,
        clock=clock,
        sleep=clock.sleep,
    )
    assert strip.text == "9"
    assert clock.sleeps == 0


def test_custom_styles_are_used_for_every_frame():
    clock = SteppingClock()
    con = Console(file=StringIO(), width=60, force_terminal=True, color_system="truecolor")
    play_values(
        [1, 2],
        FormatConfig(),
        AnimationConfig(duration=0.1),
        console=con,
        styles=DigitStyles(digit="#ff0000", rolling="#ff0000"),
        clock=clock,
        sleep=clock.sleep,
    )
    output = con.file.getvalue()
    # Truecolor escape for #ff0000.
    assert "38;2;255;0;0" in output
    assert "38;2;232;232;240" not in output
