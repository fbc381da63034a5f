"""Per-slot scroll state machine.

Each numeric slot is a vertical strip of digits seen through a one-digit
window. ``offset`` is where the strip must end up; ``position`` is where it
is drawn right now. In loop mode the strip repeats 0..9 forever and only
ever scrolls forward, so ``offset`` grows without bound. Otherwise the strip
holds 0..9 once and ``offset`` is the absolute position of the digit.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from ..config import AnimationConfig
from ..easing import get_curve

_DIGITS = "0123456789"

Clock = Callable[[], float]


class SlotPhase(str, Enum):
    IDLE = "idle"
    ANIMATING = "animating"


def is_numeric(char: str) -> bool:
    """True iff *char* is a single base-10 digit.

    Anything else (separators, custom-formatter output) is a symbol slot.
    """
    return len(char) == 1 and char in _DIGITS


def scroll_delta(old: int, new: int, height: float, loop: bool) -> float:
    """Scroll distance for a digit change.

    Loop mode returns an increment to add to the running offset (always
    forward: 9 -> 1 travels 9, 0, 1). Non-loop mode returns the absolute
    offset of *new*.
    """
    if not loop:
        return new * height
    steps = 10 - old + new if old > new else new - old
    return steps * height


def rest_offset(char: str, height: float) -> float:
    """Offset at which a freshly built slot shows *char* without moving."""
    return int(char) * height if is_numeric(char) else 0.0


@dataclass
class SlotState:
    char: str
    previous: str
    offset: float = 0.0
    phase: SlotPhase = SlotPhase.IDLE

    @property
    def is_numeric(self) -> bool:
        return is_numeric(self.char)


class SlotAnimator:
    """Drives one slot between ``idle`` and ``animating``.

    Time is read from *clock* unless passed explicitly, so hosts can feed
    frame timestamps and tests can use a fake clock.
    """

    def __init__(
        self,
        char: str,
        *,
        height: float = 1.0,
        loop: bool = True,
        duration: float = 0.3,
        curve: str = "ease_in_out",
        clock: Clock = time.monotonic,
    ) -> None:
        self.height = height
        self.loop = loop
        self.duration = duration
        self._curve = get_curve(curve)
        self._clock = clock
        offset = rest_offset(char, height)
        self.state = SlotState(char=char, previous=char, offset=offset)
        self._position = offset
        self._start_position = offset
        self._start_time = 0.0

    @classmethod
    def from_config(
        cls,
        char: str,
        animation: AnimationConfig,
        loop: bool = True,
        clock: Clock = time.monotonic,
    ) -> "SlotAnimator":
        return cls(
            char,
            height=animation.slot_height,
            loop=loop,
            duration=animation.duration,
            curve=animation.curve,
            clock=clock,
        )

    # -- Read-only views ---------------------------------------------------

    @property
    def char(self) -> str:
        return self.state.char

    @property
    def is_numeric(self) -> bool:
        return self.state.is_numeric

    @property
    def phase(self) -> SlotPhase:
        return self.state.phase

    @property
    def animating(self) -> bool:
        return self.state.phase is SlotPhase.ANIMATING

    @property
    def offset(self) -> float:
        return self.state.offset

    @property
    def position(self) -> float:
        return self._position

    @property
    def visible_digit(self) -> Optional[int]:
        """Digit under the slot window at the current position."""
        if not self.is_numeric:
            return None
        return int(round(self._position / self.height)) % 10

    # -- Transitions -------------------------------------------------------

    def set_value(self, char: str, now: Optional[float] = None) -> None:
        """Move the slot to *char*.

        Calls arriving mid-flight add their delta to the in-flight target and
        restart the interpolation from the current position.
        """
        if now is None:
            now = self._clock()
        self.tick(now)

        state = self.state
        old = state.char
        state.previous, state.char = old, char

        if not is_numeric(char):
            # Symbols swap in place.
            self._stop()
            return
        if char == old:
            return

        if is_numeric(old):
            old_digit = int(old)
        else:
            old_digit = int(round(state.offset / self.height)) % 10
        delta = scroll_delta(old_digit, int(char), self.height, self.loop)
        target = state.offset + delta if self.loop else delta
        if target == state.offset and not self.animating:
            return

        state.offset = target
        self._start_position = self._position
        self._start_time = now
        state.phase = SlotPhase.ANIMATING
        if self.duration <= 0:
            self._stop()

    def tick(self, now: Optional[float] = None) -> float:
        """Advance the transition to *now* and return the drawn position."""
        if not self.animating:
            return self._position
        if now is None:
            now = self._clock()
        progress = (now - self._start_time) / self.duration
        if progress >= 1.0:
            self._stop()
            return self._position
        eased = self._curve(max(progress, 0.0))
        span = self.state.offset - self._start_position
        self._position = self._start_position + span * eased
        return self._position

    def settle(self) -> None:
        """Jump straight to the target."""
        self._stop()

    def _stop(self) -> None:
        self._position = self.state.offset
        self.state.phase = SlotPhase.IDLE

    def __repr__(self) -> str:
        return (
            f"SlotAnimator(char={self.char!r}, offset={self.offset}, "
            f"phase={self.phase.value})"
        )
