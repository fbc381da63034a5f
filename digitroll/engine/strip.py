"""The row of slots behind one animated number."""

import logging
import time
from typing import Iterator, List, Optional

from ..config import AnimationConfig, FormatConfig
from ..precision import Number
from .diff import DiffOutcome, Patch, Rebuild, diff_display
from .formatter import FormattedValue, format_number
from .slot import Clock, SlotAnimator

_log = logging.getLogger(__name__)


class SlotStrip:
    """Formats values, diffs them against the current slots and applies the result.

    Same-length updates keep every slot (and any transition in flight);
    length changes throw all slots away and build new ones at rest.
    """

    def __init__(
        self,
        format_config: Optional[FormatConfig] = None,
        animation: Optional[AnimationConfig] = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.format_config = format_config or FormatConfig()
        self.animation = animation or AnimationConfig()
        self._clock = clock
        self._slots: List[SlotAnimator] = []
        self._formatted: Optional[FormattedValue] = None
        self._stale = False

    # -- Views -------------------------------------------------------------

    @property
    def text(self) -> str:
        """Characters currently assigned to the slots."""
        return "".join(slot.char for slot in self._slots)

    @property
    def negative(self) -> bool:
        """Sign indicator for the host to render next to the slots."""
        return self._formatted is not None and self._formatted.negative

    @property
    def formatted(self) -> Optional[FormattedValue]:
        return self._formatted

    @property
    def animating(self) -> bool:
        return any(slot.animating for slot in self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[SlotAnimator]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> SlotAnimator:
        return self._slots[index]

    # -- Updates -----------------------------------------------------------

    def update(self, value: Number, now: Optional[float] = None) -> DiffOutcome:
        """Show *value*, returning the diff outcome that was applied."""
        formatted = format_number(value, self.format_config)
        previous = None if self._stale or self._formatted is None else self.text
        outcome = diff_display(previous, formatted.text)
        self._formatted = formatted
        self.apply(outcome, now)
        return outcome

    def apply(self, outcome: DiffOutcome, now: Optional[float] = None) -> None:
        """Execute a diff outcome against the slots."""
        if isinstance(outcome, Patch) and len(outcome) != len(self._slots):
            # A patch built against another slot count cannot be applied in place.
            outcome = Rebuild(chars=tuple(char for _, char in outcome.commands))

        if isinstance(outcome, Rebuild):
            _log.debug("rebuild %d -> %d slots", len(self._slots), len(outcome))
            self._slots = [self._make_slot(char) for char in outcome.chars]
            self._stale = False
            return

        if now is None:
            now = self._clock()
        for index, char in outcome.commands:
            self._slots[index].set_value(char, now)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug("patched slots %s", [index for index, _ in outcome.changed])

    def invalidate(self) -> None:
        """Force the next update to rebuild every slot.

        Hosts call this for any external change that affects slot geometry
        or formatting (config reload, scale change).
        """
        self._stale = True

    def reconfigure(
        self,
        format_config: Optional[FormatConfig] = None,
        animation: Optional[AnimationConfig] = None,
    ) -> None:
        """Swap configuration; takes effect on the next update."""
        if format_config is not None:
            self.format_config = format_config
        if animation is not None:
            self.animation = animation
        self.invalidate()

    def tick(self, now: Optional[float] = None) -> bool:
        """Advance every slot to *now*; return whether any is still moving."""
        if now is None:
            now = self._clock()
        for slot in self._slots:
            slot.tick(now)
        return self.animating

    def settle(self) -> None:
        for slot in self._slots:
            slot.settle()

    def _make_slot(self, char: str) -> SlotAnimator:
        return SlotAnimator.from_config(
            char,
            self.animation,
            loop=self.format_config.loop,
            clock=self._clock,
        )
