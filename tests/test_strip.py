"""Tests for digitroll.engine.strip."""

from digitroll.config import AnimationConfig, FormatConfig
from digitroll.engine.diff import Patch, Rebuild
from digitroll.engine.slot import SlotPhase
from digitroll.engine.strip import SlotStrip


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def _strip(fraction_digits=0, grouping=False, loop=True, clock=None):
    return SlotStrip(
        FormatConfig(fraction_digits=fraction_digits, enable_grouping=grouping, loop=loop),
        AnimationConfig(duration=1.0, curve="linear", slot_height=1.0),
        clock=clock or FakeClock(),
    )


def test_first_update_builds_slots_at_rest():
    strip = _strip()
    outcome = strip.update(123)
    assert isinstance(outcome, Rebuild)
    assert strip.text == "123"
    assert len(strip) == 3
    assert all(slot.phase is SlotPhase.IDLE for slot in strip)
    assert not strip.animating


def test_same_length_update_patches_and_animates():
    strip = _strip()
    strip.update(129)
    first_slot = strip[0]
    outcome = strip.update(130)
    assert isinstance(outcome, Patch)
    assert strip[0] is first_slot
    assert strip.text == "130"
    assert strip.animating
    assert strip[0].phase is SlotPhase.IDLE
    assert strip[1].phase is SlotPhase.ANIMATING


def test_length_change_rebuilds_idle():
    strip = _strip()
    strip.update(9)
    outcome = strip.update(10)
    assert isinstance(outcome, Rebuild)
    assert strip.text == "10"
    assert [slot.phase for slot in strip] == [SlotPhase.IDLE, SlotPhase.IDLE]
    assert [slot.offset for slot in strip] == [1.0, 0.0]


def test_slot_count_tracks_display_length():
    strip = _strip(fraction_digits=2, grouping=True)
    for value in (1, 999.5, 1000, 12345678.9, 0.01):
        strip.update(value)
        assert len(strip) == len(strip.formatted.text)


def test_sign_does_not_take_a_slot():
    strip = _strip()
    strip.update(5)
    outcome = strip.update(-5)
    assert isinstance(outcome, Patch)
    assert strip.negative is True
    assert strip.text == "5"


def test_tick_finishes_transitions():
    clock = FakeClock()
    strip = _strip(clock=clock)
    strip.update(1)
    strip.update(4)
    clock.now = 0.5
    assert strip.tick() is True
    clock.now = 1.0
    assert strip.tick() is False
    assert strip[0].visible_digit == 4


def test_invalidate_forces_rebuild():
    strip = _strip()
    strip.update(12)
    strip.invalidate()
    assert isinstance(strip.update(34), Rebuild)
    assert isinstance(strip.update(56), Patch)


def test_reconfigure_applies_on_next_update():
    strip = _strip()
    strip.update(1234)
    strip.reconfigure(format_config=FormatConfig(enable_grouping=True))
    assert isinstance(strip.update(1234), Rebuild)
    assert strip.text == "1,234"


def test_mismatched_patch_is_applied_as_rebuild():
    strip = _strip()
    strip.update(12)
    strip.apply(Patch(commands=((0, "7"), (1, "8"), (2, "9"))))
    assert strip.text == "789"
    assert not strip.animating


def test_settle():
    strip = _strip()
    strip.update(11)
    strip.update(99)
    strip.settle()
    assert not strip.animating
    assert [slot.visible_digit for slot in strip] == [9, 9]
