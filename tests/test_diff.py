"""Tests for digitroll.engine.diff."""

from digitroll.engine.diff import Patch, Rebuild, diff_display


def test_no_previous_rebuilds():
    outcome = diff_display(None, "123")
    assert isinstance(outcome, Rebuild)
    assert outcome.chars == ("1", "2", "3")


def test_same_length_patches_every_slot():
    outcome = diff_display("129", "130")
    assert isinstance(outcome, Patch)
    assert outcome.commands == ((0, "1"), (1, "3"), (2, "0"))


def test_changed_lists_only_differing_slots():
    outcome = diff_display("1,299", "1,300")
    assert list(outcome.changed) == [(2, "3"), (3, "0"), (4, "0")]


def test_length_change_rebuilds():
    assert isinstance(diff_display("9", "10"), Rebuild)
    assert isinstance(diff_display("100", "99"), Rebuild)


def test_identical_strings_patch():
    outcome = diff_display("42", "42")
    assert isinstance(outcome, Patch)
    assert list(outcome.changed) == []


def test_empty_strings():
    assert isinstance(diff_display("", ""), Patch)
    assert isinstance(diff_display(None, ""), Rebuild)
