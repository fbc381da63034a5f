"""Tests for digitroll.controller."""

from decimal import Decimal

import pytest

from digitroll.controller import ValueChanged, ValueController
from digitroll.errors import DivisionByZero


def test_add_then_reset_is_exact():
    controller = ValueController(99.99)
    controller.add(0.01)
    assert controller.value == 100
    assert str(controller.value) == "100"
    controller.reset(99.99)
    assert controller.value == Decimal("99.99")


def test_arithmetic_operations():
    controller = ValueController(0.1)
    controller.add(0.2)
    assert controller.value == Decimal("0.3")
    controller.multiply(3)
    assert controller.value == Decimal("0.9")
    controller.subtract(0.4)
    assert controller.value == Decimal("0.5")
    controller.divide(0.25)
    assert controller.value == 2


def test_each_call_publishes_once_in_order():
    controller = ValueController(0)
    seen = []
    controller.subscribe(lambda v: seen.append(("a", v)))
    controller.subscribe(lambda v: seen.append(("b", v)))
    controller.add(1)
    controller.add(1)
    assert seen == [("a", 1), ("b", 1), ("a", 2), ("b", 2)]


def test_reset_publishes_even_when_value_is_unchanged():
    controller = ValueController(5)
    seen = []
    controller.subscribe(seen.append)
    controller.reset(5)
    assert seen == [Decimal(5)]


def test_unsubscribe():
    controller = ValueController(0)
    seen = []
    unsubscribe = controller.subscribe(seen.append)
    controller.add(1)
    unsubscribe()
    controller.add(1)
    assert seen == [Decimal(1)]
    # unsubscribing twice is harmless
    controller.unsubscribe(seen.append)


def test_divide_by_zero_leaves_value_unchanged():
    controller = ValueController(7)
    seen = []
    controller.subscribe(seen.append)
    with pytest.raises(DivisionByZero):
        controller.divide(0)
    assert controller.value == 7
    assert seen == []


def test_disposed_controller_ignores_mutations():
    controller = ValueController(1)
    seen = []
    controller.subscribe(seen.append)
    controller.dispose()
    controller.add(1)
    controller.subtract(1)
    controller.multiply(3)
    controller.divide(0)
    controller.reset(42)
    assert controller.disposed
    assert controller.value == 1
    assert seen == []


def test_bound_app_receives_messages():
    class FakeApp:
        def __init__(self):
            self.posted = []

        def post_message(self, message):
            self.posted.append(message)

    app = FakeApp()
    controller = ValueController(1)
    controller.bind(app)
    controller.add(2)
    assert len(app.posted) == 1
    assert isinstance(app.posted[0], ValueChanged)
    assert app.posted[0].value == 3
