"""Value controller: the single source of the number being displayed.

Mutations go through exact decimal arithmetic and are published
synchronously to every subscriber, in subscription order. When bound to a
Textual app, each change is also posted as a ``ValueChanged`` message.
"""

import logging
from decimal import Decimal
from typing import Callable, List, Optional, TYPE_CHECKING

from textual.message import Message

from . import precision
from .precision import Number

if TYPE_CHECKING:
    from textual.app import App

_log = logging.getLogger(__name__)

Listener = Callable[[Decimal], None]


class ValueChanged(Message):
    """The controller's value changed."""

    def __init__(self, value: Decimal) -> None:
        super().__init__()
        self.value = value


class ValueController:
    """Holds the current value and publishes every change.

    Usage:
        controller = ValueController(99.99)
        controller.add(0.01)      # value == Decimal("100")
        controller.reset(99.99)   # value == Decimal("99.99")

    After ``dispose()`` every mutator is a silent no-op.
    """

    def __init__(self, initial: Number = 0) -> None:
        self._value: Decimal = precision.to_decimal(initial)
        self._listeners: List[Listener] = []
        self._disposed = False
        self._app: Optional["App"] = None

    @property
    def value(self) -> Decimal:
        return self._value

    @property
    def disposed(self) -> bool:
        return self._disposed

    # -- Subscription ------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unsubscribes it."""
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def bind(self, app: "App") -> None:
        """Bind to a Textual App so changes are posted as messages."""
        self._app = app

    # -- Mutators ----------------------------------------------------------

    def add(self, amount: Number) -> None:
        self._apply(precision.add, amount)

    def subtract(self, amount: Number) -> None:
        self._apply(precision.subtract, amount)

    def multiply(self, factor: Number) -> None:
        self._apply(precision.multiply, factor)

    def divide(self, divisor: Number) -> None:
        """Divide the value in place.

        Raises:
            DivisionByZero: *divisor* is zero; the value is left unchanged.
        """
        self._apply(precision.divide, divisor)

    def reset(self, value: Number) -> None:
        """Replace the value outright."""
        if self._disposed:
            _log.debug("ignoring reset(%r) on disposed controller", value)
            return
        self._publish(precision.to_decimal(value))

    def dispose(self) -> None:
        self._disposed = True
        self._listeners.clear()
        self._app = None

    def _apply(self, operation: Callable[[Number, Number], Decimal], operand: Number) -> None:
        if self._disposed:
            _log.debug("ignoring %s(%r) on disposed controller", operation.__name__, operand)
            return
        self._publish(operation(self._value, operand))

    def _publish(self, value: Decimal) -> None:
        self._value = value
        for listener in list(self._listeners):
            listener(value)
        if self._app is not None:
            self._app.post_message(ValueChanged(value))
