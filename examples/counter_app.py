"""Textual demo: a rolling counter driven by a ValueController.

Keys: + adds 0.01, - subtracts 1, * doubles, / halves, r resets, s skips.
"""

from textual.app import App, ComposeResult

from digitroll import AnimationConfig, FormatConfig, ValueController
from digitroll.widgets import AnimatedDigits


class CounterApp(App):
    BINDINGS = [
        ("plus", "change('add', '0.01')", "+0.01"),
        ("minus", "change('subtract', '1')", "-1"),
        ("asterisk", "change('multiply', '2')", "x2"),
        ("slash", "change('divide', '2')", "/2"),
        ("r", "reset", "reset"),
        ("s", "skip", "skip"),
        ("q", "quit", "quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.controller = ValueController(99.99)

    def compose(self) -> ComposeResult:
        yield AnimatedDigits(
            controller=self.controller,
            format_config=FormatConfig(fraction_digits=2, enable_grouping=True),
            animation=AnimationConfig(duration=0.6, prefix="$ "),
        )

    def action_change(self, operation: str, amount: str) -> None:
        getattr(self.controller, operation)(amount)

    def action_reset(self) -> None:
        self.controller.reset(99.99)

    def action_skip(self) -> None:
        self.query_one(AnimatedDigits).skip_animation()

    def on_unmount(self) -> None:
        self.controller.dispose()


if __name__ == "__main__":
    CounterApp().run()
