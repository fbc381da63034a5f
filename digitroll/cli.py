"""digitroll CLI - format numbers and preview odometer animations."""

import logging

import click
from rich.console import Console

from .config import ConfigManager
from .controller import ValueController
from .engine.formatter import format_number
from .errors import InvalidConfig
from .precision import to_decimal
from .ui.preview import play_values

console = Console()


class DecimalParam(click.ParamType):
    """A finite number, read exactly (``0.1`` stays one tenth)."""

    name = "number"

    def convert(self, value, param, ctx):
        try:
            return to_decimal(value)
        except (TypeError, ValueError) as e:
            self.fail(str(e), param, ctx)


NUMBER = DecimalParam()


def _format_overrides(fraction_digits, grouping, symbol, group_size, decimal_separator, loop=None):
    return {
        "fraction_digits": fraction_digits,
        "enable_grouping": grouping,
        "grouping_symbol": symbol,
        "group_size": group_size,
        "decimal_separator": decimal_separator,
        "loop": loop,
    }


def _format_options(func):
    """Options shared by every command that formats numbers."""
    options = [
        click.option("--fraction-digits", "-f", type=int, default=None, help="Digits after the decimal separator"),
        click.option("--grouping/--no-grouping", default=None, help="Insert a symbol between digit groups"),
        click.option("--symbol", default=None, help="Grouping symbol"),
        click.option("--group-size", type=int, default=None, help="Digits per group"),
        click.option("--decimal-separator", default=None, help="Symbol between integer and fraction"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--config", "config_path", default=None, help="Path to config.yaml")
@click.option("--verbose", "-v", is_flag=True, help="Log engine decisions to stderr")
@click.pass_context
def cli(ctx, config_path, verbose):
    """DIGITROLL - odometer-style animated numbers.

    Format values into slot strings and preview the rolling animation.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.obj = ConfigManager(config_path)


@cli.command(name="format", context_settings={"ignore_unknown_options": True})
@click.argument("value", type=NUMBER)
@_format_options
@click.pass_obj
def format_cmd(manager, value, fraction_digits, grouping, symbol, group_size, decimal_separator):
    """Print the display string for VALUE."""
    try:
        config = manager.get_format_config(**_format_overrides(
            fraction_digits, grouping, symbol, group_size, decimal_separator,
        ))
    except InvalidConfig as e:
        raise click.BadParameter(str(e))
    formatted = format_number(value, config)
    click.echo(("-" if formatted.negative else "") + formatted.text)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("start", type=NUMBER)
@click.option("--add", "-a", "amounts", type=NUMBER, multiple=True, help="Amount to add; repeatable")
@click.option("--repeat", "-n", default=1, help="Times to replay the --add sequence")
@click.option("--duration", type=float, default=None, help="Seconds per transition")
@click.option("--hold", type=float, default=0.4, help="Seconds to rest on each value")
@click.option("--loop/--no-loop", default=None, help="Always roll forward through 0")
@_format_options
@click.pass_obj
def preview(manager, start, amounts, repeat, duration, hold, loop,
            fraction_digits, grouping, symbol, group_size, decimal_separator):
    """Animate from START through each --add step."""
    try:
        format_config = manager.get_format_config(**_format_overrides(
            fraction_digits, grouping, symbol, group_size, decimal_separator, loop,
        ))
        animation = manager.get_animation_config(duration=duration)
    except InvalidConfig as e:
        raise click.BadParameter(str(e))

    controller = ValueController(start)
    values = [controller.value]
    controller.subscribe(values.append)
    for _ in range(repeat):
        for amount in amounts:
            controller.add(amount)
    controller.dispose()

    play_values(values, format_config, animation, console=console, hold=hold)


@cli.command()
@click.pass_obj
def config(manager):
    """Show configuration."""
    console.print(f"Config file: {manager.config_path}")
    console.print(f"Format: {manager.get_format_config()}")
    console.print(f"Animation: {manager.get_animation_config()}")


if __name__ == "__main__":
    cli()
