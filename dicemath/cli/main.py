"""Main CLI application: roll dice patterns from the command line.

    dice [<options>] <pattern> [<number>]
"""

import logging
import random
import re
from typing import NoReturn, Optional

import click
import typer
from pydantic import ValidationError
from rich.logging import RichHandler
from typer.core import TyperCommand

from dicemath.cli.display import (
    display_error,
    display_result,
    display_statistics,
    error_console,
    format_value,
)
from dicemath.config import get_settings
from dicemath.dice import (
    ClampMode,
    DiceError,
    DiceExpression,
    RoundingMode,
    roll_many,
    transform,
)

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

app = typer.Typer(
    name="dice",
    help="Roll dice patterns such as 2d6+3 or 3*2d10-2d6/4+d8*6/8+10",
    add_completion=False,
)


def _fail(message: str) -> NoReturn:
    display_error(message)
    raise typer.Exit(1)


def _settings_error(error: ValidationError) -> str:
    problems = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )
    return f"Invalid settings: {problems}"


class DiceCommand(TyperCommand):
    """Command that reports usage errors the same way as dice errors.

    An empty argument list prints help. Unknown flags and bad option
    values print a *** message and exit 1 instead of click's usage box.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if not args:
            typer.echo(ctx.get_help())
            ctx.exit()
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            display_error(f"Invalid flags: {e.option_name}")
        except click.UsageError as e:
            display_error(e.format_message())
        ctx.exit(1)


def _configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


def _rounding_mode(round_: bool, floor: bool, ceil: bool) -> RoundingMode:
    if round_:
        return RoundingMode.ROUND
    if floor:
        return RoundingMode.FLOOR
    if ceil:
        return RoundingMode.CEIL
    return RoundingMode.NONE


def _clamp_mode(zero: bool, positive: bool) -> ClampMode:
    if zero:
        return ClampMode.NON_NEGATIVE
    if positive:
        return ClampMode.POSITIVE
    return ClampMode.NONE


@app.command(
    cls=DiceCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_extra_args": True,
    },
)
def roll(
    ctx: typer.Context,
    pattern: Optional[str] = typer.Argument(
        None, help="Dice to roll", show_default=False
    ),
    number: Optional[str] = typer.Argument(
        None, help="Number of times to roll (default 1)", show_default=False
    ),
    decimal: bool = typer.Option(
        False, "-d", help="Show non-integer results in decimal form instead of fractions"
    ),
    round_: bool = typer.Option(
        False, "-r", help="Round fractions to the nearest integer"
    ),
    floor: bool = typer.Option(
        False, "-f", help="Round fractions down to an integer (floor)"
    ),
    ceil: bool = typer.Option(
        False, "-c", help="Round fractions up to an integer (ceiling)"
    ),
    zero: bool = typer.Option(
        False, "-z", help="Force a non-negative result (less than 0 is reported as 0)"
    ),
    positive: bool = typer.Option(
        False, "-p", help="Force a positive result (less than 1 is reported as 1)"
    ),
    mixed: bool = typer.Option(
        False, "-m", help="Show fractions as mixed numbers (1 1/4 instead of 5/4)"
    ),
    stats: bool = typer.Option(
        False, "-s", "--stats", help="Show mean, deviation and range instead of rolling"
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed the random source for repeatable rolls"
    ),
) -> None:
    """Roll a dice pattern one or more times."""
    try:
        settings = get_settings()
    except ValidationError as e:
        _fail(_settings_error(e))
    _configure_logging(settings.effective_log_level)

    if sum((decimal, round_, floor, ceil, mixed)) > 1:
        _fail("Only one of the -d, -r, -f, -c and -m flags can be used")
    if zero and positive:
        _fail("Only one of the -z and -p flags can be used")
    if pattern is None:
        _fail("No dice pattern was supplied")
    if ctx.args:
        _fail("Too many arguments")
    if number is not None and not _DIGITS.fullmatch(number):
        _fail(f"Invalid number of rolls: {number}")

    try:
        expression = DiceExpression(pattern)
    except DiceError as e:
        _fail(str(e))

    use_mixed = mixed or (settings.fraction_style == "mixed" and not decimal)

    if stats:
        display_statistics(expression, decimal=decimal, mixed=use_mixed)
        return

    times = int(number) if number is not None else 1
    rng = random.Random(seed if seed is not None else settings.seed)
    rounding = _rounding_mode(round_, floor, ceil)
    clamp = _clamp_mode(zero, positive)
    logger.debug("Rolling %s %d time(s)", expression, times)

    for index, result in enumerate(roll_many(expression, times, rng), start=1):
        value = transform(result.total, rounding, clamp)
        display_result(
            format_value(value, decimal=decimal, mixed=use_mixed),
            index if times > 1 else None,
        )


if __name__ == "__main__":
    app()
