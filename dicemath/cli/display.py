"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.table import Table

from dicemath.dice import DiceExpression, Rational


# Shared console instances
console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def format_value(value: Rational, decimal: bool = False, mixed: bool = False) -> str:
    """Render a result as a fraction, mixed number or decimal.

    Decimals use the shortest general format ("%g"), so 7/2 prints as 3.5
    and 1/3 as 0.333333.
    """
    if decimal:
        return f"{float(value):g}"
    if mixed:
        return value.mixed()
    return str(value)


def display_error(message: str) -> None:
    """Display error message on stderr with the *** prefix.

    Args:
        message: Error message.
    """
    error_console.print(f"*** {message}", markup=False)


def display_result(text: str, index: int | None = None) -> None:
    """Display one rolled result.

    Args:
        text: Formatted result.
        index: 1-based roll number, shown as "N: " when rolling repeatedly.
    """
    if index is not None:
        text = f"{index}: {text}"
    console.print(text, markup=False)


def display_statistics(
    expression: DiceExpression,
    decimal: bool = False,
    mixed: bool = False,
) -> None:
    """Display the exact statistics of an expression as a table.

    Args:
        expression: Parsed dice expression.
        decimal: Show values as decimals.
        mixed: Show fractions as mixed numbers.
    """
    table = Table(title=str(expression), box=box.SIMPLE, show_header=False)
    table.add_column("Statistic", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Mean", format_value(expression.mean(), decimal, mixed))
    table.add_row("Variance", format_value(expression.variance(), decimal, mixed))
    table.add_row("Std dev", f"{expression.standard_deviation():g}")
    table.add_row("Min", format_value(expression.min(), decimal, mixed))
    table.add_row("Max", format_value(expression.max(), decimal, mixed))

    console.print(table)
