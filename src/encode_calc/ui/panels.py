"""Rich-based panel components for results, help and the session log.

Example:
    >>> from encode_calc.ui.panels import display_result
    >>> from encode_calc.core.resolver import parse_input
    >>>
    >>> display_result(parse_input("700MB 2h"))
    # Prints "Bit rate: 778 kbps" in green
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from encode_calc.core.resolver import help_text, intro_text
from encode_calc.core.types import CalculationResult

# Default console for output
_console = Console()


def display_result(result: CalculationResult, console: Console | None = None) -> None:
    """Print the output of one calculation.

    Errors are printed in red, results in green.

    Args:
        result: Calculation result to show.
        console: Rich Console to use for output. Uses default if None.
    """
    if console is None:
        console = _console

    style = "red" if result.is_error else "green"
    console.print(Text(result.output, style=style))


def display_help(console: Console | None = None) -> None:
    """Display the usage panel.

    Args:
        console: Rich Console to use for output. Uses default if None.
    """
    if console is None:
        console = _console

    panel = Panel(
        Text(help_text()),
        title="[bold]Encoding Calculator[/bold]",
        border_style="blue",
        padding=(1, 2),
    )
    console.print(panel)


def display_intro(console: Console | None = None) -> None:
    """Display the greeting shown at the start of a session."""
    if console is None:
        console = _console

    console.print(Text(intro_text(), style="dim"))


def display_history(
    results: Sequence[CalculationResult],
    console: Console | None = None,
) -> None:
    """Display the calculations of the current session as a table.

    Args:
        results: Results in submission order.
        console: Rich Console to use for output. Uses default if None.
    """
    if console is None:
        console = _console

    if not results:
        console.print("[dim]No calculations yet.[/dim]")
        return

    table = Table(title="Session History", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Input", style="cyan")
    table.add_column("Output")

    for index, result in enumerate(results, start=1):
        style = "red" if result.is_error else "green"
        table.add_row(str(index), result.input, Text(result.output, style=style))

    console.print(table)
