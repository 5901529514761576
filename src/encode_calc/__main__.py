"""CLI entrypoint for encode-calc."""

from __future__ import annotations

import json
import logging
import sys
from collections import deque
from dataclasses import dataclass
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console

from encode_calc import __version__
from encode_calc.core.config import DEFAULT_CONFIG_FILE, Config
from encode_calc.core.logger import configure_from_config, get_logger
from encode_calc.core.resolver import parse_input
from encode_calc.core.types import CalculationResult
from encode_calc.ui.panels import display_help, display_history, display_intro, display_result
from encode_calc.utils.constants import COMMAND_PREFIX

# Rich console for formatted output
console = Console()

logger = get_logger(__name__)

QUIT_COMMANDS = ("/quit", "/exit")


@dataclass
class CLIContext:
    """Context object passed between CLI commands."""

    config: Config
    verbose: bool
    quiet: bool


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output (DEBUG level logging).",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Minimal output (only errors and results).",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool) -> None:
    """Encode Calc - infer duration, bit rate or file size of encoded media.

    Give any two of file size, duration and bit rate and the third is
    calculated. Resolution and frame rate add a bits-per-pixel figure.
    """
    config = Config.load()

    level: int | None = None
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    configure_from_config(config.logging, level=level)

    ctx.ensure_object(dict)
    ctx.obj = CLIContext(config=config, verbose=verbose, quiet=quiet)


@main.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output the result as JSON.",
)
@click.pass_context
def calc(ctx: click.Context, tokens: tuple[str, ...], output_json: bool) -> None:
    """Calculate the missing parameter from TOKENS.

    Examples:

        # Bit rate of a 700 MB, two hour file
        encode-calc calc 700MB 2h

        # File size at 5 Mbps for 90 minutes, as JSON
        encode-calc calc 5Mbps 1h30m --json

        # Bit rate and bits per pixel
        encode-calc calc 2GB 1h 1920x1080 25fps
    """
    cli_ctx: CLIContext = ctx.obj

    result = parse_input(" ".join(tokens), precision=cli_ctx.config.formatting.precision)

    if output_json:
        click.echo(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        display_result(result, console)

    if result.is_error:
        sys.exit(1)


@main.command()
@click.pass_context
def shell(ctx: click.Context) -> None:
    """Start an interactive calculator session.

    Every line is calculated on its own. Lines starting with "/" are
    commands: /help, /history, /clear and /quit. The session log is kept
    in memory only.

    Examples:

        encode-calc shell
    """
    cli_ctx: CLIContext = ctx.obj
    cfg = cli_ctx.config

    history: deque[CalculationResult] = deque(maxlen=cfg.shell.history_size)

    if cfg.shell.show_intro and not cli_ctx.quiet:
        display_intro(console)

    while True:
        try:
            line = click.prompt(
                cfg.shell.prompt,
                default="",
                show_default=False,
                prompt_suffix="",
            )
        except click.exceptions.Abort:
            console.print()
            break

        line = line.strip()
        if not line:
            continue

        if line.startswith(COMMAND_PREFIX):
            command = line.split()[0].lower()
            if command in QUIT_COMMANDS:
                break
            _run_shell_command(command, history)
            continue

        result = parse_input(line, precision=cfg.formatting.precision)
        history.append(result)
        display_result(result, console)

    logger.debug("Shell closed after %d calculations", len(history))


def _run_shell_command(command: str, history: deque[CalculationResult]) -> None:
    """Run a reserved shell command.

    Args:
        command: Lower-cased command word, including the leading "/".
        history: Session log of the running shell.
    """
    if command == "/help":
        display_help(console)
    elif command == "/history":
        display_history(list(history), console)
    elif command == "/clear":
        history.clear()
        console.print("[dim]History cleared.[/dim]")
    else:
        console.print(f"[red]Unknown command: {command}[/red] [dim](try /help)[/dim]")


@main.command()
def units() -> None:
    """Show the supported parameters and units.

    Examples:

        encode-calc units
    """
    display_help(console)


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """View current configuration.

    Examples:

        # View current configuration
        encode-calc config
    """
    cli_ctx: CLIContext = ctx.obj
    cfg = cli_ctx.config

    console.print()
    console.print("[bold]Encode Calc Configuration[/bold]")
    console.print("=" * 50)
    console.print()

    console.print("[bold cyan]Formatting[/bold cyan]")
    console.print(f"  Precision:    {cfg.formatting.precision}")
    console.print()

    console.print("[bold cyan]Shell[/bold cyan]")
    console.print(f"  Prompt:       {cfg.shell.prompt!r}")
    console.print(f"  Show Intro:   {cfg.shell.show_intro}")
    console.print(f"  History Size: {cfg.shell.history_size}")
    console.print()

    console.print("[bold cyan]Logging[/bold cyan]")
    console.print(f"  Level:        {cfg.logging.level}")
    console.print(f"  File Output:  {cfg.logging.file_output}")
    console.print()

    console.print("[bold cyan]Config File[/bold cyan]")
    console.print(f"  Location:     {DEFAULT_CONFIG_FILE}")
    console.print()


@main.command("config-set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a configuration value.

    KEY is the configuration key in dot notation (e.g., formatting.precision).
    VALUE is the new value to set.

    Examples:

        # Show four significant digits
        encode-calc config-set formatting.precision 4

        # Change the shell prompt
        encode-calc config-set shell.prompt "calc> "
    """
    cli_ctx: CLIContext = ctx.obj
    cfg = cli_ctx.config

    parts = key.split(".")
    if len(parts) != 2:
        console.print(f"[red]✗ Invalid key format: {key}[/red]")
        console.print("[dim]Use format: section.key (e.g., formatting.precision)[/dim]")
        sys.exit(1)

    section, attr = parts

    section_map: dict[str, Any] = {
        "formatting": cfg.formatting,
        "shell": cfg.shell,
        "logging": cfg.logging,
    }

    if section not in section_map:
        console.print(f"[red]✗ Unknown section: {section}[/red]")
        console.print(f"[dim]Available sections: {', '.join(section_map.keys())}[/dim]")
        sys.exit(1)

    section_obj = section_map[section]

    if attr not in type(section_obj).model_fields:
        console.print(f"[red]✗ Unknown attribute: {attr} in section {section}[/red]")
        sys.exit(1)

    try:
        updated = type(section_obj).model_validate({**section_obj.model_dump(), attr: value})
    except ValidationError as e:
        console.print(f"[red]✗ Invalid value: {e.errors()[0]['msg']}[/red]")
        sys.exit(1)

    setattr(cfg, section, updated)
    cfg.save()

    console.print(f"[green]✓ Set {key} = {getattr(updated, attr)}[/green]")


if __name__ == "__main__":
    main()
