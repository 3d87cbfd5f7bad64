"""Demo command line for termprogress indicators."""

if __name__ == "__main__" and __package__ is None:
    import sys
    from pathlib import Path

    # Add the project root to the Python path
    project_root = Path(__file__).resolve().parent.parent
    sys.path.insert(0, str(project_root))
    __package__ = "termprogress"


import time
from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from termprogress.base import ProgressBar, Spinner
from termprogress.config import (
    ProgressConfig,
    get_config_paths,
    load_configuration,
    save_config,
)
from termprogress.errors import ErrorCategory, TermProgressError
from termprogress.factory import create_bar, create_spinner
from termprogress.logging_setup import configure_logging
from termprogress.ui import console

app = typer.Typer(
    name="termprogress",
    help="Demonstrate in-place terminal progress bars and spinners",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        from . import __version__

        console.print(f"termprogress version {__version__}")
        raise typer.Exit()


def show_config_callback(value: bool):
    """Show current configuration and exit."""
    if value:
        try:
            config = load_configuration()
        except TermProgressError as e:
            console.print(f"[bold red]Error loading configuration:[/bold red] {e}")
            raise typer.Exit(exit_code_for(e))

        console.print("\n[bold blue]termprogress Configuration[/bold blue]")
        console.print(
            f"Display: [cyan]{'Enabled' if config.enabled else 'Disabled'}[/cyan]"
        )
        console.print(f"Bar width: [cyan]{config.bar_width}[/cyan]")
        console.print(
            f"Max width: [cyan]{config.max_width if config.max_width else 'terminal'}[/cyan]"
        )
        console.print(
            f"Width detection: [cyan]{'On' if config.detect_width else 'Off'}[/cyan]"
        )
        console.print(f"Stream: [cyan]{config.stream.value}[/cyan]")
        console.print(f"Wheel: [cyan]{escape(config.wheel)}[/cyan]")
        console.print(f"Log level: [cyan]{config.log_level.value}[/cyan]")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version information and exit.",
    ),
    show_config: Optional[bool] = typer.Option(
        None,
        "--show-config",
        callback=show_config_callback,
        is_eager=True,
        help="Show current configuration and exit.",
    ),
):
    """termprogress demo commands."""


def prepare(config_file: Optional[str], quiet: bool, debug: bool) -> ProgressConfig:
    """Load configuration and set up logging for a demo run."""
    config = load_configuration(config_file=config_file, quiet=quiet, debug=debug)
    configure_logging(config.log_level.value)
    return config


def run_bar(indicator: ProgressBar, steps: int, delay: float) -> None:
    """Drive any progress bar from 0 to 100%."""
    steps = max(steps, 1)
    for i in range(1, steps + 1):
        indicator.set_progress(i / steps)
        if i == steps // 2:
            indicator.println(f"Reached step {i} of {steps}")
        time.sleep(delay)
    indicator.complete_with("Done!")


def run_spin(indicator: Spinner, steps: int, delay: float) -> None:
    """Spin any spinner for a number of steps."""
    for i in range(1, steps + 1):
        indicator.bump()
        if i == steps // 2:
            indicator.println(f"Reached step {i} of {steps}")
        time.sleep(delay)
    indicator.complete_with("Done!")


@app.command()
def bar(
    steps: int = typer.Option(20, "--steps", "-n", help="Number of updates"),
    delay: float = typer.Option(0.1, "--delay", help="Seconds between updates"),
    title: str = typer.Option("Working", "--title", "-t", help="Bar title"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress the bar"),
    config_file: Optional[str] = typer.Option(
        None, "--config-file", "-c", help="Path to custom configuration file"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """Run a progress bar to completion."""
    try:
        config = prepare(config_file, quiet, debug)
        run_bar(create_bar(config, title), steps, delay)
    except TermProgressError as e:
        handle_error(e, debug)
        raise typer.Exit(exit_code_for(e))


@app.command()
def spin(
    steps: int = typer.Option(20, "--steps", "-n", help="Number of bumps"),
    delay: float = typer.Option(0.1, "--delay", help="Seconds between bumps"),
    title: str = typer.Option("Working", "--title", "-t", help="Spinner title"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress the spinner"),
    config_file: Optional[str] = typer.Option(
        None, "--config-file", "-c", help="Path to custom configuration file"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging"),
):
    """Run a spinner for a fixed number of bumps."""
    try:
        config = prepare(config_file, quiet, debug)
        run_spin(create_spinner(config, title), steps, delay)
    except TermProgressError as e:
        handle_error(e, debug)
        raise typer.Exit(exit_code_for(e))


@app.command("save-config")
def save_config_command(
    path: Optional[str] = typer.Argument(
        None, help="Where to write the file (default: ~/.termprogress/config.toml)"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config-file", "-c", help="Path to custom configuration file"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Save with display disabled"),
):
    """Write the effective configuration to a TOML file."""
    try:
        config = load_configuration(config_file=config_file, quiet=quiet)
    except TermProgressError as e:
        handle_error(e)
        raise typer.Exit(exit_code_for(e))

    target = Path(path) if path else get_config_paths()[0]
    if not save_config(config, target):
        console.print(f"[bold red]Error:[/bold red] could not write {target}")
        raise typer.Exit(1)
    console.print(f"Configuration saved to [cyan]{target}[/cyan]")


def exit_code_for(error: TermProgressError) -> int:
    """Map an error to a process exit code. Configuration problems exit with 2."""
    if error.category == ErrorCategory.CONFIG:
        return 2
    return 1


def handle_error(error: Exception, debug: bool = False):
    """Handle and display errors with appropriate formatting."""
    if debug:
        console.print("\n[bold red]Debug Error Details:[/bold red]")
        console.print_exception()
    else:
        console.print(f"\n[bold red]Error:[/bold red] {str(error)}")
        console.print("[dim]Use --debug for more details[/dim]")


if __name__ == "__main__":
    app()
