"""Main CLI entry point for terminal-feedback."""

import sys
import time
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Dict, Any

import click
from rich.console import Console
from rich.markup import escape

from terminal_feedback import __version__
from terminal_feedback.errors import TerminalFeedbackError, PromptCancelledError
from terminal_feedback.ui.interaction import password, log_action
from terminal_feedback.ui.output import TerminalOutput
from terminal_feedback.ui.progress import ProgressReporter
from terminal_feedback.utils.config import Config

# Configure logging
logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

console = Console()


def setup_config(config_path: Optional[Path] = None) -> Config:
    """Setup and return configuration instance.

    Args:
        config_path: Optional path to config file

    Returns:
        Configuration instance
    """
    return Config(config_path)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def main(verbose: bool) -> None:
    """Terminal feedback - progress bars and prompts for command-line tools."""
    if verbose:
        console.print(f"[bold green]terminal-feedback v{__version__}[/bold green]")
        console.print("Verbose mode enabled")
        logging.getLogger().setLevel(logging.INFO)


@main.command("progress")
@click.option("--steps", default=10, type=int, help="Number of steps to run")
@click.option("--delay", default=0.1, type=float, help="Seconds of simulated work per step")
@click.option("--workers", default=None, type=int, help="Number of parallel workers (default: from config)")
@click.option("--title", default=None, help="Progress title")
@click.option("--width", default=None, type=int, help="Width of the progress bar")
@click.option("--format", "format_", default=None, help="Format of the progress line, e.g. ':title :percent_complete%'")
@click.option("--complete-message", default=None, help="Message shown on completion")
@click.option("--no-complete-message", is_flag=True, help="Show nothing on completion")
@click.option("--config", "config_path", type=click.Path(), help="Path to JSON configuration file")
@click.option("--save", is_flag=True, help="Save the given progress options to the configuration file")
def progress_command(
    steps: int,
    delay: float,
    workers: Optional[int],
    title: Optional[str],
    width: Optional[int],
    format_: Optional[str],
    complete_message: Optional[str],
    no_complete_message: bool,
    config_path: Optional[str],
    save: bool
) -> None:
    """Run a simulated operation with a progress bar.

    Examples:

        # Ten steps, one at a time
        terminal-feedback progress

        # Forty steps spread over four workers
        terminal-feedback progress --steps 40 --workers 4 --format ':title :step/:total_steps (:item) '
    """
    try:
        config = setup_config(Path(config_path) if config_path else None)

        if workers is None:
            workers = config.workers()

        bar_config = config.progress_config(
            title=title,
            width=width,
            format=format_,
            complete_message=complete_message
        )
        if no_complete_message:
            bar_config = replace(bar_config, complete_message=None)

        if save:
            config.save_progress_options(
                title=title,
                width=width,
                format=format_,
                complete_message=complete_message
            )
            console.print(f"[green]Saved progress options to {escape(str(config.config_file))}[/green]")

        def run_step(item: int) -> Dict[str, Any]:
            time.sleep(delay)
            return {"item": item + 1}

        ProgressReporter.progress(
            list(range(steps)),
            run_step,
            config=bar_config,
            output=TerminalOutput(console),
            max_workers=workers
        )

        log_action("processed", f"{steps} items", console=console)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user.[/yellow]")
        sys.exit(1)
    except TerminalFeedbackError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        logger.exception("Progress run failed")
        sys.exit(1)


@main.command("password")
@click.option("--message", default="Password: ", help="Prompt shown to the user")
def password_command(message: str) -> None:
    """Prompt for a password with masked input."""
    try:
        secret = password(message)
        console.print(f"[green]Received {len(secret)} characters[/green]")

    except PromptCancelledError:
        console.print("\n[yellow]Operation cancelled by user.[/yellow]")
        sys.exit(1)


if __name__ == "__main__":
    main()
