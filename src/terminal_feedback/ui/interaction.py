"""User interaction helpers."""

import logging
from typing import Optional

import questionary
from rich.console import Console

from ..errors import PromptCancelledError

# Configure logging
logger = logging.getLogger(__name__)


def password(message: str = "Password: ") -> str:
    """Ask the user for a password, echoing ``*`` for each character.

    The question is repeated until a non-empty answer is given.

    Args:
        message: Prompt shown to the user

    Returns:
        The entered password

    Raises:
        PromptCancelledError: If the user cancels the prompt
    """
    while True:
        try:
            answer = questionary.password(message).ask()
        except KeyboardInterrupt:
            logger.info("User cancelled password prompt with keyboard interrupt")
            raise PromptCancelledError("User cancelled password prompt")

        if answer is None:
            logger.info("User cancelled password prompt")
            raise PromptCancelledError("User cancelled password prompt")

        if answer:
            return answer

        logger.debug("Empty password entered, asking again")


def format_action(action: str, *args: str) -> str:
    """Format an action line with the action right-aligned.

    Example:
        >>> format_action("create", "path/to/file.py")
        '         create  path/to/file.py'
    """
    return "%15s  %s" % (action, " ".join(str(arg) for arg in args))


def log_action(action: str, *args: str, console: Optional[Console] = None) -> None:
    """Print an action performed, typically for verbose output::

             create  path/to/file.py
             remove  path/to/old_file.py

    Args:
        action: Short verb describing the action
        *args: Details joined with spaces
        console: Console to print to, defaults to stdout
    """
    console = console or Console()
    console.print(format_action(action, *args), markup=False, highlight=False, soft_wrap=True)
