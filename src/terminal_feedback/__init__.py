"""Terminal feedback for command-line tools: progress bars and prompts."""

__version__ = "0.1.0"

from .errors import (
    TerminalFeedbackError,
    ConfigurationError,
    PreconditionError,
    PromptCancelledError
)
from .ui.progress import ProgressBarConfig, ProgressTracker, ProgressReporter, progress
from .ui.output import OutputSink, TerminalOutput, MemoryOutput
from .ui.interaction import password, log_action
from .utils.tokens import tokenize

__all__ = [
    "__version__",

    # Exceptions
    "TerminalFeedbackError", "ConfigurationError",
    "PreconditionError", "PromptCancelledError",

    # Progress
    "ProgressBarConfig", "ProgressTracker", "ProgressReporter", "progress",

    # Output
    "OutputSink", "TerminalOutput", "MemoryOutput",

    # Interaction
    "password", "log_action", "tokenize"
]
