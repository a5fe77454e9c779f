"""Exceptions raised by terminal-feedback."""


class TerminalFeedbackError(Exception):
    """Base exception for terminal feedback operations."""
    pass


class ConfigurationError(TerminalFeedbackError, ValueError):
    """Raised when a progress bar is constructed with invalid settings."""
    pass


class PreconditionError(TerminalFeedbackError, ZeroDivisionError):
    """Raised when a metric is requested before it can be computed.

    Remaining time is estimated from the average time per step, so it is
    undefined until the first increment.
    """
    pass


class PromptCancelledError(TerminalFeedbackError):
    """Raised when the user cancels an interactive prompt."""
    pass
