"""Progress tracking utilities.

A :class:`ProgressReporter` renders a single, continuously redrawn line of
progress for a fixed number of steps, for example::

    urls = ["https://example.com", "https://example.org"]
    reporter = ProgressReporter(len(urls), ProgressBarConfig(format=":title :url "))
    with ThreadPoolExecutor() as executor:
        for future in as_completed(executor.submit(fetch, url) for url in urls):
            reporter.increment({"url": future.result()})

or through the iteration helper::

    progress(urls, lambda url: {"url": fetch(url)}, width=10)

Tokens available to ``format`` and ``complete_message``:

    :title
    :percent_complete
    :progress_bar
    :step
    :steps_remaining
    :total_steps
    :time_elapsed
    :time_remaining
"""

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from ..errors import ConfigurationError, PreconditionError
from ..utils.tokens import tokenize
from .output import OutputSink, TerminalOutput

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_FORMAT = ":title |:progress_bar| :percent_complete% complete "
DEFAULT_COMPLETE_MESSAGE = "Process complete"

StepFunction = Callable[[Any], Optional[Mapping[str, Any]]]


@dataclass(frozen=True)
class ProgressBarConfig:
    """Display settings for a progress bar.

    Attributes:
        title: Value of the ``:title`` token
        width: Width of ``:progress_bar`` in characters
        progress_str: Fill string for the completed part of the bar
        incomplete_str: Fill string for the remaining part of the bar
        format: Template rendered while the operation is running
        complete_message: Template rendered once on completion, ``None``
            to render nothing
        tokens: Additional tokens replaced within the templates
    """
    title: str = "Progress"
    width: int = 25
    progress_str: str = "="
    incomplete_str: str = "."
    format: str = DEFAULT_FORMAT
    complete_message: Optional[str] = DEFAULT_COMPLETE_MESSAGE
    tokens: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        """Validate option types and bar geometry."""
        if not isinstance(self.width, int) or isinstance(self.width, bool):
            raise ConfigurationError(f"Bar width must be an integer, got {self.width!r}")
        for name in ("title", "progress_str", "incomplete_str", "format"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ConfigurationError(f"Option '{name}' must be a string, got {value!r}")
        if self.complete_message is not None and not isinstance(self.complete_message, str):
            raise ConfigurationError(
                f"Option 'complete_message' must be a string, got {self.complete_message!r}"
            )
        if not isinstance(self.tokens, Mapping):
            raise ConfigurationError(f"Option 'tokens' must be a mapping, got {self.tokens!r}")
        if self.width < 0:
            raise ConfigurationError(f"Bar width must not be negative, got {self.width}")
        if not self.progress_str or not self.incomplete_str:
            raise ConfigurationError("Progress and incomplete strings must not be empty")

    @classmethod
    def from_options(cls, **options: Any) -> "ProgressBarConfig":
        """Build a config from keyword options, skipping ``None`` values.

        Raises:
            ConfigurationError: If an option name is not a config field
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ConfigurationError(f"Unknown progress options: {', '.join(unknown)}")

        return cls(**{key: value for key, value in options.items() if value is not None})


class ProgressTracker:
    """Tracks step count and derived metrics for a long-running operation."""

    def __init__(self, total: int, config: Optional[ProgressBarConfig] = None):
        """Initialize progress tracker.

        Args:
            total: Total number of steps, must be positive
            config: Display settings

        Raises:
            ConfigurationError: If total is not a positive integer
        """
        if not isinstance(total, int) or isinstance(total, bool):
            raise ConfigurationError(f"Total steps must be an integer, got {total!r}")
        if total <= 0:
            raise ConfigurationError(f"Total steps must be positive, got {total}")

        self.config = config or ProgressBarConfig()
        self.total_steps = total
        self.step = 0
        self.start_time = time.time()
        self.tokens: Dict[str, Any] = dict(self.config.tokens)

    @property
    def completed(self) -> bool:
        """Whether the step count has reached the total."""
        return self.step == self.total_steps

    @property
    def finished(self) -> bool:
        """Whether one increment has happened after completion."""
        return self.step == self.total_steps + 1

    def percent_complete(self) -> int:
        return self.step * 100 // self.total_steps

    def time_elapsed(self) -> float:
        """Seconds since the operation started."""
        return time.time() - self.start_time

    def time_remaining(self) -> float:
        """Estimated seconds remaining, from the average time per step.

        Raises:
            PreconditionError: If no step has been completed yet
        """
        if self.step == 0:
            raise PreconditionError("Time remaining is undefined before the first step")
        return (self.time_elapsed() / self.step) * self.steps_remaining()

    def steps_remaining(self) -> int:
        return self.total_steps - self.step

    def progress_bar(self) -> str:
        """Render the bar, padded to the configured width."""
        width = self.config.width
        bar = self.config.progress_str * (width * self.percent_complete() // 100)
        missing = width - len(bar)
        if missing <= 0:
            return bar

        fill = self.config.incomplete_str
        repeats = missing // len(fill) + 1
        return bar + (fill * repeats)[:missing]

    def generate_tokens(self) -> Dict[str, Any]:
        """Build the tokens for the current step.

        Extra tokens override the built-in ones.

        Raises:
            PreconditionError: If called before the first step
        """
        tokens: Dict[str, Any] = {
            "title": self.config.title,
            "percent_complete": self.percent_complete(),
            "progress_bar": self.progress_bar(),
            "step": self.step,
            "steps_remaining": self.steps_remaining(),
            "total_steps": self.total_steps,
            "time_elapsed": "%0.2fs" % self.time_elapsed(),
            "time_remaining": "%0.2fs" % self.time_remaining(),
        }
        tokens.update(self.tokens)
        return tokens

    def increment(self) -> None:
        self.step += 1


class ProgressReporter:
    """Renders a progress tracker to an output sink.

    ``increment`` is safe to call from several threads on one reporter; each
    call is serialized with the output it produces.
    """

    def __init__(
        self,
        total: int,
        config: Optional[ProgressBarConfig] = None,
        output: Optional[OutputSink] = None
    ):
        """Initialize progress reporter.

        Args:
            total: Total number of steps, must be positive
            config: Display settings
            output: Output sink, defaults to the terminal

        Raises:
            ConfigurationError: If total is not positive
        """
        self.tracker = ProgressTracker(total, config)
        self.config = self.tracker.config
        self.output = output or TerminalOutput()
        self._lock = threading.Lock()
        logger.debug(f"Progress reporter created for {total} steps")

    def increment(self, tokens: Optional[Mapping[str, Any]] = None) -> bool:
        """Increment progress and redraw.

        Args:
            tokens: Extra tokens merged into this and later renders.
                Values that are not mappings are ignored.

        Returns:
            True if the call rendered, False once the bar has finished
        """
        with self._lock:
            if isinstance(tokens, Mapping):
                self.tracker.tokens.update(tokens)
            self.tracker.increment()
            return self._show()

    def _show(self) -> bool:
        """Render the current state. Caller must hold the lock."""
        tracker = self.tracker
        if tracker.step > tracker.total_steps:
            if not tracker.finished:
                logger.debug(
                    f"Ignoring increment {tracker.step} of {tracker.total_steps}-step progress"
                )
            return False

        self.output.erase_last_line()
        if tracker.completed:
            if self.config.complete_message is not None:
                self.output.write_line(
                    tokenize(self.config.complete_message, tracker.generate_tokens())
                )
            logger.info(f"{self.config.title}: {tracker.total_steps} steps completed")
        else:
            self.output.write_line(tokenize(self.config.format, tracker.generate_tokens()) + " ")
        return True

    @staticmethod
    def progress(
        items: Sequence[Any],
        step: StepFunction,
        config: Optional[ProgressBarConfig] = None,
        output: Optional[OutputSink] = None,
        max_workers: Optional[int] = None
    ) -> "ProgressReporter":
        """Report progress while applying ``step`` to every item.

        The mapping returned by ``step`` (if any) is passed to ``increment``.

        Args:
            items: Items to process
            step: Function called once per item
            config: Display settings
            output: Output sink, defaults to the terminal
            max_workers: Run ``step`` on a thread pool of this size when
                greater than one, incrementing as each call finishes

        Returns:
            The reporter used

        Raises:
            ConfigurationError: If items is empty
        """
        reporter = ProgressReporter(len(items), config, output)

        if max_workers is None or max_workers <= 1:
            for item in items:
                reporter.increment(step(item))
            return reporter

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(step, item) for item in items]
            for future in as_completed(futures):
                reporter.increment(future.result())

        return reporter


def progress(
    items: Sequence[Any],
    step: StepFunction,
    output: Optional[OutputSink] = None,
    max_workers: Optional[int] = None,
    **options: Any
) -> ProgressReporter:
    """Shortcut for :meth:`ProgressReporter.progress` taking config options.

    Example:
        progress(urls, fetch, format="Remaining: :time_remaining ")
    """
    config = ProgressBarConfig.from_options(**options)
    return ProgressReporter.progress(items, step, config, output, max_workers)
