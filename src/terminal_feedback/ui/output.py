"""Output sinks used by the progress reporter."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType


class OutputSink(ABC):
    """Line-oriented output that can erase the line it last wrote."""

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write one line of output."""
        pass

    @abstractmethod
    def erase_last_line(self) -> None:
        """Erase the last line written to the stream."""
        pass


class TerminalOutput(OutputSink):
    """Writes progress lines to the terminal through a rich console.

    Text ending in a space or tab is written without a line break, so the
    following render can return to column zero and overwrite it. Any other
    text ends the line.
    """

    ERASE_LINE = Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 0))

    def __init__(self, console: Optional[Console] = None):
        """Initialize terminal output.

        Args:
            console: Console to write to, defaults to a stdout console
        """
        self.console = console or Console()

    def write_line(self, text: str) -> None:
        end = "" if text[-1:] in (" ", "\t") else "\n"
        self.console.print(
            text,
            end=end,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True
        )

    def erase_last_line(self) -> None:
        # rich drops control codes when the console is not a terminal
        self.console.control(self.ERASE_LINE)


class MemoryOutput(OutputSink):
    """Records writes and erasures in memory."""

    def __init__(self):
        self.events: List[Tuple[str, Optional[str]]] = []

    def write_line(self, text: str) -> None:
        self.events.append(("write", text))

    def erase_last_line(self) -> None:
        self.events.append(("erase", None))

    @property
    def lines(self) -> List[str]:
        """Text of every write, in order."""
        return [text for kind, text in self.events if kind == "write"]

    @property
    def erase_count(self) -> int:
        """Number of erasures, one per render."""
        return sum(1 for kind, _ in self.events if kind == "erase")
