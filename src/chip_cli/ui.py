"""Output adapters the dispatcher writes through.

The dispatcher never touches stdin/stdout itself. Each call is handed a
``Ui``: ``ConsoleUi`` drives the interactive loop, ``ResponseCollector``
gathers the lines of one single-shot response.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

from rich.console import Console

from .theme import get_themed_console

ERROR_PREFIX = "OOPS!!! "
HELP_HINT = " Type 'help' to see available commands."
GOODBYE_MESSAGE = "Bye. Hope to see you again soon!"


class Ui(ABC):
    """Sink for the lines a command produces."""

    @abstractmethod
    def show_message(self, message: str) -> None:
        """Emit one line of normal output."""

    @abstractmethod
    def show_error(self, message: str) -> None:
        """Emit an error message."""


class ResponseCollector(Ui):
    """Collects output for the single-shot query/response mode."""

    def __init__(self):
        self.lines: List[str] = []

    def show_message(self, message: str) -> None:
        self.lines.append(message)

    def show_error(self, message: str) -> None:
        self.lines.append(ERROR_PREFIX + message)

    def response(self) -> str:
        return "\n".join(self.lines).strip()


class ConsoleUi(Ui):
    """Interactive terminal UI on a rich console."""

    def __init__(
        self,
        console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
        separator_width: int = 60,
    ):
        self.console = console or get_themed_console()
        self.input_stream = input_stream
        self.separator = "_" * separator_width

    def read_command(self) -> str:
        """Read one command line.

        Raises:
            EOFError: When input is exhausted
        """
        if self.input_stream is None:
            return self.console.input("")
        line = self.input_stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def show_welcome(self) -> None:
        self.show_line()
        self.console.print(" Hello! I'm Chip", style="header", markup=False)
        self.console.print(" What can I do for you?", markup=False)
        self.console.print(HELP_HINT, style="muted", markup=False)
        self.show_line()

    def show_line(self) -> None:
        self.console.print(self.separator, style="border", markup=False)

    def show_message(self, message: str) -> None:
        # Task strings such as "[T][ ]" must not be read as rich markup
        self.console.print(message, markup=False)

    def show_error(self, message: str) -> None:
        self.console.print(ERROR_PREFIX + message, style="error", markup=False)
        self.console.print(HELP_HINT, style="muted", markup=False)

    def show_warning(self, message: str) -> None:
        self.console.print(message, style="warning", markup=False)

    def show_goodbye(self) -> None:
        self.console.print(" " + GOODBYE_MESSAGE, style="success", markup=False)
