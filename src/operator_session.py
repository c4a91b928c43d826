"""Output and prompt capability used to talk to the migration operator."""

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from src.errors import MigrationLogicError

logger = logging.getLogger(__name__)


class OperatorSession(ABC):
    """Writes report text and, when a human is attached, asks questions."""

    def __init__(self, stdout: TextIO) -> None:
        """Initialize the session with the stream reports are written to."""
        self.stdout = stdout
        # Report text is literal: no markup, highlighting or wrapping
        self.console = Console(
            file=stdout,
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )

    @abstractmethod
    def is_interactive(self) -> bool:
        """Return whether an operator can answer prompts."""

    @abstractmethod
    def choice(self, prompt: str, options: Sequence[str]) -> int:
        """Ask the operator to pick one of ``options``.

        Returns the position of the selected option. Labels may repeat, so
        callers must map the answer back by position.
        """

    def writeln(self, text: str = "") -> None:
        """Write a line of text."""
        self.console.print(text)

    def new_line(self, count: int = 1) -> None:
        """Write ``count`` empty lines."""
        self.console.line(count)

    def table(self, headers: Sequence[str], rows: Sequence[Sequence[object]]) -> None:
        """Write a table followed by an empty line.

        Cells are shown verbatim and may span several lines.
        """
        table = Table(show_header=bool(headers), box=box.ASCII)
        columns = max([len(headers), *(len(row) for row in rows)])
        for i in range(columns):
            table.add_column(headers[i] if i < len(headers) else "")
        for row in rows:
            cells = [Text(str(cell)) for cell in row]
            table.add_row(*cells, *[Text("")] * (columns - len(cells)))

        self.console.print(table)
        self.new_line()

    def title(self, text: str) -> None:
        """Write an underlined section title."""
        self.writeln(text)
        self.writeln("=" * len(text))
        self.new_line()


class TerminalSession(OperatorSession):
    """Session backed by a human typing answers into a terminal."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        """Initialize the session with the operator's input and output streams."""
        super().__init__(stdout)
        self.stdin = stdin

    def is_interactive(self) -> bool:
        """Return True, a terminal session always has an operator."""
        return True

    def choice(self, prompt: str, options: Sequence[str]) -> int:
        """Prompt until the operator enters a valid option number or label."""
        if not options:
            msg = "Cannot prompt for a choice without options"
            raise MigrationLogicError(msg)

        while True:
            self.writeln(f" {prompt}:")
            for i, option in enumerate(options):
                self.writeln(f"  [{i}] {option}")
            line = self.console.input(" > ", markup=False, stream=self.stdin)
            if not line:
                msg = "Input ended before an option was selected"
                raise EOFError(msg)

            selected = self._parse_answer(line.strip(), options)
            if selected is not None:
                logger.debug(
                    "Operator selected option %d: %s", selected, options[selected]
                )
                return selected

            self.new_line()
            self.writeln(f"[ERROR] Value \"{line.strip()}\" is invalid")
            self.new_line()

    @staticmethod
    def _parse_answer(answer: str, options: Sequence[str]) -> int | None:
        if answer.isascii() and answer.isdecimal():
            index = int(answer)
            return index if index < len(options) else None

        # A label only counts when it is unique
        matches = [i for i, option in enumerate(options) if option == answer]
        if len(matches) == 1:
            return matches[0]
        return None


class BatchSession(OperatorSession):
    """Session for unattended runs; reports are written, nothing is asked."""

    def is_interactive(self) -> bool:
        """Return False, no operator is attached."""
        return False

    def choice(self, prompt: str, options: Sequence[str]) -> int:
        """Refuse to prompt; decision points must apply their default instead."""
        msg = f"Cannot ask \"{prompt}\" in a non-interactive session"
        raise MigrationLogicError(msg)


def detect_session(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    interactive: bool | None = None,
) -> OperatorSession:
    """Pick the session type for the given streams.

    An explicit ``interactive`` flag wins; otherwise both streams must be
    attached to a TTY to get a terminal session.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if interactive is None:
        interactive = stdin.isatty() and stdout.isatty()
        logger.debug("Detected %s session", "interactive" if interactive else "batch")

    if interactive:
        return TerminalSession(stdin, stdout)
    return BatchSession(stdout)
