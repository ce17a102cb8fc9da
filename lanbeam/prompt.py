"""
Numbered-choice prompt.

Prints a message and a numbered list of labels, reads one line and
returns the chosen label. There is no retry: a bad answer raises and
aborts whatever asked the question.
"""

import logging
import sys
from typing import Callable, Sequence

from lanbeam.discovery.models import Choice
from lanbeam.errors import ChoiceError, ParseError

logger = logging.getLogger(__name__)

LineReader = Callable[[], str]
Echo = Callable[[str], None]


def read_stdin_line() -> str:
    """Read one line from standard input, keeping the trailing newline."""
    return sys.stdin.readline()


def parse_index(text: str) -> int:
    """Parse a selection as a non-negative integer, with an optional leading "+"."""
    stripped = text.strip()
    digits = stripped[1:] if stripped.startswith("+") else stripped
    try:
        index = int(digits)
    except ValueError as e:
        raise ParseError(text) from e
    # int() also accepts signs, underscores and non-ASCII digits
    if not (digits.isascii() and digits.isdigit()):
        raise ParseError(text)
    if index > sys.maxsize:
        raise ParseError(text)
    return index


def select_item(text: str, choices: Sequence[str]) -> Choice[str]:
    """Resolve the raw answer `text` against `choices`."""
    index = parse_index(text)
    if index >= len(choices):
        raise ChoiceError(0, len(choices) - 1)
    return Choice(index=index, value=choices[index])


class SelectionPrompt:
    """Asks the user to pick one of several labels by number."""

    def __init__(
        self,
        read_line: LineReader = read_stdin_line,
        echo: Echo = print,
    ) -> None:
        self._read_line = read_line
        self._echo = echo

    def choose(self, message: str, choices: Sequence[str]) -> Choice[str]:
        """Show `message` and the numbered `choices`, then read one answer."""
        self._echo(message)
        for index, choice in enumerate(choices):
            self._echo(f"{index} - {choice}")

        answer = self._read_line()
        logger.debug(f"Read selection {answer!r} for {len(choices)} choices")
        return select_item(answer, choices)
