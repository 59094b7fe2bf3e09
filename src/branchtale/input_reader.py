"""Reading validated menu selections from the player."""

from __future__ import annotations

import string
from abc import ABC, abstractmethod
from typing import Callable, TextIO

FALLBACK_SELECTION = 1
"""Selection returned when the input stream ends or fails.

Most programs would treat a closed input stream as fatal. Returning the first
option instead is a deliberate leniency: it keeps every session total, so a
closed stream still walks the story to an ending.
"""

NOT_A_NUMBER_MESSAGE = "Please enter a number."
INVALID_OPTION_MESSAGE = "Please choose a valid option."

_DIGITS = frozenset(string.digits)


def read_menu_choice(
    max_option: int,
    *,
    input_func: Callable[[str], str] | None = None,
    output: TextIO | None = None,
) -> int:
    """Prompt until the player enters a number in ``[1, max_option]``.

    Blank lines re-prompt silently. Lines with any character other than an
    ASCII digit (including surrounding whitespace or a sign) print
    :data:`NOT_A_NUMBER_MESSAGE`, as do digit strings too long to convert.
    Numbers out of range print :data:`INVALID_OPTION_MESSAGE`. When
    ``input_func`` raises ``EOFError`` or ``OSError`` the
    :data:`FALLBACK_SELECTION` is returned.
    """

    if max_option < 1:
        raise ValueError(f"max_option must be at least 1, got {max_option}")

    read_line = input_func if input_func is not None else input
    prompt = f"Enter choice (1-{max_option}): "
    while True:
        try:
            line = read_line(prompt)
        except (EOFError, OSError):
            return FALLBACK_SELECTION

        # input() drops the newline, raw stream readers may not.
        line = line.removesuffix("\n")
        if not line:
            continue

        if not all(character in _DIGITS for character in line):
            print(NOT_A_NUMBER_MESSAGE, file=output)
            continue

        try:
            value = int(line)
        except ValueError:
            # Beyond the interpreter's integer string conversion limit.
            print(NOT_A_NUMBER_MESSAGE, file=output)
            continue
        if not 1 <= value <= max_option:
            print(INVALID_OPTION_MESSAGE, file=output)
            continue

        return value


class ChoiceReader(ABC):
    """Source of validated 1-based menu selections."""

    @abstractmethod
    def read_choice(self, max_option: int) -> int:
        """Return a selection in ``[1, max_option]``."""


class ConsoleChoiceReader(ChoiceReader):
    """Read selections interactively using ``input``/``print``."""

    def __init__(
        self,
        *,
        input_func: Callable[[str], str] | None = None,
        output: TextIO | None = None,
    ) -> None:
        self._input_func = input_func
        self._output = output

    def read_choice(self, max_option: int) -> int:
        return read_menu_choice(
            max_option,
            input_func=self._input_func,
            output=self._output,
        )


__all__ = [
    "ChoiceReader",
    "ConsoleChoiceReader",
    "FALLBACK_SELECTION",
    "INVALID_OPTION_MESSAGE",
    "NOT_A_NUMBER_MESSAGE",
    "read_menu_choice",
]
