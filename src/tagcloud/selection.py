"""Validating how many words go into the cloud.

Validation is a pure function returning a result; the interactive loop in
``prompt_for_count`` keeps asking until a result comes back ok.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

COUNT_PROMPT = "Input number of words to include in tag cloud: "


class SelectionError(Enum):
    """Reasons a requested word count is rejected."""

    NOT_A_NUMBER = "Must be a whole number."
    NEGATIVE = "Must be a non-negative integer."
    TOO_LARGE = "Must not exceed the number of unique words in the input file."


class InvalidSelectionCount(ValueError):
    """Raised when a word count is used without passing validation."""

    def __init__(self, error: SelectionError, value: object) -> None:
        super().__init__(f"{error.value} (got {value!r})")
        self.error = error
        self.value = value


@dataclass
class CountValidation:
    """Outcome of validating a requested word count.

    Attributes:
        value: The parsed count, or None if the input was not an integer.
        error: Why the count was rejected, None when it is usable.
    """

    value: int | None
    error: SelectionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return self.error.value if self.error else ""

    def unwrap(self) -> int:
        """Return the count or raise InvalidSelectionCount."""
        if self.error is not None or self.value is None:
            raise InvalidSelectionCount(self.error or SelectionError.NOT_A_NUMBER, self.value)
        return self.value


def validate_count(n: int | str, vocabulary_size: int) -> CountValidation:
    """Check that ``n`` is an integer in ``[0, vocabulary_size]``.

    Strings are parsed first, so raw user input can be passed straight in.
    """
    if isinstance(n, str):
        try:
            n = int(n.strip())
        except ValueError:
            return CountValidation(None, SelectionError.NOT_A_NUMBER)

    if n < 0:
        return CountValidation(n, SelectionError.NEGATIVE)
    if n > vocabulary_size:
        return CountValidation(n, SelectionError.TOO_LARGE)
    return CountValidation(n)


def prompt_for_count(
    vocabulary_size: int,
    ask: Callable[[str], str] | None = None,
    tell: Callable[[str], None] | None = None,
) -> int:
    """Ask for a word count until a valid one is entered.

    Args:
        vocabulary_size: Number of distinct words available.
        ask: Reads one reply given a prompt (default: ``input``).
        tell: Shows a rejection message (default: ``print``).

    Returns:
        A count in ``[0, vocabulary_size]``.
    """
    ask = ask or input
    tell = tell or print
    while True:
        result = validate_count(ask(COUNT_PROMPT), vocabulary_size)
        if result.ok:
            return result.unwrap()
        tell(result.message)
