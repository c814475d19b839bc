"""Case-insensitive word counts for a whole document."""

import logging
from collections.abc import Iterable, Iterator

from .tokenizer import SEPARATORS, is_word, tokenize

log = logging.getLogger(__name__)


class FrequencyTable:
    """Map of lowercased word to the number of times it occurs.

    The table is filled line by line and then frozen. Once frozen it is
    read-only: the ranking and scaling stages only ever look at it.
    """

    def __init__(self, separators: frozenset[str] = SEPARATORS) -> None:
        self.separators = separators
        self._counts: dict[str, int] = {}
        self._frozen = False

    @classmethod
    def from_lines(
        cls, lines: Iterable[str], separators: frozenset[str] = SEPARATORS
    ) -> "FrequencyTable":
        """Build a frozen table from every line of a document."""
        table = cls(separators)
        for line in lines:
            table.add_line(line)
        table.freeze()
        log.debug("Counted %d distinct words from %d total", len(table), table.total)
        return table

    def add_line(self, line: str) -> None:
        """Count the words of one line. Separator tokens are dropped."""
        if self._frozen:
            raise RuntimeError("Frequency table is frozen")

        for token in tokenize(line, self.separators):
            if not is_word(token, self.separators):
                continue
            word = token.lower()
            if word in self._counts:
                self._counts[word] += 1
            else:
                self._counts[word] = 1

    def freeze(self) -> None:
        """Disallow further updates."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def total(self) -> int:
        """Number of word tokens counted."""
        return sum(self._counts.values())

    def count(self, word: str) -> int:
        """Return the count for ``word`` in any case, 0 if unseen."""
        return self._counts.get(word.lower(), 0)

    def items(self) -> list[tuple[str, int]]:
        """Return (word, count) pairs in insertion order."""
        return list(self._counts.items())

    def as_dict(self) -> dict[str, int]:
        return dict(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._counts

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)
