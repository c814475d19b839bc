"""Choosing the most frequent words and ordering them for display.

Two independent orders are used: by count (to pick the top N) and by word
text (to lay the cloud out). Each is a plain key function handed to the
sort that needs it.
"""

import heapq
from typing import NamedTuple

from .frequency import FrequencyTable


class FrequencyEntry(NamedTuple):
    """A word and the number of times it occurs."""

    word: str
    count: int


def by_count_descending(entry: FrequencyEntry) -> tuple[int, str]:
    """Sort key: highest count first, ties in alphabetical order."""
    return (-entry.count, entry.word)


def alphabetical(entry: FrequencyEntry) -> str:
    """Sort key: word text, ignoring case."""
    return entry.word.lower()


def select_top(table: FrequencyTable, n: int) -> list[FrequencyEntry]:
    """Return the ``n`` entries with the highest counts.

    Entries come back sorted by count descending. When several words share
    the count at the cut-off, the alphabetically earlier ones are kept, so
    the result is the same on every run for the same input.

    Args:
        table: Word counts for the document.
        n: Number of entries to select, ``0 <= n <= len(table)``.

    Returns:
        Exactly ``n`` entries.

    Raises:
        ValueError: If ``n`` is out of range.
    """
    if not 0 <= n <= len(table):
        raise ValueError(f"Cannot select {n} words from a vocabulary of {len(table)}")
    if n == 0:
        return []

    entries = (FrequencyEntry(word, count) for word, count in table.items())
    return heapq.nsmallest(n, entries, key=by_count_descending)


def order_alphabetically(entries: list[FrequencyEntry]) -> list[FrequencyEntry]:
    """Return ``entries`` sorted by word, case-insensitive. Count is ignored."""
    return sorted(entries, key=alphabetical)
