"""Mapping word counts to font size classes."""

from collections.abc import Sequence
from dataclasses import dataclass

from .ranking import FrequencyEntry

FONT_MIN = 11
FONT_MAX = 48


@dataclass(frozen=True)
class TagRecord:
    """A word ready to be rendered.

    Attributes:
        word: The word text.
        count: Number of occurrences in the source.
        size_class: Font size class in ``[FONT_MIN, FONT_MAX]``.
    """

    word: str
    count: int
    size_class: int


def size_class(max_count: int, min_count: int, count: int) -> int:
    """Interpolate ``count`` linearly onto ``[FONT_MIN, FONT_MAX]``.

    When every selected word has the same count there is no range to
    interpolate over and all of them get ``FONT_MAX``.
    """
    if max_count > min_count:
        offset = (FONT_MAX - FONT_MIN) * (count - min_count) / (max_count - min_count)
        return int(FONT_MIN + offset)
    return FONT_MAX


def build_tag_records(entries: Sequence[FrequencyEntry]) -> list[TagRecord]:
    """Attach a size class to each entry, keeping the given order.

    The count range is taken from ``entries`` alone, not the whole document.
    """
    if not entries:
        return []

    counts = [entry.count for entry in entries]
    max_count, min_count = max(counts), min(counts)
    return [
        TagRecord(entry.word, entry.count, size_class(max_count, min_count, entry.count))
        for entry in entries
    ]
