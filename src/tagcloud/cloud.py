"""Turning a document into an ordered, sized list of tags."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .frequency import FrequencyTable
from .ranking import order_alphabetically, select_top
from .scaling import TagRecord, build_tag_records
from .selection import validate_count
from .tokenizer import SEPARATORS

log = logging.getLogger(__name__)


def cloud_title(n: int, source: str) -> str:
    """Default heading for a cloud of ``n`` words taken from ``source``."""
    return f"Top {n} words in {source}"


@dataclass
class TagCloud:
    """Everything a renderer needs to produce the output document.

    Attributes:
        title: Heading shown on the page.
        source: Name of the input the words were counted from.
        count: Number of words requested.
        records: Tags in alphabetical order.
    """

    title: str
    source: str
    count: int
    records: list[TagRecord] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.records


def build_cloud(
    table: FrequencyTable, n: int, source: str, title: str | None = None
) -> TagCloud:
    """Build a cloud of the ``n`` most frequent words in ``table``.

    Raises:
        InvalidSelectionCount: If ``n`` is negative or exceeds the vocabulary.
    """
    n = validate_count(n, len(table)).unwrap()

    ranked = select_top(table, n)
    records = build_tag_records(order_alphabetically(ranked))
    log.debug("Selected %d of %d words from %s", len(records), len(table), source)

    return TagCloud(
        title=title if title is not None else cloud_title(n, source),
        source=source,
        count=n,
        records=records,
    )


def generate_cloud(
    lines: Iterable[str],
    n: int,
    source: str,
    title: str | None = None,
    separators: frozenset[str] = SEPARATORS,
) -> TagCloud:
    """Count the words of ``lines`` and build a cloud from them."""
    table = FrequencyTable.from_lines(lines, separators)
    return build_cloud(table, n, source, title=title)
