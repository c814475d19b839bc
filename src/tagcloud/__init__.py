"""Tag cloud generation from word frequencies."""

from .cli import main
from .cloud import TagCloud, build_cloud, cloud_title, generate_cloud
from .config import CloudConfig, parse_key_value_args
from .frequency import FrequencyTable
from .ranking import (
    FrequencyEntry,
    alphabetical,
    by_count_descending,
    order_alphabetically,
    select_top,
)
from .render import RENDERERS, render, render_html, render_json, write_output
from .scaling import FONT_MAX, FONT_MIN, TagRecord, build_tag_records, size_class
from .selection import (
    CountValidation,
    InvalidSelectionCount,
    SelectionError,
    prompt_for_count,
    validate_count,
)
from .source import SourceError, read_lines
from .tokenizer import SEPARATORS, is_separator, is_word, next_token, tokenize

__all__ = [
    "SEPARATORS",
    "is_separator",
    "is_word",
    "next_token",
    "tokenize",
    "FrequencyTable",
    "FrequencyEntry",
    "by_count_descending",
    "alphabetical",
    "select_top",
    "order_alphabetically",
    "FONT_MIN",
    "FONT_MAX",
    "TagRecord",
    "size_class",
    "build_tag_records",
    "CountValidation",
    "InvalidSelectionCount",
    "SelectionError",
    "prompt_for_count",
    "validate_count",
    "TagCloud",
    "build_cloud",
    "cloud_title",
    "generate_cloud",
    "SourceError",
    "read_lines",
    "RENDERERS",
    "render",
    "render_html",
    "render_json",
    "write_output",
    "CloudConfig",
    "parse_key_value_args",
    "main",
]
