"""Reading the input document."""

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class SourceError(OSError):
    """The input document is missing or cannot be read."""


def read_lines(path: Path | str, encoding: str = "utf-8") -> list[str]:
    """Read a whole text file into a list of lines.

    Line terminators are stripped. The file is read completely before
    anything is returned, so a failure never leaves a partial result.

    Args:
        path: File to read.
        encoding: Text encoding of the file.

    Returns:
        List of lines.

    Raises:
        SourceError: If the file does not exist, is not a regular file, cannot be
            decoded or names an unknown encoding.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceError(f"Input file not found: {path}")

    try:
        with open(path, encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise SourceError(f"Cannot read {path}: {e}") from e

    # Only line feeds end a line; universal newlines already folded \r and \r\n
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    log.debug("Read %d lines from %s", len(lines), path)
    return lines
