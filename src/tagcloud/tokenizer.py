"""Splitting text into word and separator tokens.

A token is a maximal run of characters that share one class: either every
character is a separator or none is. Concatenating the tokens of a line in
order gives back the line unchanged.
"""

from collections.abc import Iterator

# Whitespace and punctuation that cannot be part of a word
SEPARATORS: frozenset[str] = frozenset(" `'|\t\n\r,-.!?[]\";:/()_*")


def is_separator(char: str, separators: frozenset[str] = SEPARATORS) -> bool:
    """Return True if ``char`` is a token boundary character."""
    return char in separators


def is_word(token: str, separators: frozenset[str] = SEPARATORS) -> bool:
    """Check whether a token counts as a word.

    Tokens never mix classes, so the first character decides. A separator
    run is non-empty too, which is why emptiness alone is not enough.
    """
    return bool(token) and not is_separator(token[0], separators)


def next_token(
    text: str, start: int, separators: frozenset[str] = SEPARATORS
) -> tuple[str, int]:
    """Return the token beginning at ``start`` and its length.

    Args:
        text: Text to scan.
        start: Position of the first character of the token.
        separators: Characters treated as boundaries.

    Returns:
        Tuple (token, length). The token is never empty.

    Raises:
        ValueError: If ``start`` is outside ``text``.
    """
    if not 0 <= start < len(text):
        raise ValueError(f"Start position {start} out of range for text of length {len(text)}")

    kind = is_separator(text[start], separators)
    end = start + 1
    while end < len(text) and is_separator(text[end], separators) == kind:
        end += 1

    token = text[start:end]
    return token, len(token)


def tokenize(text: str, separators: frozenset[str] = SEPARATORS) -> Iterator[str]:
    """Yield every word and separator token of ``text`` in order."""
    position = 0
    while position < len(text):
        token, length = next_token(text, position, separators)
        yield token
        position += length
