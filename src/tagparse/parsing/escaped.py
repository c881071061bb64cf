"""Separator-aware splitting with backslash escapes.

Where: src/tagparse/parsing/escaped.py
What: Split a tag value at every character accepted by a selector unless it is escaped.
Why: Let users keep a literal separator inside a value by writing it as ``\\<sep>``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

__all__ = ["ESCAPE_CHAR", "split_escaped"]


ESCAPE_CHAR: Final[str] = "\\"


def split_escaped(value: str, selector: Callable[[str], bool]) -> list[str]:
    """Split ``value`` at characters accepted by ``selector``.

    An escape character directly followed by a character the selector accepts is
    consumed and the following character is kept literally. Any other escape
    character, including one at the very end of the input, is kept as-is.

    Empty segments between consecutive separators are returned; callers filter
    them with ``correct_whitespace``. A trailing empty segment is dropped.

    Args:
        value: Raw tag value to split.
        selector: Predicate that returns True for separator characters.

    Returns:
        list[str]: Segments in input order.
    """
    segments: list[str] = []
    current: list[str] = []
    index = 0
    length = len(value)

    while index < length:
        char = value[index]
        following = value[index + 1] if index + 1 < length else None

        if selector(char):
            segments.append("".join(current))
            current = []
            index += 1
            continue

        if char == ESCAPE_CHAR and following is not None and selector(following):
            current.append(following)
            index += 2
        else:
            current.append(char)
            index += 1

    if current:
        segments.append("".join(current))

    return segments
