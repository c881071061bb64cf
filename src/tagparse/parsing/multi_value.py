"""Multi-value tag resolution.

Where: src/tagparse/parsing/multi_value.py
What: Turn a raw tag field into a list of values using the configured separators.
Why: Some formats store several entries natively while others pack them into one string.
"""

from __future__ import annotations

from collections.abc import Sequence

from tagparse.platform.logging import logger

from .escaped import split_escaped
from .whitespace import correct_whitespace

__all__ = ["parse_multi_value", "split_by_separators"]


def split_by_separators(value: str, separators: str) -> list[str]:
    """Split a single value by any character in ``separators``.

    With no separators the value is returned untouched, surrounding whitespace
    included.
    """
    if not separators:
        return [value]
    return correct_whitespace(split_escaped(value, lambda char: char in separators))


def parse_multi_value(raw_entries: Sequence[str], separators: str) -> list[str]:
    """Parse a multi-value tag field.

    A field that already holds more than one entry is returned as-is, since
    splitting it again would break values containing literal separators.

    Args:
        raw_entries: Entries read from the tag.
        separators: Characters that delimit values. May be empty.

    Returns:
        list[str]: Parsed values.
    """
    if len(raw_entries) != 1:
        logger.debug(
            "Multi-value field already delimited: %r",
            raw_entries,
            extra={"parse_event": "parse.multi_value.passthrough", "raw_value": raw_entries},
        )
        return list(raw_entries)

    values = split_by_separators(raw_entries[0], separators)
    logger.debug(
        "Split %r into %r",
        raw_entries[0],
        values,
        extra={
            "parse_event": "parse.multi_value.split",
            "raw_value": raw_entries[0],
            "parsed_values": values,
        },
    )
    return values
