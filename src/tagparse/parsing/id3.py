"""ID3 field parsing.

Where: src/tagparse/parsing/id3.py
What: Decode ID3v1/ID3v2.3 genre fields and ID3v2 ``N/Total`` position fields.
Why: Legacy genre codes look like ordinary text, so decoding runs from the most
specific form to the least specific one before falling back to plain splitting.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Final

from tagparse.platform.logging import logger

from .genre_table import genre_name_for_code
from .multi_value import split_by_separators

__all__ = ["parse_id3_genre_names", "parse_id3v2_position"]


# CR and RX are not ID3v1 codes, but they are written like one.
_GENRE_ALIASES: Final[dict[str, str]] = {
    "CR": "Cover",
    "RX": "Remix",
}

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")

# ID3v2.3 TCON: any number of "(id)" references followed by optional free text.
# See https://id3.org/id3v2.3.0#TCON. Follows mutagen's genre parser.
# Codes are ASCII digits; free text never spans a line terminator.
_ID3V2_GENRE_RE: Final[re.Pattern[str]] = re.compile(
    r"((?:\((\d+|RX|CR)\))*)([^\n\r\x85\u2028\u2029]+)?",
    re.ASCII,
)


def _parse_int(value: str) -> int | None:
    text = value.strip()
    if _INTEGER_RE.fullmatch(text) is None:
        return None
    return int(text)


def parse_id3v2_position(raw_entry: str) -> int | None:
    """Parse the number out of an ID3v2-style ``number/total`` field.

    Args:
        raw_entry: Field value such as ``"3/12"`` or ``"3"``.

    Returns:
        int | None: The number, or None when it does not parse or is not positive.
    """
    number = _parse_int(raw_entry.split("/", 1)[0])
    if number is None or number <= 0:
        return None
    return number


def _parse_id3v1_genre(value: str) -> str | None:
    """Decode a bare ID3v1 genre code or one of the CR/RX aliases."""
    code = _parse_int(value)
    if code is None:
        return _GENRE_ALIASES.get(value)
    return genre_name_for_code(code)


def _parse_id3v2_genre(value: str) -> list[str] | None:
    """Decode an ID3v2.3 composite genre field.

    Returns None when the value is not composite, so the caller can try the
    next strategy.
    """
    match = _ID3V2_GENRE_RE.fullmatch(value)
    if match is None:
        return None

    genres: dict[str, None] = {}

    genre_ids = match.group(1)
    if genre_ids:
        for genre_id in genre_ids[1:-1].split(")("):
            name = _parse_id3v1_genre(genre_id)
            if name is not None:
                genres[name] = None

    # "((" escapes a genre name that itself starts with "(".
    genre_name = match.group(3)
    if genre_name:
        if genre_name.startswith("(("):
            genre_name = genre_name[1:]
        genres[genre_name] = None

    names = list(genres)
    if len(names) == 1 and names[0] == value:
        return None
    return names


def _parse_single_genre(value: str, separators: str) -> list[str]:
    name = _parse_id3v1_genre(value)
    if name is not None:
        logger.debug(
            "Decoded ID3v1 genre %r as %r",
            value,
            name,
            extra={"parse_event": "parse.genre.id3v1", "raw_value": value, "parsed_values": [name]},
        )
        return [name]

    names = _parse_id3v2_genre(value)
    if names is not None:
        logger.debug(
            "Decoded ID3v2 genre %r as %r",
            value,
            names,
            extra={"parse_event": "parse.genre.id3v2", "raw_value": value, "parsed_values": names},
        )
        return names

    names = split_by_separators(value, separators)
    logger.debug(
        "Genre %r has no legacy codes, split as %r",
        value,
        names,
        extra={"parse_event": "parse.genre.fallback", "raw_value": value, "parsed_values": names},
    )
    return names


def parse_id3_genre_names(raw_entries: Sequence[str], separators: str) -> list[str]:
    """Parse a genre field using ID3 rules.

    A single entry is decoded as an ID3v1 code, then as an ID3v2.3 composite
    field, then split by ``separators``. Several entries are already delimited,
    so each is only mapped through ID3v1 decoding and kept as-is when that fails.

    Args:
        raw_entries: Entries read from the genre tag.
        separators: Characters that delimit values. May be empty.

    Returns:
        list[str]: Genre names.
    """
    if len(raw_entries) == 1:
        return _parse_single_genre(raw_entries[0], separators)

    names = [_parse_id3v1_genre(entry) or entry for entry in raw_entries]
    logger.debug(
        "Mapped genre entries %r to %r",
        raw_entries,
        names,
        extra={"parse_event": "parse.genre.mapped", "raw_value": raw_entries, "parsed_values": names},
    )
    return names
