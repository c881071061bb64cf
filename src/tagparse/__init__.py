"""Normalize raw audio tag values into clean, multi-valued string lists."""

from tagparse.config.config import Config
from tagparse.extraction import TagFieldReader
from tagparse.parsing import (
    GENRE_TABLE,
    correct_whitespace,
    genre_name_for_code,
    parse_id3_genre_names,
    parse_id3v2_position,
    parse_multi_value,
    split_escaped,
)
from tagparse.shared import ParsedTags

__all__ = [
    "GENRE_TABLE",
    "Config",
    "ParsedTags",
    "TagFieldReader",
    "correct_whitespace",
    "genre_name_for_code",
    "parse_id3_genre_names",
    "parse_id3v2_position",
    "parse_multi_value",
    "split_escaped",
]
