# Where: tagparse.parsing.__init__
# What: Expose the pure tag value parsing helpers.
# Why: Give ingestion code one import path for splitting and genre decoding.

from .escaped import ESCAPE_CHAR, split_escaped
from .genre_table import GENRE_TABLE, genre_name_for_code
from .id3 import parse_id3_genre_names, parse_id3v2_position
from .multi_value import parse_multi_value, split_by_separators
from .whitespace import correct_whitespace

__all__ = [
    "ESCAPE_CHAR",
    "GENRE_TABLE",
    "correct_whitespace",
    "genre_name_for_code",
    "parse_id3_genre_names",
    "parse_id3v2_position",
    "parse_multi_value",
    "split_by_separators",
    "split_escaped",
]
