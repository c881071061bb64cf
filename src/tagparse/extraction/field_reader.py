"""Tag field reading.

Where: src/tagparse/extraction/field_reader.py
What: Provide TagFieldReader, which applies the value parsers to loaded tag containers.
Why: Keep per-format key knowledge out of the pure parsing functions.
"""

from __future__ import annotations

from typing import ClassVar

from tagparse.config.config import Config
from tagparse.parsing import (
    correct_whitespace,
    parse_id3_genre_names,
    parse_id3v2_position,
    parse_multi_value,
)
from tagparse.platform.logging import logger
from tagparse.shared.parsed_tags import ParsedTags

from ._tag_utils import TagContainer, first_number_pair, raw_field_values

__all__ = ["TagFieldReader"]


class TagFieldReader:
    """Read cleaned values out of an already loaded tag container.

    The reader never opens files; pass it ``MP3(...).tags``, ``FLAC(...).tags``
    and so on.
    """

    FORMAT_KEYS: ClassVar[dict[str, dict[str, str]]] = {
        "id3": {
            "title": "TIT2",
            "artist": "TPE1",
            "album": "TALB",
            "album_artist": "TPE2",
            "genre": "TCON",
            "track": "TRCK",
            "disc": "TPOS",
        },
        "vorbis": {
            "title": "title",
            "artist": "artist",
            "album": "album",
            "album_artist": "albumartist",
            "genre": "genre",
            "track": "tracknumber",
            "disc": "discnumber",
        },
        "mp4": {
            "title": "\xa9nam",
            "artist": "\xa9ART",
            "album": "\xa9alb",
            "album_artist": "aART",
            "genre": "\xa9gen",
            "track": "trkn",
            "disc": "disk",
        },
    }

    def __init__(self, separators: str = "") -> None:
        self.separators: str = separators

    @classmethod
    def from_config(cls, config: Config) -> "TagFieldReader":
        """Create a reader using the separators from ``config``."""
        return cls(separators=config.separators)

    def read_single(self, tags: TagContainer, key: str) -> str | None:
        """Read the first entry of a single-valued field."""
        entries = raw_field_values(tags, key)
        return correct_whitespace(entries[0]) if entries else None

    def read_multi_value(self, tags: TagContainer, key: str) -> list[str]:
        """Read a multi-valued field such as artists."""
        entries = raw_field_values(tags, key)
        if not entries:
            return []
        return parse_multi_value(entries, self.separators)

    def read_genres(self, tags: TagContainer, key: str) -> list[str]:
        """Read a genre field, decoding legacy ID3 genre codes."""
        entries = raw_field_values(tags, key)
        if not entries:
            return []
        return parse_id3_genre_names(entries, self.separators)

    def read_position(self, tags: TagContainer, key: str) -> int | None:
        """Read a track or disc position from an ``N/Total`` or MP4 pair field."""
        value: object = tags.get(key)
        if isinstance(value, list) and value and isinstance(value[0], tuple):
            return first_number_pair(value)

        entries = raw_field_values(tags, key)
        return parse_id3v2_position(entries[0]) if entries else None

    def read(self, tags: TagContainer, tag_format: str) -> ParsedTags:
        """Read every supported field for ``tag_format``.

        Args:
            tags: Loaded tag container.
            tag_format: One of ``"id3"``, ``"vorbis"`` or ``"mp4"``.

        Returns:
            ParsedTags: Cleaned values.

        Raises:
            ValueError: If the tag format is unsupported.
        """
        keys = self.FORMAT_KEYS.get(tag_format)
        if keys is None:
            raise ValueError(f"Unsupported tag format: {tag_format}")

        parsed = ParsedTags(
            title=self.read_single(tags, keys["title"]),
            artists=self.read_multi_value(tags, keys["artist"]),
            album=self.read_single(tags, keys["album"]),
            album_artists=self.read_multi_value(tags, keys["album_artist"]),
            genres=self.read_genres(tags, keys["genre"]),
            track_number=self.read_position(tags, keys["track"]),
            disc_number=self.read_position(tags, keys["disc"]),
        )
        logger.debug("Parsed %s tags: %s", tag_format, parsed)
        return parsed
