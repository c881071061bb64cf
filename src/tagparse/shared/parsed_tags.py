# Where: tagparse.shared.parsed_tags
# What: ParsedTags dataclass holding cleaned, multi-valued tag fields.
# Why: Give callers one shape for parser output regardless of tag format.

from dataclasses import dataclass, field


@dataclass
class ParsedTags:
    """Cleaned tag values for a single track."""

    title: str | None = None
    artists: list[str] = field(default_factory=list)
    album: str | None = None
    album_artists: list[str] = field(default_factory=list)
    genres: list[str] = field(default_factory=list)
    track_number: int | None = None
    disc_number: int | None = None


__all__ = ["ParsedTags"]
