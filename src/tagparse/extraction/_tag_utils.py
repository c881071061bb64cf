"""Tag container helpers.

Where: src/tagparse/extraction/_tag_utils.py
What: Normalize values held by loaded mutagen tag containers into raw field entries.
Why: ID3 frames, Vorbis comments and MP4 atoms each store text differently.
"""

from __future__ import annotations

from typing import Any, Protocol

from mutagen.id3 import ID3TimeStamp

from tagparse.platform.logging import logger

__all__ = [
    "TagContainer",
    "raw_field_values",
    "first_number_pair",
]


class TagContainer(Protocol):
    """Anything with a mapping-style ``get``, such as ``ID3`` or ``VCommentDict``."""

    def get(self, key: str, default: Any = None) -> Any: ...


def _entry_text(item: object) -> str | None:
    """Return the text of a single stored entry, or None when it has none."""
    if isinstance(item, str):
        return item
    if isinstance(item, ID3TimeStamp):
        return item.text
    if isinstance(item, bytes):
        try:
            return item.decode(encoding="utf-8")
        except UnicodeDecodeError:
            return None
    return None


def raw_field_values(tags: TagContainer, key: str) -> list[str]:
    """Read the raw entries stored under ``key``.

    Args:
        tags: Loaded tag container.
        key: Frame ID, comment name or atom name.

    Returns:
        list[str]: Entries in stored order, empty when the key is absent or
        holds no text.
    """
    value: object = tags.get(key)
    if value is None:
        return []

    # ID3 text frames keep their entries in ``text``.
    text = getattr(value, "text", None)
    if text is not None and not isinstance(value, ID3TimeStamp):
        value = text

    if isinstance(value, (list, tuple)):
        items: list[object] = list(value)
    else:
        items = [value]

    entries: list[str] = []
    for item in items:
        entry = _entry_text(item)
        if entry is not None:
            entries.append(entry)
        else:
            logger.warning(
                "Undecodable bytes %r for tag %s"
                if isinstance(item, bytes)
                else "Unsupported value %r for tag %s",
                item,
                key,
                extra={
                    "parse_event": "extract.field.unsupported",
                    "raw_value": repr(item),
                    "tag_key": key,
                },
            )
    return entries


def first_number_pair(value: object) -> int | None:
    """Return the number from an MP4-style ``[(number, total)]`` value.

    Zero means the number is absent.
    """
    if not isinstance(value, list) or not value:
        return None
    first = value[0]
    if not isinstance(first, tuple) or not first or not isinstance(first[0], int):
        return None
    return first[0] if first[0] > 0 else None
