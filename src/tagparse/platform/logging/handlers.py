"""Rich console handler for parse events.

Where: platform/logging/handlers.py
What: Render structured parse event records with icons and coloured value lists.
Why: Make it easy to see which decoding strategy turned a raw tag into its values.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ParseEventRichHandler(RichHandler):
    """Custom Rich handler that renders ``parse_event`` records compactly."""

    _PARSE_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "parse.genre.id3v1": ("🔢", "cyan", "ID3v1 genre"),
        "parse.genre.id3v2": ("🧩", "cyan", "ID3v2 genre"),
        "parse.genre.fallback": ("✂️", "yellow", "Genre split"),
        "parse.genre.mapped": ("🏷️", "green", "Genre entries"),
        "parse.multi_value.split": ("✂️", "blue", "Split"),
        "parse.multi_value.passthrough": ("↪️", "blue", "Already delimited"),
        "extract.field.unsupported": ("⚠️", "red", "Unsupported field"),
    }
    _VALUE_LIMIT: ClassVar[int] = 8

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _coerce_values(raw: object) -> list[str] | None:
        """Return ``raw`` as a list of strings when it is a string sequence."""

        if isinstance(raw, str):
            return [raw]
        if isinstance(raw, Sequence):
            return [str(item) for item in raw]
        return None

    def _format_values(self, values: list[str]) -> Text:
        """Format values as a bracketed list with highlighted delimiters."""

        truncated = len(values) > self._VALUE_LIMIT
        if truncated:
            values = values[: self._VALUE_LIMIT]

        text = Text()
        delimiter_style = Style(color="magenta")
        _ = text.append("[", style=delimiter_style)
        for index, value in enumerate(values):
            if index:
                _ = text.append(", ", style=delimiter_style)
            _ = text.append(repr(value), style=Style(color="white"))
        if truncated:
            _ = text.append(", …", style=delimiter_style)
        _ = text.append("]", style=delimiter_style)
        return text

    def _render_parse_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured parse events with dedicated styling."""

        event = getattr(record, "parse_event", None)
        if not isinstance(event, str):
            return None

        icon, color, label = self._PARSE_STYLES.get(event, ("ℹ️", "blue", event))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        _ = text.append(label, style=Style(color=color))

        raw_values = self._coerce_values(getattr(record, "raw_value", None))
        if raw_values is not None:
            _ = text.append(" ")
            _ = text.append_text(self._format_values(raw_values))

        parsed_values = self._coerce_values(getattr(record, "parsed_values", None))
        if parsed_values is not None:
            _ = text.append(" → ", style=Style(color=color))
            _ = text.append_text(self._format_values(parsed_values))

        tag_key = getattr(record, "tag_key", None)
        if tag_key:
            _ = text.append(f" @ {tag_key}", style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for parse events."""

        parse_text = self._render_parse_message(record)
        if parse_text is not None:
            return parse_text
        return super().render_message(record, message)


__all__ = ["ParseEventRichHandler"]
