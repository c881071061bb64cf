"""Whitespace correction for tag values."""

from __future__ import annotations

from collections.abc import Sequence
from typing import overload

__all__ = ["correct_whitespace"]


@overload
def correct_whitespace(value: str) -> str | None: ...


@overload
def correct_whitespace(value: Sequence[str]) -> list[str]: ...


def correct_whitespace(value: str | Sequence[str]) -> str | list[str] | None:
    """Trim surrounding whitespace and drop blank values.

    A single string is returned stripped, or None when nothing remains. A
    sequence is corrected element-wise with blank elements removed and the
    order of the rest preserved.
    """
    if isinstance(value, str):
        return value.strip() or None

    corrected: list[str] = []
    for entry in value:
        stripped = entry.strip()
        if stripped:
            corrected.append(stripped)
    return corrected
