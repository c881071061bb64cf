"""Tests for separator-aware escaped splitting."""

from __future__ import annotations

from tagparse.parsing import ESCAPE_CHAR, correct_whitespace, split_escaped


def _is_comma(char: str) -> bool:
    return char == ","


def test_split_escaped_splits_on_separator() -> None:
    """Unescaped separators should split the value."""
    assert split_escaped("Rock,Jazz", _is_comma) == ["Rock", "Jazz"]


def test_split_escaped_keeps_escaped_separator_literal() -> None:
    """An escaped separator is copied literally without the escape character."""
    assert split_escaped("Rock\\,Jazz", _is_comma) == ["Rock,Jazz"]


def test_split_escaped_returns_original_without_separators() -> None:
    """Values without separators come back as a single element."""
    assert split_escaped("Rock & Roll", _is_comma) == ["Rock & Roll"]


def test_split_escaped_keeps_empty_inner_segments() -> None:
    """Consecutive separators produce empty segments that callers filter later."""
    segments = split_escaped("Rock,,Jazz", _is_comma)

    assert segments == ["Rock", "", "Jazz"]
    assert correct_whitespace(segments) == ["Rock", "Jazz"]


def test_split_escaped_drops_empty_trailing_segment() -> None:
    """A trailing separator does not add an empty final element."""
    assert split_escaped("Rock,", _is_comma) == ["Rock"]
    assert split_escaped(",Rock", _is_comma) == ["", "Rock"]


def test_split_escaped_keeps_unrelated_escape_characters() -> None:
    """An escape not followed by a separator stays in the value."""
    assert split_escaped("AC\\DC,Queen", _is_comma) == ["AC\\DC", "Queen"]


def test_split_escaped_keeps_trailing_escape_character() -> None:
    """An escape at the very end of input is literal."""
    assert split_escaped("Rock\\", _is_comma) == ["Rock\\"]


def test_split_escaped_escaped_escape_is_not_special() -> None:
    """A backslash is only an escape when the next character is a separator."""
    assert split_escaped("a\\\\,b", _is_comma) == ["a\\,b"]


def test_split_escaped_handles_empty_input() -> None:
    """Empty input yields no segments."""
    assert split_escaped("", _is_comma) == []


def test_split_escaped_accepts_any_selector() -> None:
    """Selectors can match several characters."""
    segments = split_escaped("Rock;Pop/Jazz\\;Blues", lambda char: char in ";/")

    assert segments == ["Rock", "Pop", "Jazz;Blues"]


def test_split_escaped_round_trips_after_reescaping() -> None:
    """Re-joining with escaped separators restores the normalized input."""
    original = "Drum & Bass\\, Jungle, Garage"
    segments = correct_whitespace(split_escaped(original, _is_comma))
    rejoined = ", ".join(segment.replace(",", f"{ESCAPE_CHAR},") for segment in segments)

    assert correct_whitespace(split_escaped(rejoined, _is_comma)) == segments
