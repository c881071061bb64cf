"""Tests for ID3 genre and position parsing.

Where: tests/parsing/test_id3.py
What: Validate ID3v1 codes, ID3v2.3 composite genres, fallbacks, and positions.
Why: Legacy genre codes overlap with ordinary text, so the decoding order matters.
"""

from __future__ import annotations

import pytest
from pytest_mock import MockerFixture

from tagparse.parsing import (
    GENRE_TABLE,
    genre_name_for_code,
    parse_id3_genre_names,
    parse_id3v2_position,
)
from tagparse.platform.logging import logger


def test_genre_table_has_expected_anchors() -> None:
    """Spot check the standard, Winamp, and extension ranges."""
    assert len(GENRE_TABLE) == 193
    assert GENRE_TABLE[0] == "Blues"
    assert GENRE_TABLE[17] == "Rock"
    assert GENRE_TABLE[79] == "Hard Rock"
    assert GENRE_TABLE[80] == "Folk"
    assert GENRE_TABLE[147] == "Synthpop"
    assert GENRE_TABLE[191] == "Psybient"
    assert GENRE_TABLE[192] == "Future Garage"


@pytest.mark.parametrize("code", [-1, 193, 10_000])
def test_genre_name_for_code_out_of_range(code: int) -> None:
    """Out-of-range codes return None instead of raising."""
    assert genre_name_for_code(code) is None


def test_parse_id3v1_numeric_genre() -> None:
    """A bare integer maps to the table entry."""
    assert parse_id3_genre_names(["17"], ",") == ["Rock"]


def test_parse_id3v1_numeric_genre_ignores_surrounding_whitespace() -> None:
    """The numeric form is recognized after trimming."""
    assert parse_id3_genre_names([" 13 "], ",") == ["Pop"]


@pytest.mark.parametrize(("raw", "expected"), [("CR", "Cover"), ("RX", "Remix")])
def test_parse_id3_genre_aliases(raw: str, expected: str) -> None:
    """CR and RX map to Cover and Remix."""
    assert parse_id3_genre_names([raw], ",") == [expected]


def test_parse_id3_genre_aliases_are_case_sensitive() -> None:
    """Lowercase aliases are ordinary text."""
    assert parse_id3_genre_names(["cr"], ",") == ["cr"]


def test_parse_id3_out_of_range_code_falls_back_to_text() -> None:
    """A code outside the table is kept as the literal value."""
    assert parse_id3_genre_names(["255"], ",") == ["255"]


def test_parse_id3v2_composite_genre() -> None:
    """Parenthesized codes and trailing text are all collected."""
    assert parse_id3_genre_names(["(17)(13)Custom"], ",") == ["Rock", "Pop", "Custom"]


def test_parse_id3v2_composite_genre_deduplicates() -> None:
    """Repeated genres in one composite field appear once, in first-seen order."""
    assert parse_id3_genre_names(["(17)(13)(17)Rock"], ",") == ["Rock", "Pop"]


def test_parse_id3v2_composite_aliases() -> None:
    """Aliases are decoded inside parentheses too."""
    assert parse_id3_genre_names(["(RX)(CR)(9)"], ",") == ["Remix", "Cover", "Metal"]


def test_parse_id3v2_composite_skips_unknown_codes() -> None:
    """Unknown codes inside parentheses are dropped."""
    assert parse_id3_genre_names(["(999)(8)"], ",") == ["Jazz"]


def test_parse_id3v2_escaped_parenthesis_in_name() -> None:
    """A doubled opening parenthesis keeps a literal one in the name."""
    assert parse_id3_genre_names(["((Live) Jazz"], ",") == ["(Live) Jazz"]
    assert parse_id3_genre_names(["(4)((Live)"], ",") == ["Disco", "(Live)"]


def test_parse_id3v2_trailing_text_is_not_split() -> None:
    """Trailing free text after codes is added literally."""
    assert parse_id3_genre_names(["(17)Rock,Pop"], ",") == ["Rock", "Rock,Pop"]


def test_parse_id3_plain_text_falls_back_to_separators() -> None:
    """Text that is neither code nor composite is split by separators."""
    assert parse_id3_genre_names(["Post-Rock, Shoegaze"], ",") == ["Post-Rock", "Shoegaze"]


def test_parse_id3_plain_text_without_separators_is_unchanged() -> None:
    """Without separators the fallback returns the entry as-is."""
    assert parse_id3_genre_names(["Post-Rock, Shoegaze"], "") == ["Post-Rock, Shoegaze"]


def test_parse_id3_unmatched_parenthesis_falls_back() -> None:
    """A name that merely starts with a parenthesis is not a composite value."""
    assert parse_id3_genre_names(["(Unknown) Jazz"], "") == ["(Unknown) Jazz"]


def test_parse_id3_multiline_value_falls_back() -> None:
    """Line breaks prevent the composite form from matching."""
    assert parse_id3_genre_names(["Rock\nPop"], "") == ["Rock\nPop"]


def test_parse_id3_carriage_return_value_falls_back() -> None:
    """Carriage returns and Unicode line separators also prevent a composite match."""
    assert parse_id3_genre_names(["(17)Rock\r"], ",") == ["(17)Rock"]
    assert parse_id3_genre_names(["(13)Pop\u2028"], ",") == ["(13)Pop"]


def test_parse_id3v2_composite_codes_are_ascii_digits() -> None:
    """Non-ASCII digits inside parentheses are not genre codes."""
    assert parse_id3_genre_names(["(١٧)"], ",") == ["(١٧)"]


def test_parse_id3_multiple_entries_are_mapped_individually() -> None:
    """Several entries are decoded one by one and never dropped or split."""
    raw = ["17", "Shoegaze;Dream Pop", "RX", "(13)", "17"]

    assert parse_id3_genre_names(raw, ";") == [
        "Rock",
        "Shoegaze;Dream Pop",
        "Remix",
        "(13)",
        "Rock",
    ]


def test_parse_id3_empty_entry_yields_nothing() -> None:
    """An empty single entry decodes to no genres."""
    assert parse_id3_genre_names([""], ",") == []


def test_parse_id3_empty_field_yields_nothing() -> None:
    """A field without entries decodes to no genres."""
    assert parse_id3_genre_names([], ",") == []


def test_parse_id3_logs_strategy(mocker: MockerFixture) -> None:
    """The chosen decoding strategy is reported as a parse event."""
    debug = mocker.patch.object(logger, "debug")

    _ = parse_id3_genre_names(["(17)(13)Custom"], ",")

    events = [call.kwargs["extra"]["parse_event"] for call in debug.call_args_list]
    assert events == ["parse.genre.id3v2"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("3/12", 3),
        ("3", 3),
        (" 7 /10", 7),
        ("12/", 12),
        ("0/12", None),
        ("-1/12", None),
        ("abc", None),
        ("/12", None),
        ("", None),
        ("1/2/3", 1),
    ],
)
def test_parse_id3v2_position(raw: str, expected: int | None) -> None:
    """The left side of ``N/Total`` is returned when it is a positive integer."""
    assert parse_id3v2_position(raw) == expected
