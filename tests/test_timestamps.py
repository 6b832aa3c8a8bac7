"""Timestamp acceptance and canonical-width promotion."""

import pytest

from srtformat.timestamps import (
    CANONICAL_TIME_LINE_RE,
    Timestamp,
    parse_time_line,
    precedes,
)


def test_canonical_pads_every_field() -> None:
    assert Timestamp("0", "1", "2", "342").canonical() == "00:01:02,342"
    assert Timestamp("1", "2", "3", "4").canonical() == "01:02:03,004"
    assert str(Timestamp("12", "34", "56", "789")) == "12:34:56,789"


def test_canonical_never_truncates_wide_fields() -> None:
    assert Timestamp("123", "4", "5", "6").canonical() == "123:04:05,006"


def test_parse_time_line_accepts_whitespace_slop() -> None:
    start, end = parse_time_line("0: 1: 2,342 -->  0: 1: 5,334")

    assert start.canonical() == "00:01:02,342"
    assert end.canonical() == "00:01:05,334"


def test_parse_time_line_accepts_tabs_after_separators() -> None:
    times = parse_time_line("0:\t1:\t2,\t5 -->\t0:1:3,7")

    assert times is not None
    assert times[1].canonical() == "00:01:03,007"


@pytest.mark.parametrize(
    "line",
    [
        "00:00:01,000-->00:00:02,000",
        "00:00:01,000 -->00:00:02,000",
        "00:00:01.000 --> 00:00:02.000",
        "00:01,000 --> 00:00:02,000",
        "00:00:01,000 --> 00:00:02,000 X:1",
        "Hello",
        "",
        "١:00:01,000 --> 00:00:02,000",
    ],
)
def test_parse_time_line_rejects(line: str) -> None:
    assert parse_time_line(line) is None


def test_canonical_regex_matches_only_fixed_width() -> None:
    assert CANONICAL_TIME_LINE_RE.match("00:01:02,342 --> 00:01:05,334")
    assert not CANONICAL_TIME_LINE_RE.match("0:01:02,342 --> 00:01:05,334")


def test_to_millis() -> None:
    assert Timestamp("01", "02", "03", "004").to_millis() == 3723004
    assert Timestamp("0", "0", "1", "5").to_millis() == 1005


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Timestamp("0", "0", "1", "0"), Timestamp("00", "00", "02", "000"), True),
        (Timestamp("00", "00", "02", "000"), Timestamp("0", "0", "1", "0"), False),
        (Timestamp("0", "0", "1", "0"), Timestamp("0", "0", "1", "000"), False),
        (Timestamp("0", "0", "90", "0"), Timestamp("0", "1", "0", "0"), False),
    ],
)
def test_precedes_compares_by_time(a: Timestamp, b: Timestamp, expected: bool) -> None:
    assert precedes(a, b) is expected


def test_precedes_handles_fields_wider_than_int_allows() -> None:
    wide = Timestamp("1" + "0" * 5000, "0", "0", "0")
    narrow = Timestamp("99", "59", "59", "999")

    assert precedes(narrow, wide)
    assert not precedes(wide, narrow)
    assert not precedes(wide, Timestamp("000" + wide.hours, "0", "0", "0"))
