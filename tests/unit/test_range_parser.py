from __future__ import annotations

import pytest

from transcript_links.models.year_range import YearRange
from transcript_links.services.range_parser import EARLIEST_YEAR, parse_type

"""Unit tests for the Type column range parser."""

YEAR = 2026


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2000-2005", YearRange(2000, 2005)),
        ("2000 - 2005", YearRange(2000, 2005)),
        ("  1998\t-\t1998  ", YearRange(1998, 1998)),
        ("2020-present", YearRange(2020, YEAR)),
        ("2020 - PRESENT", YearRange(2020, YEAR)),
        ("2006-Present", YearRange(2006, YEAR)),
    ],
)
def test_bounded_ranges(text, expected):
    assert parse_type(text, YEAR) == expected


def test_reversed_range_is_invalid():
    assert parse_type("2010-2001", YEAR) is None


def test_present_before_start_is_invalid():
    # "present" が開始年より前になるケース
    assert parse_type("2030-present", YEAR) is None


def test_present_uses_injected_year():
    assert parse_type("2020-present", 2031) == YearRange(2020, 2031)


def test_in_school_before():
    assert parse_type("In School Before 1995", YEAR) == YearRange(EARLIEST_YEAR, 1995)
    assert parse_type("in school before 1900", YEAR) == YearRange(1900, 1900)


def test_in_school_before_floor():
    assert parse_type("In School Before 1899", YEAR) is None


def test_in_school_before_requires_exact_phrase():
    assert parse_type("In  School Before 1995", YEAR) is None
    assert parse_type("Before 1995", YEAR) is None


@pytest.mark.parametrize(
    "text",
    ["not a range", "", "2000", "2000-", "00-05", "2000 to 2005", "2000-2005-2010", "２０００-２００５"],
)
def test_unrecognized_text(text):
    assert parse_type(text, YEAR) is None
