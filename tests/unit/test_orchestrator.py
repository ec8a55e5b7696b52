from __future__ import annotations

import pytest

from transcript_links.models.issues import Gap, Overlap
from transcript_links.models.row_data import Row
from transcript_links.services.orchestrator import ValidationError, validate_rows
from transcript_links.sheet.reader import parse_rows

YEAR = 2026


def test_validate_valid_sheet(valid_csv_text: str):
    result = validate_rows(parse_rows(valid_csv_text), YEAR)
    assert result.ok
    assert result.total_rows == 4
    assert result.total_schools == 2
    assert result.total_facts == 4
    assert result.current_year == YEAR


def test_validate_broken_sheet(broken_csv_text: str):
    result = validate_rows(parse_rows(broken_csv_text), YEAR)
    issues = result.issues
    assert not result.ok
    assert [i.line for i in issues.missing_school_name] == [2]
    assert [i.line for i in issues.missing_link] == [3]
    assert [i.line for i in issues.missing_type] == [4]
    assert [(i.line, i.type) for i in issues.invalid_type] == [(5, "sometime")]
    assert issues.gaps == [Gap("Lincoln High", 2006, 2006, 3, 6)]
    assert issues.overlaps == [Overlap("Lincoln High", 2009, 2010, 6, 7)]


def test_validate_rejects_empty_rows():
    with pytest.raises(ValidationError):
        validate_rows([], YEAR)


def test_each_run_uses_fresh_state():
    rows = [Row("A", "x", "2000-2001", 2), Row("A", "y", "2003-2004", 3)]
    first = validate_rows(rows, YEAR)
    second = validate_rows(rows, YEAR)
    assert first.issues == second.issues
    assert first.issues is not second.issues
    assert len(second.issues.gaps) == 1


def test_present_moves_with_current_year():
    rows = [Row("A", "x", "2000-present", 2), Row("A", "y", "2027-2030", 3)]
    assert validate_rows(rows, 2026).ok
    assert validate_rows(rows, 2027).issues.overlaps == [Overlap("A", 2027, 2027, 2, 3)]
