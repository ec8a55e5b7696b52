from __future__ import annotations

from transcript_links.models.issues import (
    Gap,
    InvalidType,
    IssueSet,
    MissingLink,
    MissingSchoolName,
    MissingType,
    Overlap,
)
from transcript_links.services.reporter import SUCCESS_MESSAGE, has_issues, render_report


def test_empty_issue_set_is_success():
    issues = IssueSet()
    assert not has_issues(issues)
    assert render_report(issues) == [SUCCESS_MESSAGE]


def test_missing_link_alone_is_failure():
    issues = IssueSet(missing_link=[MissingLink(3, "Lincoln", "2000-2005")])
    assert has_issues(issues)
    assert render_report(issues) == [
        "Rows with missing links:",
        "  - line 3: Lincoln (2000-2005)",
    ]


def test_missing_link_without_type_says_no_type():
    issues = IssueSet(missing_link=[MissingLink(3, "Lincoln", "")])
    assert render_report(issues)[1] == "  - line 3: Lincoln (no type)"


def test_sections_in_fixed_order():
    # 追加順とは逆に詰めても出力順は固定
    issues = IssueSet(
        overlaps=[Overlap("Lincoln", 2005, 2006, 2, 3)],
        gaps=[Gap("Lincoln", 2006, 2006, 2, 3)],
        invalid_type=[InvalidType(5, "Lincoln", "sometime")],
        missing_type=[MissingType(4, "Lincoln")],
        missing_link=[MissingLink(3, "Lincoln", "2000-2005")],
        missing_school_name=[MissingSchoolName(2)],
    )
    assert render_report(issues) == [
        "Missing school name:",
        "  - line 2",
        "Rows with missing links:",
        "  - line 3: Lincoln (2000-2005)",
        "Rows with missing year ranges (Type):",
        "  - line 4: Lincoln",
        "Rows with invalid year ranges:",
        "  - line 5: Lincoln (sometime)",
        "Detected year gaps within the same school:",
        "  - Lincoln: 2006-2006 (between lines 2 and 3)",
        "Detected overlapping year ranges within the same school:",
        "  - Lincoln: 2005-2006 (between lines 2 and 3)",
    ]
