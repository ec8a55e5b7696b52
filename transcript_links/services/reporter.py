from __future__ import annotations

from ..models.issues import IssueSet

"""Issue reporter.

Decides success / failure for a run and renders the human readable report.
Any non-empty category, missing links included, means failure. Sections are
rendered in the fixed category order; empty categories are omitted.
"""

__all__ = [
    "has_issues",
    "render_report",
    "render_sections",
    "format_item",
    "SUCCESS_MESSAGE",
    "SECTION_HEADERS",
]

SUCCESS_MESSAGE = "CSV validation passed: no missing links, invalid ranges, gaps, or overlaps found."

SECTION_HEADERS: dict[str, str] = {
    "missing_school_name": "Missing school name:",
    "missing_link": "Rows with missing links:",
    "missing_type": "Rows with missing year ranges (Type):",
    "invalid_type": "Rows with invalid year ranges:",
    "gaps": "Detected year gaps within the same school:",
    "overlaps": "Detected overlapping year ranges within the same school:",
}


def has_issues(issues: IssueSet) -> bool:
    return not issues.is_empty()


def format_item(category: str, item) -> str:
    """One-line description of an issue record (without the list bullet)."""
    if category == "missing_school_name":
        return f"line {item.line}"
    if category == "missing_link":
        return f"line {item.line}: {item.school_name} ({item.type or 'no type'})"
    if category == "missing_type":
        return f"line {item.line}: {item.school_name}"
    if category == "invalid_type":
        return f"line {item.line}: {item.school_name} ({item.type})"
    if category == "gaps":
        return (
            f"{item.school_name}: {item.from_year}-{item.to_year} "
            f"(between lines {item.prev_line} and {item.curr_line})"
        )
    if category == "overlaps":
        return (
            f"{item.school_name}: {item.overlap_start}-{item.overlap_end} "
            f"(between lines {item.prev_line} and {item.curr_line})"
        )
    raise ValueError(f"unknown issue category: {category}")


def render_sections(issues: IssueSet) -> list[tuple[str, list[str]]]:
    """Return (header, item lines) for every non-empty category, in order."""
    sections: list[tuple[str, list[str]]] = []
    for category, records in issues.categories():
        if not records:
            continue
        sections.append((SECTION_HEADERS[category], [f"  - {format_item(category, r)}" for r in records]))
    return sections


def render_report(issues: IssueSet) -> list[str]:
    """Render the full report as lines.

    A run with zero issues renders the single SUCCESS_MESSAGE line.
    """
    if not has_issues(issues):
        return [SUCCESS_MESSAGE]
    lines: list[str] = []
    for header, items in render_sections(issues):
        lines.append(header)
        lines.extend(items)
    return lines
