from __future__ import annotations

from ..models.validation_result import ValidationResult

"""SUMMARY line rendering for validation runs.

Format:
    SUMMARY rows={rows} schools={schools} facts={facts} issues={issues} status={passed|failed}
"""


def render_summary_line(result: ValidationResult) -> str:
    """Render a SUMMARY line from a ValidationResult.

    Examples:
        >>> from transcript_links.models.issues import IssueSet
        >>> result = ValidationResult(IssueSet(), {}, total_rows=0, current_year=2026)
        >>> render_summary_line(result)
        'SUMMARY rows=0 schools=0 facts=0 issues=0 status=passed'
    """
    status = "passed" if result.ok else "failed"
    return (
        f"SUMMARY rows={result.total_rows} "
        f"schools={result.total_schools} "
        f"facts={result.total_facts} "
        f"issues={result.issues.total()} "
        f"status={status}"
    )
