from __future__ import annotations

import logging
from collections.abc import Sequence

from ..models.issues import IssueSet
from ..models.row_data import Row
from ..models.validation_result import ValidationResult
from ..models.year_range import SchoolFact
from .classifier import classify_row
from .progress import ProgressTracker
from .reconciler import reconcile

"""Validation orchestration.

Feeds rows one at a time through the classifier, then hands the collected
facts to the reconciler. Every call allocates fresh accumulators; nothing is
shared between runs.
"""

__all__ = [
    "ValidationError",
    "validate_rows",
]

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when a run cannot start (e.g. no rows at all)."""
    pass


def validate_rows(rows: Sequence[Row], current_year: int, *, show_progress: bool = True) -> ValidationResult:
    """Classify all rows and reconcile per-school ranges.

    Args:
        rows: Parsed sheet rows (in source order)
        current_year: Year that "present" resolves to
        show_progress: Show a tqdm bar on TTY

    Returns:
        ValidationResult with the populated IssueSet

    Raises:
        ValidationError: If rows is empty
    """
    if not rows:
        raise ValidationError("CSV appears empty or missing data rows.")

    issues = IssueSet()
    facts_by_school: dict[str, list[SchoolFact]] = {}

    tracker = ProgressTracker(len(rows), description="Classifying rows", enabled=show_progress)
    with tracker:
        for row in rows:
            classify_row(row, issues, facts_by_school, current_year)
            tracker.advance()

    logger.debug(f"classified rows={len(rows)} schools={len(facts_by_school)}")

    reconcile(facts_by_school, issues)

    return ValidationResult(
        issues=issues,
        facts_by_school=facts_by_school,
        total_rows=len(rows),
        current_year=current_year,
    )
