from __future__ import annotations

from dataclasses import dataclass

from .issues import IssueSet
from .year_range import SchoolFact

"""Validation result model.

Aggregates the outcome of one validation run: the issue set, the well-formed
facts grouped per school, and counters used by the SUMMARY line.
"""

__all__ = [
    "ValidationResult",
]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validate_rows() (issue set + overall success flag)."""
    issues: IssueSet
    facts_by_school: dict[str, list[SchoolFact]]
    total_rows: int  # 分類した行数
    current_year: int  # "present" の解決に使った年

    @property
    def ok(self) -> bool:
        """True iff every issue category is empty."""
        return self.issues.is_empty()

    @property
    def total_schools(self) -> int:
        return len(self.facts_by_school)

    @property
    def total_facts(self) -> int:
        return sum(len(facts) for facts in self.facts_by_school.values())
