from __future__ import annotations

from ..models.issues import Gap, IssueSet, Overlap
from ..models.year_range import SchoolFact

"""Per-school interval reconciler.

Each school's facts are ordered by (start, end) and walked pairwise. Only
adjacent pairs in that order are compared, so a long range that contains two
non-adjacent shorter ranges is reported against its direct neighbour only.
This is the intended sweep, not an all-pairs interval check.
"""

__all__ = [
    "reconcile",
    "reconcile_school",
]


def _sort_key(fact: SchoolFact) -> tuple[int, int]:
    return (fact.start, fact.end)


def reconcile_school(school_name: str, facts: list[SchoolFact], issues: IssueSet) -> None:
    """Detect gaps / overlaps between adjacent ranges of one school.

    The input list is left untouched; a sorted copy is walked.
    """
    if len(facts) < 2:
        return

    ordered = sorted(facts, key=_sort_key)
    for prev, curr in zip(ordered, ordered[1:]):
        if curr.start > prev.end + 1:
            issues.gaps.append(
                Gap(
                    school_name=school_name,
                    from_year=prev.end + 1,
                    to_year=curr.start - 1,
                    prev_line=prev.line_number,
                    curr_line=curr.line_number,
                )
            )
        elif curr.start <= prev.end:
            issues.overlaps.append(
                Overlap(
                    school_name=school_name,
                    overlap_start=curr.start,
                    overlap_end=min(prev.end, curr.end),
                    prev_line=prev.line_number,
                    curr_line=curr.line_number,
                )
            )
        # curr.start == prev.end + 1 -> contiguous


def reconcile(facts_by_school: dict[str, list[SchoolFact]], issues: IssueSet) -> None:
    """Run reconcile_school for every school (in first-seen order)."""
    for school_name, facts in facts_by_school.items():
        reconcile_school(school_name, facts, issues)
