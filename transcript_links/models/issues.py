from __future__ import annotations

from dataclasses import dataclass, field

"""Issue records and the IssueSet accumulator.

Row-level issues (missing name / link / type, invalid type) are produced by the
row classifier; cross-row issues (gaps, overlaps) by the per-school reconciler.
All of them land in a single IssueSet which the reporter renders.

Category order is fixed and drives the report layout:
missing names, missing links, missing types, invalid types, gaps, overlaps.
"""

__all__ = [
    "MissingSchoolName",
    "MissingLink",
    "MissingType",
    "InvalidType",
    "Gap",
    "Overlap",
    "IssueSet",
    "CATEGORY_ORDER",
]


@dataclass(frozen=True)
class MissingSchoolName:
    line: int


@dataclass(frozen=True)
class MissingLink:
    line: int
    school_name: str
    type: str  # 空文字の場合あり


@dataclass(frozen=True)
class MissingType:
    line: int
    school_name: str


@dataclass(frozen=True)
class InvalidType:
    line: int
    school_name: str
    type: str


@dataclass(frozen=True)
class Gap:
    """Uncovered span [from_year, to_year] between two adjacent ranges."""
    school_name: str
    from_year: int
    to_year: int
    prev_line: int
    curr_line: int


@dataclass(frozen=True)
class Overlap:
    """Span [overlap_start, overlap_end] covered by two adjacent ranges."""
    school_name: str
    overlap_start: int
    overlap_end: int
    prev_line: int
    curr_line: int


CATEGORY_ORDER: tuple[str, ...] = (
    "missing_school_name",
    "missing_link",
    "missing_type",
    "invalid_type",
    "gaps",
    "overlaps",
)


@dataclass
class IssueSet:
    """Growable, ordered issue lists for a single validation run."""
    missing_school_name: list[MissingSchoolName] = field(default_factory=list)
    missing_link: list[MissingLink] = field(default_factory=list)
    missing_type: list[MissingType] = field(default_factory=list)
    invalid_type: list[InvalidType] = field(default_factory=list)
    gaps: list[Gap] = field(default_factory=list)
    overlaps: list[Overlap] = field(default_factory=list)

    def categories(self) -> list[tuple[str, list]]:
        """Return (category name, records) pairs in report order."""
        return [(name, getattr(self, name)) for name in CATEGORY_ORDER]

    def total(self) -> int:
        return sum(len(records) for _, records in self.categories())

    def is_empty(self) -> bool:
        return self.total() == 0
