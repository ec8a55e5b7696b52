from __future__ import annotations

from dataclasses import dataclass

"""YearRange and SchoolFact domain models.

YearRange is a closed, inclusive span of graduation years. SchoolFact binds a
parsed range to the school and link of the row it came from.
"""

__all__ = [
    "YearRange",
    "SchoolFact",
]


@dataclass(frozen=True, order=True)
class YearRange:
    """Inclusive graduation year interval [start, end]."""
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"invalid year range: start={self.start} > end={self.end}")

    def contains(self, year: int) -> bool:
        return self.start <= year <= self.end

    def __str__(self) -> str:  # pragma: no cover (trivial)
        return f"{self.start}-{self.end}"


@dataclass(frozen=True)
class SchoolFact:
    """A well-formed (school, range, link) triple eligible for reconciliation.

    Produced only by the row classifier for rows that passed every check.
    """
    school_name: str
    range: YearRange
    link: str
    type_text: str  # 元の Type 文字列 (レポート用)
    line_number: int

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end
