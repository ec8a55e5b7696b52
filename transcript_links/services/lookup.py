from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..models.row_data import Row
from .range_parser import parse_type

"""Transcript link lookup.

Given a school name (or one of its aliases) and a graduation year, return the
link of the first row whose school matches case-insensitively and whose Type
range contains the year. Range membership reuses parse_type so lookup and
validation agree on what a range means.
"""

__all__ = [
    "resolve_school_name",
    "find_link",
    "school_options",
]


def resolve_school_name(name: str, aliases: Mapping[str, str] | None = None) -> str:
    """Map an alias to its canonical school name (unknown names pass through)."""
    name = name.strip()
    if aliases and name in aliases:
        return aliases[name]
    return name


def find_link(
    rows: Sequence[Row],
    school: str,
    year: int,
    current_year: int,
    aliases: Mapping[str, str] | None = None,
) -> str | None:
    canonical = resolve_school_name(school, aliases).lower()
    for row in rows:
        if row.school_name.strip().lower() != canonical:
            continue
        year_range = parse_type(row.type_text, current_year)
        if year_range is not None and year_range.contains(year):
            return row.link.strip() or None
    return None


def school_options(rows: Sequence[Row], aliases: Mapping[str, str] | None = None) -> list[str]:
    """Sorted unique school names offered for selection, alias keys included."""
    names = {row.school_name.strip() for row in rows if row.school_name.strip()}
    if aliases:
        names.update(aliases.keys())
    return sorted(names)
