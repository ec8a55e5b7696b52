from __future__ import annotations

import logging

from ..models.issues import InvalidType, IssueSet, MissingLink, MissingSchoolName, MissingType
from ..models.row_data import Row
from ..models.year_range import SchoolFact
from .range_parser import parse_type

"""Row classifier.

Sorts each sheet row into exactly one outcome and records it in the shared
accumulators. Decision order (first match wins):

1. empty school name  -> missing_school_name, stop
2. empty link         -> missing_link, continue
3. empty type         -> missing_type, stop
4. unparseable type   -> invalid_type, stop
5. otherwise          -> SchoolFact appended to facts_by_school[school_name]
"""

__all__ = [
    "classify_row",
]

logger = logging.getLogger(__name__)


def classify_row(
    row: Row,
    issues: IssueSet,
    facts_by_school: dict[str, list[SchoolFact]],
    current_year: int,
) -> None:
    """Classify one row, mutating issues and/or facts_by_school."""
    line = row.line_number
    school_name = row.school_name.strip()
    link = row.link.strip()
    type_text = row.type_text.strip()

    if not school_name:
        # キーが無いので以降のチェックは無意味
        issues.missing_school_name.append(MissingSchoolName(line=line))
        return

    if not link:
        issues.missing_link.append(MissingLink(line=line, school_name=school_name, type=type_text))

    if not type_text:
        issues.missing_type.append(MissingType(line=line, school_name=school_name))
        return

    year_range = parse_type(type_text, current_year)
    if year_range is None:
        issues.invalid_type.append(InvalidType(line=line, school_name=school_name, type=type_text))
        return

    fact = SchoolFact(
        school_name=school_name,
        range=year_range,
        link=link,
        type_text=type_text,
        line_number=line,
    )
    facts_by_school.setdefault(school_name, []).append(fact)
    logger.debug(f"line {line}: {school_name} {year_range.start}-{year_range.end}")
