from __future__ import annotations

import re

from ..models.year_range import YearRange

"""Range parser for the sheet's free-text "Type" column.

Recognized forms (case-insensitive, input trimmed first):

    range       = bounded / open-before
    bounded     = 4DIGIT *WSP "-" *WSP (4DIGIT / "present")
    open-before = "In School Before" 1*WSP 4DIGIT

"present" resolves to the caller supplied current_year so the parser stays
deterministic. "In School Before YYYY" resolves to [1900, YYYY].
"""

__all__ = [
    "parse_type",
    "EARLIEST_YEAR",
]

EARLIEST_YEAR = 1900

_BOUNDED_RE = re.compile(r"^([0-9]{4})[ \t]*-[ \t]*([0-9]{4}|present)$", re.IGNORECASE)
_BEFORE_RE = re.compile(r"^In School Before[ \t]+([0-9]{4})$", re.IGNORECASE)


def parse_type(text: str, current_year: int) -> YearRange | None:
    """Parse a Type cell into a YearRange.

    Returns None when the text is not a recognized range, when start > end, or
    when an "In School Before" year is earlier than EARLIEST_YEAR.

    Examples:
        >>> parse_type("2000 - 2005", 2026)
        YearRange(start=2000, end=2005)
        >>> parse_type("2020-Present", 2026)
        YearRange(start=2020, end=2026)
        >>> parse_type("In School Before 1995", 2026)
        YearRange(start=1900, end=1995)
        >>> parse_type("2010-2001", 2026) is None
        True
    """
    trimmed = text.strip()

    bounded = _BOUNDED_RE.match(trimmed)
    if bounded:
        start = int(bounded.group(1))
        raw_end = bounded.group(2)
        end = current_year if raw_end.lower() == "present" else int(raw_end)
        if start <= end:
            return YearRange(start, end)
        return None

    before = _BEFORE_RE.match(trimmed)
    if before:
        end = int(before.group(1))
        if end >= EARLIEST_YEAR:
            return YearRange(EARLIEST_YEAR, end)

    return None
