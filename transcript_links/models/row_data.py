from __future__ import annotations

from dataclasses import dataclass

"""Row model for the transcript link sheet.

A Row is one record of the published sheet after CSV parsing. The line_number
refers to the human-readable line in the source (header = line 1, so the first
data row is line 2).
"""

__all__ = [
    "Row",
    "HEADER_LINE_OFFSET",
]

# position 0 -> line 2 (ヘッダ行が 1 行目)
HEADER_LINE_OFFSET = 2


@dataclass(frozen=True)
class Row:
    """Logical representation of a single sheet row (School Name, Link, Type)."""
    school_name: str
    link: str
    type_text: str
    line_number: int

    @classmethod
    def from_record(cls, record: dict[str, object], position: int) -> Row:
        """Build a Row from a column-name keyed record.

        Absent or null fields are treated as empty strings.
        """
        def _text(key: str) -> str:
            value = record.get(key)
            return "" if value is None else str(value)

        return cls(
            school_name=_text("School Name"),
            link=_text("Link"),
            type_text=_text("Type"),
            line_number=position + HEADER_LINE_OFFSET,
        )
