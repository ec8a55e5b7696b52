from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.issue_record import IssueRecord
from ..models.issues import IssueSet
from ..services.reporter import format_item

"""Issue log generation & buffering.

- JSON Lines, fixed key set (see IssueRecord)
- One `issues-YYYYMMDD-HHMMSS.log` (UTC) per run, created lazily on flush
- Serial use only; no thread safety
"""

__all__ = [
    "IssueRecord",
    "IssueLogBuffer",
    "ISSUE_TYPES",
    "records_from_issues",
]

TIMESTAMP_FMT = "%Y%m%d-%H%M%S"

ISSUE_TYPES: dict[str, str] = {
    "missing_school_name": "MISSING_SCHOOL_NAME",
    "missing_link": "MISSING_LINK",
    "missing_type": "MISSING_TYPE",
    "invalid_type": "INVALID_TYPE",
    "gaps": "YEAR_GAP",
    "overlaps": "YEAR_OVERLAP",
}


def _line_of(item) -> int:
    # gap / overlap は前側レンジの行を代表行とする
    return item.line if hasattr(item, "line") else item.prev_line


def records_from_issues(source: str, issues: IssueSet) -> list[IssueRecord]:
    """Flatten an IssueSet into IssueRecords (report order preserved)."""
    records: list[IssueRecord] = []
    for category, items in issues.categories():
        for item in items:
            records.append(
                IssueRecord.create(
                    source=source,
                    line=_line_of(item),
                    issue_type=ISSUE_TYPES[category],
                    school_name=getattr(item, "school_name", ""),
                    message=format_item(category, item),
                )
            )
    return records


class IssueLogBuffer:
    """In-memory buffer for issue records. Flush writes JSON Lines."""

    def __init__(self, logs_dir: Path | str = "./logs") -> None:
        self._logs_dir = Path(logs_dir)
        self._records: list[IssueRecord] = []
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"issues-{stamp}.log"
        return self._file_path

    def append(self, record: IssueRecord) -> None:
        self._records.append(record)

    def extend(self, records: list[IssueRecord]) -> None:
        self._records.extend(records)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path:
        if not self._records:
            return self.file_path
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
