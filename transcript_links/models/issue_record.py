from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""IssueRecord model for the JSON Lines issue log.

Each validation issue (row-level or cross-row) is flattened into one record
with a fixed key set so the log can be consumed by other tooling:

    {"timestamp", "source", "line", "issue_type", "school_name", "message"}

Gap / overlap records use the line of the earlier range (prev_line).
"""

__all__ = [
    "IssueRecord",
]


@dataclass(frozen=True)
class IssueRecord:
    """Structured issue record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        source: URL or file path the rows were read from
        line: 1-based source line (header = 1)
        issue_type: Issue classification in UPPER_SNAKE_CASE format
        school_name: School the issue belongs to ("" when the name is missing)
        message: Human readable description (same text as the report line)
    """
    timestamp: str  # ISO8601 UTC
    source: str
    line: int
    issue_type: str  # UPPER_SNAKE
    school_name: str
    message: str

    @staticmethod
    def create(source: str, line: int, issue_type: str, school_name: str, message: str) -> IssueRecord:
        """Create a new IssueRecord with current UTC timestamp."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return IssueRecord(
            timestamp=ts,
            source=source,
            line=line,
            issue_type=issue_type,
            school_name=school_name,
            message=message,
        )

    def to_json_line(self) -> str:
        """Serialize IssueRecord to JSON Lines format (no extra keys)."""
        return json.dumps(asdict(self), ensure_ascii=False)
