from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd
import requests

from ..models.row_data import Row

"""Sheet source acquisition and CSV parsing.

- load_csv_text: fetch the published Google Sheet CSV export; on failure fall
  back to the local copy (WARN logged). A leading UTF-8 BOM is stripped.
- parse_rows: parse CSV text with pandas into Row objects. Every cell is read
  as text with NA conversion disabled, so "NA" / "null" stay literal strings.

Structural CSV problems (bad quoting, rows with more or fewer fields than
the header) are fatal and reported before any row is classified.
"""

__all__ = [
    "SourceError",
    "SourceParseError",
    "SourceText",
    "EXPECTED_COLUMNS",
    "load_csv_text",
    "read_local_csv",
    "parse_rows",
]

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = ("School Name", "Link", "Type")
_BOM = "\ufeff"


class SourceError(Exception):
    """Raised when no source text could be acquired (remote and local both failed)."""


class SourceParseError(Exception):
    """Raised when the CSV text itself cannot be parsed into rows.

    errors holds (row, message) pairs; row is None when the parser does not
    report a position.
    """

    def __init__(self, errors: list[tuple[int | None, str]]) -> None:
        self.errors = errors
        super().__init__(f"CSV parse errors detected: {len(errors)}")


@dataclass(frozen=True)
class SourceText:
    source_label: str  # URL またはファイルパス
    text: str


def _strip_bom(text: str) -> str:
    return text[1:] if text.startswith(_BOM) else text


def read_local_csv(path: Path) -> SourceText:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"could not read local CSV {path}: {e}") from e
    return SourceText(source_label=str(path), text=_strip_bom(text))


def load_csv_text(url: str | None, local_path: Path, timeout: float = 10.0) -> SourceText:
    """Fetch CSV text from url, falling back to local_path.

    Parameters
    ----------
    url: 公開シートの CSV URL (None ならローカルのみ)
    local_path: fallback CSV file
    timeout: request timeout in seconds
    """
    if url is None:
        return read_local_csv(local_path)

    try:
        response = requests.get(url, timeout=timeout)
        if not response.ok:
            raise requests.HTTPError(
                f"Failed to fetch CSV ({response.status_code} {response.reason})", response=response
            )
        # Google のエクスポートは charset 無しの text/csv (requests は ISO-8859-1 と推定する)
        response.encoding = "utf-8"
        return SourceText(source_label=url, text=_strip_bom(response.text))
    except requests.RequestException as e:
        logger.warning(f"Could not fetch Google Sheet CSV ({e}). Falling back to local file: {local_path}")
        return read_local_csv(local_path)


def _short_rows(data_part: pd.DataFrame, expected: int) -> list[tuple[int | None, str]]:
    """Return (data row index, message) for rows the parser padded with NaN."""
    errors: list[tuple[int | None, str]] = []
    parsed_counts = data_part.notna().sum(axis=1).tolist()
    for position, parsed in enumerate(parsed_counts):
        if parsed < expected:
            errors.append((position, f"Too few fields: expected {expected} fields but parsed {parsed}"))
    return errors


def parse_rows(text: str) -> list[Row]:
    """Parse CSV text (header on line 1) into Rows.

    Steps:
    1. Read every line raw (header=None) so field-count problems surface as
       parser errors instead of being absorbed into an inferred index column
    2. Take the first row as header, remaining rows as data
    3. Reject data rows with fewer fields than the header
    4. Treat columns missing from the header as empty strings

    Raises:
        SourceParseError: malformed quoting or a row whose field count differs from the header
    """
    try:
        df = pd.read_csv(
            io.StringIO(text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as e:
        raise SourceParseError([(None, str(e))]) from e

    if df.shape[0] < 1:
        return []
    columns = [str(c).strip() for c in df.iloc[0].fillna("").tolist()]
    missing = [c for c in EXPECTED_COLUMNS if c not in columns]
    if missing:
        logger.warning(f"CSV header missing columns {missing}; treating them as empty")

    # keep_default_na=False なので NaN は短い行のパディングのみ
    data_part = df.iloc[1:]
    short_rows = _short_rows(data_part, expected=df.shape[1])
    if short_rows:
        raise SourceParseError(short_rows)
    data_part = data_part.fillna("")
    rows: list[Row] = []
    for position, raw in enumerate(data_part.itertuples(index=False, name=None)):
        record = dict(zip(columns, raw, strict=False))
        rows.append(Row.from_record(record, position))
    return rows
