from __future__ import annotations

from dataclasses import dataclass, field

"""Config dataclasses for the transcript link validator.

The loader in transcript_links/config/loader.py builds these from YAML after
schema validation; the CLI falls back to ValidatorConfig() defaults when no
config file is present.
"""

__all__ = [
    "ValidatorConfig",
    "DEFAULT_SHEET_URL",
    "DEFAULT_LOCAL_CSV_PATH",
]

DEFAULT_SHEET_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vQTZ5SnVlSKEzmdrP89pURZJJsm_s3y3vjr8cy3t-eR12UxiZt5pkiz8QCEoYc6mWZJtoXkyJs-vXqN"
    "/pub?output=csv"
)
DEFAULT_LOCAL_CSV_PATH = "public/schools_and_links.csv"


@dataclass(frozen=True)
class ValidatorConfig:
    """Root configuration object for validation and lookup runs.

    aliases maps a former / alternate school name to its canonical name. It is
    only consulted by the lookup service; validation groups by exact name.
    """
    sheet_url: str = DEFAULT_SHEET_URL  # 公開シートの CSV エクスポート URL
    local_csv_path: str = DEFAULT_LOCAL_CSV_PATH  # 取得失敗時のフォールバック
    request_timeout: float = 10.0
    aliases: dict[str, str] = field(default_factory=dict)
    issue_log: bool = False  # JSON Lines の issue ログを出力するか
    logs_directory: str = "./logs"
