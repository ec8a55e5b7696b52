# Shared pytest fixtures
from __future__ import annotations
import tempfile
from pathlib import Path

import pytest

from transcript_links.config.loader import ENV_LOCAL_CSV, ENV_SHEET_URL
from transcript_links.logging.init import reset_logging

CURRENT_YEAR = 2026


@pytest.fixture(autouse=True)
def _clean_state(monkeypatch):
    # 毎テストでロガーを再生成 (capsys の stdout に紐付けるため)
    reset_logging()
    monkeypatch.delenv(ENV_SHEET_URL, raising=False)
    monkeypatch.delenv(ENV_LOCAL_CSV, raising=False)
    yield
    reset_logging()


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "public").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def valid_csv_text() -> str:
    return (
        "School Name,Link,Type\n"
        "Lincoln High,https://example.org/lincoln-old,In School Before 1999\n"
        "Lincoln High,https://example.org/lincoln,2000 - present\n"
        "Benjamin Franklin High School,https://example.org/bfhs-a,1990-2005\n"
        "Benjamin Franklin High School,https://example.org/bfhs-b,2006-present\n"
    )


@pytest.fixture()
def broken_csv_text() -> str:
    return (
        "School Name,Link,Type\n"
        ",https://example.org/nameless,2000-2005\n"          # line 2: missing name
        "Lincoln High,,2000-2005\n"                         # line 3: missing link (fact kept)
        "Lincoln High,https://example.org/l2,\n"            # line 4: missing type
        "Lincoln High,https://example.org/l3,sometime\n"    # line 5: invalid type
        "Lincoln High,https://example.org/l4,2007-2010\n"   # line 6: gap 2006
        "Lincoln High,https://example.org/l5,2009-2012\n"   # line 7: overlap 2009-2010
    )


@pytest.fixture()
def write_csv(temp_workdir: Path):
    def _write(text: str, name: str = "schools_and_links.csv") -> Path:
        path = temp_workdir / "public" / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture()
def sample_config_yaml() -> str:
    return """sheet_url: https://sheets.example.invalid/pub?output=csv
local_csv_path: public/schools_and_links.csv
request_timeout: 5
aliases:
  BFHS: Benjamin Franklin High School
issue_log: false
logs_directory: ./logs
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "validator.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg
