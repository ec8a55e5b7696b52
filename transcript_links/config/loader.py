from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import ValidatorConfig

"""Config loader.

Responsibilities:
- Load YAML config (default config/validator.yml)
- Validate against config_schema.json (additionalProperties: false)
- Apply defaults for optional keys
- Apply environment overrides (TRANSCRIPT_SHEET_URL / TRANSCRIPT_LOCAL_CSV),
  which may come from a .env file loaded by the CLI
"""

__all__ = [
    "ConfigError",
    "SCHEMA_PATH",
    "ENV_SHEET_URL",
    "ENV_LOCAL_CSV",
    "load_config",
    "apply_env_overrides",
]

SCHEMA_PATH = Path(__file__).parent / "config_schema.json"

ENV_SHEET_URL = "TRANSCRIPT_SHEET_URL"
ENV_LOCAL_CSV = "TRANSCRIPT_LOCAL_CSV"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the bundled JSON schema.

    Raises:
        ConfigError: schema file missing / not JSON, or data violates the schema
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def apply_env_overrides(cfg: ValidatorConfig) -> ValidatorConfig:
    """Return cfg with environment variable overrides applied (env wins)."""
    sheet_url = os.getenv(ENV_SHEET_URL) or cfg.sheet_url
    local_csv = os.getenv(ENV_LOCAL_CSV) or cfg.local_csv_path
    if sheet_url == cfg.sheet_url and local_csv == cfg.local_csv_path:
        return cfg
    return ValidatorConfig(
        sheet_url=sheet_url,
        local_csv_path=local_csv,
        request_timeout=cfg.request_timeout,
        aliases=cfg.aliases,
        issue_log=cfg.issue_log,
        logs_directory=cfg.logs_directory,
    )


def load_config(path: Path) -> ValidatorConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")

    _validate_config_schema(data)

    defaults = ValidatorConfig()
    cfg = ValidatorConfig(
        sheet_url=data["sheet_url"],
        local_csv_path=data["local_csv_path"],
        request_timeout=float(data.get("request_timeout", defaults.request_timeout)),
        aliases=dict(data.get("aliases") or {}),
        issue_log=bool(data.get("issue_log", defaults.issue_log)),
        logs_directory=data.get("logs_directory", defaults.logs_directory),
    )
    return apply_env_overrides(cfg)
