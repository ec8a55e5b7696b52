from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv

from transcript_links.config.loader import ConfigError, apply_env_overrides, load_config
from transcript_links.logging.init import log_summary, setup_logging
from transcript_links.logging.issue_log import IssueLogBuffer, records_from_issues
from transcript_links.models.config_models import ValidatorConfig
from transcript_links.models.row_data import Row
from transcript_links.services.lookup import find_link, resolve_school_name, school_options
from transcript_links.services.orchestrator import ValidationError, validate_rows
from transcript_links.services.reporter import render_report
from transcript_links.services.summary import render_summary_line
from transcript_links.sheet.reader import (
    SourceError,
    SourceParseError,
    SourceText,
    load_csv_text,
    parse_rows,
)

"""CLI entrypoint.

validate (default):
- Load config (.env overrides applied)
- Acquire the sheet CSV (Google Sheet export, local fallback)
- Parse rows, classify, reconcile, report
- Exit 0 when no issues, 1 otherwise (also on config / source / parse failure)

lookup:
- Same acquisition, then print the transcript link for --school / --year
- --list-schools prints the selectable names (alias keys included) instead
"""

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

DEFAULT_CONFIG_PATH = Path("config/validator.yml")

NO_LINK_MESSAGE = "No link found for the selected school and year."

COMMANDS = ("validate", "lookup")


def _load_env_file(path: Path, override: bool = True) -> None:
    """Load .env using python-dotenv (.env values win over the process env)."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=Path, default=None, help="YAML config (default: config/validator.yml)")
    common.add_argument("--source", type=Path, default=None, help="Read this local CSV instead of the sheet URL")
    common.add_argument("--current-year", type=int, default=None, help="Year that 'present' resolves to")
    common.add_argument("--debug", action="store_true", help="Enable debug logging")

    p = argparse.ArgumentParser(
        prog="transcript-links",
        description="Validate the transcript link sheet or look up a link",
    )
    sub = p.add_subparsers(dest="command", required=True)
    v = sub.add_parser("validate", parents=[common], help="Check year ranges for gaps / overlaps (default)")
    v.add_argument("--issue-log", action="store_true", help="Write issues as JSON Lines under logs/")
    lk = sub.add_parser("lookup", parents=[common], help="Find the transcript link for a school and year")
    lk.add_argument("--school", default=None, help="School name or alias")
    lk.add_argument("--year", type=int, default=None, help="Graduation year")
    lk.add_argument("--list-schools", action="store_true", help="Print selectable school names and exit")
    # サブコマンド省略時は validate。共通オプションが先に来た場合はコマンドを先頭へ
    command = next((a for a in argv if a in COMMANDS), None)
    if command is None:
        if not argv or argv[0] not in ("-h", "--help"):
            argv = ["validate", *argv]
    elif argv[0] != command:
        i = argv.index(command)
        argv = [command, *argv[:i], *argv[i + 1:]]
    args = p.parse_args(argv)
    if not hasattr(args, "issue_log"):
        args.issue_log = False
    return args


def _resolve_config(path: Path | None) -> ValidatorConfig:
    if path is not None:
        return load_config(path)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    # 設定ファイル無し -> 既定値 + 環境変数
    return apply_env_overrides(ValidatorConfig())


def _acquire(cfg: ValidatorConfig, source: Path | None) -> SourceText:
    if source is not None:
        return load_csv_text(None, source)
    return load_csv_text(cfg.sheet_url, Path(cfg.local_csv_path), timeout=cfg.request_timeout)


def _run_validate(cfg: ValidatorConfig, source: SourceText, rows: list[Row], current_year: int, issue_log: bool) -> int:
    logger = setup_logging()
    try:
        result = validate_rows(rows, current_year)
    except ValidationError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    logger.info(f"Checked source: {source.source_label}")

    emit = logger.info if result.ok else logger.error
    for line in render_report(result.issues):
        emit(line)

    if (issue_log or cfg.issue_log) and not result.ok:
        buf = IssueLogBuffer(cfg.logs_directory)
        buf.extend(records_from_issues(source.source_label, result.issues))
        logger.info(f"issue log written: {buf.flush()}")

    summary_line = render_summary_line(result)
    log_summary(summary_line[len("SUMMARY "):])

    return EXIT_SUCCESS if result.ok else EXIT_FAILURE


def _run_lookup(cfg: ValidatorConfig, rows: list[Row], args: argparse.Namespace, current_year: int) -> int:
    logger = setup_logging()
    if args.list_schools:
        for name in school_options(rows, cfg.aliases):
            print(name)
        return EXIT_SUCCESS
    if not args.school or args.year is None:
        logger.error("lookup requires --school and --year (or --list-schools)")
        return EXIT_FAILURE
    school, year = args.school, args.year
    canonical = resolve_school_name(school, cfg.aliases)
    if canonical != school.strip():
        logger.info(f"Mapped to current school: {canonical}")
    link = find_link(rows, school, year, current_year, aliases=cfg.aliases)
    if link is None:
        logger.error(NO_LINK_MESSAGE)
        return EXIT_FAILURE
    print(link)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    # None のときのみ sys.argv を読む ([] はテストからの明示呼び出し)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"), override=True)
    try:
        cfg = _resolve_config(args.config)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FAILURE

    current_year = args.current_year or datetime.now().year

    try:
        source = _acquire(cfg, args.source)
    except SourceError as e:
        logger.error(f"Failed to validate CSV: {e}")
        return EXIT_FAILURE

    try:
        rows = parse_rows(source.text)
    except SourceParseError as e:
        logger.error("CSV parse errors detected:")
        for row, message in e.errors:
            logger.error(f"  - row {row if row is not None else '?'}: {message}")
        return EXIT_FAILURE

    if args.command == "lookup":
        return _run_lookup(cfg, rows, args, current_year)
    return _run_validate(cfg, source, rows, current_year, args.issue_log)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
