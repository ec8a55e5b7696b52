from __future__ import annotations

import logging
from io import StringIO

from transcript_links.logging.init import (
    LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_setup_logging_idempotent():
    first = setup_logging()
    second = setup_logging()
    assert first is second
    assert len(second.handlers) == 1
    assert get_logger() is first


def test_setup_logging_debug_lowers_level():
    logger = setup_logging()
    setup_logging(debug=True)
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_labeled_prefixes():
    stream = StringIO()
    logger = logging.getLogger("test_transcript_links_labels")
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("info message")
    logger.warning("warning message")
    logger.error("error message")
    logger.log(SUMMARY_LEVEL, "rows=1")

    assert stream.getvalue().splitlines() == [
        "INFO info message",
        "WARN warning message",
        "ERROR error message",
        "SUMMARY rows=1",
    ]


def test_module_loggers_propagate_to_app_logger(capsys):
    setup_logging()
    logging.getLogger("transcript_links.sheet.reader").warning("child message")
    log_summary("rows=0")
    out = capsys.readouterr().out
    assert "WARN child message" in out
    assert "SUMMARY rows=0" in out


def test_debug_lines_hidden_until_debug(capsys):
    setup_logging()
    logging.getLogger("transcript_links.services.classifier").debug("line 2: A 2000-2001")
    log_summary("rows=1 status=passed")
    out = capsys.readouterr().out
    assert "DEBUG" not in out
    assert out.splitlines() == ["SUMMARY rows=1 status=passed"]
