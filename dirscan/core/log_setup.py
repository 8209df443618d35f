from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "dirscan"
REPORT_LOGGER_NAME = "dirscan.report"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _reset(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def configure_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    progress: bool = False,
) -> logging.Logger:
    """Set up the ``dirscan`` loggers for one CLI run.

    Messages go to stderr, DEBUG and up when verbose, INFO otherwise. While a
    progress line owns stderr only INFO and up are shown there. With a log
    file every record is also appended to it, and the ``dirscan.report``
    logger copies the printed summary into that file only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    report = logging.getLogger(REPORT_LOGGER_NAME)
    _reset(logger)
    _reset(report)

    level = logging.DEBUG if verbose else logging.INFO
    logger.setLevel(level)
    logger.propagate = False
    report.setLevel(logging.INFO)
    report.propagate = False

    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(logging.Formatter("%(asctime)s %(message)s", "%H:%M:%S"))
    if progress:
        stream.setLevel(logging.INFO)
    logger.addHandler(stream)

    if log_file is None:
        report.addHandler(logging.NullHandler())
        return logger

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError as exc:
        raise SystemExit(f"Failed to open log file {log_file}: {exc}") from exc
    file_handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(file_handler)
    report.addHandler(file_handler)
    logger.info("Logging enabled. Log file: %s", log_file)

    return logger
