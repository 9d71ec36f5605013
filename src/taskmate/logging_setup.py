# src/taskmate/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskmate.log"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _OwnLogsFilter(logging.Filter):
    """stderr shares the terminal with the replies: only our own records pass below ERROR."""

    def filter(self, record: logging.LogRecord) -> bool:
        own = record.name == "taskmate" or record.name.startswith("taskmate.")
        return own or record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskmate",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Route all logging to stderr (filtered) and to `<log_dir>/taskmate.log`.

    Replaces whatever handlers the root logger had; returns the log file path.
    """
    log_file = Path(log_dir) / LOG_FILE_NAME
    log_file.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.addFilter(_OwnLogsFilter())

    to_file = logging.FileHandler(str(log_file), encoding="utf-8")
    to_file.setLevel(file_level)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in (console, to_file):
        h.setFormatter(formatter)
        root.addHandler(h)

    # warnings.warn(...) -> 'py.warnings' logger (console shows it only at ERROR+).
    logging.captureWarnings(True)

    return log_file
