# jsonconvert/utils/logger.py
"""
Package logging.

Records go to stderr (stdout carries converted documents). Two env vars
configure the default logger at import time:

    LOG_LEVEL            DEBUG | INFO | WARNING | ... (default INFO)
    JSONCONVERT_LOG_DIR  also write a rotating jsonconvert.log there

The CLI calls `init_logger` again for --verbose / --log-dir.
"""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

ROOT_LOGGER = "jsonconvert"
LOG_FILE = "jsonconvert.log"
LOG_DIR_ENV = "JSONCONVERT_LOG_DIR"

_FMT = "%(asctime)s | %(levelname)-8s | %(name)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"

# level -> ANSI color, checked from the most severe down
_COLORS = (
    (logging.ERROR, "\033[91m"),    # red
    (logging.WARNING, "\033[93m"),  # yellow
    (logging.INFO, ""),
    (logging.NOTSET, "\033[90m"),   # grey for debug
)


def env_level(default: str = "INFO") -> int:
    """LOG_LEVEL from env; unknown names fall back to INFO."""
    level = logging.getLevelName(os.getenv("LOG_LEVEL", default).upper())
    return level if isinstance(level, int) else logging.INFO


class _ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        if not sys.stderr.isatty():
            return base
        color = next(c for lvl, c in _COLORS if record.levelno >= lvl)
        return f"{color}{base}\033[0m" if color else base


def init_logger(
    level: int | None = None,
    log_dir: str | Path | None = None,
    file_max_mb: int = 5,
    file_backup: int = 3,
) -> logging.Logger:
    """
    (Re)configure the package logger: stderr handler plus, when `log_dir`
    is given, a rotating file handler writing `log_dir/jsonconvert.log`.
    Handlers from a previous call are closed.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    logger.setLevel(level if level is not None else env_level())

    sh = logging.StreamHandler(sys.stderr)
    sh.setFormatter(_ColorFormatter(fmt=_FMT, datefmt=_DATEFMT))
    logger.addHandler(sh)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            filename=str(log_dir / LOG_FILE),
            maxBytes=file_max_mb * 1024 * 1024,
            backupCount=file_backup,
            encoding="utf-8",
        )
        fh.setFormatter(logging.Formatter(fmt=_FMT, datefmt=_DATEFMT))
        logger.addHandler(fh)

    return logger


log = init_logger(log_dir=os.getenv(LOG_DIR_ENV) or None)


def get_logger(child: str) -> logging.Logger:
    """Child logger under the package logger, e.g. get_logger("convert")."""
    return logging.getLogger(ROOT_LOGGER).getChild(child)
