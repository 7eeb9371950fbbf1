"""Logging setup for iconlookup — file handler, excepthook, and log path."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from iconlookup.core.config import cache_dir

LOG_FILE_NAME = "iconlookup.log"
LOG_MAX_BYTES = 512 * 1024  # 512 KB
LOG_BACKUP_COUNT = 2

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library code only logs; handlers are attached by the CLI.
logging.getLogger("iconlookup").addHandler(logging.NullHandler())


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to file (and stderr when verbose) and install excepthook."""
    root = logging.getLogger("iconlookup")
    root.setLevel(logging.DEBUG)

    # Avoid duplicate handlers
    if not any(getattr(h, "_iconlookup_file", False) for h in root.handlers):
        try:
            from logging.handlers import RotatingFileHandler

            log_file = get_log_path()
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError:
            handler = logging.StreamHandler(sys.stderr)

        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        handler._iconlookup_file = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    if verbose and not any(getattr(h, "_iconlookup_verbose", False) for h in root.handlers):
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(logging.DEBUG)
        console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        console._iconlookup_verbose = True  # type: ignore[attr-defined]
        root.addHandler(console)

    sys.excepthook = _excepthook


def _excepthook(exc_type: type, exc_value: BaseException, exc_tb) -> None:
    """Log uncaught exceptions to file and stderr."""
    lines = traceback.format_exception(exc_type, exc_value, exc_tb)
    msg = "".join(lines)
    logger = logging.getLogger("iconlookup")
    logger.critical("Uncaught exception:\n%s", msg)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(f"iconlookup.{name}")


def get_log_path() -> Path:
    """Return the path to the log file."""
    return cache_dir() / LOG_FILE_NAME
