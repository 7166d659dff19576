# loancalc/core/debug_log.py
"""
Logging setup for the loan calculator CLI.

- Console: one stderr handler on the ``loancalc`` logger; WARNING by default, DEBUG with -v.
- File: a rotating debug log under logs/ when LOANCALC_DEBUG is truthy (best-effort).
Results are printed to stdout by the CLI and never go through logging.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

LOGGER_NAME = "loancalc"
DEBUG_ENV = "LOANCALC_DEBUG"
DEBUG_LOG_PATH = os.path.join("logs", "loancalc_debug.log")

_FORMAT = "%(asctime)s %(levelname)s %(message)s"
_DATEFMT = "(%Y-%m-%d %H:%M:%S)"


def debug_enabled() -> bool:
    return os.getenv(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}


def _file_handler(log_path: str) -> logging.Handler | None:
    try:
        os.makedirs(os.path.dirname(log_path), exist_ok=True)
        handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
    except OSError:
        # an unwritable log directory must not stop the calculation
        return None
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    return handler


def configure_logging(verbose: bool = False, *, log_path: str = DEBUG_LOG_PATH) -> logging.Logger:
    """
    Create/reuse the package logger. Safe to call repeatedly (handlers are not duplicated).

    Args:
        verbose: lower the console level to DEBUG.
        log_path: rotating file target used when LOANCALC_DEBUG is set.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    console = next((h for h in logger.handlers if getattr(h, "_loancalc_console", False)), None)
    if console is None:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
        console._loancalc_console = True  # type: ignore[attr-defined]
        logger.addHandler(console)
    # follow sys.stderr when it has been swapped since the handler was created
    console.stream = sys.stderr  # type: ignore[attr-defined]
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if debug_enabled() and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        handler = _file_handler(log_path)
        if handler is not None:
            logger.addHandler(handler)

    return logger
