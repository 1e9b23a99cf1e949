"""Logging configuration for Steam App Catalog.

Library modules log to children of the ``steamapp`` logger and never attach
handlers themselves. The command line entry point calls
:func:`setup_logging_from_config` once at startup.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from steamapp.config import Config

__all__ = ["LOG_FORMAT", "logger", "resolve_level", "setup_logging", "setup_logging_from_config"]

logger = logging.getLogger("steamapp")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_CONSOLE_HANDLER = "steamapp.console"


def resolve_level(level: int | str) -> int:
    """Turns ``"debug"``, ``"INFO"`` or a numeric level into a logging level.

    Unknown names fall back to WARNING.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(
    level: int | str = logging.INFO,
    log_file: Path | None = None,
) -> None:
    """Attach console and optional file handlers to the package logger.

    Console output goes to stderr so command output on stdout stays clean.
    Calling this again changes the console level and adds a file handler
    if one was not attached before; handlers are never duplicated.

    Args:
        level: Level name or number for the logger and console.
        log_file: Optional log file, written at DEBUG level.
    """
    numeric = resolve_level(level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S")

    console = next((h for h in logger.handlers if h.get_name() == _CONSOLE_HANDLER), None)
    if console is None:
        console = logging.StreamHandler(sys.stderr)
        console.set_name(_CONSOLE_HANDLER)
        console.setFormatter(formatter)
        logger.addHandler(console)
    console.setLevel(numeric)

    file_handler = next((h for h in logger.handlers if isinstance(h, logging.FileHandler)), None)
    if log_file is not None and file_handler is None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # DEBUG records must reach the file handler even when the console is quieter.
    logger.setLevel(logging.DEBUG if file_handler is not None else numeric)


def setup_logging_from_config(cfg: Config, verbose: bool = False) -> None:
    """Configure logging from ``LOG_LEVEL`` and ``LOG_FILE`` in ``cfg``.

    Args:
        cfg: Loaded configuration.
        verbose: Force DEBUG on the console regardless of ``LOG_LEVEL``.
    """
    setup_logging(logging.DEBUG if verbose else cfg.LOG_LEVEL, cfg.LOG_FILE)
