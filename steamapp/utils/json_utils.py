"""JSON file I/O shared by the settings file and the app list cache.

Read failures never raise: callers get ``default`` back and a warning in
the log. Writes go through a sibling temp file so a crash mid-write cannot
leave a truncated cache behind.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import time
from pathlib import Path
from typing import Any

__all__ = ["file_age_hours", "load_json", "save_json"]

logger = logging.getLogger("steamapp.json_utils")


def load_json(path: Path, default: Any = None) -> Any:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.
        default: Value to return if the file is missing or unreadable.
            Defaults to an empty dict if None.

    Returns:
        Parsed JSON data, or ``default`` on failure.
    """
    if default is None:
        default = {}
    if not path.exists():
        return default
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
        logger.warning("Failed to load JSON from %s: %s", path, exc)
        return default


def save_json(path: Path, data: Any, ensure_parents: bool = True) -> bool:
    """Serialize ``data`` to ``path`` atomically.

    Args:
        path: Target file path.
        data: JSON-serializable data.
        ensure_parents: Create parent directories if needed.

    Returns:
        True on success, False on failure.
    """
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        if ensure_parents:
            path.parent.mkdir(parents=True, exist_ok=True)
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
        os.replace(tmp_path, path)
        return True
    except (OSError, TypeError, ValueError) as exc:
        logger.error("Failed to save JSON to %s: %s", path, exc)
        # The temp file may be unreachable too, e.g. when a parent is a regular file.
        with contextlib.suppress(OSError):
            tmp_path.unlink(missing_ok=True)
        return False


def file_age_hours(path: Path) -> float | None:
    """Hours since ``path`` was last modified, or None if it does not exist."""
    try:
        mtime = path.stat().st_mtime
    except OSError:
        return None
    return max(0.0, (time.time() - mtime) / 3600)
