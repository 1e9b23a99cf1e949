"""
Configuration - paths, API key and catalog cache settings.
Values come from defaults, then settings.json, then the environment (.env).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from steamapp.utils.json_utils import load_json, save_json

logger = logging.getLogger("steamapp.config")


__all__ = ["Config", "config"]


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages data paths, the Steam Web API key and catalog cache settings.
    """

    APP_DIR: Path = Path(__file__).parent.parent
    DATA_DIR: Path = APP_DIR / "data"
    CACHE_DIR: Path = DATA_DIR / "cache"

    SETTINGS_FILE: Path = DATA_DIR / "settings.json"

    # API KEYS
    STEAM_API_KEY: str | None = None

    # SteamID64 whose profile summary is shown after sign-in
    STEAM_USER_ID: str | None = None

    APP_LIST_CACHE_HOURS: float = 24
    REQUEST_TIMEOUT: float = 30.0

    LOG_LEVEL: str = "WARNING"
    LOG_FILE: Path | None = None

    def __post_init__(self):
        """Load settings, then let the environment override them."""
        self._load_settings()

        load_dotenv()
        env_key = _clean_str(os.getenv("STEAM_API_KEY"))
        if env_key:
            self.STEAM_API_KEY = env_key

        env_user = _clean_str(os.getenv("STEAM_USER_ID"))
        if env_user:
            self.STEAM_USER_ID = env_user

        env_level = _clean_str(os.getenv("STEAMAPP_LOG_LEVEL"))
        if env_level:
            self.LOG_LEVEL = env_level

    def _load_settings(self) -> None:
        """Load settings from JSON file.

        Values of the wrong type are logged and the default is kept.
        """
        data = load_json(self.SETTINGS_FILE)
        if not isinstance(data, dict):
            logger.error("Ignoring %s: expected a JSON object", self.SETTINGS_FILE)
            return

        self.STEAM_API_KEY = _clean_str(data.get("steam_api_key")) or self.STEAM_API_KEY
        self.STEAM_USER_ID = _clean_str(data.get("steam_user_id")) or self.STEAM_USER_ID
        self.APP_LIST_CACHE_HOURS = _positive_number(
            data, "app_list_cache_hours", self.APP_LIST_CACHE_HOURS, allow_zero=True
        )
        self.REQUEST_TIMEOUT = _positive_number(data, "request_timeout", self.REQUEST_TIMEOUT)
        self.LOG_LEVEL = _clean_str(data.get("log_level")) or self.LOG_LEVEL

        log_file = _clean_str(data.get("log_file"))
        if log_file:
            self.LOG_FILE = Path(log_file)

    def save(self) -> bool:
        """Save current configuration to JSON file."""
        data = {
            "steam_api_key": self.STEAM_API_KEY,
            "steam_user_id": self.STEAM_USER_ID,
            "app_list_cache_hours": self.APP_LIST_CACHE_HOURS,
            "request_timeout": self.REQUEST_TIMEOUT,
            "log_level": self.LOG_LEVEL,
            "log_file": str(self.LOG_FILE) if self.LOG_FILE else None,
        }
        return save_json(self.SETTINGS_FILE, data)


def _clean_str(value: object) -> str | None:
    """Stripped string, or None for non-strings and blank strings."""
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _positive_number(data: dict, key: str, default: float, allow_zero: bool = False) -> float:
    if key not in data or data[key] is None:
        return default
    value = data[key]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.warning("Ignoring %s=%r in settings: expected a number", key, value)
        return default
    if value < 0 or (value == 0 and not allow_zero):
        logger.warning("Ignoring %s=%r in settings: out of range", key, value)
        return default
    return value


# Global instance
config = Config()
