# steamapp/services/catalog_loader.py

"""Builds the catalog index from the Steam Web API or an on-disk cache.

The full app list is large and changes slowly, so it is cached as JSON
and only refetched once the cache is older than ``max_age_hours``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import requests

from steamapp.core.steam_app import SteamApp
from steamapp.integrations.steam_web_api import SteamWebService
from steamapp.services.catalog_index import CatalogIndex
from steamapp.utils.json_utils import file_age_hours, load_json, save_json

if TYPE_CHECKING:
    from steamapp.config import Config

logger = logging.getLogger("steamapp.catalog_loader")

__all__ = ["CatalogLoader"]

_CACHE_FILE_NAME = "app_list.json"


class CatalogLoader:
    """Loads the app catalog, preferring a fresh cache over the network.

    The loader does not keep the index it returns; the caller owns it.

    Attributes:
        cache_file: Path to the cached app list.
        max_age_hours: Age after which the cache is refetched.
    """

    def __init__(self, web_service: SteamWebService, cache_dir: Path, max_age_hours: float = 24) -> None:
        self._web_service = web_service
        self.cache_file: Path = cache_dir / _CACHE_FILE_NAME
        self.max_age_hours = max_age_hours

    @classmethod
    def from_config(cls, cfg: Config) -> CatalogLoader:
        """Builds a loader from the API key, timeout and cache settings in ``cfg``."""
        api_key = (cfg.STEAM_API_KEY or "").strip() or None
        web_service = SteamWebService(api_key, timeout=cfg.REQUEST_TIMEOUT)
        return cls(web_service, cfg.CACHE_DIR, max_age_hours=cfg.APP_LIST_CACHE_HOURS)

    def load(self, force_refresh: bool = False) -> CatalogIndex:
        """Returns a catalog index from cache or a fresh fetch.

        When the fetch fails or comes back empty, a stale cache is used
        rather than an empty catalog.

        Args:
            force_refresh: Skip the cache freshness check.

        Returns:
            The loaded index, empty if nothing could be loaded.

        Raises:
            requests.ConnectionError: On network failure with no cache to
                fall back to.
        """
        age = file_age_hours(self.cache_file)

        if not force_refresh and age is not None and age < self.max_age_hours:
            cached = self._read_cache()
            if cached:
                logger.info("Using cached app list (%d apps, %.1fh old)", len(cached), age)
                return CatalogIndex(cached)

        try:
            apps = self._web_service.fetch_app_list()
        except requests.RequestException:
            stale = self._read_cache()
            if not stale:
                raise
            logger.warning("App list fetch failed, using stale cache (%d apps)", len(stale), exc_info=True)
            return CatalogIndex(stale)

        if not apps:
            stale = self._read_cache()
            if stale:
                logger.warning("App list fetch returned nothing, using stale cache (%d apps)", len(stale))
                return CatalogIndex(stale)
            logger.error("App list unavailable, catalog is empty")
            return CatalogIndex(())

        self._write_cache(apps)
        return CatalogIndex(apps)

    def clear_cache(self) -> None:
        """Deletes the cached app list if present."""
        if self.cache_file.exists():
            self.cache_file.unlink()
            logger.info("Removed app list cache %s", self.cache_file)

    def _read_cache(self) -> tuple[SteamApp, ...]:
        data = load_json(self.cache_file)
        if not data:
            return ()
        return SteamWebService.parse_app_list(data)

    def _write_cache(self, apps: tuple[SteamApp, ...]) -> None:
        payload = {"applist": {"apps": [app.to_dict() for app in apps]}}
        if save_json(self.cache_file, payload):
            logger.debug("Cached %d apps to %s", len(apps), self.cache_file)
