"""Steam Web API client for the app catalog and player profiles.

Fetches the full app list via IStoreService/GetAppList/v1 (paginated,
needs an API key) or the keyless ISteamApps/GetAppList/v2, and player
summaries via ISteamUser/GetPlayerSummaries/v2. Rate limits (HTTP 429)
are retried with exponential backoff.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import requests

from steamapp.core.steam_app import MAX_APP_ID, SteamApp

logger = logging.getLogger("steamapp.steam_web_api")

__all__ = ["PlayerSummary", "SteamWebService"]

_BASE_DELAY = 1.0
_MAX_RETRIES = 3
_PAGE_SIZE = 50000

BASE_URL = "https://api.steampowered.com/"
_APP_LIST_V2_URL = BASE_URL + "ISteamApps/GetAppList/v2/"
_STORE_APP_LIST_URL = BASE_URL + "IStoreService/GetAppList/v1/"
_PLAYER_SUMMARIES_URL = BASE_URL + "ISteamUser/GetPlayerSummaries/v2/"


@dataclass(frozen=True)
class PlayerSummary:
    """Public profile data for one Steam account.

    Attributes:
        steam_id: SteamID64 of the account.
        persona_name: Display name.
        profile_url: Link to the community profile.
        avatar_url: Full-size avatar image URL.
        persona_state: 0 offline, 1 online, 2 busy, 3 away, 4 snooze,
            5 looking to trade, 6 looking to play.
        visibility: 1 private/friends-only, 3 public.
    """

    steam_id: str
    persona_name: str
    profile_url: str = ""
    avatar_url: str = ""
    persona_state: int = 0
    visibility: int = 0

    @property
    def is_public(self) -> bool:
        return self.visibility == 3


class SteamWebService:
    """Steam Web API client.

    Attributes:
        api_key: Steam Web API key, or None for keyless endpoints only.
        timeout: Per-request timeout in seconds.
    """

    def __init__(self, api_key: str | None = None, timeout: float = 30.0) -> None:
        """Initializes the client.

        Args:
            api_key: Steam Web API key. None selects the keyless app list
                endpoint and disables player summaries.
            timeout: Per-request timeout in seconds.

        Raises:
            ValueError: If api_key is given but empty or whitespace-only.
        """
        if api_key is not None and not api_key.strip():
            raise ValueError("Steam API key must not be empty")
        self.api_key: str | None = api_key.strip() if api_key is not None else None
        self.timeout = timeout

    # ------------------------------------------------------------------
    # App list
    # ------------------------------------------------------------------

    def fetch_app_list(self) -> tuple[SteamApp, ...]:
        """Fetches every app Steam publishes, in upstream order.

        Returns:
            Parsed catalog entries, or an empty tuple if the fetch failed.

        Raises:
            requests.ConnectionError: On network failure.
        """
        if self.api_key:
            return self._fetch_store_app_list()

        data = self._get_json(_APP_LIST_V2_URL, {})
        if data is None:
            return ()
        apps = self.parse_app_list(data)
        logger.info("Fetched %d apps from GetAppList/v2", len(apps))
        return apps

    def _fetch_store_app_list(self) -> tuple[SteamApp, ...]:
        """Pages through IStoreService/GetAppList/v1 until Steam reports no more.

        A failed page discards the pages fetched before it, so a partial
        list is never handed out as the full catalog.
        """
        apps: list[SteamApp] = []
        last_appid = 0
        page = 0

        while True:
            page += 1
            params: dict[str, Any] = {
                "key": self.api_key,
                "max_results": _PAGE_SIZE,
                "include_games": "true",
                "include_dlc": "true",
                "include_software": "true",
                "include_videos": "true",
                "include_hardware": "true",
            }
            if last_appid:
                params["last_appid"] = last_appid

            data = self._get_json(_STORE_APP_LIST_URL, params)
            if data is None:
                logger.warning("App list page %d failed, discarding %d apps", page, len(apps))
                return ()

            apps.extend(self.parse_app_list(data))

            response = data.get("response")
            if not isinstance(response, dict) or not response.get("have_more_results"):
                break

            next_appid = response.get("last_appid", 0)
            if not isinstance(next_appid, int) or next_appid <= last_appid:
                logger.warning("App list cursor did not advance past %d, stopping", last_appid)
                break
            last_appid = next_appid

        logger.info("Fetched %d apps from IStoreService/GetAppList in %d page(s)", len(apps), page)
        return tuple(apps)

    @staticmethod
    def parse_app_list(payload: Any) -> tuple[SteamApp, ...]:
        """Parses a GetAppList response into catalog entries.

        Accepts both the ``{"applist": {"apps": [...]}}`` shape (v2 and the
        on-disk cache) and the ``{"response": {"apps": [...]}}`` shape
        (IStoreService). Malformed records are skipped.

        Args:
            payload: Decoded JSON body.

        Returns:
            Entries in the order they appear in the payload.
        """
        if not isinstance(payload, dict):
            logger.warning("Unexpected app list payload type: %s", type(payload).__name__)
            return ()

        if "applist" in payload:
            container = payload["applist"]
        elif "response" in payload:
            container = payload["response"]
        else:
            logger.warning("App list payload has neither 'applist' nor 'response'")
            return ()

        # IStoreService omits "apps" on an empty final page
        records = container.get("apps", []) if isinstance(container, dict) else None
        if not isinstance(records, list):
            logger.warning("App list payload has no 'apps' list")
            return ()

        apps: list[SteamApp] = []
        skipped = 0
        for raw in records:
            app = SteamWebService._parse_app(raw)
            if app is None:
                skipped += 1
                continue
            apps.append(app)

        if skipped:
            logger.debug("Skipped %d malformed app list records", skipped)
        return tuple(apps)

    @staticmethod
    def _parse_app(raw: Any) -> SteamApp | None:
        """Parses one ``{"appid", "name"}`` record, or None if malformed."""
        if not isinstance(raw, dict):
            return None
        app_id = raw.get("appid")
        name = raw.get("name")
        # bool is an int subclass
        if not isinstance(app_id, int) or isinstance(app_id, bool):
            return None
        if not 0 <= app_id <= MAX_APP_ID:
            return None
        if not isinstance(name, str):
            return None
        return SteamApp(app_id=app_id, name=name)

    # ------------------------------------------------------------------
    # Player profile
    # ------------------------------------------------------------------

    def get_player_summary(self, steam_id: str) -> PlayerSummary | None:
        """Fetches the public profile summary for one account.

        Args:
            steam_id: 64-bit Steam user ID.

        Returns:
            PlayerSummary, or None without an API key, on failure, or if
            Steam does not know the account.
        """
        if not self.api_key:
            logger.warning("GetPlayerSummaries needs a Steam API key")
            return None

        params = {"key": self.api_key, "steamids": steam_id}
        data = self._get_json(_PLAYER_SUMMARIES_URL, params)
        if data is None:
            return None

        response = data.get("response")
        players = response.get("players", []) if isinstance(response, dict) else None
        if not isinstance(players, list):
            logger.warning("GetPlayerSummaries returned no 'players' list")
            return None
        if not players:
            logger.info("No player summary for %s", steam_id)
            return None

        raw = players[0]
        if not isinstance(raw, dict):
            logger.warning("GetPlayerSummaries returned a malformed player record")
            return None
        return PlayerSummary(
            steam_id=str(raw.get("steamid", steam_id)),
            persona_name=raw.get("personaname", ""),
            profile_url=raw.get("profileurl", ""),
            avatar_url=raw.get("avatarfull", ""),
            persona_state=raw.get("personastate", 0),
            visibility=raw.get("communityvisibilitystate", 0),
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _get_json(self, url: str, params: dict[str, Any]) -> dict[str, Any] | None:
        """GETs ``url`` and decodes the JSON body.

        Implements exponential backoff on HTTP 429 (rate limit).

        Returns:
            Decoded body, or None on HTTP errors, bad JSON or exhausted retries.

        Raises:
            requests.ConnectionError: On network failure.
        """
        endpoint_name = url.rstrip("/").rsplit("/", 2)[-2]

        for attempt in range(_MAX_RETRIES):
            try:
                response = requests.get(url, params=params, timeout=self.timeout)
            except requests.ConnectionError:
                logger.error("Network error calling %s", endpoint_name)
                raise
            except requests.RequestException as exc:
                logger.warning("%s failed: %s", endpoint_name, exc)
                return None

            if response.status_code == 429:
                delay = _BASE_DELAY * (2**attempt)
                logger.warning("Rate limited (429), retrying in %.1fs...", delay)
                time.sleep(delay)
                continue

            try:
                response.raise_for_status()
                data = response.json()
            except (requests.RequestException, ValueError) as exc:
                logger.warning("%s failed: %s", endpoint_name, exc)
                return None

            if not isinstance(data, dict):
                logger.warning("%s returned a non-object body", endpoint_name)
                return None
            return data

        logger.error("Exhausted retries for %s", endpoint_name)
        return None
