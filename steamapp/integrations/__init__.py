from __future__ import annotations

__all__: list[str] = ["PlayerSummary", "SteamWebService"]

from steamapp.integrations.steam_web_api import PlayerSummary, SteamWebService
