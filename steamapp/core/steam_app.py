"""Catalog entry model."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MAX_APP_ID", "SteamApp"]

# App ids are unsigned 32-bit integers.
MAX_APP_ID = 2**32 - 1


@dataclass(frozen=True)
class SteamApp:
    """One (application id, name) pair from the Steam app list.

    Attributes:
        app_id: Steam application ID.
        name: Display name as published by Steam.
    """

    app_id: int
    name: str

    def to_dict(self) -> dict[str, int | str]:
        """Serializes to the Web API record shape (``appid``/``name``)."""
        return {"appid": self.app_id, "name": self.name}
