# steamapp/services/catalog_index.py

"""Read-only name/id lookups over the Steam app catalog.

Steam offers no server-side search, so every query is a linear scan over
the full app list. No lookup table is built: the catalog is scanned in its
upstream order and the first match wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from steamapp.core.steam_app import SteamApp

logger = logging.getLogger("steamapp.catalog_index")

__all__ = ["CatalogIndex"]


class CatalogIndex:
    """Immutable snapshot of the app catalog with lookup helpers.

    Lookups never raise; a miss is ``None`` or an empty list.
    """

    def __init__(self, apps: Iterable[SteamApp]) -> None:
        self._apps: tuple[SteamApp, ...] = tuple(apps)
        logger.debug("Catalog index built with %d apps", len(self._apps))

    @property
    def apps(self) -> tuple[SteamApp, ...]:
        """All entries in catalog order."""
        return self._apps

    def __len__(self) -> int:
        return len(self._apps)

    def __iter__(self) -> Iterator[SteamApp]:
        return iter(self._apps)

    def filter_by_name(self, search: str) -> list[SteamApp]:
        """Returns every app whose name contains ``search``.

        Matching is case-sensitive. An empty string matches every app.

        Args:
            search: Substring to look for in each app name.

        Returns:
            Matching apps in catalog order.
        """
        return [app for app in self._apps if search in app.name]

    def name_by_id(self, app_id: int) -> str | None:
        """Returns the name of the first app with ``app_id``, or None."""
        for app in self._apps:
            if app.app_id == app_id:
                return app.name
        return None

    def id_by_fuzzy_name(self, name: str) -> int | None:
        """Resolves an app id by substring match on the name.

        The first app in catalog order whose name contains ``name`` wins,
        so a short query can resolve to an unrelated title that happens to
        contain it ("Portal" also matches "Portal Knights").

        Args:
            name: Substring to search for.

        Returns:
            App id of the first match, or None if nothing matches.
        """
        for app in self._apps:
            if name in app.name:
                return app.app_id
        return None

    def id_by_exact_name(self, name: str) -> int | None:
        """Returns the id of the first app named exactly ``name``, or None.

        Comparison is case-sensitive.
        """
        for app in self._apps:
            if app.name == name:
                return app.app_id
        return None
