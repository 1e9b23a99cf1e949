from __future__ import annotations

from steamapp.services.catalog_index import CatalogIndex
from steamapp.services.catalog_loader import CatalogLoader

__all__: list[str] = [
    "CatalogIndex",
    "CatalogLoader",
]
