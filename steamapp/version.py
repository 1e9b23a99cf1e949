"""
Central version management for Steam App Catalog.
"""

from __future__ import annotations

__all__ = ["__app_name__", "__version__", "__release_date__", "__author__", "__license__"]

__app_name__ = "Steam App Catalog"
__version__ = "0.3.0"
__release_date__ = "2026-10-19"
__author__ = "SteamApp contributors"
__license__ = "MIT"
