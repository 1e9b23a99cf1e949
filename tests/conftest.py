# tests/conftest.py
from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from steamapp.core.steam_app import SteamApp


@pytest.fixture
def sample_apps() -> list[SteamApp]:
    """Small catalog in upstream order."""
    return [
        SteamApp(app_id=10, name="Half-Life"),
        SteamApp(app_id=20, name="Half-Life 2"),
        SteamApp(app_id=30, name="Portal"),
    ]


@pytest.fixture
def app_list_payload() -> dict:
    """GetAppList/v2 response body."""
    return {
        "applist": {
            "apps": [
                {"appid": 10, "name": "Half-Life"},
                {"appid": 20, "name": "Half-Life 2"},
                {"appid": 30, "name": "Portal"},
            ]
        }
    }


def make_response(status_code: int = 200, body: object = None) -> MagicMock:
    """Builds a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = body if body is not None else {}
    response.raise_for_status = MagicMock()
    return response


@pytest.fixture
def response_factory():
    """Factory for fake requests.Response objects."""
    return make_response
