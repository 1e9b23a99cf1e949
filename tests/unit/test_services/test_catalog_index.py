# tests/unit/test_services/test_catalog_index.py

"""Tests for CatalogIndex lookups."""

from __future__ import annotations

import pytest

from steamapp.core.steam_app import SteamApp
from steamapp.services.catalog_index import CatalogIndex


@pytest.fixture
def index(sample_apps: list[SteamApp]) -> CatalogIndex:
    return CatalogIndex(sample_apps)


# ---------------------------------------------------------------------------
# filter_by_name
# ---------------------------------------------------------------------------


class TestFilterByName:
    """Tests for substring filtering."""

    def test_returns_matches_in_catalog_order(self, index: CatalogIndex) -> None:
        results = index.filter_by_name("Half-Life")
        assert results == [SteamApp(10, "Half-Life"), SteamApp(20, "Half-Life 2")]

    def test_case_sensitive(self, index: CatalogIndex) -> None:
        assert index.filter_by_name("half-life") == []

    def test_no_match_returns_empty_list(self, index: CatalogIndex) -> None:
        assert index.filter_by_name("Fortnite") == []

    def test_empty_query_matches_everything(self, index: CatalogIndex, sample_apps: list[SteamApp]) -> None:
        assert index.filter_by_name("") == sample_apps

    def test_every_match_contains_query_and_none_missing(self) -> None:
        """Result is exactly the entries whose name contains the query."""
        apps = [
            SteamApp(1, "Portal"),
            SteamApp(2, "Portal Knights"),
            SteamApp(3, "Half-Life"),
            SteamApp(4, "The Portal Stories"),
            SteamApp(5, "portal lowercase"),
        ]
        index = CatalogIndex(apps)
        results = index.filter_by_name("Portal")
        assert results == [a for a in apps if "Portal" in a.name]
        assert [a.app_id for a in results] == [1, 2, 4]

    def test_duplicate_names_are_all_returned(self) -> None:
        index = CatalogIndex([SteamApp(1, "Demo"), SteamApp(2, "Demo")])
        assert [a.app_id for a in index.filter_by_name("Demo")] == [1, 2]


# ---------------------------------------------------------------------------
# name_by_id
# ---------------------------------------------------------------------------


class TestNameById:
    """Tests for id to name lookup."""

    def test_found(self, index: CatalogIndex) -> None:
        assert index.name_by_id(30) == "Portal"

    def test_missing_returns_none(self, index: CatalogIndex) -> None:
        assert index.name_by_id(99) is None

    def test_first_entry_wins_on_duplicate_id(self) -> None:
        index = CatalogIndex([SteamApp(7, "First"), SteamApp(7, "Second")])
        assert index.name_by_id(7) == "First"


# ---------------------------------------------------------------------------
# id_by_fuzzy_name
# ---------------------------------------------------------------------------


class TestIdByFuzzyName:
    """Tests for substring name resolution."""

    def test_first_match_wins(self, index: CatalogIndex) -> None:
        assert index.id_by_fuzzy_name("Half-Life") == 10

    def test_partial_match_resolves(self, index: CatalogIndex) -> None:
        assert index.id_by_fuzzy_name("Life 2") == 20

    def test_missing_returns_none(self, index: CatalogIndex) -> None:
        assert index.id_by_fuzzy_name("Dota") is None

    def test_unintended_partial_match_keeps_catalog_order(self) -> None:
        """An earlier title containing the query wins over the exact title."""
        index = CatalogIndex([SteamApp(1, "Portal Knights"), SteamApp(2, "Portal")])
        assert index.id_by_fuzzy_name("Portal") == 1

    @pytest.mark.parametrize("query", ["Half-Life", "Half", "Portal", "2", "", "nothing"])
    def test_agrees_with_filter_by_name(self, index: CatalogIndex, query: str) -> None:
        matches = index.filter_by_name(query)
        expected = matches[0].app_id if matches else None
        assert index.id_by_fuzzy_name(query) == expected


# ---------------------------------------------------------------------------
# id_by_exact_name
# ---------------------------------------------------------------------------


class TestIdByExactName:
    """Tests for exact name resolution."""

    def test_exact_match(self, index: CatalogIndex) -> None:
        assert index.id_by_exact_name("Half-Life 2") == 20

    def test_case_sensitive(self, index: CatalogIndex) -> None:
        assert index.id_by_exact_name("half-life") is None

    def test_substring_does_not_match(self, index: CatalogIndex) -> None:
        assert index.id_by_exact_name("Half") is None

    def test_first_entry_wins_on_duplicate_name(self) -> None:
        index = CatalogIndex([SteamApp(5, "Demo"), SteamApp(6, "Demo")])
        assert index.id_by_exact_name("Demo") == 5


class TestCatalogIndexContainer:
    """Tests for the container protocol."""

    def test_len_and_iteration_follow_catalog(self, index: CatalogIndex, sample_apps: list[SteamApp]) -> None:
        assert len(index) == 3
        assert list(index) == sample_apps
        assert index.apps == tuple(sample_apps)

    def test_snapshot_is_independent_of_source_list(self, sample_apps: list[SteamApp]) -> None:
        index = CatalogIndex(sample_apps)
        sample_apps.append(SteamApp(40, "Portal 2"))
        assert len(index) == 3
        assert index.id_by_exact_name("Portal 2") is None

    def test_empty_catalog(self) -> None:
        index = CatalogIndex([])
        assert index.filter_by_name("x") == []
        assert index.name_by_id(1) is None
        assert index.id_by_fuzzy_name("x") is None
        assert index.id_by_exact_name("x") is None
