"""
Unit tests for the route catalog.

Tests cover:
- Declaration order and contents
- Route validation and default route
- Suggested action lookup table
- RouteEntry immutability and naming helpers
"""

import dataclasses

import pytest

from routing import catalog
from routing.models import RouteEntry


class TestListRoutes:
    """Tests for list_routes()."""

    def test_routes_in_declaration_order(self):
        """Catalog keeps the order tie-breaking depends on."""
        routes = [entry.route for entry in catalog.list_routes()]

        assert routes == [
            "/",
            "/about",
            "/contact",
            "/dashboard",
            "/profile",
            "/analytics",
            "/settings",
            "/help",
        ]

    def test_route_ids_are_unique(self):
        routes = [entry.route for entry in catalog.list_routes()]
        assert len(routes) == len(set(routes))

    def test_every_route_has_description_and_keywords(self):
        for entry in catalog.list_routes():
            assert entry.description
            assert entry.keywords


class TestRouteValidation:
    """Tests for is_valid_route(), get_route() and default_route()."""

    @pytest.mark.parametrize("route", ["/", "/dashboard", "/help"])
    def test_known_routes_are_valid(self, route):
        assert catalog.is_valid_route(route) is True

    @pytest.mark.parametrize("route", ["/unknown", "dashboard", "", None, 42])
    def test_unknown_routes_are_invalid(self, route):
        assert catalog.is_valid_route(route) is False

    def test_default_route_is_home(self):
        entry = catalog.default_route()
        assert entry.route == "/"
        assert entry.description == "Home page - general information and overview"

    def test_get_route_returns_entry_or_none(self):
        assert catalog.get_route("/contact").route == "/contact"
        assert catalog.get_route("/missing") is None


class TestSuggestedActions:
    """Tests for suggested_actions_for()."""

    def test_known_route_actions(self):
        assert catalog.suggested_actions_for("/dashboard") == [
            "View your data",
            "Check analytics",
            "Manage settings",
        ]

    def test_unknown_route_gets_generic_actions(self):
        assert catalog.suggested_actions_for("/nowhere") == ["Continue exploring", "Get help"]

    def test_returns_a_fresh_list(self):
        """Callers mutating the list must not change the table."""
        actions = catalog.suggested_actions_for("/help")
        actions.append("Something else")

        assert "Something else" not in catalog.suggested_actions_for("/help")

    def test_every_route_has_actions(self):
        for entry in catalog.list_routes():
            assert entry.route in catalog.SUGGESTED_ACTIONS


class TestRouteEntry:
    """Tests for the RouteEntry model."""

    def test_entry_is_immutable(self):
        entry = catalog.default_route()
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.route = "/changed"

    def test_slug_and_display_name(self):
        entry = RouteEntry(route="/analytics", description="Analytics")
        assert entry.slug == "analytics"
        assert entry.display_name == "analytics"

    def test_root_display_name_is_home(self):
        root = catalog.default_route()
        assert root.slug == ""
        assert root.display_name == "home"
