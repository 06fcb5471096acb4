"""
Route Catalog - static registry of destination pages.

Declaration order matters: the keyword classifier resolves score ties in
favour of the entry declared first.
"""

from routing.models import RouteEntry

DEFAULT_ROUTE = "/"

_ROUTES: tuple[RouteEntry, ...] = (
    RouteEntry(
        route="/",
        description="Home page - general information and overview",
        keywords=("home", "main", "overview", "start", "beginning", "welcome"),
    ),
    RouteEntry(
        route="/about",
        description="About page - information about the company, team, or project",
        keywords=("about", "company", "team", "story", "mission", "vision", "who we are"),
    ),
    RouteEntry(
        route="/contact",
        description="Contact page - ways to get in touch, contact information",
        keywords=("contact", "reach", "email", "phone", "support", "help", "get in touch"),
    ),
    RouteEntry(
        route="/dashboard",
        description="Dashboard - main user interface, overview of data and controls",
        keywords=("dashboard", "main", "overview", "control panel", "home", "user interface"),
    ),
    RouteEntry(
        route="/profile",
        description="User profile - personal information, settings, preferences",
        keywords=("profile", "account", "settings", "preferences", "personal", "my info"),
    ),
    RouteEntry(
        route="/analytics",
        description="Analytics page - data analysis, charts, statistics",
        keywords=("analytics", "data", "charts", "statistics", "reports", "insights", "metrics"),
    ),
    RouteEntry(
        route="/settings",
        description="Settings page - configuration, preferences, system settings",
        keywords=("settings", "configuration", "preferences", "options", "setup", "config"),
    ),
    RouteEntry(
        route="/help",
        description="Help page - documentation, FAQ, support resources",
        keywords=("help", "support", "faq", "documentation", "guide", "tutorial", "how to"),
    ),
)

_ROUTES_BY_ID: dict[str, RouteEntry] = {entry.route: entry for entry in _ROUTES}

SUGGESTED_ACTIONS: dict[str, tuple[str, ...]] = {
    "/": ("View overview", "Explore features", "Get started"),
    "/about": ("Learn about the team", "Read our story", "See our mission"),
    "/contact": ("Send us a message", "Call us", "Get support"),
    "/dashboard": ("View your data", "Check analytics", "Manage settings"),
    "/profile": ("Update information", "Change preferences", "View account"),
    "/analytics": ("View reports", "Export data", "Create charts"),
    "/settings": ("Configure options", "Change preferences", "System setup"),
    "/help": ("Browse FAQ", "Read documentation", "Contact support"),
}

GENERIC_ACTIONS: tuple[str, ...] = ("Continue exploring", "Get help")


def list_routes() -> tuple[RouteEntry, ...]:
    """Return every catalog entry in declaration order."""
    return _ROUTES


def is_valid_route(route: object) -> bool:
    return isinstance(route, str) and route in _ROUTES_BY_ID


def get_route(route: str) -> RouteEntry | None:
    return _ROUTES_BY_ID.get(route)


def default_route() -> RouteEntry:
    """Return the home entry used whenever nothing better is known."""
    return _ROUTES_BY_ID[DEFAULT_ROUTE]


def suggested_actions_for(route: str) -> list[str]:
    """Static follow-up actions shown as chips for a route."""
    return list(SUGGESTED_ACTIONS.get(route, GENERIC_ACTIONS))
