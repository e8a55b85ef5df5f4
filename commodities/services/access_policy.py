"""Role-based capability gating and the navigation it drives.

Pure functions over a static table. Unknown roles or capabilities are simply not permitted.
"""

import logging
from typing import Literal, NamedTuple

from commodities.core.errors import NotAuthenticated, PermissionDenied
from commodities.schemas.auth import MANAGER, STORE_KEEPER

logger = logging.getLogger(__name__)

Capability = Literal["view_dashboard", "view_catalog", "mutate_catalog"]

VIEW_DASHBOARD: Capability = "view_dashboard"
VIEW_CATALOG: Capability = "view_catalog"
MUTATE_CATALOG: Capability = "mutate_catalog"

CAPABILITY_VALUES: frozenset[str] = frozenset({VIEW_DASHBOARD, VIEW_CATALOG, MUTATE_CATALOG})

ROLE_CAPABILITIES: dict[str, frozenset[str]] = {
    MANAGER: frozenset({VIEW_DASHBOARD, VIEW_CATALOG, MUTATE_CATALOG}),
    STORE_KEEPER: frozenset({VIEW_CATALOG}),
}


class NavItem(NamedTuple):
    """One entry of the side navigation."""

    key: str
    label: str
    capability: str


# Fixed display order.
NAV_ITEMS: tuple[NavItem, ...] = (
    NavItem("dashboard", "Dashboard", VIEW_DASHBOARD),
    NavItem("products", "Products", VIEW_CATALOG),
    NavItem("add", "Add Product", MUTATE_CATALOG),
)


def capabilities_for(role: str | None) -> frozenset[str]:
    """Capabilities granted to role; empty for None or an unknown role."""
    if role is None:
        return frozenset()
    return ROLE_CAPABILITIES.get(role, frozenset())


def can(role: str | None, capability: str) -> bool:
    """True iff role holds capability. Total over any inputs; no side effects."""
    return capability in capabilities_for(role)


def require(role: str | None, capability: str) -> None:
    """Gate an entry point. Raises NotAuthenticated without a role, PermissionDenied if not allowed."""
    if role is None:
        raise NotAuthenticated()
    if not can(role, capability):
        logger.warning("Permission denied: role=%s capability=%s", role, capability)
        raise PermissionDenied(role, capability)


def navigation_for(role: str | None) -> list[NavItem]:
    """Navigation entries the role may open, in display order."""
    return [item for item in NAV_ITEMS if can(role, item.capability)]


def default_view(role: str | None) -> str:
    """Landing view after sign-in: the dashboard when permitted, otherwise the product list."""
    return "dashboard" if can(role, VIEW_DASHBOARD) else "products"
