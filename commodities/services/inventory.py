"""Application service: every UI action goes through here so the capability gate is never skipped."""

from collections.abc import Mapping
from typing import Any

from commodities.core.storage import PersistenceAdapter
from commodities.schemas.auth import Session
from commodities.schemas.product import Product
from commodities.schemas.view import DashboardSummary, SortSpec
from commodities.services import access_policy
from commodities.services.access_policy import (
    MUTATE_CATALOG,
    VIEW_CATALOG,
    VIEW_DASHBOARD,
    NavItem,
)
from commodities.services.catalog import Catalog
from commodities.services.session_manager import SessionManager
from commodities.services.theme import Theme, ThemeStore
from commodities.services.view_model import dashboard_summary, project_table


class InventoryService:
    """
    One running app: a session, a catalog and a theme over one storage adapter.

    Gated entry points check the current session's role before touching the catalog.
    """

    def __init__(
        self,
        storage: PersistenceAdapter,
        session_manager: SessionManager | None = None,
        catalog: Catalog | None = None,
        theme: ThemeStore | None = None,
    ) -> None:
        self.storage = storage
        self.sessions = session_manager or SessionManager(storage)
        self.catalog = catalog or Catalog(storage)
        self.theme = theme or ThemeStore(storage)

    # --- session ---

    @property
    def current_session(self) -> Session | None:
        return self.sessions.current

    def login(self, username: str, password: str) -> Session:
        return self.sessions.login(username, password)

    def logout(self) -> None:
        self.sessions.logout()

    def restore_session(self) -> Session | None:
        return self.sessions.restore_session()

    def navigation(self) -> list[NavItem]:
        return access_policy.navigation_for(self.sessions.role)

    def default_view(self) -> str:
        return access_policy.default_view(self.sessions.role)

    def can(self, capability: str) -> bool:
        return access_policy.can(self.sessions.role, capability)

    # --- views ---

    def dashboard(self) -> DashboardSummary:
        access_policy.require(self.sessions.role, VIEW_DASHBOARD)
        return dashboard_summary(self.catalog.list())

    def products(self, query: str = "", sort: SortSpec | None = None) -> list[Product]:
        access_policy.require(self.sessions.role, VIEW_CATALOG)
        return project_table(self.catalog.list(), query, sort)

    # --- catalog mutations ---

    def add_product(self, draft: Mapping[str, Any]) -> Product:
        access_policy.require(self.sessions.role, MUTATE_CATALOG)
        return self.catalog.add(draft)

    def update_product(self, product_id: str, changes: Mapping[str, Any]) -> Product:
        access_policy.require(self.sessions.role, MUTATE_CATALOG)
        return self.catalog.update(product_id, changes)

    def delete_product(self, product_id: str) -> None:
        access_policy.require(self.sessions.role, MUTATE_CATALOG)
        self.catalog.delete(product_id)

    # --- theme ---

    def get_theme(self) -> Theme:
        return self.theme.get()

    def toggle_theme(self) -> Theme:
        return self.theme.toggle()
