"""Pydantic schemas."""

from commodities.schemas.auth import Credential, Role, Session
from commodities.schemas.product import Product, Unit
from commodities.schemas.view import DashboardSummary, SortDirection, SortKey, SortSpec

__all__ = [
    "Credential",
    "DashboardSummary",
    "Product",
    "Role",
    "Session",
    "SortDirection",
    "SortKey",
    "SortSpec",
    "Unit",
]
