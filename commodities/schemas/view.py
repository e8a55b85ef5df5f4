"""Schemas for derived views: dashboard aggregates and table sort state."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

SortKey = Literal["name", "category", "price", "stock", "unit"]
SortDirection = Literal["asc", "desc"]

SORT_KEY_VALUES: frozenset[str] = frozenset({"name", "category", "price", "stock", "unit"})


class DashboardSummary(BaseModel):
    """Aggregates shown on the manager dashboard."""

    model_config = ConfigDict(frozen=True)

    total_skus: int = Field(..., ge=0, description="Number of products.")
    total_inventory: int = Field(..., description="Sum of stock across products.")
    average_price: str = Field(..., description="Mean price to 2 decimal places; '0.00' when empty.")
    low_stock_count: int = Field(..., ge=0, description="Products with stock below the threshold.")


class SortSpec(BaseModel):
    """Current table sort: column key and direction."""

    model_config = ConfigDict(frozen=True)

    key: SortKey = "name"
    direction: SortDirection = "asc"

    def toggle(self, key: SortKey) -> "SortSpec":
        """Re-selecting the current key flips direction; a new key starts ascending."""
        if key == self.key:
            return SortSpec(key=key, direction="desc" if self.direction == "asc" else "asc")
        return SortSpec(key=key, direction="asc")
