"""Pydantic schemas for catalog products."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Unit = Literal["kg", "L", "ton", "bag"]

# Ordered as offered in the product form.
UNIT_VALUES: tuple[str, ...] = ("kg", "L", "ton", "bag")

PRODUCT_FIELDS: tuple[str, ...] = ("name", "category", "price", "stock", "unit")


class Product(BaseModel):
    """A catalog entry. `id` is assigned by the catalog, never by the caller."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Opaque unique identifier (uuid4 hex string).")
    name: str = Field(..., min_length=1, description="Product name, e.g. Maize.")
    category: str = Field(..., min_length=1, description="Product category, e.g. Grain.")
    price: float = Field(..., ge=0, description="Unit price; non-negative.")
    stock: int = Field(..., ge=0, description="Units in stock; non-negative integer.")
    unit: Unit = Field(..., description="Unit of measure: kg, L, ton or bag.")

    def to_record(self) -> dict:
        """Serialized form stored in the catalog snapshot."""
        return self.model_dump()
