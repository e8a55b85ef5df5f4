"""Derived views over a catalog snapshot: dashboard aggregates and the searchable, sortable table.

Pure functions; nothing here mutates its inputs. Aggregates accept Product models or plain
mappings so partially populated records (missing or unparsable price/stock) still summarize.
"""

import math
from collections.abc import Iterable, Sequence
from typing import Any

from commodities.schemas.product import Product
from commodities.schemas.view import DashboardSummary, SortSpec

LOW_STOCK_THRESHOLD = 20

# Columns searched by the free-text query.
SEARCH_FIELDS: tuple[str, ...] = ("name", "category", "unit")


def _field(product: Any, name: str) -> Any:
    if isinstance(product, dict):
        return product.get(name)
    return getattr(product, name, None)


def _as_number(value: Any) -> float | None:
    """Numeric value of a price/stock field, or None when missing or unparsable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def dashboard_summary(products: Iterable[Any]) -> DashboardSummary:
    """
    Compute dashboard aggregates.

    - total_inventory treats missing/unparsable stock as 0.
    - average_price is the mean price (unparsable as 0) to 2 dp, "0.00" for an empty catalog.
    - low_stock_count counts products whose stock parses and is below LOW_STOCK_THRESHOLD.
    """
    items = list(products)
    stocks = [_as_number(_field(p, "stock")) for p in items]
    prices = [_as_number(_field(p, "price")) or 0.0 for p in items]

    total_inventory = sum(int(s) for s in stocks if s is not None)
    average = sum(prices) / len(items) if items else 0.0
    low_stock = sum(1 for s in stocks if s is not None and s < LOW_STOCK_THRESHOLD)

    return DashboardSummary(
        total_skus=len(items),
        total_inventory=total_inventory,
        average_price=f"{average:.2f}",
        low_stock_count=low_stock,
    )


def matches_query(product: Any, query: str) -> bool:
    """Case-insensitive substring match on name, category or unit. Blank query matches all."""
    needle = (query or "").strip().lower()
    if not needle:
        return True
    return any(needle in str(_field(product, f) or "").lower() for f in SEARCH_FIELDS)


def _sort_value(value: Any) -> tuple[int, Any]:
    # Numbers before text so mixed columns never raise.
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (0, value)
    return (1, "" if value is None else str(value))


def project_table(
    products: Sequence[Product],
    query: str = "",
    sort: SortSpec | None = None,
) -> list[Product]:
    """
    Filter by query, then stable-sort by sort.key in sort.direction.

    Equal keys keep their filtered order in both directions.
    """
    spec = sort or SortSpec()
    filtered = [p for p in products if matches_query(p, query)]
    return sorted(
        filtered,
        key=lambda p: _sort_value(_field(p, spec.key)),
        reverse=spec.direction == "desc",
    )


def format_price(value: Any) -> str:
    """Display form of a price, e.g. "$22.50"."""
    return f"${(_as_number(value) or 0.0):.2f}"
