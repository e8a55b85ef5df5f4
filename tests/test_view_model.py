"""Unit tests for commodities.services.view_model: dashboard aggregates, filtering and sorting."""

import unittest

from commodities.schemas.product import Product
from commodities.schemas.view import SortSpec
from commodities.services.view_model import (
    dashboard_summary,
    format_price,
    matches_query,
    project_table,
)


def _product(
    id: str,
    name: str = "Wheat",
    category: str = "Grain",
    price: float = 10.0,
    stock: int = 50,
    unit: str = "kg",
) -> Product:
    """Build a Product for tests."""
    return Product(id=id, name=name, category=category, price=price, stock=stock, unit=unit)


class TestDashboardSummary(unittest.TestCase):
    """Aggregates over a catalog snapshot."""

    def test_two_product_example(self) -> None:
        summary = dashboard_summary([{"price": 10, "stock": 5}, {"price": 20, "stock": 30}])
        self.assertEqual(summary.total_skus, 2)
        self.assertEqual(summary.total_inventory, 35)
        self.assertEqual(summary.average_price, "15.00")
        self.assertEqual(summary.low_stock_count, 1)

    def test_empty_catalog(self) -> None:
        summary = dashboard_summary([])
        self.assertEqual(summary.total_skus, 0)
        self.assertEqual(summary.total_inventory, 0)
        self.assertEqual(summary.average_price, "0.00")
        self.assertEqual(summary.low_stock_count, 0)

    def test_missing_or_unparsable_stock_counts_as_zero(self) -> None:
        summary = dashboard_summary([{"price": 1, "stock": "lots"}, {"price": 2}, {"price": 3, "stock": "7"}])
        self.assertEqual(summary.total_inventory, 7)
        self.assertEqual(summary.low_stock_count, 1)
        self.assertEqual(summary.average_price, "2.00")

    def test_threshold_is_exclusive(self) -> None:
        products = [_product("a", stock=19), _product("b", stock=20)]
        self.assertEqual(dashboard_summary(products).low_stock_count, 1)


class TestFilter(unittest.TestCase):
    """Case-insensitive substring match on name, category or unit."""

    def setUp(self) -> None:
        self.products = [
            _product("1", name="Wheat", category="Grain"),
            _product("2", name="Palm Oil", category="Oil", unit="L"),
            _product("3", name="Rice", category="Grain", unit="bag"),
        ]

    def test_grain_query_returns_grain_products(self) -> None:
        result = project_table(self.products, "grain")
        self.assertEqual([p.id for p in result], ["3", "1"])
        self.assertTrue(all(p.category == "Grain" for p in result))

    def test_blank_query_matches_everything(self) -> None:
        self.assertEqual(len(project_table(self.products, "   ")), 3)

    def test_unit_is_searched(self) -> None:
        self.assertTrue(matches_query(self.products[2], "BAG"))
        self.assertFalse(matches_query(self.products[0], "bag"))


class TestSort(unittest.TestCase):
    """Stable sort by key; toggling flips direction and ties keep filtered order."""

    def setUp(self) -> None:
        self.products = [
            _product("a", name="A", price=20),
            _product("b", name="B", price=10),
            _product("c", name="C", price=20),
            _product("d", name="D", price=5),
        ]

    def test_price_ascending_keeps_tie_order(self) -> None:
        spec = SortSpec().toggle("price")
        self.assertEqual(spec, SortSpec(key="price", direction="asc"))
        ids = [p.id for p in project_table(self.products, "", spec)]
        self.assertEqual(ids, ["d", "b", "a", "c"])

    def test_toggle_same_key_flips_to_descending(self) -> None:
        spec = SortSpec(key="price").toggle("price")
        self.assertEqual(spec.direction, "desc")
        ids = [p.id for p in project_table(self.products, "", spec)]
        self.assertEqual(ids, ["a", "c", "b", "d"])

    def test_new_key_resets_to_ascending(self) -> None:
        spec = SortSpec(key="price", direction="desc").toggle("name")
        self.assertEqual(spec, SortSpec(key="name", direction="asc"))

    def test_default_sort_is_name_ascending(self) -> None:
        shuffled = [self.products[2], self.products[0], self.products[3], self.products[1]]
        self.assertEqual([p.name for p in project_table(shuffled)], ["A", "B", "C", "D"])

    def test_input_is_not_mutated(self) -> None:
        before = list(self.products)
        project_table(self.products, "", SortSpec(key="price", direction="desc"))
        self.assertEqual(self.products, before)


class TestFormatPrice(unittest.TestCase):
    def test_two_decimals(self) -> None:
        self.assertEqual(format_price(22.5), "$22.50")
        self.assertEqual(format_price(None), "$0.00")


if __name__ == "__main__":
    unittest.main()
