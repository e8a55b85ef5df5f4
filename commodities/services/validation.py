"""Parse-then-validate for product form fields.

Raw values may be form strings ("25.50", "100") or numbers. Each field has its own parser; they
run in a fixed order (name, category, price, stock, unit) and the first failure is raised as a
single ValidationError. Nothing is applied unless every field parses.
"""

import math
from collections.abc import Callable, Mapping
from typing import Any, NamedTuple

from commodities.core.errors import ValidationError
from commodities.schemas.product import UNIT_VALUES

MSG_NAME_REQUIRED = "Name is required"
MSG_CATEGORY_REQUIRED = "Category is required"
MSG_PRICE_INVALID = "Price must be a non-negative number"
MSG_STOCK_INVALID = "Stock must be a non-negative integer"
MSG_UNIT_INVALID = f"Unit must be one of {', '.join(UNIT_VALUES)}"


class ValidatedFields(NamedTuple):
    """Product fields after parsing; everything but the id."""

    name: str
    category: str
    price: float
    stock: int
    unit: str


def _parse_required_text(value: Any, field: str, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(field, message)
    return value.strip()


def parse_name(value: Any) -> str:
    return _parse_required_text(value, "name", MSG_NAME_REQUIRED)


def parse_category(value: Any) -> str:
    return _parse_required_text(value, "category", MSG_CATEGORY_REQUIRED)


def parse_price(value: Any) -> float:
    """Accept ints, floats and numeric strings; reject booleans, NaN/inf and negatives."""
    if isinstance(value, bool):
        raise ValidationError("price", MSG_PRICE_INVALID)
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip():
        try:
            number = float(value.strip())
        except ValueError:
            raise ValidationError("price", MSG_PRICE_INVALID)
    else:
        raise ValidationError("price", MSG_PRICE_INVALID)
    if not math.isfinite(number) or number < 0:
        raise ValidationError("price", MSG_PRICE_INVALID)
    return number


def parse_stock(value: Any) -> int:
    """Accept ints, integral floats (5.0) and integer strings ("5", "5.0"); reject the rest."""
    if isinstance(value, bool):
        raise ValidationError("stock", MSG_STOCK_INVALID)
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise ValidationError("stock", MSG_STOCK_INVALID)
        number = int(value)
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                as_float = float(text)
            except ValueError:
                raise ValidationError("stock", MSG_STOCK_INVALID)
            if not math.isfinite(as_float) or not as_float.is_integer():
                raise ValidationError("stock", MSG_STOCK_INVALID)
            number = int(as_float)
    else:
        raise ValidationError("stock", MSG_STOCK_INVALID)
    if number < 0:
        raise ValidationError("stock", MSG_STOCK_INVALID)
    return number


def parse_unit(value: Any) -> str:
    if not isinstance(value, str) or value not in UNIT_VALUES:
        raise ValidationError("unit", MSG_UNIT_INVALID)
    return value


# Order here is the order failures are reported in.
_FIELD_PARSERS: tuple[tuple[str, Callable[[Any], Any]], ...] = (
    ("name", parse_name),
    ("category", parse_category),
    ("price", parse_price),
    ("stock", parse_stock),
    ("unit", parse_unit),
)


def parse_product_fields(fields: Mapping[str, Any]) -> ValidatedFields:
    """
    Parse and validate all product fields. Missing keys are treated as empty input.

    Raises ValidationError for the first failing field in name, category, price, stock, unit order.
    Keys other than the product fields (including "id") are ignored.
    """
    parsed = {name: parser(fields.get(name)) for name, parser in _FIELD_PARSERS}
    return ValidatedFields(**parsed)
