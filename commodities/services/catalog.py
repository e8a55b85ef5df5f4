"""Product catalog store: validated CRUD over an ordered product sequence, persisted on every mutation."""

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from commodities.core.config import CATALOG_KEY
from commodities.core.errors import NotFound
from commodities.core.storage import PersistenceAdapter
from commodities.schemas.product import Product
from commodities.services.validation import parse_product_fields

logger = logging.getLogger(__name__)

# Seeded once into fresh storage; ids are generated at seed time.
DEFAULT_PRODUCTS: tuple[dict[str, Any], ...] = (
    {"name": "Wheat", "category": "Grain", "price": 22.5, "stock": 120, "unit": "kg"},
    {"name": "Rice", "category": "Grain", "price": 28.9, "stock": 90, "unit": "kg"},
    {"name": "Coffee Beans", "category": "Beverage", "price": 180.0, "stock": 35, "unit": "kg"},
    {"name": "Palm Oil", "category": "Oil", "price": 96.0, "stock": 70, "unit": "L"},
)


def _decode_snapshot(data: Any) -> tuple[Product, ...] | None:
    """Decode a persisted snapshot; None if it is not a list of valid products with unique ids."""
    if not isinstance(data, list):
        return None
    try:
        products = tuple(Product.model_validate(item) for item in data)
    except PydanticValidationError:
        return None
    if len({p.id for p in products}) != len(products):
        return None
    return products


class Catalog:
    """
    Sole owner and writer of the product sequence.

    The sequence is an immutable tuple replaced as a whole on each mutation, so readers never
    see a partial update. Every successful mutation writes the full snapshot to storage.
    """

    def __init__(self, storage: PersistenceAdapter) -> None:
        self._storage = storage
        self._products: tuple[Product, ...] = self._load_or_seed()

    def _load_or_seed(self) -> tuple[Product, ...]:
        data = self._storage.read_json(CATALOG_KEY)
        if data is not None:
            products = _decode_snapshot(data)
            if products is not None:
                logger.debug("Loaded catalog snapshot: products=%s", len(products))
                return products
            logger.warning("Persisted catalog snapshot is invalid; re-seeding defaults.")
        products = tuple(self._seed_products())
        self._products = products
        self._persist()
        logger.info("Seeded catalog with %s default products.", len(products))
        return products

    def _seed_products(self) -> list[Product]:
        seeded: list[Product] = []
        used: set[str] = set()
        for fields in DEFAULT_PRODUCTS:
            product = Product(id=self._new_id(used), **fields)
            used.add(product.id)
            seeded.append(product)
        return seeded

    @staticmethod
    def _new_id(used: set[str]) -> str:
        new_id = str(uuid.uuid4())
        while new_id in used:
            new_id = str(uuid.uuid4())
        return new_id

    def _persist(self) -> None:
        self._storage.write_json(CATALOG_KEY, [p.to_record() for p in self._products])

    def _index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._products):
            if p.id == product_id:
                return i
        raise NotFound(product_id)

    def list(self) -> tuple[Product, ...]:
        """Current products in persisted order. Tuple of frozen models; callers cannot reorder it."""
        return self._products

    def get(self, product_id: str) -> Product:
        return self._products[self._index_of(product_id)]

    def add(self, draft: Mapping[str, Any]) -> Product:
        """Validate draft, assign a fresh id and insert at the front. Raises ValidationError."""
        fields = parse_product_fields(draft)
        product = Product(id=self._new_id({p.id for p in self._products}), **fields._asdict())
        self._products = (product,) + self._products
        self._persist()
        logger.info("Product added: id=%s name=%s", product.id, product.name)
        return product

    def update(self, product_id: str, changes: Mapping[str, Any]) -> Product:
        """
        Merge changes over the existing product, validate the result and replace it in place.

        Raises NotFound if the id is unknown and ValidationError if the merged product is invalid.
        An "id" key in changes is ignored.
        """
        index = self._index_of(product_id)
        merged = {**self._products[index].to_record(), **changes}
        fields = parse_product_fields(merged)
        product = Product(id=product_id, **fields._asdict())
        self._products = self._products[:index] + (product,) + self._products[index + 1 :]
        self._persist()
        logger.info("Product updated: id=%s", product_id)
        return product

    def delete(self, product_id: str) -> None:
        """Remove the product if present; unknown ids are a no-op. Persists either way."""
        remaining = tuple(p for p in self._products if p.id != product_id)
        if len(remaining) != len(self._products):
            logger.info("Product deleted: id=%s", product_id)
        self._products = remaining
        self._persist()
