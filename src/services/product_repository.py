"""In-memory product repository.

Owns the ordered collection of product records. Records handed out are
copies, so callers never hold references into the stored collection.
Mutations run under a lock with no suspension point between locating a
record and writing it back.
"""

import logging
import threading
import uuid
from dataclasses import replace as dataclass_replace
from typing import Any, Dict, Iterable, List

from ..models import ApiError, Product

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"

SAMPLE_PRODUCTS = (
    Product(
        id="1",
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=1200,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="2",
        name="Smartphone",
        description="Latest model with 128GB storage",
        price=800,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="3",
        name="Coffee Maker",
        description="Programmable coffee maker with timer",
        price=50,
        category="kitchen",
        in_stock=False,
    ),
)


def _new_product_id() -> str:
    return str(uuid.uuid4())


def _build_product(product_id: str, fields: Dict[str, Any]) -> Product:
    return Product(
        id=product_id,
        name=fields["name"].strip(),
        description=fields["description"].strip(),
        price=fields["price"],
        category=fields["category"].strip(),
        in_stock=fields["inStock"],
    )


class ProductRepository:
    """Ordered in-memory collection of products keyed by identifier."""

    def __init__(self, products: Iterable[Product] = ()):
        """Initialize the repository.

        Args:
            products: Already-identified records to seed the collection with.
        """
        self._products: List[Product] = []
        self._lock = threading.Lock()
        self.seed(products)

    def __len__(self) -> int:
        return len(self._products)

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return -1

    def seed(self, products: Iterable[Product]) -> None:
        """Append already-identified records.

        Raises:
            ValueError: If an identifier is already present.
        """
        with self._lock:
            for product in products:
                if self._index_of(product.id) != -1:
                    raise ValueError(f"Duplicate product id: {product.id}")
                self._products.append(dataclass_replace(product))

    def list(self) -> List[Product]:
        """Return all records in insertion order."""
        return [dataclass_replace(product) for product in self._products]

    def get_by_id(self, product_id: str) -> Product:
        """Get a product by its identifier.

        Raises:
            ApiError: NOT_FOUND if no record has that identifier.
        """
        index = self._index_of(product_id)
        if index == -1:
            raise ApiError.not_found(PRODUCT_NOT_FOUND)
        return dataclass_replace(self._products[index])

    def insert(self, fields: Dict[str, Any]) -> Product:
        """Store a new product under a freshly generated identifier.

        Args:
            fields: Validated payload (name, description, price, category,
                inStock). String fields are trimmed.

        Returns:
            The stored Product.
        """
        product = _build_product(_new_product_id(), fields)
        with self._lock:
            self._products.append(product)

        logger.info(f"Created product {product.id} ({product.name})")
        return dataclass_replace(product)

    def replace(self, product_id: str, fields: Dict[str, Any]) -> Product:
        """Overwrite every field of an existing product except its identifier.

        Raises:
            ApiError: NOT_FOUND if no record has that identifier.
        """
        updated = _build_product(product_id, fields)
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                raise ApiError.not_found(PRODUCT_NOT_FOUND)
            self._products[index] = updated

        logger.info(f"Updated product {product_id}")
        return dataclass_replace(updated)

    def remove(self, product_id: str) -> None:
        """Delete a product.

        Raises:
            ApiError: NOT_FOUND if no record has that identifier.
        """
        with self._lock:
            index = self._index_of(product_id)
            if index == -1:
                raise ApiError.not_found(PRODUCT_NOT_FOUND)
            del self._products[index]

        logger.info(f"Deleted product {product_id}")
