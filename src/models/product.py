"""Product model for the in-memory catalog."""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class Product:
    """Product data model representing a catalog record."""

    id: str
    name: str
    description: str
    price: float
    category: str
    in_stock: bool

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire shape (camelCase ``inStock``)."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "inStock": self.in_stock,
        }
