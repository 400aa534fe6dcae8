"""Result models for validation and catalog queries."""

from dataclasses import dataclass, field
from typing import Dict, List

from src.models.product import Product


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a product payload."""

    valid: bool
    errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ProductPage:
    """One page of a (possibly filtered) product listing."""

    total: int  # Number of records before slicing
    page: int
    limit: int
    total_pages: int  # max(ceil(total / limit), 1)
    data: List[Product]


@dataclass(frozen=True)
class ProductStats:
    """Record counts per lowercased category plus the grand total."""

    total: int
    by_category: Dict[str, int]
