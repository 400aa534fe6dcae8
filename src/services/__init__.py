"""Catalog services: validation, storage and queries."""

from src.services.product_query_service import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    UNCATEGORIZED,
    compute_stats,
    filter_by_category,
    paginate,
    parse_positive_int,
    search_by_name,
)
from src.services.product_repository import SAMPLE_PRODUCTS, ProductRepository
from src.services.product_validation import validate_product_payload

__all__ = [
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "UNCATEGORIZED",
    "ProductRepository",
    "SAMPLE_PRODUCTS",
    "compute_stats",
    "filter_by_category",
    "paginate",
    "parse_positive_int",
    "search_by_name",
    "validate_product_payload",
]
