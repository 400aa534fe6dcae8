"""Data models module."""

from src.models.api_error import ApiError, ErrorKind
from src.models.product import Product
from src.models.query_results import ProductPage, ProductStats, ValidationResult

__all__ = [
    "ApiError",
    "ErrorKind",
    "Product",
    "ProductPage",
    "ProductStats",
    "ValidationResult",
]
