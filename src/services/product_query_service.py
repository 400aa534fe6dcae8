"""Read-side queries over the product catalog: filter, search, paginate, stats."""

import math
from collections import Counter
from typing import Any, List, Optional

from ..models import Product, ProductPage, ProductStats

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
UNCATEGORIZED = "uncategorized"


def parse_positive_int(raw: Any, default: int) -> int:
    """Coerce a query parameter to a positive integer.

    Missing or non-numeric input falls back to ``default``; numeric input
    below 1 is raised to 1.
    """
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return max(value, 1)


def filter_by_category(products: List[Product], category: Optional[str]) -> List[Product]:
    """Case-insensitive exact match on category; blank filter keeps everything."""
    if category is None or not category.strip():
        return list(products)

    wanted = category.strip().lower()
    return [p for p in products if (p.category or "").lower() == wanted]


def search_by_name(products: List[Product], query: Optional[str]) -> List[Product]:
    """Case-insensitive substring match on name.

    A blank query matches nothing.
    """
    if query is None or not query.strip():
        return []

    needle = query.strip().lower()
    return [p for p in products if needle in (p.name or "").lower()]


def paginate(products: List[Product], page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> ProductPage:
    """Slice one page out of ``products``.

    Args:
        products: The (already filtered) records, in listing order.
        page: 1-based page number, at least 1.
        limit: Page size, at least 1.

    Returns:
        ProductPage; a page past the end has an empty ``data`` list.
    """
    page = max(page, 1)
    limit = max(limit, 1)
    total = len(products)
    start = (page - 1) * limit

    return ProductPage(
        total=total,
        page=page,
        limit=limit,
        total_pages=max(math.ceil(total / limit), 1),
        data=products[start:start + limit],
    )


def compute_stats(products: List[Product]) -> ProductStats:
    """Count records per lowercased category."""
    counts = Counter(
        p.category.lower() if p.category else UNCATEGORIZED for p in products
    )
    return ProductStats(total=len(products), by_category=dict(counts))
