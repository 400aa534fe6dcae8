"""Tests for catalog queries: category filter, name search, pagination, stats."""

import math

import pytest

from src.models import Product
from src.services.product_query_service import (
    UNCATEGORIZED,
    compute_stats,
    filter_by_category,
    paginate,
    parse_positive_int,
    search_by_name,
)


def _product(product_id, name="Item", category="misc"):
    return Product(
        id=product_id,
        name=name,
        description="desc",
        price=1,
        category=category,
        in_stock=True,
    )


@pytest.fixture
def products():
    return [
        _product("1", "Laptop", "electronics"),
        _product("2", "Smartphone", "Electronics"),
        _product("3", "Coffee Maker", "kitchen"),
        _product("4", "Laptop Stand", "office"),
    ]


class TestFilterByCategory:
    """Test filter_by_category."""

    def test_filter_is_case_insensitive(self, products):
        upper = filter_by_category(products, "Electronics")
        lower = filter_by_category(products, "electronics")

        assert upper == lower
        assert [p.id for p in upper] == ["1", "2"]

    def test_filter_is_exact_match(self, products):
        assert filter_by_category(products, "electro") == []

    @pytest.mark.parametrize("category", [None, "", "   "])
    def test_blank_filter_keeps_everything(self, products, category):
        assert filter_by_category(products, category) == products


class TestSearchByName:
    """Test search_by_name."""

    def test_substring_match_is_case_insensitive(self, products):
        result = search_by_name(products, "LAPTOP")

        assert [p.id for p in result] == ["1", "4"]

    def test_matches_inside_name(self, products):
        assert [p.id for p in search_by_name(products, "make")] == ["3"]

    @pytest.mark.parametrize("query", [None, "", " ", "\t"])
    def test_blank_query_returns_nothing(self, products, query):
        assert search_by_name(products, query) == []

    def test_no_match_returns_empty_list(self, products):
        assert search_by_name(products, "tablet") == []


class TestParsePositiveInt:
    """Test query-parameter coercion for pagination."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("3", 3),
            (" 7 ", 7),
            (5, 5),
            ("0", 1),
            ("-4", 1),
            ("abc", 10),
            ("", 10),
            ("2.5", 10),
            (None, 10),
        ],
    )
    def test_coercion(self, raw, expected):
        assert parse_positive_int(raw, 10) == expected


class TestPaginate:
    """Test paginate."""

    def test_defaults(self, products):
        page = paginate(products)

        assert page.page == 1
        assert page.limit == 10
        assert page.total == 4
        assert page.total_pages == 1
        assert page.data == products

    def test_slices_requested_page(self, products):
        page = paginate(products, page=2, limit=3)

        assert [p.id for p in page.data] == ["4"]
        assert page.total_pages == 2

    def test_page_past_end_is_empty(self, products):
        page = paginate(products, page=5, limit=2)

        assert page.data == []
        assert page.total == 4

    def test_empty_list_has_one_page(self):
        page = paginate([], page=1, limit=10)

        assert page.total == 0
        assert page.total_pages == 1
        assert page.data == []

    @pytest.mark.parametrize("total", [0, 1, 9, 10, 11, 25])
    @pytest.mark.parametrize("limit", [1, 3, 10])
    def test_pages_reconstruct_list(self, total, limit):
        items = [_product(str(i)) for i in range(total)]

        first = paginate(items, page=1, limit=limit)
        collected = []
        for number in range(1, first.total_pages + 1):
            collected.extend(paginate(items, page=number, limit=limit).data)

        assert first.total_pages == max(math.ceil(total / limit), 1)
        assert [p.id for p in collected] == [p.id for p in items]


class TestComputeStats:
    """Test compute_stats."""

    def test_counts_by_lowercased_category(self, products):
        stats = compute_stats(products)

        assert stats.total == 4
        assert stats.by_category == {"electronics": 2, "kitchen": 1, "office": 1}

    def test_empty_category_goes_to_sentinel(self):
        stats = compute_stats([_product("1", category=""), _product("2", category="toys")])

        assert stats.by_category == {UNCATEGORIZED: 1, "toys": 1}
        assert stats.total == 2

    def test_empty_catalog(self):
        stats = compute_stats([])

        assert stats.total == 0
        assert stats.by_category == {}
