"""Response models for the products API."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from src.models import Product, ProductPage, ProductStats


class ProductResponse(BaseModel):
    """A product record as returned to clients."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool = Field(alias="inStock")

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls.model_validate(product.to_dict())


class ProductPageResponse(BaseModel):
    """Paginated envelope around a product listing."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    page: int
    limit: int
    total_pages: int = Field(alias="totalPages")
    data: List[ProductResponse]

    @classmethod
    def from_page(cls, page: ProductPage) -> "ProductPageResponse":
        return cls(
            total=page.total,
            page=page.page,
            limit=page.limit,
            total_pages=page.total_pages,
            data=[ProductResponse.from_product(p) for p in page.data],
        )


class ProductStatsResponse(BaseModel):
    """Record counts per category."""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    by_category: Dict[str, int] = Field(alias="byCategory")

    @classmethod
    def from_stats(cls, stats: ProductStats) -> "ProductStatsResponse":
        return cls(total=stats.total, by_category=stats.by_category)


class ErrorResponse(BaseModel):
    """Error body: ``details`` only for validation failures, ``stack`` only outside production."""

    message: str
    details: Optional[Dict[str, Any]] = None
    stack: Optional[str] = None
