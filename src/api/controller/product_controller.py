"""HTTP controller for the product catalog."""

import json
import logging
from typing import Any, List, Optional, Union

from fastapi import APIRouter, Depends, Request, Response, status

from src.api.dependencies import get_product_repository, require_api_key
from src.api.schemas import ProductPageResponse, ProductResponse, ProductStatsResponse
from src.models import ApiError
from src.services import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    ProductRepository,
    compute_stats,
    filter_by_category,
    paginate,
    parse_positive_int,
    search_by_name,
    validate_product_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])


async def _read_json_body(request: Request) -> Any:
    """Decode the request body; an empty body decodes to None."""
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except ValueError:
        raise ApiError.validation_failed(["Request body must be valid JSON"])


async def _read_valid_payload(request: Request) -> dict:
    payload = await _read_json_body(request)
    result = validate_product_payload(payload, require_all=True)
    if not result.valid:
        raise ApiError.validation_failed(result.errors)
    return payload


@router.get("", response_model=Union[ProductPageResponse, List[ProductResponse]])
async def list_products(
    category: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    repository: ProductRepository = Depends(get_product_repository),
):
    """
    List products.

    Without query parameters the full array is returned. With any of
    ``category``, ``page`` or ``limit`` the category-filtered list is
    returned as a paginated envelope.
    """
    products = repository.list()

    if category is None and page is None and limit is None:
        return [ProductResponse.from_product(p) for p in products]

    filtered = filter_by_category(products, category)
    result = paginate(
        filtered,
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT),
    )
    return ProductPageResponse.from_page(result)


@router.get("/search", response_model=List[ProductResponse])
async def search_products(
    name: Optional[str] = None,
    repository: ProductRepository = Depends(get_product_repository),
):
    """Case-insensitive name search; a blank query returns no results."""
    return [ProductResponse.from_product(p) for p in search_by_name(repository.list(), name)]


@router.get("/stats", response_model=ProductStatsResponse)
async def get_product_stats(repository: ProductRepository = Depends(get_product_repository)):
    return ProductStatsResponse.from_stats(compute_stats(repository.list()))


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
):
    return ProductResponse.from_product(repository.get_by_id(product_id))


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
)
async def create_product(
    request: Request,
    repository: ProductRepository = Depends(get_product_repository),
):
    payload = await _read_valid_payload(request)
    return ProductResponse.from_product(repository.insert(payload))


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    dependencies=[Depends(require_api_key)],
)
async def update_product(
    product_id: str,
    request: Request,
    repository: ProductRepository = Depends(get_product_repository),
):
    """Replace every field of a product; the identifier is kept."""
    payload = await _read_valid_payload(request)
    return ProductResponse.from_product(repository.replace(product_id, payload))


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_api_key)],
)
async def delete_product(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
) -> Response:
    repository.remove(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
