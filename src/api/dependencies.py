"""Request-scoped dependencies: catalog access and the API key gate."""

import hmac
import logging

from fastapi import Request

from src.config import AppConfig
from src.models import ApiError
from src.services import ProductRepository

logger = logging.getLogger(__name__)


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_product_repository(request: Request) -> ProductRepository:
    return request.app.state.product_repository


async def require_api_key(request: Request) -> None:
    """Reject the request unless it carries the configured shared secret.

    Runs before the handler reads the request body, so a caller without a
    valid key never reaches validation.
    """
    auth = get_app_config(request).auth
    candidate = request.headers.get(auth.header_name)

    ok = bool(candidate) and hmac.compare_digest(
        candidate.encode("utf-8"), auth.api_key.encode("utf-8")
    )
    if not ok:
        logger.warning(
            "API key check failed: path=%s header_present=%s",
            request.url.path,
            bool(candidate),
        )
        raise ApiError.unauthorized()
