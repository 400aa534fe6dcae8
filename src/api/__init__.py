"""FastAPI application setup."""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from src.api.controller import product_router
from src.api.error_handlers import register_error_handlers
from src.config import AppConfig, get_config
from src.services import SAMPLE_PRODUCTS, ProductRepository

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[AppConfig] = None,
    repository: Optional[ProductRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Application configuration; loaded with get_config() if omitted.
        repository: Product store; a new one (seeded with the sample products
            when the catalog config asks for it) is created if omitted.
    """
    if config is None:
        config = get_config()
    if repository is None:
        seed = SAMPLE_PRODUCTS if config.catalog.seed_sample_data else ()
        repository = ProductRepository(seed)

    app = FastAPI(
        title="Product Catalog API",
        description="CRUD API over an in-memory product catalog",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.config = config
    app.state.product_repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, URL and timestamp of each request and its status."""
        timestamp = datetime.now(timezone.utc).isoformat()
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        logger.info(f"[{timestamp}] {request.method} {url}")

        response = await call_next(request)
        logger.debug(f"{request.method} {url} -> {response.status_code}")
        return response

    register_error_handlers(app)

    # Include routers
    app.include_router(product_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Hello World"

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info(
        f"Application created (environment={config.app.environment}, "
        f"products={len(repository)})"
    )
    return app


__all__ = ["create_app"]
