"""ASGI entry point for the product catalog API.

    uvicorn src.main:app
or
    python main.py
"""

import logging

import uvicorn

from src.api import create_app
from src.config import get_config

config = get_config()
logging.basicConfig(level=config.logging.level)

app = create_app(config)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    run()
