"""Configuration module."""

from src.config.configuration import (
    AppConfig,
    AppSettings,
    AuthConfig,
    CatalogConfig,
    ConfigurationError,
    LoggingConfig,
    ServerConfig,
    get_config,
    load_config,
)

__all__ = [
    "AppConfig",
    "AppSettings",
    "AuthConfig",
    "CatalogConfig",
    "ConfigurationError",
    "LoggingConfig",
    "ServerConfig",
    "get_config",
    "load_config",
]
