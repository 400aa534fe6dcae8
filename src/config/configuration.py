"""Configuration module for the product catalog API.

Loads settings from environment-specific config files:
- APP_ENV=dev  → config_dev.yaml (development, debug logging)
- APP_ENV=test → config_test.yaml (test runs, no sample data)
- Default      → config.yaml

The shared API key and the optional port override are loaded from the
environment (or a .env file). Fails fast with clear error messages if
required configuration is missing or invalid.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

DEFAULT_API_KEY = "dev-secret-key"
DEFAULT_API_KEY_HEADER = "x-api-key"
DEFAULT_PORT = 3000
PRODUCTION = "production"


class ConfigurationError(Exception):
    """Raised when required configuration is missing or invalid."""
    pass


def _get_project_root() -> Path:
    """Get the project root directory (where config.yaml lives)."""
    # Navigate from src/config/ up to project root
    return Path(__file__).parent.parent.parent


def _get_config_filename() -> str:
    """Get config filename based on APP_ENV environment variable.

    Returns:
        Config filename:
        - APP_ENV=dev  → config_dev.yaml
        - APP_ENV=test → config_test.yaml
        - Default      → config.yaml
    """
    app_env = os.environ.get("APP_ENV", "").lower()

    if app_env == "dev":
        return "config_dev.yaml"
    elif app_env == "test":
        return "config_test.yaml"
    else:
        return "config.yaml"


def _load_yaml_config() -> dict:
    """Load configuration from environment-specific config file."""
    config_filename = _get_config_filename()
    config_path = _get_project_root() / config_filename

    if not config_path.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}. "
            f"Set APP_ENV to 'dev' or 'test', or create {config_filename}."
        )

    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def _get_required_env(key: str) -> str:
    """Get required environment variable or raise ConfigurationError."""
    value = os.environ.get(key)
    if not value:
        raise ConfigurationError(
            f"Required environment variable '{key}' is not set. "
            f"Please add it to your .env file."
        )
    return value


def _get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get optional environment variable with default."""
    return os.environ.get(key, default)


def _parse_port(value) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Port must be an integer, got {value!r}")
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"Port must be between 1 and 65535, got {port}")
    return port


@dataclass(frozen=True)
class AppSettings:
    """General application settings."""
    environment: str


@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration."""
    host: str
    port: int


@dataclass(frozen=True)
class AuthConfig:
    """Shared-secret authentication for mutating routes."""
    api_key: str
    header_name: str


@dataclass(frozen=True)
class CatalogConfig:
    """In-memory product catalog configuration."""
    seed_sample_data: bool


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration container."""
    app: AppSettings
    server: ServerConfig
    auth: AuthConfig
    catalog: CatalogConfig
    logging: LoggingConfig

    @property
    def is_production(self) -> bool:
        return self.app.environment == PRODUCTION


def load_config() -> AppConfig:
    """
    Load and validate all application configuration.

    Loads from the environment-specific YAML file for non-sensitive settings
    and from the environment (.env) for the API key and port override.
    Fails fast if required configuration is missing.

    Returns:
        AppConfig: Validated application configuration.

    Raises:
        ConfigurationError: If required configuration is missing or invalid.
    """
    # Load environment variables from .env file
    load_dotenv()

    # Load YAML configuration
    yaml_config = _load_yaml_config()

    # Build general app settings
    app_section = yaml_config.get("app", {})

    app_settings = AppSettings(
        environment=str(app_section.get("environment", "development")).lower(),
    )

    # Build server config; PORT from the environment wins over the file
    server_section = yaml_config.get("server", {})

    server_config = ServerConfig(
        host=server_section.get("host", "0.0.0.0"),
        port=_parse_port(_get_optional_env("PORT", server_section.get("port", DEFAULT_PORT))),
    )

    # Build auth config; the key is mandatory in production only
    auth_section = yaml_config.get("auth", {})

    if app_settings.environment == PRODUCTION:
        api_key = _get_required_env("API_KEY")
    else:
        api_key = _get_optional_env("API_KEY") or DEFAULT_API_KEY

    auth_config = AuthConfig(
        api_key=api_key,
        header_name=auth_section.get("header_name", DEFAULT_API_KEY_HEADER),
    )

    # Build catalog config
    catalog_section = yaml_config.get("catalog", {})

    catalog_config = CatalogConfig(
        seed_sample_data=bool(catalog_section.get("seed_sample_data", True)),
    )

    # Build Logging config
    logging_section = yaml_config.get("logging", {})

    logging_config = LoggingConfig(
        level=str(logging_section.get("level", "INFO")).upper(),
    )

    return AppConfig(
        app=app_settings,
        server=server_config,
        auth=auth_config,
        catalog=catalog_config,
        logging=logging_config,
    )


# Module-level singleton for convenience
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """
    Get the application configuration singleton.

    Lazy-loads configuration on first access.

    Returns:
        AppConfig: Application configuration.

    Raises:
        ConfigurationError: If required configuration is missing.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config
