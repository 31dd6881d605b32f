"""
Configuration for the Shopify GraphQL MCP server.
Loads .env files and resolves the Shopify credentials from the environment.
"""
import os
import json
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2025-01"
DEFAULT_TIMEOUT = 30.0

REQUIRED_ENV_VARS = ["SHOPIFY_ACCESS_TOKEN", "SHOPIFY_STORE_URL"]


class ConfigurationError(ValueError):
    """Raised when required configuration is missing or invalid."""
    pass


class MissingCredentialsError(ConfigurationError):
    """Raised when the Shopify token or store URL is not set."""
    pass


class ServiceConfig:
    """
    Unified configuration lookup.
    Environment variables win over values from an optional JSON config file.
    """
    def __init__(self, config_file: Optional[str] = None, env_file: Optional[str] = None):
        """
        Initialize the configuration.

        Args:
            config_file: Optional path to a JSON configuration file
            env_file: Optional path to a .env file (defaults to the nearest .env)
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        self.config = {}
        if config_file and os.path.exists(config_file):
            with open(config_file, 'r') as f:
                self.config = json.load(f)

    def get(self, service: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value for a service.

        Args:
            service: Service name (e.g., 'shopify')
            key: Configuration key (e.g., 'access_token')
            default: Default value if not found

        Returns:
            Configuration value or default
        """
        env_key = f"{service.upper()}_{key.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is not None and env_value != "":
            return env_value

        service_config = self.config.get(service, {})
        if key in service_config:
            return service_config[key]

        return default


class ShopifySettings(BaseModel):
    """Credentials and endpoint for the Shopify Admin GraphQL API."""
    access_token: str
    store_url: str
    api_url: str
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_config(cls, config: Optional[ServiceConfig] = None) -> "ShopifySettings":
        """Build settings from the environment, raising ConfigurationError when incomplete."""
        config = config or ServiceConfig()

        access_token = config.get("shopify", "access_token")
        store_url = config.get("shopify", "store_url")
        missing = [
            name for name, value in zip(REQUIRED_ENV_VARS, [access_token, store_url])
            if not value
        ]
        if missing:
            raise MissingCredentialsError(
                f"Missing required environment variable(s): {', '.join(missing)}"
            )

        api_version = config.get("shopify", "api_version", DEFAULT_API_VERSION)
        api_url = config.get("shopify", "store_api_url") or build_api_url(store_url, api_version)

        timeout = config.get("shopify", "timeout", DEFAULT_TIMEOUT)
        try:
            timeout = float(timeout)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Invalid SHOPIFY_TIMEOUT value: {timeout!r}")

        return cls(
            access_token=access_token,
            store_url=store_url,
            api_url=api_url,
            api_version=api_version,
            timeout=timeout,
        )


def build_api_url(store_url: str, api_version: str = DEFAULT_API_VERSION) -> str:
    """Derive the Admin API GraphQL endpoint from a store URL or myshopify domain."""
    if not store_url.startswith(("http://", "https://")):
        store_url = f"https://{store_url}"
    store_url = store_url.rstrip("/")
    return f"{store_url}/admin/api/{api_version}/graphql.json"
