"""
Tests for configuration loading.
"""
import json

import pytest

from shopify_graphql_mcp.config import (
    ConfigurationError,
    ServiceConfig,
    ShopifySettings,
)


def test_environment_wins_over_config_file(tmp_path, clean_env):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"shopify": {"store_url": "file-store.myshopify.com", "api_version": "2024-07"}}))
    clean_env.setenv("SHOPIFY_STORE_URL", "env-store.myshopify.com")

    config = ServiceConfig(config_file=str(config_file))

    assert config.get("shopify", "store_url") == "env-store.myshopify.com"
    assert config.get("shopify", "api_version") == "2024-07"
    assert config.get("shopify", "missing", "fallback") == "fallback"


def test_env_file_is_loaded(tmp_path, clean_env):
    env_file = tmp_path / ".env"
    env_file.write_text("SHOPIFY_ACCESS_TOKEN=shpat_from_file\nSHOPIFY_STORE_URL=file-store.myshopify.com\n")
    # load_dotenv writes into os.environ; register the keys so they are removed afterwards
    clean_env.setenv("SHOPIFY_ACCESS_TOKEN", "")
    clean_env.setenv("SHOPIFY_STORE_URL", "")
    clean_env.delenv("SHOPIFY_ACCESS_TOKEN")
    clean_env.delenv("SHOPIFY_STORE_URL")

    settings = ShopifySettings.from_config(ServiceConfig(env_file=str(env_file)))

    assert settings.access_token == "shpat_from_file"
    assert settings.api_url == "https://file-store.myshopify.com/admin/api/2025-01/graphql.json"


def test_settings_from_environment(shopify_env):
    shopify_env.setenv("SHOPIFY_API_VERSION", "2024-10")
    shopify_env.setenv("SHOPIFY_TIMEOUT", "12.5")

    settings = ShopifySettings.from_config()

    assert settings.api_version == "2024-10"
    assert settings.api_url.endswith("/admin/api/2024-10/graphql.json")
    assert settings.timeout == 12.5


def test_missing_token_only(clean_env):
    clean_env.setenv("SHOPIFY_STORE_URL", "test-store.myshopify.com")

    with pytest.raises(ConfigurationError) as exc_info:
        ShopifySettings.from_config()
    assert str(exc_info.value) == "Missing required environment variable(s): SHOPIFY_ACCESS_TOKEN"


def test_invalid_timeout(shopify_env):
    shopify_env.setenv("SHOPIFY_TIMEOUT", "soon")

    with pytest.raises(ConfigurationError):
        ShopifySettings.from_config()
