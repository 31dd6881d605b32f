"""
Shared fixtures for the Shopify GraphQL MCP tests.
"""
import pytest

from shopify_graphql_mcp.config import ShopifySettings
from shopify_graphql_mcp.graphql_client import GraphQLResponse

ENV_VARS = [
    "SHOPIFY_ACCESS_TOKEN",
    "SHOPIFY_STORE_URL",
    "SHOPIFY_STORE_API_URL",
    "SHOPIFY_API_VERSION",
    "SHOPIFY_TIMEOUT",
    "ENABLED_TOOL_CATEGORIES",
    "ENABLE_ESSENTIAL",
    "ENABLE_COMMERCE",
    "ENABLE_MARKETING",
    "ENABLE_CONTENT",
    "ENABLE_ADVANCED",
    "ENABLE_REPORTING",
    "ENABLE_AUTOMATION",
]


class FakeClient:
    """Stands in for ShopifyGraphQLClient and records every execute call"""

    def __init__(self, data=None, errors=None, exc=None):
        self.data = {} if data is None else data
        self.errors = errors
        self.exc = exc
        self.calls = []

    async def execute(self, query, variables=None):
        self.calls.append((query, variables))
        if self.exc is not None:
            raise self.exc
        if self.errors:
            return GraphQLResponse(errors=self.errors)
        return GraphQLResponse(data=self.data)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Every test starts without Shopify or category variables"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def shopify_env(monkeypatch):
    monkeypatch.setenv("SHOPIFY_ACCESS_TOKEN", "shpat_test")
    monkeypatch.setenv("SHOPIFY_STORE_URL", "test-store.myshopify.com")
    return monkeypatch


@pytest.fixture
def settings():
    return ShopifySettings(
        access_token="shpat_test",
        store_url="test-store.myshopify.com",
        api_url="https://test-store.myshopify.com/admin/api/2025-01/graphql.json",
    )


@pytest.fixture
def fake_client():
    return FakeClient(data={"ok": True})


@pytest.fixture
def make_client():
    return FakeClient
