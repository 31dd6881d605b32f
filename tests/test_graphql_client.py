"""
Tests for the Shopify GraphQL transport client.
"""
import json

import httpx
import pytest

from shopify_graphql_mcp.config import ConfigurationError, build_api_url
from shopify_graphql_mcp.graphql_client import (
    GraphQLTransportError,
    ShopifyGraphQLClient,
    normalize_errors,
)


def make_client(settings, handler):
    return ShopifyGraphQLClient(settings=settings, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_execute_posts_query_and_variables(settings):
    """One POST with the token header, the stripped query and the variables"""
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"data": {"shop": {"name": "Test Store"}}})

    client = make_client(settings, handler)
    result = await client.execute("\n  { shop { name } }\n", {"first": 5})

    assert len(requests) == 1
    request = requests[0]
    assert request.method == "POST"
    assert str(request.url) == settings.api_url
    assert request.headers["X-Shopify-Access-Token"] == "shpat_test"
    assert request.headers["Content-Type"] == "application/json"
    assert json.loads(request.content) == {"query": "{ shop { name } }", "variables": {"first": 5}}

    assert result.data == {"shop": {"name": "Test Store"}}
    assert result.errors is None
    assert not result.has_errors


@pytest.mark.asyncio
async def test_execute_sends_empty_variables_object(settings):
    """Omitted variables are sent as an empty object"""
    bodies = []

    def handler(request):
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"data": {}})

    await make_client(settings, handler).execute("{ shop { id } }")
    assert bodies[0]["variables"] == {}


@pytest.mark.asyncio
async def test_error_list_is_returned_not_raised(settings):
    errors = [{"message": "Field 'nope' doesn't exist on type 'Shop'", "locations": [{"line": 1, "column": 9}]}]

    def handler(request):
        return httpx.Response(200, json={"errors": errors})

    result = await make_client(settings, handler).execute("{ shop { nope } }")

    assert result.errors == errors
    assert result.data is None
    assert result.has_errors


@pytest.mark.asyncio
async def test_string_error_with_error_status(settings):
    """Shopify reports auth failures as a bare string with a 401"""
    def handler(request):
        return httpx.Response(401, json={"errors": "[API] Invalid API key or access token"})

    result = await make_client(settings, handler).execute("{ shop { name } }")

    assert result.errors == [{"message": "[API] Invalid API key or access token"}]
    assert result.data is None


@pytest.mark.asyncio
async def test_non_json_body_raises_transport_error(settings):
    def handler(request):
        return httpx.Response(502, text="<html>Bad gateway</html>")

    with pytest.raises(GraphQLTransportError) as exc_info:
        await make_client(settings, handler).execute("{ shop { name } }")
    assert "502" in str(exc_info.value)


@pytest.mark.asyncio
async def test_error_status_without_error_list_raises(settings):
    def handler(request):
        return httpx.Response(500, json={"message": "Internal error"})

    with pytest.raises(GraphQLTransportError):
        await make_client(settings, handler).execute("{ shop { name } }")


@pytest.mark.asyncio
async def test_network_failure_raises_transport_error(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(GraphQLTransportError) as exc_info:
        await make_client(settings, handler).execute("{ shop { name } }")
    assert "connection refused" in str(exc_info.value)


def test_normalize_errors():
    assert normalize_errors("Access denied") == [{"message": "Access denied"}]
    assert normalize_errors({"message": "Throttled"}) == [{"message": "Throttled"}]
    assert normalize_errors({"shop": "not found"}) == [{"message": "shop: not found"}]
    assert normalize_errors(["oops", {"message": "bad"}]) == [{"message": "oops"}, {"message": "bad"}]


def test_client_reads_settings_from_environment(shopify_env):
    client = ShopifyGraphQLClient()

    assert client.settings.access_token == "shpat_test"
    assert client.settings.api_url == "https://test-store.myshopify.com/admin/api/2025-01/graphql.json"


def test_explicit_api_url_wins(shopify_env):
    shopify_env.setenv("SHOPIFY_STORE_API_URL", "https://custom.example.com/graphql.json")

    assert ShopifyGraphQLClient().settings.api_url == "https://custom.example.com/graphql.json"


def test_client_without_credentials_raises():
    with pytest.raises(ConfigurationError) as exc_info:
        ShopifyGraphQLClient()
    message = str(exc_info.value)
    assert "SHOPIFY_ACCESS_TOKEN" in message
    assert "SHOPIFY_STORE_URL" in message


def test_get_config_returns_copy(settings):
    client = ShopifyGraphQLClient(settings=settings)
    config = client.get_config()

    assert config == settings
    assert config is not client.settings


@pytest.mark.parametrize("store_url", [
    "test-store.myshopify.com",
    "https://test-store.myshopify.com",
    "https://test-store.myshopify.com/",
])
def test_build_api_url(store_url):
    assert build_api_url(store_url, "2024-10") == "https://test-store.myshopify.com/admin/api/2024-10/graphql.json"
