"""
Tests for tool registration.
"""
import json
import logging
import types

import pytest

from shopify_graphql_mcp import mcp_tools
from shopify_graphql_mcp.base_server import MCPServer
from shopify_graphql_mcp.categories import CategoryConfig
from shopify_graphql_mcp.config import ServiceConfig
from shopify_graphql_mcp.mcp_tools import (
    UnknownModuleError,
    import_tool_module,
    register_module,
    register_tools,
    tool_classes,
)
from shopify_graphql_mcp.mcp_tools.base import GraphQLTool
from shopify_graphql_mcp.mcp_tools.commerce import subscriptions


@pytest.fixture
def server():
    return MCPServer(name="test-server")


def test_missing_credentials_registers_only_health_check(server, caplog):
    """Without credentials the server still starts with the health check"""
    with caplog.at_level(logging.ERROR):
        registered = register_tools(server, categories=["essential"])

    assert registered == []
    assert list(server.tools) == ["health_check"]
    assert "Missing required environment variable(s): SHOPIFY_ACCESS_TOKEN, SHOPIFY_STORE_URL" in caplog.text
    assert "Make sure environment variables are set" in caplog.text


@pytest.mark.asyncio
async def test_invalid_settings_are_reported_by_health_check(server, shopify_env, caplog):
    """Credentials are present but unusable: no tools, and the health check says so"""
    shopify_env.setenv("SHOPIFY_TIMEOUT", "abc")

    with caplog.at_level(logging.ERROR):
        registered = register_tools(server, categories=["essential"])

    assert registered == []
    assert list(server.tools) == ["health_check"]
    assert "Invalid SHOPIFY_TIMEOUT value: 'abc'" in caplog.text
    assert "Make sure environment variables are set" not in caplog.text

    result = await server.call_tool("health_check")
    status = json.loads(result["content"][0]["text"])
    assert status["status"] == "not_configured"
    assert "Invalid SHOPIFY_TIMEOUT value" in status["message"]


@pytest.mark.asyncio
async def test_register_tools_with_config_file(server, tmp_path):
    """Credentials can come from the JSON config file instead of the environment"""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "shopify": {"access_token": "shpat_file", "store_url": "file-store.myshopify.com"}
    }))
    config = ServiceConfig(config_file=str(config_file))

    registered = register_tools(server, categories=["reporting"], config=config)

    assert registered == ["reports", "resource-feedbacks", "apps"]
    result = await server.call_tool("health_check")
    assert json.loads(result["content"][0]["text"])["status"] == "healthy"


def test_register_tools_builds_client_from_environment(server, shopify_env):
    registered = register_tools(server, categories=["reporting"])

    assert registered == ["reports", "resource-feedbacks", "apps"]
    assert "health_check" in server.tools
    assert "get_apps" in server.tools


def test_health_check_is_registered_first(server, fake_client):
    register_tools(server, client=fake_client, categories=["automation"])
    assert next(iter(server.tools)) == "health_check"


def test_no_categories_registers_only_health_check(server, fake_client):
    assert register_tools(server, client=fake_client, categories=[]) == []
    assert list(server.tools) == ["health_check"]


def test_registering_module_twice_is_a_noop(server, fake_client):
    first = register_module(server, fake_client, "essential", "shop")
    tools = dict(server.tools)

    second = register_module(server, fake_client, "essential", "shop")

    assert first
    assert second == []
    assert server.tools == tools
    assert server.loaded_modules == {"shop"}


def test_register_tools_twice_keeps_tool_set(server, fake_client):
    register_tools(server, client=fake_client, categories=["content"])
    names = set(server.tools)

    assert register_tools(server, client=fake_client, categories=["content"]) == []
    assert set(server.tools) == names


def test_unknown_module_is_skipped(server, fake_client, monkeypatch, caplog):
    category = CategoryConfig(name="reporting", description="test", modules=["no-such-module", "apps"])
    monkeypatch.setattr(mcp_tools, "get_category_config", lambda name: category)

    with caplog.at_level(logging.WARNING):
        registered = register_tools(server, client=fake_client, categories=["reporting"])

    assert registered == ["apps"]
    assert "Unknown tool module: reporting/no-such-module" in caplog.text


def test_failing_module_does_not_stop_others(server, fake_client, monkeypatch, caplog):
    real_import = mcp_tools.import_tool_module

    def broken_import(category, module):
        if module == "reports":
            raise RuntimeError("boom")
        return real_import(category, module)

    monkeypatch.setattr(mcp_tools, "import_tool_module", broken_import)

    with caplog.at_level(logging.ERROR):
        registered = register_tools(server, client=fake_client, categories=["reporting"])

    assert registered == ["resource-feedbacks", "apps"]
    assert "Failed to register reporting/reports: boom" in caplog.text


def test_unknown_category_is_skipped(server, fake_client, caplog):
    with caplog.at_level(logging.WARNING):
        registered = register_tools(server, client=fake_client, categories=["bogus", "automation"])

    assert registered == ["inventory-shipments", "inventory-transfers", "packing-slip-templates"]
    assert "Unknown tool category: bogus" in caplog.text


def test_import_unknown_module_raises():
    with pytest.raises(UnknownModuleError):
        import_tool_module("essential", "does-not-exist")


def test_tool_classes_skips_imported_and_abstract_classes():
    """Base classes and helpers imported into a module are not tools"""
    classes = tool_classes(subscriptions)

    assert GraphQLTool not in classes
    assert subscriptions.SubscriptionStatusTool not in classes
    assert subscriptions.CancelSubscriptionContractTool in classes


def test_tool_classes_ignores_classes_from_other_modules():
    module = types.ModuleType("fake_tools")
    module.GraphQLTool = GraphQLTool
    module.CancelSubscriptionContractTool = subscriptions.CancelSubscriptionContractTool

    assert tool_classes(module) == []
