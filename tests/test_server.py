"""
Tests for the server entry point and the health check tool.
"""
import json
import logging

import httpx
import pytest

from shopify_graphql_mcp import server as server_module
from shopify_graphql_mcp.config import ShopifySettings
from shopify_graphql_mcp.graphql_client import ShopifyGraphQLClient
from shopify_graphql_mcp.mcp_tools.health import HealthCheckTool


configure_logging = server_module.configure_logging


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep main() from reconfiguring the root logger during tests"""
    monkeypatch.setattr(server_module, "configure_logging", lambda level="INFO": None)


@pytest.fixture
def categories_env(monkeypatch):
    # Recorded so the --categories override is undone after the test
    monkeypatch.setenv("ENABLED_TOOL_CATEGORIES", "all")
    monkeypatch.setenv("ENABLE_ESSENTIAL", "true")
    return monkeypatch


def test_list_categories(capsys, categories_env):
    assert server_module.main(["--list-categories", "--categories", "reporting"]) == 0

    listed = json.loads(capsys.readouterr().out)
    assert listed["reporting"]["enabled"] is True
    assert listed["essential"]["enabled"] is False
    assert listed["reporting"]["modules"] == ["reports", "resource-feedbacks", "apps"]


def test_list_tools(capsys, categories_env):
    assert server_module.main(["--list-tools", "--categories", "automation"]) == 0

    names = capsys.readouterr().out.split()
    assert names[0] == "health_check"
    assert "get_packing_slip_templates" in names
    assert "get_products" not in names


def test_list_tool_names_matches_registration(fake_client):
    server = server_module.build_server(client=fake_client, categories=["content"])
    assert set(server_module.list_tool_names(["content"])) == set(server.tools)


@pytest.mark.asyncio
async def test_categories_resource(fake_client):
    server = server_module.build_server(client=fake_client, categories=["reporting"])

    response = await server.handle_request(
        {"jsonrpc": "2.0", "id": 1, "method": "resources/read", "params": {"uri": "shopify://categories"}}
    )
    described = json.loads(response["result"]["contents"][0]["text"])
    assert described["reporting"]["enabled"] is True
    assert described["marketing"]["enabled"] is False


def test_check_without_credentials(capsys):
    assert server_module.main(["--check"]) == 1
    assert "SHOPIFY_ACCESS_TOKEN" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_check_connection(settings, capsys):
    def handler(request):
        return httpx.Response(200, json={"data": {"shop": {"name": "Test Store"}}})

    client = ShopifyGraphQLClient(settings=settings, transport=httpx.MockTransport(handler))

    assert await server_module.check_connection(client) is True
    assert "Connected to shop: Test Store" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_check_connection_reports_errors(settings, capsys):
    def handler(request):
        return httpx.Response(401, json={"errors": "[API] Invalid API key or access token"})

    client = ShopifyGraphQLClient(settings=settings, transport=httpx.MockTransport(handler))

    assert await server_module.check_connection(client) is False
    assert "Invalid API key" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_health_check_not_configured():
    result = await HealthCheckTool(["essential"]).execute()
    status = json.loads(result["content"][0]["text"])

    assert status["status"] == "not_configured"
    assert "SHOPIFY_ACCESS_TOKEN" in status["message"]
    assert status["requiredVariables"] == ["SHOPIFY_ACCESS_TOKEN", "SHOPIFY_STORE_URL"]
    assert status["enabledCategories"] == ["essential"]


@pytest.mark.asyncio
async def test_health_check_configured(shopify_env):
    result = await HealthCheckTool().execute()
    status = json.loads(result["content"][0]["text"])

    assert status["status"] == "healthy"
    assert "requiredVariables" not in status
    assert status["timestamp"].endswith("+00:00")


@pytest.fixture
def root_logger():
    """Undo the handlers and level configure_logging installs"""
    root = logging.getLogger()
    level = root.level
    existing = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in existing and type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_env_file_configures_logging(tmp_path, monkeypatch, capsys, root_logger, categories_env):
    """LOG_LEVEL and MCP_LOG_FILE set in the .env file reach the logging setup"""
    monkeypatch.setattr(server_module, "configure_logging", configure_logging)
    log_file = tmp_path / "mcp.log"
    env_file = tmp_path / ".env"
    env_file.write_text(f"MCP_LOG_FILE={log_file}\nLOG_LEVEL=DEBUG\n")
    # load_dotenv writes os.environ; register the keys so they are removed afterwards
    for name in ("MCP_LOG_FILE", "LOG_LEVEL"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    assert server_module.main(["--env-file", str(env_file), "--list-categories"]) == 0

    assert any(isinstance(handler, logging.FileHandler) for handler in root_logger.handlers)
    assert root_logger.level == logging.DEBUG
    assert log_file.exists()


def test_log_level_option_wins_over_env_file(tmp_path, monkeypatch, capsys, root_logger, categories_env):
    monkeypatch.setattr(server_module, "configure_logging", configure_logging)
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=DEBUG\n")
    monkeypatch.setenv("LOG_LEVEL", "")
    monkeypatch.delenv("LOG_LEVEL")

    server_module.main(["--env-file", str(env_file), "--log-level", "WARNING", "--list-categories"])

    assert root_logger.level == logging.WARNING


def test_config_file_reaches_server(tmp_path, monkeypatch, categories_env):
    """Credentials from --config are used when the environment has none"""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "shopify": {"access_token": "shpat_file", "store_url": "file-store.myshopify.com"}
    }))
    built = {}

    class IdleServer:
        async def run(self):
            return None

    def fake_build_server(client=None, categories=None, config=None):
        built["settings"] = ShopifySettings.from_config(config)
        built["categories"] = categories
        return IdleServer()

    monkeypatch.setattr(server_module, "build_server", fake_build_server)

    assert server_module.main(["--config", str(config_file), "--categories", "reporting"]) == 0
    assert built["settings"].access_token == "shpat_file"
    assert built["settings"].api_url == "https://file-store.myshopify.com/admin/api/2025-01/graphql.json"
    assert built["categories"] == ["reporting"]
