"""
Tests for the stdio MCP server.
"""
import io
import json

import pytest

from shopify_graphql_mcp.base_server import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    METHOD_NOT_FOUND,
    PROTOCOL_VERSION,
    MCPResource,
    MCPServer,
)
from shopify_graphql_mcp.mcp_tools.base import BaseMCPTool, text_result


class EchoTool(BaseMCPTool):
    name = "echo"
    description = "Echo the arguments back"
    input_schema = {"type": "object", "properties": {"message": {"type": "string"}}}

    async def execute(self, **kwargs):
        return text_result(json.dumps(kwargs))


class PlainTool(BaseMCPTool):
    name = "plain"
    description = "Returns a plain dict"

    async def execute(self, **kwargs):
        return {"value": 42}


class BrokenTool(BaseMCPTool):
    name = "broken"

    async def execute(self, **kwargs):
        raise RuntimeError("tool exploded")


@pytest.fixture
def server():
    server = MCPServer(name="test-server", version="9.9.9")
    server.add_tool(EchoTool())
    server.add_tool(PlainTool())
    server.add_tool(BrokenTool())
    return server


def request(method, params=None, request_id=1):
    message = {"jsonrpc": "2.0", "id": request_id, "method": method}
    if params is not None:
        message["params"] = params
    return message


@pytest.mark.asyncio
async def test_initialize(server):
    response = await server.handle_request(request("initialize", {"protocolVersion": PROTOCOL_VERSION}))

    assert response["id"] == 1
    assert response["result"]["protocolVersion"] == PROTOCOL_VERSION
    assert response["result"]["serverInfo"] == {"name": "test-server", "version": "9.9.9"}
    assert "tools" in response["result"]["capabilities"]


@pytest.mark.asyncio
async def test_ping(server):
    response = await server.handle_request(request("ping"))
    assert response["result"] == {}


@pytest.mark.asyncio
async def test_tools_list(server):
    response = await server.handle_request(request("tools/list"))
    tools = {tool["name"]: tool for tool in response["result"]["tools"]}

    assert set(tools) == {"echo", "plain", "broken"}
    assert tools["echo"]["description"] == "Echo the arguments back"
    assert tools["echo"]["inputSchema"]["properties"] == {"message": {"type": "string"}}


@pytest.mark.asyncio
async def test_tools_call(server):
    response = await server.handle_request(
        request("tools/call", {"name": "echo", "arguments": {"message": "hi"}})
    )

    content = response["result"]["content"]
    assert content[0]["type"] == "text"
    assert json.loads(content[0]["text"]) == {"message": "hi"}


@pytest.mark.asyncio
async def test_tools_call_nested_params(server):
    """Some clients nest the call inside the name parameter"""
    response = await server.handle_request(
        request("tools/call", {"name": {"name": "echo", "arguments": {"message": "nested"}}})
    )
    assert json.loads(response["result"]["content"][0]["text"]) == {"message": "nested"}


@pytest.mark.asyncio
async def test_plain_result_is_serialized(server):
    response = await server.handle_request(request("tools/call", {"name": "plain"}))
    assert json.loads(response["result"]["content"][0]["text"]) == {"value": 42}


@pytest.mark.asyncio
async def test_unknown_tool(server):
    response = await server.handle_request(request("tools/call", {"name": "missing"}))

    assert response["error"]["code"] == INVALID_PARAMS
    assert "Unknown tool: missing" in response["error"]["message"]


@pytest.mark.asyncio
async def test_tool_exception_is_internal_error(server):
    response = await server.handle_request(request("tools/call", {"name": "broken"}))

    assert response["error"]["code"] == INTERNAL_ERROR
    assert response["error"]["message"] == "tool exploded"


@pytest.mark.asyncio
async def test_unknown_method(server):
    response = await server.handle_request(request("prompts/list"))
    assert response["error"]["code"] == METHOD_NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["notifications/initialized", "notifications/cancelled", "notifications/progress"])
async def test_notifications_get_no_response(server, method):
    assert await server.handle_request({"jsonrpc": "2.0", "method": method}) is None


def test_add_tool_replaces_existing(server):
    replacement = EchoTool()
    server.add_tool(replacement)

    assert list(server.tools).count("echo") == 1
    assert server.tools["echo"] is replacement


@pytest.mark.asyncio
async def test_resources(server):
    resource = MCPResource(name="Info", uri="test://info", mime_type="application/json")

    @resource.getter
    def get_info():
        return {"hello": "world"}

    server.add_resource(resource)

    listed = await server.handle_request(request("resources/list"))
    assert listed["result"]["resources"][0]["uri"] == "test://info"

    read = await server.handle_request(request("resources/read", {"uri": "test://info"}))
    content = read["result"]["contents"][0]
    assert content["mimeType"] == "application/json"
    assert json.loads(content["text"]) == {"hello": "world"}

    missing = await server.handle_request(request("resources/read", {"uri": "test://missing"}))
    assert missing["error"]["code"] == INVALID_PARAMS


@pytest.mark.asyncio
async def test_run_loop(server):
    """Responses are written one per line; bad lines and notifications produce nothing"""
    stdin = io.StringIO("\n".join([
        json.dumps(request("ping", request_id=1)),
        "this is not json",
        "",
        json.dumps({"jsonrpc": "2.0", "method": "notifications/initialized"}),
        json.dumps(request("tools/call", {"name": "echo", "arguments": {"message": "x"}}, request_id=2)),
    ]) + "\n")
    stdout = io.StringIO()

    await server.run(stdin=stdin, stdout=stdout)

    responses = [json.loads(line) for line in stdout.getvalue().splitlines()]
    assert [r["id"] for r in responses] == [1, 2]
    assert responses[0]["result"] == {}
    assert json.loads(responses[1]["result"]["content"][0]["text"]) == {"message": "x"}
