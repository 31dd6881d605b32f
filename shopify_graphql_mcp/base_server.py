"""
MCP server over stdio.
Newline delimited JSON-RPC 2.0 on stdin/stdout with tools and resources support.
"""

import asyncio
import json
import sys
import logging
import traceback
from typing import Dict, Any, Optional, Callable

logger = logging.getLogger('mcp-base-server')

PROTOCOL_VERSION = "2025-03-26"

# JSON-RPC error codes
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603


class JSONRPCError(Exception):
    """Error that maps onto a JSON-RPC error object"""
    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class MCPResource:
    """Resource definition for MCP server"""
    def __init__(self, name: str, uri: str, description: str = "", mime_type: str = "text/plain"):
        self.name = name
        self.uri = uri
        self.description = description
        self.mime_type = mime_type
        self._getter = None

    def getter(self, func: Callable):
        """Decorator to set the getter function"""
        self._getter = func
        return func

    async def get_content(self) -> Optional[Dict[str, Any]]:
        """Get the resource content"""
        if self._getter:
            content = await self._getter() if asyncio.iscoroutinefunction(self._getter) else self._getter()
            return {
                "uri": self.uri,
                "mimeType": self.mime_type,
                "text": content if isinstance(content, str) else json.dumps(content, indent=2)
            }
        return None


class MCPServer:
    """Stdio MCP server holding tools and resources"""

    def __init__(self, name: str, version: str = "1.0.0"):
        self.tools = {}
        self.resources = {}
        self.loaded_modules = set()
        self.server_info = {
            "name": name,
            "version": version
        }

    def add_tool(self, tool):
        """Add a tool to the server, replacing any tool with the same name"""
        if tool.name in self.tools:
            logger.warning(f"Replacing tool: {tool.name}")
        self.tools[tool.name] = tool
        logger.info(f"Added tool: {tool.name}")

    def add_resource(self, resource: MCPResource):
        """Add a resource to the server"""
        self.resources[resource.uri] = resource
        logger.info(f"Added resource: {resource.uri}")

    def list_tools(self):
        return [
            {
                "name": name,
                "description": getattr(tool, 'description', ''),
                "inputSchema": getattr(tool, 'input_schema', None) or {"type": "object", "properties": {}}
            }
            for name, tool in self.tools.items()
        ]

    async def call_tool(self, tool_name: str, tool_args: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Run a tool and return an MCP tool result"""
        if tool_name not in self.tools:
            raise JSONRPCError(INVALID_PARAMS, f"Unknown tool: {tool_name}")

        result = await self.tools[tool_name].execute(**(tool_args or {}))

        # Tools built on BaseMCPTool already return MCP content
        if isinstance(result, dict) and "content" in result:
            return result

        return {
            "content": [
                {
                    "type": "text",
                    "text": result if isinstance(result, str) else json.dumps(result)
                }
            ]
        }

    async def handle_request(self, request: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Handle JSON-RPC request"""
        method = request.get("method")
        params = request.get("params") or {}
        request_id = request.get("id")

        try:
            if method == "initialize":
                result = {
                    "protocolVersion": PROTOCOL_VERSION,
                    "serverInfo": self.server_info,
                    "capabilities": {
                        "resources": {"listChanged": False} if self.resources else {},
                        "tools": {"listChanged": False}
                    }
                }

            elif method == "ping":
                result = {}

            elif method == "tools/list":
                result = {"tools": self.list_tools()}

            elif method == "tools/call":
                # Handle nested structure from some MCP clients
                if isinstance(params.get("name"), dict):
                    tool_name = params["name"]["name"]
                    tool_args = params["name"].get("arguments", {})
                else:
                    tool_name = params.get("name")
                    tool_args = params.get("arguments", {})

                result = await self.call_tool(tool_name, tool_args)

            elif method == "resources/list":
                result = {
                    "resources": [
                        {
                            "uri": uri,
                            "name": resource.name,
                            "description": resource.description,
                            "mimeType": resource.mime_type
                        }
                        for uri, resource in self.resources.items()
                    ]
                }

            elif method == "resources/read":
                uri = params.get("uri")
                if uri not in self.resources:
                    raise JSONRPCError(INVALID_PARAMS, f"Unknown resource: {uri}")
                content = await self.resources[uri].get_content()
                result = {"contents": [content] if content else []}

            elif method == "notifications/initialized":
                logger.info("Client initialized")
                return None

            elif method == "notifications/cancelled":
                return None

            elif isinstance(method, str) and method.startswith("notifications/"):
                logger.debug(f"Ignoring notification: {method}")
                return None

            else:
                raise JSONRPCError(METHOD_NOT_FOUND, f"Unknown method: {method}")

        except JSONRPCError as e:
            logger.error(f"Error handling {method}: {e.message}")
            return self._error(request_id, e.code, e.message)

        except Exception as e:
            logger.error(f"Error handling request: {e}")
            logger.error(f"Traceback: {traceback.format_exc()}")
            return self._error(request_id, INTERNAL_ERROR, str(e))

        return {
            "jsonrpc": "2.0",
            "id": request_id,
            "result": result
        }

    @staticmethod
    def _error(request_id, code: int, message: str) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": request_id,
            "error": {
                "code": code,
                "message": message
            }
        }

    async def run(self, stdin=None, stdout=None):
        """Run the stdio server until stdin is closed"""
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        logger.info(f"Starting {self.server_info['name']} MCP server with {len(self.tools)} tools...")

        loop = asyncio.get_running_loop()
        while True:
            try:
                line = await loop.run_in_executor(None, stdin.readline)
                if not line:
                    break
                if not line.strip():
                    continue

                request = json.loads(line.strip())
                response = await self.handle_request(request)

                # Notifications don't get responses
                if response is not None:
                    stdout.write(json.dumps(response) + "\n")
                    stdout.flush()

            except json.JSONDecodeError as e:
                logger.error(f"Invalid JSON: {e}")
            except Exception as e:
                logger.error(f"Server error: {e}")

        logger.info("Server shutting down")
