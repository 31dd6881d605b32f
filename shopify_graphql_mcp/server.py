#!/usr/bin/env python3
"""
Shopify GraphQL MCP server entry point.
Uses stdio transport for local communication.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .base_server import MCPResource, MCPServer
from .categories import (
    ALL_CATEGORIES,
    CATEGORY_NAMES,
    describe_categories,
    get_enabled_categories,
)
from .config import ConfigurationError, ServiceConfig
from .graphql_client import GraphQLTransportError, ShopifyGraphQLClient
from .mcp_tools import load_tool_classes, register_tools

logger = logging.getLogger('shopify-graphql-mcp')

SERVER_NAME = "shopify-graphql-mcp"

CONNECTION_TEST_QUERY = "{ shop { name } }"


def configure_logging(level: str = "INFO") -> None:
    """Log to stderr (stdout carries the protocol) and optionally to MCP_LOG_FILE"""
    handlers = [logging.StreamHandler(sys.stderr)]
    log_file = os.getenv("MCP_LOG_FILE")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def build_server(client: Optional[ShopifyGraphQLClient] = None,
                 categories: Optional[List[str]] = None,
                 config: Optional[ServiceConfig] = None) -> MCPServer:
    """Create the MCP server with every enabled tool registered"""
    if categories is None:
        categories = get_enabled_categories()

    server = MCPServer(name=SERVER_NAME, version=__version__)

    categories_resource = MCPResource(
        name="Tool categories",
        uri="shopify://categories",
        description="Tool categories, their modules and whether they are enabled",
        mime_type="application/json"
    )

    @categories_resource.getter
    def get_categories():
        return describe_categories(categories)

    server.add_resource(categories_resource)

    register_tools(server, client=client, categories=categories, config=config)
    return server


def list_tool_names(categories: List[str]) -> List[str]:
    """Tool names the given categories would register, without connecting"""
    names = ["health_check"]
    for category in ALL_CATEGORIES:
        if category.name not in categories:
            continue
        for module in category.modules:
            names.extend(cls.name for cls in load_tool_classes(category.name, module))
    return names


async def check_connection(client: Optional[ShopifyGraphQLClient] = None,
                           config: Optional[ServiceConfig] = None) -> bool:
    """Run a minimal shop query and report the result on stderr"""
    try:
        client = client or ShopifyGraphQLClient(config=config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False

    print(f"Endpoint: {client.settings.api_url}", file=sys.stderr)
    try:
        result = await client.execute(CONNECTION_TEST_QUERY)
    except GraphQLTransportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return False

    if result.errors:
        print(f"Error: API connection failed: {json.dumps(result.errors)}", file=sys.stderr)
        return False

    shop_name = ((result.data or {}).get("shop") or {}).get("name", "unknown")
    print(f"Connection successful! Connected to shop: {shop_name}", file=sys.stderr)
    return True


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="Expose the Shopify Admin GraphQL API as MCP tools over stdio"
    )
    parser.add_argument("--env-file", help="Path to a .env file to load")
    parser.add_argument("--config", help="Path to a JSON config file with a \"shopify\" section")
    parser.add_argument(
        "--categories",
        help=f"Comma separated categories to enable ({', '.join(CATEGORY_NAMES)}, all, none)"
    )
    parser.add_argument("--list-categories", action="store_true",
                        help="Print the tool categories and exit")
    parser.add_argument("--list-tools", action="store_true",
                        help="Print the tools that would be registered and exit")
    parser.add_argument("--check", action="store_true",
                        help="Check configuration and API connectivity, then exit")
    parser.add_argument("--log-level",
                        help="Logging level (default: LOG_LEVEL or INFO)")
    return parser.parse_args(argv)


def apply_category_override(value: str) -> None:
    """Make --categories win over ENABLE_* flags for this process"""
    for name in CATEGORY_NAMES:
        os.environ.pop(f"ENABLE_{name.upper()}", None)
    os.environ["ENABLED_TOOL_CATEGORIES"] = value


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    # The .env file may set LOG_LEVEL and MCP_LOG_FILE
    config = ServiceConfig(config_file=args.config, env_file=args.env_file)
    configure_logging(args.log_level or os.getenv("LOG_LEVEL", "INFO"))

    if args.categories is not None:
        apply_category_override(args.categories)
    categories = get_enabled_categories()

    if args.list_categories:
        print(json.dumps(describe_categories(categories), indent=2))
        return 0

    if args.list_tools:
        print("\n".join(list_tool_names(categories)))
        return 0

    if args.check:
        return 0 if asyncio.run(check_connection(config=config)) else 1

    server = build_server(categories=categories, config=config)
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logger.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
