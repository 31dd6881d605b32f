"""
Tool registry.

Tool modules live in ``mcp_tools/<category>/<module>.py``. Every ClientTool
subclass defined in an enabled module is registered with the server.
"""

import importlib
import inspect
import logging
from types import ModuleType
from typing import List, Optional

from ..categories import get_category_config, get_enabled_categories, module_path
from ..config import ConfigurationError, MissingCredentialsError, REQUIRED_ENV_VARS, ServiceConfig
from ..graphql_client import ShopifyGraphQLClient
from .base import BaseMCPTool, ClientTool
from .health import HealthCheckTool

logger = logging.getLogger(__name__)


class UnknownModuleError(LookupError):
    """Raised when a configured module has no implementation"""
    pass


def import_tool_module(category: str, module: str) -> ModuleType:
    """Import a tool module, raising UnknownModuleError if it does not exist"""
    path = module_path(category, module)
    try:
        return importlib.import_module(path)
    except ModuleNotFoundError as e:
        # Only translate a missing tool module, not a missing dependency inside it
        if e.name and (path == e.name or path.startswith(e.name + ".")):
            raise UnknownModuleError(f"Unknown tool module: {category}/{module}") from e
        raise


def tool_classes(module: ModuleType) -> List[type]:
    """Client-bound tool classes defined in ``module``, in definition order"""
    return [
        obj for obj in vars(module).values()
        if inspect.isclass(obj)
        and issubclass(obj, ClientTool)
        and obj.__module__ == module.__name__
        and obj.name
    ]


def load_tool_classes(category: str, module: str) -> List[type]:
    """Tool classes of a module, or an empty list if the module is unknown"""
    try:
        return tool_classes(import_tool_module(category, module))
    except UnknownModuleError:
        return []


def register_module(server, client, category: str, module: str) -> List[str]:
    """
    Register the tools of one module.

    A module that is already registered on ``server`` is skipped.

    Returns:
        Names of the tools added
    """
    if module in server.loaded_modules:
        logger.debug(f"Module already registered: {module}")
        return []

    tools: List[BaseMCPTool] = [cls(client) for cls in tool_classes(import_tool_module(category, module))]
    for tool in tools:
        server.add_tool(tool)

    server.loaded_modules.add(module)
    return [tool.name for tool in tools]


def register_tools(server, client: Optional[ShopifyGraphQLClient] = None,
                   categories: Optional[List[str]] = None,
                   config: Optional[ServiceConfig] = None) -> List[str]:
    """
    Register the health check and the tools of every enabled category.

    Args:
        server: MCPServer to add tools to
        client: GraphQL client; built from the environment when omitted
        categories: Enabled category names; read from the environment when omitted
        config: Configuration the client and health check read settings from

    Returns:
        Names of the modules that were registered
    """
    if categories is None:
        categories = get_enabled_categories()

    # Always register a health check tool first
    server.add_tool(HealthCheckTool(categories, config=config))

    if client is None:
        try:
            client = ShopifyGraphQLClient(config=config)
        except ConfigurationError as e:
            logger.error(f"Failed to initialize ShopifyGraphQLClient: {e}")
            if isinstance(e, MissingCredentialsError):
                logger.error(f"Make sure environment variables are set: {', '.join(REQUIRED_ENV_VARS)}")
            return []

    if not categories:
        logger.warning("No tool categories enabled; only health_check is available")

    registered = []
    for name in categories:
        category = get_category_config(name)
        if category is None:
            logger.warning(f"Unknown tool category: {name}")
            continue

        for module in category.modules:
            try:
                added = register_module(server, client, category.name, module)
            except UnknownModuleError as e:
                logger.warning(f"{e}, skipping")
                continue
            except Exception as e:
                logger.error(f"Failed to register {category.name}/{module}: {e}")
                continue

            if added:
                logger.info(f"Registered {len(added)} tools from {module}")
                registered.append(module)

    logger.info(f"Registered {len(server.tools)} tools from {len(registered)} modules "
                f"(categories: {', '.join(categories) or 'none'})")
    return registered


__all__ = [
    'HealthCheckTool',
    'UnknownModuleError',
    'import_tool_module',
    'load_tool_classes',
    'register_module',
    'register_tools',
    'tool_classes',
]
