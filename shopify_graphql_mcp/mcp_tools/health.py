"""
Health check tool, registered regardless of configuration
"""

import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..config import REQUIRED_ENV_VARS, ConfigurationError, ServiceConfig, ShopifySettings
from .base import BaseMCPTool, text_result


class HealthCheckTool(BaseMCPTool):
    """Report whether the server is running and has usable Shopify settings"""

    name = "health_check"
    description = "Check if the Shopify GraphQL MCP server is running and configured"
    input_schema = {"type": "object", "properties": {}}

    def __init__(self, enabled_categories: Optional[List[str]] = None,
                 config: Optional[ServiceConfig] = None):
        super().__init__()
        self.enabled_categories = list(enabled_categories or [])
        self.config = config

    async def execute(self, **kwargs) -> Dict[str, Any]:
        # Resolve the settings the same way the client does
        try:
            ShopifySettings.from_config(self.config)
            problem = None
        except ConfigurationError as e:
            problem = str(e)

        status = {
            "status": "not_configured" if problem else "healthy",
            "message": (
                f"Server is running but not configured: {problem}" if problem
                else "Server is running and configured"
            ),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "enabledCategories": self.enabled_categories,
        }
        if problem:
            status["requiredVariables"] = REQUIRED_ENV_VARS

        return text_result(json.dumps(status, indent=2))
