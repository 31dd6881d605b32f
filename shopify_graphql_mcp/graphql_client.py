"""
GraphQL transport for the Shopify Admin API.

One call to ``execute`` is one HTTP POST. The result separates three cases:
a successful response, an API-level error list (returned, not raised), and
a transport failure (raised as GraphQLTransportError).
"""
import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import BaseModel

from .config import ServiceConfig, ShopifySettings

logger = logging.getLogger(__name__)


class GraphQLTransportError(Exception):
    """Raised when the request could not be completed or the body is unusable."""
    pass


class GraphQLResponse(BaseModel):
    """Decoded GraphQL response body."""
    data: Optional[Any] = None
    errors: Optional[List[Dict[str, Any]]] = None
    extensions: Optional[Dict[str, Any]] = None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def normalize_errors(errors: Any) -> List[Dict[str, Any]]:
    """
    Coerce the ``errors`` member into a list of error objects.

    Shopify returns a bare string (or a dict) for authentication failures
    instead of the usual list of ``{"message": ...}`` objects.
    """
    if isinstance(errors, list):
        return [e if isinstance(e, dict) else {"message": str(e)} for e in errors]
    if isinstance(errors, dict):
        if "message" in errors:
            return [errors]
        return [{"message": f"{key}: {value}"} for key, value in errors.items()]
    return [{"message": str(errors)}]


class ShopifyGraphQLClient:
    """
    Client for the Shopify Admin GraphQL endpoint.
    """
    def __init__(self, settings: Optional[ShopifySettings] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None,
                 config: Optional[ServiceConfig] = None):
        """
        Initialize the client.

        Args:
            settings: Endpoint and credentials; read from the environment when omitted
            transport: Optional httpx transport (used by tests)
            config: Configuration to read the settings from when none are given

        Raises:
            ConfigurationError: if credentials are missing from the environment
        """
        self.settings = settings or ShopifySettings.from_config(config)
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Shopify-Access-Token": self.settings.access_token,
        }

    async def execute(self, query: str, variables: Optional[Dict[str, Any]] = None) -> GraphQLResponse:
        """
        Execute a GraphQL query or mutation.

        Args:
            query: GraphQL document
            variables: Variables for the document

        Returns:
            GraphQLResponse with either ``data`` or ``errors`` populated

        Raises:
            GraphQLTransportError: on network failure or an unusable response
        """
        payload = {
            "query": query.strip(),
            "variables": variables or {},
        }

        try:
            async with httpx.AsyncClient(transport=self._transport,
                                         timeout=self.settings.timeout) as client:
                response = await client.post(
                    self.settings.api_url,
                    headers=self.headers,
                    json=payload,
                )
        except httpx.HTTPError as e:
            logger.error(f"GraphQL request failed: {e}")
            raise GraphQLTransportError(f"GraphQL request failed: {e}") from e

        try:
            body = response.json()
        except (json.JSONDecodeError, ValueError) as e:
            logger.error(f"Invalid JSON from Shopify (HTTP {response.status_code})")
            raise GraphQLTransportError(
                f"GraphQL request failed: HTTP {response.status_code}, response is not JSON"
            ) from e

        if not isinstance(body, dict):
            raise GraphQLTransportError(
                f"GraphQL request failed: unexpected response type {type(body).__name__}"
            )

        if body.get("errors"):
            errors = normalize_errors(body["errors"])
            logger.warning(f"GraphQL errors: {errors}")
            return GraphQLResponse(errors=errors, extensions=body.get("extensions"))

        if response.status_code >= 400:
            raise GraphQLTransportError(
                f"GraphQL request failed: HTTP {response.status_code}: {response.text[:500]}"
            )

        return GraphQLResponse(data=body.get("data"), extensions=body.get("extensions"))

    def get_config(self) -> ShopifySettings:
        """Return a copy of the client settings."""
        return self.settings.model_copy()
