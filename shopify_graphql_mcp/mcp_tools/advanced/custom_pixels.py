"""
Custom pixel tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, array, boolean, first_arg, id_arg, pick, schema, string

PIXEL_FIELDS = """
        id
        handle
        title
        source
        status
        settings
        createdAt
        updatedAt
        lastError
        lastErrorAt
        shopifyManaged
        apiClient {
          id
          title
        }
        events {
          id
          name
        }
"""

PIXEL_STATUS_MUTATION = """
    mutation CustomPixel%(verb)s($id: ID!) {
      customPixel%(verb)s(id: $id) {
        customPixel {
          id
          status
        }
        userErrors {
          field
          message
        }
      }
    }
"""


def pixel_input(args: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    pixel = pick(args, *keys)
    if args.get("events"):
        pixel["events"] = args["events"]
    return pixel


class GetCustomPixelsTool(GraphQLTool):
    name = "get_custom_pixels"
    description = "Fetch custom pixels configured for the store"
    input_schema = schema({
        "first": first_arg("pixels"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetCustomPixels($first: Int!, $after: String) {
      customPixels(first: $first, after: $after) {
        edges {
          node {""" + PIXEL_FIELDS + """          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class GetCustomPixelTool(GraphQLTool):
    name = "get_custom_pixel"
    description = "Fetch a specific custom pixel by ID"
    input_schema = schema({"id": id_arg("CustomPixel", "Custom Pixel ID (e.g., 'gid://shopify/CustomPixel/123456789')")},
                          required=["id"])
    query = """
    query GetCustomPixel($id: ID!) {
      customPixel(id: $id) {""" + PIXEL_FIELDS + """      }
    }
    """


class CreateCustomPixelTool(GraphQLTool):
    name = "create_custom_pixel"
    description = "Create a new custom pixel"
    input_schema = schema({
        "title": string("Pixel title"),
        "handle": string("Unique handle for the pixel"),
        "source": string("JavaScript source code for the pixel"),
        "settings": string("JSON settings for the pixel"),
        "events": array(string(), "Events to subscribe to (e.g., ['checkout_started', 'checkout_completed'])"),
    }, required=["title", "handle", "source"])
    query = """
    mutation CustomPixelCreate($input: CustomPixelInput!) {
      customPixelCreate(input: $input) {
        customPixel {
          id
          handle
          title
          source
          status
          settings
          createdAt
          updatedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pixel_input(args, "title", "handle", "source", "settings")}


class UpdateCustomPixelTool(GraphQLTool):
    name = "update_custom_pixel"
    description = "Update an existing custom pixel"
    input_schema = schema({
        "id": string("Custom Pixel ID"),
        "title": string("Pixel title"),
        "source": string("JavaScript source code"),
        "settings": string("JSON settings"),
        "events": array(string(), "Events to subscribe to"),
    }, required=["id"])
    query = """
    mutation CustomPixelUpdate($id: ID!, $input: CustomPixelInput!) {
      customPixelUpdate(id: $id, input: $input) {
        customPixel {
          id
          handle
          title
          source
          status
          settings
          updatedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pixel_input(args, "title", "source", "settings")}


class DeleteCustomPixelTool(GraphQLTool):
    name = "delete_custom_pixel"
    description = "Delete a custom pixel"
    input_schema = schema({"id": string("Custom Pixel ID to delete")}, required=["id"])
    query = """
    mutation CustomPixelDelete($id: ID!) {
      customPixelDelete(id: $id) {
        deletedCustomPixelId
        userErrors {
          field
          message
        }
      }
    }
    """


class ToggleCustomPixelTool(GraphQLTool):
    name = "toggle_custom_pixel"
    description = "Enable or disable a custom pixel"
    input_schema = schema({
        "id": string("Custom Pixel ID"),
        "enabled": boolean("Whether to enable (true) or disable (false) the pixel"),
    }, required=["id", "enabled"])
    query = PIXEL_STATUS_MUTATION % {"verb": "Enable"}

    def document(self, args: Dict[str, Any]) -> str:
        if args["enabled"]:
            return self.query
        return PIXEL_STATUS_MUTATION % {"verb": "Disable"}

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"]}
