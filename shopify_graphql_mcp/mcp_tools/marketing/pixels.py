"""
Web pixel tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, boolean, first_arg, id_arg, pick, schema, string

PIXEL_FIELDS = """
          id
          name
          apiKey
          enabled
"""


class GetPixelsTool(GraphQLTool):
    name = "get_pixels"
    description = "Fetch pixels from the Shopify store"
    input_schema = schema({
        "first": first_arg("pixels"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetPixels($first: Int!, $after: String) {
      pixels(first: $first, after: $after) {
        edges {
          node {
            id
            name
            apiKey
            enabled
            events(first: 10) {
              edges {
                node {
                  id
                  name
                }
              }
            }
          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class GetPixelTool(GraphQLTool):
    name = "get_pixel"
    description = "Fetch a specific pixel by ID"
    input_schema = schema({"id": id_arg("Pixel")}, required=["id"])
    query = """
    query GetPixel($id: ID!) {
      pixel(id: $id) {
        id
        name
        apiKey
        enabled
        events(first: 50) {
          edges {
            node {
              id
              name
              schema
            }
          }
        }
      }
    }
    """


class CreatePixelTool(GraphQLTool):
    name = "create_pixel"
    description = "Create a new pixel"
    input_schema = schema({
        "name": string("Pixel name"),
        "apiKey": string("Pixel API key"),
    }, required=["name", "apiKey"])
    query = """
    mutation CreatePixel($input: PixelInput!) {
      pixelCreate(input: $input) {
        pixel {""" + PIXEL_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "name", "apiKey")}


class UpdatePixelTool(GraphQLTool):
    name = "update_pixel"
    description = "Update an existing pixel"
    input_schema = schema({
        "id": id_arg("Pixel"),
        "name": string("Pixel name"),
        "apiKey": string("Pixel API key"),
        "enabled": boolean("Whether the pixel is enabled"),
    }, required=["id"])
    query = """
    mutation UpdatePixel($id: ID!, $input: PixelInput!) {
      pixelUpdate(id: $id, input: $input) {
        pixel {""" + PIXEL_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "name", "apiKey", "enabled")}


class DeletePixelTool(GraphQLTool):
    name = "delete_pixel"
    description = "Delete a pixel"
    input_schema = schema({"id": id_arg("Pixel")}, required=["id"])
    query = """
    mutation DeletePixel($id: ID!) {
      pixelDelete(id: $id) {
        deletedPixelId
        userErrors {
          field
          message
        }
      }
    }
    """
