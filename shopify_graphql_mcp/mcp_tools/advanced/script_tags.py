"""
Script tag tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, boolean, enum, first_arg, id_arg, pick, schema, string

DISPLAY_SCOPES = ["ALL", "ONLINE_STORE", "ORDER_STATUS"]


def script_tag_id() -> Dict[str, Any]:
    return id_arg("ScriptTag", "Script tag ID (e.g., 'gid://shopify/ScriptTag/123456789')")


class GetScriptTagsTool(GraphQLTool):
    name = "get_script_tags"
    description = "Fetch script tags from the Shopify store"
    input_schema = schema({
        "first": first_arg("script tags"),
        "after": after_arg(),
        "src": string("Filter by source URL"),
    })
    defaults = {"first": 50}
    query = """
    query GetScriptTags($first: Int!, $after: String, $src: URL) {
      scriptTags(first: $first, after: $after, src: $src) {
        edges {
          node {
            id
            src
            displayScope
            cache
            createdAt
            updatedAt
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


class GetScriptTagTool(GraphQLTool):
    name = "get_script_tag"
    description = "Fetch a specific script tag by ID"
    input_schema = schema({"id": script_tag_id()}, required=["id"])
    query = """
    query GetScriptTag($id: ID!) {
      scriptTag(id: $id) {
        id
        src
        displayScope
        cache
        createdAt
        updatedAt
      }
    }
    """


class CreateScriptTagTool(GraphQLTool):
    name = "create_script_tag"
    description = "Create a new script tag"
    input_schema = schema({
        "src": string("URL to the remote script", format="uri"),
        "displayScope": enum(DISPLAY_SCOPES, "Page(s) where the script should be included"),
        "cache": boolean("Whether the script can be cached by the CDN"),
    }, required=["src"])
    defaults = {"displayScope": "ALL", "cache": False}
    query = """
    mutation CreateScriptTag($input: ScriptTagInput!) {
      scriptTagCreate(input: $input) {
        scriptTag {
          id
          src
          displayScope
          cache
          createdAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "src", "displayScope", "cache")}


class UpdateScriptTagTool(GraphQLTool):
    name = "update_script_tag"
    description = "Update an existing script tag"
    input_schema = schema({
        "id": script_tag_id(),
        "src": string("URL to the remote script", format="uri"),
        "displayScope": enum(DISPLAY_SCOPES, "Page(s) where the script should be included"),
        "cache": boolean("Whether the script can be cached by the CDN"),
    }, required=["id"])
    query = """
    mutation UpdateScriptTag($id: ID!, $input: ScriptTagInput!) {
      scriptTagUpdate(id: $id, input: $input) {
        scriptTag {
          id
          src
          displayScope
          cache
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
        return {"id": args["id"], "input": pick(args, "src", "displayScope", "cache")}


class DeleteScriptTagTool(GraphQLTool):
    name = "delete_script_tag"
    description = "Delete a script tag"
    input_schema = schema({"id": script_tag_id()}, required=["id"])
    query = """
    mutation DeleteScriptTag($id: ID!) {
      scriptTagDelete(id: $id) {
        deletedScriptTagId
        userErrors {
          field
          message
        }
      }
    }
    """
