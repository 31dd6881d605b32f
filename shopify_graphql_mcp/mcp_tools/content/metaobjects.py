"""
Metaobject tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, array, integer, obj, schema, string

FIELDS = """
            fields {
              key
              value
              type
            }
"""


def page_size() -> Dict[str, Any]:
    return integer("Number of definitions to fetch (default: 50)", minimum=1, maximum=250)


def field_values(description: str) -> Dict[str, Any]:
    return array(obj({
        "key": string("Field key"),
        "value": string("Field value"),
    }, required=["key", "value"]), description)


class GetMetaobjectDefinitionsTool(GraphQLTool):
    name = "get_metaobject_definitions"
    description = "Fetch metaobject definitions"
    input_schema = schema({
        "first": page_size(),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetMetaobjectDefinitions($first: Int!, $after: String) {
      metaobjectDefinitions(first: $first, after: $after) {
        edges {
          node {
            id
            name
            type
            description
            fieldDefinitions {
              key
              name
              description
              type {
                name
              }
              required
            }
            displayNameKey
            access {
              admin
              storefront
            }
            capabilities {
              publishable {
                enabled
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


class GetMetaobjectsTool(GraphQLTool):
    name = "get_metaobjects"
    description = "Fetch metaobjects of a specific type"
    input_schema = schema({
        "type": string("Metaobject type"),
        "first": integer("Number of metaobjects to fetch (default: 50)", minimum=1, maximum=250),
        "after": after_arg(),
    }, required=["type"])
    defaults = {"first": 50}
    query = """
    query GetMetaobjects($type: String!, $first: Int!, $after: String) {
      metaobjects(type: $type, first: $first, after: $after) {
        edges {
          node {
            id
            type
            handle
            displayName""" + FIELDS + """            updatedAt
            createdAt
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


class CreateMetaobjectTool(GraphQLTool):
    name = "create_metaobject"
    description = "Create a new metaobject"
    input_schema = schema({
        "type": string("Metaobject type"),
        "handle": string("Unique handle for the metaobject"),
        "fields": field_values("Metaobject fields"),
    }, required=["type", "handle", "fields"])
    query = """
    mutation MetaobjectCreate($input: MetaobjectCreateInput!) {
      metaobjectCreate(input: $input) {
        metaobject {
            id
            type
            handle
            displayName""" + FIELDS + """            updatedAt
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
        return {"input": {"type": args["type"], "handle": args["handle"], "fields": args["fields"]}}


class UpdateMetaobjectTool(GraphQLTool):
    name = "update_metaobject"
    description = "Update an existing metaobject"
    input_schema = schema({
        "id": string("Metaobject ID"),
        "fields": field_values("Metaobject fields to update"),
    }, required=["id", "fields"])
    query = """
    mutation MetaobjectUpdate($id: ID!, $input: MetaobjectUpdateInput!) {
      metaobjectUpdate(id: $id, input: $input) {
        metaobject {
            id
            type
            handle
            displayName""" + FIELDS + """            updatedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": {"fields": args["fields"]}}


class DeleteMetaobjectTool(GraphQLTool):
    name = "delete_metaobject"
    description = "Delete a metaobject"
    input_schema = schema({"id": string("Metaobject ID")}, required=["id"])
    query = """
    mutation MetaobjectDelete($id: ID!) {
      metaobjectDelete(id: $id) {
        deletedId
        userErrors {
          field
          message
        }
      }
    }
    """
