"""
Cart transform tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, boolean, first_arg, schema, string
from ..function_rules import RULE_FIELDS, metafield_inputs, rule_input


class GetCartTransformsTool(GraphQLTool):
    name = "get_cart_transforms"
    description = "Fetch cart transforms configured for the store"
    input_schema = schema({
        "first": first_arg("transforms"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetCartTransforms($first: Int!, $after: String) {
      cartTransforms(first: $first, after: $after) {
        edges {
          node {""" + RULE_FIELDS + """          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class GetAllCartTransformsTool(GraphQLTool):
    name = "get_all_cart_transforms"
    description = "Fetch all cart transforms including inactive ones"
    input_schema = schema({
        "first": first_arg("transforms"),
        "after": after_arg(),
        "includeInactive": boolean("Include inactive transforms"),
    })
    defaults = {"first": 50, "includeInactive": True}
    query = """
    query GetAllCartTransforms($first: Int!, $after: String, $includeInactive: Boolean) {
      allCartTransforms(first: $first, after: $after, includeInactive: $includeInactive) {
        edges {
          node {
            status""" + RULE_FIELDS + """          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class CreateCartTransformTool(GraphQLTool):
    name = "create_cart_transform"
    description = "Create a new cart transform using a Shopify Function"
    input_schema = schema({
        "functionId": string("ID of the cart transform function to use"),
        "metafields": metafield_inputs(),
    }, required=["functionId"])
    query = """
    mutation CartTransformCreate($input: CartTransformInput!) {
      cartTransformCreate(input: $input) {
        cartTransform {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": rule_input(args, functionId=args["functionId"])}


class UpdateCartTransformTool(GraphQLTool):
    name = "update_cart_transform"
    description = "Update an existing cart transform"
    input_schema = schema({
        "id": string("Cart Transform ID"),
        "metafields": metafield_inputs("Updated configuration metafields"),
    }, required=["id"])
    query = """
    mutation CartTransformUpdate($id: ID!, $input: CartTransformInput!) {
      cartTransformUpdate(id: $id, input: $input) {
        cartTransform {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": rule_input(args)}


class DeleteCartTransformTool(GraphQLTool):
    name = "delete_cart_transform"
    description = "Delete a cart transform"
    input_schema = schema({"id": string("Cart Transform ID to delete")}, required=["id"])
    query = """
    mutation CartTransformDelete($id: ID!) {
      cartTransformDelete(id: $id) {
        deletedCartTransformId
        userErrors {
          field
          message
        }
      }
    }
    """
