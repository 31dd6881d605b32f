"""
Cart and checkout validation tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, first_arg, schema, string
from ..function_rules import RULE_FIELDS, metafield_inputs, rule_input


class GetValidationsTool(GraphQLTool):
    name = "get_validations"
    description = "Fetch cart and checkout validation rules"
    input_schema = schema({
        "first": first_arg("validations"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetValidations($first: Int!, $after: String) {
      validations(first: $first, after: $after) {
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


class CreateValidationTool(GraphQLTool):
    name = "create_validation"
    description = "Create a new cart/checkout validation rule using a Shopify Function"
    input_schema = schema({
        "functionId": string("ID of the validation function to use"),
        "metafields": metafield_inputs(),
    }, required=["functionId"])
    query = """
    mutation ValidationCreate($input: ValidationInput!) {
      validationCreate(input: $input) {
        validation {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": rule_input(args, functionId=args["functionId"])}


class UpdateValidationTool(GraphQLTool):
    name = "update_validation"
    description = "Update an existing validation rule"
    input_schema = schema({
        "id": string("Validation ID"),
        "metafields": metafield_inputs("Updated configuration metafields"),
    }, required=["id"])
    query = """
    mutation ValidationUpdate($id: ID!, $input: ValidationInput!) {
      validationUpdate(id: $id, input: $input) {
        validation {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": rule_input(args)}


class DeleteValidationTool(GraphQLTool):
    name = "delete_validation"
    description = "Delete a validation rule"
    input_schema = schema({"id": string("Validation ID to delete")}, required=["id"])
    query = """
    mutation ValidationDelete($id: ID!) {
      validationDelete(id: $id) {
        deletedValidationId
        userErrors {
          field
          message
        }
      }
    }
    """
