"""
Delivery option generator tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, first_arg, schema, string
from ..function_rules import RULE_FIELDS, metafield_inputs, rule_input


class GetDeliveryOptionGeneratorsTool(GraphQLTool):
    name = "get_delivery_option_generators"
    description = "Fetch delivery option generator configurations"
    input_schema = schema({
        "first": first_arg("generators"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetDeliveryOptionGenerators($first: Int!, $after: String) {
      deliveryOptionGenerators(first: $first, after: $after) {
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


class CreateDeliveryOptionGeneratorTool(GraphQLTool):
    name = "create_delivery_option_generator"
    description = "Create a new delivery option generator using a Shopify Function"
    input_schema = schema({
        "functionId": string("ID of the delivery option generator function"),
        "metafields": metafield_inputs("Configuration metafields"),
    }, required=["functionId"])
    query = """
    mutation DeliveryOptionGeneratorCreate($input: DeliveryOptionGeneratorInput!) {
      deliveryOptionGeneratorCreate(input: $input) {
        deliveryOptionGenerator {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": rule_input(args, functionId=args["functionId"])}


class UpdateDeliveryOptionGeneratorTool(GraphQLTool):
    name = "update_delivery_option_generator"
    description = "Update an existing delivery option generator"
    input_schema = schema({
        "id": string("Delivery Option Generator ID"),
        "metafields": metafield_inputs("Updated configuration metafields"),
    }, required=["id"])
    query = """
    mutation DeliveryOptionGeneratorUpdate($id: ID!, $input: DeliveryOptionGeneratorInput!) {
      deliveryOptionGeneratorUpdate(id: $id, input: $input) {
        deliveryOptionGenerator {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": rule_input(args)}


class DeleteDeliveryOptionGeneratorTool(GraphQLTool):
    name = "delete_delivery_option_generator"
    description = "Delete a delivery option generator"
    input_schema = schema({"id": string("Delivery Option Generator ID to delete")}, required=["id"])
    query = """
    mutation DeliveryOptionGeneratorDelete($id: ID!) {
      deliveryOptionGeneratorDelete(id: $id) {
        deletedDeliveryOptionGeneratorId
        userErrors {
          field
          message
        }
      }
    }
    """
