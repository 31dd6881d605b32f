"""
Delivery customization tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, first_arg, schema, string
from ..function_rules import RULE_FIELDS, metafield_inputs, rule_input


class GetDeliveryCustomizationsTool(GraphQLTool):
    name = "get_delivery_customizations"
    description = "Fetch delivery customization rules for the store"
    input_schema = schema({
        "first": first_arg("customizations"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetDeliveryCustomizations($first: Int!, $after: String) {
      deliveryCustomizations(first: $first, after: $after) {
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


class CreateDeliveryCustomizationTool(GraphQLTool):
    name = "create_delivery_customization"
    description = "Create a new delivery customization rule using a Shopify Function"
    input_schema = schema({
        "functionId": string("ID of the delivery customization function to use"),
        "metafields": metafield_inputs(),
    }, required=["functionId"])
    query = """
    mutation DeliveryCustomizationCreate($input: DeliveryCustomizationInput!) {
      deliveryCustomizationCreate(deliveryCustomization: $input) {
        deliveryCustomization {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": rule_input(args, functionId=args["functionId"])}


class UpdateDeliveryCustomizationTool(GraphQLTool):
    name = "update_delivery_customization"
    description = "Update an existing delivery customization rule"
    input_schema = schema({
        "id": string("Delivery Customization ID"),
        "metafields": metafield_inputs("Updated configuration metafields"),
    }, required=["id"])
    query = """
    mutation DeliveryCustomizationUpdate($id: ID!, $input: DeliveryCustomizationInput!) {
      deliveryCustomizationUpdate(id: $id, deliveryCustomization: $input) {
        deliveryCustomization {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": rule_input(args)}


class DeleteDeliveryCustomizationTool(GraphQLTool):
    name = "delete_delivery_customization"
    description = "Delete a delivery customization rule"
    input_schema = schema({"id": string("Delivery Customization ID to delete")}, required=["id"])
    query = """
    mutation DeliveryCustomizationDelete($id: ID!) {
      deliveryCustomizationDelete(id: $id) {
        deletedId
        userErrors {
          field
          message
        }
      }
    }
    """
