"""
Payment customization (Shopify Functions) tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, boolean, first_arg, id_arg, obj, pick,
    query_arg, reverse_arg, schema, string,
)

METAFIELDS = array(obj({
    "namespace": string("Metafield namespace"),
    "key": string("Metafield key"),
    "value": string("Metafield value"),
    "type": string("Metafield type (e.g., 'json', 'string')"),
}, required=["namespace", "key", "value", "type"]), "Metafields to associate with the customization")

CUSTOMIZATION_FIELDS = """
          id
          title
          enabled
          functionId
          shopifyFunction {
            id
            title
          }
          metafields(first: 10) {
            edges {
              node {
                id
                namespace
                key
                value
              }
            }
          }
"""


class GetPaymentCustomizationsTool(GraphQLTool):
    name = "get_payment_customizations"
    description = "Fetch payment customizations from the store"
    input_schema = schema({
        "first": first_arg("payment customizations"),
        "after": after_arg(),
        "query": query_arg("Filter query for payment customizations"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "reverse": False}
    query = """
    query GetPaymentCustomizations($first: Int!, $after: String, $query: String, $reverse: Boolean) {
      paymentCustomizations(first: $first, after: $after, query: $query, reverse: $reverse) {
        edges {
          node {
            id
            title
            enabled
            functionId
            shopifyFunction {
              id
              title
              apiType
            }
            metafields(first: 10) {
              edges {
                node {
                  id
                  namespace
                  key
                  value
                  type
                }
              }
            }
          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
          startCursor
          endCursor
        }
      }
    }
    """


class GetPaymentCustomizationTool(GraphQLTool):
    name = "get_payment_customization"
    description = "Fetch a specific payment customization by ID"
    input_schema = schema({"id": id_arg("PaymentCustomization")}, required=["id"])
    query = """
    query GetPaymentCustomization($id: ID!) {
      paymentCustomization(id: $id) {
        id
        title
        enabled
        functionId
        shopifyFunction {
          id
          title
          apiType
          app {
            id
            title
          }
        }
        metafields(first: 50) {
          edges {
            node {
              id
              namespace
              key
              value
              type
              description
            }
          }
        }
        errorHistory {
          errorsFirstOccurredAt
          hasBeenSharedSinceLastError
          firstOccurredAt
        }
      }
    }
    """


class CreatePaymentCustomizationTool(GraphQLTool):
    name = "create_payment_customization"
    description = "Create a new payment customization"
    input_schema = schema({
        "title": string("Title of the payment customization"),
        "functionHandle": string("Function handle scoped to your app ID"),
        "enabled": boolean("Whether the customization is enabled (default: true)"),
        "metafields": METAFIELDS,
    }, required=["title", "functionHandle"])
    defaults = {"enabled": True}
    query = """
    mutation PaymentCustomizationCreate($paymentCustomization: PaymentCustomizationInput!) {
      paymentCustomizationCreate(paymentCustomization: $paymentCustomization) {
        paymentCustomization {""" + CUSTOMIZATION_FIELDS + """        }
        userErrors {
          field
          message
          code
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"paymentCustomization": pick(args, "title", "functionHandle", "enabled", "metafields")}


class UpdatePaymentCustomizationTool(GraphQLTool):
    name = "update_payment_customization"
    description = "Update an existing payment customization"
    input_schema = schema({
        "id": string("Payment Customization ID"),
        "title": string("New title for the customization"),
        "enabled": boolean("Enable or disable the customization"),
        "functionHandle": string("Function handle scoped to your app ID"),
        "metafields": METAFIELDS,
    }, required=["id"])
    query = """
    mutation PaymentCustomizationUpdate($id: ID!, $paymentCustomization: PaymentCustomizationInput!) {
      paymentCustomizationUpdate(id: $id, paymentCustomization: $paymentCustomization) {
        paymentCustomization {""" + CUSTOMIZATION_FIELDS + """        }
        userErrors {
          field
          message
          code
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": args["id"],
            "paymentCustomization": pick(args, "title", "enabled", "functionHandle", "metafields"),
        }


class DeletePaymentCustomizationTool(GraphQLTool):
    name = "delete_payment_customization"
    description = "Delete a payment customization"
    input_schema = schema({"id": string("Payment Customization ID to delete")}, required=["id"])
    query = """
    mutation PaymentCustomizationDelete($id: ID!) {
      paymentCustomizationDelete(id: $id) {
        deletedId
        userErrors {
          field
          message
          code
        }
      }
    }
    """


class SetPaymentCustomizationActivationTool(GraphQLTool):
    name = "set_payment_customization_activation"
    description = "Activate or deactivate multiple payment customizations"
    input_schema = schema({
        "ids": array(string(), "Array of Payment Customization IDs", min_items=1),
        "enabled": boolean("Set to true to activate, false to deactivate"),
    }, required=["ids", "enabled"])
    query = """
    mutation PaymentCustomizationActivation($ids: [ID!]!, $enabled: Boolean!) {
      paymentCustomizationActivation(ids: $ids, enabled: $enabled) {
        ids
        userErrors {
          field
          message
          code
        }
      }
    }
    """
