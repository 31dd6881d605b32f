"""
Custom fulfillment service tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, boolean, first_arg, pick, schema, string


class GetCustomFulfillmentServicesTool(GraphQLTool):
    name = "get_custom_fulfillment_services"
    description = "Fetch custom fulfillment services for the store"
    input_schema = schema({
        "first": first_arg("services"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetFulfillmentServices($first: Int!, $after: String) {
      fulfillmentServices(first: $first, after: $after) {
        edges {
          node {
            id
            handle
            name
            email
            serviceName
            location {
              id
              name
              address {
                address1
                city
                province
                country
                zip
              }
            }
            productBased
            inventoryManagement
            trackingSupport
            fulfillmentOrdersOptIn
            permitsSkuSharing
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


class CreateCustomFulfillmentServiceTool(GraphQLTool):
    name = "create_custom_fulfillment_service"
    description = "Create a new custom fulfillment service"
    input_schema = schema({
        "name": string("Service name"),
        "handle": string("Unique handle for the service"),
        "email": string("Service email address", format="email"),
        "locationId": string("Location ID for the service"),
        "productBased": boolean("Whether the service is product-based (default: true)"),
        "inventoryManagement": boolean("Whether the service manages inventory (default: false)"),
        "trackingSupport": boolean("Whether the service supports tracking (default: true)"),
        "fulfillmentOrdersOptIn": boolean("Whether to opt-in to fulfillment orders (default: true)"),
    }, required=["name", "handle", "email", "locationId"])
    defaults = {
        "productBased": True,
        "inventoryManagement": False,
        "trackingSupport": True,
        "fulfillmentOrdersOptIn": True,
    }
    query = """
    mutation FulfillmentServiceCreate($input: FulfillmentServiceInput!) {
      fulfillmentServiceCreate(input: $input) {
        fulfillmentService {
          id
          handle
          name
          email
          serviceName
          location {
            id
            name
          }
          productBased
          inventoryManagement
          trackingSupport
          fulfillmentOrdersOptIn
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "name", "handle", "email", "locationId", "productBased",
                              "inventoryManagement", "trackingSupport", "fulfillmentOrdersOptIn")}


class UpdateCustomFulfillmentServiceTool(GraphQLTool):
    name = "update_custom_fulfillment_service"
    description = "Update an existing custom fulfillment service"
    input_schema = schema({
        "id": string("Fulfillment Service ID"),
        "name": string("Service name"),
        "email": string("Service email address", format="email"),
        "trackingSupport": boolean("Whether the service supports tracking"),
        "fulfillmentOrdersOptIn": boolean("Whether to opt-in to fulfillment orders"),
    }, required=["id"])
    query = """
    mutation FulfillmentServiceUpdate($id: ID!, $input: FulfillmentServiceInput!) {
      fulfillmentServiceUpdate(id: $id, input: $input) {
        fulfillmentService {
          id
          handle
          name
          email
          trackingSupport
          fulfillmentOrdersOptIn
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        changes = pick(args, "name", "email", "trackingSupport", "fulfillmentOrdersOptIn")
        return {"id": args["id"], "input": changes}


class DeleteCustomFulfillmentServiceTool(GraphQLTool):
    name = "delete_custom_fulfillment_service"
    description = "Delete a custom fulfillment service"
    input_schema = schema({"id": string("Fulfillment Service ID to delete")}, required=["id"])
    query = """
    mutation FulfillmentServiceDelete($id: ID!) {
      fulfillmentServiceDelete(id: $id) {
        deletedId
        userErrors {
          field
          message
        }
      }
    }
    """
