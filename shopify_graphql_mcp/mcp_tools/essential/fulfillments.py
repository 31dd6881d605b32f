"""
Fulfillment order and fulfillment service tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, boolean, enum, first_arg, id_arg, integer,
    obj, pick, schema, string,
)

ASSIGNMENT_STATUSES = ["FULFILLMENT_REQUESTED", "CANCELLATION_REQUESTED", "ACCEPTED", "FULFILLED", "CLOSED"]


class GetAssignedFulfillmentOrdersTool(GraphQLTool):
    name = "get_assigned_fulfillment_orders"
    description = "Fetch fulfillment orders assigned to a fulfillment service"
    input_schema = schema({
        "first": first_arg("fulfillment orders"),
        "after": after_arg(),
        "assignmentStatus": enum(ASSIGNMENT_STATUSES, "Filter by assignment status"),
        "locationIds": array(string(), "Filter by location IDs"),
    })
    defaults = {"first": 50}
    query = """
    query GetAssignedFulfillmentOrders($first: Int!, $after: String, $assignmentStatus: FulfillmentOrderAssignmentStatus, $locationIds: [ID!]) {
      assignedFulfillmentOrders(first: $first, after: $after, assignmentStatus: $assignmentStatus, locationIds: $locationIds) {
        edges {
          node {
            id
            status
            assignedLocation {
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
            destination {
              id
              address1
              city
              province
              country
              zip
            }
            lineItems(first: 50) {
              edges {
                node {
                  id
                  remainingQuantity
                  lineItem {
                    id
                    title
                    quantity
                  }
                }
              }
            }
            order {
              id
              name
              createdAt
            }
            requestStatus
            fulfillmentHolds {
              reason
              reasonNotes
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


class GetFulfillmentOrderTool(GraphQLTool):
    name = "get_fulfillment_order"
    description = "Fetch a specific fulfillment order by ID"
    input_schema = schema({"id": id_arg("FulfillmentOrder")}, required=["id"])
    query = """
    query GetFulfillmentOrder($id: ID!) {
      fulfillmentOrder(id: $id) {
        id
        status
        requestStatus
        assignedLocation {
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
        destination {
          id
          address1
          city
          province
          country
          zip
        }
        lineItems(first: 50) {
          edges {
            node {
              id
              remainingQuantity
              lineItem {
                id
                title
                quantity
                variant {
                  id
                  title
                  sku
                }
              }
            }
          }
        }
        order {
          id
          name
          createdAt
          customer {
            id
            firstName
            lastName
            email
          }
        }
        merchantRequests(first: 10) {
          edges {
            node {
              id
              kind
              message
              requestOptions
            }
          }
        }
        fulfillmentHolds {
          reason
          reasonNotes
        }
      }
    }
    """


class AcceptFulfillmentRequestTool(GraphQLTool):
    name = "accept_fulfillment_request"
    description = "Accept a fulfillment request for a fulfillment order"
    input_schema = schema({
        "fulfillmentOrderId": string("Fulfillment Order ID"),
        "message": string("Optional message"),
    }, required=["fulfillmentOrderId"])
    query = """
    mutation FulfillmentOrderAcceptFulfillmentRequest($id: ID!, $message: String) {
      fulfillmentOrderAcceptFulfillmentRequest(id: $id, message: $message) {
        fulfillmentOrder {
          id
          status
          requestStatus
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return pick(args, "message", id="fulfillmentOrderId")


class RejectFulfillmentRequestTool(AcceptFulfillmentRequestTool):
    name = "reject_fulfillment_request"
    description = "Reject a fulfillment request for a fulfillment order"
    input_schema = schema({
        "fulfillmentOrderId": string("Fulfillment Order ID"),
        "message": string("Reason for rejection"),
    }, required=["fulfillmentOrderId"])
    query = """
    mutation FulfillmentOrderRejectFulfillmentRequest($id: ID!, $message: String) {
      fulfillmentOrderRejectFulfillmentRequest(id: $id, message: $message) {
        fulfillmentOrder {
          id
          status
          requestStatus
        }
        userErrors {
          field
          message
        }
      }
    }
    """


class GetFulfillmentServicesTool(GraphQLTool):
    name = "get_fulfillment_services"
    description = "Fetch custom fulfillment services configured in the store"
    input_schema = schema({
        "first": first_arg("fulfillment services"),
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
            serviceName
            callbackUrl
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
            inventoryManagement
            trackingSupport
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


class CreateFulfillmentTool(GraphQLTool):
    """Fulfill a fulfillment order, optionally limited to some of its line items"""

    name = "create_fulfillment"
    description = "Create a fulfillment for a fulfillment order"
    input_schema = schema({
        "fulfillmentOrderId": string("Fulfillment Order ID"),
        "trackingInfo": obj({
            "number": string("Tracking number"),
            "url": string("Tracking URL"),
            "company": string("Shipping carrier company"),
        }, description="Tracking information"),
        "notifyCustomer": boolean("Notify customer of shipment"),
        "lineItems": array(obj({
            "id": string("Fulfillment order line item ID"),
            "quantity": integer("Quantity to fulfill", minimum=1),
        }, required=["id", "quantity"]), "Specific line items to fulfill (optional - fulfills all if not provided)"),
    }, required=["fulfillmentOrderId"])
    defaults = {"notifyCustomer": True}
    query = """
    mutation FulfillmentCreateV2($fulfillmentOrderId: ID!, $trackingInfo: FulfillmentTrackingInput, $notifyCustomer: Boolean, $lineItemsByFulfillmentOrder: [FulfillmentOrderLineItemsInput!]) {
      fulfillmentCreateV2(
        fulfillmentOrderId: $fulfillmentOrderId
        trackingInfo: $trackingInfo
        notifyCustomer: $notifyCustomer
        lineItemsByFulfillmentOrder: $lineItemsByFulfillmentOrder
      ) {
        fulfillment {
          id
          status
          trackingInfo {
            number
            url
            company
          }
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
        variables = pick(args, "fulfillmentOrderId", "trackingInfo", "notifyCustomer")
        if args.get("lineItems"):
            variables["lineItemsByFulfillmentOrder"] = args["lineItems"]
        return variables
