"""
Return tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, enum, first_arg, id_arg, integer, number,
    obj, pick, schema, string,
)

RETURN_ID = id_arg("Return")

RETURN_REASONS = [
    "UNKNOWN", "REQUESTED_BY_CUSTOMER", "NOT_AS_DESCRIBED", "DEFECTIVE",
    "DELIVERED_LATE", "NOT_DELIVERED", "RETURNED", "EXCHANGE", "OTHER",
]


class GetReturnableFulfillmentsTool(GraphQLTool):
    name = "get_returnable_fulfillments"
    description = "Fetch fulfillments that can be returned for an order"
    input_schema = schema({
        "orderId": id_arg("Order"),
        "first": first_arg("fulfillments"),
        "after": after_arg(),
    }, required=["orderId"])
    defaults = {"first": 50}
    query = """
    query GetReturnableFulfillments($orderId: ID!, $first: Int!, $after: String) {
      returnableFulfillments(orderId: $orderId, first: $first, after: $after) {
        edges {
          node {
            id
            fulfillment {
              id
              status
              createdAt
              trackingInfo(first: 5) {
                number
                company
                url
              }
            }
            returnableFulfillmentLineItems(first: 10) {
              edges {
                node {
                  quantity
                  fulfillmentLineItem {
                    id
                    lineItem {
                      id
                      title
                      variant {
                        id
                        title
                        sku
                        product {
                          id
                          title
                        }
                      }
                    }
                  }
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


class GetReturnsByOrderTool(GraphQLTool):
    name = "get_returns_by_order"
    description = "Fetch returns for a specific order"
    input_schema = schema({"orderId": id_arg("Order")}, required=["orderId"])
    query = """
    query GetOrderReturns($id: ID!) {
      order(id: $id) {
        id
        name
        returns(first: 20) {
          edges {
            node {
              id
              name
              status
              returnLineItems(first: 20) {
                edges {
                  node {
                    id
                    quantity
                  }
                }
              }
            }
          }
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["orderId"]}


class GetReturnTool(GraphQLTool):
    name = "get_return"
    description = "Fetch a specific return by ID"
    input_schema = schema({"id": RETURN_ID}, required=["id"])
    query = """
    query GetReturn($id: ID!) {
      return(id: $id) {
        id
        name
        status
        closedAt
        order {
          id
          name
          customer {
            id
            firstName
            lastName
            email
          }
        }
        returnLineItems(first: 50) {
          edges {
            node {
              id
              quantity
              processedQuantity
              refundableQuantity
              returnReasonNote
            }
          }
        }
        reverseFulfillmentOrders(first: 10) {
          edges {
            node {
              id
              status
            }
          }
        }
        refunds(first: 10) {
          edges {
            node {
              id
              createdAt
              totalRefundedSet {
                shopMoney {
                  amount
                  currencyCode
                }
              }
            }
          }
        }
      }
    }
    """


class CreateReturnTool(GraphQLTool):
    name = "create_return"
    description = "Create a new return from an order"
    input_schema = schema({
        "orderId": id_arg("Order"),
        "returnLineItems": array(obj({
            "fulfillmentLineItemId": string("Fulfillment line item ID"),
            "quantity": integer("Quantity to return", minimum=1),
            "reason": enum(RETURN_REASONS, "Return reason"),
            "note": string("Return note"),
        }, required=["fulfillmentLineItemId", "quantity"]), "Return line items", min_items=1),
        "returnShippingFee": number("Return shipping fee amount", minimum=0),
    }, required=["orderId", "returnLineItems"])
    query = """
    mutation CreateReturn($input: ReturnInput!) {
      returnCreate(returnInput: $input) {
        return {
          id
          name
          status
          order {
            id
            name
          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        line_items = [
            pick(item, "fulfillmentLineItemId", "quantity", returnReason="reason", customerNote="note")
            for item in args["returnLineItems"]
        ]
        return_input = {"orderId": args["orderId"], "returnLineItems": line_items}
        if args.get("returnShippingFee") is not None:
            return_input["returnShippingFee"] = {
                "amount": str(args["returnShippingFee"]),
                "taxAmount": "0",
            }
        return {"input": return_input}


class ApproveReturnRequestTool(GraphQLTool):
    name = "approve_return_request"
    description = "Approve a return request"
    input_schema = schema({"returnId": RETURN_ID}, required=["returnId"])
    query = """
    mutation ApproveReturnRequest($input: ReturnApproveRequestInput!) {
      returnApproveRequest(input: $input) {
        return {
          id
          name
          status
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": {"id": args["returnId"]}}


class DeclineReturnRequestTool(GraphQLTool):
    name = "decline_return_request"
    description = "Decline a return request"
    input_schema = schema({
        "returnId": RETURN_ID,
        "reason": enum(["OUT_OF_POLICY", "ITEM_NOT_RECEIVED", "REFUND_NOT_APPROVED", "OTHER"],
                       "Reason for declining"),
        "note": string("Note explaining why return was declined"),
    }, required=["returnId", "reason"])
    query = """
    mutation DeclineReturnRequest($input: ReturnDeclineRequestInput!) {
      returnDeclineRequest(input: $input) {
        return {
          id
          name
          status
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "note", id="returnId", declineReason="reason")}


class CloseReturnTool(GraphQLTool):
    name = "close_return"
    description = "Close a return"
    input_schema = schema({"returnId": RETURN_ID}, required=["returnId"])
    query = """
    mutation CloseReturn($id: ID!) {
      returnClose(id: $id) {
        return {
          id
          name
          status
          closedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["returnId"]}
