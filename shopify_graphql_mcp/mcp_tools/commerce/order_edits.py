"""
Order edit tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, array, id_arg, integer, obj, pick, schema, string

ADDITIONS = array(obj({
    "productVariantId": string("Product variant ID"),
    "quantity": integer("Quantity to add", minimum=1),
}, required=["productVariantId", "quantity"]), "Items to add")

REMOVALS = array(obj({
    "lineItemId": string("Line item ID to remove"),
    "quantity": integer("Quantity to remove", minimum=1),
}, required=["lineItemId", "quantity"]), "Items to remove")

EDITS = array(obj({
    "lineItemId": string("Line item ID to edit"),
    "quantity": integer("New quantity"),
    "price": string("New price"),
}, required=["lineItemId"]), "Items to edit")


def edit_input(args: Dict[str, Any]) -> Dict[str, Any]:
    """OrderEditInput from the non-empty change lists"""
    return {key: args[key] for key in ("additions", "removals", "edits") if args.get(key)}


class GetOrderEditTool(GraphQLTool):
    name = "get_order_edit"
    description = "Fetch an order edit by ID"
    input_schema = schema({"id": id_arg("OrderEdit")}, required=["id"])
    query = """
    query GetOrderEdit($id: ID!) {
      orderEdit(id: $id) {
        id
        createdAt
        updatedAt
        resourceId
        resourceUrl
        additions(first: 50) {
          edges {
            node {
              id
              productVariantId
              quantity
              price {
                amount
                currencyCode
              }
            }
          }
        }
        removals(first: 50) {
          edges {
            node {
              id
              lineItemId
              quantity
            }
          }
        }
        edits(first: 50) {
          edges {
            node {
              id
              lineItemId
              quantity
              price {
                amount
                currencyCode
              }
            }
          }
        }
        adjustments(first: 50) {
          edges {
            node {
              id
              value {
                amount
                currencyCode
              }
              reason
            }
          }
        }
      }
    }
    """


class CalculateOrderEditTool(GraphQLTool):
    name = "calculate_order_edit"
    description = "Calculate changes for an order edit without applying them"
    input_schema = schema({
        "orderId": string("Order ID to edit"),
        "additions": ADDITIONS,
        "removals": REMOVALS,
        "edits": EDITS,
    }, required=["orderId"])
    query = """
    mutation OrderEditCalculate($id: ID!, $input: OrderEditInput!) {
      orderEditCalculate(id: $id, input: $input) {
        calculatedOrder {
          id
          totalPriceSet {
            shopMoney {
              amount
              currencyCode
            }
          }
          subtotalPriceSet {
            shopMoney {
              amount
              currencyCode
            }
          }
          totalTaxSet {
            shopMoney {
              amount
              currencyCode
            }
          }
          lineItems(first: 50) {
            edges {
              node {
                id
                title
                quantity
                originalUnitPriceSet {
                  shopMoney {
                    amount
                    currencyCode
                  }
                }
              }
            }
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
        return {"id": args["orderId"], "input": edit_input(args)}


class ApplyOrderEditTool(GraphQLTool):
    name = "apply_order_edit"
    description = "Apply an order edit to the order"
    input_schema = schema({
        "orderId": string("Order ID to edit"),
        "additions": ADDITIONS,
        "removals": REMOVALS,
        "edits": EDITS,
        "note": string("Note about the edit"),
    }, required=["orderId"])
    query = """
    mutation OrderEditApply($id: ID!, $input: OrderEditInput!) {
      orderEditApply(id: $id, input: $input) {
        order {
          id
          totalPriceSet {
            shopMoney {
              amount
              currencyCode
            }
          }
          lineItems(first: 50) {
            edges {
              node {
                id
                title
                quantity
              }
            }
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
        changes = edit_input(args)
        changes.update(pick(args, "note"))
        return {"id": args["orderId"], "input": changes}


class AddLineItemsToOrderTool(GraphQLTool):
    name = "add_line_items_to_order"
    description = "Add line items to an order"
    input_schema = schema({
        "orderId": string("Order ID"),
        "lineItems": array(obj({
            "productVariantId": string("Product variant ID"),
            "quantity": integer("Quantity", minimum=1),
            "price": string("Custom price (optional)"),
        }, required=["productVariantId", "quantity"]), "Line items to add", min_items=1),
    }, required=["orderId", "lineItems"])
    query = """
    mutation OrderEditAddLineItems($id: ID!, $input: OrderEditAddLineItemsInput!) {
      orderEditAddLineItems(id: $id, input: $input) {
        addedLineItems(first: 50) {
          edges {
            node {
              id
              title
              quantity
              originalUnitPriceSet {
                shopMoney {
                  amount
                  currencyCode
                }
              }
            }
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
        return {"id": args["orderId"], "input": {"lineItems": args["lineItems"]}}


class RemoveLineItemsFromOrderTool(GraphQLTool):
    name = "remove_line_items_from_order"
    description = "Remove line items from an order"
    input_schema = schema({
        "orderId": string("Order ID"),
        "lineItems": array(obj({
            "lineItemId": string("Line item ID"),
            "quantity": integer("Quantity to remove", minimum=1),
        }, required=["lineItemId", "quantity"]), "Line items to remove", min_items=1),
    }, required=["orderId", "lineItems"])
    query = """
    mutation OrderEditRemoveLineItems($id: ID!, $input: OrderEditRemoveLineItemsInput!) {
      orderEditRemoveLineItems(id: $id, input: $input) {
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["orderId"], "input": {"lineItems": args["lineItems"]}}
