"""
Order tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, boolean, enum, first_arg, id_arg, query_arg,
    reverse_arg, schema, string,
)

ORDER_SORT_KEYS = ["CREATED_AT", "UPDATED_AT", "PROCESSED_AT", "TOTAL_PRICE", "ID"]

LIST_DEFAULTS = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}


def order_list_schema(query_example: str) -> Dict[str, Any]:
    return schema({
        "first": first_arg("orders"),
        "after": after_arg(),
        "query": query_arg(f"Filter query (e.g., {query_example})"),
        "sortKey": enum(ORDER_SORT_KEYS, "Field to sort by"),
        "reverse": reverse_arg(),
    })


class GetOrdersTool(GraphQLTool):
    """List orders with optional filtering"""

    name = "get_orders"
    description = "Fetch orders from the Shopify store with optional filtering"
    input_schema = order_list_schema("'status:open', 'created_at:>2024-01-01'")
    defaults = LIST_DEFAULTS
    query = """
    query GetOrders($first: Int!, $after: String, $query: String, $sortKey: OrderSortKeys, $reverse: Boolean) {
      orders(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            name
            createdAt
            updatedAt
            displayFinancialStatus
            displayFulfillmentStatus
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
            customer {
              id
              firstName
              lastName
              email
            }
            lineItems(first: 10) {
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
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class GetOrderTool(GraphQLTool):
    """Fetch one order with line items and addresses"""

    name = "get_order"
    description = "Fetch a specific order by ID"
    input_schema = schema({"id": id_arg("Order")}, required=["id"])
    query = """
    query GetOrder($id: ID!) {
      order(id: $id) {
        id
        name
        createdAt
        updatedAt
        displayFinancialStatus
        displayFulfillmentStatus
        email
        phone
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
        totalShippingPriceSet {
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
        customer {
          id
          firstName
          lastName
          email
          phone
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
        shippingAddress {
          address1
          address2
          city
          province
          country
          zip
          phone
        }
        billingAddress {
          address1
          address2
          city
          province
          country
          zip
          phone
        }
      }
    }
    """


class GetAllOrdersTool(GraphQLTool):
    """List orders with fulfillments, refunds and totals (read_all_orders scope)"""

    name = "get_all_orders"
    description = "Fetch all orders with comprehensive data including archived and cancelled orders"
    input_schema = order_list_schema("'status:any', 'created_at:>2024-01-01'")
    defaults = LIST_DEFAULTS
    query = """
    query GetAllOrders($first: Int!, $after: String, $query: String, $sortKey: OrderSortKeys, $reverse: Boolean) {
      orders(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            name
            createdAt
            updatedAt
            processedAt
            cancelledAt
            closedAt
            displayFinancialStatus
            displayFulfillmentStatus
            status
            confirmed
            confirmationNumber
            paymentGatewayNames
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
            totalDiscountsSet {
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
            totalShippingPriceSet {
              shopMoney {
                amount
                currencyCode
              }
            }
            customer {
              id
              firstName
              lastName
              email
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
                  discountedUnitPriceSet {
                    shopMoney {
                      amount
                      currencyCode
                    }
                  }
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
            shippingAddress {
              address1
              city
              province
              country
              zip
            }
            billingAddress {
              address1
              city
              province
              country
              zip
            }
            fulfillments(first: 10) {
              id
              status
              createdAt
              trackingInfo {
                number
                company
              }
            }
            refunds(first: 10) {
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
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class CancelOrderTool(GraphQLTool):
    """Cancel an order, refunding and restocking by default"""

    name = "cancel_order"
    description = "Cancel an order"
    input_schema = schema({
        "id": id_arg("Order"),
        "reason": string("Cancellation reason"),
        "refund": boolean("Whether to refund the order"),
        "restock": boolean("Whether to restock inventory"),
    }, required=["id"])
    defaults = {"refund": True, "restock": True}
    query = """
    mutation OrderCancel($orderId: ID!, $reason: String, $refund: Boolean, $restock: Boolean) {
      orderCancel(
        orderId: $orderId
        reason: $reason
        refund: $refund
        restock: $restock
      ) {
        order {
          id
          name
          displayFinancialStatus
          displayFulfillmentStatus
          cancelledAt
          cancelReason
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        variables = super().build_variables(args)
        variables["orderId"] = variables.pop("id")
        return variables
