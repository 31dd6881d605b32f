"""
Draft order tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, boolean, first_arg, id_arg, integer, obj,
    pick, query_arg, reverse_arg, schema, string,
)


class GetDraftOrdersTool(GraphQLTool):
    name = "get_draft_orders"
    description = "Fetch draft orders from the store"
    input_schema = schema({
        "first": first_arg("draft orders"),
        "after": after_arg(),
        "query": query_arg(),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "reverse": True}
    query = """
    query GetDraftOrders($first: Int!, $after: String, $query: String, $reverse: Boolean) {
      draftOrders(first: $first, after: $after, query: $query, reverse: $reverse) {
        edges {
          node {
            id
            name
            email
            phone
            createdAt
            updatedAt
            completedAt
            status
            subtotalPriceSet {
              shopMoney {
                amount
                currencyCode
              }
            }
            totalPriceSet {
              shopMoney {
                amount
                currencyCode
              }
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


class GetDraftOrderTool(GraphQLTool):
    name = "get_draft_order"
    description = "Fetch a specific draft order by ID"
    input_schema = schema({"id": id_arg("DraftOrder", "Draft Order ID (e.g., 'gid://shopify/DraftOrder/123456789')")},
                          required=["id"])
    query = """
    query GetDraftOrder($id: ID!) {
      draftOrder(id: $id) {
        id
        name
        email
        phone
        note
        createdAt
        updatedAt
        completedAt
        status
        subtotalPriceSet {
          shopMoney {
            amount
            currencyCode
          }
        }
        totalPriceSet {
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


class CreateDraftOrderTool(GraphQLTool):
    name = "create_draft_order"
    description = "Create a new draft order"
    input_schema = schema({
        "email": string("Customer email", format="email"),
        "phone": string("Customer phone"),
        "lineItems": array(obj({
            "variantId": string("Product variant ID"),
            "quantity": integer("Quantity", minimum=1),
        }, required=["variantId", "quantity"]), "Line items for the draft order", min_items=1),
        "note": string("Draft order note"),
        "tags": array(string(), "Draft order tags"),
    }, required=["lineItems"])
    query = """
    mutation DraftOrderCreate($input: DraftOrderInput!) {
      draftOrderCreate(input: $input) {
        draftOrder {
          id
          name
          email
          phone
          createdAt
          updatedAt
          status
          subtotalPriceSet {
            shopMoney {
              amount
              currencyCode
            }
          }
          totalPriceSet {
            shopMoney {
              amount
              currencyCode
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
        return {"input": pick(args, "lineItems", "email", "phone", "note", "tags")}


class CompleteDraftOrderTool(GraphQLTool):
    name = "complete_draft_order"
    description = "Complete a draft order and convert it to an order"
    input_schema = schema({
        "id": string("Draft Order ID"),
        "paymentPending": boolean("Mark as payment pending"),
    }, required=["id"])
    defaults = {"paymentPending": False}
    query = """
    mutation DraftOrderComplete($id: ID!, $paymentPending: Boolean) {
      draftOrderComplete(id: $id, paymentPending: $paymentPending) {
        draftOrder {
          id
          name
          status
          completedAt
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


class DeleteDraftOrderTool(GraphQLTool):
    name = "delete_draft_order"
    description = "Delete a draft order"
    input_schema = schema({"id": string("Draft Order ID")}, required=["id"])
    query = """
    mutation DraftOrderDelete($input: DraftOrderDeleteInput!) {
      draftOrderDelete(input: $input) {
        deletedId
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": {"id": args["id"]}}
