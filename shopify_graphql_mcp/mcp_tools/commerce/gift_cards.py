"""
Gift card tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, enum, first_arg, id_arg, number, pick, query_arg,
    reverse_arg, schema, string,
)


class GetGiftCardsTool(GraphQLTool):
    name = "get_gift_cards"
    description = "Fetch gift cards from the store"
    input_schema = schema({
        "first": first_arg("gift cards"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'status:active', 'code:MYGIFT')"),
        "sortKey": enum(["CREATED_AT", "UPDATED_AT", "ID", "BALANCE"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetGiftCards($first: Int!, $after: String, $query: String, $sortKey: GiftCardSortKeys, $reverse: Boolean) {
      giftCards(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            code
            balanceV2 {
              amount
              currencyCode
            }
            presentmentBalanceV2 {
              amount
              currencyCode
            }
            createdAt
            updatedAt
            expiresAt
            disabledAt
            templateSuffix
            initialValueV2 {
              amount
              currencyCode
            }
            customer {
              id
              firstName
              lastName
              email
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


class GetGiftCardTool(GraphQLTool):
    name = "get_gift_card"
    description = "Fetch a specific gift card by ID"
    input_schema = schema({"id": id_arg("GiftCard", "Gift Card ID (e.g., 'gid://shopify/GiftCard/123456789')")},
                          required=["id"])
    query = """
    query GetGiftCard($id: ID!) {
      giftCard(id: $id) {
        id
        code
        balanceV2 {
          amount
          currencyCode
        }
        presentmentBalanceV2 {
          amount
          currencyCode
        }
        createdAt
        updatedAt
        expiresAt
        disabledAt
        templateSuffix
        initialValueV2 {
          amount
          currencyCode
        }
        customer {
          id
          firstName
          lastName
          email
        }
        transactions(first: 50) {
          edges {
            node {
              id
              createdAt
              amountV2 {
                amount
                currencyCode
              }
              balanceV2 {
                amount
                currencyCode
              }
              event
            }
          }
        }
      }
    }
    """


class CreateGiftCardTool(GraphQLTool):
    name = "create_gift_card"
    description = "Create a new gift card"
    input_schema = schema({
        "initialValue": number("Initial value of the gift card"),
        "code": string("Custom code (optional, auto-generated if not provided)"),
        "note": string("Internal note"),
        "expiresAt": string("Expiration date (ISO 8601 format)"),
        "customerId": string("Associate with a customer"),
    }, required=["initialValue"])
    query = """
    mutation GiftCardCreate($input: GiftCardCreateInput!) {
      giftCardCreate(input: $input) {
        giftCard {
          id
          code
          balanceV2 {
            amount
            currencyCode
          }
          initialValueV2 {
            amount
            currencyCode
          }
          createdAt
          expiresAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        card = {"initialValueV2": {"amount": str(args["initialValue"])}}
        card.update(pick(args, "code", "note", "expiresAt", "customerId"))
        return {"input": card}


class UpdateGiftCardTool(GraphQLTool):
    name = "update_gift_card"
    description = "Update an existing gift card"
    input_schema = schema({
        "id": string("Gift Card ID"),
        "note": string("Internal note"),
        "expiresAt": string("Expiration date (ISO 8601 format)"),
    }, required=["id"])
    query = """
    mutation GiftCardUpdate($id: ID!, $input: GiftCardUpdateInput!) {
      giftCardUpdate(id: $id, input: $input) {
        giftCard {
          id
          note
          expiresAt
          updatedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "note", "expiresAt")}


class DisableGiftCardTool(GraphQLTool):
    name = "disable_gift_card"
    description = "Disable a gift card"
    input_schema = schema({"id": string("Gift Card ID to disable")}, required=["id"])
    query = """
    mutation GiftCardDisable($id: ID!) {
      giftCardDisable(id: $id) {
        giftCard {
          id
          disabledAt
          balanceV2 {
            amount
            currencyCode
          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """


class GetGiftCardTransactionsTool(GraphQLTool):
    name = "get_gift_card_transactions"
    description = "Fetch gift card transactions"
    input_schema = schema({
        "first": first_arg("transactions"),
        "after": after_arg(),
        "giftCardId": string("Filter by gift card ID"),
    })
    defaults = {"first": 50}
    query = """
    query GetGiftCardTransactions($first: Int!, $after: String, $giftCardId: ID) {
      giftCardTransactions(first: $first, after: $after, giftCardId: $giftCardId) {
        edges {
          node {
            id
            createdAt
            amountV2 {
              amount
              currencyCode
            }
            balanceV2 {
              amount
              currencyCode
            }
            event
            giftCard {
              id
              code
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
