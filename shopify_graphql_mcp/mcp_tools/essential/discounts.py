"""
Discount code and discounts allocator tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, boolean, enum, first_arg, integer, obj, pick,
    query_arg, reverse_arg, schema, string,
)

DISCOUNT_ID = "Discount ID (e.g., 'gid://shopify/DiscountCodeNode/123456789')"

# Selection shared by the list and detail queries for the non-basic discount kinds
OTHER_CODE_DISCOUNTS = """
    ... on DiscountCodeBxgy {
      title
      status
      createdAt
      updatedAt
      startsAt
      endsAt
    }
    ... on DiscountCodeFreeShipping {
      title
      status
      createdAt
      updatedAt
      startsAt
      endsAt
    }
"""


class GetDiscountsTool(GraphQLTool):
    name = "get_discounts"
    description = "Fetch discount codes from the store"
    input_schema = schema({
        "first": first_arg("discounts"),
        "after": after_arg(),
        "query": query_arg(),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "reverse": True}
    query = """
    query GetDiscounts($first: Int!, $after: String, $query: String, $reverse: Boolean) {
      codeDiscountNodes(first: $first, after: $after, query: $query, reverse: $reverse) {
        edges {
          node {
            id
            codeDiscount {
              ... on DiscountCodeBasic {
                title
                status
                createdAt
                updatedAt
                startsAt
                endsAt
                customerSelection {
                  ... on DiscountCustomerAll {
                    allCustomers
                  }
                }
                customerGets {
                  items {
                    ... on AllDiscountItems {
                      allItems
                    }
                  }
                  value {
                    ... on DiscountPercentage {
                      percentage
                    }
                    ... on DiscountAmount {
                      amount {
                        amount
                        currencyCode
                      }
                      appliesOnEachItem
                    }
                  }
                }
              }
    """ + OTHER_CODE_DISCOUNTS + """
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


class GetDiscountCodeTool(GraphQLTool):
    name = "get_discount_code"
    description = "Fetch a specific discount code by ID"
    input_schema = schema({"id": string(DISCOUNT_ID)}, required=["id"])
    query = """
    query GetDiscountCode($id: ID!) {
      codeDiscountNode(id: $id) {
        id
        codeDiscount {
          ... on DiscountCodeBasic {
            title
            status
            createdAt
            updatedAt
            startsAt
            endsAt
            usageLimit
            appliesOncePerCustomer
            customerSelection {
              ... on DiscountCustomerAll {
                allCustomers
              }
            }
            customerGets {
              items {
                ... on AllDiscountItems {
                  allItems
                }
              }
              value {
                ... on DiscountPercentage {
                  percentage
                }
                ... on DiscountAmount {
                  amount {
                    amount
                    currencyCode
                  }
                  appliesOnEachItem
                }
              }
            }
          }
    """ + OTHER_CODE_DISCOUNTS + """
        }
      }
    }
    """


class CreateDiscountTool(GraphQLTool):
    """Create a basic percentage or fixed amount code for all customers and items"""

    name = "create_discount"
    description = "Create a basic discount code (percentage or fixed amount)"
    input_schema = schema({
        "title": string("Discount title"),
        "code": string("Discount code (what customers enter)"),
        "discountType": enum(["PERCENTAGE", "FIXED_AMOUNT"], "Type of discount"),
        "value": string("Discount value (e.g., '10' for 10% or $10)"),
        "startsAt": string("Start date (ISO 8601 format)"),
        "endsAt": string("End date (ISO 8601 format)"),
        "minimumRequirement": enum(["NONE", "MINIMUM_PURCHASE_AMOUNT", "MINIMUM_QUANTITY_ITEMS"],
                                   "Minimum purchase requirement"),
        "minimumSubtotal": string("Minimum purchase amount (if applicable)"),
        "appliesOncePerCustomer": boolean("Limit to one use per customer"),
        "usageLimit": integer("Total number of times this code can be used"),
    }, required=["title", "code", "discountType", "value", "startsAt"])
    defaults = {"minimumRequirement": "NONE", "appliesOncePerCustomer": False}
    query = """
    mutation DiscountCodeBasicCreate($input: DiscountCodeBasicInput!) {
      discountCodeBasicCreate(basicCodeDiscount: $input) {
        codeDiscountNode {
          id
          codeDiscount {
            ... on DiscountCodeBasic {
              title
              status
              createdAt
              startsAt
              endsAt
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
        if args["discountType"] == "PERCENTAGE":
            value = {"percentage": float(args["value"])}
        else:
            value = {"discountAmount": {"amount": args["value"], "appliesOnEachItem": False}}

        discount = {
            "title": args["title"],
            "code": args["code"],
            "startsAt": args["startsAt"],
            "customerSelection": {"all": True},
            "customerGets": {"items": {"all": True}, "value": value},
            "appliesOncePerCustomer": args["appliesOncePerCustomer"],
        }
        discount.update(pick(args, "endsAt"))
        if args.get("usageLimit"):
            discount["usageLimit"] = args["usageLimit"]
        if args["minimumRequirement"] == "MINIMUM_PURCHASE_AMOUNT" and args.get("minimumSubtotal"):
            discount["minimumRequirement"] = {
                "subtotal": {"greaterThanOrEqualToSubtotal": args["minimumSubtotal"]}
            }
        return {"input": discount}


class UpdateDiscountCodeTool(GraphQLTool):
    name = "update_discount_code"
    description = "Update an existing discount code"
    input_schema = schema({
        "id": string(DISCOUNT_ID),
        "title": string("Discount title"),
        "startsAt": string("Start date (ISO 8601 format)"),
        "endsAt": string("End date (ISO 8601 format)"),
        "status": enum(["ACTIVE", "EXPIRED"], "Discount status"),
        "usageLimit": integer("Total number of times this code can be used"),
        "appliesOncePerCustomer": boolean("Limit to one use per customer"),
    }, required=["id"])
    query = """
    mutation DiscountCodeBasicUpdate($id: ID!, $input: DiscountCodeBasicInput!) {
      discountCodeBasicUpdate(id: $id, basicCodeDiscount: $input) {
        codeDiscountNode {
          id
          codeDiscount {
            ... on DiscountCodeBasic {
              title
              status
              createdAt
              updatedAt
              startsAt
              endsAt
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
        changes = pick(args, "title", "startsAt", "endsAt", "status", "usageLimit", "appliesOncePerCustomer")
        return {"id": args["id"], "input": changes}


class DeleteDiscountTool(GraphQLTool):
    name = "delete_discount"
    description = "Delete a discount code"
    input_schema = schema({"id": string(DISCOUNT_ID)}, required=["id"])
    query = """
    mutation DiscountCodeDelete($id: ID!) {
      discountCodeDelete(id: $id) {
        deletedCodeDiscountId
        userErrors {
          field
          message
        }
      }
    }
    """


class GetDiscountsAllocatorFunctionsTool(GraphQLTool):
    name = "get_discounts_allocator_functions"
    description = "Fetch discounts allocator functions for the store"
    input_schema = schema({
        "first": first_arg("functions"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetDiscountsAllocatorFunctions($first: Int!, $after: String) {
      discountsAllocators(first: $first, after: $after) {
        edges {
          node {
            id
            functionId
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


class CreateDiscountsAllocatorFunctionTool(GraphQLTool):
    name = "create_discounts_allocator_function"
    description = "Create a discounts allocator function using a Shopify Function"
    input_schema = schema({
        "functionId": string("ID of the discounts allocator function to use"),
        "metafields": array(obj({
            "namespace": string("Metafield namespace"),
            "key": string("Metafield key"),
            "value": string("Metafield value"),
            "type": string("Metafield type"),
        }, required=["namespace", "key", "value", "type"]), "Configuration metafields for the function"),
    }, required=["functionId"])
    query = """
    mutation DiscountsAllocatorCreate($input: DiscountsAllocatorInput!) {
      discountsAllocatorCreate(input: $input) {
        discountsAllocator {
          id
          functionId
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
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        allocator = {"functionId": args["functionId"]}
        if args.get("metafields"):
            allocator["metafields"] = args["metafields"]
        return {"input": allocator}
