"""
Price rule tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, boolean, enum, first_arg, id_arg, integer, number,
    pick, query_arg, reverse_arg, schema, string,
)


def price_rule_fields(entitlements: int) -> str:
    """Selection of a price rule with ``entitlements`` items and discount codes"""
    return """
        id
        title
        status
        createdAt
        updatedAt
        startsAt
        endsAt
        target
        allocationMethod
        valueType
        value
        oncePerCustomer
        usageLimit
        customerSelection
        prerequisiteSubtotalRange {
          greaterThanOrEqualTo
          lessThanOrEqualTo
        }
        prerequisiteQuantityRange {
          greaterThanOrEqualTo
          lessThanOrEqualTo
        }
        prerequisiteToEntitlementQuantityRatio {
          prerequisiteQuantity
          entitledQuantity
        }
        itemEntitlements(first: %(count)d) {
          edges {
            node {
              ... on Collection {
                id
                title
              }
              ... on Product {
                id
                title
              }
            }
          }
        }
        customerGets {
          items {
            ... on AllDiscountItems {
              allItems
            }
          }
          value {
            ... on DiscountAmount {
              amount
              appliesOnEachItem
            }
            ... on DiscountPercentage {
              percentage
            }
          }
        }
        discountCodes(first: %(count)d) {
          edges {
            node {
              id
              code
              usageCount
            }
          }
        }
""" % {"count": entitlements}


class GetPriceRulesTool(GraphQLTool):
    name = "get_price_rules"
    description = "Fetch price rules for automatic discounts"
    input_schema = schema({
        "first": first_arg("price rules"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'status:active', 'title:Summer Sale')"),
        "sortKey": enum(["CREATED_AT", "STARTS_AT", "ENDS_AT", "TITLE", "ID"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetPriceRules($first: Int!, $after: String, $query: String, $sortKey: PriceRuleSortKeys, $reverse: Boolean) {
      priceRules(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {""" + price_rule_fields(50) + """          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class GetPriceRuleTool(GraphQLTool):
    name = "get_price_rule"
    description = "Fetch a specific price rule by ID"
    input_schema = schema({"id": id_arg("PriceRule", "Price Rule ID (e.g., 'gid://shopify/PriceRule/123456789')")},
                          required=["id"])
    query = """
    query GetPriceRule($id: ID!) {
      priceRule(id: $id) {""" + price_rule_fields(100) + """      }
    }
    """


class CreatePriceRuleTool(GraphQLTool):
    name = "create_price_rule"
    description = "Create a new price rule for automatic discounts"
    input_schema = schema({
        "title": string("Price rule title"),
        "target": enum(["LINE_ITEM", "SHIPPING_LINE"], "What the discount applies to"),
        "allocationMethod": enum(["ACROSS", "EACH"], "How to allocate the discount"),
        "valueType": enum(["PERCENTAGE", "FIXED_AMOUNT"], "Type of discount value"),
        "value": number("Discount value (percentage or fixed amount)"),
        "startsAt": string("Start date/time (ISO format)"),
        "endsAt": string("End date/time (ISO format)"),
        "oncePerCustomer": boolean("Limit to one use per customer"),
        "usageLimit": integer("Total usage limit"),
        "prerequisiteSubtotalMin": number("Minimum subtotal required"),
    }, required=["title", "target", "allocationMethod", "valueType", "value"])
    query = """
    mutation PriceRuleCreate($input: PriceRuleInput!) {
      priceRuleCreate(input: $input) {
        priceRule {
          id
          title
          status
          createdAt
          startsAt
          endsAt
          target
          allocationMethod
          valueType
          value
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        rule = pick(args, "title", "target", "allocationMethod", "valueType", "value",
                    "startsAt", "endsAt", "oncePerCustomer")
        if args.get("usageLimit"):
            rule["usageLimit"] = args["usageLimit"]
        if args.get("prerequisiteSubtotalMin"):
            rule["prerequisiteSubtotalRange"] = {"greaterThanOrEqualTo": args["prerequisiteSubtotalMin"]}
        return {"input": rule}


class UpdatePriceRuleTool(GraphQLTool):
    name = "update_price_rule"
    description = "Update an existing price rule"
    input_schema = schema({
        "id": string("Price Rule ID"),
        "title": string("Price rule title"),
        "startsAt": string("Start date/time (ISO format)"),
        "endsAt": string("End date/time (ISO format)"),
        "oncePerCustomer": boolean("Limit to one use per customer"),
        "usageLimit": integer("Total usage limit"),
    }, required=["id"])
    query = """
    mutation PriceRuleUpdate($id: ID!, $input: PriceRuleInput!) {
      priceRuleUpdate(id: $id, input: $input) {
        priceRule {
          id
          title
          status
          updatedAt
          startsAt
          endsAt
          oncePerCustomer
          usageLimit
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        changes = pick(args, "title", "startsAt", "endsAt", "oncePerCustomer", "usageLimit")
        return {"id": args["id"], "input": changes}


class DeletePriceRuleTool(GraphQLTool):
    name = "delete_price_rule"
    description = "Delete a price rule"
    input_schema = schema({"id": string("Price Rule ID to delete")}, required=["id"])
    query = """
    mutation PriceRuleDelete($id: ID!) {
      priceRuleDelete(id: $id) {
        deletedPriceRuleId
        userErrors {
          field
          message
        }
      }
    }
    """
