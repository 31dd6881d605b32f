"""
Abandoned checkout and checkout branding tools
"""

import json
from typing import Any, Dict

from ..base import (
    ClientTool, GraphQLTool, after_arg, enum, first_arg, id_arg, query_arg,
    reverse_arg, schema, string, text_result,
)


class GetCheckoutsTool(GraphQLTool):
    name = "get_checkouts"
    description = "Fetch abandoned or active checkouts from the store"
    input_schema = schema({
        "first": first_arg("checkouts"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'abandoned:true', 'email:customer@example.com')"),
        "sortKey": enum(["CREATED_AT", "UPDATED_AT", "ID"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetCheckouts($first: Int!, $after: String, $query: String, $sortKey: CheckoutSortKeys, $reverse: Boolean) {
      checkouts(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            createdAt
            updatedAt
            completedAt
            email
            phone
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
            lineItems(first: 20) {
              edges {
                node {
                  id
                  title
                  quantity
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
            customer {
              id
              firstName
              lastName
              email
            }
            abandonedCheckoutUrl
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


class GetCheckoutTool(GraphQLTool):
    name = "get_checkout"
    description = "Fetch a specific checkout by ID"
    input_schema = schema({"id": id_arg("Checkout")}, required=["id"])
    query = """
    query GetCheckout($id: ID!) {
      checkout(id: $id) {
        id
        createdAt
        updatedAt
        completedAt
        email
        phone
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
              originalUnitPrice
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
        customer {
          id
          firstName
          lastName
          email
        }
        abandonedCheckoutUrl
        appliedGiftCards {
          id
          amountUsedSet {
            shopMoney {
              amount
              currencyCode
            }
          }
          balanceSet {
            shopMoney {
              amount
              currencyCode
            }
          }
        }
        discountApplications(first: 10) {
          edges {
            node {
              ... on DiscountCodeApplication {
                code
                value {
                  ... on MoneyV2 {
                    amount
                    currencyCode
                  }
                  ... on PricingPercentageValue {
                    percentage
                  }
                }
              }
            }
          }
        }
      }
    }
    """


class GetCheckoutBrandingSettingsTool(GraphQLTool):
    name = "get_checkout_branding_settings"
    description = "Fetch checkout branding settings for the store"
    input_schema = schema()
    query = """
    query GetCheckoutBranding {
      checkoutBranding {
        customizations {
          colors {
            schemes {
              default {
                base {
                  text
                  background
                  accent
                }
              }
            }
          }
          typography {
            size {
              base
            }
            primary {
              name
            }
            secondary {
              name
            }
          }
          control {
            border {
              width
              color
              radius
            }
          }
          favicon {
            image {
              url
            }
          }
        }
      }
    }
    """


class UpdateCheckoutBrandingSettingsTool(GraphQLTool):
    """Upsert the checkout branding customizations that were given"""

    name = "update_checkout_branding_settings"
    description = "Update checkout branding settings"
    input_schema = schema({
        "primaryColor": string("Primary brand color (hex code)"),
        "secondaryColor": string("Secondary brand color (hex code)"),
        "accentColor": string("Accent color for buttons/links (hex code)"),
        "backgroundColor": string("Background color (hex code)"),
        "textColor": string("Text color (hex code)"),
        "fontFamily": string("Font family name"),
        "borderRadius": enum(["NONE", "SMALL", "BASE", "LARGE"], "Border radius for controls"),
        "faviconUrl": string("URL to favicon image"),
    })
    query = """
    mutation CheckoutBrandingUpsert($checkoutBrandingInput: CheckoutBrandingInput!) {
      checkoutBrandingUpsert(checkoutBrandingInput: $checkoutBrandingInput) {
        checkoutBranding {
          customizations {
            colors {
              schemes {
                default {
                  base {
                    text
                    background
                    accent
                  }
                }
              }
            }
            typography {
              primary {
                name
              }
            }
            control {
              border {
                radius
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
        branding: Dict[str, Any] = {}

        # primaryColor and secondaryColor only switch on the color scheme
        colors = ("primaryColor", "secondaryColor", "accentColor", "backgroundColor", "textColor")
        if any(args.get(key) for key in colors):
            base = {}
            if args.get("textColor"):
                base["text"] = args["textColor"]
            if args.get("backgroundColor"):
                base["background"] = args["backgroundColor"]
            if args.get("accentColor"):
                base["accent"] = args["accentColor"]
            branding["colors"] = {"schemes": {"default": {"base": base}}}

        if args.get("fontFamily"):
            branding["typography"] = {"primary": {"name": args["fontFamily"]}}
        if args.get("borderRadius"):
            branding["control"] = {"border": {"radius": args["borderRadius"]}}
        if args.get("faviconUrl"):
            branding["favicon"] = {"image": {"url": args["faviconUrl"]}}

        return {"checkoutBrandingInput": branding}


class CompleteCheckoutTool(ClientTool):
    """
    Checkouts cannot be completed through the Admin API, so this tool
    explains how to recover an abandoned checkout instead.
    """

    name = "complete_checkout"
    description = "Convert an abandoned checkout to a draft order (for recovery)"
    input_schema = schema({"checkoutId": string("Checkout ID to complete")}, required=["checkoutId"])

    async def execute(self, **kwargs) -> Dict[str, Any]:
        invalid = self.check_arguments(kwargs)
        if invalid:
            return invalid

        guidance = {
            "note": "Checkouts cannot be directly 'completed' through the Admin API. "
                    "To recover an abandoned checkout, you should:",
            "steps": [
                "1. Get the checkout details using get_checkout",
                "2. Create a draft order using create_draft_order with the checkout's line items",
                "3. Send a recovery email to the customer with the draft order link",
                "4. Or use Shopify's native abandoned checkout recovery email settings",
            ],
            "checkoutId": kwargs["checkoutId"],
            "recommendation": "Use Shopify's built-in abandoned checkout recovery feature in "
                              "Settings > Notifications > Abandoned checkouts",
        }
        return text_result(json.dumps(guidance, indent=2))
