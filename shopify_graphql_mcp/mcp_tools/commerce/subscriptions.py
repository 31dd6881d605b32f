"""
Subscription contract tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, enum, first_arg, id_arg, integer, number,
    obj, query_arg, reverse_arg, schema, string,
)

INTERVALS = ["DAY", "WEEK", "MONTH", "YEAR"]


def status_mutation(operation: str, extra_fields: str = "") -> str:
    """Document for the subscriptionContract<Operation> status mutations"""
    return """
    mutation SubscriptionContract%(op)s($subscriptionContractId: ID!) {
      subscriptionContract%(op)s(subscriptionContractId: $subscriptionContractId) {
        contract {
          id
          status
          updatedAt%(extra)s
        }
        userErrors {
          field
          message
        }
      }
    }
    """ % {"op": operation, "extra": extra_fields}


class SubscriptionStatusTool(GraphQLTool):
    """Base for the tools that only move a contract to another status"""

    verb = ""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.input_schema = schema({
            "subscriptionContractId": string(f"Subscription Contract ID to {cls.verb}"),
        }, required=["subscriptionContractId"])


class GetSubscriptionContractsTool(GraphQLTool):
    name = "get_subscription_contracts"
    description = "Fetch subscription contracts from the store"
    input_schema = schema({
        "first": first_arg("contracts"),
        "after": after_arg(),
        "query": query_arg("Filter query for subscription contracts"),
        "sortKey": enum(["CREATED_AT", "UPDATED_AT", "ID"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetSubscriptionContracts($first: Int!, $after: String, $query: String, $sortKey: SubscriptionContractsSortKeys, $reverse: Boolean) {
      subscriptionContracts(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            status
            createdAt
            updatedAt
            currencyCode
            customer {
              id
              firstName
              lastName
              email
            }
            nextBillingDate
            lastPaymentStatus
            lines(first: 10) {
              edges {
                node {
                  id
                  productId
                  variantId
                  title
                  quantity
                  currentPrice {
                    amount
                    currencyCode
                  }
                }
              }
            }
            billingPolicy {
              interval
              intervalCount
            }
            deliveryPolicy {
              interval
              intervalCount
            }
            deliveryPrice {
              amount
              currencyCode
            }
          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
          startCursor
          endCursor
        }
      }
    }
    """


class GetSubscriptionContractTool(GraphQLTool):
    name = "get_subscription_contract"
    description = "Fetch a specific subscription contract by ID"
    input_schema = schema({"id": id_arg("SubscriptionContract")}, required=["id"])
    query = """
    query GetSubscriptionContract($id: ID!) {
      subscriptionContract(id: $id) {
        id
        status
        createdAt
        updatedAt
        currencyCode
        revisionId
        customer {
          id
          firstName
          lastName
          email
        }
        nextBillingDate
        lastBillingAttemptErrorType
        lastPaymentStatus
        note
        customAttributes {
          key
          value
        }
        originOrder {
          id
          name
        }
        lines(first: 50) {
          edges {
            node {
              id
              productId
              variantId
              title
              quantity
              currentPrice {
                amount
                currencyCode
              }
              pricingPolicy {
                basePrice {
                  amount
                  currencyCode
                }
              }
            }
            cursor
          }
        }
        billingPolicy {
          interval
          intervalCount
          minCycles
          maxCycles
        }
        deliveryPolicy {
          interval
          intervalCount
        }
        deliveryMethod {
          ... on SubscriptionDeliveryMethodShipping {
            address {
              address1
              address2
              city
              province
              country
              zip
            }
            shippingOption {
              code
              title
              description
              carrierService {
                id
                name
              }
            }
          }
          ... on SubscriptionDeliveryMethodPickup {
            pickupOption {
              code
              title
              description
              location {
                id
                name
              }
            }
          }
          ... on SubscriptionDeliveryMethodLocalDelivery {
            address {
              address1
              address2
              city
              province
              country
              zip
            }
            localDeliveryOption {
              code
              title
              description
            }
          }
        }
        deliveryPrice {
          amount
          currencyCode
        }
        customerPaymentMethod {
          id
          instrument {
            ... on CustomerCreditCard {
              lastDigits
              brand
              expiryMonth
              expiryYear
            }
            ... on CustomerPaypalBillingAgreement {
              paypalAccountEmail
            }
            ... on CustomerShopPayAgreement {
              lastDigits
              expiryMonth
              expiryYear
            }
          }
        }
        billingAttempts(first: 10) {
          edges {
            node {
              id
              createdAt
              errorCode
              errorMessage
              nextActionUrl
              ready
              order {
                id
                name
              }
            }
          }
        }
        orders(first: 10) {
          edges {
            node {
              id
              name
              createdAt
              displayFinancialStatus
              totalPriceSet {
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


class CreateSubscriptionContractTool(GraphQLTool):
    """Start a draft contract; lines and policies are added to the draft afterwards"""

    name = "create_subscription_contract"
    description = "Create a new subscription contract"
    input_schema = schema({
        "customerId": string("Customer ID to associate with the subscription"),
        "currencyCode": string("Currency code (e.g., 'USD')"),
        "nextBillingDate": string("Next billing date (ISO 8601 format)"),
    }, required=["customerId", "currencyCode", "nextBillingDate"])
    query = """
    mutation SubscriptionContractCreate($input: SubscriptionContractCreateInput!) {
      subscriptionContractCreate(input: $input) {
        draft {
          id
          status
          customer {
            id
            firstName
            lastName
          }
          currencyCode
          nextBillingDate
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "input": {
                "customerId": args["customerId"],
                "currencyCode": args["currencyCode"],
                "nextBillingDate": args["nextBillingDate"],
                "contract": {},
            }
        }


class CreateSubscriptionContractAtomicTool(GraphQLTool):
    name = "create_subscription_contract_atomic"
    description = "Create a complete subscription contract in a single operation"
    input_schema = schema({
        "customerId": string("Customer ID to associate with the subscription"),
        "currencyCode": string("Currency code (e.g., 'USD')"),
        "nextBillingDate": string("Next billing date (ISO 8601 format)"),
        "lineItems": array(obj({
            "productVariantId": string("Product variant ID"),
            "quantity": integer("Quantity", minimum=1),
            "currentPrice": number("Price per unit"),
        }, required=["productVariantId", "quantity", "currentPrice"]), "Line items for the subscription",
            min_items=1),
        "billingInterval": enum(INTERVALS, "Billing interval"),
        "billingIntervalCount": integer("Number of intervals between billings", minimum=1),
        "deliveryInterval": enum(INTERVALS, "Delivery interval"),
        "deliveryIntervalCount": integer("Number of intervals between deliveries", minimum=1),
        "deliveryPrice": number("Delivery price"),
    }, required=["customerId", "currencyCode", "nextBillingDate", "lineItems", "billingInterval",
                 "billingIntervalCount", "deliveryInterval", "deliveryIntervalCount"])
    defaults = {"deliveryPrice": 0}
    query = """
    mutation SubscriptionContractAtomicCreate($input: SubscriptionContractAtomicCreateInput!) {
      subscriptionContractAtomicCreate(input: $input) {
        contract {
          id
          status
          customer {
            id
            firstName
            lastName
          }
          currencyCode
          nextBillingDate
          lines(first: 50) {
            edges {
              node {
                id
                title
                quantity
                currentPrice {
                  amount
                  currencyCode
                }
              }
            }
          }
          billingPolicy {
            interval
            intervalCount
          }
          deliveryPolicy {
            interval
            intervalCount
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
        lines = [
            {
                "line": {
                    "productVariantId": item["productVariantId"],
                    "quantity": item["quantity"],
                    "currentPrice": str(item["currentPrice"]),
                }
            }
            for item in args["lineItems"]
        ]
        return {
            "input": {
                "customerId": args["customerId"],
                "currencyCode": args["currencyCode"],
                "nextBillingDate": args["nextBillingDate"],
                "lines": lines,
                "contract": {
                    "billingPolicy": {
                        "interval": args["billingInterval"],
                        "intervalCount": args["billingIntervalCount"],
                    },
                    "deliveryPolicy": {
                        "interval": args["deliveryInterval"],
                        "intervalCount": args["deliveryIntervalCount"],
                    },
                    "deliveryPrice": str(args["deliveryPrice"]),
                },
            }
        }


class CancelSubscriptionContractTool(SubscriptionStatusTool):
    name = "cancel_subscription_contract"
    description = "Cancel a subscription contract"
    verb = "cancel"
    query = status_mutation("Cancel")


class PauseSubscriptionContractTool(SubscriptionStatusTool):
    name = "pause_subscription_contract"
    description = "Pause a subscription contract"
    verb = "pause"
    query = status_mutation("Pause")


class ActivateSubscriptionContractTool(SubscriptionStatusTool):
    name = "activate_subscription_contract"
    description = "Activate a subscription contract (must be active, paused, or failed status)"
    verb = "activate"
    query = status_mutation("Activate")


class SetSubscriptionContractNextBillingDateTool(GraphQLTool):
    name = "set_subscription_contract_next_billing_date"
    description = "Set the next billing date for a subscription contract"
    input_schema = schema({
        "contractId": string("Subscription Contract ID"),
        "date": string("Next billing date (ISO 8601 format)"),
    }, required=["contractId", "date"])
    query = """
    mutation SubscriptionContractSetNextBillingDate($contractId: ID!, $date: DateTime!) {
      subscriptionContractSetNextBillingDate(contractId: $contractId, date: $date) {
        contract {
          id
          nextBillingDate
          updatedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """


class ExpireSubscriptionContractTool(SubscriptionStatusTool):
    name = "expire_subscription_contract"
    description = "Expire a subscription contract"
    verb = "expire"
    query = status_mutation("Expire")


class FailSubscriptionContractTool(SubscriptionStatusTool):
    name = "fail_subscription_contract"
    description = "Mark a subscription contract as failed"
    verb = "mark as failed"
    query = status_mutation("Fail", "\n          lastPaymentStatus")


class UpdateSubscriptionContractProductTool(GraphQLTool):
    name = "update_subscription_contract_product"
    description = "Change a product or product price in a subscription contract"
    input_schema = schema({
        "subscriptionContractId": string("Subscription Contract ID"),
        "lineId": string("Subscription Line ID to update"),
        "productVariantId": string("New product variant ID (optional)"),
        "currentPrice": number("New current price (optional)"),
    }, required=["subscriptionContractId", "lineId"])
    query = """
    mutation SubscriptionContractProductChange($subscriptionContractId: ID!, $lineId: ID!, $input: SubscriptionContractProductChangeInput!) {
      subscriptionContractProductChange(subscriptionContractId: $subscriptionContractId, lineId: $lineId, input: $input) {
        contract {
          id
          lines(first: 50) {
            edges {
              node {
                id
                productId
                variantId
                title
                quantity
                currentPrice {
                  amount
                  currencyCode
                }
              }
            }
          }
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
        change = {}
        if args.get("productVariantId"):
            change["productVariantId"] = args["productVariantId"]
        if args.get("currentPrice") is not None:
            change["currentPrice"] = str(args["currentPrice"])
        return {
            "subscriptionContractId": args["subscriptionContractId"],
            "lineId": args["lineId"],
            "input": change,
        }
