"""
Customer payment method tools
"""

from ..base import GraphQLTool, after_arg, first_arg, id_arg, schema, string

WALLET_INSTRUMENTS = """
          ... on CustomerPaypalBillingAgreement {
            paypalAccountEmail
            inactive
          }
          ... on CustomerShopPayAgreement {
            name
            expiryMonth
            expiryYear
            lastDigits
            brand
          }
"""


class GetCustomerPaymentMethodsTool(GraphQLTool):
    name = "get_customer_payment_methods"
    description = "Fetch stored payment methods for a customer"
    input_schema = schema({
        "customerId": string("Customer ID"),
        "first": first_arg("methods"),
        "after": after_arg(),
    }, required=["customerId"])
    defaults = {"first": 50}
    query = """
    query GetCustomerPaymentMethods($customerId: ID!, $first: Int!, $after: String) {
      customer(id: $customerId) {
        id
        firstName
        lastName
        email
        paymentMethods(first: $first, after: $after) {
          edges {
            node {
              id
              customer {
                id
                firstName
                lastName
              }
              instrument {
                ... on CustomerCreditCard {
                  brand
                  lastDigits
                  expiryMonth
                  expiryYear
                  name
                  billingAddress {
                    address1
                    city
                    province
                    country
                    zip
                  }
                }""" + WALLET_INSTRUMENTS + """              }
              revokedAt
              revokedReason
            }
            cursor
          }
          pageInfo {
            hasNextPage
            hasPreviousPage
          }
        }
      }
    }
    """


class GetCustomerPaymentMethodTool(GraphQLTool):
    name = "get_customer_payment_method"
    description = "Fetch a specific payment method by ID"
    input_schema = schema({
        "id": id_arg("CustomerPaymentMethod", "Payment Method ID (e.g., 'gid://shopify/CustomerPaymentMethod/123456789')"),
    }, required=["id"])
    query = """
    query GetCustomerPaymentMethod($id: ID!) {
      customerPaymentMethod(id: $id) {
        id
        customer {
          id
          firstName
          lastName
          email
        }
        instrument {
          ... on CustomerCreditCard {
            brand
            lastDigits
            expiryMonth
            expiryYear
            name
            billingAddress {
              address1
              address2
              city
              province
              country
              zip
              phone
            }
          }""" + WALLET_INSTRUMENTS + """        }
        revokedAt
        revokedReason
      }
    }
    """


class RevokeCustomerPaymentMethodTool(GraphQLTool):
    name = "revoke_customer_payment_method"
    description = "Revoke a customer's stored payment method"
    input_schema = schema({
        "id": string("Payment Method ID"),
        "reason": string("Reason for revocation"),
    }, required=["id"])
    query = """
    mutation CustomerPaymentMethodRevoke($id: ID!, $reason: String) {
      customerPaymentMethodRevoke(id: $id, reason: $reason) {
        revokedCustomerPaymentMethodId
        userErrors {
          field
          message
        }
      }
    }
    """
