"""
Shopify Payments account, payout, dispute and bank account tools
"""

from ..base import (
    GraphQLTool, after_arg, boolean, enum, first_arg, query_arg, reverse_arg,
    schema, string,
)

PAYOUT_SUMMARY_FIELDS = [
    "adjustmentsFee", "adjustmentsGross", "advanceFees", "advanceGross",
    "chargesFee", "chargesGross", "refundsFee", "refundsFeeGross",
    "reservedFundsFee", "reservedFundsGross", "retriedPayoutsFee",
    "retriedPayoutsGross", "usdcRebateCreditAmount",
]

PAYOUT_SUMMARY = "\n".join(f"{field} {{ amount currencyCode }}" for field in PAYOUT_SUMMARY_FIELDS)

PAGE_INFO = """
        pageInfo {
          hasNextPage
          hasPreviousPage
          startCursor
          endCursor
        }
"""


class GetShopifyPaymentsAccountTool(GraphQLTool):
    name = "get_shopify_payments_account"
    description = "Fetch Shopify Payments account information including balances and configuration"
    input_schema = schema()
    query = """
    query GetShopifyPaymentsAccount {
      shopifyPaymentsAccount {
        id
        activated
        onboardable
        accountOpenerName
        country
        defaultCurrency
        balance {
          amount
          currencyCode
        }
        payoutSchedule {
          interval
          monthlyAnchor
          weeklyAnchor
        }
        chargeStatementDescriptors {
          default
          prefix
        }
        payoutStatementDescriptor
        bankAccounts(first: 10) {
          edges {
            node {
              id
              accountNumberLastDigits
              bankName
              country
              currency
              status
              createdAt
            }
          }
        }
      }
    }
    """


class GetShopifyPaymentsBalanceTransactionsTool(GraphQLTool):
    name = "get_shopify_payments_balance_transactions"
    description = "Fetch Shopify Payments balance transactions"
    input_schema = schema({
        "first": first_arg("transactions"),
        "after": after_arg(),
        "query": query_arg("Filter query for balance transactions"),
        "sortKey": enum(["PROCESSED_AT", "ID"], "Field to sort by"),
        "reverse": reverse_arg(),
        "hideTransfers": boolean("Hide transfer transactions"),
    })
    defaults = {"first": 50, "sortKey": "PROCESSED_AT", "reverse": True, "hideTransfers": False}
    query = """
    query GetBalanceTransactions($first: Int!, $after: String, $query: String, $sortKey: BalanceTransactionSortKeys, $reverse: Boolean, $hideTransfers: Boolean) {
      shopifyPaymentsAccount {
        id
        balanceTransactions(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse, hideTransfers: $hideTransfers) {
          edges {
            node {
              id
              amount {
                amount
                currencyCode
              }
              fee {
                amount
                currencyCode
              }
              net {
                amount
                currencyCode
              }
              transactionDate
              type
              sourceType
              sourceId
              sourceOrderTransactionId
              test
              adjustmentReason
              associatedOrder {
                id
                name
              }
              associatedPayout {
                id
                status
              }
            }
            cursor
          }""" + PAGE_INFO + """
        }
      }
    }
    """


class GetShopifyPaymentsPayoutsTool(GraphQLTool):
    name = "get_shopify_payments_payouts"
    description = "Fetch Shopify Payments payouts"
    input_schema = schema({
        "first": first_arg("payouts"),
        "after": after_arg(),
        "query": query_arg("Filter query for payouts"),
        "sortKey": enum(["ISSUED_AT", "ID", "AMOUNT"], "Field to sort by"),
        "reverse": reverse_arg(),
        "transactionType": enum(["PAYOUT", "REFUND", "ADJUSTMENT", "CHARGEBACK", "CHARGEBACK_REVERSAL"],
                                "Filter by transaction type"),
    })
    defaults = {"first": 50, "sortKey": "ISSUED_AT", "reverse": True}
    query = """
    query GetPayouts($first: Int!, $after: String, $query: String, $sortKey: PayoutSortKeys, $reverse: Boolean, $transactionType: ShopifyPaymentsPayoutTransactionType) {
      shopifyPaymentsAccount {
        id
        payouts(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse, transactionType: $transactionType) {
          edges {
            node {
              id
              legacyResourceId
              issuedAt
              status
              transactionType
              net {
                amount
                currencyCode
              }
              externalTraceId
              businessEntity {
                id
              }
              summary {
    """ + PAYOUT_SUMMARY + """
              }
            }
            cursor
          }""" + PAGE_INFO + """
        }
      }
    }
    """


class GetShopifyPaymentsDisputesTool(GraphQLTool):
    name = "get_shopify_payments_disputes"
    description = "Fetch Shopify Payments disputes"
    input_schema = schema({
        "first": first_arg("disputes"),
        "after": after_arg(),
        "query": query_arg("Filter query for disputes"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "reverse": True}
    query = """
    query GetDisputes($first: Int!, $after: String, $query: String, $reverse: Boolean) {
      shopifyPaymentsAccount {
        id
        disputes(first: $first, after: $after, query: $query, reverse: $reverse) {
          edges {
            node {
              id
              legacyResourceId
              initiatedAt
              evidenceDueBy
              evidenceSentOn
              finalizedOn
              status
              type
              amount {
                amount
                currencyCode
              }
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
              disputeEvidence {
                id
                submitted
                customerFirstName
                customerLastName
                customerEmailAddress
                customerPurchaseIp
                productDescription
                accessActivityLog
                cancellationPolicyDisclosure
                cancellationRebuttal
                refundPolicyDisclosure
                refundRefusalExplanation
                uncategorizedText
                billingAddress {
                  address1
                  address2
                  city
                  province
                  country
                  zip
                }
                shippingAddress {
                  address1
                  address2
                  city
                  province
                  country
                  zip
                }
              }
              reasonDetails {
                networkReasonCode
                reason
              }
            }
            cursor
          }""" + PAGE_INFO + """
        }
      }
    }
    """


class GetShopifyPaymentsBankAccountsTool(GraphQLTool):
    name = "get_shopify_payments_bank_accounts"
    description = "Fetch bank accounts configured for Shopify Payments"
    input_schema = schema({
        "first": first_arg("bank accounts", default=10),
        "after": after_arg(),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 10, "reverse": False}
    query = """
    query GetBankAccounts($first: Int!, $after: String, $reverse: Boolean) {
      shopifyPaymentsAccount {
        id
        bankAccounts(first: $first, after: $after, reverse: $reverse) {
          edges {
            node {
              id
              accountNumberLastDigits
              bankName
              country
              currency
              status
              createdAt
              payouts(first: 5) {
                edges {
                  node {
                    id
                    issuedAt
                    status
                    net {
                      amount
                      currencyCode
                    }
                  }
                }
              }
            }
            cursor
          }""" + PAGE_INFO + """
        }
      }
    }
    """


class CreateShopifyPaymentsAlternateCurrencyPayoutTool(GraphQLTool):
    name = "create_shopify_payments_alternate_currency_payout"
    description = "Create an alternate currency payout for a Shopify Payments account"
    input_schema = schema({
        "currency": string("Currency code for the payout (e.g., 'USD', 'EUR')"),
        "accountId": string("Optional Shopify Payments account ID (if not using default)"),
    }, required=["currency"])
    query = """
    mutation CreateAlternateCurrencyPayout($currency: CurrencyCode!, $accountId: ID) {
      shopifyPaymentsPayoutAlternateCurrencyCreate(currency: $currency, accountId: $accountId) {
        payout {
          amount {
            amount
            currencyCode
          }
          currency
          arrivalDate
          createdAt
          remoteId
        }
        success
        userErrors {
          field
          message
        }
      }
    }
    """
