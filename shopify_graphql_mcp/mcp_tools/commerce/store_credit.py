"""
Store credit account tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, boolean, first_arg, id_arg, number, query_arg, schema, string

MONEY = """{
                  amount
                  currencyCode
                }"""

ACCOUNT_OWNER = """
                  owner {
                    ... on Customer {
                      id
                      firstName
                      lastName
                    }
                    ... on CompanyLocation {
                      id
                      name
                    }
                  }
"""

OWNER_ACCOUNTS = """
        storeCreditAccounts(first: $first, after: $after, query: $query) {
          edges {
            node {
              id
              balance {
                amount
                currencyCode
              }
            }
            cursor
          }
          pageInfo {
            hasNextPage
            hasPreviousPage
          }
        }
"""


class GetStoreCreditAccountTool(GraphQLTool):
    """One store credit account with a page of its transactions"""

    name = "get_store_credit_account"
    description = "Fetch a store credit account by ID"
    input_schema = schema({
        "id": id_arg("StoreCreditAccount"),
        "first": first_arg("transactions"),
        "after": string("Cursor for pagination of transactions"),
    }, required=["id"])
    defaults = {"first": 50}
    query = """
    query GetStoreCreditAccount($id: ID!, $first: Int!, $after: String) {
      storeCreditAccount(id: $id) {
        id
        balance {
          amount
          currencyCode
        }
        owner {
          ... on Customer {
            id
            firstName
            lastName
            email
          }
          ... on CompanyLocation {
            id
            name
            company {
              id
              name
            }
          }
        }
        transactions(first: $first, after: $after) {
          edges {
            node {
              ... on StoreCreditAccountCreditTransaction {
                id
                amount """ + MONEY + """
                balanceAfterTransaction """ + MONEY + """
                createdAt
                event
                expiresAt
                remainingAmount """ + MONEY + """
              }
              ... on StoreCreditAccountDebitTransaction {
                id
                amount """ + MONEY + """
                balanceAfterTransaction """ + MONEY + """
                createdAt
                event
              }
              ... on StoreCreditAccountDebitRevertTransaction {
                id
                amount """ + MONEY + """
                balanceAfterTransaction """ + MONEY + """
                createdAt
                event
              }
              ... on StoreCreditAccountExpirationTransaction {
                amount """ + MONEY + """
                balanceAfterTransaction """ + MONEY + """
                createdAt
                event
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
    }
    """


class GetStoreCreditAccountsByOwnerTool(GraphQLTool):
    """
    Store credit accounts of a customer or a company location.

    Both owner types are queried with the same ID; the one that does not match
    resolves to null.
    """

    name = "get_store_credit_accounts_by_owner"
    description = "Fetch all store credit accounts for a customer or company location"
    input_schema = schema({
        "ownerId": string("Owner ID - either Customer ID or CompanyLocation ID"),
        "first": first_arg("accounts"),
        "after": after_arg(),
        "query": query_arg("Filter query for accounts"),
    }, required=["ownerId"])
    defaults = {"first": 50}
    query = """
    query GetStoreCreditAccountsByOwner($ownerId: ID!, $first: Int!, $after: String, $query: String) {
      customer(id: $ownerId) {
        id
        firstName
        lastName
        email""" + OWNER_ACCOUNTS + """
      }
      companyLocation(id: $ownerId) {
        id
        name""" + OWNER_ACCOUNTS + """
      }
    }
    """


class CreditStoreCreditAccountTool(GraphQLTool):
    name = "credit_store_credit_account"
    description = ("Add funds to a store credit account. "
                   "Creates the account automatically if it doesn't exist.")
    input_schema = schema({
        "id": string("Store Credit Account ID, Customer ID, or CompanyLocation ID"),
        "creditAmount": number("Amount to credit"),
        "currencyCode": string("Currency code (e.g., 'USD')"),
        "expiresAt": string("Optional expiration date (ISO 8601 format)"),
        "notify": boolean("Send notification to account owner (default: false)"),
    }, required=["id", "creditAmount", "currencyCode"])
    defaults = {"notify": False}
    query = """
    mutation StoreCreditAccountCredit($id: ID!, $creditInput: StoreCreditAccountCreditInput!) {
      storeCreditAccountCredit(id: $id, creditInput: $creditInput) {
        storeCreditAccountTransaction {
          ... on StoreCreditAccountCreditTransaction {
            id
            account {
              id
              balance """ + MONEY + ACCOUNT_OWNER + """
            }
            amount """ + MONEY + """
            balanceAfterTransaction """ + MONEY + """
            createdAt
            event
            expiresAt
            remainingAmount """ + MONEY + """
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
        credit = {
            "creditAmount": {"amount": str(args["creditAmount"]), "currencyCode": args["currencyCode"]},
            "notify": args["notify"],
        }
        if args.get("expiresAt"):
            credit["expiresAt"] = args["expiresAt"]
        return {"id": args["id"], "creditInput": credit}


class DebitStoreCreditAccountTool(GraphQLTool):
    name = "debit_store_credit_account"
    description = "Debit funds from a store credit account"
    input_schema = schema({
        "id": string("Store Credit Account ID"),
        "debitAmount": number("Amount to debit"),
        "currencyCode": string("Currency code (e.g., 'USD')"),
    }, required=["id", "debitAmount", "currencyCode"])
    query = """
    mutation StoreCreditAccountDebit($id: ID!, $debitInput: StoreCreditAccountDebitInput!) {
      storeCreditAccountDebit(id: $id, debitInput: $debitInput) {
        storeCreditAccountTransaction {
          ... on StoreCreditAccountDebitTransaction {
            id
            account {
              id
              balance """ + MONEY + ACCOUNT_OWNER + """
            }
            amount """ + MONEY + """
            balanceAfterTransaction """ + MONEY + """
            createdAt
            event
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
        debit = {"debitAmount": {"amount": str(args["debitAmount"]), "currencyCode": args["currencyCode"]}}
        return {"id": args["id"], "debitInput": debit}
