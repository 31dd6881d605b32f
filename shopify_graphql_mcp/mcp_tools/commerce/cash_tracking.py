"""
POS cash tracking tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, enum, first_arg, id_arg, number, pick, schema, string


class GetCashTrackingSessionsTool(GraphQLTool):
    name = "get_cash_tracking_sessions"
    description = "Fetch cash tracking sessions for POS"
    input_schema = schema({
        "first": first_arg("sessions"),
        "after": after_arg(),
        "locationId": string("Filter by location ID"),
        "startDate": string("Start date filter (ISO format)"),
        "endDate": string("End date filter (ISO format)"),
    })
    defaults = {"first": 50}
    query = """
    query GetCashTrackingSessions($first: Int!, $after: String, $locationId: ID, $startDate: DateTime, $endDate: DateTime) {
      cashTrackingSessions(first: $first, after: $after, locationId: $locationId, startDate: $startDate, endDate: $endDate) {
        edges {
          node {
            id
            location {
              id
              name
            }
            staffMember {
              id
              firstName
              lastName
              email
            }
            startingCash
            endingCash
            expectedCash
            cashDiscrepancy
            startingTime
            endingTime
            status
            note
            transactions(first: 20) {
              edges {
                node {
                  id
                  type
                  amount
                  note
                  createdAt
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


class GetCashTrackingSessionTool(GraphQLTool):
    name = "get_cash_tracking_session"
    description = "Fetch a specific cash tracking session by ID"
    input_schema = schema({"id": id_arg("CashTrackingSession")}, required=["id"])
    query = """
    query GetCashTrackingSession($id: ID!) {
      cashTrackingSession(id: $id) {
        id
        location {
          id
          name
          address {
            address1
            city
            province
            country
            zip
          }
        }
        staffMember {
          id
          firstName
          lastName
          email
        }
        startingCash
        endingCash
        expectedCash
        cashDiscrepancy
        startingTime
        endingTime
        status
        note
        transactions(first: 100) {
          edges {
            node {
              id
              type
              amount
              note
              createdAt
              paymentMethod
              referenceNumber
            }
          }
        }
      }
    }
    """


class CreateCashTrackingSessionTool(GraphQLTool):
    name = "create_cash_tracking_session"
    description = "Create a new cash tracking session for a location"
    input_schema = schema({
        "locationId": string("Location ID"),
        "startingCash": number("Starting cash amount"),
        "note": string("Optional note"),
    }, required=["locationId", "startingCash"])
    query = """
    mutation CashTrackingSessionCreate($input: CashTrackingSessionCreateInput!) {
      cashTrackingSessionCreate(input: $input) {
        cashTrackingSession {
          id
          location {
            id
            name
          }
          startingCash
          startingTime
          status
          note
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "locationId", "startingCash", "note")}


class CloseCashTrackingSessionTool(GraphQLTool):
    name = "close_cash_tracking_session"
    description = "Close a cash tracking session"
    input_schema = schema({
        "id": string("Cash Tracking Session ID"),
        "endingCash": number("Ending cash amount"),
        "note": string("Optional note"),
    }, required=["id", "endingCash"])
    query = """
    mutation CashTrackingSessionClose($id: ID!, $input: CashTrackingSessionCloseInput!) {
      cashTrackingSessionClose(id: $id, input: $input) {
        cashTrackingSession {
          id
          endingCash
          expectedCash
          cashDiscrepancy
          endingTime
          status
          note
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "endingCash", "note")}


class AddCashTransactionTool(GraphQLTool):
    name = "add_cash_transaction"
    description = "Add a cash transaction to a tracking session"
    input_schema = schema({
        "sessionId": string("Cash Tracking Session ID"),
        "type": enum(["ADD", "REMOVE", "SALE", "REFUND", "PAYOUT"], "Transaction type"),
        "amount": number("Transaction amount"),
        "note": string("Optional note"),
        "paymentMethod": string("Payment method (for non-cash transactions)"),
        "referenceNumber": string("Reference number"),
    }, required=["sessionId", "type", "amount"])
    query = """
    mutation CashTrackingTransactionAdd($sessionId: ID!, $input: CashTrackingTransactionInput!) {
      cashTrackingTransactionAdd(sessionId: $sessionId, input: $input) {
        cashTrackingTransaction {
          id
          type
          amount
          note
          paymentMethod
          referenceNumber
          createdAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        transaction = pick(args, "type", "amount", "note", "paymentMethod", "referenceNumber")
        return {"sessionId": args["sessionId"], "input": transaction}
