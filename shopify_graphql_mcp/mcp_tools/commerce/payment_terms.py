"""
Payment terms and payment mandate tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, enum, first_arg, integer, number, pick, schema, string

PAYMENT_TERMS_TYPES = ["NET_30", "NET_60", "NET_90", "DUE_ON_RECEIPT", "FIXED", "INSTALLMENT"]

PAYMENT_TERMS_FIELDS = """
          id
          name
          paymentTermsType
          dueInDays
          discountPercentage
"""


class GetPaymentTermsTool(GraphQLTool):
    name = "get_payment_terms"
    description = "Fetch payment terms configurations"
    input_schema = schema({
        "first": first_arg("payment terms"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetPaymentTerms($first: Int!, $after: String) {
      paymentTerms(first: $first, after: $after) {
        edges {
          node {
            id
            name
            paymentTermsType
            dueInDays
            discountPercentage
            installments(first: 10) {
              edges {
                node {
                  id
                  dueInDays
                  percentage
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


class CreatePaymentTermsTool(GraphQLTool):
    name = "create_payment_terms"
    description = "Create new payment terms"
    input_schema = schema({
        "name": string("Payment terms name"),
        "paymentTermsType": enum(PAYMENT_TERMS_TYPES, "Type of payment terms"),
        "dueInDays": integer("Number of days until due (for NET types)"),
        "discountPercentage": number("Discount percentage for early payment"),
    }, required=["name", "paymentTermsType"])
    query = """
    mutation PaymentTermsCreate($input: PaymentTermsInput!) {
      paymentTermsCreate(input: $input) {
        paymentTerms {""" + PAYMENT_TERMS_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        terms = pick(args, "name", "paymentTermsType")
        # zero means "not set" for both optional values
        if args.get("dueInDays"):
            terms["dueInDays"] = args["dueInDays"]
        if args.get("discountPercentage"):
            terms["discountPercentage"] = args["discountPercentage"]
        return {"input": terms}


class UpdatePaymentTermsTool(GraphQLTool):
    name = "update_payment_terms"
    description = "Update existing payment terms"
    input_schema = schema({
        "id": string("Payment Terms ID"),
        "name": string("Payment terms name"),
        "dueInDays": integer("Number of days until due"),
        "discountPercentage": number("Discount percentage"),
    }, required=["id"])
    query = """
    mutation PaymentTermsUpdate($id: ID!, $input: PaymentTermsInput!) {
      paymentTermsUpdate(id: $id, input: $input) {
        paymentTerms {""" + PAYMENT_TERMS_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "name", "dueInDays", "discountPercentage")}


class DeletePaymentTermsTool(GraphQLTool):
    name = "delete_payment_terms"
    description = "Delete payment terms"
    input_schema = schema({"id": string("Payment Terms ID to delete")}, required=["id"])
    query = """
    mutation PaymentTermsDelete($id: ID!) {
      paymentTermsDelete(id: $id) {
        deletedPaymentTermsId
        userErrors {
          field
          message
        }
      }
    }
    """


class GetPaymentMandatesTool(GraphQLTool):
    name = "get_payment_mandates"
    description = "Fetch payment mandates for the store"
    input_schema = schema({
        "first": first_arg("mandates"),
        "after": after_arg(),
        "paymentMethodType": string("Filter by payment method type"),
    })
    defaults = {"first": 50}
    query = """
    query GetPaymentMandates($first: Int!, $after: String, $paymentMethodType: String) {
      paymentMandates(first: $first, after: $after, paymentMethodType: $paymentMethodType) {
        edges {
          node {
            id
            paymentMethod {
              ... on SepaMandate {
                reference
                creditorId
                maskedIban
              }
            }
            status
            createdAt
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
