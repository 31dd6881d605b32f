"""
Legal policy tools
"""

from ..base import GraphQLTool, enum, schema, string

POLICY_HANDLES = [
    "refund-policy",
    "privacy-policy",
    "terms-of-service",
    "terms-of-sale",
    "legal-notice",
    "shipping-policy",
]


class GetLegalPoliciesTool(GraphQLTool):
    name = "get_legal_policies"
    description = "Fetch legal policies for the store"
    input_schema = schema()
    query = """
    query GetLegalPolicies {
      shop {
        id
        name
        legalPolicies {
          id
          title
          handle
          body
          createdAt
          updatedAt
        }
      }
    }
    """


class GetLegalPolicyTool(GraphQLTool):
    name = "get_legal_policy"
    description = "Fetch a specific legal policy by handle"
    input_schema = schema({"handle": enum(POLICY_HANDLES, "Legal policy handle")}, required=["handle"])
    query = """
    query GetLegalPolicy($handle: String!) {
      legalPolicy(handle: $handle) {
        id
        title
        handle
        body
        createdAt
        updatedAt
      }
    }
    """


class UpdateLegalPolicyTool(GraphQLTool):
    name = "update_legal_policy"
    description = "Update a legal policy"
    input_schema = schema({
        "handle": enum(POLICY_HANDLES, "Legal policy handle"),
        "body": string("Policy body content (HTML or plain text)"),
    }, required=["handle", "body"])
    query = """
    mutation LegalPolicyUpdate($handle: LegalPolicyHandle!, $body: String!) {
      legalPolicyUpdate(handle: $handle, body: $body) {
        legalPolicy {
          id
          title
          handle
          body
          updatedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """
