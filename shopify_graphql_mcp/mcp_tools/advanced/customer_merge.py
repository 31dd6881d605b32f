"""
Customer merge tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, enum, first_arg, pick, schema, string
from .customer_data_erasure import REQUEST_STATUSES


class GetCustomerMergeRequestsTool(GraphQLTool):
    name = "get_customer_merge_requests"
    description = "Fetch customer merge requests"
    input_schema = schema({
        "first": first_arg("requests"),
        "after": after_arg(),
        "status": enum(REQUEST_STATUSES, "Filter by status"),
    })
    defaults = {"first": 50}
    query = """
    query GetCustomerMergeRequests($first: Int!, $after: String, $status: CustomerMergeRequestStatus) {
      customerMergeRequests(first: $first, after: $after, status: $status) {
        edges {
          node {
            id
            status
            sourceCustomerId
            targetCustomerId
            createdAt
            completedAt
            shop {
              id
              name
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


class RequestCustomerMergeTool(GraphQLTool):
    name = "request_customer_merge"
    description = "Merge one customer into another (combines order history, addresses, etc.)"
    input_schema = schema({
        "sourceCustomerId": string("Customer ID to merge from (will be deleted)"),
        "targetCustomerId": string("Customer ID to merge into (will be kept)"),
        "note": string("Optional note about the merge"),
    }, required=["sourceCustomerId", "targetCustomerId"])
    query = """
    mutation CustomerMergeRequestCreate($input: CustomerMergeRequestInput!) {
      customerMergeRequestCreate(input: $input) {
        customerMergeRequest {
          id
          status
          sourceCustomerId
          targetCustomerId
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
        return {"input": pick(args, "sourceCustomerId", "targetCustomerId", "note")}
