"""
Customer data erasure (GDPR) tools
"""

from ..base import GraphQLTool, after_arg, enum, first_arg, schema, string

REQUEST_STATUSES = ["PENDING", "IN_PROGRESS", "COMPLETED", "FAILED"]


class GetCustomerDataErasureRequestsTool(GraphQLTool):
    name = "get_customer_data_erasure_requests"
    description = "Fetch customer data erasure (GDPR) requests"
    input_schema = schema({
        "first": first_arg("requests"),
        "after": after_arg(),
        "status": enum(REQUEST_STATUSES, "Filter by status"),
    })
    defaults = {"first": 50}
    query = """
    query GetCustomerDataErasureRequests($first: Int!, $after: String, $status: CustomerDataErasureRequestStatus) {
      customerDataErasureRequests(first: $first, after: $after, status: $status) {
        edges {
          node {
            id
            customerId
            status
            requestedAt
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


class RequestCustomerDataErasureTool(GraphQLTool):
    name = "request_customer_data_erasure"
    description = "Submit a customer data erasure request (GDPR right to be forgotten)"
    input_schema = schema({"customerId": string("Customer ID to erase data for")}, required=["customerId"])
    query = """
    mutation CustomerDataErasureRequestCreate($customerId: ID!) {
      customerDataErasureRequestCreate(customerId: $customerId) {
        customerDataErasureRequest {
          id
          customerId
          status
          requestedAt
          shop {
            id
            name
          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """
