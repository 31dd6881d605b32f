"""
Resource feedback tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, array, enum, first_arg, id_arg, pick, schema, string

RESOURCE_TYPES = ["PRODUCT", "COLLECTION"]


class GetResourceFeedbacksTool(GraphQLTool):
    name = "get_resource_feedbacks"
    description = "Fetch resource feedbacks from the Shopify store"
    input_schema = schema({
        "first": first_arg("feedbacks"),
        "after": after_arg(),
        "resourceType": enum(RESOURCE_TYPES, "Filter by resource type"),
    })
    defaults = {"first": 50}
    query = """
    query GetResourceFeedbacks($first: Int!, $after: String, $resourceType: ResourceType) {
      resourceFeedbacks(first: $first, after: $after, resourceType: $resourceType) {
        edges {
          node {
            id
            resourceId
            resourceType
            state
            feedbackGeneratedAt
            messages
            createdAt
            updatedAt
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


class CreateResourceFeedbackTool(GraphQLTool):
    name = "create_resource_feedback"
    description = "Create a resource feedback"
    input_schema = schema({
        "resourceId": id_arg("Product", "Resource ID (e.g., 'gid://shopify/Product/123456789')"),
        "resourceType": enum(RESOURCE_TYPES, "Resource type"),
        "state": enum(["success", "warning", "error"], "Feedback state"),
        "messages": array(string(), "Feedback messages"),
    }, required=["resourceId", "resourceType", "state", "messages"])
    query = """
    mutation CreateResourceFeedback($input: ResourceFeedbackInput!) {
      resourceFeedbackCreate(input: $input) {
        resourceFeedback {
          id
          resourceId
          resourceType
          state
          messages
          feedbackGeneratedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "resourceId", "resourceType", "state", "messages")}
