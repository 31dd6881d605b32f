"""
Report tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, first_arg, id_arg, schema


def report_id() -> Dict[str, Any]:
    return id_arg("Report")


class GetReportsTool(GraphQLTool):
    name = "get_reports"
    description = "Fetch reports from the Shopify store"
    input_schema = schema({
        "first": first_arg("reports"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetReports($first: Int!, $after: String) {
      reports(first: $first, after: $after) {
        edges {
          node {
            id
            name
            category
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


class GetReportTool(GraphQLTool):
    name = "get_report"
    description = "Fetch a specific report by ID"
    input_schema = schema({"id": report_id()}, required=["id"])
    query = """
    query GetReport($id: ID!) {
      report(id: $id) {
        id
        name
        category
        createdAt
        updatedAt
        graphQLDefinition {
          id
          name
        }
      }
    }
    """


class RunReportTool(GraphQLTool):
    name = "run_report"
    description = "Run a report and get its results"
    input_schema = schema({"id": report_id()}, required=["id"])
    query = """
    mutation RunReport($id: ID!) {
      reportRun(id: $id) {
        report {
          id
          name
        }
        userErrors {
          field
          message
        }
      }
    }
    """
