"""
Analytics tools

Detailed analytics are served through ShopifyQL; ``get_analytics_report``
only echoes the requested period alongside basic shop data.
"""

from typing import Any, Dict

from ..base import GraphQLTool, enum, schema, string

SHOPIFYQL_HINT = "Analytics data requires ShopifyQL queries. Use shopifyql_query tool for detailed analytics."


class GetAnalyticsReportTool(GraphQLTool):
    name = "get_analytics_report"
    description = "Fetch analytics reports and metrics from Shopify"
    input_schema = schema({
        "reportType": enum(["sales", "traffic", "customers", "products", "orders"], "Type of analytics report"),
        "startDate": string("Start date in ISO format (YYYY-MM-DD)"),
        "endDate": string("End date in ISO format (YYYY-MM-DD)"),
        "granularity": enum(["daily", "weekly", "monthly", "yearly"], "Time granularity for the report"),
    }, required=["reportType", "startDate", "endDate"])
    defaults = {"granularity": "daily"}
    query = """
    query GetAnalytics {
      shop {
        id
        name
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {}

    def present(self, data: Any, args: Dict[str, Any]) -> Any:
        return {
            "reportType": args["reportType"],
            "period": {
                "startDate": args["startDate"],
                "endDate": args["endDate"],
                "granularity": args["granularity"],
            },
            "data": data,
            "note": SHOPIFYQL_HINT,
        }


class RunShopifyQLQueryTool(GraphQLTool):
    name = "run_shopifyql_query"
    description = "Execute a ShopifyQL query for custom analytics and reporting"
    input_schema = schema({
        "query": string("ShopifyQL query string (e.g., 'SHOW total_sales, orders_count FROM sales OVER day SINCE -7d')"),
    }, required=["query"])
    query = """
    query RunShopifyQL($query: String!) {
      shopifyqlQuery(query: $query) {
        results {
          columns {
            name
            dataType
          }
          rows
        }
        parseErrors {
          message
        }
      }
    }
    """
