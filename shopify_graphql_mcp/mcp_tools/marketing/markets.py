"""
Market tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, first_arg, id_arg, pick, schema, string

MARKET_SUMMARY = """
          id
          name
          handle
          status
"""


class GetMarketsTool(GraphQLTool):
    name = "get_markets"
    description = "Fetch markets configured for the store"
    input_schema = schema({
        "first": first_arg("markets"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetMarkets($first: Int!, $after: String) {
      markets(first: $first, after: $after) {
        edges {
          node {
            id
            name
            handle
            status
            supportedLocales {
              locale
              enabled
            }
            currencies {
              currencyCode
              exchangeRate
              format
            }
            priceListByContext {
              id
              name
            }
            webPresences(first: 10) {
              edges {
                node {
                  id
                  domain
                  launchAt
                  alternateLocales
                }
              }
            }
            regions(first: 10) {
              edges {
                node {
                  id
                  name
                  code
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


class GetMarketTool(GraphQLTool):
    name = "get_market"
    description = "Fetch a specific market by ID"
    input_schema = schema({"id": id_arg("Market")}, required=["id"])
    query = """
    query GetMarket($id: ID!) {
      market(id: $id) {
        id
        name
        handle
        status
        supportedLocales {
          locale
          enabled
        }
        currencies {
          currencyCode
          exchangeRate
          format
        }
        priceListByContext {
          id
          name
        }
        webPresences(first: 20) {
          edges {
            node {
              id
              domain
              launchAt
              alternateLocales
              defaultLocale
            }
          }
        }
        regions(first: 20) {
          edges {
            node {
              id
              name
              code
            }
          }
        }
      }
    }
    """


class CreateMarketTool(GraphQLTool):
    name = "create_market"
    description = "Create a new market"
    input_schema = schema({
        "name": string("Market name"),
        "handle": string("Unique handle for the market"),
    }, required=["name", "handle"])
    query = """
    mutation MarketCreate($input: MarketCreateInput!) {
      marketCreate(input: $input) {
        market {""" + MARKET_SUMMARY + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "name", "handle")}


class UpdateMarketTool(GraphQLTool):
    name = "update_market"
    description = "Update an existing market"
    input_schema = schema({
        "id": string("Market ID"),
        "name": string("Market name"),
        "handle": string("Handle"),
    }, required=["id"])
    query = """
    mutation MarketUpdate($id: ID!, $input: MarketUpdateInput!) {
      marketUpdate(id: $id, input: $input) {
        market {""" + MARKET_SUMMARY + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "name", "handle")}


class DeleteMarketTool(GraphQLTool):
    name = "delete_market"
    description = "Delete a market"
    input_schema = schema({"id": string("Market ID to delete")}, required=["id"])
    query = """
    mutation MarketDelete($id: ID!) {
      marketDelete(id: $id) {
        deletedId
        userErrors {
          field
          message
        }
      }
    }
    """


class GetMarketsHomeTool(GraphQLTool):
    name = "get_markets_home"
    description = "Fetch markets home data and analytics"
    input_schema = schema()
    query = """
    query GetMarketsHome {
      marketsHome {
        totalMarkets
        totalRevenue
        topMarkets(first: 10) {
          marketId
          marketName
          totalOrders
          totalSales
        }
      }
    }
    """
