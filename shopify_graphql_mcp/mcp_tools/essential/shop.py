"""
Shop information tools
"""

from ..base import GraphQLTool, schema, string


class GetShopInfoTool(GraphQLTool):
    """Fetch general shop information"""

    name = "get_shop_info"
    description = "Fetch general shop information"
    input_schema = schema()
    query = """
    query GetShop {
      shop {
        id
        name
        email
        contactEmail
        myshopifyDomain
        primaryDomain {
          url
          host
        }
        currencyCode
        ianaTimezone
        timezoneAbbreviation
        createdAt
        updatedAt
        checkoutApiSupported
        taxesIncluded
        taxShipping
        customerAccounts
        marketingSmsConsentEnabledAtCheckout
        shipsToCountries
        plan {
          displayName
          partnerDevelopment
          shopifyPlus
        }
        billingAddress {
          address1
          city
          province
          country
          zip
          phone
        }
        features {
          storefront
          reports
          giftCards
          bundles {
            enabled
          }
        }
      }
    }
    """


class GetShopPoliciesTool(GraphQLTool):
    """Fetch shop policies"""

    name = "get_shop_policies"
    description = "Fetch shop policies (refund, privacy, terms of service, etc.)"
    input_schema = schema()
    query = """
    query GetShopPolicies {
      shop {
        shopPolicies {
          id
          type
          title
          body
          url
          createdAt
          updatedAt
        }
      }
    }
    """


class ShopifyQLQueryTool(GraphQLTool):
    """Run a ShopifyQL analytics query"""

    name = "shopifyql_query"
    description = "Execute a ShopifyQL query for analytics (requires read_analytics scope)"
    context = """
    ShopifyQL is Shopify's analytics query language, e.g.
    'FROM sales SHOW total_sales GROUP BY month SINCE -12m'.
    A parseError in the response means the ShopifyQL itself is invalid.
    """
    input_schema = schema({
        "query": string("ShopifyQL query string"),
    }, required=["query"])
    query = """
    query ShopifyQL($query: String!) {
      shopifyqlQuery(query: $query) {
        parseError
        tableData {
          columns {
            name
            dataType
            displayName
          }
          rows
          rowCount
        }
      }
    }
    """
