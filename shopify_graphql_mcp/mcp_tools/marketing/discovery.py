"""
Product discovery and search tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, enum, first_arg, integer, obj, reverse_arg,
    schema, string,
)

SEARCH_TYPES = ["PRODUCT", "COLLECTION", "PAGE", "ARTICLE", "QUERY"]


def result_count(default: int) -> Dict[str, Any]:
    return integer(f"Number of results (1-50, default: {default})", minimum=1, maximum=50)


class SearchProductsTool(GraphQLTool):
    name = "search_products"
    description = "Search products using Shopify's discovery/search functionality"
    input_schema = schema({
        "first": first_arg("products"),
        "after": after_arg(),
        "query": string("Search query (e.g., 't-shirt', 'category:shirts')"),
        "sortKey": enum(["TITLE", "PRICE", "BEST_SELLING", "CREATED_AT", "UPDATED_AT", "RELEVANCE"],
                        "Field to sort by"),
        "reverse": reverse_arg(),
        "filters": array(obj({
            "field": string("Filter field (e.g., 'price', 'vendor', 'product_type')"),
            "value": string("Filter value"),
        }, required=["field", "value"]), "Additional filters"),
    }, required=["query"])
    defaults = {"first": 50, "sortKey": "RELEVANCE", "reverse": False}
    query = """
    query SearchProducts($first: Int!, $after: String, $query: String, $sortKey: ProductSortKeys, $reverse: Boolean, $filters: [ProductFilter!]) {
      products(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse, filters: $filters) {
        edges {
          node {
            id
            title
            description
            handle
            productType
            vendor
            tags
            status
            createdAt
            updatedAt
            publishedAt
            variants(first: 10) {
              edges {
                node {
                  id
                  title
                  sku
                  price
                  compareAtPrice
                  inventoryQuantity
                  availableForSale
                }
              }
            }
            images(first: 5) {
              edges {
                node {
                  id
                  url
                  altText
                }
              }
            }
            seo {
              title
              description
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


class GetProductRecommendationsTool(GraphQLTool):
    name = "get_product_recommendations"
    description = "Get product recommendations based on a product"
    input_schema = schema({
        "productId": string("Product ID to get recommendations for"),
        "first": result_count(10),
        "intent": enum(["RELATED", "COMPLEMENTARY"], "Type of recommendations"),
    }, required=["productId"])
    defaults = {"first": 10, "intent": "RELATED"}
    query = """
    query GetProductRecommendations($productId: ID!, $first: Int!, $intent: ProductRecommendationIntent) {
      productRecommendations(productId: $productId, first: $first, intent: $intent) {
        edges {
          node {
            id
            title
            description
            handle
            productType
            vendor
            priceRangeV2 {
              minVariantPrice {
                amount
                currencyCode
              }
              maxVariantPrice {
                amount
                currencyCode
              }
            }
            images(first: 1) {
              edges {
                node {
                  id
                  url
                  altText
                }
              }
            }
          }
          cursor
        }
      }
    }
    """


class PredictiveSearchTool(GraphQLTool):
    name = "predictive_search"
    description = "Get predictive search results (autocomplete)"
    input_schema = schema({
        "query": string("Search query string"),
        "first": result_count(10),
        "types": array(enum(SEARCH_TYPES), "Types to search for"),
    }, required=["query"])
    defaults = {"first": 10, "types": ["PRODUCT", "COLLECTION", "QUERY"]}
    query = """
    query PredictiveSearch($query: String!, $first: Int!, $types: [PredictiveSearchType!]) {
      predictiveSearch(query: $query, first: $first, types: $types) {
        products {
          edges {
            node {
              id
              title
              handle
              productType
              vendor
              images(first: 1) {
                edges {
                  node {
                    url
                    altText
                  }
                }
              }
            }
          }
        }
        collections {
          edges {
            node {
              id
              title
              handle
              image {
                url
                altText
              }
            }
          }
        }
        pages {
          edges {
            node {
              id
              title
              handle
            }
          }
        }
        articles {
          edges {
            node {
              id
              title
              handle
              blog {
                handle
              }
            }
          }
        }
        queries {
          text
          styledText
          trackingParameters
        }
      }
    }
    """
