"""
Product and collection listing tools
"""

from ..base import GraphQLTool, after_arg, first_arg, id_arg, schema

LISTING_FIELDS = """
            id
            productId
            title
            description
            handle
            productType
            vendor
            tags
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
"""


class GetProductListingsTool(GraphQLTool):
    name = "get_product_listings"
    description = "Fetch product listings from the Shopify store"
    input_schema = schema({
        "first": first_arg("listings"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetProductListings($first: Int!, $after: String) {
      productListings(first: $first, after: $after) {
        edges {
          node {""" + LISTING_FIELDS + """            images(first: 5) {
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
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class GetProductListingTool(GraphQLTool):
    name = "get_product_listing"
    description = "Fetch a specific product listing by ID"
    input_schema = schema({
        "id": id_arg("ProductListing", "Product listing ID (e.g., 'gid://shopify/ProductListing/123456789')"),
    }, required=["id"])
    query = """
    query GetProductListing($id: ID!) {
      productListing(id: $id) {""" + LISTING_FIELDS + """            images(first: 10) {
              edges {
                node {
                  id
                  url
                  altText
                }
              }
            }
            variants(first: 50) {
              edges {
                node {
                  id
                  title
                  price {
                    amount
                    currencyCode
                  }
                  availableForSale
                  sku
                }
              }
            }
      }
    }
    """


class GetCollectionListingsTool(GraphQLTool):
    name = "get_collection_listings"
    description = "Fetch collection listings from the Shopify store"
    input_schema = schema({
        "first": first_arg("listings"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetCollectionListings($first: Int!, $after: String) {
      collectionListings(first: $first, after: $after) {
        edges {
          node {
            id
            collectionId
            title
            description
            handle
            image {
              id
              url
              altText
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
