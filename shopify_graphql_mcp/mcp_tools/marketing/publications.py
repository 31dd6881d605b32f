"""
Publication tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, enum, first_arg, id_arg, pick, schema, string

PUBLICATION_FIELDS = """
            id
            name
            autoPublish
            supportsFuturePublishing
            catalog {
              id
              name
            }
"""


class GetPublicationsTool(GraphQLTool):
    name = "get_publications"
    description = "Fetch publications from the Shopify store"
    input_schema = schema({
        "first": first_arg("publications"),
        "after": after_arg(),
        "catalogType": enum(["APP", "INDIVIDUAL", "CROSS_BORDER", "EXTERNAL"], "Filter by catalog type"),
    })
    defaults = {"first": 50}
    query = """
    query GetPublications($first: Int!, $after: String, $catalogType: CatalogType) {
      publications(first: $first, after: $after, catalogType: $catalogType) {
        edges {
          node {""" + PUBLICATION_FIELDS + """          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class GetPublicationTool(GraphQLTool):
    name = "get_publication"
    description = "Fetch a specific publication by ID"
    input_schema = schema({"id": id_arg("Publication")}, required=["id"])
    query = """
    query GetPublication($id: ID!) {
      publication(id: $id) {""" + PUBLICATION_FIELDS + """      }
    }
    """


class GetPublicationProductsTool(GraphQLTool):
    name = "get_publication_products"
    description = "Fetch products published to a publication"
    input_schema = schema({
        "publicationId": string("Publication ID"),
        "first": first_arg("products"),
        "after": after_arg(),
    }, required=["publicationId"])
    defaults = {"first": 50}
    query = """
    query GetPublicationProducts($id: ID!, $first: Int!, $after: String) {
      publication(id: $id) {
        id
        name
        products(first: $first, after: $after) {
          edges {
            node {
              id
              title
              handle
              createdAt
              productType
              vendor
            }
            cursor
          }
          pageInfo {
            hasNextPage
            hasPreviousPage
          }
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return pick(args, "first", "after", id="publicationId")


class GetPublicationCollectionsTool(GetPublicationProductsTool):
    name = "get_publication_collections"
    description = "Fetch collections published to a publication"
    input_schema = schema({
        "publicationId": string("Publication ID"),
        "first": first_arg("collections"),
        "after": after_arg(),
    }, required=["publicationId"])
    query = """
    query GetPublicationCollections($id: ID!, $first: Int!, $after: String) {
      publication(id: $id) {
        id
        name
        collections(first: $first, after: $after) {
          edges {
            node {
              id
              title
              handle
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
    }
    """
