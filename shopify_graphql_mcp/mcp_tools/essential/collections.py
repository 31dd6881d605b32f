"""
Collection tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, boolean, enum, first_arg, id_arg, obj, pick,
    query_arg, reverse_arg, schema, string,
)

RULE_COLUMNS = ["TITLE", "TYPE", "VENDOR", "VARIANT_PRICE", "TAG"]
RULE_RELATIONS = [
    "CONTAINS", "ENDS_WITH", "EQUALS", "GREATER_THAN", "IS_NOT_SET",
    "LESS_THAN", "NOT_CONTAINS", "NOT_EQUALS", "STARTS_WITH",
]
SORT_ORDERS = [
    "MANUAL", "BEST_SELLING", "ALPHA_ASC", "ALPHA_DESC",
    "PRICE_ASC", "PRICE_DESC", "CREATED", "CREATED_DESC",
]


class GetCollectionsTool(GraphQLTool):
    name = "get_collections"
    description = "Fetch collections from the Shopify store"
    input_schema = schema({
        "first": first_arg("collections"),
        "after": after_arg(),
        "query": query_arg(),
        "sortKey": enum(["TITLE", "UPDATED_AT", "ID"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "UPDATED_AT", "reverse": True}
    query = """
    query GetCollections($first: Int!, $after: String, $query: String, $sortKey: CollectionSortKeys, $reverse: Boolean) {
      collections(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            title
            handle
            descriptionHtml
            productsCount {
              count
            }
            sortOrder
            updatedAt
            image {
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


class GetCollectionTool(GraphQLTool):
    name = "get_collection"
    description = "Fetch a specific collection by ID"
    input_schema = schema({"id": id_arg("Collection")}, required=["id"])
    query = """
    query GetCollection($id: ID!) {
      collection(id: $id) {
        id
        title
        handle
        descriptionHtml
        productsCount {
          count
        }
        sortOrder
        updatedAt
        image {
          url
          altText
        }
        products(first: 20) {
          edges {
            node {
              id
              title
              handle
              vendor
              productType
              featuredImage {
                url
                altText
              }
            }
          }
        }
        metafields(first: 10) {
          edges {
            node {
              id
              namespace
              key
              value
              type
            }
          }
        }
      }
    }
    """


class CreateCollectionTool(GraphQLTool):
    """Create a manual collection, or a smart collection from rules"""

    name = "create_collection"
    description = "Create a new collection (manual or smart collection)"
    context = """
    MANUAL collections are filled with add_products_to_collection.
    SMART collections match products by rules; disjunctive=true ORs the rules.
    """
    input_schema = schema({
        "title": string("Collection title"),
        "descriptionHtml": string("Collection description (HTML)"),
        "collectionType": enum(["MANUAL", "SMART"], "Type of collection"),
        "rules": array(obj({
            "column": enum(RULE_COLUMNS),
            "relation": enum(RULE_RELATIONS),
            "condition": string(),
        }, required=["column", "relation", "condition"]), "Rules for smart collections"),
        "disjunctive": boolean("Whether rules should be OR'd together (default: AND)"),
    }, required=["title", "collectionType"])
    query = """
    mutation CollectionCreate($input: CollectionInput!) {
      collectionCreate(input: $input) {
        collection {
          id
          title
          handle
          descriptionHtml
          updatedAt
          productsCount {
            count
          }
          ruleSet {
            appliedDisjunctively
            rules {
              column
              relation
              condition
            }
          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        collection = pick(args, "title", "descriptionHtml")
        if args["collectionType"] == "SMART":
            collection["ruleSet"] = {
                "appliedDisjunctively": bool(args.get("disjunctive", False)),
                "rules": args.get("rules") or [],
            }
        return {"input": collection}


class AddProductsToCollectionTool(GraphQLTool):
    name = "add_products_to_collection"
    description = "Add products to a manual collection"
    input_schema = schema({
        "collectionId": string("Collection ID"),
        "productIds": array(string(), "Array of product IDs to add", min_items=1),
    }, required=["collectionId", "productIds"])
    query = """
    mutation CollectionAddProducts($id: ID!, $productIds: [ID!]!) {
      collectionAddProducts(id: $id, productIds: $productIds) {
        collection {
          id
          title
          productsCount {
            count
          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["collectionId"], "productIds": args["productIds"]}


class UpdateCollectionTool(GraphQLTool):
    name = "update_collection"
    description = "Update an existing collection"
    input_schema = schema({
        "id": id_arg("Collection"),
        "title": string("Collection title"),
        "descriptionHtml": string("Collection description (HTML)"),
        "sortOrder": enum(SORT_ORDERS, "Product sort order"),
    }, required=["id"])
    query = """
    mutation CollectionUpdate($input: CollectionInput!) {
      collectionUpdate(input: $input) {
        collection {
          id
          title
          handle
          descriptionHtml
          sortOrder
          updatedAt
          productsCount {
            count
          }
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "id", "title", "descriptionHtml", "sortOrder")}


class DeleteCollectionTool(GraphQLTool):
    name = "delete_collection"
    description = "Delete a collection"
    input_schema = schema({"id": id_arg("Collection")}, required=["id"])
    query = """
    mutation CollectionDelete($input: CollectionDeleteInput!) {
      collectionDelete(input: $input) {
        deletedCollectionId
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": {"id": args["id"]}}
