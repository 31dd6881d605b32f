"""
Online store page tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, boolean, enum, first_arg, id_arg, pick, query_arg,
    reverse_arg, schema, string,
)

PAGE_FIELDS = """
        id
        title
        handle
        body
        bodySummary
        createdAt
        updatedAt
        publishedAt
        isPublished
        templateSuffix
"""


class GetPagesTool(GraphQLTool):
    name = "get_pages"
    description = "Fetch online store pages"
    input_schema = schema({
        "first": first_arg("pages"),
        "after": after_arg(),
        "query": query_arg(),
        "sortKey": enum(["TITLE", "UPDATED_AT", "ID", "PUBLISHED_AT"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "UPDATED_AT", "reverse": True}
    query = """
    query GetPages($first: Int!, $after: String, $query: String, $sortKey: PageSortKeys, $reverse: Boolean) {
      pages(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {""" + PAGE_FIELDS + """          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class GetPageTool(GraphQLTool):
    name = "get_page"
    description = "Fetch a specific page by ID"
    input_schema = schema({"id": id_arg("Page")}, required=["id"])
    query = """
    query GetPage($id: ID!) {
      page(id: $id) {""" + PAGE_FIELDS + """      }
    }
    """


class CreatePageTool(GraphQLTool):
    name = "create_page"
    description = "Create a new online store page"
    input_schema = schema({
        "title": string("Page title"),
        "body": string("Page content (HTML or plain text)"),
        "handle": string("URL handle (auto-generated if not provided)"),
        "published": boolean("Publish the page immediately"),
    }, required=["title", "body"])
    defaults = {"published": False}
    query = """
    mutation PageCreate($input: PageCreateInput!) {
      pageCreate(input: $input) {
        page {
          id
          title
          handle
          body
          publishedAt
          createdAt
          isPublished
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        page = pick(args, "title", "body", "handle")
        if args["published"]:
            page["isPublished"] = True
        return {"input": page}


class UpdatePageTool(GraphQLTool):
    name = "update_page"
    description = "Update an existing page"
    input_schema = schema({
        "id": string("Page ID"),
        "title": string("Page title"),
        "body": string("Page content"),
        "handle": string("URL handle"),
        "published": boolean("Publish/unpublish the page"),
    }, required=["id"])
    query = """
    mutation PageUpdate($id: ID!, $input: PageUpdateInput!) {
      pageUpdate(id: $id, input: $input) {
        page {
          id
          title
          handle
          body
          publishedAt
          updatedAt
          isPublished
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "title", "body", "handle", isPublished="published")}


class DeletePageTool(GraphQLTool):
    name = "delete_page"
    description = "Delete a page"
    input_schema = schema({"id": string("Page ID to delete")}, required=["id"])
    query = """
    mutation PageDelete($id: ID!) {
      pageDelete(id: $id) {
        deletedPageId
        userErrors {
          field
          message
        }
      }
    }
    """
