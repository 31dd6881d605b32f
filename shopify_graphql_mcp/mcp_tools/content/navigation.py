"""
Navigation menu tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, array, first_arg, obj, pick, schema, string


def menu_items(type_description: str) -> Dict[str, Any]:
    return array(obj({
        "title": string("Item title"),
        "url": string("Item URL"),
        "type": string(type_description),
    }, required=["title", "url"]), "Navigation items")


def menu_input(args: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    """Menu fields from ``keys``, plus the items when any were given"""
    menu = pick(args, *keys)
    if args.get("items"):
        menu["items"] = args["items"]
    return menu


MENU_RESULT = """
        navigation {
          id
          title
          handle
          items(first: 100) {
            edges {
              node {
                id
                title
                url
              }
            }
          }
        }
        userErrors {
          field
          message
        }
"""


class GetNavigationsTool(GraphQLTool):
    name = "get_navigations"
    description = "Fetch navigation menus for the online store"
    input_schema = schema({
        "first": first_arg("navigations"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetNavigations($first: Int!, $after: String) {
      navigations(first: $first, after: $after) {
        edges {
          node {
            id
            title
            handle
            items(first: 100) {
              edges {
                node {
                  id
                  title
                  url
                  type
                  items(first: 50) {
                    edges {
                      node {
                        id
                        title
                        url
                        type
                      }
                    }
                  }
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


class GetNavigationTool(GraphQLTool):
    name = "get_navigation"
    description = "Fetch a specific navigation menu by handle"
    input_schema = schema({
        "handle": string("Navigation handle (e.g., 'main-menu', 'footer')"),
    }, required=["handle"])
    query = """
    query GetNavigation($handle: String!) {
      navigation(handle: $handle) {
        id
        title
        handle
        items(first: 200) {
          edges {
            node {
              id
              title
              url
              type
              items(first: 100) {
                edges {
                  node {
                    id
                    title
                    url
                    type
                    items(first: 50) {
                      edges {
                        node {
                          id
                          title
                          url
                          type
                        }
                      }
                    }
                  }
                }
              }
            }
          }
        }
      }
    }
    """


class CreateNavigationTool(GraphQLTool):
    name = "create_navigation"
    description = "Create a new navigation menu"
    input_schema = schema({
        "title": string("Navigation title"),
        "handle": string("Unique handle (e.g., 'main-menu')"),
        "items": menu_items("Item type (e.g., 'link', 'product', 'collection')"),
    }, required=["title", "handle"])
    query = """
    mutation NavigationCreate($input: NavigationInput!) {
      navigationCreate(input: $input) {""" + MENU_RESULT + """      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": menu_input(args, "title", "handle")}


class UpdateNavigationTool(GraphQLTool):
    name = "update_navigation"
    description = "Update an existing navigation menu"
    input_schema = schema({
        "id": string("Navigation ID"),
        "title": string("Navigation title"),
        "items": menu_items("Item type"),
    }, required=["id"])
    query = """
    mutation NavigationUpdate($id: ID!, $input: NavigationInput!) {
      navigationUpdate(id: $id, input: $input) {""" + MENU_RESULT + """      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": menu_input(args, "title")}


class DeleteNavigationTool(GraphQLTool):
    name = "delete_navigation"
    description = "Delete a navigation menu"
    input_schema = schema({"id": string("Navigation ID to delete")}, required=["id"])
    query = """
    mutation NavigationDelete($id: ID!) {
      navigationDelete(id: $id) {
        deletedNavigationId
        userErrors {
          field
          message
        }
      }
    }
    """
