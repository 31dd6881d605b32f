"""
Installed app and app proxy tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, enum, first_arg, id_arg, pick, reverse_arg, schema, string

PROXY_PREFIXES = ["apps", "a", "community", "tools"]

PRICING_PLAN = """
        shopPricingPlan {
          name
          price {
            amount
            currencyCode
          }
        }
"""

PROXY_RESULT = """
        appProxy {
          id
          url
          subPath
          subPathPrefix
        }
        userErrors {
          field
          message
        }
"""


class GetAppsTool(GraphQLTool):
    name = "get_apps"
    description = "Fetch installed apps for the store"
    input_schema = schema({
        "first": first_arg("apps"),
        "after": after_arg(),
        "sortKey": enum(["TITLE", "INSTALL_DATE", "ID"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "INSTALL_DATE", "reverse": True}
    query = """
    query GetApps($first: Int!, $after: String, $sortKey: AppSortKeys, $reverse: Boolean) {
      apps(first: $first, after: $after, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            title
            handle
            developerName
            developerType
            installedAt
            uninstallMessage
            pricingDetails""" + PRICING_PLAN + """            appStoreAppUrl
            webhookSubscriptions(first: 10) {
              edges {
                node {
                  id
                  topic
                  includeFields
                  filter
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


class GetAppTool(GraphQLTool):
    name = "get_app"
    description = "Fetch a specific installed app by ID"
    input_schema = schema({"id": id_arg("App")}, required=["id"])
    query = """
    query GetApp($id: ID!) {
      app(id: $id) {
        id
        title
        handle
        developerName
        developerType
        installedAt
        updatedAt
        description
        appStoreAppUrl
        privacyPolicyUrl
        termsOfServiceUrl
        supportEmail
        supportUrl
        features
        pricingDetails""" + PRICING_PLAN + """        webhookSubscriptions(first: 50) {
          edges {
            node {
              id
              topic
              includeFields
              filter
              callbackUrl
            }
          }
        }
        appProxy {
          url
          subPath
          subPathPrefix
        }
      }
    }
    """


class GetAppProxyTool(GraphQLTool):
    name = "get_app_proxy"
    description = "Fetch app proxy configuration for the store"
    input_schema = schema()
    query = """
    query GetAppProxies {
      shop {
        id
        name
        appProxies(first: 50) {
          edges {
            node {
              id
              app {
                id
                title
                handle
              }
              url
              subPath
              subPathPrefix
            }
          }
        }
      }
    }
    """


class CreateAppProxyTool(GraphQLTool):
    name = "create_app_proxy"
    description = "Create an app proxy for an app (requires app management permissions)"
    input_schema = schema({
        "appId": string("App ID"),
        "url": string("Proxy URL"),
        "subPath": string("Sub-path for the proxy"),
        "subPathPrefix": enum(PROXY_PREFIXES, "Sub-path prefix"),
    }, required=["appId", "url", "subPath", "subPathPrefix"])
    query = """
    mutation AppProxyCreate($appId: ID!, $input: AppProxyInput!) {
      appProxyCreate(appId: $appId, input: $input) {""" + PROXY_RESULT + """      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"appId": args["appId"], "input": pick(args, "url", "subPath", "subPathPrefix")}


class UpdateAppProxyTool(GraphQLTool):
    name = "update_app_proxy"
    description = "Update an app proxy configuration"
    input_schema = schema({
        "id": string("App Proxy ID"),
        "url": string("Proxy URL"),
        "subPath": string("Sub-path for the proxy"),
        "subPathPrefix": enum(PROXY_PREFIXES, "Sub-path prefix"),
    }, required=["id"])
    query = """
    mutation AppProxyUpdate($id: ID!, $input: AppProxyInput!) {
      appProxyUpdate(id: $id, input: $input) {""" + PROXY_RESULT + """      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "url", "subPath", "subPathPrefix")}


class DeleteAppProxyTool(GraphQLTool):
    name = "delete_app_proxy"
    description = "Delete an app proxy"
    input_schema = schema({"id": string("App Proxy ID to delete")}, required=["id"])
    query = """
    mutation AppProxyDelete($id: ID!) {
      appProxyDelete(id: $id) {
        deletedAppProxyId
        userErrors {
          field
          message
        }
      }
    }
    """
