"""
Sales channel tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, boolean, first_arg, id_arg, pick, schema, string

CHANNEL_APP = """
            app {
              id
              title
              handle
            }
"""


class GetChannelsTool(GraphQLTool):
    name = "get_channels"
    description = "Fetch sales channels for the store"
    input_schema = schema({
        "first": first_arg("channels"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetChannels($first: Int!, $after: String) {
      channels(first: $first, after: $after) {
        edges {
          node {
            id
            name
            handle""" + CHANNEL_APP + """            currencyCode
            published
            navigationItems(first: 10) {
              edges {
                node {
                  id
                  title
                  url
                  items(first: 5) {
                    edges {
                      node {
                        id
                        title
                        url
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


class GetChannelTool(GraphQLTool):
    name = "get_channel"
    description = "Fetch a specific sales channel by ID"
    input_schema = schema({"id": id_arg("Channel")}, required=["id"])
    query = """
    query GetChannel($id: ID!) {
      channel(id: $id) {
        id
        name
        handle""" + CHANNEL_APP + """        currencyCode
        published
        navigationItems(first: 20) {
          edges {
            node {
              id
              title
              url
              items(first: 10) {
                edges {
                  node {
                    id
                    title
                    url
                  }
                }
              }
            }
          }
        }
      }
    }
    """


class CreateChannelTool(GraphQLTool):
    name = "create_channel"
    description = "Create a new sales channel (requires app installation)"
    input_schema = schema({
        "name": string("Channel name"),
        "handle": string("Unique handle for the channel"),
        "currencyCode": string("Currency code (e.g., 'USD')"),
    }, required=["name", "handle"])
    query = """
    mutation ChannelCreate($input: ChannelInput!) {
      channelCreate(input: $input) {
        channel {
          id
          name
          handle
          currencyCode
          published
          createdAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": pick(args, "name", "handle", "currencyCode")}


class UpdateChannelTool(GraphQLTool):
    name = "update_channel"
    description = "Update an existing sales channel"
    input_schema = schema({
        "id": string("Channel ID"),
        "name": string("Channel name"),
        "handle": string("Unique handle for the channel"),
        "currencyCode": string("Currency code (e.g., 'USD')"),
        "published": boolean("Whether the channel is published"),
    }, required=["id"])
    query = """
    mutation ChannelUpdate($id: ID!, $input: ChannelInput!) {
      channelUpdate(id: $id, input: $input) {
        channel {
          id
          name
          handle
          currencyCode
          published
          updatedAt
        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": pick(args, "name", "handle", "currencyCode", "published")}


class DeleteChannelTool(GraphQLTool):
    name = "delete_channel"
    description = "Delete a sales channel"
    input_schema = schema({"id": string("Channel ID to delete")}, required=["id"])
    query = """
    mutation ChannelDelete($id: ID!) {
      channelDelete(id: $id) {
        deletedChannelId
        userErrors {
          field
          message
        }
      }
    }
    """
