"""
Marketing event and campaign tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, enum, first_arg, id_arg, number, pick, query_arg,
    reverse_arg, schema, string,
)

BUDGET_TYPES = ["daily", "monthly", "total"]


class GetMarketingEventsTool(GraphQLTool):
    name = "get_marketing_events"
    description = "Fetch marketing events for the store"
    input_schema = schema({
        "first": first_arg("events"),
        "after": after_arg(),
        "query": query_arg(),
        "sortKey": enum(["CREATED_AT", "UPDATED_AT", "ID", "START_DATE"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetMarketingEvents($first: Int!, $after: String, $query: String, $sortKey: MarketingEventSortKeys, $reverse: Boolean) {
      marketingEvents(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            name
            eventType
            description
            startDate
            endDate
            status
            createdAt
            updatedAt
            budget
            budgetType
            channel {
              id
              name
            }
            marketingActivityEngagements {
              totalEngagements
              clicks
              impressions
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


class GetMarketingEventTool(GraphQLTool):
    name = "get_marketing_event"
    description = "Fetch a specific marketing event by ID"
    input_schema = schema({"id": id_arg("MarketingEvent")}, required=["id"])
    query = """
    query GetMarketingEvent($id: ID!) {
      marketingEvent(id: $id) {
        id
        name
        eventType
        description
        startDate
        endDate
        status
        createdAt
        updatedAt
        budget
        budgetType
        channel {
          id
          name
        }
        marketingActivities(first: 20) {
          edges {
            node {
              id
              name
              status
              target
              url
            }
          }
        }
        marketingActivityEngagements {
          totalEngagements
          clicks
          impressions
        }
      }
    }
    """


class CreateMarketingEventTool(GraphQLTool):
    name = "create_marketing_event"
    description = "Create a new marketing event"
    input_schema = schema({
        "name": string("Event name"),
        "eventType": string("Event type (e.g., 'email', 'social', 'display')"),
        "description": string("Event description"),
        "startDate": string("Start date (ISO 8601 format)"),
        "endDate": string("End date (ISO 8601 format)"),
        "channelId": string("Channel ID"),
        "budget": number("Budget amount"),
        "budgetType": enum(BUDGET_TYPES, "Budget type"),
    }, required=["name", "eventType", "startDate"])
    query = """
    mutation MarketingEventCreate($input: MarketingEventInput!) {
      marketingEventCreate(input: $input) {
        marketingEvent {
          id
          name
          eventType
          startDate
          endDate
          status
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
        event = pick(args, "name", "eventType", "startDate", "description", "endDate", "channelId", "budgetType")
        # a zero budget is left unset
        if args.get("budget"):
            event["budget"] = args["budget"]
        return {"input": event}


class UpdateMarketingEventTool(GraphQLTool):
    name = "update_marketing_event"
    description = "Update an existing marketing event"
    input_schema = schema({
        "id": string("Marketing Event ID"),
        "name": string("Event name"),
        "description": string("Event description"),
        "startDate": string("Start date"),
        "endDate": string("End date"),
        "status": enum(["active", "scheduled", "completed", "draft"], "Event status"),
        "budget": number("Budget amount"),
        "budgetType": enum(BUDGET_TYPES, "Budget type"),
    }, required=["id"])
    query = """
    mutation MarketingEventUpdate($id: ID!, $input: MarketingEventInput!) {
      marketingEventUpdate(id: $id, input: $input) {
        marketingEvent {
          id
          name
          eventType
          status
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
        changes = pick(args, "name", "description", "startDate", "endDate", "status", "budget", "budgetType")
        return {"id": args["id"], "input": changes}


class DeleteMarketingEventTool(GraphQLTool):
    name = "delete_marketing_event"
    description = "Delete a marketing event"
    input_schema = schema({"id": string("Marketing Event ID to delete")}, required=["id"])
    query = """
    mutation MarketingEventDelete($id: ID!) {
      marketingEventDelete(id: $id) {
        deletedMarketingEventId
        userErrors {
          field
          message
        }
      }
    }
    """


class GetMarketingIntegratedCampaignsTool(GraphQLTool):
    name = "get_marketing_integrated_campaigns"
    description = "Fetch marketing integrated campaigns"
    input_schema = schema({
        "first": first_arg("campaigns"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetMarketingIntegratedCampaigns($first: Int!, $after: String) {
      marketingIntegratedCampaigns(first: $first, after: $after) {
        edges {
          node {
            id
            name
            status
            startDate
            endDate
            channel {
              id
              name
            }
            createdAt
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
