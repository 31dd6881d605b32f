"""
Audit and customer event tools
"""

from ..base import GraphQLTool, after_arg, enum, first_arg, query_arg, reverse_arg, schema, string

SORT_KEYS = ["CREATED_AT", "ID"]


class GetAuditEventsTool(GraphQLTool):
    name = "get_audit_events"
    description = "Fetch audit events for the store (staff actions, app installations, etc.)"
    input_schema = schema({
        "first": first_arg("events"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'action:product_create', 'author:user@example.com')"),
        "sortKey": enum(SORT_KEYS, "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetAuditEvents($first: Int!, $after: String, $query: String, $sortKey: AuditEventSortKeys, $reverse: Boolean) {
      auditEvents(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            createdAt
            action
            description
            category
            author {
              id
              firstName
              lastName
              email
            }
            subject {
              id
              type
              title
            }
            arguments {
              key
              value
            }
            shop {
              id
              name
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


class GetCustomerEventsTool(GraphQLTool):
    name = "get_customer_events"
    description = "Fetch customer events (page views, product views, searches, etc.)"
    input_schema = schema({
        "first": first_arg("events"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'customer_id:123456789', 'event_type:page_view')"),
        "sortKey": enum(SORT_KEYS, "Field to sort by"),
        "reverse": reverse_arg(),
        "occurredAtMin": string("Minimum occurrence date (ISO format)"),
        "occurredAtMax": string("Maximum occurrence date (ISO format)"),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetCustomerEvents($first: Int!, $after: String, $query: String, $sortKey: CustomerEventSortKeys, $reverse: Boolean, $occurredAtMin: DateTime, $occurredAtMax: DateTime) {
      customerEvents(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse, occurredAtMin: $occurredAtMin, occurredAtMax: $occurredAtMax) {
        edges {
          node {
            id
            createdAt
            occurredAt
            eventType
            customerJourneySummary {
              customerVisit {
                id
                landingPage
                landingPageHtml
                referralCode
                referralInfoHtml
                source
                sourceDescription
                sourceType
                utmParameters {
                  campaign
                  content
                  medium
                  source
                  term
                }
              }
            }
            shop {
              id
              name
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
