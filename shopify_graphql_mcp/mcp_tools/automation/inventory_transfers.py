"""
Inventory transfer tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, enum, first_arg, id_arg, pick, query_arg, reverse_arg, schema, string
from .inventory_shipments import (
    ITEM_PRODUCT, ITEM_PRODUCT_VARIANTS, MOVED_QUANTITIES, SORT_KEYS, item_quantities,
)


def location_with_address(*address_fields: str) -> str:
    return """
              id
              name
              address {
%s
              }
""" % "\n".join(" " * 16 + field for field in address_fields)


SHORT_LOCATION = location_with_address("address1", "city", "province", "country", "zip")
FULL_LOCATION = location_with_address("address1", "address2", "city", "province", "country", "zip")

TRANSFER_DATES = """
        id
        status
        createdAt
        updatedAt
        completedAt
        sentAt
        receivedAt
"""


class GetInventoryTransfersTool(GraphQLTool):
    name = "get_inventory_transfers"
    description = "Fetch inventory transfers between locations"
    input_schema = schema({
        "first": first_arg("transfers"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'status:pending', 'item:sku123')"),
        "sortKey": enum(SORT_KEYS, "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetInventoryTransfers($first: Int!, $after: String, $query: String, $sortKey: InventoryTransferSortKeys, $reverse: Boolean) {
      inventoryTransfers(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {""" + TRANSFER_DATES + """
            originLocation {""" + SHORT_LOCATION + """            }
            destinationLocation {""" + SHORT_LOCATION + """            }
            lineItems(first: 50) {
              edges {
                node {""" + MOVED_QUANTITIES + ITEM_PRODUCT + """                }
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


class GetInventoryTransferTool(GraphQLTool):
    name = "get_inventory_transfer"
    description = "Fetch a specific inventory transfer by ID"
    input_schema = schema({"id": id_arg("InventoryTransfer")}, required=["id"])
    query = """
    query GetInventoryTransfer($id: ID!) {
      inventoryTransfer(id: $id) {""" + TRANSFER_DATES + """
        originLocation {""" + FULL_LOCATION + """        }
        destinationLocation {""" + FULL_LOCATION + """        }
        lineItems(first: 100) {
          edges {
            node {""" + MOVED_QUANTITIES + ITEM_PRODUCT_VARIANTS + """            }
          }
        }
      }
    }
    """


class CreateInventoryTransferTool(GraphQLTool):
    name = "create_inventory_transfer"
    description = "Create a new inventory transfer between locations"
    input_schema = schema({
        "originLocationId": string("Origin location ID"),
        "destinationLocationId": string("Destination location ID"),
        "lineItems": item_quantities("to transfer", "Line items to transfer"),
    }, required=["originLocationId", "destinationLocationId", "lineItems"])
    query = """
    mutation InventoryTransferCreate($input: InventoryTransferCreateInput!) {
      inventoryTransferCreate(input: $input) {
        inventoryTransfer {
          id
          status
          createdAt
          originLocation {
            id
            name
          }
          destinationLocation {
            id
            name
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
        return {"input": pick(args, "originLocationId", "destinationLocationId", "lineItems")}


class ReceiveInventoryTransferTool(GraphQLTool):
    name = "receive_inventory_transfer"
    description = "Receive items from an inventory transfer"
    input_schema = schema({
        "transferId": string("Inventory Transfer ID"),
        "lineItems": item_quantities("received", "Line items to receive"),
    }, required=["transferId", "lineItems"])
    query = """
    mutation InventoryTransferReceive($id: ID!, $input: InventoryTransferReceiveInput!) {
      inventoryTransferReceive(id: $id, input: $input) {
        inventoryTransfer {
          id
          status
          completedAt
          receivedAt
          lineItems(first: 50) {
            edges {
              node {
                id
                receivedQuantity
              }
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
        return {"id": args["transferId"], "input": {"lineItems": args["lineItems"]}}
