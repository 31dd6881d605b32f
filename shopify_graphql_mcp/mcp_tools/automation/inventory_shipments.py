"""
Inventory shipment tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, enum, first_arg, id_arg, integer, obj, pick,
    query_arg, reverse_arg, schema, string,
)

SORT_KEYS = ["CREATED_AT", "UPDATED_AT", "ID"]

ITEM_PRODUCT = """
                inventoryItem {
                  id
                  sku
                  product {
                    id
                    title
                  }
                }
"""

ITEM_PRODUCT_VARIANTS = """
                inventoryItem {
                  id
                  sku
                  product {
                    id
                    title
                    variants(first: 10) {
                      edges {
                        node {
                          id
                          title
                        }
                      }
                    }
                  }
                }
"""

MOVED_QUANTITIES = """
                id
                sku
                quantity
                expectedQuantity
                receivedQuantity
"""

SHIPMENT_ADDRESS = """
              id
              address1
              address2
              city
              province
              country
              zip
              name
"""


def item_quantities(verb: str, description: str) -> Dict[str, Any]:
    """Schema of a non-empty list of inventory items and quantities"""
    return array(obj({
        "inventoryItemId": string("Inventory item ID"),
        "quantity": integer(f"Quantity {verb}", minimum=1),
    }, required=["inventoryItemId", "quantity"]), description, min_items=1)


class GetInventoryShipmentsTool(GraphQLTool):
    name = "get_inventory_shipments"
    description = "Fetch inventory shipments for the store"
    input_schema = schema({
        "first": first_arg("shipments"),
        "after": after_arg(),
        "query": query_arg(),
        "sortKey": enum(SORT_KEYS, "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetInventoryShipments($first: Int!, $after: String, $query: String, $sortKey: InventoryShipmentSortKeys, $reverse: Boolean) {
      inventoryShipments(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            status
            createdAt
            updatedAt
            completedAt
            displayName
            origin {""" + SHIPMENT_ADDRESS + """            }
            destination {""" + SHIPMENT_ADDRESS + """            }
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


class GetInventoryShipmentTool(GraphQLTool):
    name = "get_inventory_shipment"
    description = "Fetch a specific inventory shipment by ID"
    input_schema = schema({"id": id_arg("InventoryShipment")}, required=["id"])
    query = """
    query GetInventoryShipment($id: ID!) {
      inventoryShipment(id: $id) {
        id
        status
        createdAt
        updatedAt
        completedAt
        displayName
        origin {""" + SHIPMENT_ADDRESS + """        }
        destination {""" + SHIPMENT_ADDRESS + """        }
        lineItems(first: 100) {
          edges {
            node {""" + MOVED_QUANTITIES + ITEM_PRODUCT_VARIANTS + """            }
          }
        }
      }
    }
    """


class CreateInventoryShipmentTool(GraphQLTool):
    name = "create_inventory_shipment"
    description = "Create a new inventory shipment"
    input_schema = schema({
        "originLocationId": string("Origin location ID"),
        "destinationLocationId": string("Destination location ID"),
        "lineItems": item_quantities("to ship", "Line items to ship"),
        "displayName": string("Display name for the shipment"),
    }, required=["originLocationId", "destinationLocationId", "lineItems"])
    query = """
    mutation InventoryShipmentCreate($input: InventoryShipmentCreateInput!) {
      inventoryShipmentCreate(input: $input) {
        inventoryShipment {
          id
          status
          displayName
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
        return {"input": pick(args, "originLocationId", "destinationLocationId", "lineItems", "displayName")}


class ReceiveInventoryShipmentTool(GraphQLTool):
    name = "receive_inventory_shipment"
    description = "Receive items from an inventory shipment"
    input_schema = schema({
        "shipmentId": string("Inventory Shipment ID"),
        "lineItems": item_quantities("received", "Line items to receive"),
    }, required=["shipmentId", "lineItems"])
    query = """
    mutation InventoryShipmentReceive($id: ID!, $input: InventoryShipmentReceiveInput!) {
      inventoryShipmentReceive(id: $id, input: $input) {
        inventoryShipment {
          id
          status
          completedAt
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
        return {"id": args["shipmentId"], "input": {"lineItems": args["lineItems"]}}


class GetInventoryShipmentsReceivedItemsTool(GraphQLTool):
    name = "get_inventory_shipments_received_items"
    description = "Fetch inventory items received in shipments"
    input_schema = schema({
        "first": first_arg("items"),
        "after": after_arg(),
        "inventoryItemId": string("Filter by inventory item ID"),
    })
    defaults = {"first": 50}
    query = """
    query GetInventoryShipmentsReceivedItems($first: Int!, $after: String, $inventoryItemId: ID) {
      inventoryShipmentsReceivedItems(first: $first, after: $after, inventoryItemId: $inventoryItemId) {
        edges {
          node {
            id""" + ITEM_PRODUCT + """            shipment {
              id
              status
              displayName
            }
            quantity
            receivedAt
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
