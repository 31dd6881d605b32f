"""
Inventory level tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, first_arg, integer, query_arg, schema, string


class GetInventoryTool(GraphQLTool):
    """List inventory items with their levels per location"""

    name = "get_inventory"
    description = "Fetch inventory levels for products"
    input_schema = schema({
        "query": query_arg("Filter query (e.g., 'sku:ESP-001')"),
        "first": first_arg("items"),
    })
    defaults = {"first": 50}
    query = """
    query GetInventory($first: Int!, $query: String) {
      inventoryItems(first: $first, query: $query) {
        edges {
          node {
            id
            sku
            tracked
            variant {
              id
              title
              product {
                id
                title
              }
            }
            inventoryLevels(first: 10) {
              edges {
                node {
                  id
                  quantities(names: ["available", "on_hand", "committed"]) {
                    name
                    quantity
                  }
                  location {
                    id
                    name
                  }
                }
              }
            }
          }
          cursor
        }
        pageInfo {
          hasNextPage
        }
      }
    }
    """


class AdjustInventoryTool(GraphQLTool):
    """Apply a relative change to available inventory"""

    name = "adjust_inventory"
    description = "Adjust inventory quantities"
    input_schema = schema({
        "inventoryItemId": string("Inventory item ID"),
        "locationId": string("Location ID"),
        "availableDelta": integer("Quantity adjustment (positive or negative)"),
        "reason": string("Reason for the adjustment (default: correction)"),
    }, required=["inventoryItemId", "locationId", "availableDelta"])
    defaults = {"reason": "correction"}
    query = """
    mutation InventoryAdjustQuantities($input: InventoryAdjustQuantitiesInput!) {
      inventoryAdjustQuantities(input: $input) {
        inventoryAdjustmentGroup {
          createdAt
          reason
          changes {
            name
            delta
            quantityAfterChange
            item {
              id
              sku
            }
            location {
              id
              name
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
        return {
            "input": {
                "reason": args["reason"],
                "name": "available",
                "changes": [{
                    "delta": args["availableDelta"],
                    "inventoryItemId": args["inventoryItemId"],
                    "locationId": args["locationId"],
                }],
            }
        }


class SetInventoryTool(GraphQLTool):
    """Set the absolute on-hand quantity"""

    name = "set_inventory"
    description = "Set on-hand inventory quantity"
    input_schema = schema({
        "inventoryItemId": string("Inventory item ID"),
        "locationId": string("Location ID"),
        "quantity": integer("New on-hand quantity", minimum=0),
    }, required=["inventoryItemId", "locationId", "quantity"])
    query = """
    mutation InventorySetOnHand($input: InventorySetOnHandQuantitiesInput!) {
      inventorySetOnHandQuantities(input: $input) {
        inventoryAdjustmentGroup {
          createdAt
          reason
          changes {
            name
            delta
            quantityAfterChange
            item {
              id
              sku
            }
            location {
              id
              name
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
        return {
            "input": {
                "reason": "correction",
                "setQuantities": [{
                    "inventoryItemId": args["inventoryItemId"],
                    "locationId": args["locationId"],
                    "quantity": args["quantity"],
                }],
            }
        }
