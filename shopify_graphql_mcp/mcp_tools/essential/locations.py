"""
Location tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, boolean, first_arg, id_arg, pick, query_arg, schema,
    string,
)

ADDRESS_FIELDS = ["address1", "address2", "city", "province", "country", "zip", "phone"]

ADDRESS_DESCRIPTIONS = {
    "address1": "Street address",
    "address2": "Apartment, suite, etc.",
    "city": "City",
    "province": "Province/State code (e.g., 'ON')",
    "country": "Country code (e.g., 'CA')",
    "zip": "ZIP/Postal code",
    "phone": "Phone number",
}


def address_properties() -> Dict[str, Any]:
    return {field: string(ADDRESS_DESCRIPTIONS[field]) for field in ADDRESS_FIELDS}


class GetLocationsTool(GraphQLTool):
    name = "get_locations"
    description = "Fetch store locations"
    input_schema = schema({
        "first": first_arg("locations"),
        "after": after_arg(),
        "query": query_arg(),
        "includeInactive": boolean("Include inactive locations"),
    })
    defaults = {"first": 50, "includeInactive": False}
    query = """
    query GetLocations($first: Int!, $after: String, $query: String, $includeInactive: Boolean) {
      locations(first: $first, after: $after, query: $query, includeInactive: $includeInactive) {
        edges {
          node {
            id
            name
            address {
              address1
              address2
              city
              province
              country
              zip
              phone
            }
            isActive
            isPrimary
            fulfillsOnlineOrders
            createdAt
            updatedAt
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


class GetLocationTool(GraphQLTool):
    name = "get_location"
    description = "Fetch a specific location by ID"
    input_schema = schema({"id": id_arg("Location")}, required=["id"])
    query = """
    query GetLocation($id: ID!) {
      location(id: $id) {
        id
        name
        address {
          address1
          address2
          city
          province
          country
          zip
          phone
        }
        isActive
        isPrimary
        fulfillsOnlineOrders
        createdAt
        updatedAt
        inventoryLevels(first: 20) {
          edges {
            node {
              id
              quantities(names: ["available", "on_hand"]) {
                name
                quantity
              }
              item {
                id
                sku
                variant {
                  id
                  title
                  product {
                    id
                    title
                  }
                }
              }
            }
          }
        }
      }
    }
    """


class CreateLocationTool(GraphQLTool):
    name = "create_location"
    description = "Create a new location"
    input_schema = schema({
        "name": string("Location name"),
        **address_properties(),
        "fulfillsOnlineOrders": boolean("Whether location fulfills online orders"),
    }, required=["name", "address1", "city", "province", "country", "zip"])
    defaults = {"fulfillsOnlineOrders": True}
    query = """
    mutation LocationAdd($input: LocationAddInput!) {
      locationAdd(input: $input) {
        location {
          id
          name
          address {
            address1
            address2
            city
            province
            country
            zip
            phone
          }
          isActive
          fulfillsOnlineOrders
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
        address = pick(args, *ADDRESS_FIELDS)
        # LocationAddAddressInput takes an ISO country code
        address["countryCode"] = address.pop("country")
        address["provinceCode"] = address.pop("province")
        return {
            "input": {
                "name": args["name"],
                "address": address,
                "fulfillsOnlineOrders": args["fulfillsOnlineOrders"],
            }
        }


class UpdateLocationTool(GraphQLTool):
    name = "update_location"
    description = "Update an existing location"
    input_schema = schema({
        "id": string("Location ID"),
        "name": string("Location name"),
        **address_properties(),
        "fulfillsOnlineOrders": boolean("Whether location fulfills online orders"),
    }, required=["id"])
    query = """
    mutation LocationEdit($id: ID!, $input: LocationEditInput!) {
      locationEdit(id: $id, input: $input) {
        location {
          id
          name
          address {
            address1
            address2
            city
            province
            country
            zip
            phone
          }
          isActive
          fulfillsOnlineOrders
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
        location = pick(args, "name", "fulfillsOnlineOrders")
        address = pick(args, *ADDRESS_FIELDS)
        if "country" in address:
            address["countryCode"] = address.pop("country")
        if "province" in address:
            address["provinceCode"] = address.pop("province")
        if address:
            location["address"] = address
        return {"id": args["id"], "input": location}
