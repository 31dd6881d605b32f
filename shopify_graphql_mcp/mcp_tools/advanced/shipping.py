"""
Shipping and delivery tools
"""

from ..base import GraphQLTool, after_arg, first_arg, schema


class GetShippingZonesTool(GraphQLTool):
    name = "get_shipping_zones"
    description = "Fetch shipping zones from the Shopify store"
    input_schema = schema()
    query = """
    query GetShippingZones {
      shippingZones {
        edges {
          node {
            id
            name
            countries(first: 50) {
              edges {
                node {
                  id
                  name
                  code
                }
              }
            }
          }
        }
      }
    }
    """


class GetDeliveryProfilesTool(GraphQLTool):
    name = "get_delivery_profiles"
    description = "Fetch delivery profiles"
    input_schema = schema({
        "first": first_arg("profiles"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetDeliveryProfiles($first: Int!, $after: String) {
      deliveryProfiles(first: $first, after: $after) {
        edges {
          node {
            id
            name
            active
            locationGroups(first: 10) {
              edges {
                node {
                  id
                  locations(first: 10) {
                    edges {
                      node {
                        id
                        name
                      }
                    }
                  }
                }
              }
            }
            methods(first: 10) {
              edges {
                node {
                  id
                  name
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


class GetDeliveryCarriersTool(GraphQLTool):
    name = "get_delivery_carriers"
    description = "Fetch delivery carrier services"
    input_schema = schema({
        "first": first_arg("carriers"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetDeliveryCarriers($first: Int!, $after: String) {
      carrierServices(first: $first, after: $after) {
        edges {
          node {
            id
            name
            active
            serviceName
            format
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


class GetShippingCountriesTool(GraphQLTool):
    name = "get_shipping_countries"
    description = "Fetch available shipping countries"
    input_schema = schema()
    query = """
    query GetShippingCountries {
      countries(first: 250) {
        edges {
          node {
            id
            name
            code
            currencyCode
            provinces(first: 50) {
              edges {
                node {
                  id
                  name
                  code
                }
              }
            }
          }
        }
      }
    }
    """
