"""
Customer tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, array, boolean, enum, first_arg, id_arg, obj, pick,
    query_arg, reverse_arg, schema, string,
)


class GetCustomersTool(GraphQLTool):
    """List customers with optional filtering"""

    name = "get_customers"
    description = "Fetch customers from the Shopify store with optional filtering"
    input_schema = schema({
        "first": first_arg("customers"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'email:customer@example.com', 'name:John')"),
        "sortKey": enum(["CREATED_AT", "UPDATED_AT", "LAST_ORDER_DATE", "TOTAL_SPENT", "ID"],
                        "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "CREATED_AT", "reverse": True}
    query = """
    query GetCustomers($first: Int!, $after: String, $query: String, $sortKey: CustomerSortKeys, $reverse: Boolean) {
      customers(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            firstName
            lastName
            email
            phone
            createdAt
            updatedAt
            state
            verifiedEmail
            numberOfOrders
            amountSpent {
              amount
              currencyCode
            }
            defaultAddress {
              address1
              city
              province
              country
              zip
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


class GetCustomerTool(GraphQLTool):
    """Fetch one customer with addresses, recent orders and metafields"""

    name = "get_customer"
    description = "Fetch a specific customer by ID"
    input_schema = schema({"id": id_arg("Customer")}, required=["id"])
    query = """
    query GetCustomer($id: ID!) {
      customer(id: $id) {
        id
        firstName
        lastName
        email
        phone
        createdAt
        updatedAt
        state
        verifiedEmail
        numberOfOrders
        amountSpent {
          amount
          currencyCode
        }
        defaultAddress {
          id
          address1
          address2
          city
          province
          country
          zip
          phone
        }
        addresses(first: 10) {
          id
          address1
          address2
          city
          province
          country
          zip
          phone
        }
        orders(first: 10) {
          edges {
            node {
              id
              name
              createdAt
              displayFinancialStatus
              totalPriceSet {
                shopMoney {
                  amount
                  currencyCode
                }
              }
            }
          }
        }
        metafields(first: 10) {
          edges {
            node {
              id
              namespace
              key
              value
              type
            }
          }
        }
      }
    }
    """


ADDRESS = obj({
    "address1": string(),
    "address2": string(),
    "city": string(),
    "province": string(),
    "country": string(),
    "zip": string(),
    "phone": string(),
}, required=["address1", "city", "country", "zip"])


class CreateCustomerTool(GraphQLTool):
    """Create a customer"""

    name = "create_customer"
    description = "Create a new customer in the Shopify store"
    input_schema = schema({
        "email": string("Customer email", format="email"),
        "firstName": string("Customer first name"),
        "lastName": string("Customer last name"),
        "phone": string("Customer phone"),
        "acceptsMarketing": boolean("Whether customer accepts marketing"),
        "addresses": array(ADDRESS, "Customer addresses"),
    }, required=["email"])
    query = """
    mutation CustomerCreate($input: CustomerInput!) {
      customerCreate(input: $input) {
        customer {
          id
          firstName
          lastName
          email
          phone
          createdAt
          state
          verifiedEmail
          emailMarketingConsent {
            marketingState
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
        customer = pick(args, "email", "firstName", "lastName", "phone", "addresses")
        if args.get("acceptsMarketing") is not None:
            customer["emailMarketingConsent"] = marketing_consent(args["acceptsMarketing"])
        return {"input": customer}


class UpdateCustomerTool(GraphQLTool):
    """Update customer fields"""

    name = "update_customer"
    description = "Update an existing customer"
    input_schema = schema({
        "id": id_arg("Customer"),
        "email": string("Customer email", format="email"),
        "firstName": string("Customer first name"),
        "lastName": string("Customer last name"),
        "phone": string("Customer phone"),
        "acceptsMarketing": boolean("Whether customer accepts marketing"),
    }, required=["id"])
    query = """
    mutation CustomerUpdate($input: CustomerInput!) {
      customerUpdate(input: $input) {
        customer {
          id
          firstName
          lastName
          email
          phone
          updatedAt
          emailMarketingConsent {
            marketingState
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
        customer = pick(args, "id", "email", "firstName", "lastName", "phone")
        if args.get("acceptsMarketing") is not None:
            customer["emailMarketingConsent"] = marketing_consent(args["acceptsMarketing"])
        return {"input": customer}


class DeleteCustomerTool(GraphQLTool):
    name = "delete_customer"
    description = "Delete a customer from the store"
    input_schema = schema({"id": id_arg("Customer")}, required=["id"])
    query = """
    mutation CustomerDelete($input: CustomerDeleteInput!) {
      customerDelete(input: $input) {
        deletedCustomerId
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": {"id": args["id"]}}


def marketing_consent(accepts: bool) -> Dict[str, Any]:
    # CustomerInput no longer takes acceptsMarketing
    return {"marketingState": "SUBSCRIBED" if accepts else "UNSUBSCRIBED"}
