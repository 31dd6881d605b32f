"""
B2B company tools
"""

from typing import Any, Dict

from ..base import (
    GraphQLTool, after_arg, enum, first_arg, id_arg, obj, pick, query_arg,
    reverse_arg, schema, string,
)


def company_address(description: str) -> Dict[str, Any]:
    return obj({
        "address1": string("Street address"),
        "address2": string("Apartment, suite, etc."),
        "city": string("City"),
        "province": string("Province/State"),
        "country": string("Country"),
        "zip": string("ZIP/Postal code"),
        "phone": string("Phone number"),
    }, required=["address1", "city", "province", "country", "zip"], description=description)


class GetCompaniesTool(GraphQLTool):
    name = "get_companies"
    description = "Fetch B2B companies from the store"
    input_schema = schema({
        "first": first_arg("companies"),
        "after": after_arg(),
        "query": query_arg("Filter query (e.g., 'name:Acme')"),
        "sortKey": enum(["NAME", "CREATED_AT", "UPDATED_AT", "ID"], "Field to sort by"),
        "reverse": reverse_arg(),
    })
    defaults = {"first": 50, "sortKey": "NAME", "reverse": False}
    query = """
    query GetCompanies($first: Int!, $after: String, $query: String, $sortKey: CompanySortKeys, $reverse: Boolean) {
      companies(first: $first, after: $after, query: $query, sortKey: $sortKey, reverse: $reverse) {
        edges {
          node {
            id
            name
            externalId
            note
            createdAt
            updatedAt
            defaultCursor
            contactRoles(first: 10) {
              edges {
                node {
                  id
                  name
                }
              }
            }
            contacts(first: 10) {
              edges {
                node {
                  id
                  isMainContact
                  customer {
                    id
                    firstName
                    lastName
                    email
                    phone
                  }
                }
              }
            }
            locations(first: 10) {
              edges {
                node {
                  id
                  name
                  externalId
                  phone
                  locale
                  billingAddress {
                    address1
                    city
                    province
                    country
                    zip
                  }
                  shippingAddress {
                    address1
                    city
                    province
                    country
                    zip
                  }
                }
              }
            }
            orders(first: 5) {
              edges {
                node {
                  id
                  name
                  createdAt
                  totalPriceSet {
                    shopMoney {
                      amount
                      currencyCode
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


class GetCompanyTool(GraphQLTool):
    name = "get_company"
    description = "Fetch a specific B2B company by ID"
    input_schema = schema({"id": id_arg("Company")}, required=["id"])
    query = """
    query GetCompany($id: ID!) {
      company(id: $id) {
        id
        name
        externalId
        note
        createdAt
        updatedAt
        defaultCursor
        contactRoles(first: 20) {
          edges {
            node {
              id
              name
            }
          }
        }
        contacts(first: 50) {
          edges {
            node {
              id
              isMainContact
              locale
              customer {
                id
                firstName
                lastName
                email
                phone
              }
            }
          }
        }
        locations(first: 50) {
          edges {
            node {
              id
              name
              externalId
              phone
              locale
              billingAddress {
                address1
                address2
                city
                province
                country
                zip
                phone
              }
              shippingAddress {
                address1
                address2
                city
                province
                country
                zip
                phone
              }
              taxExemptions
            }
          }
        }
        orders(first: 20) {
          edges {
            node {
              id
              name
              createdAt
              displayFinancialStatus
              displayFulfillmentStatus
              totalPriceSet {
                shopMoney {
                  amount
                  currencyCode
                }
              }
            }
          }
        }
      }
    }
    """


class CreateCompanyTool(GraphQLTool):
    """Create a company, optionally with its main contact"""

    name = "create_company"
    description = "Create a new B2B company"
    input_schema = schema({
        "name": string("Company name"),
        "externalId": string("External ID for the company"),
        "note": string("Internal notes about the company"),
        "mainContact": obj({
            "firstName": string("Contact first name"),
            "lastName": string("Contact last name"),
            "email": string("Contact email", format="email"),
            "phone": string("Contact phone"),
        }, required=["firstName", "lastName", "email"], description="Main contact person for the company"),
    }, required=["name"])
    query = """
    mutation CompanyCreate($input: CompanyCreateInput!) {
      companyCreate(input: $input) {
        company {
          id
          name
          externalId
          note
          createdAt
          mainContact {
            id
            customer {
              id
              firstName
              lastName
              email
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
        company_input = {"company": pick(args, "name", "externalId", "note")}
        if args.get("mainContact"):
            company_input["companyContact"] = args["mainContact"]
        return {"input": company_input}


class UpdateCompanyTool(GraphQLTool):
    name = "update_company"
    description = "Update an existing B2B company"
    input_schema = schema({
        "id": string("Company ID"),
        "name": string("Company name"),
        "externalId": string("External ID for the company"),
        "note": string("Internal notes about the company"),
    }, required=["id"])
    query = """
    mutation CompanyUpdate($companyId: ID!, $input: CompanyInput!) {
      companyUpdate(companyId: $companyId, input: $input) {
        company {
          id
          name
          externalId
          note
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
        return {"companyId": args["id"], "input": pick(args, "name", "externalId", "note")}


class CreateCompanyLocationTool(GraphQLTool):
    name = "create_company_location"
    description = "Create a new location for a B2B company"
    input_schema = schema({
        "companyId": string("Company ID"),
        "name": string("Location name"),
        "externalId": string("External ID for the location"),
        "phone": string("Location phone number"),
        "locale": string("Location locale (e.g., 'en-US')"),
        "billingAddress": company_address("Billing address"),
        "shippingAddress": company_address("Shipping address (if different from billing)"),
    }, required=["companyId", "name", "billingAddress"])
    query = """
    mutation CompanyLocationCreate($companyId: ID!, $input: CompanyLocationInput!) {
      companyLocationCreate(companyId: $companyId, input: $input) {
        companyLocation {
          id
          name
          externalId
          phone
          locale
          billingAddress {
            address1
            city
            province
            country
            zip
          }
          shippingAddress {
            address1
            city
            province
            country
            zip
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
        location = pick(args, "name", "billingAddress", "externalId", "phone", "locale", "shippingAddress")
        return {"companyId": args["companyId"], "input": location}
