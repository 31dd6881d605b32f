"""
Packing slip template tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, first_arg, pick, schema, string


class GetPackingSlipTemplatesTool(GraphQLTool):
    name = "get_packing_slip_templates"
    description = "Fetch packing slip templates"
    input_schema = schema({
        "first": first_arg("templates"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetPackingSlipTemplates($first: Int!, $after: String) {
      packingSlipTemplates(first: $first, after: $after) {
        edges {
          node {
            id
            name
            subject
            body
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


class CreatePackingSlipTemplateTool(GraphQLTool):
    name = "create_packing_slip_template"
    description = "Create a new packing slip template"
    input_schema = schema({
        "name": string("Template name"),
        "subject": string("Email subject"),
        "body": string("Template body (Liquid)"),
    }, required=["name", "subject", "body"])
    query = """
    mutation PackingSlipTemplateCreate($input: PackingSlipTemplateInput!) {
      packingSlipTemplateCreate(input: $input) {
        packingSlipTemplate {
          id
          name
          subject
          body
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
        return {"input": pick(args, "name", "subject", "body")}


class UpdatePackingSlipTemplateTool(GraphQLTool):
    name = "update_packing_slip_template"
    description = "Update an existing packing slip template"
    input_schema = schema({
        "id": string("Template ID"),
        "name": string("Template name"),
        "subject": string("Email subject"),
        "body": string("Template body (Liquid)"),
    }, required=["id"])
    query = """
    mutation PackingSlipTemplateUpdate($id: ID!, $input: PackingSlipTemplateInput!) {
      packingSlipTemplateUpdate(id: $id, input: $input) {
        packingSlipTemplate {
          id
          name
          subject
          body
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
        return {"id": args["id"], "input": pick(args, "name", "subject", "body")}


class DeletePackingSlipTemplateTool(GraphQLTool):
    name = "delete_packing_slip_template"
    description = "Delete a packing slip template"
    input_schema = schema({"id": string("Template ID to delete")}, required=["id"])
    query = """
    mutation PackingSlipTemplateDelete($id: ID!) {
      packingSlipTemplateDelete(id: $id) {
        deletedPackingSlipTemplateId
        userErrors {
          field
          message
        }
      }
    }
    """
