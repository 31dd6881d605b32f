"""
Fulfillment constraint rule tools
"""

from typing import Any, Dict

from ..base import GraphQLTool, after_arg, first_arg, schema, string
from ..function_rules import RULE_FIELDS, metafield_inputs, rule_input


class GetFulfillmentConstraintRulesTool(GraphQLTool):
    name = "get_fulfillment_constraint_rules"
    description = "Fetch fulfillment constraint rules for the store"
    input_schema = schema({
        "first": first_arg("rules"),
        "after": after_arg(),
    })
    defaults = {"first": 50}
    query = """
    query GetFulfillmentConstraints($first: Int!, $after: String) {
      fulfillmentConstraintRules(first: $first, after: $after) {
        edges {
          node {""" + RULE_FIELDS + """          }
          cursor
        }
        pageInfo {
          hasNextPage
          hasPreviousPage
        }
      }
    }
    """


class CreateFulfillmentConstraintRuleTool(GraphQLTool):
    name = "create_fulfillment_constraint_rule"
    description = "Create a new fulfillment constraint rule using a Shopify Function"
    input_schema = schema({
        "functionId": string("ID of the fulfillment constraint function to use"),
        "metafields": metafield_inputs(),
    }, required=["functionId"])
    query = """
    mutation FulfillmentConstraintRuleCreate($input: FulfillmentConstraintRuleInput!) {
      fulfillmentConstraintRuleCreate(input: $input) {
        fulfillmentConstraintRule {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"input": rule_input(args, functionId=args["functionId"])}


class UpdateFulfillmentConstraintRuleTool(GraphQLTool):
    name = "update_fulfillment_constraint_rule"
    description = "Update an existing fulfillment constraint rule"
    input_schema = schema({
        "id": string("Fulfillment Constraint Rule ID"),
        "metafields": metafield_inputs("Updated configuration metafields"),
    }, required=["id"])
    query = """
    mutation FulfillmentConstraintRuleUpdate($id: ID!, $input: FulfillmentConstraintRuleInput!) {
      fulfillmentConstraintRuleUpdate(id: $id, input: $input) {
        fulfillmentConstraintRule {""" + RULE_FIELDS + """        }
        userErrors {
          field
          message
        }
      }
    }
    """

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"id": args["id"], "input": rule_input(args)}


class DeleteFulfillmentConstraintRuleTool(GraphQLTool):
    name = "delete_fulfillment_constraint_rule"
    description = "Delete a fulfillment constraint rule"
    input_schema = schema({"id": string("Fulfillment Constraint Rule ID to delete")}, required=["id"])
    query = """
    mutation FulfillmentConstraintRuleDelete($id: ID!) {
      fulfillmentConstraintRuleDelete(id: $id) {
        deletedFulfillmentConstraintRuleId
        userErrors {
          field
          message
        }
      }
    }
    """
