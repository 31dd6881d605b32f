"""
Shared pieces for tools that manage Shopify Function backed rules
(fulfillment constraints, delivery customizations, validations, ...)
"""

from typing import Any, Dict

from .base import array, obj, string

# Selection of a rule's function and its configuration metafields
RULE_FIELDS = """
          id
          functionId
          metafields(first: 10) {
            edges {
              node {
                id
                namespace
                key
                value
              }
            }
          }
"""


def metafield_inputs(description: str = "Configuration metafields for the function") -> Dict[str, Any]:
    return array(obj({
        "namespace": string("Metafield namespace"),
        "key": string("Metafield key"),
        "value": string("Metafield value"),
        "type": string("Metafield type"),
    }, required=["namespace", "key", "value", "type"]), description)


def rule_input(args: Dict[str, Any], **fields: Any) -> Dict[str, Any]:
    """Rule input from ``fields`` plus the metafields, when any were given"""
    result = dict(fields)
    if args.get("metafields"):
        result["metafields"] = args["metafields"]
    return result
