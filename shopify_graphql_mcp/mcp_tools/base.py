"""
Base classes for MCP tools
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)


def text_result(text: str, is_error: bool = False) -> Dict[str, Any]:
    """Wrap text as an MCP tool result"""
    return {
        "content": [{"type": "text", "text": text}],
        "isError": is_error
    }


def compact(values: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of ``values`` without the keys whose value is None"""
    return {key: value for key, value in values.items() if value is not None}


def pick(args: Dict[str, Any], *keys: str, **renames: str) -> Dict[str, Any]:
    """
    Select the provided arguments.

    ``pick(args, "title", "vendor", descriptionHtml="body")`` copies ``title``
    and ``vendor`` and copies ``body`` under the name ``descriptionHtml``;
    missing or None arguments are left out.
    """
    selected = {key: args.get(key) for key in keys}
    selected.update({target: args.get(source) for target, source in renames.items()})
    return compact(selected)


# JSON Schema builders

def string(description: str = "", **extra) -> Dict[str, Any]:
    return {"type": "string", "description": description, **extra}


def integer(description: str = "", minimum: Optional[int] = None, maximum: Optional[int] = None) -> Dict[str, Any]:
    return compact({"type": "integer", "description": description, "minimum": minimum, "maximum": maximum})


def number(description: str = "", minimum: Optional[float] = None, maximum: Optional[float] = None) -> Dict[str, Any]:
    return compact({"type": "number", "description": description, "minimum": minimum, "maximum": maximum})


def boolean(description: str = "") -> Dict[str, Any]:
    return {"type": "boolean", "description": description}


def enum(values: Iterable[str], description: str = "") -> Dict[str, Any]:
    return {"type": "string", "enum": list(values), "description": description}


def array(items: Dict[str, Any], description: str = "", min_items: Optional[int] = None) -> Dict[str, Any]:
    return compact({"type": "array", "items": items, "description": description, "minItems": min_items})


def obj(properties: Dict[str, Any], required: Iterable[str] = (), description: str = "",
        additional: bool = False) -> Dict[str, Any]:
    schema = {"type": "object", "properties": properties, "additionalProperties": additional}
    if required:
        schema["required"] = list(required)
    if description:
        schema["description"] = description
    return schema


def schema(properties: Optional[Dict[str, Any]] = None, required: Iterable[str] = ()) -> Dict[str, Any]:
    """Top level input schema of a tool"""
    result = {"type": "object", "properties": properties or {}}
    if required:
        result["required"] = list(required)
    return result


def first_arg(noun: str = "items", default: int = 50) -> Dict[str, Any]:
    return integer(f"Number of {noun} to fetch (1-250, default: {default})", minimum=1, maximum=250)


def after_arg() -> Dict[str, Any]:
    return string("Cursor for pagination")


def query_arg(description: str = "Filter query") -> Dict[str, Any]:
    return string(description)


def reverse_arg() -> Dict[str, Any]:
    return boolean("Reverse the sort order")


def id_arg(resource: str, description: str = "") -> Dict[str, Any]:
    return string(description or f"{resource} ID (e.g., 'gid://shopify/{resource}/123456789')")


_JSON_TYPES = {
    "string": str,
    "integer": int,
    "number": (int, float),
    "boolean": bool,
    "array": list,
    "object": dict,
}


def validate(value: Any, definition: Dict[str, Any], path: str) -> List[str]:
    """Check ``value`` against a (small subset of) JSON Schema"""
    problems = []
    expected = definition.get("type")
    python_type = _JSON_TYPES.get(expected)
    if python_type is not None:
        article = "an" if expected[0] in "aeiou" else "a"
        # bool is an int subclass
        if expected in ("integer", "number") and isinstance(value, bool):
            return [f"{path} must be {article} {expected}"]
        if not isinstance(value, python_type):
            return [f"{path} must be {article} {expected}"]

    if "enum" in definition and value not in definition["enum"]:
        problems.append(f"{path} must be one of: {', '.join(definition['enum'])}")
    if "minimum" in definition and value < definition["minimum"]:
        problems.append(f"{path} must be >= {definition['minimum']}")
    if "maximum" in definition and value > definition["maximum"]:
        problems.append(f"{path} must be <= {definition['maximum']}")

    if expected == "array":
        if "minItems" in definition and len(value) < definition["minItems"]:
            problems.append(f"{path} must contain at least {definition['minItems']} item(s)")
        item_definition = definition.get("items") or {}
        for index, item in enumerate(value):
            problems.extend(validate(item, item_definition, f"{path}[{index}]"))

    if expected == "object" and "properties" in definition:
        problems.extend(validate_object(value, definition, f"{path}."))

    return problems


def validate_object(values: Dict[str, Any], definition: Dict[str, Any], path: str = "") -> List[str]:
    problems = []
    properties = definition.get("properties", {})
    for key in definition.get("required", []):
        if values.get(key) is None:
            problems.append(f"Missing required argument: {path}{key}")
    for key, value in values.items():
        if value is None or key not in properties:
            continue
        problems.extend(validate(value, properties[key], f"{path}{key}"))
    return problems


class BaseMCPTool:
    """Base class for all MCP tools"""

    # Tool metadata
    name: str = ""
    description: str = ""
    context: str = ""  # Tool-specific context/instructions
    input_schema: Dict[str, Any] = {"type": "object", "properties": {}}

    def __init__(self):
        if not self.name:
            raise ValueError("Tool must have a name")

    async def execute(self, **kwargs) -> Any:
        """Execute the tool with given arguments"""
        raise NotImplementedError("Subclasses must implement execute()")


class ClientTool(BaseMCPTool):
    """A tool bound to the store's GraphQL client"""

    def __init__(self, client):
        super().__init__()
        self.client = client

    def check_arguments(self, kwargs: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """An error result if ``kwargs`` do not match the input schema, else None"""
        problems = validate_object(kwargs, self.input_schema)
        if problems:
            return text_result(f"Error: {'; '.join(problems)}", is_error=True)
        return None


class GraphQLTool(ClientTool):
    """
    A tool backed by a single GraphQL document.

    Subclasses declare ``query`` and ``input_schema`` and, when the variables
    are not simply the declared arguments, override ``build_variables``.
    """

    query: str = ""
    defaults: Dict[str, Any] = {}

    def __init__(self, client):
        if not self.query:
            raise ValueError(f"Tool {self.name} must declare a GraphQL query")
        super().__init__(client)

    def build_variables(self, args: Dict[str, Any]) -> Dict[str, Any]:
        """Variables for the query; by default the declared arguments that were given"""
        properties = self.input_schema.get("properties", {})
        return compact({key: args.get(key) for key in properties})

    def document(self, args: Dict[str, Any]) -> str:
        """The GraphQL document to send; tools choosing between mutations override this"""
        return self.query

    def present(self, data: Any, args: Dict[str, Any]) -> Any:
        """Shape the response data before it is returned"""
        return data

    async def execute(self, **kwargs) -> Dict[str, Any]:
        invalid = self.check_arguments(kwargs)
        if invalid:
            return invalid

        args = {**self.defaults, **compact(kwargs)}

        try:
            variables = self.build_variables(args)
            result = await self.client.execute(self.document(args), variables)
        except Exception as e:
            logger.error(f"{self.name} failed: {e}")
            return text_result(f"Error: {e}", is_error=True)

        if result.errors:
            return text_result(f"GraphQL Errors: {json.dumps(result.errors, indent=2)}", is_error=True)

        return text_result(json.dumps(self.present(result.data, args), indent=2))
