"""Map OpenAPI schemas to Unreal C++ type names.

Handles:
- Boolean schemas (true -> any, false -> never)
- $ref (struct name from the last path segment, siblings ignored)
- OpenAPI 3.1 nullable unions (type: [T, "null"])
- integer width by format (int64, uint, default int32)
- arrays, recursively
- everything else degrades to the generic struct type
"""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidInputShape
from .schema_node import (
    AnySchema,
    Array,
    NeverSchema,
    Nullable,
    Primitive,
    Reference,
    SchemaNode,
    parse_schema,
)

ANY_TYPE = "FInstancedStruct"
NEVER_TYPE = "void*"
STRUCT_PREFIX = "F"

_PRIMITIVE_TYPES: dict[str, str] = {
    "string": "FString",
    "number": "float",
    "boolean": "bool",
}

# Closed policy: no other integer formats are inferred.
_INTEGER_FORMATS: dict[str, str] = {
    "int64": "int64",
    "uint": "uint8",
}
_DEFAULT_INTEGER = "int32"


def struct_name(name: str) -> str:
    """Apply the struct naming convention to a component name."""
    return f"{STRUCT_PREFIX}{name}"


def array_type(inner: str) -> str:
    return f"TArray<{inner}>"


def _resolve_node(node: SchemaNode) -> str:
    if isinstance(node, AnySchema):
        return ANY_TYPE
    if isinstance(node, NeverSchema):
        return NEVER_TYPE
    if isinstance(node, Reference):
        return struct_name(node.name)
    if isinstance(node, Nullable):
        return _resolve_node(node.effective)
    if isinstance(node, Primitive):
        if node.kind == "integer":
            return _INTEGER_FORMATS.get(node.format, _DEFAULT_INTEGER)
        return _PRIMITIVE_TYPES.get(node.kind, ANY_TYPE)
    if isinstance(node, Array):
        if node.items is None:
            return array_type(ANY_TYPE)
        return array_type(_resolve_node(node.items))
    return ANY_TYPE


def resolve_schema_type(schema: Any) -> str:
    """Resolve a schema (raw value or SchemaNode) to a C++ type string."""
    return _resolve_node(parse_schema(schema))


def is_required(prop_name: Any, required_list: Any) -> bool:
    """Check whether a property name appears in a schema's required list."""
    if not isinstance(prop_name, str):
        raise InvalidInputShape("is_required expects a property name string as input")
    if not isinstance(required_list, list):
        raise InvalidInputShape("is_required requires 'required_list' to be an array")
    return prop_name in required_list


def parse_parameters(parameters: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Describe path and query parameters as typed call arguments.

    Header and cookie parameters are not part of the call signature.
    """
    args: list[dict[str, Any]] = []
    for param in parameters:
        location = param.get("in")
        if location not in ("path", "query"):
            continue
        args.append({
            "name": param["name"],
            "location": location,
            "type": resolve_schema_type(param.get("schema", True)),
            "required": location == "path" or bool(param.get("required", False)),
        })
    return args
