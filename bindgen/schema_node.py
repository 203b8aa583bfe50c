"""Tagged representation of OpenAPI schema fragments.

parse_schema() turns a raw JSON/YAML value into one of a closed set of
variants so the type resolver can dispatch on shape instead of probing keys:

  true                      -> AnySchema
  false                     -> NeverSchema
  {"$ref": "..."}           -> Reference (siblings ignored)
  {"type": "string"}        -> Primitive
  {"type": "array", ...}    -> Array
  {"type": ["T", "null"]}   -> Nullable
  anything else             -> ObjectSchema
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

PRIMITIVE_KINDS = ("string", "integer", "number", "boolean")


@dataclass(frozen=True)
class AnySchema:
    pass


@dataclass(frozen=True)
class NeverSchema:
    pass


@dataclass(frozen=True)
class Reference:
    path: str

    @property
    def name(self) -> str:
        """Last path segment of the reference, e.g. 'Character'."""
        return self.path.split("/")[-1]


@dataclass(frozen=True)
class Primitive:
    kind: str
    format: str | None = None


@dataclass(frozen=True)
class Array:
    items: SchemaNode | None = None


@dataclass(frozen=True)
class ObjectSchema:
    pass


@dataclass(frozen=True)
class Nullable:
    """OpenAPI 3.1 union form, ``type: [T, "null"]``.

    ``candidates`` holds the non-null tags in document order. format and
    items are carried so a single candidate resolves like the plain form.
    """

    candidates: tuple[str, ...]
    format: str | None = None
    items: SchemaNode | None = None

    @property
    def effective(self) -> SchemaNode:
        if len(self.candidates) != 1:
            return ObjectSchema()
        return _from_tag(self.candidates[0], self.format, self.items)


SchemaNode = Union[AnySchema, NeverSchema, Reference, Primitive, Array, ObjectSchema, Nullable]

SCHEMA_NODE_TYPES = (AnySchema, NeverSchema, Reference, Primitive, Array, ObjectSchema, Nullable)


def _from_tag(tag: str, fmt: str | None, items: SchemaNode | None) -> SchemaNode:
    if tag in PRIMITIVE_KINDS:
        return Primitive(tag, fmt)
    if tag == "array":
        return Array(items)
    return ObjectSchema()


def parse_schema(raw: Any) -> SchemaNode:
    """Build a SchemaNode from a raw schema value. Never fails."""
    if isinstance(raw, SCHEMA_NODE_TYPES):
        return raw
    if isinstance(raw, bool):
        return AnySchema() if raw else NeverSchema()
    if not isinstance(raw, dict):
        return ObjectSchema()

    ref = raw.get("$ref")
    if isinstance(ref, str):
        return Reference(ref)

    fmt = raw.get("format")
    if not isinstance(fmt, str):
        fmt = None
    items = parse_schema(raw["items"]) if "items" in raw else None

    type_value = raw.get("type")
    if isinstance(type_value, str):
        return _from_tag(type_value, fmt, items)
    if isinstance(type_value, list):
        candidates = tuple(
            t for t in type_value if isinstance(t, str) and t != "null"
        )
        return Nullable(candidates, fmt, items)
    return ObjectSchema()
