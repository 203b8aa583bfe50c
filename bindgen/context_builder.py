"""Build Jinja2 template context from a parsed OpenAPI spec.

Walks every path and operation, resolves names, request expressions and
body/response types, and assembles the context dict for api.h.j2.
Generation stops at the first operation that fails to resolve.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .body_selector import select_request_schema, select_response_schema
from .exceptions import (
    BindgenError,
    EmptyResponses,
    InvalidInputShape,
    MissingContent,
    OperationGenerationError,
)
from .loader import deref, get_paths, get_schemas
from .naming import build_func_name
from .request_builder import HTTP_METHODS, build_request_expression, build_request_params
from .schema_parser import parse_parameters, resolve_schema_type, struct_name

logger = logging.getLogger(__name__)

# Path item keys that are not operations
_PATH_ITEM_FIELDS = {"parameters", "summary", "description", "servers", "$ref"}

# Return type for operations that declare no response body
VOID_TYPE = "void"


def _merge_parameters(
    spec: dict[str, Any], path_level: list[Any], operation_level: list[Any],
) -> list[Any]:
    """Combine path-item and operation parameters, operation winning on (name, in)."""
    merged: list[Any] = []
    positions: dict[tuple[Any, Any], int] = {}
    for param in [*path_level, *operation_level]:
        param = deref(spec, param)
        if not isinstance(param, dict):
            merged.append(param)
            continue
        key = (param.get("name"), param.get("in"))
        if key in positions:
            merged[positions[key]] = param
        else:
            positions[key] = len(merged)
            merged.append(param)
    return merged


def _request_type(request_body: Any) -> str | None:
    if request_body is None:
        return None
    return resolve_schema_type(select_request_schema(request_body))


def _response_type(spec: dict[str, Any], operation: dict[str, Any]) -> str:
    responses = operation.get("responses")
    if not responses:
        return VOID_TYPE
    if isinstance(responses, dict):
        responses = {code: deref(spec, r) for code, r in responses.items()}
    try:
        schema = select_response_schema(responses)
    except (MissingContent, EmptyResponses):
        return VOID_TYPE
    return resolve_schema_type(schema)


def _make_description(method: str, path: str, operation: dict[str, Any]) -> str:
    """Build a one-line doc comment for the generated function."""
    summary = operation.get("summary") or ""
    description = operation.get("description") or ""
    if summary:
        doc = summary
    elif description:
        doc = description.split(".")[0]
    else:
        doc = f"{method.upper()} {path}"
    return " ".join(doc.split()).rstrip(". ")


def build_operation(
    spec: dict[str, Any],
    path: str,
    method: str,
    operation: dict[str, Any],
    path_parameters: list[Any] | None = None,
) -> dict[str, Any]:
    """Resolve everything the template needs for one operation."""
    if not isinstance(operation, dict):
        raise InvalidInputShape("Operation must be an object")
    parameters = _merge_parameters(
        spec, path_parameters or [], operation.get("parameters") or [],
    )
    request_body = deref(spec, operation.get("requestBody"))

    request_expression = build_request_expression(path, method, parameters, request_body)
    request_type = _request_type(request_body)

    return {
        "name": build_func_name(path, method),
        "method": method,
        "path": path,
        "operation_id": operation.get("operationId"),
        "description": _make_description(method, path, operation),
        "tags": operation.get("tags") or [],
        "args": parse_parameters(parameters),
        "request_type": request_type,
        "response_type": _response_type(spec, operation),
        "request_expression": request_expression,
        "request_params": build_request_params(path, method, parameters),
        "deprecated": bool(operation.get("deprecated", False)),
    }


def build_structs(spec: dict[str, Any]) -> list[dict[str, Any]]:
    """Describe component schemas as struct or alias declarations."""
    structs = []
    for name, schema in get_schemas(spec).items():
        is_object = isinstance(schema, dict) and (
            schema.get("type") == "object" or "properties" in schema
        )
        structs.append({
            "name": struct_name(name),
            "schema_name": name,
            "schema": schema,
            "is_object": is_object,
            "alias_type": None if is_object else resolve_schema_type(schema),
        })
    return structs


def build_operations(spec: dict[str, Any]) -> list[dict[str, Any]]:
    operations: list[dict[str, Any]] = []

    for path, path_item in sorted(get_paths(spec).items()):
        path_item = deref(spec, path_item)
        if not isinstance(path_item, dict):
            continue

        for key, operation in path_item.items():
            if key in _PATH_ITEM_FIELDS:
                continue
            if key.lower() not in HTTP_METHODS:
                logger.debug("Skipping %s %s: unsupported method", key.upper(), path)
                continue

            try:
                operations.append(build_operation(
                    spec, path, key, operation or {}, path_item.get("parameters"),
                ))
            except BindgenError as e:
                raise OperationGenerationError(key, path, e) from e

    return operations


def build_context(
    spec: dict[str, Any],
    module_name: str,
    file_name: str,
    include_headers: list[str] | None = None,
) -> dict[str, Any]:
    """Build the full template context from the OpenAPI spec."""
    info = spec.get("info") or {}
    operations = build_operations(spec)
    structs = build_structs(spec)

    logger.info("Resolved %d operations and %d schemas", len(operations), len(structs))

    return {
        "module_name": module_name,
        "api_macro": f"{module_name.upper()}_API",
        "file_name": Path(file_name).stem,
        "include_headers": include_headers or [],
        "title": info.get("title", ""),
        "api_version": info.get("version", "unknown"),
        "structs": structs,
        "operations": operations,
        "operation_count": len(operations),
    }
