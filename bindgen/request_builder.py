"""Build FHttpRequest construction expressions for an operation.

Output for a plain GET:

    FHttpRequest().With_Url(TEXT("/v1/characters")).With_Method(EHttpMethod::Get)

Path and query parameters switch the URL to a named-argument format call:

    FString::Format(TEXT("/character/{id}?shard={shard}"),
                    FStringFormatNamedArguments{{"id", id}, {"shard", shard}})

A request body adds the content type and the body marker:

    .With_ContentType(TEXT("application/json")).With_Body(ToBytes(RequestBody))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .body_selector import preferred_media_type
from .exceptions import InvalidInputShape, MissingRequiredArgument, UnsupportedMethod
from .naming import escape_string_literal

HTTP_METHODS: dict[str, str] = {
    "get": "Get",
    "post": "Post",
    "put": "Put",
    "delete": "Delete",
    "patch": "Patch",
    "head": "Head",
}

BODY_MARKER = ".With_Body(ToBytes(RequestBody))"


def to_http_method(method: Any, caller: str = "http_request_builder") -> str:
    """Map a method string to its EHttpMethod variant name."""
    if not isinstance(method, str):
        raise MissingRequiredArgument("method", caller)
    try:
        return HTTP_METHODS[method.lower()]
    except KeyError:
        raise UnsupportedMethod(method) from None


def split_parameters(parameters: Any) -> tuple[list[str], list[str]]:
    """Partition parameter names into (path, query), keeping input order.

    Stricter than a plain filter: a non-object entry, or a path/query entry
    without a string ``name``, raises InvalidInputShape instead of being
    skipped. Header and cookie entries are ignored.
    """
    if parameters is None:
        return [], []
    if not isinstance(parameters, list):
        raise InvalidInputShape("parameters must be an array")

    path_params: list[str] = []
    query_params: list[str] = []
    for idx, param in enumerate(parameters):
        if not isinstance(param, Mapping):
            raise InvalidInputShape(f"Parameter at index {idx} is not an object.")
        location = param.get("in")
        if location not in ("path", "query"):
            continue
        name = param.get("name")
        if not isinstance(name, str):
            raise InvalidInputShape(f"Parameter at index {idx} has no string 'name'.")
        if location == "path":
            path_params.append(name)
        else:
            query_params.append(name)
    return path_params, query_params


def build_url_expression(path: str, path_params: list[str], query_params: list[str]) -> str:
    """Build the URL argument: a TEXT() literal or an FString::Format call."""
    url_template = escape_string_literal(path)
    if not path_params and not query_params:
        return f'TEXT("{url_template}")'

    if query_params:
        query_string = "&".join(f"{name}={{{name}}}" for name in query_params)
        url_template = f"{url_template}?{query_string}"

    args_entries = ", ".join(
        f'{{"{name}", {name}}}' for name in [*path_params, *query_params]
    )
    return (
        f'FString::Format(TEXT("{url_template}"), '
        f"FStringFormatNamedArguments{{{args_entries}}})"
    )


def _check_path(path: Any) -> str:
    if not isinstance(path, str):
        raise InvalidInputShape("Path must be a string")
    return path


def build_request_expression(
    path: Any,
    method: Any,
    parameters: Any = None,
    request_body: Any = None,
) -> str:
    """Build the chained FHttpRequest expression for one operation."""
    path = _check_path(path)
    http_method = to_http_method(method)
    path_params, query_params = split_parameters(parameters)

    chain = [
        f".With_Url({build_url_expression(path, path_params, query_params)})",
        f".With_Method(EHttpMethod::{http_method})",
    ]
    if isinstance(request_body, Mapping):
        content_type = preferred_media_type(request_body.get("content"))
        if content_type is not None:
            chain.append(f'.With_ContentType(TEXT("{escape_string_literal(content_type)}"))')
        chain.append(BODY_MARKER)

    return "FHttpRequest()" + "".join(chain)


def build_request_params(path: Any, method: Any, parameters: Any = None) -> str:
    """Build FHttpRequest constructor arguments: '<url>, EHttpMethod::<Verb>'."""
    path = _check_path(path)
    http_method = to_http_method(method, caller="http_request_params")
    path_params, query_params = split_parameters(parameters)
    url_expr = build_url_expression(path, path_params, query_params)
    return f"{url_expr}, EHttpMethod::{http_method}"
