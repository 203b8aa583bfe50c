"""Template filters, keyed by the name templates use.

FILTERS is handed to the Jinja2 environment when it is built; nothing is
registered globally. Usage in templates:

    {{ schema | to_ue_type }}
    {{ prop_name | is_required(required_list=schema.required) }}
    {{ path | path_to_func_name(method=method) }}
    {{ operation.requestBody | request_body_schema | to_ue_type }}
    {{ operation.responses | response_body_schema | to_ue_type }}
    {{ operation.tags | tags_to_pipe_separated }}
    {{ path | http_request_builder(method=method, parameters=operation.parameters,
                                   request_body=operation.requestBody) }}
    {{ path | http_request_params(method=method, parameters=operation.parameters) }}
"""

from __future__ import annotations

from typing import Any, Callable

import jinja2

from .body_selector import select_request_schema, select_response_schema
from .naming import build_func_name, tags_to_pipe_separated
from .request_builder import build_request_expression, build_request_params
from .schema_parser import is_required, resolve_schema_type


def _defined(value: Any) -> Any:
    """Treat Jinja2 Undefined as an absent argument."""
    if isinstance(value, jinja2.Undefined):
        return None
    return value


def to_ue_type_filter(schema: Any) -> str:
    return resolve_schema_type(_defined(schema))


def is_required_filter(prop_name: Any, required_list: Any = None) -> bool:
    return is_required(_defined(prop_name), _defined(required_list))


def path_to_func_name_filter(path: Any, method: Any = None) -> str:
    return build_func_name(_defined(path), _defined(method))


def request_body_schema_filter(body: Any) -> Any:
    return select_request_schema(_defined(body))


def response_body_schema_filter(responses: Any) -> Any:
    return select_response_schema(_defined(responses))


def tags_to_pipe_separated_filter(tags: Any) -> str:
    return tags_to_pipe_separated(_defined(tags))


def http_request_builder_filter(
    path: Any, method: Any = None, parameters: Any = None, request_body: Any = None,
) -> str:
    return build_request_expression(
        _defined(path), _defined(method), _defined(parameters), _defined(request_body),
    )


def http_request_params_filter(path: Any, method: Any = None, parameters: Any = None) -> str:
    return build_request_params(_defined(path), _defined(method), _defined(parameters))


FILTERS: dict[str, Callable[..., Any]] = {
    "to_ue_type": to_ue_type_filter,
    "is_required": is_required_filter,
    "path_to_func_name": path_to_func_name_filter,
    "request_body_schema": request_body_schema_filter,
    "response_body_schema": response_body_schema_filter,
    "tags_to_pipe_separated": tags_to_pipe_separated_filter,
    "http_request_builder": http_request_builder_filter,
    "http_request_params": http_request_params_filter,
}
