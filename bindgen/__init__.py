"""bindgen - Unreal C++ HTTP bindings from OpenAPI documents.

The resolvers are plain functions that can be called directly:

    >>> from bindgen import build_func_name, resolve_schema_type
    >>> build_func_name("/character/{id}", "get")
    'GET_Character_By_Id'
    >>> resolve_schema_type({"type": "array", "items": {"type": "string"}})
    'TArray<FString>'
"""

from importlib.metadata import PackageNotFoundError, version

from .body_selector import preferred_media_type, select_request_schema, select_response_schema
from .codegen import generate
from .config import GeneratorConfig, get_config
from .headers import parse_include_headers
from .naming import build_func_name, tags_to_pipe_separated, to_pascal_case
from .request_builder import build_request_expression, build_request_params
from .schema_parser import is_required, resolve_schema_type

try:
    __version__ = version("openapi-bindgen")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "GeneratorConfig",
    "build_func_name",
    "build_request_expression",
    "build_request_params",
    "generate",
    "get_config",
    "is_required",
    "parse_include_headers",
    "preferred_media_type",
    "resolve_schema_type",
    "select_request_schema",
    "select_response_schema",
    "tags_to_pipe_separated",
    "to_pascal_case",
]
