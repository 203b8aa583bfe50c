"""Convert HTTP method + path to C++ function names.

Pattern: {METHOD}_{Literal}_{Segments}[_By_{Param}_{Segments}]
  - literal segments keep path order, joined by "_"
  - {param} segments are collected after "_By_"
  - every segment is PascalCased ("_" and "-" start a new word)

Examples:
  GET  /v1/player/characters         -> GET_V1_Player_Characters
  GET  /character/{id}               -> GET_Character_By_Id
  GET  /user/{user_id}/posts         -> GET_User_Posts_By_UserId
  POST /api/{resource_id}/sub/{sub_id} -> POST_Api_Sub_By_ResourceId_SubId
"""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidInputShape, MissingRequiredArgument

_WORD_SEPARATORS = ("_", "-")


def to_pascal_case(text: str) -> str:
    """Convert snake_case, kebab-case or camelCase text to PascalCase.

    Existing uppercase letters are kept as-is, so ``userId`` becomes
    ``UserId`` rather than ``Userid``.
    """
    result: list[str] = []
    capitalize_next = True
    for ch in text:
        if ch in _WORD_SEPARATORS:
            capitalize_next = True
        elif ch.isupper():
            result.append(ch)
            capitalize_next = False
        elif capitalize_next:
            result.append(ch.upper())
            capitalize_next = False
        else:
            result.append(ch)
    return "".join(result)


def escape_string_literal(text: str) -> str:
    """Escape backslashes and double quotes for a C++ string literal."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def _split_path(path: str) -> tuple[list[str], list[str]]:
    """Split a path template into literal segments and parameter names."""
    literals: list[str] = []
    params: list[str] = []
    for part in path.lstrip("/").split("/"):
        if not part:
            continue
        if part.startswith("{") and part.endswith("}") and len(part) >= 2:
            name = part[1:-1]
            if name:
                params.append(name)
            continue
        literals.append(part)
    return literals, params


def build_func_name(path: Any, method: Any) -> str:
    """Build a function name like 'GET_Character_By_Id' from path and method."""
    if not isinstance(method, str):
        raise MissingRequiredArgument("method", "path_to_func_name")
    if not isinstance(path, str):
        raise InvalidInputShape("Path must be a string")

    literals, params = _split_path(path)

    name = method.upper()
    if literals:
        name += "_" + "_".join(to_pascal_case(s) for s in literals)
    if params:
        name += "_By_" + "_".join(to_pascal_case(p) for p in params)
    return name


def tags_to_pipe_separated(tags: Any) -> str:
    """Join an operation's tags with '|', e.g. ["Character", "Inventory"] -> "Character|Inventory"."""
    if not isinstance(tags, list):
        raise InvalidInputShape(
            "tags_to_pipe_separated expects an array of strings as input."
        )
    for idx, tag in enumerate(tags):
        if not isinstance(tag, str):
            raise InvalidInputShape(
                "tags_to_pipe_separated expects all elements to be strings. "
                f"Element at index {idx} is not a string."
            )
    return "|".join(tags)
