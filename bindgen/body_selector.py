"""Pick the schema to resolve from a requestBody or responses object.

Both selectors share one content-negotiation rule: prefer
``application/json``, otherwise take the first media type in document order.

Responses are picked by status code priority (200, 201, 202, 203, 204). When
none of those exist the first response in document order is used, so the
result for an API without a 2xx code depends on the order the document lists
its responses in. That is the defined behavior, not an accident of dict
iteration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .exceptions import (
    EmptyResponses,
    InvalidInputShape,
    MissingContent,
    NoUsableSchema,
)

JSON_MEDIA_TYPE = "application/json"

SUCCESS_STATUS_CODES = ("200", "201", "202", "203", "204")


def preferred_media_type(content: Any) -> str | None:
    """Return application/json if listed, else the first media type, else None."""
    if not isinstance(content, Mapping) or not content:
        return None
    if JSON_MEDIA_TYPE in content:
        return JSON_MEDIA_TYPE
    return str(next(iter(content)))


def _schema_of(media_type: Any) -> Any:
    if isinstance(media_type, Mapping):
        return media_type.get("schema")
    return None


def select_content_schema(content: Mapping[str, Any], where: str) -> Any:
    """Apply the "prefer JSON, else first" rule to a content mapping."""
    schema = _schema_of(content.get(JSON_MEDIA_TYPE))
    if schema is not None:
        return schema
    if content:
        schema = _schema_of(next(iter(content.values())))
        if schema is not None:
            return schema
    raise NoUsableSchema(
        f"Could not find a valid schema object within {where} content "
        "(checked application/json and first available type)."
    )


def _content_of(container: Mapping[str, Any], what: str) -> Mapping[str, Any]:
    content = container.get("content")
    if content is None:
        raise MissingContent(f"{what} object is missing 'content' field.")
    if not isinstance(content, Mapping):
        raise InvalidInputShape(f"{what} 'content' must be an object.")
    return content


def select_request_schema(body: Any) -> Any:
    """Return the schema of a requestBody object."""
    if not isinstance(body, Mapping):
        raise InvalidInputShape("request_body_schema expects a requestBody object.")
    return select_content_schema(_content_of(body, "requestBody"), "requestBody")


def select_response(responses: Any) -> Any:
    """Return the response object that represents the operation's result."""
    if not isinstance(responses, Mapping):
        raise InvalidInputShape("response_body_schema expects a responses object.")
    if not responses:
        raise EmptyResponses("Responses object is empty.")

    # YAML documents may key responses by int, so compare as strings.
    by_code = {str(code): response for code, response in responses.items()}
    for code in SUCCESS_STATUS_CODES:
        if code in by_code:
            return by_code[code]
    return next(iter(responses.values()))


def select_response_schema(responses: Any) -> Any:
    """Return the schema of the preferred response."""
    response = select_response(responses)
    if not isinstance(response, Mapping):
        raise InvalidInputShape("Response must be an object.")
    return select_content_schema(_content_of(response, "Response"), "responses")
