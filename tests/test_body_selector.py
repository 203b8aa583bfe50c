"""Tests for request body and response schema selection."""

import pytest

from bindgen.body_selector import (
    preferred_media_type,
    select_request_schema,
    select_response,
    select_response_schema,
)
from bindgen.exceptions import (
    EmptyResponses,
    InvalidInputShape,
    MissingContent,
    NoUsableSchema,
    SelectionError,
)

_CHAR = {"$ref": "#/components/schemas/Character"}
_PROBLEM = {"$ref": "#/components/schemas/Problem"}


def _response(schema, media_type="application/json"):
    return {"description": "", "content": {media_type: {"schema": schema}}}


class TestPreferredMediaType:
    def test_json_preferred(self):
        content = {"text/plain": {}, "application/json": {}}
        assert preferred_media_type(content) == "application/json"

    def test_first_otherwise(self):
        content = {"application/xml": {}, "text/plain": {}}
        assert preferred_media_type(content) == "application/xml"

    def test_empty(self):
        assert preferred_media_type({}) is None
        assert preferred_media_type(None) is None


class TestSelectRequestSchema:
    def test_json_schema(self):
        body = {"content": {"text/plain": {"schema": {"type": "string"}}, "application/json": {"schema": _CHAR}}}
        assert select_request_schema(body) == _CHAR

    def test_first_media_type_fallback(self):
        body = {"content": {"application/x-www-form-urlencoded": {"schema": _CHAR}}}
        assert select_request_schema(body) == _CHAR

    def test_json_without_schema_falls_back_to_first(self):
        body = {"content": {"text/plain": {"schema": {"type": "string"}}, "application/json": {}}}
        assert select_request_schema(body) == {"type": "string"}

    def test_boolean_schema_is_usable(self):
        body = {"content": {"application/json": {"schema": False}}}
        assert select_request_schema(body) is False

    def test_missing_content(self):
        with pytest.raises(MissingContent):
            select_request_schema({"description": "no content"})

    def test_no_usable_schema(self):
        with pytest.raises(NoUsableSchema):
            select_request_schema({"content": {"application/octet-stream": {}}})

    def test_empty_content(self):
        with pytest.raises(NoUsableSchema):
            select_request_schema({"content": {}})

    def test_not_an_object(self):
        with pytest.raises(InvalidInputShape):
            select_request_schema("body")


class TestSelectResponseSchema:
    def test_200_preferred_regardless_of_order(self):
        responses = {"404": _response(_PROBLEM), "200": _response(_CHAR)}
        assert select_response_schema(responses) == _CHAR

    def test_priority_order(self):
        responses = {
            "204": _response({"type": "boolean"}),
            "202": _response({"type": "integer"}),
            "201": _response({"type": "string"}),
        }
        assert select_response_schema(responses) == {"type": "string"}

    def test_first_in_document_order_without_success_code(self):
        responses = {"409": _response(_CHAR), "400": _response(_PROBLEM)}
        assert select_response_schema(responses) == _CHAR

    def test_default_response_when_first(self):
        responses = {"default": _response(_PROBLEM), "500": _response(_CHAR)}
        assert select_response_schema(responses) == _PROBLEM

    def test_integer_status_keys(self):
        responses = {404: _response(_PROBLEM), 200: _response(_CHAR)}
        assert select_response_schema(responses) == _CHAR

    def test_json_preferred_within_response(self):
        response = {"content": {"text/plain": {"schema": {"type": "string"}}, "application/json": {"schema": _CHAR}}}
        assert select_response_schema({"200": response}) == _CHAR

    def test_first_media_type_within_response(self):
        response = _response({"type": "string"}, media_type="text/plain")
        assert select_response_schema({"200": response}) == {"type": "string"}

    def test_empty_responses(self):
        with pytest.raises(EmptyResponses):
            select_response_schema({})

    def test_response_without_content(self):
        with pytest.raises(MissingContent):
            select_response_schema({"204": {"description": "No Content"}})

    def test_response_without_schema(self):
        with pytest.raises(NoUsableSchema):
            select_response_schema({"200": {"content": {"application/json": {}}}})

    def test_selection_errors_share_base(self):
        with pytest.raises(SelectionError):
            select_response_schema({})

    def test_not_an_object(self):
        with pytest.raises(InvalidInputShape):
            select_response_schema(["200"])

    def test_select_response_returns_entry(self):
        ok = _response(_CHAR)
        assert select_response({"500": _response(_PROBLEM), "203": ok}) is ok
