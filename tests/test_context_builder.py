"""Tests for the context_builder module."""

import pytest

from bindgen.context_builder import build_context, build_operation, build_structs
from bindgen.exceptions import NoUsableSchema, OperationGenerationError


class TestBuildContext:
    """Test the full context builder pipeline with the characters fixture."""

    @pytest.fixture(autouse=True)
    def _context(self, characters_spec):
        self.spec = characters_spec
        self.ctx = build_context(characters_spec, "Game", "GameApi.h", ['#include "a.h";'])
        self.ops = {op["name"]: op for op in self.ctx["operations"]}

    def test_operation_order(self):
        """Paths are sorted; operations keep document order; options is skipped."""
        names = [op["name"] for op in self.ctx["operations"]]
        assert names == [
            "GET_Character_By_Id",
            "DELETE_Character_By_Id",
            "GET_V1_Player_Characters",
            "POST_V1_Player_Characters",
        ]
        assert self.ctx["operation_count"] == 4

    def test_metadata(self):
        assert self.ctx["module_name"] == "Game"
        assert self.ctx["api_macro"] == "GAME_API"
        assert self.ctx["file_name"] == "GameApi"
        assert self.ctx["include_headers"] == ['#include "a.h";']
        assert self.ctx["title"] == "Characters API"
        assert self.ctx["api_version"] == "1.2.0"

    def test_success_response_beats_error_listed_first(self):
        assert self.ops["GET_Character_By_Id"]["response_type"] == "FCharacter"

    def test_path_level_parameter_ref(self):
        op = self.ops["GET_Character_By_Id"]
        assert op["args"] == [{"name": "id", "location": "path", "type": "int64", "required": True}]
        assert 'FStringFormatNamedArguments{{"id", id}}' in op["request_expression"]

    def test_no_content_response_is_void(self):
        op = self.ops["DELETE_Character_By_Id"]
        assert op["response_type"] == "void"
        assert op["deprecated"] is True
        assert op["description"] == "DELETE /character/{id}"

    def test_integer_status_key_and_array_response(self):
        op = self.ops["GET_V1_Player_Characters"]
        assert op["response_type"] == "TArray<FCharacter>"
        assert op["request_type"] is None

    def test_header_param_not_an_argument(self):
        op = self.ops["GET_V1_Player_Characters"]
        assert [a["name"] for a in op["args"]] == ["shard"]
        assert "X-Trace" not in op["request_expression"]

    def test_request_body_ref(self):
        op = self.ops["POST_V1_Player_Characters"]
        assert op["request_type"] == "FNewCharacter"
        assert op["response_type"] == "FCharacter"
        assert op["request_expression"].endswith(
            '.With_ContentType(TEXT("application/json")).With_Body(ToBytes(RequestBody))'
        )
        assert op["request_params"] == 'TEXT("/v1/player/characters"), EHttpMethod::Post'
        assert op["tags"] == ["Character", "Inventory"]

    def test_descriptions(self):
        assert self.ops["GET_V1_Player_Characters"]["description"] == "List the player's characters"
        assert self.ops["POST_V1_Player_Characters"]["description"] == "Create a character"

    def test_structs(self):
        structs = {s["name"]: s for s in self.ctx["structs"]}
        assert list(structs) == ["FCharacter", "FNewCharacter", "FCharacterClass"]
        assert structs["FCharacter"]["is_object"] is True
        assert structs["FCharacterClass"]["is_object"] is False
        assert structs["FCharacterClass"]["alias_type"] == "FString"

    def test_repeatable(self, characters_spec):
        again = build_context(characters_spec, "Game", "GameApi.h", ['#include "a.h";'])
        assert again == self.ctx


class TestBuildOperation:
    _SPEC: dict = {"components": {}}

    def test_operation_parameter_overrides_path_level(self):
        path_params = [{"name": "id", "in": "path", "schema": {"type": "string"}}]
        operation = {"parameters": [{"name": "id", "in": "path", "schema": {"type": "integer"}}]}
        op = build_operation(self._SPEC, "/items/{id}", "get", operation, path_params)
        assert op["args"] == [{"name": "id", "location": "path", "type": "int32", "required": True}]

    def test_missing_responses_is_void(self):
        op = build_operation(self._SPEC, "/ping", "head", {})
        assert op["response_type"] == "void"
        assert op["name"] == "HEAD_Ping"

    def test_unusable_request_body_raises(self):
        operation = {"requestBody": {"content": {"application/json": {}}}}
        with pytest.raises(NoUsableSchema):
            build_operation(self._SPEC, "/items", "post", operation)


class TestBuildOperations:
    def test_errors_name_the_operation(self):
        spec = {
            "paths": {
                "/items": {
                    "post": {"requestBody": {"content": {"application/json": {}}}},
                }
            }
        }
        with pytest.raises(OperationGenerationError, match="POST /items") as exc_info:
            build_context(spec, "Game", "Api.h")
        assert isinstance(exc_info.value.cause, NoUsableSchema)

    def test_unsupported_verbs_skipped(self):
        spec = {"paths": {"/items": {"trace": {}, "get": {}}}}
        ctx = build_context(spec, "Game", "Api.h")
        assert [op["name"] for op in ctx["operations"]] == ["GET_Items"]


class TestBuildStructs:
    def test_empty_spec(self):
        assert build_structs({}) == []

    def test_properties_without_type_is_object(self):
        spec = {"components": {"schemas": {"Point": {"properties": {"x": {"type": "number"}}}}}}
        assert build_structs(spec)[0]["is_object"] is True
