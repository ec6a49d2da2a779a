"""Tests for the tool result builders."""

import json

import pytest

from prometheus_mcp.core.errors import BackendApiError, TransportError
from prometheus_mcp.core.responses import error_result, success_result


class TestSuccessResult:
    def test_is_error_explicitly_false(self):
        result = success_result(["up"])

        assert result.isError is False

    def test_single_text_block(self):
        result = success_result({"resultType": "vector", "result": []})

        assert len(result.content) == 1
        assert result.content[0].type == "text"

    def test_text_is_compact_json(self):
        data = {"resultType": "vector", "result": [{"metric": {"job": "node"}, "value": [1, "1"]}]}

        text = success_result(data).content[0].text

        assert text == '{"resultType":"vector","result":[{"metric":{"job":"node"},"value":[1,"1"]}]}'
        assert json.loads(text) == data

    @pytest.mark.parametrize("data", [[], {}, None, "ok", 0])
    def test_any_json_value(self, data):
        assert json.loads(success_result(data).content[0].text) == data


class TestErrorResult:
    def test_is_error_true(self):
        assert error_result(RuntimeError("boom")).isError is True

    def test_uses_exception_message(self):
        result = error_result(TransportError(502, "Bad Gateway"))

        assert len(result.content) == 1
        assert result.content[0].text == "http 502: Bad Gateway"

    def test_backend_error_message(self):
        result = error_result(BackendApiError("invalid query"))

        assert result.content[0].text == "prometheus api error: invalid query"

    def test_empty_message_falls_back_to_class_name(self):
        assert error_result(TimeoutError()).content[0].text == "TimeoutError"

    def test_non_exception_value(self):
        assert error_result("unknown tool: nope").content[0].text == "unknown tool: nope"
