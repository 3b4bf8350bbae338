"""Structured output parsing tests: fence stripping, slicing, JSON and shape checks."""

import json

import pytest

from painel.core.errors import ParseError
from painel.core.series_parsing import parse_series_payload, strip_code_fences

SERIES = [
    {"name": "Taxa de informalidade", "results": [{"series": {"2024-01": 38.7}}]},
    {"name": "Taxa de desocupacao", "results": [{"series": {"2024-01": 7.6}}]},
]


def test_strips_json_fence():
    assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'


def test_strips_bare_fence_and_whitespace():
    assert strip_code_fences('  ```\n{"a": 1}```  ') == '{"a": 1}'


def test_strip_handles_none():
    assert strip_code_fences(None) == ""


def test_fenced_payload_returns_series_verbatim():
    text = "```json\n" + json.dumps({"series": SERIES}) + "\n```"
    assert parse_series_payload(text) == SERIES


def test_prose_around_object_is_ignored():
    text = "Aqui estão os dados:\n" + json.dumps({"series": SERIES}) + "\nFim."
    assert parse_series_payload(text) == SERIES


def test_extra_fields_are_ignored_and_series_untouched():
    odd = [{"nome": "x", "anything": [1, 2, 3]}]
    assert parse_series_payload(json.dumps({"series": odd, "note": "n"})) == odd


@pytest.mark.parametrize("text", [
    "not json at all",
    "",
    None,
    "{ this is not json }",
    "} reversed {",
    '{"series": {"a": 1}}',
    '{"data": []}',
    '{"series": [{"name": "x", "results": [{"series": {"2024-05": NaN}}]}]}',
    '{"series": [Infinity]}',
    '{"series": [-Infinity]}',
])
def test_unusable_output_raises_parse_error(text):
    with pytest.raises(ParseError):
        parse_series_payload(text)
