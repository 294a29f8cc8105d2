from __future__ import annotations

import json

from curl_parser import parse_curl
from curl_parser.views import (
    JsonField,
    RequestPart,
    build_json_value,
    error_payload,
    format_json,
    render_part,
    render_summary,
)

SCENARIO = "curl 'https://example.com' -H 'A:1' --data name=value --insecure"


def test_build_json_value_with_keys():
    value = build_json_value(parse_curl(SCENARIO), None, [JsonField.URL, JsonField.HEADERS])
    assert list(value) == ["url", "headers"]
    assert value["headers"] == ["A:1"]
    assert "data" not in value


def test_build_json_value_part_overrides_keys():
    value = build_json_value(parse_curl(SCENARIO), RequestPart.DATA, [JsonField.URL])
    assert value == ["name=value"]


def test_build_json_value_parts():
    parsed = parse_curl(SCENARIO)
    assert build_json_value(parsed, RequestPart.METHOD) is None
    assert build_json_value(parsed, RequestPart.FLAG) == ["--insecure"]
    assert build_json_value(parsed, RequestPart.URL)["domain"] == "example.com"


def test_build_json_value_whole_request():
    value = build_json_value(parse_curl(SCENARIO))
    assert set(value) == {"url", "method", "headers", "data", "flags", "tokens"}
    assert value["tokens"][1] == {"identifier": "-H", "data": "A:1", "kind": "header"}


def test_format_json():
    assert format_json({"a": [1, 2]}) == '{"a":[1,2]}'
    assert json.loads(format_json({"a": "ü"}, pretty=True)) == {"a": "ü"}
    assert "\n" in format_json({"a": 1}, pretty=True)


def test_error_payload():
    assert error_payload("parse_error", "boom") == {"code": "parse_error", "error": "boom"}


def test_render_summary():
    assert render_summary(parse_curl(SCENARIO)).splitlines() == [
        "URL: https://example.com",
        "Method: (not specified)",
        "Headers:",
        "  - A:1",
        "Data:",
        "  - name=value",
        "Flags:",
        "  - --insecure",
    ]


def test_render_summary_placeholders():
    text = render_summary(parse_curl("curl 'https://example.com/x' -X GET"))
    assert "Method: GET" in text
    assert "Headers: (none)" in text
    assert "Data: (none)" in text
    assert "Flags: (none)" in text


def test_render_part():
    parsed = parse_curl("curl 'https://example.com' -H 'A: 1' -H 'B: 2'")
    assert render_part(parsed, RequestPart.HEADER) == "A: 1\nB: 2"
    assert render_part(parsed, RequestPart.METHOD) == "(method not specified)"
    assert render_part(parsed, RequestPart.DATA) == "(no data payload)"
    assert render_part(parsed, RequestPart.FLAG) == "(no flags)"
    assert render_part(parsed, RequestPart.URL) == "https://example.com"
