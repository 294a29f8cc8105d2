"""Text and JSON views over a :class:`ParsedRequest`, shared by the CLI and the web app."""

from __future__ import annotations

import json
from collections.abc import Sequence
from enum import Enum
from typing import Any

from curl_parser.request import ParsedRequest


class RequestPart(str, Enum):
    METHOD = "method"
    HEADER = "header"
    DATA = "data"
    FLAG = "flag"
    URL = "url"


class JsonField(str, Enum):
    URL = "url"
    METHOD = "method"
    HEADERS = "headers"
    DATA = "data"
    FLAGS = "flags"
    TOKENS = "tokens"


def build_json_value(
    parsed: ParsedRequest,
    part: RequestPart | None = None,
    fields: Sequence[JsonField] = (),
) -> Any:
    """JSON-ready value for ``parsed``.

    A selected ``part`` wins over ``fields``; ``fields`` keeps only those keys,
    in the order given.
    """
    payload = parsed.model_dump(mode="json")
    if part is not None:
        if part is RequestPart.METHOD:
            return payload["method"]
        if part is RequestPart.HEADER:
            return payload["headers"]
        if part is RequestPart.DATA:
            return payload["data"]
        if part is RequestPart.FLAG:
            return payload["flags"]
        return payload["url"]

    if fields:
        return {field.value: payload[field.value] for field in fields}
    return payload


def format_json(value: Any, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(value, ensure_ascii=False, indent=2)
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def error_payload(code: str, message: str) -> dict[str, str]:
    return {"code": code, "error": message}


def _listing(title: str, values: Sequence[str]) -> list[str]:
    if not values:
        return [f"{title}: (none)"]
    return [f"{title}:", *(f"  - {value}" for value in values)]


def render_summary(parsed: ParsedRequest) -> str:
    lines = [f"URL: {parsed.url}"]
    lines.append(f"Method: {parsed.method if parsed.method is not None else '(not specified)'}")
    lines.extend(_listing("Headers", parsed.headers))
    lines.extend(_listing("Data", parsed.data))
    lines.extend(_listing("Flags", parsed.flags))
    return "\n".join(lines)


_EMPTY_PART = {
    RequestPart.HEADER: "(no headers)",
    RequestPart.DATA: "(no data payload)",
    RequestPart.FLAG: "(no flags)",
}


def render_part(parsed: ParsedRequest, part: RequestPart) -> str:
    if part is RequestPart.URL:
        return str(parsed.url)
    if part is RequestPart.METHOD:
        return parsed.method if parsed.method is not None else "(method not specified)"

    values = {
        RequestPart.HEADER: parsed.headers,
        RequestPart.DATA: parsed.data,
        RequestPart.FLAG: parsed.flags,
    }[part]
    if not values:
        return _EMPTY_PART[part]
    return "\n".join(values)
