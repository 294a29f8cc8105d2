"""Argument extraction for shell-style curl commands.

Every parser here takes the remaining input and returns a
``(remaining, value)`` pair, raising :class:`MalformedArgumentError` when
nothing can be captured. No escape sequences are interpreted: a quoted
argument runs up to the next quote of the same kind.
"""

from __future__ import annotations

import re

from curl_parser.combinators import first_of, many
from curl_parser.errors import MalformedArgumentError

CURL_COMMAND = "curl"

WHITESPACE = " \t\r\n"

_UNQUOTED = re.compile(r"[^\s\\'\"][^\s\\]*")
_LINE_CONTINUATION = re.compile(r"[ \t\r\n]*\\[ \t\r\n]*")


def skip_whitespace(text: str) -> str:
    return text.lstrip(WHITESPACE)


def _delimited(text: str, quote: str, style: str) -> tuple[str, str]:
    rest = skip_whitespace(text)
    if not rest.startswith(quote):
        raise MalformedArgumentError(f"expected a {style}-quoted argument", fragment=text)
    end = rest.find(quote, 1)
    if end == -1:
        raise MalformedArgumentError(f"unterminated {style}-quoted argument", fragment=rest)
    return skip_whitespace(rest[end + 1 :]), rest[1:end]


def double_quoted(text: str) -> tuple[str, str]:
    return _delimited(text, '"', "double")


def single_quoted(text: str) -> tuple[str, str]:
    return _delimited(text, "'", "single")


def quoted(text: str) -> tuple[str, str]:
    """Run both quoted parsers and keep whichever captured more text.

    Equal-length captures keep the double-quoted result.
    """
    results = []
    for parser in (double_quoted, single_quoted):
        try:
            results.append(parser(text))
        except MalformedArgumentError:
            continue
    if not results:
        raise MalformedArgumentError("expected a quoted argument", fragment=text)
    return max(results, key=lambda result: len(result[1]))


def unquoted(text: str) -> tuple[str, str]:
    """Capture a bare argument such as ``name=value`` or ``@file.json``."""
    rest = skip_whitespace(text)
    match = _UNQUOTED.match(rest)
    if match is None:
        raise MalformedArgumentError("expected an argument value", fragment=text)
    return rest[match.end() :], match.group()


# Double-quoted, then single-quoted, then bare; first match wins.
argument_value = first_of(double_quoted, single_quoted, unquoted)


def quoted_values(text: str) -> tuple[str, list[str]]:
    """Collect consecutive quoted arguments, in either quoting style."""
    return many(first_of(double_quoted, single_quoted), text)


def line_continuation(text: str) -> tuple[str, str]:
    """Match a backslash line continuation with the whitespace around it."""
    match = _LINE_CONTINUATION.match(text)
    if match is None:
        raise MalformedArgumentError("expected a line continuation", fragment=text)
    return text[match.end() :], match.group()


def skip_line_continuation(text: str) -> str:
    match = _LINE_CONTINUATION.match(text)
    if match is None:
        return text
    return text[match.end() :]


def is_curl_command(text: str) -> bool:
    return text.lstrip().lower().startswith(CURL_COMMAND)


def strip_curl_prefix(text: str) -> str:
    """Remove a leading ``curl`` (any case) from the left-trimmed input."""
    trimmed = text.lstrip()
    if trimmed[: len(CURL_COMMAND)].lower() == CURL_COMMAND:
        return trimmed[len(CURL_COMMAND) :]
    return trimmed
