"""Token parsers and the token-stream assembler.

Each parser consumes one token from the front of the input and returns
``(remaining, token)``. ``token_parse`` tries the method, header, data and
generic flag parsers in that order; ``curl_cmd_parse`` drives the whole
command.
"""

from __future__ import annotations

import logging
import re

from curl_parser.combinators import first_of, many
from curl_parser.errors import (
    MalformedArgumentError,
    MalformedUrlError,
    MissingValueError,
    NotCurlCommandError,
    UnexpectedTokenError,
)
from curl_parser.flags import (
    DATA_FLAGS,
    HEADER_FLAGS,
    METHOD_FLAGS,
    expects_value,
    requires_value,
)
from curl_parser.models import Token, UrlToken, flag_token, value_token
from curl_parser.quoting import (
    argument_value,
    is_curl_command,
    quoted,
    skip_line_continuation,
    skip_whitespace,
    strip_curl_prefix,
    unquoted,
)
from curl_parser.url import decompose_url

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"--?[\w-]+")


def _read_identifier(text: str) -> tuple[str, str]:
    rest = skip_whitespace(skip_line_continuation(text))
    match = _IDENTIFIER.match(rest)
    if match is None:
        raise UnexpectedTokenError("expected a flag", fragment=rest)
    return rest[match.end() :], match.group()


def _require_separator(text: str, identifier: str) -> str:
    rest = skip_whitespace(text)
    if rest == text:
        raise MissingValueError(f"{identifier} must be followed by whitespace and a value", fragment=text)
    return rest


def _parse_valued_flag(text: str, identifiers: frozenset[str], category: str) -> tuple[str, Token]:
    rest, identifier = _read_identifier(text)
    if identifier not in identifiers:
        raise UnexpectedTokenError(f"{identifier} is not a {category} flag", fragment=text)
    rest = _require_separator(rest, identifier)
    rest, value = argument_value(rest)
    return rest, value_token(identifier, value)


def method_parse(text: str) -> tuple[str, Token]:
    return _parse_valued_flag(text, METHOD_FLAGS, "method")


def header_parse(text: str) -> tuple[str, Token]:
    return _parse_valued_flag(text, HEADER_FLAGS, "header")


def data_parse(text: str) -> tuple[str, Token]:
    return _parse_valued_flag(text, DATA_FLAGS, "data")


def flag_parse(text: str) -> tuple[str, Token]:
    """Parse any other ``-x``/``--long`` flag.

    Method, header and data flags are refused so the specific parsers keep
    priority. Value-required flags must be followed by a value that does not
    itself look like a flag.
    """
    rest, identifier = _read_identifier(text)
    if expects_value(identifier):
        raise UnexpectedTokenError(f"{identifier} is handled by a dedicated parser", fragment=text)

    value = None
    if requires_value(identifier):
        rest = _require_separator(rest, identifier)
        if rest.startswith("-"):
            raise MissingValueError(f"{identifier} requires a value, found another flag", fragment=rest)
        rest, value = argument_value(rest)

    return rest, flag_token(identifier, value)


token_parse = first_of(method_parse, header_parse, data_parse, flag_parse)


def methods_parse(text: str) -> tuple[str, list[Token]]:
    return many(method_parse, text)


def headers_parse(text: str) -> tuple[str, list[Token]]:
    return many(header_parse, text)


def datas_parse(text: str) -> tuple[str, list[Token]]:
    return many(data_parse, text)


def flags_parse(text: str) -> tuple[str, list[Token]]:
    return many(flag_parse, text)


def tokens_parse(text: str) -> tuple[str, list[Token]]:
    """Parse tokens until none matches; unmatched trailing text is left in ``remaining``."""
    return many(token_parse, text)


def url_parse(text: str) -> tuple[str, UrlToken]:
    """Parse the target URL argument, quoted or bare."""
    try:
        rest, raw = quoted(text)
    except MalformedArgumentError:
        try:
            rest, raw = unquoted(text)
        except MalformedArgumentError as exc:
            raise MalformedUrlError("missing URL argument", fragment=text) from exc
    _, url = decompose_url(raw)
    return rest, UrlToken(url=url)


def curl_cmd_parse(command: str) -> tuple[str, list[Token]]:
    """Tokenize a full ``curl ...`` command line.

    The first argument must be the URL. Everything after it is parsed with
    :func:`tokens_parse`; the URL token always comes first in the result.
    """
    if not is_curl_command(command):
        raise NotCurlCommandError("input is not a curl command", fragment=command)

    rest, url_token = url_parse(strip_curl_prefix(command))
    rest, tokens = tokens_parse(rest)
    if rest.strip():
        logger.debug("token stream stopped before %r", rest.strip()[:80])
    return rest, [url_token, *tokens]
