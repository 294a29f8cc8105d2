"""Parse shell-style curl commands into typed request objects."""

from curl_parser.commands import (
    curl_cmd_parse,
    data_parse,
    flag_parse,
    header_parse,
    method_parse,
    token_parse,
    tokens_parse,
    url_parse,
)
from curl_parser.errors import (
    CurlParseError,
    InvalidTokenError,
    MalformedArgumentError,
    MalformedUrlError,
    MissingUrlError,
    MissingValueError,
    NotCurlCommandError,
    UnexpectedTokenError,
)
from curl_parser.models import (
    CurlUrl,
    DataToken,
    FlagToken,
    HeaderToken,
    MethodToken,
    Protocol,
    Token,
    UrlToken,
    UserInfo,
)
from curl_parser.quoting import is_curl_command, strip_curl_prefix
from curl_parser.request import ParsedRequest, parse_curl
from curl_parser.url import decompose_url, parse_url

__all__ = [
    "CurlParseError",
    "CurlUrl",
    "DataToken",
    "FlagToken",
    "HeaderToken",
    "InvalidTokenError",
    "MalformedArgumentError",
    "MalformedUrlError",
    "MethodToken",
    "MissingUrlError",
    "MissingValueError",
    "NotCurlCommandError",
    "ParsedRequest",
    "Protocol",
    "Token",
    "UnexpectedTokenError",
    "UrlToken",
    "UserInfo",
    "curl_cmd_parse",
    "data_parse",
    "decompose_url",
    "flag_parse",
    "header_parse",
    "is_curl_command",
    "method_parse",
    "parse_curl",
    "parse_url",
    "strip_curl_prefix",
    "token_parse",
    "tokens_parse",
    "url_parse",
]
