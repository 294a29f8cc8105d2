from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import assert_never

from pydantic import BaseModel, ConfigDict, Field

from curl_parser.commands import curl_cmd_parse
from curl_parser.errors import MalformedArgumentError, MissingUrlError
from curl_parser.models import (
    CurlUrl,
    DataToken,
    FlagToken,
    HeaderToken,
    MethodToken,
    Token,
    UrlToken,
)

logger = logging.getLogger(__name__)

_HEAD_FLAGS = ("-I", "--head")


class ParsedRequest(BaseModel):
    """Summary view of a parsed curl command.

    ``tokens`` is the lossless record. The summary fields drop flag values:
    ``flags`` only lists identifiers.
    """

    model_config = ConfigDict(frozen=True)

    url: CurlUrl
    method: str | None = None
    headers: list[str] = Field(default_factory=list)
    data: list[str] = Field(default_factory=list)
    flags: list[str] = Field(default_factory=list)
    tokens: list[Token] = Field(default_factory=list)

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> ParsedRequest:
        """Fold a token sequence into a request.

        The last method token wins; headers, data and flags keep their order
        and duplicates. A sequence without a URL token is rejected.
        """
        tokens = list(tokens)
        url = None
        method = None
        headers: list[str] = []
        data: list[str] = []
        flags: list[str] = []

        for token in tokens:
            if isinstance(token, UrlToken):
                url = token.url
            elif isinstance(token, MethodToken):
                method = token.data
            elif isinstance(token, HeaderToken):
                if token.data is not None:
                    headers.append(token.data)
            elif isinstance(token, DataToken):
                if token.data is not None:
                    data.append(token.data)
            elif isinstance(token, FlagToken):
                flags.append(token.identifier)
            else:
                assert_never(token)

        if url is None:
            raise MissingUrlError("missing target URL")

        return cls(url=url, method=method, headers=headers, data=data, flags=flags, tokens=tokens)

    @property
    def effective_method(self) -> str:
        """The method curl would send when none or some was given explicitly."""
        if self.method:
            return self.method.upper()
        if any(flag in _HEAD_FLAGS for flag in self.flags):
            return "HEAD"
        if self.data:
            return "POST"
        return "GET"

    def header_items(self) -> list[tuple[str, str]]:
        items = []
        for header in self.headers:
            if ":" not in header:
                raise MalformedArgumentError("header is missing ':'", fragment=header)
            name, value = header.split(":", 1)
            items.append((name.strip(), value.strip()))
        return items


def parse_curl(curl_cmd: str) -> ParsedRequest:
    """Parse a curl command line into a :class:`ParsedRequest`.

    Raises a :class:`~curl_parser.errors.CurlParseError` subclass (a
    ``ValueError``) when the command cannot be parsed.
    """
    _, tokens = curl_cmd_parse(curl_cmd)
    logger.debug("parsed %d token(s)", len(tokens))
    return ParsedRequest.from_tokens(tokens)
