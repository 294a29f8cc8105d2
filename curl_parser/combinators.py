from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from curl_parser.errors import CurlParseError

T = TypeVar("T")

# A parser takes the remaining input and returns (unconsumed input, value).
Parser = Callable[[str], tuple[str, T]]

logger = logging.getLogger(__name__)


def first_of(*parsers: Parser[T]) -> Parser[T]:
    """Try ``parsers`` in order at the same position; the first success wins."""

    def parse(text: str) -> tuple[str, T]:
        error: CurlParseError | None = None
        for parser in parsers:
            try:
                return parser(text)
            except CurlParseError as exc:
                if not exc.recoverable:
                    raise
                error = exc
        assert error is not None
        raise error

    return parse


def many(parser: Parser[T], text: str) -> tuple[str, list[T]]:
    """Apply ``parser`` zero or more times, stopping at the first recoverable failure."""
    items: list[T] = []
    while True:
        try:
            rest, item = parser(text)
        except CurlParseError as exc:
            if not exc.recoverable:
                raise
            logger.debug("stopped after %d item(s): %s", len(items), exc)
            return text, items
        if len(rest) >= len(text):
            return text, items
        items.append(item)
        text = rest
