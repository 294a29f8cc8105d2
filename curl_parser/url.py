"""Decompose a URL argument into protocol, userinfo, host, path, query and fragment.

This is a best-effort split for curl targets, not an RFC 3986 validator.
"""

from __future__ import annotations

import logging
import re

from curl_parser.errors import MalformedUrlError
from curl_parser.models import CurlUrl, UserInfo

logger = logging.getLogger(__name__)

_PROTOCOL = re.compile(r"[ \t\r\n]*([A-Za-z][A-Za-z0-9]*)://")
_AUTHORITY = re.compile(r"[^/?#]*")
_PATH = re.compile(r"[^?#]*")
_QUERY = re.compile(r"\?[^#]*")
_FRAGMENT = re.compile(r"#([A-Za-z0-9]+)")


def parse_protocol(text: str) -> tuple[str, str]:
    """Return the scheme text in front of ``://``."""
    match = _PROTOCOL.match(text)
    if match is None:
        raise MalformedUrlError("missing or malformed protocol prefix", fragment=text)
    return text[match.end() :], match.group(1)


def parse_authority(text: str) -> tuple[str, str]:
    """Return the ``[userinfo@]host[:port]`` segment."""
    match = _AUTHORITY.match(text)
    return text[match.end() :], match.group()


def split_userinfo(authority: str) -> tuple[str | None, str]:
    """Split ``userinfo@host`` on the last ``@``; returns ``(userinfo, host)``."""
    userinfo, sep, host = authority.rpartition("@")
    if not sep:
        return None, authority
    return userinfo, host


def parse_path(text: str) -> tuple[str, str]:
    match = _PATH.match(text)
    return text[match.end() :], match.group()


def parse_query(text: str) -> tuple[str, str]:
    """Return the raw query string including its leading ``?`` (empty if absent)."""
    match = _QUERY.match(text)
    if match is None:
        return text, ""
    return text[match.end() :], match.group()


def query_pairs(query: str) -> list[tuple[str, str]]:
    """Split a query string into ordered ``(key, value)`` pairs.

    Duplicate keys are kept, empty fragments are dropped, and a fragment
    without ``=`` gets an empty value.
    """
    if query.startswith("?"):
        query = query[1:]
    pairs = []
    for fragment in query.split("&"):
        if not fragment:
            continue
        key, _, value = fragment.partition("=")
        pairs.append((key, value))
    return pairs


def parse_fragment(text: str) -> tuple[str, str]:
    match = _FRAGMENT.match(text)
    if match is None:
        raise MalformedUrlError("expected '#' followed by an alphanumeric fragment", fragment=text)
    return text[match.end() :], match.group(1)


def path_segments(path: str) -> list[str]:
    """``/a/b//c`` -> ``["a", "b", "c"]``"""
    return [segment for segment in path.split("/") if segment]


def decompose_url(text: str) -> tuple[str, CurlUrl]:
    rest, scheme = parse_protocol(text)
    rest, authority = parse_authority(rest)
    raw_userinfo, host = split_userinfo(authority)
    if not host:
        raise MalformedUrlError("URL has no host", fragment=text)

    rest, path = parse_path(rest)
    rest, query = parse_query(rest)
    try:
        rest, fragment = parse_fragment(rest)
    except MalformedUrlError:
        fragment = None

    userinfo = None
    if raw_userinfo is not None:
        userinfo = UserInfo.from_raw(raw_userinfo)
        if userinfo is None:
            logger.debug("dropping userinfo with an empty username in %r", text)

    url = CurlUrl(
        protocol=scheme,
        userinfo=userinfo,
        domain=host,
        path=path,
        queries=query_pairs(query),
        fragment=fragment,
    )
    return rest, url


def parse_url(text: str) -> CurlUrl:
    """Decompose ``text`` and ignore anything the decomposer did not consume."""
    _, url = decompose_url(text)
    return url
