"""Typed values produced by the parser.

Every model is frozen: a parse builds them once and nothing mutates them
afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from curl_parser.errors import InvalidTokenError, UnexpectedTokenError
from curl_parser.flags import (
    CANONICAL_DATA_FLAG,
    CANONICAL_HEADER_FLAG,
    CANONICAL_METHOD_FLAG,
    is_data_flag,
    is_header_flag,
    is_method_flag,
)


class Protocol(str, Enum):
    HTTP = "http"
    HTTPS = "https"
    FTP = "ftp"
    SMB = "smb"

    @classmethod
    def from_scheme(cls, scheme: str) -> Protocol | str:
        """Map a scheme case-insensitively; unknown schemes come back unchanged."""
        try:
            return cls(scheme.lower())
        except ValueError:
            return scheme


class UserInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str = Field(..., min_length=1)
    password: str | None = None

    @classmethod
    def from_raw(cls, raw: str) -> UserInfo | None:
        """Build from ``user[:password]``; an empty username yields ``None``."""
        username, sep, password = raw.partition(":")
        if not username:
            return None
        return cls(username=username, password=password if sep else None)


class CurlUrl(BaseModel):
    """A decomposed target URL.

    Empty optional components are stored as ``None`` so that "absent" and
    "empty" never compare differently.
    """

    model_config = ConfigDict(frozen=True)

    protocol: Protocol | str = Field(default=Protocol.HTTPS, union_mode="left_to_right")
    userinfo: UserInfo | None = None
    domain: str = Field(..., min_length=1)
    path: str | None = None
    queries: list[tuple[str, str]] | None = None
    fragment: str | None = None

    @field_validator("protocol", mode="before")
    @classmethod
    def _recognise_protocol(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Protocol.from_scheme(value)
        return value

    @field_validator("path", "fragment", mode="before")
    @classmethod
    def _empty_to_none(cls, value: Any) -> Any:
        return value or None

    @field_validator("queries", mode="before")
    @classmethod
    def _empty_queries_to_none(cls, value: Any) -> Any:
        if value is None:
            return None
        return list(value) or None

    @property
    def scheme(self) -> str:
        if isinstance(self.protocol, Protocol):
            return self.protocol.value
        return self.protocol

    def __str__(self) -> str:
        parts = [self.scheme, "://"]
        if self.userinfo is not None:
            parts.append(self.userinfo.username)
            if self.userinfo.password is not None:
                parts.append(f":{self.userinfo.password}")
            parts.append("@")
        parts.append(self.domain)
        if self.path is not None:
            parts.append(self.path)
        if self.queries:
            parts.append("?" + "&".join(f"{key}={value}" for key, value in self.queries))
        if self.fragment is not None:
            parts.append(f"#{self.fragment}")
        return "".join(parts)


class _FieldToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    identifier: str = Field(..., min_length=1)
    data: str | None = None


class MethodToken(_FieldToken):
    kind: Literal["method"] = "method"


class HeaderToken(_FieldToken):
    kind: Literal["header"] = "header"


class DataToken(_FieldToken):
    kind: Literal["data"] = "data"


class FlagToken(_FieldToken):
    kind: Literal["flag"] = "flag"


class UrlToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["url"] = "url"
    url: CurlUrl

    @property
    def identifier(self) -> str:
        return "--url"

    @property
    def data(self) -> None:
        return None


Token = Annotated[
    Union[MethodToken, UrlToken, HeaderToken, DataToken, FlagToken],
    Field(discriminator="kind"),
]


def value_token(identifier: str, value: str) -> MethodToken | HeaderToken | DataToken:
    """Build the token for a method, header or data flag and its value.

    Method names and headers are trimmed, payloads are kept verbatim. The
    identifier is normalised to the short spelling.
    """
    if not value.strip():
        raise InvalidTokenError(f"{identifier} requires a non-empty value", fragment=value)
    if is_method_flag(identifier):
        return MethodToken(identifier=CANONICAL_METHOD_FLAG, data=value.strip())
    if is_header_flag(identifier):
        return HeaderToken(identifier=CANONICAL_HEADER_FLAG, data=value.strip())
    if is_data_flag(identifier):
        return DataToken(identifier=CANONICAL_DATA_FLAG, data=value)
    raise UnexpectedTokenError(f"{identifier} is not a method, header or data flag")


def flag_token(identifier: str, value: str | None = None) -> FlagToken:
    trimmed = identifier.strip()
    if not trimmed:
        raise InvalidTokenError("flag identifier must not be empty", fragment=identifier)
    return FlagToken(identifier=trimmed, data=value)
