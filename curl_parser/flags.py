"""Curl option tables.

Lookups are exact and case-sensitive. Supporting a new alias means adding it
to exactly one of the tables below.
"""

from __future__ import annotations

METHOD_FLAGS = frozenset({"-X", "--request"})

HEADER_FLAGS = frozenset({"-H", "--header"})

DATA_FLAGS = frozenset(
    {
        "-d",
        "--data",
        "--data-raw",
        "--data-binary",
        "--data-urlencode",
        "-F",
        "--form",
        "--form-string",
        "--json",
    }
)

# Flags outside the method/header/data tables that still consume the next argument.
VALUE_REQUIRED_FLAGS = frozenset(
    {
        "--cacert",
        "--cert",
        "--cert-type",
        "--connect-timeout",
        "--cookie",
        "--cookie-jar",
        "--key",
        "--key-type",
        "--limit-rate",
        "--max-redirs",
        "--max-time",
        "--output",
        "--proxy",
        "--referer",
        "--resolve",
        "--retry",
        "--retry-delay",
        "--retry-max-time",
        "--trace",
        "--trace-ascii",
        "--upload-file",
        "--url",
        "--user",
        "--user-agent",
        "--write-out",
        "-A",
        "-T",
        "-b",
        "-c",
        "-e",
        "-m",
        "-o",
        "-u",
        "-w",
        "-x",
    }
)

CANONICAL_METHOD_FLAG = "-X"
CANONICAL_HEADER_FLAG = "-H"
CANONICAL_DATA_FLAG = "-d"


def is_method_flag(identifier: str) -> bool:
    return identifier in METHOD_FLAGS


def is_header_flag(identifier: str) -> bool:
    return identifier in HEADER_FLAGS


def is_data_flag(identifier: str) -> bool:
    return identifier in DATA_FLAGS


def expects_value(identifier: str) -> bool:
    """True for flags owned by the method, header or data parsers."""
    return is_method_flag(identifier) or is_header_flag(identifier) or is_data_flag(identifier)


def requires_value(identifier: str) -> bool:
    """True for generic flags that must be followed by an argument value."""
    return identifier in VALUE_REQUIRED_FLAGS
