from __future__ import annotations

_PREVIEW_LENGTH = 40


def _preview(fragment: str) -> str:
    text = fragment.strip()
    if len(text) > _PREVIEW_LENGTH:
        return text[:_PREVIEW_LENGTH] + "..."
    return text


class CurlParseError(ValueError):
    """Base class for every failure raised while parsing a curl command.

    ``recoverable`` errors only mean "this parser does not apply here": the
    ordered-alternative and repetition combinators catch them and move on.
    Anything else aborts the whole parse.
    """

    code = "parse_error"
    recoverable = True

    def __init__(self, message: str, *, fragment: str | None = None) -> None:
        self.fragment = fragment
        suffix = ""
        if fragment is not None:
            suffix = f" (near {_preview(fragment)!r})"
        super().__init__(message + suffix)


class NotCurlCommandError(CurlParseError):
    recoverable = False


class MalformedArgumentError(CurlParseError):
    pass


class MalformedUrlError(CurlParseError):
    pass


class UnexpectedTokenError(CurlParseError):
    pass


class MissingValueError(CurlParseError):
    pass


class InvalidTokenError(CurlParseError):
    recoverable = False


class MissingUrlError(CurlParseError):
    recoverable = False
