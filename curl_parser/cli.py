"""Command-line front end: ``curl-parser parse "<curl command>"``."""

from __future__ import annotations

import logging
from typing import Annotated, Optional

import typer

from curl_parser.errors import CurlParseError
from curl_parser.request import parse_curl
from curl_parser.settings import AppSettings, configure_logging
from curl_parser.views import (
    JsonField,
    RequestPart,
    build_json_value,
    error_payload,
    format_json,
    render_part,
    render_summary,
)

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Parse and inspect curl commands.")

_CommandArg = Annotated[str, typer.Argument(..., help="The curl command to parse.")]
_PartOption = Annotated[
    Optional[RequestPart],
    typer.Option("--part", "-p", help="Print only one part of the command."),
]
_JsonOption = Annotated[bool, typer.Option("--json", help="Print the parsed result as JSON.")]
_JsonKeyOption = Annotated[
    Optional[list[JsonField]],
    typer.Option("--json-key", help="Limit JSON output to these fields (repeatable, requires --json)."),
]
_PrettyOption = Annotated[bool, typer.Option("--pretty", help="Pretty-print JSON output (requires --json).")]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)


def _emit_error(code: str, message: str, *, output_json: bool, pretty: bool) -> None:
    if output_json:
        typer.echo(format_json(error_payload(code, message), pretty))
    else:
        typer.echo(f"Error parsing curl command: {message}", err=True)


@app.command("parse")
def parse_command(
    command: _CommandArg,
    part: _PartOption = None,
    output_json: _JsonOption = False,
    json_keys: _JsonKeyOption = None,
    pretty: _PrettyOption = False,
) -> None:
    """Parse a curl command and print a summary, one part, or JSON."""
    if (json_keys or pretty) and not output_json:
        raise typer.BadParameter("--json-key and --pretty require --json")
    pretty = pretty or AppSettings().pretty_json

    try:
        parsed = parse_curl(command)
    except CurlParseError as exc:
        logger.debug("parse failed", exc_info=True)
        _emit_error(exc.code, str(exc), output_json=output_json, pretty=pretty)
        raise typer.Exit(code=1) from exc

    if not output_json:
        typer.echo(render_part(parsed, part) if part is not None else render_summary(parsed))
        return

    try:
        text = format_json(build_json_value(parsed, part, json_keys or ()), pretty)
    except (TypeError, ValueError) as exc:
        _emit_error("serialization_error", str(exc), output_json=True, pretty=pretty)
        raise typer.Exit(code=1) from exc
    typer.echo(text)


def run() -> None:
    app()
