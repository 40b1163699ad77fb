from __future__ import annotations

import json

import typer
from loguru import logger

from hppshield.accessors import available_accessors
from hppshield.collapse import ParameterDecodeError, collapse, repeated_keys
from hppshield.content_type import is_form_urlencoded, media_type
from hppshield.settings import configure_logging

app = typer.Typer(help="Inspect HTTP Parameter Pollution handling from the shell.")


@app.callback()
def main(
    log_level: str = typer.Option("", "--log-level", help="Override HPPSHIELD_LOG_LEVEL"),
) -> None:
    configure_logging(log_level or None)


@app.command("collapse")
def collapse_command(
    raw: str = typer.Argument(..., help="Encoded query string or form body"),
    strict: bool = typer.Option(
        False, "--strict", help="Fail on invalid UTF-8 escape sequences"
    ),
) -> None:
    """Print the last-value-wins mapping for RAW as JSON."""
    errors = "strict" if strict else "replace"
    try:
        params = collapse(raw, errors=errors)
    except ParameterDecodeError as exc:
        logger.error("Decoding failed: {error}", error=str(exc))
        raise typer.Exit(code=2) from exc

    repeated = repeated_keys(raw, errors=errors)
    if repeated:
        logger.info("Repeated keys collapsed: {keys}", keys=", ".join(sorted(repeated)))
    typer.echo(json.dumps(params, ensure_ascii=False))


@app.command()
def classify(
    content_type: str = typer.Argument(..., help="Content-Type header value"),
) -> None:
    """Report whether CONTENT_TYPE is form-urlencoded (exit code 1 if not)."""
    matched = is_form_urlencoded(content_type)
    logger.debug("Media type {media_type}", media_type=media_type(content_type))
    typer.echo("true" if matched else "false")
    if not matched:
        raise typer.Exit(code=1)


@app.command()
def accessors() -> None:
    """List the registered accessor names."""
    for name in sorted(available_accessors()):
        typer.echo(name)


if __name__ == "__main__":
    app()
