"""Mini README: Command line entry point for geocodec.

This script exposes a Typer CLI that validates GeoJSON CRS, polygon and ring
payloads stored in files and prints their canonical JSON encoding. Logging
level and output indentation come from ``GEOCODEC_*`` settings.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from geocodec.configuration import get_settings
from geocodec.errors import GeoJsonError
from geocodec.logging_utils import configure_root_logger, get_logger
from geocodec.registry import REGISTRY, Converter

LOGGER = get_logger("geocodec.cli")

cli = typer.Typer(help="Validate and normalise GeoJSON CRS and polygon payloads.")


def _converter(kind: str) -> Converter:
    try:
        return REGISTRY.get(kind)
    except KeyError as error:
        choices = ", ".join(REGISTRY.available())
        raise typer.BadParameter(f"Unknown kind '{kind}'. Choose from: {choices}") from error


def _decode_file(converter: Converter, path: Path) -> Any:
    """Read and decode ``path``, exiting with status 1 on failure."""

    configure_root_logger(get_settings().numeric_log_level)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
        value = converter.decode(payload)
    except UnicodeDecodeError as error:
        typer.echo(f"{path}: not UTF-8 text ({error})", err=True)
        raise typer.Exit(code=1) from error
    except (json.JSONDecodeError, RecursionError) as error:
        typer.echo(f"{path}: invalid JSON ({error})", err=True)
        raise typer.Exit(code=1) from error
    except GeoJsonError as error:
        typer.echo(f"{path}: {error}", err=True)
        raise typer.Exit(code=1) from error
    LOGGER.info("Decoded %s from %s", converter.name, path)
    return value


@cli.command()
def kinds() -> None:
    """List the construct kinds understood by the other commands."""

    for name in REGISTRY.available():
        typer.echo(name)


@cli.command()
def validate(
    kind: str = typer.Argument(..., help="Construct kind, e.g. crs or polygon."),
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file to check."),
) -> None:
    """Check that a JSON file holds a well-formed construct."""

    converter = _converter(kind)
    value = _decode_file(converter, path)
    typer.echo(f"{path}: valid {converter.name} ({value!r})")


@cli.command()
def normalise(
    kind: str = typer.Argument(..., help="Construct kind, e.g. crs or polygon."),
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file to rewrite."),
) -> None:
    """Decode a JSON file and print its canonical encoding."""

    converter = _converter(kind)
    value = _decode_file(converter, path)
    typer.echo(json.dumps(converter.encode(value), indent=get_settings().json_indent))


if __name__ == "__main__":
    cli()
