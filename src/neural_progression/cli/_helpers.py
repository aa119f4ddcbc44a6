"""Shared CLI helpers for configuration, file I/O, and output formatting."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer

from neural_progression.utils.config import Config, get_config

logger = logging.getLogger(__name__)


def setup_logging(config: Config, verbose: bool = False) -> None:
    """Configure root logging for a CLI run."""
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def read_json(path: str) -> Any:
    """Read a JSON document, exiting with an error message on failure."""
    target = Path(path)
    if not target.exists():
        typer.secho(f"Error: File not found: {target}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    try:
        return json.loads(target.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        typer.secho(f"Error: Invalid JSON in {target}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e


def dump_json(data: dict[str, Any]) -> str:
    """Render a document with the configured indentation."""
    return json.dumps(data, indent=get_config().json_indent, default=str)


def write_output(data: dict[str, Any], output: str | None) -> None:
    """Write a document to ``output`` or print it to stdout."""
    text = dump_json(data)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.debug("Wrote %s", output)
    else:
        typer.echo(text)
