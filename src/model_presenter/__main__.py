"""Command-line entry point for model-presenter.

Applies a JSON transformer to a JSON source document and prints the resolved
view data as JSON. Useful for trying transformers out against sample payloads
before wiring them into view code:

    python -m model_presenter transform transformer.json source.json
    python -m model_presenter transform --pattern greeting.json user.json

Exit codes:
    0  success
    1  the transformer or source could not be loaded, or transformation failed
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer

from .config import get_settings
from .errors import PresenterError
from .presenter import PatternPresenter, Presenter

app = typer.Typer(help="model-presenter CLI: transform JSON data into view data")


def _load_json(path: Path, label: str) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        typer.echo(f"{label} file not found: {path}", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        typer.echo(f"{label} file is not valid JSON ({path}): {e}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def main() -> None:
    """Model-to-view transformation utilities."""
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)


@app.command(help="Apply a JSON transformer to a JSON source and print the result.")
def transform(
    transformer_file: Path = typer.Argument(..., help="JSON file holding the transformer"),
    source_file: Path = typer.Argument(..., help="JSON file holding the source data"),
    pattern: bool = typer.Option(
        False,
        "--pattern/--no-pattern",
        help="Use the {{token}} pattern presenter instead of $/% accessors",
    ),
    max_depth: Optional[int] = typer.Option(
        None, help="Override PRESENTER_MAX_DEPTH for this run", min=1
    ),
    indent: Optional[int] = typer.Option(2, help="JSON indentation (omit for compact output)"),
) -> None:
    logger = logging.getLogger(__name__)
    transformer = _load_json(transformer_file, "Transformer")
    source = _load_json(source_file, "Source")

    presenter_cls = PatternPresenter if pattern else Presenter
    try:
        presenter = presenter_cls(transformer, max_depth=max_depth)
        result = presenter.transform(source)
    except PresenterError as e:
        logger.debug("Transformation failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(result, indent=indent, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    app()
