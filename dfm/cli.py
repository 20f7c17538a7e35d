"""CLI interface."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from dfm.errors import DfmError
from dfm.plan import apply_plan, load_plan
from dfm.schema import Schema
from dfm.utils.config import settings

app = typer.Typer(add_completion=False)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _build(plan_file: Path) -> Schema:
    return apply_plan(Schema(), load_plan(plan_file))


@app.command()
def build(
    plan_file: Path = typer.Argument(..., help="JSON diagram plan."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="DOT file to write (default from DFM_OUTPUT_PATH)."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Build the diagram described by PLAN_FILE and write it as DOT."""
    _configure_logging(verbose)
    try:
        path = _build(plan_file).render_diagram(output)
    except DfmError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(str(path))


@app.command()
def show(
    plan_file: Path = typer.Argument(..., help="JSON diagram plan."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Print the DOT text for PLAN_FILE without writing a file."""
    _configure_logging(verbose)
    try:
        dot = _build(plan_file).to_dot()
    except DfmError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(dot, nl=False)


if __name__ == "__main__":
    app()
