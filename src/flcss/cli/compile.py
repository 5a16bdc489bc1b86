"""CLI command: flcss compile -- compile a JSON style sheet map to CSS."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from flcss.compiler import compile_style_sheet
from flcss.errors import FlcssError


@click.command("compile")
@click.argument("stylefile", type=click.Path(exists=True))
@click.option(
    "--names",
    "names_file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the generated class names as JSON to this file (default: stderr)",
)
def compile_cmd(stylefile: str, names_file: str | None) -> None:
    """Compile a JSON style sheet map and print the CSS bundle.

    The file must hold an object mapping logical style names to style trees.
    """
    style_path = Path(stylefile)

    try:
        sheet = json.loads(style_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Error: {style_path.name} is not valid JSON: {exc}", err=True)
        sys.exit(1)

    if not isinstance(sheet, dict):
        click.echo(f"Error: {style_path.name} must contain a JSON object", err=True)
        sys.exit(1)

    try:
        result = compile_style_sheet(sheet)
    except FlcssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    names_json = json.dumps(dict(result.names), indent=2)
    if names_file:
        Path(names_file).write_text(names_json + "\n", encoding="utf-8")
    else:
        click.echo(names_json, err=True)

    click.echo(result.bundle)
