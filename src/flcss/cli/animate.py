"""CLI command: flcss animate -- compile a JSON animation to @keyframes."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from flcss.animation import compile_animation
from flcss.errors import FlcssError


@click.command()
@click.argument("animationfile", type=click.Path(exists=True))
def animate(animationfile: str) -> None:
    """Compile a JSON animation description.

    Prints the animation name (or ``animation`` shorthand) on the first line
    and the ``@keyframes`` block on the second.
    """
    path = Path(animationfile)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        click.echo(f"Error: {path.name} is not valid JSON: {exc}", err=True)
        sys.exit(1)

    if not isinstance(data, dict):
        click.echo(f"Error: {path.name} must contain a JSON object", err=True)
        sys.exit(1)

    try:
        result = compile_animation(data)
    except FlcssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(result.name)
    click.echo(result.bundle)
