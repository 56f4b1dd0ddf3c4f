"""CLI command: cssbuilder rectangle -- print a rectangle as JSON."""

from __future__ import annotations

import click

from cssbuilder.model.rectangle import make_rectangle
from cssbuilder.serialization import to_json


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def rectangle(width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle and its area as JSON."""
    rect = make_rectangle(width, height)
    click.echo(to_json({"width": rect.width, "height": rect.height, "area": rect.area()}))
