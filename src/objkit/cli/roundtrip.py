"""CLI command: objkit roundtrip -- encode a rectangle and decode it back."""

from __future__ import annotations

import sys

import click

from objkit.codec import ConstructionError, ParseError, deserialize, serialize
from objkit.config import ObjkitConfig
from objkit.shapes import Rectangle, make_rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option(
    "--by-name/--positional",
    default=None,
    help="Match JSON fields to parameters by name (default: OBJKIT_MATCH_FIELDS_BY_NAME)",
)
@click.pass_obj
def roundtrip(
    config: ObjkitConfig | None, width: float, height: float, by_name: bool | None
) -> None:
    """Serialize a rectangle to JSON and rebuild it from that JSON.

    Prints the JSON text followed by the area of the rebuilt rectangle.
    """
    if by_name is None:
        by_name = (config or ObjkitConfig()).match_fields_by_name

    text = serialize(make_rectangle(width, height))
    click.echo(text)

    try:
        rebuilt = deserialize(Rectangle, text, by_name=by_name)
    except (ParseError, ConstructionError) as exc:
        click.echo(f"Decode error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"area: {rebuilt.get_area():g}")
