"""objkit CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, NoReturn

import click

from objkit import __version__
from objkit.config import ObjkitConfig
from objkit.geometry import make_rectangle
from objkit.selectors import (
    Combinator,
    Selector,
    SelectorPartError,
    combine as combine_selectors,
    new_selector,
)
from objkit.serialization import serialize

# Part names accepted by ``objkit selector``, mapped to Selector methods.
_PART_METHODS = {
    "element": Selector.element,
    "id": Selector.id,
    "class": Selector.class_,
    "attr": Selector.attr,
    "pseudo-class": Selector.pseudo_class,
    "pseudo-element": Selector.pseudo_element,
}


def _number(value: float) -> int | float:
    return int(value) if value.is_integer() else value


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level",
)
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None) -> None:
    """objkit - rectangles, JSON helpers and CSS selector building."""
    config = ObjkitConfig(json_indent=indent, log_level=log_level.upper())
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


@cli.command()
@click.argument("parts", nargs=-1)
def selector(parts: tuple[str, ...]) -> None:
    """Build a selector from KIND:VALUE parts, applied in the given order.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element.
    """
    result = new_selector()
    for part in parts:
        kind, sep, value = part.partition(":")
        method = _PART_METHODS.get(kind)
        if not sep or method is None:
            _fail(f"invalid part {part!r}; expected KIND:VALUE")
        try:
            result = method(result, value)
        except SelectorPartError as exc:
            _fail(str(exc))
    click.echo(result.stringify())


@cli.command()
@click.argument("left")
@click.argument("combinator", type=click.Choice([c.value for c in Combinator]))
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two selectors with a combinator (' ', '>', '+' or '~')."""
    click.echo(combine_selectors(left, combinator, right).stringify())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = make_rectangle(_number(width), _number(height))
    click.echo(rect.get_area())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.pass_obj
def rectangle(config: ObjkitConfig, width: float, height: float) -> None:
    """Print a WIDTH x HEIGHT rectangle as JSON."""
    rect = make_rectangle(_number(width), _number(height))
    click.echo(serialize(rect, indent=config.json_indent))


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_obj
def reformat(config: ObjkitConfig, source: IO[str]) -> None:
    """Re-serialize the JSON document in SOURCE (default: stdin)."""
    try:
        value = json.loads(source.read())
    except json.JSONDecodeError as exc:
        _fail(f"invalid JSON: {exc}")
    click.echo(serialize(value, indent=config.json_indent))
