"""Sequence commands for the strseq CLI.

Each command builds an `OrderedStringSequence` from its ``ITEMS`` arguments
using the coercion policy selected on the top-level group (``--coercion``)
and prints the result. Plain-text output goes to stdout one value per line;
``--json`` prints a single JSON document instead.

Failure modes
- Strict coercion of a non-numeric/non-boolean item → ``ClickException``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click

from strseq.domain.coercion import CoercionPolicy
from strseq.domain.errors import DomainError
from strseq.domain.sequence import OrderedStringSequence

from .helpers import warn

logger = logging.getLogger(__name__)

json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Print the result as JSON on stdout.",
)
items_argument = click.argument("items", nargs=-1)


def _build(ctx: click.Context, items: tuple[str, ...]) -> OrderedStringSequence:
    # None outside the strseq group; the sequence then uses its default policy
    seq = OrderedStringSequence(items, policy=ctx.find_object(CoercionPolicy))
    logger.debug("Built %r with %s", seq, seq.policy)
    return seq


@contextmanager
def _domain_errors() -> Iterator[None]:
    try:
        yield
    except DomainError as e:
        raise click.ClickException(str(e)) from e


def _emit(result: Any, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(result))
    elif isinstance(result, dict):
        for key, val in result.items():
            click.echo(f"{key}: {val}")
    elif isinstance(result, list):
        for val in result:
            click.echo(val)
    else:
        click.echo(result)


@click.command()
@json_option
@items_argument
@click.pass_context
def stats(ctx: click.Context, as_json: bool, items: tuple[str, ...]) -> None:
    """Show length, sum, min and max of ITEMS."""
    seq = _build(ctx, items)
    with _domain_errors():
        result: dict[str, int] = {"length": seq.length(), "sum": seq.sum()}
        if seq.length():
            result["min"] = seq.min()
            result["max"] = seq.max()
        else:
            warn("Sequence is empty; min/max omitted.")
    _emit(result, as_json)


@click.command()
@json_option
@click.argument("value")
@items_argument
@click.pass_context
def count(ctx: click.Context, as_json: bool, value: str, items: tuple[str, ...]) -> None:
    """Count the ITEMS equal to VALUE."""
    _emit(_build(ctx, items).count(value), as_json)


@click.command()
@json_option
@click.argument("value")
@items_argument
@click.pass_context
def index(ctx: click.Context, as_json: bool, value: str, items: tuple[str, ...]) -> None:
    """Show the position of the first of ITEMS equal to VALUE (-1 if absent)."""
    position = _build(ctx, items).index_of(value)
    if position == -1:
        warn(f"{value!r} not found.")
    _emit(position, as_json)


@click.command()
@json_option
@click.option(
    "--with",
    "others",
    multiple=True,
    help="Item of the second sequence. Repeatable.",
)
@items_argument
@click.pass_context
def union(
    ctx: click.Context, as_json: bool, others: tuple[str, ...], items: tuple[str, ...]
) -> None:
    """Show the distinct values of ITEMS and the --with items, in first-seen order."""
    seq = _build(ctx, items)
    _emit(seq.union(_build(ctx, others)).to_strings(), as_json)


@click.command(name="abs")
@json_option
@items_argument
@click.pass_context
def abs_(ctx: click.Context, as_json: bool, items: tuple[str, ...]) -> None:
    """Replace negative integers among ITEMS by their magnitude."""
    with _domain_errors():
        result = _build(ctx, items).abs().to_strings()
    _emit(result, as_json)


@click.command()
@json_option
@click.argument("target", type=click.Choice(["int", "bool", "str"]))
@items_argument
@click.pass_context
def coerce(
    ctx: click.Context, as_json: bool, target: str, items: tuple[str, ...]
) -> None:
    """Convert every one of ITEMS to TARGET."""
    seq = _build(ctx, items)
    with _domain_errors():
        result: list[Any]
        match target:
            case "int":
                result = seq.to_ints()
            case "bool":
                result = seq.to_bools()
            case _:
                result = seq.to_strings()
    if not as_json and target == "bool":
        result = ["true" if b else "false" for b in result]
    _emit(result, as_json)


COMMANDS = [stats, count, index, union, abs_, coerce]
