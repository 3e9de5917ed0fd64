"""CLI command: atomicss merge -- merge class name lists."""

from __future__ import annotations

import click

from atomicss.runtime import ax


@click.command()
@click.argument("classes", nargs=-1)
def merge(classes: tuple[str, ...]) -> None:
    """Merge CLASSES in order, keeping the last class of each atomic group.

    Each argument may hold several space separated class names.
    """
    click.echo(ax(list(classes)) or "")
