"""atomicss CLI entry point: Click group with subcommands."""

import logging

import click

from atomicss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="atomicss")
@click.option("-v", "--verbose", is_flag=True, help="Log compiler decisions to stderr.")
def cli(verbose: bool) -> None:
    """atomicss - compile styles into atomic CSS and merge class names."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from atomicss.cli.compile import compile_css  # noqa: E402
from atomicss.cli.merge import merge  # noqa: E402

cli.add_command(compile_css)
cli.add_command(merge)
