"""CLI command: atomicss compile -- atomicize a CSS-like file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from atomicss.compiler import AtomicCompiler, ClassNameCollector, to_stylesheet
from atomicss.errors import AtomicssError
from atomicss.parser import parse_css


@click.command(name="compile")
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--sort-shorthand/--no-sort-shorthand",
    default=True,
    show_default=True,
    help="Move shorthand declarations before their longhands first.",
)
@click.option(
    "--class-names",
    is_flag=True,
    help="Print the generated class names instead of the stylesheet.",
)
def compile_css(cssfile: str, sort_shorthand: bool, class_names: bool) -> None:
    """Compile CSSFILE into atomic rules.

    Prints the at-rules that cannot be atomicized unchanged, then one atomic
    rule per line; with --class-names prints the generated class names in
    emission order instead. Exits with code 1 on parse or compile
    errors.
    """
    css_path = Path(cssfile)
    collector = ClassNameCollector()
    compiler = AtomicCompiler(callback=collector, sort_shorthand=sort_shorthand)

    try:
        source = css_path.read_text(encoding="utf-8")
        tree = parse_css(source, source_name=css_path.name)
        rules = compiler.compile(tree)
    except AtomicssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if class_names:
        for name in collector.unique():
            click.echo(name)
        return

    stylesheet = to_stylesheet(rules, separator="\n", passthrough=compiler.passthrough)
    if stylesheet:
        click.echo(stylesheet)
