"""CLI command: uncss run -- print the CSS the given pages actually use."""

from __future__ import annotations

from pathlib import Path

import click

from uncss.cli.options import build_config, configure_logging, input_options, run_analysis
from uncss.css.serializer import stringify_css


@click.command()
@input_options
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the CSS to a file instead of stdout",
)
def run(
    sources: tuple[str, ...],
    ignore: tuple[str, ...],
    stylesheets: tuple[str, ...],
    csspath: str,
    raw: str | None,
    timeout: float,
    urls: tuple[str, ...],
    verbose: bool,
    output: str | None,
) -> None:
    """Remove unused rules from the stylesheets of SOURCES.

    SOURCES are HTML files or http(s) URLs. Stylesheets are taken from the
    pages' <link rel="stylesheet"> tags unless --stylesheets is given.
    """
    configure_logging(verbose)
    config = build_config(ignore, stylesheets, csspath, raw, timeout, urls)
    result = run_analysis(sources, config)
    css = stringify_css(result.rules) if result is not None else ""

    if output:
        Path(output).write_text(css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(css, nl=False)
