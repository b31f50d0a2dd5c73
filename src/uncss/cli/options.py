"""Options shared by the uncss subcommands."""

from __future__ import annotations

import logging
import sys
from typing import Callable

import click

from uncss.config import UncssConfig
from uncss.errors import UncssError
from uncss.filter.ignore import parse_ignore_entry
from uncss.filter.rule_filter import FilterResult
from uncss.runner import Uncss


def input_options(func: Callable) -> Callable:
    """Attach the page/stylesheet input options to a command."""
    decorators = [
        click.argument("sources", nargs=-1),
        click.option(
            "--ignore",
            "ignore",
            multiple=True,
            help="Selector to keep unconditionally; /regex/ for a pattern",
        ),
        click.option(
            "--stylesheets",
            "stylesheets",
            multiple=True,
            help="Stylesheet to use instead of the pages' <link> tags",
        ),
        click.option(
            "--urls",
            "urls",
            multiple=True,
            help="Extra page URL to process along with SOURCES",
        ),
        click.option("--csspath", default="", help="Path from the pages to their CSS"),
        click.option("--raw", default=None, help="Extra CSS text to process"),
        click.option(
            "--timeout", default=10.0, type=float, help="HTTP timeout in seconds"
        ),
        click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def build_config(
    ignore: tuple[str, ...],
    stylesheets: tuple[str, ...],
    csspath: str,
    raw: str | None,
    timeout: float,
    urls: tuple[str, ...] = (),
) -> UncssConfig:
    return UncssConfig(
        ignore=tuple(parse_ignore_entry(entry) for entry in ignore),
        stylesheets=stylesheets,
        csspath=csspath,
        raw=raw,
        timeout=timeout,
        urls=urls,
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_analysis(sources: tuple[str, ...], config: UncssConfig) -> FilterResult | None:
    """Run the pipeline, echoing any uncss error and exiting with status 1."""
    if not sources and not config.urls:
        raise click.UsageError("Give at least one HTML file, URL or --urls page.")
    try:
        return Uncss(config).analyze(sources)
    except UncssError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
