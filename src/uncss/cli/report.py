"""CLI command: uncss report -- list the selectors that would be removed."""

from __future__ import annotations

import click

from uncss.cli.options import build_config, configure_logging, input_options, run_analysis


@click.command()
@input_options
def report(
    sources: tuple[str, ...],
    ignore: tuple[str, ...],
    stylesheets: tuple[str, ...],
    csspath: str,
    raw: str | None,
    timeout: float,
    urls: tuple[str, ...],
    verbose: bool,
) -> None:
    """List unused selectors and fail-open decisions for SOURCES.

    Prints one removed selector per line, then any diagnostics, then a summary.
    """
    configure_logging(verbose)
    config = build_config(ignore, stylesheets, csspath, raw, timeout, urls)
    result = run_analysis(sources, config)
    if result is None:
        click.echo("No stylesheets found")
        return

    if result.removed_selectors:
        click.echo("Unused:")
        for selector in result.removed_selectors:
            click.echo(f"  {selector}")
        click.echo()

    for diag in result.diagnostics:
        click.echo(str(diag))
    if result.diagnostics:
        click.echo()

    warnings = [d for d in result.diagnostics if d.is_warning]
    click.echo(
        f"Summary: {len(result.removed_selectors)} removed, "
        f"{len(warnings)} warning(s), {len(result.diagnostics) - len(warnings)} info"
    )
