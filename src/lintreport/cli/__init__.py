"""CLI entry point — Click group with global options."""

from __future__ import annotations

import logging

import click

from lintreport import __version__
from lintreport.config import load_config


@click.group()
@click.version_option(version=__version__, prog_name="lintreport")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to a YAML config file.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """LintReport — render lint findings as annotated source snippets."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = load_config(config_path)
    except ValueError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj["verbose"] = verbose


def _register_commands() -> None:
    from lintreport.cli.render import render  # noqa: F811

    main.add_command(render)


_register_commands()
