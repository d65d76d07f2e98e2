"""objkit CLI entry point: Click group with subcommands."""

from dataclasses import replace

import click

from objkit import __version__
from objkit.config import ObjkitConfig
from objkit.log import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="objkit")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (overrides OBJKIT_LOG_LEVEL)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """objkit - rectangles, JSON records and CSS selectors."""
    config = ObjkitConfig.from_env()
    if log_level:
        config = replace(config, log_level=log_level)
    try:
        configure_logging(config.log_level)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    ctx.obj = config


# Import and register subcommands
from objkit.cli.area import area  # noqa: E402
from objkit.cli.roundtrip import roundtrip  # noqa: E402
from objkit.cli.selector import selector  # noqa: E402

cli.add_command(area)
cli.add_command(selector)
cli.add_command(roundtrip)
