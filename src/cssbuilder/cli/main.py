"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import BuilderConfig
from cssbuilder.errors import ConfigError


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cssbuilder - build validated CSS selector strings."""
    try:
        config = BuilderConfig.from_env()
    except ConfigError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(rectangle)
