#!/usr/bin/env python3
"""
Main CLI Entry Point for ledgersync

Provides the command-line interface for syncing ledger exports into YNAB.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    ledgersync - keep a YNAB account in sync with a bank ledger export.

    Creates transactions YNAB is missing and corrects the dates of
    transactions an earlier run created under the wrong date.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["LEDGERSYNC_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("ledgersync").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = get_config()

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")
        click.echo(f"Data directory: {ctx.obj['config'].data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from ledgersync import __version__

    click.echo(f"ledgersync v{__version__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    settings = config_obj.to_dict()

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {settings['environment']}")
    click.echo(f"  Data Directory: {settings['data_dir']}")
    click.echo(f"  Cache Directory: {settings['cache_dir']}")
    click.echo(f"  Output Directory: {settings['output_dir']}")
    click.echo(f"  YNAB Token: {settings['ynab']['api_token'] or 'not set'}")
    click.echo(f"  YNAB Budget: {settings['ynab']['budget_id'] or 'first available'}")
    click.echo(f"  Sync Years: {', '.join(settings['sync']['year_prefixes'])}")
    click.echo(f"  Backend: {settings['sync']['backend']}")
    click.echo(f"  Debug Mode: {settings['debug']}")
    click.echo(f"  Log Level: {settings['log_level']}")


from .sync import fetch, sync  # noqa: E402

main.add_command(sync)
main.add_command(fetch)


if __name__ == "__main__":
    main()
