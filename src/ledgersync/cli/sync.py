#!/usr/bin/env python3
"""
Sync CLI - Reconcile a ledger export into a YNAB account

Commands:
- sync: reconcile the ledger, then correct dates and create missing transactions
- fetch: download an account's transactions into the local cache
"""

import logging
from dataclasses import replace
from pathlib import Path

import click

from ..core.config import Backend, Config, get_config
from ..core.errors import LedgerSyncError
from ..ledger import load_ledger
from ..reconcile import Applier, plan, reconcile, write_diagnostics
from ..ynab import YnabClient, find_account, load_accounts, load_transactions, save_cache
from ..ynab.applier import YnabApiApplier
from ..ynab.file_import import FileImportApplier

logger = logging.getLogger(__name__)


def _make_client(config: Config, token: str | None, budget: str | None) -> YnabClient:
    ynab_config = replace(
        config.ynab,
        api_token=token or config.ynab.api_token,
        budget_id=budget or config.ynab.budget_id,
    )
    if not ynab_config.api_token:
        raise click.UsageError("A YNAB token is required: pass --token or set YNAB_API_TOKEN")
    return YnabClient(ynab_config)


def _validate_years(ctx: click.Context, param: click.Parameter, value: tuple[str, ...]) -> tuple[str, ...]:
    for year in value:
        if not year.isdigit():
            raise click.BadParameter(f"year prefix must be numeric, got {year!r}")
    return value


@click.command()
@click.option("--input", "-i", "input_file", required=True, type=click.Path(dir_okay=False), help="Ledger export (JSON)")
@click.option("--account", "-a", "account_name", required=True, help="YNAB account to sync into")
@click.option("--token", "-t", help="YNAB personal access token (default: YNAB_API_TOKEN)")
@click.option("--budget", help="YNAB budget id (default: first budget)")
@click.option(
    "--year",
    "-y",
    "years",
    multiple=True,
    callback=_validate_years,
    help="Only sync records dated in this year (repeatable, default: LEDGERSYNC_YEARS)",
)
@click.option(
    "--backend",
    type=click.Choice([b.value for b in Backend]),
    help="Apply through the YNAB API or write import files for the web UI",
)
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False),
    help="Reconcile against cached accounts.json/transactions.json instead of the API",
)
@click.option("--output-dir", type=click.Path(file_okay=False), help="Directory for import files")
@click.option("--diagnostics", type=click.Path(dir_okay=False), help="Write intermediate state to this JSON file")
@click.option("--dry-run", is_flag=True, help="Plan operations without changing YNAB")
@click.option("--strict", is_flag=True, help="Fail when a fingerprint tag appears on several transactions")
@click.pass_context
def sync(
    ctx: click.Context,
    input_file: str,
    account_name: str,
    token: str | None,
    budget: str | None,
    years: tuple[str, ...],
    backend: str | None,
    cache_dir: str | None,
    output_dir: str | None,
    diagnostics: str | None,
    dry_run: bool,
    strict: bool,
) -> None:
    """
    Sync a ledger export into a YNAB account.

    Examples:
      ledgersync sync -i export.json -a "Checking" --year 2018 --year 2017
      ledgersync sync -i export.json -a "Checking" --backend file --output-dir out/
    """
    config = get_config()
    verbose = (ctx.obj or {}).get("verbose", False)

    year_prefixes = list(years) or config.sync.year_prefixes
    selected = Backend(backend) if backend else config.sync.backend
    strict = strict or config.sync.strict_fingerprints

    if verbose:
        click.echo("Ledger Sync")
        click.echo(f"Input: {input_file}")
        click.echo(f"Account: {account_name}")
        click.echo(f"Years: {', '.join(year_prefixes)}")
        click.echo(f"Backend: {selected.value}{' (dry run)' if dry_run else ''}")
        click.echo()

    try:
        records = load_ledger(input_file)

        client: YnabClient | None = None
        budget_id: str | None = None
        if cache_dir is None or selected == Backend.API:
            client = _make_client(config, token, budget)
            budget_id = client.get_default_budget_id()

        if cache_dir is not None:
            account = find_account(load_accounts(cache_dir), account_name)
            transactions = load_transactions(cache_dir, account_id=account.id)
        else:
            assert client is not None and budget_id is not None
            account = find_account(client.get_accounts(budget_id), account_name)
            transactions = client.get_transactions(budget_id, account.id)

        result = reconcile(records, transactions, year_prefixes, strict=strict)
        apply_plan = plan(result, account.id)

        if diagnostics:
            path = write_diagnostics(diagnostics, result, transactions, apply_plan)
            click.echo(f"Diagnostics written to {path}")

        if apply_plan.is_empty:
            click.echo("No new transactions found")
            return

        click.echo(
            f"Identified {len(apply_plan.creations)} new transactions "
            f"and {len(apply_plan.date_corrections)} changed with different dates"
        )

        applier: Applier
        if selected == Backend.FILE:
            applier = FileImportApplier(Path(output_dir) if output_dir else config.sync.output_dir)
        else:
            assert client is not None and budget_id is not None
            applier = YnabApiApplier(client, budget_id, dry_run=dry_run)

        if dry_run and selected == Backend.FILE:
            click.echo("Dry run: no files written")
            return

        outcome = applier.apply(apply_plan)

        click.echo(f"✅ {outcome.summary_text()}")
        for artifact in outcome.artifacts:
            click.echo(f"   Saved to: {artifact}")
        if outcome.duplicates:
            click.echo(f"   Already imported: {', '.join(outcome.duplicates)}")

    except (LedgerSyncError, FileNotFoundError) as e:
        logger.error(f"Sync failed: {e}")
        raise click.ClickException(str(e)) from e


@click.command()
@click.option("--account", "-a", "account_name", required=True, help="YNAB account to cache")
@click.option("--token", "-t", help="YNAB personal access token (default: YNAB_API_TOKEN)")
@click.option("--budget", help="YNAB budget id (default: first budget)")
@click.option("--cache-dir", type=click.Path(file_okay=False), help="Override cache directory")
def fetch(account_name: str, token: str | None, budget: str | None, cache_dir: str | None) -> None:
    """
    Download an account's transactions into the local cache.

    Example:
      ledgersync fetch -a "Checking" --cache-dir data/ynab/cache
    """
    config = get_config()

    try:
        client = _make_client(config, token, budget)
        budget_id = client.get_default_budget_id()
        accounts = client.get_accounts(budget_id)
        account = find_account(accounts, account_name)
        transactions = client.get_transactions(budget_id, account.id)
        target = save_cache(accounts, transactions, cache_dir or config.cache_dir)
    except LedgerSyncError as e:
        logger.error(f"Fetch failed: {e}")
        raise click.ClickException(str(e)) from e

    click.echo(f"✅ Cached {len(transactions)} transactions of '{account.name}'")
    click.echo(f"   Cache directory: {target}")
