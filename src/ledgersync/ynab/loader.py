#!/usr/bin/env python3
"""
YNAB Data Loader

Utilities for loading cached YNAB data (accounts, transactions) from local JSON
files, saving fresh API data into that cache, and resolving the account a
ledger is synced into.

Functions:
- load_transactions: Load cached transactions as domain models
- load_accounts: Load cached accounts as domain models
- save_cache: Write accounts and transactions to the cache
- find_account: Resolve an account by exact name
"""

from pathlib import Path

from ..core.config import get_config
from ..core.errors import AccountNotFound
from ..core.json_utils import read_json, unwrap_list, write_json
from .models import YnabAccount, YnabTransaction


def _resolve_cache_dir(cache_dir: str | Path | None) -> Path:
    if cache_dir is None:
        return get_config().cache_dir
    return Path(cache_dir)


def load_transactions(cache_dir: str | Path | None = None, account_id: str | None = None) -> list[YnabTransaction]:
    """
    Load YNAB transactions from cache as domain models.

    Args:
        cache_dir: Directory containing cached YNAB data.
                   If None, uses config.cache_dir
        account_id: Keep only transactions of this account

    Returns:
        List of non-deleted YnabTransaction domain models, in file order

    Raises:
        FileNotFoundError: If the transactions cache file is not found
    """
    transactions_file = _resolve_cache_dir(cache_dir) / "transactions.json"

    if not transactions_file.exists():
        raise FileNotFoundError(f"YNAB transactions cache not found: {transactions_file}")

    transactions = [
        YnabTransaction.from_dict(tx) for tx in unwrap_list(read_json(transactions_file), "transactions")
    ]
    if account_id is not None:
        transactions = [tx for tx in transactions if tx.account_id == account_id]
    return [tx for tx in transactions if not tx.deleted]


def load_accounts(cache_dir: str | Path | None = None) -> list[YnabAccount]:
    """
    Load YNAB accounts from cache as domain models.

    Args:
        cache_dir: Directory containing cached YNAB data.
                   If None, uses config.cache_dir

    Returns:
        List of non-deleted YnabAccount domain models

    Raises:
        FileNotFoundError: If the accounts cache file is not found
    """
    accounts_file = _resolve_cache_dir(cache_dir) / "accounts.json"

    if not accounts_file.exists():
        raise FileNotFoundError(f"YNAB accounts cache not found: {accounts_file}")

    accounts = [YnabAccount.from_dict(acct) for acct in unwrap_list(read_json(accounts_file), "accounts")]
    return [acct for acct in accounts if not acct.deleted]


def save_cache(
    accounts: list[YnabAccount],
    transactions: list[YnabTransaction],
    cache_dir: str | Path | None = None,
) -> Path:
    """
    Write accounts and transactions to the cache directory.

    Returns:
        The cache directory written to
    """
    target = _resolve_cache_dir(cache_dir)
    write_json(
        target / "accounts.json",
        {
            "accounts": [
                {
                    "id": a.id,
                    "name": a.name,
                    "type": a.type,
                    "on_budget": a.on_budget,
                    "closed": a.closed,
                    "balance": a.balance,
                    "deleted": a.deleted,
                }
                for a in accounts
            ]
        },
    )
    write_json(target / "transactions.json", {"transactions": [tx.to_dict() for tx in transactions]})
    return target


def find_account(accounts: list[YnabAccount], account_name: str) -> YnabAccount:
    """
    Find the account a ledger is synced into.

    Args:
        accounts: Accounts of the budget
        account_name: Exact account name

    Returns:
        The first account with that name

    Raises:
        AccountNotFound: If no account has that name; lists the available names
    """
    for account in accounts:
        if account.name == account_name:
            return account
    raise AccountNotFound(account_name, [a.name for a in accounts])
