"""
YNAB Integration Package

Access to the destination budget and the two replay backends.

This package provides:
- Domain models for accounts and transactions
- YNAB API client with authentication and error handling
- Local JSON cache for offline reconciliation
- applier: API replay backend (update + bulk create)
- file_import: file replay backend (CSV for the web UI importer)

The replay backends depend on the reconcile package and are imported from
their modules directly.
"""

from .client import YnabClient
from .loader import find_account, load_accounts, load_transactions, save_cache
from .models import YnabAccount, YnabTransaction

__all__ = [
    # Domain models
    "YnabAccount",
    "YnabTransaction",
    # API
    "YnabClient",
    # Cache
    "find_account",
    "load_accounts",
    "load_transactions",
    "save_cache",
]
