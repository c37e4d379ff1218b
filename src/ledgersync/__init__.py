"""
ledgersync - Bank Ledger to YNAB Synchronisation

Reconciles a ledger exported from a bank against the transactions of a YNAB
account and applies the minimal set of changes: create missing transactions
and correct the dates of transactions created by an earlier run.

Domain Packages:
- core: amounts, fingerprints, dates, errors, configuration
- ledger: loading ledger exports
- ynab: YNAB models, API client, cache and replay backends
- reconcile: reconciliation engine, apply planner, applier protocol
- cli: command-line interface

Example Usage:
    from ledgersync import load_ledger, reconcile, plan

    result = reconcile(load_ledger("export.json"), transactions, ["2018", "2017"])
    apply_plan = plan(result, account_id)
"""

__version__ = "0.1.0"

from .core.errors import AccountNotFound, AmbiguousFingerprintMatch, LedgerSyncError, ParseError
from .ledger import LedgerRecord, load_ledger
from .reconcile import ApplyPlan, ReconcileResult, plan, reconcile

__all__ = [
    # Errors
    "AccountNotFound",
    "AmbiguousFingerprintMatch",
    "LedgerSyncError",
    "ParseError",
    # Ledger
    "LedgerRecord",
    "load_ledger",
    # Reconciliation
    "ApplyPlan",
    "ReconcileResult",
    "plan",
    "reconcile",
]
