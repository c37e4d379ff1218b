#!/usr/bin/env python3
"""
Error Taxonomy

Exceptions raised by the reconciliation pipeline. The engine and planner never
catch these; the CLI logs them and exits with a non-zero status.
"""


class LedgerSyncError(Exception):
    """Base class for all ledgersync failures."""

    pass


class ParseError(LedgerSyncError):
    """Raised when a ledger record carries a malformed amount, date or shape."""

    pass


class AccountNotFound(LedgerSyncError):
    """Raised when the destination account name has no match in the budget."""

    def __init__(self, account_name: str, available: list[str]):
        self.account_name = account_name
        self.available = available
        names = ", ".join(available) if available else "(none)"
        super().__init__(f"Account '{account_name}' not found in {names}")


class AmbiguousFingerprintMatch(LedgerSyncError):
    """Raised in strict mode when several destination transactions share a fingerprint tag."""

    def __init__(self, short_id: str, transaction_ids: list[str]):
        self.short_id = short_id
        self.transaction_ids = transaction_ids
        super().__init__(
            f"Fingerprint #{short_id} is tagged on {len(transaction_ids)} transactions: "
            f"{', '.join(transaction_ids)}"
        )


class YnabApiError(LedgerSyncError):
    """Raised when the YNAB API answers with a non-success status."""

    def __init__(self, status_code: int, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"YNAB API error {status_code}: {detail}")
