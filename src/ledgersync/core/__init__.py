"""
Core Utilities Package

Shared building blocks used by the ledger, YNAB and reconciliation packages.

This package provides:
- Amount normalization with integer arithmetic for precision
- Record fingerprints for re-identifying created transactions
- Date handling and the error taxonomy
- Configuration management for environment-specific settings
"""

from .config import (
    Backend,
    Config,
    Environment,
    get_config,
    get_data_dir,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    format_milliunits,
    milliunits_to_cents,
    milliunits_to_dollars_str,
    normalize_amount,
)
from .dates import FinancialDate
from .errors import (
    AccountNotFound,
    AmbiguousFingerprintMatch,
    LedgerSyncError,
    ParseError,
    YnabApiError,
)
from .fingerprint import fingerprint, fingerprint_tag, memo_has_tag

__all__ = [
    # Configuration
    "Backend",
    "Config",
    "Environment",
    "get_config",
    "get_data_dir",
    "reload_config",
    # Currency
    "cents_to_dollars_str",
    "format_milliunits",
    "milliunits_to_cents",
    "milliunits_to_dollars_str",
    "normalize_amount",
    # Dates
    "FinancialDate",
    # Errors
    "AccountNotFound",
    "AmbiguousFingerprintMatch",
    "LedgerSyncError",
    "ParseError",
    "YnabApiError",
    # Fingerprints
    "fingerprint",
    "fingerprint_tag",
    "memo_has_tag",
]
