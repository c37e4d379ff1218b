"""
Source Ledger Package

Loading of exported bank ledgers that are synced into YNAB.
"""

from .loader import load_ledger
from .models import LedgerRecord

__all__ = [
    "LedgerRecord",
    "load_ledger",
]
