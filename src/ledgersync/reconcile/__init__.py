"""
Reconciliation Package

Matches ledger records against YNAB transactions and plans the operations
that bring the account in sync.

Key Components:
- engine: normalization, date filtering and classification
- planner: date corrections and creations for a result
- applier: protocol every replay backend implements
- diagnostics: JSON dump of a run's intermediate state
"""

from .applier import Applier, ApplyResult
from .diagnostics import build_diagnostics, write_diagnostics
from .engine import classify, find_fingerprint_matches, normalize_record, reconcile, year_prefix_filter
from .models import Changed, Classification, Missing, NormalizedRecord, ReconcileResult, Unchanged
from .planner import ApplyPlan, CreateTransaction, DateCorrection, build_memo, plan

__all__ = [
    # Engine
    "classify",
    "find_fingerprint_matches",
    "normalize_record",
    "reconcile",
    "year_prefix_filter",
    # Models
    "Changed",
    "Classification",
    "Missing",
    "NormalizedRecord",
    "ReconcileResult",
    "Unchanged",
    # Planning
    "ApplyPlan",
    "CreateTransaction",
    "DateCorrection",
    "build_memo",
    "plan",
    # Replay
    "Applier",
    "ApplyResult",
    # Diagnostics
    "build_diagnostics",
    "write_diagnostics",
]
