#!/usr/bin/env python3
"""
Reconciliation Diagnostics

Dumps the engine's intermediate state (normalized records, destination
transactions, classifications and the resulting plan) to a JSON file for
inspection after a run.
"""

from datetime import datetime
from pathlib import Path
from typing import Any

from ..core.json_utils import write_json
from ..ynab.models import YnabTransaction
from .models import ReconcileResult
from .planner import ApplyPlan


def build_diagnostics(
    result: ReconcileResult,
    transactions: list[YnabTransaction],
    plan: ApplyPlan | None = None,
) -> dict[str, Any]:
    """Assemble the diagnostics document."""
    return {
        "metadata": {
            "generated_at": datetime.now().isoformat(timespec="seconds"),
            "summary": result.summary(),
        },
        "skipped": [r.to_dict() for r in result.skipped],
        "unchanged": [{**u.record.to_dict(), "match_id": u.match.id} for u in result.unchanged],
        "changed": [{**c.record.to_dict(), "original": c.original.to_dict()} for c in result.changed],
        "missing": [m.record.to_dict() for m in result.missing],
        "transactions": [tx.to_dict() for tx in transactions],
        "plan": plan.to_dict() if plan is not None else None,
    }


def write_diagnostics(
    filepath: str | Path,
    result: ReconcileResult,
    transactions: list[YnabTransaction],
    plan: ApplyPlan | None = None,
) -> Path:
    """
    Write the diagnostics document.

    Args:
        filepath: Destination JSON file
        result: Reconciliation result
        transactions: Destination transactions the result was computed against
        plan: Apply plan, if one was built

    Returns:
        Path written
    """
    return write_json(filepath, build_diagnostics(result, transactions, plan))
