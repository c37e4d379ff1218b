#!/usr/bin/env python3
"""
YNAB File Import Applier

Replays an apply plan through YNAB's web UI instead of the API:

- creations become a CSV file in the layout YNAB's "File Import" accepts
  (Date, Payee, Memo, Outflow, Inflow)
- date corrections become a JSON worksheet listing each transaction to
  search for (by fingerprint tag) and the date to set

Both files are written under the output directory with a shared run prefix.
"""

import logging
from datetime import datetime
from pathlib import Path

import pandas as pd

from ..core.currency import milliunits_to_dollars_str
from ..core.dates import FinancialDate
from ..core.json_utils import write_json
from ..reconcile.applier import ApplyResult
from ..reconcile.planner import ApplyPlan, CreateTransaction

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["Date", "Payee", "Memo", "Outflow", "Inflow"]


def creations_to_frame(creations: tuple[CreateTransaction, ...] | list[CreateTransaction]) -> pd.DataFrame:
    """
    Lay out creations as YNAB import rows.

    Negative amounts are outflows, positive amounts inflows; both columns hold
    unsigned dollar strings.
    """
    rows = [
        {
            "Date": FinancialDate.from_string(c.date).to_csv_format(),
            "Payee": "",
            "Memo": c.memo,
            "Outflow": milliunits_to_dollars_str(c.amount) if c.amount < 0 else "",
            "Inflow": milliunits_to_dollars_str(c.amount) if c.amount > 0 else "",
        }
        for c in creations
    ]
    return pd.DataFrame(rows, columns=CSV_COLUMNS)


class FileImportApplier:
    """Applier that writes import files for manual replay in the YNAB web UI."""

    def __init__(self, output_dir: str | Path, run_name: str | None = None):
        """
        Initialize the applier.

        Args:
            output_dir: Directory for the generated files
            run_name: File prefix (default: current timestamp)
        """
        self.output_dir = Path(output_dir)
        self.run_name = run_name or datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    def apply(self, plan: ApplyPlan) -> ApplyResult:
        result = ApplyResult()
        self.output_dir.mkdir(parents=True, exist_ok=True)

        if plan.date_corrections:
            worksheet = self.output_dir / f"{self.run_name}_date_corrections.json"
            write_json(
                worksheet,
                {
                    "account_id": plan.account_id,
                    "instructions": "Search each memo tag in the account and set the new date",
                    "corrections": [c.to_dict() for c in plan.date_corrections],
                },
            )
            result.updated.extend(c.transaction_id for c in plan.date_corrections)
            result.artifacts.append(worksheet)
            logger.info(f"Wrote {len(plan.date_corrections)} date corrections to {worksheet}")

        if plan.creations:
            import_file = self.output_dir / f"{self.run_name}_import.csv"
            creations_to_frame(plan.creations).to_csv(import_file, index=False)
            result.created.extend(c.import_id for c in plan.creations)
            result.artifacts.append(import_file)
            logger.info(f"Wrote {len(plan.creations)} transactions to {import_file}")

        return result
