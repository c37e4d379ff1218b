#!/usr/bin/env python3
"""
YNAB API Applier

Replays an apply plan directly through the YNAB API: each date correction is a
separate update call, awaited before the next one starts, followed by a single
bulk-create call for all missing transactions.
"""

import logging
import time
from collections.abc import Callable

from ..reconcile.applier import ApplyResult
from ..reconcile.planner import ApplyPlan
from .client import YnabClient

logger = logging.getLogger(__name__)


class YnabApiApplier:
    """Applier backed by the YNAB REST API."""

    def __init__(
        self,
        client: YnabClient,
        budget_id: str,
        dry_run: bool = False,
        rate_limit_delay: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the applier.

        Args:
            client: Authenticated YNAB client
            budget_id: Budget that owns the account
            dry_run: Log operations without calling the API
            rate_limit_delay: Seconds to wait between update calls
                              (default: client config)
            sleep: Sleep function, replaceable in tests
        """
        self.client = client
        self.budget_id = budget_id
        self.dry_run = dry_run
        self.rate_limit_delay = (
            client.config.rate_limit_delay if rate_limit_delay is None else rate_limit_delay
        )
        self._sleep = sleep

    def apply(self, plan: ApplyPlan) -> ApplyResult:
        result = ApplyResult(dry_run=self.dry_run)

        total = len(plan.date_corrections)
        for i, correction in enumerate(plan.date_corrections, start=1):
            logger.info(
                f"Changing dates: {i} of {total} "
                f"({correction.transaction_id}: {correction.original.date} -> {correction.new_date})"
            )
            if not self.dry_run:
                self.client.update_transaction(self.budget_id, correction.transaction_id, correction.payload())
                if i < total and self.rate_limit_delay:
                    self._sleep(self.rate_limit_delay)
            result.updated.append(correction.transaction_id)

        if plan.creations:
            logger.info(f"Importing {len(plan.creations)} transactions...")
            if self.dry_run:
                result.created.extend(c.import_id for c in plan.creations)
            else:
                response = self.client.create_transactions(
                    self.budget_id, [c.payload() for c in plan.creations]
                )
                duplicates = set(response.get("duplicate_import_ids") or [])
                result.duplicates.extend(c.import_id for c in plan.creations if c.import_id in duplicates)
                result.created.extend(c.import_id for c in plan.creations if c.import_id not in duplicates)
                if duplicates:
                    logger.warning(f"YNAB skipped {len(duplicates)} already imported transactions")

        logger.info(result.summary_text())
        return result
