#!/usr/bin/env python3
"""
End-to-end workflow tests with synthetic data.

Covers load -> reconcile -> plan -> apply against a cached YNAB account,
without the CLI in between.
"""

import pandas as pd
import pytest

from ledgersync.core.json_utils import read_json, write_json
from ledgersync.ledger import load_ledger
from ledgersync.reconcile import plan, reconcile
from ledgersync.ynab import YnabTransaction, find_account, load_accounts, load_transactions
from ledgersync.ynab.file_import import FileImportApplier
from tests.fixtures.synthetic_data import (
    ACCOUNT_ID,
    ACCOUNT_NAME,
    generate_synthetic_ledger,
    generate_synthetic_ynab_transactions,
    save_synthetic_ynab_cache,
)

YEARS = ["2018", "2017"]


@pytest.fixture
def workflow_data(temp_dir):
    ledger = generate_synthetic_ledger(num_records=60)
    transactions, expected = generate_synthetic_ynab_transactions(ledger)

    ledger_file = temp_dir / "export.json"
    write_json(ledger_file, {"transactions": ledger})
    cache_dir = temp_dir / "cache"
    save_synthetic_ynab_cache(cache_dir, transactions)

    return ledger_file, cache_dir, expected


@pytest.mark.integration
@pytest.mark.reconcile
class TestCompleteWorkflow:
    """Reconcile a synthetic ledger against a synthetic YNAB cache."""

    def _run(self, ledger_file, cache_dir):
        records = load_ledger(ledger_file)
        account = find_account(load_accounts(cache_dir), ACCOUNT_NAME)
        transactions = load_transactions(cache_dir, account_id=account.id)
        return records, transactions, reconcile(records, transactions, YEARS)

    def test_classification_matches_generated_state(self, workflow_data):
        ledger_file, cache_dir, expected = workflow_data

        records, _, result = self._run(ledger_file, cache_dir)

        in_range = {r.id for r in records if r.date[:4] in YEARS}
        assert {c.record.id for c in result.unchanged} == {i for i in in_range if expected[i] == "unchanged"}
        assert {c.record.id for c in result.changed} == {i for i in in_range if expected[i] == "changed"}
        assert {c.record.id for c in result.missing} == {i for i in in_range if expected[i] == "missing"}
        assert {r.id for r in result.skipped} == {r.id for r in records} - in_range

    def test_changed_and_missing_partition_different(self, workflow_data):
        _, _, result = self._run(*workflow_data[:2])

        changed_ids = {c.record.id for c in result.changed}
        missing_ids = {c.record.id for c in result.missing}
        assert not changed_ids & missing_ids
        assert changed_ids | missing_ids == {c.record.id for c in result.different}

    def test_changed_records_point_at_tagged_transaction(self, workflow_data):
        _, _, result = self._run(*workflow_data[:2])

        for classification in result.changed:
            assert f"#{classification.record.short_id}" in classification.original.memo
            assert classification.original.amount == classification.record.compare_amount

    def test_plan_and_file_import(self, workflow_data, temp_dir):
        ledger_file, cache_dir, _ = workflow_data
        _, _, result = self._run(ledger_file, cache_dir)

        apply_plan = plan(result, ACCOUNT_ID)
        outcome = FileImportApplier(temp_dir / "out", run_name="run").apply(apply_plan)

        assert len(outcome.updated) == len(result.changed)
        assert len(outcome.created) == len(result.missing)

        frame = pd.read_csv(temp_dir / "out" / "run_import.csv", dtype=str, keep_default_na=False)
        assert len(frame) == len(result.missing)
        assert all(memo.startswith("#") for memo in frame["Memo"])

        if result.changed:
            worksheet = read_json(temp_dir / "out" / "run_date_corrections.json")
            assert {c["transaction_id"] for c in worksheet["corrections"]} == {
                c.original.id for c in result.changed
            }

    def test_second_run_after_sync_is_clean(self, workflow_data, temp_dir):
        ledger_file, cache_dir, _ = workflow_data
        records, transactions, result = self._run(ledger_file, cache_dir)
        apply_plan = plan(result, ACCOUNT_ID)

        corrected = {c.transaction_id: c.new_date for c in apply_plan.date_corrections}
        synced = [
            {**tx.to_dict(), "date": corrected.get(tx.id, tx.date)} for tx in transactions
        ] + [
            {**c.payload(), "id": f"created-{i}", "cleared": "uncleared", "approved": True, "deleted": False}
            for i, c in enumerate(apply_plan.creations)
        ]

        second = reconcile(records, [YnabTransaction.from_dict(row) for row in synced], YEARS)

        assert not second.has_differences
        assert len(second.unchanged) == len(result.unchanged) + len(result.changed) + len(result.missing)
