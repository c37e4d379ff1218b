#!/usr/bin/env python3
"""Tests for the YNAB cache loader and account lookup."""

import pytest

from ledgersync.core.errors import AccountNotFound
from ledgersync.core.json_utils import read_json, write_json
from ledgersync.ynab import YnabAccount, find_account, load_accounts, load_transactions, save_cache
from tests.fixtures.ynab_helpers import make_transaction


def write_cache(cache_dir, transactions, accounts):
    write_json(cache_dir / "transactions.json", transactions)
    write_json(cache_dir / "accounts.json", accounts)


@pytest.mark.ynab
class TestLoadCache:
    """Test loading cached YNAB data."""

    def test_load_transactions_array_format(self, temp_dir, sample_ynab_transaction):
        write_cache(temp_dir, [sample_ynab_transaction], {"accounts": []})

        transactions = load_transactions(temp_dir)

        assert [tx.id for tx in transactions] == ["test-transaction-123"]

    def test_load_transactions_object_format(self, temp_dir, sample_ynab_transaction):
        write_cache(temp_dir, {"transactions": [sample_ynab_transaction]}, {"accounts": []})

        assert len(load_transactions(temp_dir)) == 1

    def test_load_transactions_api_response_format(self, temp_dir, sample_ynab_transaction):
        write_cache(temp_dir, {"data": {"transactions": [sample_ynab_transaction]}}, {"accounts": []})

        assert len(load_transactions(temp_dir)) == 1

    def test_load_transactions_filters_account_and_deleted(self, temp_dir, sample_ynab_transaction):
        write_cache(
            temp_dir,
            [
                sample_ynab_transaction,
                {**sample_ynab_transaction, "id": "other-account", "account_id": "acct-2"},
                {**sample_ynab_transaction, "id": "deleted", "deleted": True},
            ],
            {"accounts": []},
        )

        transactions = load_transactions(temp_dir, account_id="acct-1")

        assert [tx.id for tx in transactions] == ["test-transaction-123"]

    def test_load_transactions_missing_cache(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_transactions(temp_dir)

    def test_load_transactions_uses_config_cache_dir(self, sample_ynab_transaction):
        from ledgersync.core.config import get_config

        write_json(get_config().cache_dir / "transactions.json", [sample_ynab_transaction])

        assert len(load_transactions()) == 1

    def test_load_accounts_skips_deleted(self, temp_dir):
        write_cache(
            temp_dir,
            [],
            {
                "accounts": [
                    {"id": "a1", "name": "Checking", "type": "checking"},
                    {"id": "a2", "name": "Old", "type": "checking", "deleted": True},
                ]
            },
        )

        assert [a.name for a in load_accounts(temp_dir)] == ["Checking"]

    def test_load_accounts_missing_cache(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            load_accounts(temp_dir)

    def test_save_cache_round_trip(self, temp_dir):
        accounts = [YnabAccount(id="acct-1", name="Checking", type="checking")]
        transactions = [make_transaction("t1", "2018-01-01", -1000, memo="#abc")]

        save_cache(accounts, transactions, temp_dir)

        assert read_json(temp_dir / "accounts.json")["accounts"][0]["name"] == "Checking"
        assert load_transactions(temp_dir)[0].memo == "#abc"
        assert load_accounts(temp_dir)[0].id == "acct-1"


@pytest.mark.ynab
class TestFindAccount:
    def test_finds_account_by_exact_name(self):
        accounts = [
            YnabAccount(id="a1", name="Checking", type="checking"),
            YnabAccount(id="a2", name="Savings", type="savings"),
        ]

        assert find_account(accounts, "Savings").id == "a2"

    def test_unknown_account_lists_names(self):
        accounts = [
            YnabAccount(id="a1", name="Checking", type="checking"),
            YnabAccount(id="a2", name="Savings", type="savings"),
        ]

        with pytest.raises(AccountNotFound) as excinfo:
            find_account(accounts, "checking")

        assert excinfo.value.available == ["Checking", "Savings"]
        assert "Checking, Savings" in str(excinfo.value)
