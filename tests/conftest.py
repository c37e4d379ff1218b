"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path
from typing import Any

import pytest

from ledgersync.core import config as config_module


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_ledger_record() -> dict[str, Any]:
    """Sample ledger export record for testing."""
    return {
        "id": "a1",
        "date": {"date": "2018-03-01", "timezone_type": 3},
        "amount": "50.00",
        "title": "Grocery Store",
        "iban": "DE00000000000000000000",
    }


@pytest.fixture
def sample_ynab_transaction() -> dict[str, Any]:
    """Sample YNAB transaction as returned by the API."""
    return {
        "id": "test-transaction-123",
        "date": "2018-03-01",
        "amount": -50000,  # -$50.00 in milliunits
        "memo": "Test transaction",
        "cleared": "cleared",
        "approved": True,
        "account_id": "acct-1",
        "account_name": "Checking",
        "payee_id": "payee-1",
        "payee_name": "Grocery Store",
        "category_id": "cat-1",
        "import_id": None,
        "deleted": False,
        "subtransactions": [],
    }


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and a fresh configuration."""
    # Ensure tests don't use production data
    monkeypatch.setenv("LEDGERSYNC_ENV", "test")
    monkeypatch.setenv("LEDGERSYNC_DATA_DIR", str(tmp_path / "ledgersync_data"))
    monkeypatch.setenv("LEDGERSYNC_YEARS", "2018,2017")
    monkeypatch.delenv("LEDGERSYNC_BACKEND", raising=False)
    monkeypatch.delenv("LEDGERSYNC_STRICT", raising=False)
    monkeypatch.delenv("YNAB_BUDGET_ID", raising=False)

    # Mock sensitive environment variables
    monkeypatch.setenv("YNAB_API_TOKEN", "test-token")

    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for amount handling and precision")
    config.addinivalue_line("markers", "reconcile: Tests for the reconciliation engine and planner")
    config.addinivalue_line("markers", "ynab: Tests for YNAB integration")
