#!/usr/bin/env python3
"""
YNAB API Client

Thin wrapper around the YNAB REST API covering the calls a sync needs:
budget and account discovery, fetching an account's transactions, updating a
single transaction and bulk-creating transactions.
"""

import logging
from typing import Any

import requests

from ..core.config import YNABConfig
from ..core.errors import YnabApiError
from .models import YnabAccount, YnabTransaction

logger = logging.getLogger(__name__)


class YnabClient:
    """
    Authenticated YNAB API client.

    Every request carries the bearer token and the configured timeout.
    Non-2xx responses raise YnabApiError with YNAB's error detail.
    """

    def __init__(self, config: YNABConfig, session: requests.Session | None = None):
        """
        Initialize the client.

        Args:
            config: YNAB configuration with api_token, base_url and timeout
            session: Optional pre-built session (tests pass a mock)
        """
        if not config.api_token:
            raise ValueError("YNAB API token is required")

        self.config = config
        self.base_url = config.base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"Bearer {config.api_token}",
                "Accept": "application/json",
            }
        )

    def _request(self, method: str, path: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")

        response = self.session.request(method, url, json=payload, timeout=self.config.timeout)

        if not 200 <= response.status_code < 300:
            raise YnabApiError(response.status_code, _error_detail(response))

        body: dict[str, Any] = response.json()
        return body.get("data", {})

    def get_budgets(self) -> list[dict[str, Any]]:
        """List budgets visible to the token."""
        budgets: list[dict[str, Any]] = self._request("GET", "/budgets").get("budgets", [])
        return budgets

    def get_default_budget_id(self) -> str:
        """
        Resolve the budget to sync into.

        Returns:
            Configured budget id, otherwise the first budget returned by the API

        Raises:
            YnabApiError: If the token has no budgets
        """
        if self.config.budget_id:
            return self.config.budget_id

        budgets = self.get_budgets()
        if not budgets:
            raise YnabApiError(404, "No budgets available for this token")

        logger.info(f"Using budget '{budgets[0].get('name', budgets[0]['id'])}'")
        return str(budgets[0]["id"])

    def get_accounts(self, budget_id: str) -> list[YnabAccount]:
        """Fetch all non-deleted accounts of a budget."""
        data = self._request("GET", f"/budgets/{budget_id}/accounts")
        accounts = [YnabAccount.from_dict(a) for a in data.get("accounts", [])]
        return [a for a in accounts if not a.deleted]

    def get_transactions(self, budget_id: str, account_id: str) -> list[YnabTransaction]:
        """
        Fetch the transactions of one account.

        Deleted transactions are dropped so they can never satisfy a match.

        Args:
            budget_id: Budget id
            account_id: Account id

        Returns:
            List of YnabTransaction in API order
        """
        data = self._request("GET", f"/budgets/{budget_id}/accounts/{account_id}/transactions")
        transactions = [YnabTransaction.from_dict(t) for t in data.get("transactions", [])]
        live = [t for t in transactions if not t.deleted]
        logger.info(f"Fetched {len(live)} transactions for account {account_id}")
        return live

    def update_transaction(self, budget_id: str, transaction_id: str, transaction: dict[str, Any]) -> dict[str, Any]:
        """Replace the updatable fields of a single transaction."""
        data = self._request(
            "PUT",
            f"/budgets/{budget_id}/transactions/{transaction_id}",
            {"transaction": transaction},
        )
        updated: dict[str, Any] = data.get("transaction", {})
        return updated

    def create_transactions(self, budget_id: str, transactions: list[dict[str, Any]]) -> dict[str, Any]:
        """
        Bulk-create transactions.

        YNAB skips any transaction whose import_id already exists in the
        account and reports it under duplicate_import_ids.

        Returns:
            Response data with transaction_ids and duplicate_import_ids
        """
        return self._request("POST", f"/budgets/{budget_id}/transactions", {"transactions": transactions})


def _error_detail(response: requests.Response) -> str:
    try:
        error = response.json().get("error", {})
    except ValueError:
        return response.text or response.reason or "unknown error"
    return error.get("detail") or error.get("name") or response.reason or "unknown error"
