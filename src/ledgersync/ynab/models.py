#!/usr/bin/env python3
"""
YNAB Domain Models

Type-safe models representing YNAB API data structures. Amounts stay in YNAB
milliunits and dates stay as ISO strings, exactly as the API returns them, so
the reconciliation engine can compare them without conversion.
"""

from dataclasses import dataclass, field
from typing import Any

# Fields the API accepts back on PUT /transactions/{id}
UPDATABLE_FIELDS = (
    "account_id",
    "date",
    "amount",
    "payee_id",
    "payee_name",
    "category_id",
    "memo",
    "cleared",
    "approved",
    "flag_color",
)


@dataclass
class YnabAccount:
    """
    YNAB account from API.

    Represents a financial account in YNAB.
    """

    id: str
    name: str
    type: str  # "checking", "savings", "creditCard", etc.
    on_budget: bool = True
    closed: bool = False
    balance: int = 0  # Milliunits
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabAccount":
        """
        Create YnabAccount from API dict.

        Args:
            data: Dictionary from YNAB API (accounts endpoint or accounts.json)

        Returns:
            YnabAccount instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            type=data.get("type", "unknown"),
            on_budget=data.get("on_budget", True),
            closed=data.get("closed", False),
            balance=data.get("balance", 0),
            deleted=data.get("deleted", False),
        )


@dataclass
class YnabTransaction:
    """
    YNAB transaction from API.

    The full API payload is kept in ``raw`` so that a date correction can send
    the transaction back unchanged apart from its date.
    """

    id: str
    date: str  # ISO "YYYY-MM-DD"
    amount: int  # Milliunits, negative for outflows
    memo: str | None
    account_id: str
    payee_name: str | None = None
    import_id: str | None = None
    cleared: str = "uncleared"
    approved: bool = True
    deleted: bool = False
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabTransaction":
        """
        Create YnabTransaction from API dict.

        Args:
            data: Dictionary from YNAB API (transactions endpoint or transactions.json)

        Returns:
            YnabTransaction instance
        """
        return cls(
            id=data["id"],
            date=data["date"],
            amount=data["amount"],
            memo=data.get("memo"),
            account_id=data.get("account_id", "unknown"),
            payee_name=data.get("payee_name"),
            import_id=data.get("import_id"),
            cleared=data.get("cleared", "uncleared"),
            approved=data.get("approved", True),
            deleted=data.get("deleted", False),
            raw=dict(data),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict (raw API fields overlaid with model fields)."""
        return {
            **self.raw,
            "id": self.id,
            "date": self.date,
            "amount": self.amount,
            "memo": self.memo,
            "account_id": self.account_id,
            "payee_name": self.payee_name,
            "import_id": self.import_id,
            "cleared": self.cleared,
            "approved": self.approved,
            "deleted": self.deleted,
        }

    def with_date(self, new_date: str) -> dict[str, Any]:
        """
        Build the update payload that moves this transaction to a new date.

        Args:
            new_date: ISO date to set

        Returns:
            Transaction payload for the update endpoint
        """
        payload = {key: value for key, value in self.to_dict().items() if key in UPDATABLE_FIELDS}
        payload["date"] = new_date
        return payload
