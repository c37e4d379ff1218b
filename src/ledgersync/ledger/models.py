#!/usr/bin/env python3
"""
Ledger Domain Models

Records exported by the source-of-record bank ledger. A record looks like:

    {"id": "a1", "date": {"date": "2018-03-01"}, "amount": "50.00", "title": "Rent"}

Any additional keys are carried through untouched.
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.errors import ParseError

REQUIRED_FIELDS = ("id", "date", "amount")


@dataclass(frozen=True)
class LedgerRecord:
    """A single ledger record as received; never modified after loading."""

    id: str
    date: str  # Raw date value, unwrapped from the {"date": ...} sub-object
    amount: str
    title: str = ""
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LedgerRecord":
        """
        Create LedgerRecord from an exported ledger dict.

        Args:
            data: Dictionary from the ledger export

        Returns:
            LedgerRecord instance

        Raises:
            ParseError: If a required field is missing or the date has no value
        """
        if not isinstance(data, dict):
            raise ParseError(f"Ledger record must be an object, got {type(data).__name__}")

        missing = [name for name in REQUIRED_FIELDS if data.get(name) is None]
        if missing:
            raise ParseError(f"Ledger record {data.get('id', '?')!r} is missing {', '.join(missing)}")

        raw_date = data["date"]
        if isinstance(raw_date, dict):
            if raw_date.get("date") is None:
                raise ParseError(f"Ledger record {data['id']!r} has a date object without a date")
            raw_date = raw_date["date"]

        extra = {k: v for k, v in data.items() if k not in (*REQUIRED_FIELDS, "title")}

        return cls(
            id=str(data["id"]),
            date=raw_date,
            amount=data["amount"],
            title=data.get("title") or "",
            extra=extra,
        )
