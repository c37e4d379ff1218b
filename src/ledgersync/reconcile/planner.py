#!/usr/bin/env python3
"""
Apply Planner

Turns a ReconcileResult into the operations that bring YNAB in sync:

- DateCorrection: move a fingerprint-matched transaction to the ledger date
- CreateTransaction: add a missing record, tagged with its fingerprint

Operations carry everything a replay backend needs and nothing about how they
are replayed. Date corrections always come before creations.
"""

from dataclasses import dataclass, field
from typing import Any

from ..core.fingerprint import fingerprint_tag
from ..ynab.models import YnabTransaction
from .models import Changed, Missing, ReconcileResult


@dataclass(frozen=True)
class DateCorrection:
    """Move an existing YNAB transaction to a new date."""

    transaction_id: str
    new_date: str
    short_id: str
    original: YnabTransaction = field(compare=False)

    def payload(self) -> dict[str, Any]:
        """Transaction body for the update endpoint."""
        return self.original.with_date(self.new_date)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "date_correction",
            "transaction_id": self.transaction_id,
            "tag": fingerprint_tag(self.short_id),
            "old_date": self.original.date,
            "new_date": self.new_date,
            "amount": self.original.amount,
            "memo": self.original.memo,
        }


@dataclass(frozen=True)
class CreateTransaction:
    """
    Create a transaction for a ledger record YNAB does not have.

    import_id is the ledger record id, which lets YNAB reject replays of the
    same creation.
    """

    account_id: str
    date: str
    amount: int  # Milliunits
    memo: str
    import_id: str

    def payload(self) -> dict[str, Any]:
        """Transaction body for the bulk-create endpoint."""
        return {
            "account_id": self.account_id,
            "date": self.date,
            "amount": self.amount,
            "memo": self.memo,
            "import_id": self.import_id,
        }

    def to_dict(self) -> dict[str, Any]:
        return {"type": "create", **self.payload()}


Operation = DateCorrection | CreateTransaction


@dataclass(frozen=True)
class ApplyPlan:
    """Ordered operations for one sync."""

    account_id: str
    date_corrections: tuple[DateCorrection, ...] = ()
    creations: tuple[CreateTransaction, ...] = ()

    @property
    def operations(self) -> tuple[Operation, ...]:
        """All operations, date corrections first."""
        return (*self.date_corrections, *self.creations)

    @property
    def is_empty(self) -> bool:
        return not (self.date_corrections or self.creations)

    def to_dict(self) -> dict[str, Any]:
        return {
            "account_id": self.account_id,
            "summary": {
                "date_corrections": len(self.date_corrections),
                "creations": len(self.creations),
            },
            "operations": [op.to_dict() for op in self.operations],
        }


def build_memo(short_id: str, title: str) -> str:
    """Memo for a created transaction: fingerprint tag followed by the ledger title."""
    tag = fingerprint_tag(short_id)
    title = (title or "").strip()
    return f"{tag} {title}" if title else tag


def plan_date_correction(changed: Changed) -> DateCorrection:
    return DateCorrection(
        transaction_id=changed.original.id,
        new_date=changed.record.date,
        short_id=changed.record.short_id,
        original=changed.original,
    )


def plan_creation(missing: Missing, account_id: str) -> CreateTransaction:
    record = missing.record
    return CreateTransaction(
        account_id=account_id,
        date=record.date,
        amount=record.compare_amount,
        memo=build_memo(record.short_id, record.title),
        import_id=record.id,
    )


def plan(result: ReconcileResult, account_id: str) -> ApplyPlan:
    """
    Build the apply plan for a reconciliation result.

    Args:
        result: Output of reconcile()
        account_id: YNAB account the created transactions belong to

    Returns:
        ApplyPlan with one date correction per changed record and one
        creation per missing record
    """
    return ApplyPlan(
        account_id=account_id,
        date_corrections=tuple(plan_date_correction(c) for c in result.changed),
        creations=tuple(plan_creation(m, account_id) for m in result.missing),
    )
