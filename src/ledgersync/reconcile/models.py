#!/usr/bin/env python3
"""
Reconciliation Domain Models

Normalized ledger records and the classification each one receives when
compared against the destination account. Classifications are separate
immutable variants rather than flags on a shared record, so a record can
never be half-classified.
"""

from dataclasses import dataclass, field
from typing import Any

from ..ynab.models import YnabTransaction


@dataclass(frozen=True)
class NormalizedRecord:
    """
    Engine working copy of a ledger record.

    short_id and compare_amount are derived once during normalization.
    """

    id: str
    date: str  # ISO "YYYY-MM-DD"
    amount: str  # Original ledger string
    short_id: str
    compare_amount: int  # Milliunits, in YNAB's sign convention
    title: str = ""
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.extra,
            "id": self.id,
            "date": self.date,
            "amount": self.amount,
            "title": self.title,
            "short_id": self.short_id,
            "compare_amount": self.compare_amount,
        }


@dataclass(frozen=True)
class Unchanged:
    """Record already present in YNAB with the same date and amount."""

    record: NormalizedRecord
    match: YnabTransaction


@dataclass(frozen=True)
class Changed:
    """Record found in YNAB by its fingerprint tag, but under another date or amount."""

    record: NormalizedRecord
    original: YnabTransaction


@dataclass(frozen=True)
class Missing:
    """Record with no counterpart in YNAB."""

    record: NormalizedRecord


Classification = Unchanged | Changed | Missing


@dataclass(frozen=True)
class ReconcileResult:
    """
    Outcome of one reconciliation run.

    changed and missing together are exactly the relevant records without an
    equality match; unchanged holds the ones with. skipped holds records that
    fell outside the date filter, and normalized holds every input record in
    input order.
    """

    unchanged: tuple[Unchanged, ...] = ()
    changed: tuple[Changed, ...] = ()
    missing: tuple[Missing, ...] = ()
    skipped: tuple[NormalizedRecord, ...] = ()
    normalized: tuple[NormalizedRecord, ...] = ()

    @property
    def different(self) -> tuple[Changed | Missing, ...]:
        return (*self.changed, *self.missing)

    @property
    def has_differences(self) -> bool:
        return bool(self.changed or self.missing)

    def summary(self) -> dict[str, int]:
        return {
            "unchanged": len(self.unchanged),
            "changed": len(self.changed),
            "missing": len(self.missing),
            "skipped": len(self.skipped),
        }
