#!/usr/bin/env python3
"""
Reconciliation Engine

Compares ledger records against the transactions already in a YNAB account and
classifies every relevant record:

1. Normalize: ISO date, fingerprint and milliunit compare amount.
2. Filter: keep records inside the requested years (or date predicate).
3. Equality match: a YNAB transaction with the same date and amount means the
   record is already synced (Unchanged).
4. Fingerprint match: otherwise, the first YNAB transaction whose memo carries
   "#<fingerprint>" is the record created by an earlier run under a different
   date (Changed).
5. Anything else is Missing.

The engine is pure: it performs no I/O and never mutates its inputs.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from ..core.currency import format_milliunits, normalize_amount
from ..core.dates import FinancialDate
from ..core.errors import AmbiguousFingerprintMatch
from ..core.fingerprint import fingerprint, memo_has_tag
from ..ledger.models import LedgerRecord
from ..ynab.models import YnabTransaction
from .models import Changed, Classification, Missing, NormalizedRecord, ReconcileResult, Unchanged

logger = logging.getLogger(__name__)

DateFilter = Callable[[str], bool]


def normalize_record(record: LedgerRecord | dict[str, Any]) -> NormalizedRecord:
    """
    Derive the engine working copy of a ledger record.

    Args:
        record: LedgerRecord, or a raw ledger dict

    Returns:
        NormalizedRecord with ISO date, fingerprint and compare amount

    Raises:
        ParseError: If the amount or date is malformed
    """
    if not isinstance(record, LedgerRecord):
        record = LedgerRecord.from_dict(record)

    return NormalizedRecord(
        id=record.id,
        date=FinancialDate.from_string(record.date).to_iso_string(),
        amount=record.amount,
        short_id=fingerprint(record.id),
        compare_amount=normalize_amount(record.amount),
        title=record.title,
        extra=dict(record.extra),
    )


def year_prefix_filter(year_prefixes: Iterable[str]) -> DateFilter:
    """
    Build a date predicate accepting ISO dates that start with any prefix.

    Args:
        year_prefixes: Prefixes such as "2018" or "2018-0"

    Raises:
        TypeError: If a single string is passed instead of a sequence
        ValueError: If no prefixes are given, or one is empty
    """
    if isinstance(year_prefixes, str):
        raise TypeError(f"year_prefixes must be a sequence of prefixes, not the string {year_prefixes!r}")

    prefixes = tuple(str(p) for p in year_prefixes)
    if not prefixes:
        raise ValueError("At least one year prefix is required")
    if not all(prefixes):
        raise ValueError("Year prefixes must not be empty")

    def accepts(iso_date: str) -> bool:
        return iso_date.startswith(prefixes)

    return accepts


def find_fingerprint_matches(short_id: str, transactions: Sequence[YnabTransaction]) -> list[YnabTransaction]:
    """Return every transaction whose memo carries the fingerprint tag, in list order."""
    return [tx for tx in transactions if memo_has_tag(tx.memo, short_id)]


def classify(
    record: NormalizedRecord,
    transactions: Sequence[YnabTransaction],
    by_date_amount: dict[tuple[str, int], YnabTransaction],
    strict: bool = False,
) -> Classification:
    """
    Classify one in-window record.

    by_date_amount maps (date, amount) to the first transaction with that key.
    """
    match = by_date_amount.get((record.date, record.compare_amount))
    if match is not None:
        return Unchanged(record=record, match=match)

    candidates = find_fingerprint_matches(record.short_id, transactions)
    if len(candidates) > 1:
        ids = [tx.id for tx in candidates]
        if strict:
            raise AmbiguousFingerprintMatch(record.short_id, ids)
        logger.warning(
            f"Record {record.id} fingerprint #{record.short_id} tagged on {len(ids)} transactions, "
            f"using {ids[0]}"
        )

    if candidates:
        return Changed(record=record, original=candidates[0])
    return Missing(record=record)


def reconcile(
    records: Iterable[LedgerRecord | dict[str, Any]],
    transactions: Sequence[YnabTransaction],
    year_prefixes: Iterable[str] | None = None,
    *,
    date_filter: DateFilter | None = None,
    strict: bool = False,
) -> ReconcileResult:
    """
    Classify ledger records against the destination account's transactions.

    Args:
        records: Ledger records (LedgerRecord or raw dicts)
        transactions: Already-fetched transactions of the destination account
        year_prefixes: ISO date prefixes of the relevant years
        date_filter: Predicate on ISO dates, used instead of year_prefixes
        strict: Raise when several transactions share a fingerprint tag
                instead of taking the first one

    Returns:
        ReconcileResult with unchanged, changed, missing, skipped and all
        normalized records

    Raises:
        ParseError: If any record is malformed; nothing is classified then
        AmbiguousFingerprintMatch: In strict mode, on a shared fingerprint tag
        ValueError: If neither year_prefixes nor date_filter is given
        TypeError: If year_prefixes is a single string
    """
    if date_filter is None:
        if year_prefixes is None:
            raise ValueError("reconcile() needs year_prefixes or date_filter")
        date_filter = year_prefix_filter(year_prefixes)

    # Records outside the window are normalized too; any malformed record aborts
    normalized = [normalize_record(r) for r in records]

    relevant = [r for r in normalized if date_filter(r.date)]
    skipped = tuple(r for r in normalized if not date_filter(r.date))

    by_date_amount: dict[tuple[str, int], YnabTransaction] = {}
    for tx in transactions:
        by_date_amount.setdefault((tx.date, tx.amount), tx)

    unchanged: list[Unchanged] = []
    changed: list[Changed] = []
    missing: list[Missing] = []

    for record in relevant:
        classification = classify(record, transactions, by_date_amount, strict=strict)
        if isinstance(classification, Unchanged):
            unchanged.append(classification)
        elif isinstance(classification, Changed):
            changed.append(classification)
        else:
            missing.append(classification)
            logger.debug(
                f"Missing {record.id}: {record.date} {format_milliunits(record.compare_amount)} {record.title!r}"
            )

    result = ReconcileResult(
        unchanged=tuple(unchanged),
        changed=tuple(changed),
        missing=tuple(missing),
        skipped=skipped,
        normalized=tuple(normalized),
    )
    logger.info(
        "Reconciled %d records: %d unchanged, %d changed, %d missing, %d outside date filter",
        len(normalized),
        len(result.unchanged),
        len(result.changed),
        len(result.missing),
        len(result.skipped),
    )
    return result
