#!/usr/bin/env python3
"""
Record Fingerprints

Short deterministic hashes of ledger record identifiers. Fingerprints are
written into YNAB memos as "#<fingerprint>" tags so created transactions can
be recognised again on a later run, even after YNAB or the user rewrites the
rest of the memo.
"""

import hashlib

FINGERPRINT_LENGTH = 10
TAG_PREFIX = "#"


def fingerprint(identifier: str) -> str:
    """
    Derive the fingerprint of a ledger record identifier.

    Args:
        identifier: Opaque record id from the source ledger

    Returns:
        Lowercase hex string of FINGERPRINT_LENGTH characters
    """
    digest = hashlib.sha256(str(identifier).encode("utf-8")).hexdigest()
    return digest[:FINGERPRINT_LENGTH]


def fingerprint_tag(short_id: str) -> str:
    """Return the memo tag for a fingerprint."""
    return f"{TAG_PREFIX}{short_id}"


def memo_has_tag(memo: str | None, short_id: str) -> bool:
    """Check whether a memo carries the tag for the given fingerprint."""
    if not memo:
        return False
    return fingerprint_tag(short_id) in memo
