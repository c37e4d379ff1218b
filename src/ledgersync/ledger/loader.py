#!/usr/bin/env python3
"""
Ledger Data Loader

Loads the exported source ledger (a JSON file) into LedgerRecord domain models.
"""

import logging
from pathlib import Path

from ..core.errors import ParseError
from ..core.json_utils import read_json, unwrap_list
from .models import LedgerRecord

logger = logging.getLogger(__name__)


def load_ledger(input_path: str | Path) -> list[LedgerRecord]:
    """
    Load ledger records from a JSON export.

    Accepts either a bare array of records or an object with a
    "transactions" key.

    Args:
        input_path: Path to the ledger export

    Returns:
        List of LedgerRecord domain models, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ParseError: If the file is not valid JSON or a record is malformed
    """
    input_path = Path(input_path)

    if not input_path.exists():
        raise FileNotFoundError(f"Ledger file not found: {input_path}")

    try:
        data = read_json(input_path)
    except ValueError as e:
        raise ParseError(f"Ledger file is not valid JSON: {input_path}: {e}") from e

    if isinstance(data, dict) and not isinstance(data.get("transactions"), list):
        keys = ", ".join(data) or "none"
        raise ParseError(f"Ledger object has no \"transactions\" list: {input_path} (keys: {keys})")
    if not isinstance(data, (list, dict)):
        raise ParseError(f"Ledger file must contain a list of records: {input_path}")

    records = [LedgerRecord.from_dict(item) for item in unwrap_list(data, "transactions")]
    logger.info(f"Loaded {len(records)} ledger records from {input_path}")
    return records
