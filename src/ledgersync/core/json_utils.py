#!/usr/bin/env python3
"""
JSON Utilities Module

Ledger input, YNAB cache files, diagnostics and date-correction worksheets
all go through these helpers, so files on disk are UTF-8, pretty-printed and
easy to diff.
"""

import json
from pathlib import Path
from typing import Any

INDENT = 2


def write_json(filepath: str | Path, data: Any) -> Path:
    """Write ``data`` as indented UTF-8 JSON, creating parent directories. Returns the path."""
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=INDENT, ensure_ascii=False) + "\n", encoding="utf-8")
    return path


def read_json(filepath: str | Path) -> Any:
    return json.loads(Path(filepath).read_text(encoding="utf-8"))


def unwrap_list(data: Any, key: str) -> list[dict[str, Any]]:
    """
    Extract a record list from either a bare JSON array or an object wrapper.

    YNAB responses and CLI exports come as {"<key>": [...]} while hand-made
    files are often plain arrays.

    Args:
        data: Parsed JSON document
        key: Wrapper key to look for ("transactions", "accounts", ...)

    Returns:
        List of record dicts, empty if the document has neither shape
    """
    if isinstance(data, dict):
        if "data" in data and isinstance(data["data"], dict):
            data = data["data"]
        records: list[dict[str, Any]] = data.get(key, [])
        return records
    if isinstance(data, list):
        return data
    return []
