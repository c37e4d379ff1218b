#!/usr/bin/env python3
"""
FinancialDate Primitive Type

Ledger exports and YNAB both key transactions by calendar day. FinancialDate
parses the different spellings once and hands out the two formats the sync
needs: ISO for matching and the API, MM/DD/YYYY for YNAB's file importer.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

from .errors import ParseError

ISO_FORMAT = "%Y-%m-%d"
CSV_FORMAT = "%m/%d/%Y"
# What may follow YYYY-MM-DD: a time, optional fraction and UTC offset
TIME_SUFFIX = re.compile(r"[T ]\d{2}:\d{2}(:\d{2}(\.\d+)?)?(Z|[+-]\d{2}:?\d{2})?")


@dataclass(frozen=True, order=True)
class FinancialDate:
    """A calendar day, ordered chronologically."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, format: str = ISO_FORMAT) -> "FinancialDate":
        """
        Parse a date string.

        Ledger exports sometimes carry a time component ("2018-03-01 00:00:00"
        or "2018-03-01T00:00:00"); with the ISO format only the first ten
        characters are parsed and anything after them must be a time.

        Raises:
            ParseError: If the value is not a string or not a valid date
        """
        if not isinstance(date_str, str):
            raise ParseError(f"Date must be a string, got {type(date_str).__name__}: {date_str!r}")

        value = date_str.strip()
        if format == ISO_FORMAT:
            value, rest = value[:10], value[10:]
            if rest and not TIME_SUFFIX.fullmatch(rest):
                raise ParseError(f"Malformed date: {date_str!r}")

        try:
            parsed = datetime.strptime(value, format)
        except ValueError as e:
            raise ParseError(f"Malformed date: {date_str!r}") from e
        return cls(date=parsed.date())

    @property
    def year(self) -> int:
        return self.date.year

    def to_iso_string(self) -> str:
        return self.date.isoformat()

    def to_csv_format(self) -> str:
        return self.date.strftime(CSV_FORMAT)
