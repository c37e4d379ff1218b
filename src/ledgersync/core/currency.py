#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All amounts are handled with integer arithmetic to avoid floating-point errors.

Currency Systems:
- Source ledger exports use locale strings: "-1.234" or "50.00"
- YNAB uses milliunits: 1000 milliunits = 1.00
- Display and CSV import files use dollar strings: "12.34"

Sign Convention:
The source ledger lists charges unsigned and credits with a leading minus
sign, while YNAB stores outflows as negative milliunits, so normalization
flips the sign: "-1.234" becomes 12340 and "50.00" becomes -50000.
"""

from .errors import ParseError

LEDGER_SEPARATOR = "."
MINOR_UNIT_SCALE = 10


def normalize_amount(amount: str) -> int:
    """
    Convert a ledger amount string to signed YNAB milliunits.

    Args:
        amount: Locale-formatted amount like "50.00", "-1.234" or "12"

    Returns:
        Signed amount in milliunits, sign-flipped relative to the ledger

    Raises:
        ParseError: If the amount is not a string or has a non-numeric remainder

    Examples:
        normalize_amount("12.34") -> -12340
        normalize_amount("-1.234") -> 12340
    """
    if not isinstance(amount, str):
        raise ParseError(f"Amount must be a string, got {type(amount).__name__}: {amount!r}")

    clean = amount.strip()
    is_withdrawal = clean.startswith("-")
    if is_withdrawal:
        clean = clean[1:]

    digits = clean.replace(LEDGER_SEPARATOR, "", 1)
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ParseError(f"Malformed amount: {amount!r}")

    value = int(digits) * MINOR_UNIT_SCALE
    return value if is_withdrawal else -value


def milliunits_to_cents(milliunits: int) -> int:
    """
    Convert YNAB milliunits to cents.

    Args:
        milliunits: YNAB amount in milliunits (1000 = $1.00)

    Returns:
        Absolute amount in cents (100 = $1.00)

    Example:
        milliunits_to_cents(-45990) -> 4599  # $45.99
    """
    return abs(milliunits) // 10


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def milliunits_to_dollars_str(milliunits: int) -> str:
    """Format the magnitude of a milliunit amount as a plain dollar string."""
    return cents_to_dollars_str(milliunits_to_cents(milliunits))


def format_milliunits(milliunits: int) -> str:
    """Format milliunits as a signed dollar string with $ prefix."""
    sign = "-" if milliunits < 0 else ""
    return f"{sign}${milliunits_to_dollars_str(milliunits)}"
