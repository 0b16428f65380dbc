#!/usr/bin/env python3
"""
Currency Display and Parsing Utilities

Amounts in Pondo are signed whole-number quantities of the user's currency.
There is no implicit decimal scaling: an amount of 1500 is displayed as
"₱ 1,500.00". All arithmetic stays in integers.

Key Principles:
- Never use floating-point arithmetic for amounts
- The currency symbol is derived from the currency code by a fixed table
- Form input that cannot be parsed becomes 0 and is rejected by validation
"""

import re
from decimal import ROUND_HALF_UP, Decimal

DEFAULT_CURRENCY_CODE = "PHP"
DEFAULT_CURRENCY_SYMBOL = "₱"

CURRENCY_SYMBOLS: dict[str, str] = {
    "PHP": "₱",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def currency_symbol_for(code: str) -> str:
    """
    Look up the display symbol for a currency code.

    Args:
        code: ISO currency code such as "USD"

    Returns:
        The symbol for known codes, the peso sign for anything else

    Example:
        currency_symbol_for("EUR") -> "€"
        currency_symbol_for("XYZ") -> "₱"
    """
    return CURRENCY_SYMBOLS.get(code, DEFAULT_CURRENCY_SYMBOL)


def format_with_commas(value: int) -> str:
    """
    Group the digits of an integer with thousands separators.

    Args:
        value: Integer to format (sign is preserved)

    Returns:
        Digit string with a comma every three digits from the right

    Example:
        format_with_commas(1234567) -> "1,234,567"
        format_with_commas(-1000) -> "-1,000"
    """
    is_negative = value < 0
    digits = str(abs(int(value)))

    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)

    formatted = ",".join(groups)
    return f"-{formatted}" if is_negative else formatted


def format_currency(amount: int, symbol: str) -> str:
    """
    Format a whole-number amount for display.

    Args:
        amount: Signed amount in whole currency units
        symbol: Currency symbol to prefix

    Returns:
        Display string with sign, symbol, grouped magnitude and ".00"

    Examples:
        format_currency(0, "$") -> "$ 0.00"
        format_currency(1000, "$") -> "$ 1,000.00"
        format_currency(-1234567, "₱") -> "-₱ 1,234,567.00"
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {format_with_commas(abs(amount))}.00"


def parse_amount(text: str) -> int:
    """
    Parse user-entered amount text into an integer.

    Only plain integers are accepted (an optional leading sign and digits).
    Anything else, including decimals, yields 0 so that form validation
    rejects it.

    Args:
        text: Raw form input

    Returns:
        Parsed integer, or 0 for invalid input

    Examples:
        parse_amount("1500") -> 1500
        parse_amount(" -20 ") -> -20
        parse_amount("12.50") -> 0
        parse_amount("") -> 0
    """
    if not isinstance(text, str):
        return 0
    text = text.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return 0
    return int(text)


def round_half_away(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(value.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def percent_of(part: int, whole: int) -> int:
    """
    Integer percentage of ``part`` relative to ``whole``.

    Uses decimal arithmetic so that exact halves round away from zero.
    Returns 0 when ``whole`` is not positive.

    Example:
        percent_of(800, 500) -> 160
        percent_of(1, 8) -> 13  # 12.5 rounds up
    """
    if whole <= 0:
        return 0
    return round_half_away(Decimal(part) * 100 / Decimal(whole))
