"""Conversions between user-entered decimal strings and 18-decimal integers.

Decimal arithmetic runs under a 78-digit context, enough for any uint256,
so no conversion here ever goes through a float.
"""

from __future__ import annotations

import decimal
import re
from decimal import ROUND_HALF_UP, Decimal
from fractions import Fraction

from quoter.constants import TOKEN_DECIMALS

# 78 digits of precision, enough for uint256 values (up to ~10^77)
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)

_AMOUNT_PATTERN = re.compile(r"(\d*)(?:\.(\d*))?", re.ASCII)

PLACEHOLDER = "—"


def parse_amount(text: str, decimals: int = TOKEN_DECIMALS) -> int | None:
    """Parse a decimal string ("0.01", "10", ".5") into smallest units.

    Returns:
        The integer amount, or None if the text is not a plain non-negative
        decimal or has more fraction digits than the token supports.
    """
    trimmed = text.strip()
    match = _AMOUNT_PATTERN.fullmatch(trimmed)
    if match is None:
        return None

    whole, fraction = match.group(1), match.group(2) or ""
    if not whole and not fraction:
        return None
    if len(fraction) > decimals:
        return None

    return int(whole or "0") * 10**decimals + int(fraction.ljust(decimals, "0") or "0")


def to_decimal(value: int, decimals: int = TOKEN_DECIMALS) -> Decimal:
    """Convert smallest units to an exact Decimal token amount."""
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return Decimal(value).scaleb(-decimals)


def format_token(value: int, digits: int = 4, decimals: int = TOKEN_DECIMALS) -> str:
    """Render an amount for display: "9,900.9901".

    Rounds half up to at most ``digits`` fraction digits, drops trailing
    zeros and groups thousands.
    """
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        rounded = to_decimal(value, decimals).quantize(
            Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP
        )
    text = f"{rounded:,.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_price(price: Fraction | None, places: int) -> str:
    """Render a price with a fixed number of places, or a placeholder."""
    if price is None:
        return PLACEHOLDER
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        value = Decimal(price.numerator) / Decimal(price.denominator)
        rounded = value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return f"{rounded:.{places}f}"
