"""Slippage bounds for quoted trades."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from quoter.constants import BPS_DENOMINATOR, MAX_SLIPPAGE_BPS, MIN_OUTPUT_SAFE
from quoter.quoting.types import Quote
from quoter.safe_int import S


class BoundKind(str, Enum):
    """Which threshold a bound sets."""

    MIN_OUT = "min_out"  # exact-input trades: least output accepted
    MAX_IN = "max_in"  # exact-output trades: most input paid


@dataclass(frozen=True)
class Bound:
    """Execution threshold derived from a quote and a slippage tolerance."""

    kind: BoundKind
    amount: int


def compute_bound(quote: Quote, bps: int, min_output: int = MIN_OUTPUT_SAFE) -> Bound:
    """Move the quoted amount against the trader by the tolerance.

    Exact input:  min_out = amount - floor(amount * bps / 10000), at least 1
    Exact output: max_in  = amount + ceil(amount * bps / 10000)

    Args:
        quote: A successful quote
        bps: Slippage tolerance from parse_slippage_bps
        min_output: Floor for the minimum-output bound

    Raises:
        ValueError: If bps is outside [0, 10000]
    """
    if not 0 <= bps <= MAX_SLIPPAGE_BPS:
        raise ValueError(f"Slippage must be within [0, {MAX_SLIPPAGE_BPS}] bps, got {bps}")

    amount = S(quote.amount)

    if quote.mode.is_exact_input:
        buffer = (amount * bps) // BPS_DENOMINATOR
        min_out = (amount - buffer).max(min_output)
        return Bound(kind=BoundKind.MIN_OUT, amount=min_out.value)

    buffer = (amount * bps).ceiling_div(BPS_DENOMINATOR)
    return Bound(kind=BoundKind.MAX_IN, amount=(amount + buffer).value)
