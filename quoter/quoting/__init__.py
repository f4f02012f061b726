"""Quoting for the ETH/DEMO pool.

Usage:
    from quoter.quoting import TradeMode, compute_bound, parse_slippage_bps, quote

    result = quote(reserves, TradeMode.SPEND_EXACT_IN, amount)
    bps = parse_slippage_bps("1.0")

    if result.is_valid and bps is not None:
        bound = compute_bound(result.quote, bps)
    elif result.is_error:
        handle_error(result.error)
"""

from quoter.quoting.bounds import Bound, BoundKind, compute_bound
from quoter.quoting.engine import quote
from quoter.quoting.impact import (
    effective_price,
    price_impact,
    price_impact_ratio,
    quote_price_impact,
    spot_price_base_per_quote,
    spot_price_quote_per_base,
)
from quoter.quoting.result import QuoteError, QuoteResult
from quoter.quoting.slippage import format_bps, parse_slippage_bps
from quoter.quoting.types import Quote, TradeMode
from quoter.quoting.units import format_price, format_token, parse_amount

__all__ = [
    # Engine
    "quote",
    "Quote",
    "TradeMode",
    "QuoteResult",
    "QuoteError",
    # Bounds
    "Bound",
    "BoundKind",
    "compute_bound",
    # Slippage
    "parse_slippage_bps",
    "format_bps",
    # Price impact
    "price_impact",
    "price_impact_ratio",
    "quote_price_impact",
    "effective_price",
    "spot_price_base_per_quote",
    "spot_price_quote_per_base",
    # Units
    "parse_amount",
    "format_token",
    "format_price",
]
