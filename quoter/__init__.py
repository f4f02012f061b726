"""Constant-product quoting engine for the ETH/DEMO pool."""

from quoter.amm.constant_product import Reserves
from quoter.quoting import (
    Bound,
    BoundKind,
    Quote,
    QuoteError,
    QuoteResult,
    TradeMode,
    compute_bound,
    parse_slippage_bps,
    price_impact,
    quote,
)

__version__ = "0.1.0"
__all__ = [
    "Reserves",
    "TradeMode",
    "Quote",
    "QuoteResult",
    "QuoteError",
    "Bound",
    "BoundKind",
    "quote",
    "compute_bound",
    "price_impact",
    "parse_slippage_bps",
    "__version__",
]
