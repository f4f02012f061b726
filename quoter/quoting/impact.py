"""Price impact and spot price.

All prices are on one axis, ETH per DEMO (base per quote), whichever way
the trade goes. Ratios are kept as exact Fractions; only the final
percentage is converted to float for display.
"""

from __future__ import annotations

from fractions import Fraction

from quoter.amm.constant_product import Reserves
from quoter.quoting.types import Quote, TradeMode


def spot_price_base_per_quote(reserves: Reserves) -> Fraction | None:
    """Pool price in ETH per DEMO, or None if the pool is not funded."""
    if not reserves.is_funded:
        return None
    return Fraction(reserves.reserve_base, reserves.reserve_quote)


def spot_price_quote_per_base(reserves: Reserves) -> Fraction | None:
    """Pool price in DEMO per ETH, or None if the pool is not funded."""
    if not reserves.is_funded:
        return None
    return Fraction(reserves.reserve_quote, reserves.reserve_base)


def effective_price(mode: TradeMode, amount_in: int, amount_out: int) -> Fraction:
    """The trade's own ETH-per-DEMO price.

    Buys pay ETH for DEMO (in / out); sells pay DEMO for ETH (out / in).

    Raises:
        ValueError: If either amount is not positive
    """
    if amount_in <= 0 or amount_out <= 0:
        raise ValueError(f"Trade amounts must be positive: in={amount_in}, out={amount_out}")
    if mode.is_buy:
        return Fraction(amount_in, amount_out)
    return Fraction(amount_out, amount_in)


def price_impact_ratio(
    reserves: Reserves,
    mode: TradeMode,
    amount_in: int,
    amount_out: int,
) -> Fraction:
    """Exact |effective - spot| / spot, as a fraction (not a percentage).

    Args:
        reserves: Pre-trade pool snapshot
        mode: Trade mode, used to orient the effective price
        amount_in: Amount the trader pays
        amount_out: Amount the trader receives

    Raises:
        ValueError: If the pool is not funded or an amount is not positive
    """
    spot = spot_price_base_per_quote(reserves)
    if spot is None:
        raise ValueError("Price impact is undefined for an unfunded pool")
    effective = effective_price(mode, amount_in, amount_out)
    return abs((effective - spot) / spot)


def price_impact(
    reserves: Reserves,
    mode: TradeMode,
    amount_in: int,
    amount_out: int,
) -> float:
    """Price impact in percent (non-negative)."""
    return float(price_impact_ratio(reserves, mode, amount_in, amount_out) * 100)


def quote_price_impact(reserves: Reserves, quote: Quote) -> float:
    """Price impact in percent of a quote against the reserves it came from."""
    return price_impact(reserves, quote.mode, quote.amount_in, quote.amount_out)
