"""Quote engine: one entry point for all four trade modes.

| Mode              | pays | receives | formula |
|-------------------|------|----------|---------|
| SPEND_EXACT_IN    | ETH  | DEMO     | forward |
| BUY_EXACT_OUT     | ETH  | DEMO     | inverse |
| SELL_EXACT_IN     | DEMO | ETH      | forward |
| RECEIVE_EXACT_OUT | DEMO | ETH      | inverse |

The caller's DEMO balance is not checked here; that belongs to the trade
orchestrator, which owns the balance snapshot.
"""

from __future__ import annotations

import structlog

from quoter.amm.constant_product import ConstantProduct, Reserves, constant_product
from quoter.quoting.result import QuoteError, QuoteResult
from quoter.quoting.types import Quote, TradeMode

logger = structlog.get_logger()


def quote(
    reserves: Reserves,
    mode: TradeMode,
    amount: int,
    amm: ConstantProduct = constant_product,
) -> QuoteResult:
    """Quote a trade against a reserve snapshot.

    Args:
        reserves: Pool snapshot
        mode: Trade mode; decides which side ``amount`` fixes
        amount: The exact amount in the smallest unit

    Returns:
        QuoteResult. Non-positive amounts give an empty result; an exact
        output at or above the reserve gives EXCEEDS_RESERVE.
    """
    if amount <= 0:
        return QuoteResult.empty()

    if not reserves.is_funded:
        return QuoteResult.with_error(
            QuoteError.POOL_NOT_FUNDED,
            f"reserves=({reserves.reserve_base}, {reserves.reserve_quote})",
        )

    reserve_in, reserve_out = reserves.oriented(base_in=mode.is_buy)

    if mode.is_exact_input:
        counterpart = amm.get_amount_out(amount, reserve_in, reserve_out)
        if counterpart <= 0:
            return QuoteResult.with_error(
                QuoteError.AMOUNT_TOO_SMALL,
                f"{amount} in yields no output",
            )
    else:
        if amount >= reserve_out:
            return QuoteResult.with_error(
                QuoteError.EXCEEDS_RESERVE,
                f"requested {amount}, reserve {reserve_out}",
            )
        counterpart = amm.get_amount_in(amount, reserve_in, reserve_out)

    result = Quote(mode=mode, exact_amount=amount, amount=counterpart)

    logger.debug(
        "quote_computed",
        mode=mode.value,
        exact_amount=amount,
        amount=counterpart,
        reserve_base=reserves.reserve_base,
        reserve_quote=reserves.reserve_quote,
    )

    return QuoteResult.with_quote(result)


__all__ = ["quote"]
