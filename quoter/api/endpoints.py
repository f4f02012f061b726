"""API endpoints for the quoter."""

import os

import structlog
from fastapi import APIRouter

from quoter.amm.constant_product import Reserves
from quoter.constants import DEFAULT_SLIPPAGE
from quoter.models.quote import BoundModel, ImpactSeverity, QuoteRequest, QuoteResponse
from quoter.quoting.bounds import compute_bound
from quoter.quoting.engine import quote
from quoter.quoting.impact import quote_price_impact
from quoter.quoting.slippage import parse_slippage_bps
from quoter.trading.errors import TradeFailure
from quoter.trading.orchestrator import check_balance

logger = structlog.get_logger()

router = APIRouter()

# Tolerance used when a request does not carry one
# Configurable via environment variable QUOTER_DEFAULT_SLIPPAGE
SERVER_DEFAULT_SLIPPAGE = os.environ.get("QUOTER_DEFAULT_SLIPPAGE", DEFAULT_SLIPPAGE)

# Severity thresholds in percent (strictly greater than)
HIGH_IMPACT_PERCENT = 10.0
MODERATE_IMPACT_PERCENT = 5.0
LOW_IMPACT_PERCENT = 1.0


def classify_impact(impact: float) -> ImpactSeverity:
    """Map a price impact percentage to its display severity."""
    if impact > HIGH_IMPACT_PERCENT:
        return ImpactSeverity.HIGH
    if impact > MODERATE_IMPACT_PERCENT:
        return ImpactSeverity.MODERATE
    if impact > LOW_IMPACT_PERCENT:
        return ImpactSeverity.LOW
    return ImpactSeverity.NONE


@router.post("/quote", response_model_exclude_none=True)
async def post_quote(request: QuoteRequest) -> QuoteResponse:
    """Quote a trade against the given reserves.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Engine errors (exceeds reserve, insufficient balance, unfunded
          pool, dust amount): 200 with ``error`` set and no amounts
        - Invalid slippage: 200 with the quote but no bound, ``error`` set
        - Zero amount: 200 with no amounts and no error
    """
    reserves = Reserves(request.reserve_base, request.reserve_quote)
    slippage_text = request.slippage if request.slippage is not None else SERVER_DEFAULT_SLIPPAGE
    bps = parse_slippage_bps(slippage_text)

    result = check_balance(quote(reserves, request.mode, request.amount), request.balance)

    logger.info(
        "quote_requested",
        mode=request.mode.value,
        amount=request.amount,
        slippage_bps=bps,
        error=result.error.value if result.error else None,
    )

    response = QuoteResponse(
        mode=request.mode,
        exact_amount=request.amount,
        slippage_bps=bps,
    )

    if result.error is not None:
        response.error = result.error.value
        response.error_detail = result.error_detail
        return response
    if result.quote is None:
        return response

    impact = quote_price_impact(reserves, result.quote)
    response.amount_in = result.quote.amount_in
    response.amount_out = result.quote.amount_out
    response.price_impact = impact
    response.impact_severity = classify_impact(impact)

    if bps is None:
        response.error = TradeFailure.INVALID_SLIPPAGE.value
        response.error_detail = f"unparseable slippage {slippage_text!r}"
    else:
        bound = compute_bound(result.quote, bps)
        response.bound = BoundModel(kind=bound.kind, amount=bound.amount)

    return response
