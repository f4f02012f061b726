"""Pydantic models for the quote API."""

from enum import Enum

from pydantic import BaseModel, Field

from quoter.models.types import Uint256
from quoter.quoting.bounds import BoundKind
from quoter.quoting.types import TradeMode


class ImpactSeverity(str, Enum):
    """Display severity of a price impact."""

    NONE = "none"  # < 1%
    LOW = "low"  # 1-5%
    MODERATE = "moderate"  # 5-10%
    HIGH = "high"  # > 10%


class QuoteRequest(BaseModel):
    """A trade to quote against a reserve snapshot."""

    reserve_base: Uint256 = Field(alias="reserveBase", description="ETH reserve.")
    reserve_quote: Uint256 = Field(alias="reserveQuote", description="DEMO reserve.")
    mode: TradeMode
    amount: Uint256 = Field(description="Exact amount in the smallest unit.")
    slippage: str | None = Field(
        default=None,
        description="Slippage tolerance in percent, e.g. '1.0'. Server default if omitted.",
    )
    balance: Uint256 | None = Field(
        default=None,
        description="Caller's DEMO balance; enables the balance check for sells.",
    )

    model_config = {"populate_by_name": True}


class BoundModel(BaseModel):
    """Slippage bound for execution."""

    kind: BoundKind
    amount: Uint256


class QuoteResponse(BaseModel):
    """Quote, bound and price impact for a trade.

    Engine errors are reported in ``error`` rather than as HTTP errors.
    """

    mode: TradeMode
    exact_amount: Uint256 = Field(alias="exactAmount")
    amount_in: Uint256 | None = Field(default=None, alias="amountIn")
    amount_out: Uint256 | None = Field(default=None, alias="amountOut")
    bound: BoundModel | None = None
    slippage_bps: int | None = Field(default=None, alias="slippageBps")
    price_impact: float | None = Field(default=None, alias="priceImpact")
    impact_severity: ImpactSeverity | None = Field(default=None, alias="impactSeverity")
    error: str | None = None
    error_detail: str | None = Field(default=None, alias="errorDetail")

    model_config = {"populate_by_name": True}
