"""Quote result types."""

from dataclasses import dataclass
from enum import Enum

from quoter.quoting.types import Quote


class QuoteError(Enum):
    """Reasons a trade cannot be quoted."""

    INVALID_AMOUNT = "invalid_amount"
    EXCEEDS_RESERVE = "exceeds_reserve"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    POOL_NOT_FUNDED = "pool_not_funded"
    AMOUNT_TOO_SMALL = "amount_too_small"

    @property
    def is_blocking(self) -> bool:
        """True if the error must be shown and blocks the trade.

        INVALID_AMOUNT only suppresses the quote display.
        """
        return self is not QuoteError.INVALID_AMOUNT


@dataclass(frozen=True)
class QuoteResult:
    """Result of a quote calculation.

    Engine errors are values, so callers branch on the result instead of
    catching exceptions. A result with neither quote nor error means
    nothing has been entered yet.

    Examples:
        # Successful quote
        result = QuoteResult.with_quote(Quote(TradeMode.SPEND_EXACT_IN, 100, 181))
        assert result.is_valid

        # Nothing entered
        result = QuoteResult.empty()
        assert result.is_empty

        # Error case
        result = QuoteResult.with_error(QuoteError.EXCEEDS_RESERVE)
        assert result.is_error
    """

    quote: Quote | None = None
    error: QuoteError | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        """True if a quote was produced."""
        return self.quote is not None and self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def is_empty(self) -> bool:
        """True if there is nothing to quote yet."""
        return self.quote is None and self.error is None

    @classmethod
    def empty(cls) -> "QuoteResult":
        return cls()

    @classmethod
    def with_quote(cls, quote: Quote) -> "QuoteResult":
        return cls(quote=quote)

    @classmethod
    def with_error(cls, error: QuoteError, detail: str | None = None) -> "QuoteResult":
        return cls(error=error, error_detail=detail)
