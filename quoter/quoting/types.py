"""Trade mode and quote value types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TradeMode(str, Enum):
    """Which side of a trade is exact, and which way value flows.

    Values match the trade-mode identifiers of the web client.
    """

    BUY_EXACT_OUT = "buy-exact-demo"  # exact DEMO out, compute ETH in
    SELL_EXACT_IN = "sell-exact-demo"  # exact DEMO in, compute ETH out
    SPEND_EXACT_IN = "spend-exact-eth"  # exact ETH in, compute DEMO out
    RECEIVE_EXACT_OUT = "receive-exact-eth"  # exact ETH out, compute DEMO in

    @property
    def is_exact_input(self) -> bool:
        """True if the trader fixes the amount paid."""
        return self in (TradeMode.SELL_EXACT_IN, TradeMode.SPEND_EXACT_IN)

    @property
    def is_buy(self) -> bool:
        """True if the trader pays ETH and receives DEMO."""
        return self in (TradeMode.BUY_EXACT_OUT, TradeMode.SPEND_EXACT_IN)


@dataclass(frozen=True)
class Quote:
    """A successful quote.

    Attributes:
        mode: Trade mode the quote was computed for
        exact_amount: The amount the trader fixed (input or output side)
        amount: The computed counterpart (output for exact-input modes,
            required input for exact-output modes)
    """

    mode: TradeMode
    exact_amount: int
    amount: int

    @property
    def amount_in(self) -> int:
        """Amount the trader pays."""
        return self.exact_amount if self.mode.is_exact_input else self.amount

    @property
    def amount_out(self) -> int:
        """Amount the trader receives."""
        return self.amount if self.mode.is_exact_input else self.exact_amount
