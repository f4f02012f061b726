"""Fee-less constant product AMM.

The DEMO pool is a contract-owned x * y = k pool with no LP tokens and no
swap fee. The invariant reserve_base * reserve_quote = k holds before and
after every trade, so both directions reduce to one formula and its
algebraic inverse:

    forward:  amount_out = floor(amount_in * reserve_out / (reserve_in + amount_in))
    inverse:  amount_in  = ceil(amount_out * reserve_in / (reserve_out - amount_out))

Forward rounds down and inverse rounds up, so an input computed by the
inverse always buys at least the requested output under the forward
formula. Rounding always favours the pool.
"""

from __future__ import annotations

from dataclasses import dataclass

from quoter.amm.base import AMM
from quoter.safe_int import S


@dataclass(frozen=True)
class Reserves:
    """A single snapshot of the pool's two balances (18-decimal integers).

    Attributes:
        reserve_base: ETH held by the pool
        reserve_quote: DEMO held by the pool
    """

    reserve_base: int
    reserve_quote: int

    def __post_init__(self) -> None:
        if self.reserve_base < 0 or self.reserve_quote < 0:
            raise ValueError(
                f"Reserves cannot be negative: ({self.reserve_base}, {self.reserve_quote})"
            )

    @property
    def is_funded(self) -> bool:
        """True if both sides of the pool hold liquidity."""
        return self.reserve_base > 0 and self.reserve_quote > 0

    def oriented(self, *, base_in: bool) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out).

        Args:
            base_in: True if the trader pays the base asset (ETH)
        """
        if base_in:
            return self.reserve_base, self.reserve_quote
        return self.reserve_quote, self.reserve_base


class ConstantProduct(AMM):
    """Integer math for the fee-less x * y = k curve.

    Both methods return 0 for non-positive amounts or an empty pool and
    never return a negative value. ``get_amount_in`` raises for outputs that
    would drain the pool; callers that need an error value check
    ``amount_out < reserve_out`` first (see quoter.quoting.engine).
    """

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate output amount for an exact input (rounds down).

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount
        """
        if amount_in <= 0:
            return 0
        if reserve_in <= 0 or reserve_out <= 0:
            return 0

        numerator = S(amount_in) * S(reserve_out)
        denominator = S(reserve_in) + S(amount_in)

        return (numerator // denominator).value

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
    ) -> int:
        """Calculate required input for an exact output (rounds up).

        Args:
            amount_out: Desired output token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Required input token amount

        Raises:
            ValueError: If amount_out is not strictly below reserve_out
        """
        if amount_out <= 0:
            return 0
        if reserve_in <= 0 or reserve_out <= 0:
            return 0
        if amount_out >= reserve_out:
            raise ValueError(f"Cannot take {amount_out} from a reserve of {reserve_out}")

        numerator = S(amount_out) * S(reserve_in)
        denominator = S(reserve_out) - S(amount_out)

        return numerator.ceiling_div(denominator).value


# Singleton instance
constant_product = ConstantProduct()


__all__ = [
    "Reserves",
    "ConstantProduct",
    "constant_product",
]
