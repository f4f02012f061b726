"""Tests for slippage bounds."""

import pytest

from quoter.quoting import Bound, BoundKind, Quote, TradeMode, compute_bound, quote
from tests.helpers import (
    SCENARIO_MIN_OUT_1PCT,
    SCENARIO_RESERVES,
    SCENARIO_SPEND_IN,
    SCENARIO_SPEND_OUT,
    WAD,
)

SPEND = Quote(TradeMode.SPEND_EXACT_IN, 100, 181)
BUY = Quote(TradeMode.BUY_EXACT_OUT, 100, 53)


class TestMinOut:
    """Exact-input trades get a minimum output."""

    def test_scenario_one_percent(self):
        result = quote(SCENARIO_RESERVES, TradeMode.SPEND_EXACT_IN, SCENARIO_SPEND_IN)
        bound = compute_bound(result.quote, 100)
        assert bound == Bound(BoundKind.MIN_OUT, SCENARIO_MIN_OUT_1PCT)

    def test_buffer_rounds_down(self):
        """181 - floor(181 * 100 / 10000) = 180."""
        assert compute_bound(SPEND, 100).amount == 180

    def test_zero_tolerance(self):
        assert compute_bound(SPEND, 0).amount == 181

    def test_full_tolerance_floored_at_one(self):
        """100% slippage would allow zero output; the floor keeps it at 1."""
        assert compute_bound(SPEND, 10_000).amount == 1

    def test_custom_floor(self):
        assert compute_bound(SPEND, 10_000, min_output=5).amount == 5

    def test_sell_uses_min_out(self):
        bound = compute_bound(Quote(TradeMode.SELL_EXACT_IN, 100, 47), 50)
        assert bound.kind is BoundKind.MIN_OUT

    @pytest.mark.parametrize("bps", [1, 50, 100, 500, 9_999])
    def test_strictly_below_quote_for_large_amounts(self, bps):
        bound = compute_bound(Quote(TradeMode.SPEND_EXACT_IN, WAD, SCENARIO_SPEND_OUT), bps)
        assert 1 <= bound.amount < SCENARIO_SPEND_OUT


class TestMaxIn:
    """Exact-output trades get a maximum input."""

    def test_buffer_rounds_up(self):
        """53 + ceil(53 * 100 / 10000) = 54."""
        bound = compute_bound(BUY, 100)
        assert bound == Bound(BoundKind.MAX_IN, 54)

    def test_zero_tolerance(self):
        assert compute_bound(BUY, 0).amount == 53

    def test_full_tolerance_doubles(self):
        assert compute_bound(BUY, 10_000).amount == 106

    def test_receive_uses_max_in(self):
        bound = compute_bound(Quote(TradeMode.RECEIVE_EXACT_OUT, 100, 223), 100)
        assert bound == Bound(BoundKind.MAX_IN, 226)

    def test_not_floored(self):
        """The min-output floor does not apply to max_in."""
        bound = compute_bound(Quote(TradeMode.BUY_EXACT_OUT, 1, 1), 0, min_output=5)
        assert bound.amount == 1


class TestBoundValidation:
    """Out-of-range tolerances are rejected."""

    @pytest.mark.parametrize("bps", [-1, 10_001])
    def test_out_of_range_raises(self, bps):
        with pytest.raises(ValueError):
            compute_bound(SPEND, bps)
