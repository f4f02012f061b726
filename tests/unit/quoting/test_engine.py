"""Tests for the quote engine."""

import pytest

from quoter.amm.constant_product import Reserves, constant_product
from quoter.quoting import Quote, QuoteError, QuoteResult, TradeMode, quote
from tests.helpers import (
    EMPTY_RESERVES,
    SCENARIO_RESERVES,
    SCENARIO_SPEND_IN,
    SCENARIO_SPEND_OUT,
    SMALL_RESERVES,
)


class TestTradeMode:
    """Tests for TradeMode properties."""

    @pytest.mark.parametrize(
        "mode,exact_input,buy",
        [
            (TradeMode.BUY_EXACT_OUT, False, True),
            (TradeMode.SELL_EXACT_IN, True, False),
            (TradeMode.SPEND_EXACT_IN, True, True),
            (TradeMode.RECEIVE_EXACT_OUT, False, False),
        ],
    )
    def test_mode_flags(self, mode, exact_input, buy):
        assert mode.is_exact_input is exact_input
        assert mode.is_buy is buy

    def test_values(self):
        """Modes round-trip through their string identifiers."""
        assert TradeMode("spend-exact-eth") is TradeMode.SPEND_EXACT_IN
        assert TradeMode("receive-exact-eth") is TradeMode.RECEIVE_EXACT_OUT


class TestQuoteAllModes:
    """Hand-computed quotes on a 1000 ETH / 2000 DEMO pool."""

    def test_spend_exact_eth(self):
        result = quote(SMALL_RESERVES, TradeMode.SPEND_EXACT_IN, 100)
        assert result.is_valid
        assert result.quote == Quote(TradeMode.SPEND_EXACT_IN, 100, 181)
        assert result.quote.amount_in == 100
        assert result.quote.amount_out == 181

    def test_buy_exact_demo(self):
        result = quote(SMALL_RESERVES, TradeMode.BUY_EXACT_OUT, 100)
        assert result.is_valid
        assert result.quote.amount == 53
        assert result.quote.amount_in == 53
        assert result.quote.amount_out == 100

    def test_sell_exact_demo(self):
        result = quote(SMALL_RESERVES, TradeMode.SELL_EXACT_IN, 100)
        assert result.is_valid
        assert result.quote.amount == 47
        assert result.quote.amount_in == 100
        assert result.quote.amount_out == 47

    def test_receive_exact_eth(self):
        result = quote(SMALL_RESERVES, TradeMode.RECEIVE_EXACT_OUT, 100)
        assert result.is_valid
        assert result.quote.amount == 223
        assert result.quote.amount_in == 223
        assert result.quote.amount_out == 100

    def test_scenario_spend(self):
        result = quote(SCENARIO_RESERVES, TradeMode.SPEND_EXACT_IN, SCENARIO_SPEND_IN)
        assert result.quote.amount == SCENARIO_SPEND_OUT


class TestQuoteConsistency:
    """Exact-output quotes buy at least what was asked."""

    @pytest.mark.parametrize("amount_out", [1, 100, 999, 1_999])
    def test_buy_inverse_covers_output(self, amount_out):
        result = quote(SMALL_RESERVES, TradeMode.BUY_EXACT_OUT, amount_out)
        forward = quote(SMALL_RESERVES, TradeMode.SPEND_EXACT_IN, result.quote.amount)
        assert forward.quote.amount >= amount_out

    @pytest.mark.parametrize("amount_out", [1, 100, 500, 999])
    def test_receive_inverse_covers_output(self, amount_out):
        result = quote(SMALL_RESERVES, TradeMode.RECEIVE_EXACT_OUT, amount_out)
        forward = quote(SMALL_RESERVES, TradeMode.SELL_EXACT_IN, result.quote.amount)
        assert forward.quote.amount >= amount_out

    def test_receive_round_trip_hand_value(self):
        """Selling the 223 DEMO quoted for 100 ETH yields exactly 100."""
        forward = quote(SMALL_RESERVES, TradeMode.SELL_EXACT_IN, 223)
        assert forward.quote.amount == 100


class TestQuoteEdgeCases:
    """Empty input and engine errors."""

    @pytest.mark.parametrize("amount", [0, -1])
    def test_non_positive_amount_is_empty(self, amount):
        result = quote(SMALL_RESERVES, TradeMode.SPEND_EXACT_IN, amount)
        assert result == QuoteResult.empty()
        assert result.is_empty
        assert not result.is_error

    def test_exact_output_at_reserve(self):
        result = quote(SMALL_RESERVES, TradeMode.BUY_EXACT_OUT, 2_000)
        assert result.error is QuoteError.EXCEEDS_RESERVE
        assert result.quote is None

    def test_exact_output_above_reserve(self):
        result = quote(SMALL_RESERVES, TradeMode.RECEIVE_EXACT_OUT, 1_500)
        assert result.error is QuoteError.EXCEEDS_RESERVE

    def test_exact_output_just_below_reserve(self):
        result = quote(SMALL_RESERVES, TradeMode.BUY_EXACT_OUT, 1_999)
        assert result.is_valid
        assert result.quote.amount > 0

    def test_unfunded_pool(self):
        result = quote(EMPTY_RESERVES, TradeMode.SPEND_EXACT_IN, 100)
        assert result.error is QuoteError.POOL_NOT_FUNDED
        assert result.error.is_blocking

    def test_half_funded_pool(self):
        result = quote(Reserves(0, 2_000), TradeMode.BUY_EXACT_OUT, 10)
        assert result.error is QuoteError.POOL_NOT_FUNDED

    def test_dust_input(self):
        """floor(1 * 1000 / 2001) = 0 is reported, not quoted."""
        result = quote(SMALL_RESERVES, TradeMode.SELL_EXACT_IN, 1)
        assert result.error is QuoteError.AMOUNT_TOO_SMALL

    def test_explicit_amm(self):
        result = quote(SMALL_RESERVES, TradeMode.SPEND_EXACT_IN, 100, amm=constant_product)
        assert result.quote.amount == 181


class TestQuoteResult:
    """Tests for QuoteResult states."""

    def test_with_error(self):
        result = QuoteResult.with_error(QuoteError.EXCEEDS_RESERVE, "detail")
        assert result.is_error
        assert not result.is_valid
        assert not result.is_empty
        assert result.error_detail == "detail"

    def test_invalid_amount_not_blocking(self):
        assert not QuoteError.INVALID_AMOUNT.is_blocking
        assert QuoteError.INSUFFICIENT_BALANCE.is_blocking
