"""Tests for price impact and spot price."""

from fractions import Fraction

import pytest

from quoter.quoting import (
    TradeMode,
    effective_price,
    price_impact,
    price_impact_ratio,
    quote,
    quote_price_impact,
    spot_price_base_per_quote,
    spot_price_quote_per_base,
)
from tests.helpers import (
    EMPTY_RESERVES,
    SCENARIO_RESERVES,
    SCENARIO_SPEND_IN,
    SCENARIO_SPEND_OUT,
    SHALLOW_RESERVES,
    SMALL_RESERVES,
    WAD,
)


class TestSpotPrice:
    """Tests for spot prices."""

    def test_base_per_quote(self):
        assert spot_price_base_per_quote(SCENARIO_RESERVES) == Fraction(1, 100)

    def test_quote_per_base(self):
        assert spot_price_quote_per_base(SMALL_RESERVES) == 2

    def test_unfunded(self):
        assert spot_price_base_per_quote(EMPTY_RESERVES) is None
        assert spot_price_quote_per_base(EMPTY_RESERVES) is None


class TestEffectivePrice:
    """Effective prices are on the ETH-per-DEMO axis for every mode."""

    def test_buy(self):
        assert effective_price(TradeMode.BUY_EXACT_OUT, 53, 100) == Fraction(53, 100)

    def test_sell(self):
        assert effective_price(TradeMode.SELL_EXACT_IN, 100, 47) == Fraction(47, 100)

    @pytest.mark.parametrize("amount_in,amount_out", [(0, 10), (10, 0)])
    def test_non_positive_raises(self, amount_in, amount_out):
        with pytest.raises(ValueError):
            effective_price(TradeMode.SPEND_EXACT_IN, amount_in, amount_out)


class TestPriceImpact:
    """Tests for price impact percentages."""

    def test_buy_exact(self):
        """Paying 53 ETH for 100 DEMO at a 0.5 spot is 6% off."""
        assert price_impact_ratio(SMALL_RESERVES, TradeMode.BUY_EXACT_OUT, 53, 100) == Fraction(
            6, 100
        )
        assert price_impact(SMALL_RESERVES, TradeMode.BUY_EXACT_OUT, 53, 100) == pytest.approx(6.0)

    def test_sell_exact(self):
        """Receiving 47 ETH for 100 DEMO at a 0.5 spot is also 6% off."""
        assert price_impact(SMALL_RESERVES, TradeMode.SELL_EXACT_IN, 100, 47) == pytest.approx(6.0)

    def test_spend_exact(self):
        """100 ETH for 181 DEMO: 200/181 - 1."""
        ratio = price_impact_ratio(SMALL_RESERVES, TradeMode.SPEND_EXACT_IN, 100, 181)
        assert ratio == Fraction(19, 181)

    def test_scenario_about_one_percent(self):
        impact = price_impact(
            SCENARIO_RESERVES, TradeMode.SPEND_EXACT_IN, SCENARIO_SPEND_IN, SCENARIO_SPEND_OUT
        )
        assert impact == pytest.approx(1.0, rel=1e-9)

    def test_never_negative(self):
        for mode in TradeMode:
            result = quote(SHALLOW_RESERVES, mode, WAD // 10)
            assert quote_price_impact(SHALLOW_RESERVES, result.quote) >= 0

    def test_grows_with_size(self):
        small = quote(SHALLOW_RESERVES, TradeMode.SPEND_EXACT_IN, WAD // 100)
        large = quote(SHALLOW_RESERVES, TradeMode.SPEND_EXACT_IN, WAD // 2)
        assert quote_price_impact(SHALLOW_RESERVES, large.quote) > quote_price_impact(
            SHALLOW_RESERVES, small.quote
        )

    def test_unfunded_raises(self):
        with pytest.raises(ValueError):
            price_impact(EMPTY_RESERVES, TradeMode.SPEND_EXACT_IN, 10, 10)
