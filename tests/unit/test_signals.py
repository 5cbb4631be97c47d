"""
Unit tests for the signal classifiers.

Tests the threshold rules of every indicator classifier including:
- BUY and SELL conditions
- NEUTRAL fallback when no condition is met
- Crossover checks against the previous period
"""
import pytest

from tvscanner.models.scanner_data import Signal
from tvscanner.services.signals import (
    compute_adx,
    compute_ao,
    compute_bb_buy,
    compute_bb_sell,
    compute_cci20,
    compute_ma,
    compute_macd,
    compute_mom,
    compute_psar,
    compute_rsi,
    compute_stoch,
)


class TestMovingAverage:
    """Unit tests for moving average vs. close."""

    @pytest.mark.unit
    def test_ma_below_close_is_buy(self):
        assert compute_ma(95.0, 100.0) == Signal.BUY

    @pytest.mark.unit
    def test_ma_above_close_is_sell(self):
        assert compute_ma(105.0, 100.0) == Signal.SELL

    @pytest.mark.unit
    def test_ma_equal_close_is_neutral(self):
        assert compute_ma(100.0, 100.0) == Signal.NEUTRAL


class TestRSI:
    """Unit tests for the RSI classifier."""

    @pytest.mark.unit
    def test_oversold_with_higher_previous_is_buy(self):
        """BUY needs rsi < 30 and a previous value above the current one."""
        assert compute_rsi(25.0, 30.0) == Signal.BUY

    @pytest.mark.unit
    def test_overbought_with_lower_previous_is_sell(self):
        assert compute_rsi(75.0, 70.0) == Signal.SELL

    @pytest.mark.unit
    def test_previous_value_direction_is_kept(self):
        """The previous-value comparison is rsi1 > rsi for BUY, rsi1 < rsi for SELL."""
        assert compute_rsi(25.0, 20.0) == Signal.NEUTRAL
        assert compute_rsi(75.0, 80.0) == Signal.NEUTRAL

    @pytest.mark.unit
    def test_mid_range_is_neutral(self):
        assert compute_rsi(50.0, 50.0) == Signal.NEUTRAL
        assert compute_rsi(50.0, 10.0) == Signal.NEUTRAL

    @pytest.mark.unit
    def test_thresholds_are_strict(self):
        assert compute_rsi(30.0, 40.0) == Signal.NEUTRAL
        assert compute_rsi(70.0, 60.0) == Signal.NEUTRAL


class TestStochastic:
    """Unit tests for the stochastic %K/%D classifier."""

    @pytest.mark.unit
    def test_bullish_cross_in_oversold_zone(self):
        assert compute_stoch(15.0, 10.0, 8.0, 12.0) == Signal.BUY

    @pytest.mark.unit
    def test_bearish_cross_in_overbought_zone(self):
        assert compute_stoch(85.0, 90.0, 92.0, 88.0) == Signal.SELL

    @pytest.mark.unit
    def test_no_cross_is_neutral(self):
        # %K already above %D in the previous period
        assert compute_stoch(15.0, 10.0, 14.0, 12.0) == Signal.NEUTRAL

    @pytest.mark.unit
    def test_cross_outside_zone_is_neutral(self):
        assert compute_stoch(55.0, 50.0, 48.0, 52.0) == Signal.NEUTRAL


class TestCCI:
    """Unit tests for the CCI (20) classifier."""

    @pytest.mark.unit
    def test_turning_up_below_minus_100(self):
        assert compute_cci20(-150.0, -200.0) == Signal.BUY

    @pytest.mark.unit
    def test_turning_down_above_100(self):
        assert compute_cci20(150.0, 200.0) == Signal.SELL

    @pytest.mark.unit
    def test_still_falling_below_minus_100_is_neutral(self):
        assert compute_cci20(-150.0, -100.0) == Signal.NEUTRAL

    @pytest.mark.unit
    def test_inside_band_is_neutral(self):
        assert compute_cci20(0.0, 0.0) == Signal.NEUTRAL


class TestADX:
    """Unit tests for the ADX +DI/-DI crossover classifier."""

    @pytest.mark.unit
    def test_bullish_di_cross_in_trend(self):
        assert compute_adx(25.0, 30.0, 20.0, 18.0, 22.0) == Signal.BUY

    @pytest.mark.unit
    def test_bearish_di_cross_in_trend(self):
        assert compute_adx(25.0, 20.0, 30.0, 22.0, 18.0) == Signal.SELL

    @pytest.mark.unit
    def test_weak_trend_is_neutral(self):
        assert compute_adx(20.0, 30.0, 20.0, 18.0, 22.0) == Signal.NEUTRAL

    @pytest.mark.unit
    def test_no_cross_is_neutral(self):
        assert compute_adx(25.0, 30.0, 20.0, 28.0, 22.0) == Signal.NEUTRAL


class TestAwesomeOscillator:
    """Unit tests for the Awesome Oscillator classifier."""

    @pytest.mark.unit
    def test_zero_line_cross_up(self):
        assert compute_ao(1.5, -0.5) == Signal.BUY

    @pytest.mark.unit
    def test_cross_up_from_exactly_zero(self):
        assert compute_ao(1.0, 0.0) == Signal.BUY

    @pytest.mark.unit
    def test_rising_above_zero(self):
        assert compute_ao(2.0, 1.0) == Signal.BUY

    @pytest.mark.unit
    def test_zero_line_cross_down(self):
        assert compute_ao(-1.5, 0.5) == Signal.SELL

    @pytest.mark.unit
    def test_cross_down_from_exactly_zero(self):
        assert compute_ao(-1.0, 0.0) == Signal.SELL

    @pytest.mark.unit
    def test_falling_below_zero(self):
        assert compute_ao(-2.0, -1.0) == Signal.SELL

    @pytest.mark.unit
    def test_fading_momentum_is_neutral(self):
        assert compute_ao(1.0, 2.0) == Signal.NEUTRAL
        assert compute_ao(-1.0, -2.0) == Signal.NEUTRAL
        assert compute_ao(0.0, 1.0) == Signal.NEUTRAL


class TestMomentumAndMACD:
    """Unit tests for momentum and MACD classifiers."""

    @pytest.mark.unit
    def test_momentum(self):
        assert compute_mom(2.0, 1.0) == Signal.BUY
        assert compute_mom(1.0, 2.0) == Signal.SELL
        assert compute_mom(1.0, 1.0) == Signal.NEUTRAL

    @pytest.mark.unit
    def test_macd(self):
        assert compute_macd(1.0, 0.5) == Signal.BUY
        assert compute_macd(0.5, 1.0) == Signal.SELL
        assert compute_macd(0.5, 0.5) == Signal.NEUTRAL


class TestBandsAndSAR:
    """Unit tests for Bollinger band and Parabolic SAR classifiers."""

    @pytest.mark.unit
    def test_bollinger_lower(self):
        assert compute_bb_buy(95.0, 100.0) == Signal.BUY
        assert compute_bb_buy(105.0, 100.0) == Signal.NEUTRAL
        assert compute_bb_buy(100.0, 100.0) == Signal.NEUTRAL

    @pytest.mark.unit
    def test_bollinger_upper(self):
        assert compute_bb_sell(105.0, 100.0) == Signal.SELL
        assert compute_bb_sell(95.0, 100.0) == Signal.NEUTRAL

    @pytest.mark.unit
    def test_parabolic_sar(self):
        assert compute_psar(95.0, 100.0) == Signal.BUY
        assert compute_psar(105.0, 100.0) == Signal.SELL
        assert compute_psar(100.0, 100.0) == Signal.NEUTRAL
