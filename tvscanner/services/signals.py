"""
Signal classifiers for technical indicator readings.

Each function maps the current reading of one indicator (and, for
crossover rules, the previous period's reading) to BUY, SELL or NEUTRAL.
The BUY condition is checked first, then SELL; anything else is NEUTRAL.

Suffix ``1`` on a parameter name means "previous period", matching the
scanner's ``[1]`` column suffix (``RSI[1]`` -> ``rsi1``).
"""

from ..models.scanner_data import Signal


def compute_ma(ma: float, close: float) -> Signal:
    """Moving average vs. close: price above the average is bullish."""
    if ma < close:
        return Signal.BUY
    elif ma > close:
        return Signal.SELL
    return Signal.NEUTRAL


def compute_rsi(rsi: float, rsi1: float) -> Signal:
    """
    RSI (14) with oversold/overbought levels 30/70.

    BUY:  rsi < 30 and rsi1 > rsi
    SELL: rsi > 70 and rsi1 < rsi
    """
    if rsi < 30 and rsi1 > rsi:
        return Signal.BUY
    elif rsi > 70 and rsi1 < rsi:
        return Signal.SELL
    return Signal.NEUTRAL


def compute_stoch(k: float, d: float, k1: float, d1: float) -> Signal:
    """
    Stochastic %K/%D crossover inside the 20/80 zones.

    BUY:  both lines below 20 and %K crossed above %D
    SELL: both lines above 80 and %K crossed below %D
    """
    if k < 20 and d < 20 and k > d and k1 < d1:
        return Signal.BUY
    elif k > 80 and d > 80 and k < d and k1 > d1:
        return Signal.SELL
    return Signal.NEUTRAL


def compute_cci20(cci20: float, cci201: float) -> Signal:
    """CCI (20): turning up below -100 or down above 100."""
    if cci20 < -100 and cci20 > cci201:
        return Signal.BUY
    elif cci20 > 100 and cci20 < cci201:
        return Signal.SELL
    return Signal.NEUTRAL


def compute_adx(
    adx: float,
    adx_pdi: float,
    adx_ndi: float,
    adx_pdi1: float,
    adx_ndi1: float,
) -> Signal:
    """
    ADX (14) with a +DI/-DI crossover in a trending market (ADX > 20).

    Args:
        adx: Average directional index
        adx_pdi: Current +DI
        adx_ndi: Current -DI
        adx_pdi1: Previous +DI
        adx_ndi1: Previous -DI
    """
    if adx > 20 and adx_pdi1 < adx_ndi1 and adx_pdi > adx_ndi:
        return Signal.BUY
    elif adx > 20 and adx_pdi1 > adx_ndi1 and adx_pdi < adx_ndi:
        return Signal.SELL
    return Signal.NEUTRAL


def compute_ao(ao: float, ao1: float) -> Signal:
    """
    Awesome Oscillator: zero-line cross, or growth on the same side.

    BUY:  crossed above zero (ao1 <= 0), or positive and rising
    SELL: crossed below zero (ao1 >= 0), or negative and falling
    """
    if (ao > 0 and ao1 <= 0) or (ao > 0 and ao1 > 0 and ao > ao1):
        return Signal.BUY
    elif (ao < 0 and ao1 >= 0) or (ao < 0 and ao1 < 0 and ao < ao1):
        return Signal.SELL
    return Signal.NEUTRAL


def compute_mom(mom: float, mom1: float) -> Signal:
    """Momentum (10): rising is bullish, falling is bearish."""
    if mom > mom1:
        return Signal.BUY
    elif mom < mom1:
        return Signal.SELL
    return Signal.NEUTRAL


def compute_macd(macd: float, signal: float) -> Signal:
    """MACD level vs. its signal line."""
    if macd > signal:
        return Signal.BUY
    elif macd < signal:
        return Signal.SELL
    return Signal.NEUTRAL


def compute_bb_buy(close: float, bb_lower: float) -> Signal:
    """Close below the lower Bollinger band. Never SELL."""
    if close < bb_lower:
        return Signal.BUY
    return Signal.NEUTRAL


def compute_bb_sell(close: float, bb_upper: float) -> Signal:
    """Close above the upper Bollinger band. Never BUY."""
    if close > bb_upper:
        return Signal.SELL
    return Signal.NEUTRAL


def compute_psar(psar: float, open_price: float) -> Signal:
    """Parabolic SAR below the open is bullish."""
    if psar < open_price:
        return Signal.BUY
    elif psar > open_price:
        return Signal.SELL
    return Signal.NEUTRAL
