"""
Global pytest fixtures for the tvscanner test suite.
"""
import json
from typing import Callable, Dict, List, Optional

import httpx
import pytest

from tvscanner.config.columns import ANALYSIS_COLUMNS


# ========== Neutral Analysis Row ==========

# Values for which every indicator classifies NEUTRAL
NEUTRAL_VALUES: Dict[str, float] = {
    "Recommend.Other": 0.0,
    "Recommend.All": 0.0,
    "Recommend.MA": 0.0,
    "RSI": 50.0, "RSI[1]": 50.0,
    "Stoch.K": 50.0, "Stoch.D": 50.0, "Stoch.K[1]": 50.0, "Stoch.D[1]": 50.0,
    "CCI20": 0.0, "CCI20[1]": 0.0,
    "ADX": 10.0, "ADX+DI": 20.0, "ADX-DI": 20.0, "ADX+DI[1]": 20.0, "ADX-DI[1]": 20.0,
    "AO": 0.0, "AO[1]": 0.0,
    "Mom": 1.0, "Mom[1]": 1.0,
    "MACD.macd": 0.5, "MACD.signal": 0.5,
    "Rec.Stoch.RSI": 0.0, "Stoch.RSI.K": 50.0,
    "Rec.WR": 0.0, "W.R": -50.0,
    "Rec.BBPower": 0.0, "BBPower": 0.0,
    "Rec.UO": 0.0, "UO": 50.0,
    "close": 100.0,
    "EMA10": 100.0, "SMA10": 100.0,
    "EMA20": 100.0, "SMA20": 100.0,
    "EMA30": 100.0, "SMA30": 100.0,
    "EMA50": 100.0, "SMA50": 100.0,
    "EMA100": 100.0, "SMA100": 100.0,
    "EMA200": 100.0, "SMA200": 100.0,
    "Rec.Ichimoku": 0.0, "Ichimoku.BLine": 100.0,
    "Rec.VWMA": 0.0, "VWMA": 100.0,
    "Rec.HullMA9": 0.0, "HullMA9": 100.0,
}

# 11 oscillators + 12 moving averages + Ichimoku, VWMA, HullMA
INDICATOR_COUNT = 26


def build_row(columns: List[str], **overrides: Optional[float]) -> List[Optional[float]]:
    """Build a data row in column order from neutral values plus overrides."""
    values = dict(NEUTRAL_VALUES)
    values.update(overrides)
    return [values[name] for name in columns]


# ========== Fixtures ==========

@pytest.fixture
def analysis_row() -> Callable[..., List[Optional[float]]]:
    """Factory for full analysis rows; keyword overrides use column names."""
    def _build(overrides: Optional[Dict[str, Optional[float]]] = None) -> List[Optional[float]]:
        return build_row(ANALYSIS_COLUMNS, **(overrides or {}))
    return _build


@pytest.fixture
def test_symbol() -> str:
    """Standard test symbol."""
    return "BTCUSDT"


@pytest.fixture
def test_exchange() -> str:
    """Standard test exchange."""
    return "BINANCE"


def scan_response_body(ticker: str, values: List[Optional[float]]) -> Dict:
    """Scanner response body with a single row."""
    return {"data": [{"s": ticker, "d": values}], "totalCount": 1}


@pytest.fixture
def mock_scanner_http() -> Callable:
    """
    Factory for an httpx.AsyncClient backed by a MockTransport.

    The handler receives the request and its decoded JSON payload and
    returns an httpx.Response. Sent requests are collected in
    ``client.sent_requests``.
    """
    def _build(handler: Callable[[httpx.Request, Dict], httpx.Response]) -> httpx.AsyncClient:
        sent: List[httpx.Request] = []

        def _transport(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            payload = json.loads(request.content) if request.content else {}
            return handler(request, payload)

        client = httpx.AsyncClient(transport=httpx.MockTransport(_transport), timeout=30.0)
        client.sent_requests = sent
        return client
    return _build
