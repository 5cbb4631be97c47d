"""Services for tvscanner: classifiers, aggregation and the scanner client."""

from .signals import (
    compute_ma,
    compute_rsi,
    compute_stoch,
    compute_cci20,
    compute_adx,
    compute_ao,
    compute_mom,
    compute_macd,
    compute_bb_buy,
    compute_bb_sell,
    compute_psar,
)
from .recommendation import compute_recommend, compute_simple
from .aggregator import (
    IndicatorRule,
    OSCILLATOR_RULES,
    MOVING_AVERAGE_RULES,
    MA_SIMPLE_RULES,
    aggregate,
    compute_recommendations,
)
from .scanner_client import ScannerClient
from .scanner_service import Scanner, parse_response

__all__ = [
    "compute_ma",
    "compute_rsi",
    "compute_stoch",
    "compute_cci20",
    "compute_adx",
    "compute_ao",
    "compute_mom",
    "compute_macd",
    "compute_bb_buy",
    "compute_bb_sell",
    "compute_psar",
    "compute_recommend",
    "compute_simple",
    "IndicatorRule",
    "OSCILLATOR_RULES",
    "MOVING_AVERAGE_RULES",
    "MA_SIMPLE_RULES",
    "aggregate",
    "compute_recommendations",
    "ScannerClient",
    "Scanner",
    "parse_response",
]
