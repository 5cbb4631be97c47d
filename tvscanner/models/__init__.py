"""Data models for tvscanner."""

from .scanner_data import (
    Signal,
    ScanQuery,
    ScanSymbols,
    ScanRequest,
    ScanRow,
    ScanResponse,
    SignalCounts,
    Recommend,
    RecommendSummary,
)

__all__ = [
    "Signal",
    "ScanQuery",
    "ScanSymbols",
    "ScanRequest",
    "ScanRow",
    "ScanResponse",
    "SignalCounts",
    "Recommend",
    "RecommendSummary",
]
