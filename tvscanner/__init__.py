"""tvscanner - TradingView scanner client with technical signal aggregation."""

from .version import VERSION as __version__
from .config import Interval, ScannerSettings, settings
from .models import Recommend, RecommendSummary, Signal, SignalCounts
from .services import Scanner, ScannerClient, aggregate, compute_recommend, compute_simple
from .shared import (
    ScannerError,
    DomainError,
    RecommendationError,
    TransportError,
    ScannerTimeoutError,
    ParseError,
    SymbolNotFoundError,
    ShortRowWarning,
    setup_logging,
)

__all__ = [
    "__version__",
    "Interval",
    "ScannerSettings",
    "settings",
    "Recommend",
    "RecommendSummary",
    "Signal",
    "SignalCounts",
    "Scanner",
    "ScannerClient",
    "aggregate",
    "compute_recommend",
    "compute_simple",
    "ScannerError",
    "DomainError",
    "RecommendationError",
    "TransportError",
    "ScannerTimeoutError",
    "ParseError",
    "SymbolNotFoundError",
    "ShortRowWarning",
    "setup_logging",
]
