"""Shared utilities: logging and exceptions."""

from .exceptions import (
    ScannerError,
    DomainError,
    RecommendationError,
    TransportError,
    ScannerTimeoutError,
    ParseError,
    SymbolNotFoundError,
    ShortRowWarning,
)
from .logging_config import context_logger, setup_logging

__all__ = [
    "ScannerError",
    "DomainError",
    "RecommendationError",
    "TransportError",
    "ScannerTimeoutError",
    "ParseError",
    "SymbolNotFoundError",
    "ShortRowWarning",
    "context_logger",
    "setup_logging",
]
