"""
Exception hierarchy for the scanner client.

All errors raised by tvscanner derive from ScannerError, so callers can
catch the whole family at once:

    ScannerError
    ├── DomainError            recommendation score outside [-1, 1]
    ├── RecommendationError    score column failed, aggregation aborted
    ├── TransportError         network failure or unexpected HTTP status
    │   └── ScannerTimeoutError
    └── ParseError             malformed response body
        └── SymbolNotFoundError

ShortRowWarning is a warning, not an error: a row missing trailing
moving-average columns still produces a summary.
"""

from typing import Optional


class ScannerError(Exception):
    """Base class for all scanner errors."""
    pass


class DomainError(ScannerError, ValueError):
    """A recommendation score is outside the [-1, 1] domain."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Failed ComputeRecommend: value {value!r} outside [-1, 1]")


class RecommendationError(ScannerError):
    """A top-level recommendation column could not be classified."""

    def __init__(self, column: str, value):
        self.column = column
        self.value = value
        super().__init__(f"Recommendation column {column} has invalid value {value!r}")


class TransportError(ScannerError):
    """The HTTP request failed or returned an unexpected status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[bytes] = None,
    ):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ScannerTimeoutError(TransportError, TimeoutError):
    """The request did not complete within the configured timeout."""
    pass


class ParseError(ScannerError):
    """The response body could not be parsed into scan rows."""
    pass


class SymbolNotFoundError(ParseError):
    """The scanner returned no rows for the requested ticker."""

    def __init__(self, ticker: str):
        self.ticker = ticker
        super().__init__(f"No scan data returned for {ticker}")


class ShortRowWarning(UserWarning):
    """A data row is shorter than the column list it was requested with."""
    pass
