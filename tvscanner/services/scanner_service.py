"""
Scanner Service - fetches indicator rows and turns them into recommendations.

Each public method builds one scan request for a single ticker, sends it
through the ScannerClient, parses the first result row and hands it to
the aggregator. The service keeps no per-request state, so one instance
can serve concurrent calls.
"""

from typing import Optional

import httpx
from pydantic import ValidationError

from ..config.columns import (
    ANALYSIS_COLUMNS,
    ICHIMOKU_LIST,
    PIVOTS_LIST,
    RECOMMENDS_LIST,
    column_positions,
)
from ..config.intervals import with_interval
from ..models.scanner_data import (
    RecommendSummary,
    ScanRequest,
    ScanResponse,
    ScanRow,
    ScanSymbols,
    Signal,
)
from ..shared.exceptions import ParseError, SymbolNotFoundError, TransportError
from ..shared.logging_config import context_logger
from .aggregator import aggregate, compute_recommendations, read_value
from .recommendation import compute_simple
from .scanner_client import ScannerClient


def parse_response(body: bytes, ticker: str) -> ScanRow:
    """
    Parse a scanner response body and return the first data row.

    Raises:
        ParseError: Body is not a valid scanner response
        SymbolNotFoundError: Response contains no rows
    """
    try:
        response = ScanResponse.model_validate_json(body)
    except ValidationError as e:
        context_logger.error(f"Invalid scanner response for {ticker}: {e}")
        raise ParseError(f"Invalid scanner response for {ticker}") from e

    if not response.data:
        context_logger.error(f"No scan data returned for {ticker}")
        raise SymbolNotFoundError(ticker)
    return response.data[0]


class Scanner:
    """Client for TradingView technical analysis recommendations."""

    def __init__(
        self,
        client: Optional[ScannerClient] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the scanner.

        Args:
            client: Transport to use; a default ScannerClient otherwise
            http_client: Preconfigured httpx client for the default transport

        Raises:
            ValueError: Both client and http_client are given
        """
        if client is not None and http_client is not None:
            raise ValueError("Pass either client or http_client, not both")
        self.client = client or ScannerClient(http_client=http_client)

    async def __aenter__(self):
        await self.client.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self.client.close()

    @property
    def debug(self) -> bool:
        return self.client.debug

    def set_debug(self, enable: bool) -> None:
        """Enable or disable request/response and signal dumps."""
        self.client.debug = enable

    def prepare_data(self, symbol: str, interval: Optional[str], indicators: list[str]) -> bytes:
        """
        Build the JSON payload for one ticker.

        Args:
            symbol: Ticker in EXCHANGE:SYMBOL format
            interval: Interval string; unknown values fall back to 1 day
            indicators: Column names, in the order the row should have

        Returns:
            Serialized ScanRequest
        """
        request = ScanRequest(
            symbols=ScanSymbols(tickers=[symbol]),
            columns=with_interval(indicators, interval),
        )
        return request.model_dump_json().encode("utf-8")

    async def _scan(
        self,
        screener: str,
        exchange: str,
        symbol: str,
        interval: Optional[str],
        columns: list[str],
    ) -> ScanRow:
        ticker = f"{exchange}:{symbol}"
        payload = self.prepare_data(ticker, interval, columns)

        try:
            body = await self.client.do("POST", payload, False, screener)
        except TransportError as e:
            context_logger.error(f"Exchange ({exchange}) or symbol ({symbol}) not found {e}")
            raise

        return parse_response(body, ticker)

    async def get_recommendations(
        self,
        screener: str,
        exchange: str,
        symbol: str,
        interval: Optional[str],
    ) -> RecommendSummary:
        """
        Fetch only the three recommendation scores.

        Returns:
            RecommendSummary with ``recommend`` set and zero counts

        Raises:
            RecommendationError: A score is outside [-1, 1]
        """
        row = await self._scan(screener, exchange, symbol, interval, RECOMMENDS_LIST)
        recommend = compute_recommendations(row.values, RECOMMENDS_LIST)

        if self.debug:
            context_logger.debug(
                f"{recommend.summary.value} {recommend.oscillators.value} {recommend.moving_averages.value}"
            )

        return RecommendSummary(recommend=recommend)

    async def get_ichimoku(
        self,
        screener: str,
        exchange: str,
        symbol: str,
        interval: Optional[str],
    ) -> tuple[Signal, Optional[float]]:
        """Fetch the Ichimoku signal and its base line value."""
        row = await self._scan(screener, exchange, symbol, interval, ICHIMOKU_LIST)
        positions = column_positions(ICHIMOKU_LIST)

        ichimoku = compute_simple(read_value(row.values, positions, "Rec.Ichimoku"))
        value = read_value(row.values, positions, "Ichimoku.BLine")

        if self.debug:
            context_logger.debug(f"{ichimoku.value} {value}")

        return ichimoku, value

    async def get_analysis(
        self,
        screener: str,
        exchange: str,
        symbol: str,
        interval: Optional[str],
    ) -> RecommendSummary:
        """
        Fetch all indicators and aggregate them into a summary.

        Raises:
            RecommendationError: A score is outside [-1, 1]; no counts are returned
            TransportError: The request failed or timed out
            ParseError: The response could not be parsed
        """
        row = await self._scan(screener, exchange, symbol, interval, ANALYSIS_COLUMNS)
        return aggregate(row.values, ANALYSIS_COLUMNS, debug=self.debug)

    async def get_pivot_points(
        self,
        screener: str,
        exchange: str,
        symbol: str,
        interval: Optional[str],
    ) -> dict[str, Optional[float]]:
        """Fetch monthly pivot levels, keyed by column name (None if unavailable)."""
        row = await self._scan(screener, exchange, symbol, interval, PIVOTS_LIST)
        positions = column_positions(PIVOTS_LIST)
        return {name: read_value(row.values, positions, name) for name in PIVOTS_LIST}
