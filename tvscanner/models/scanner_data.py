"""Pydantic models for scanner requests, responses and recommendations."""

from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class Signal(str, Enum):
    """Trading signal labels."""
    STRONG_BUY = "STRONG_BUY"
    BUY = "BUY"
    NEUTRAL = "NEUTRAL"
    SELL = "SELL"
    STRONG_SELL = "STRONG_SELL"
    # Never produced by the classifiers; kept so serialized labels stay complete
    ERROR = "ERROR"


# =============================================================================
# Scanner request / response
# =============================================================================

class ScanQuery(BaseModel):
    """Symbol type filter of a scan request."""
    types: list[str] = Field(default_factory=list)


class ScanSymbols(BaseModel):
    """Tickers of a scan request, in EXCHANGE:SYMBOL format."""
    tickers: list[str]
    query: ScanQuery = Field(default_factory=ScanQuery)


class ScanRequest(BaseModel):
    """Scanner request payload."""
    symbols: ScanSymbols
    columns: list[str]


class ScanRow(BaseModel):
    """One result row: the ticker and its column values in request order."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    symbol: str = Field(..., alias="s")
    values: list[Optional[float]] = Field(default_factory=list, alias="d")


class ScanResponse(BaseModel):
    """Scanner response body."""
    model_config = ConfigDict(populate_by_name=True)

    data: list[ScanRow] = Field(default_factory=list)
    total_count: int = Field(default=0, alias="totalCount")


# =============================================================================
# Recommendations
# =============================================================================

class SignalCounts(BaseModel):
    """How many indicators of one class evaluated to each signal."""
    model_config = ConfigDict(frozen=True)

    buy: int = 0
    sell: int = 0
    neutral: int = 0

    @classmethod
    def from_tally(cls, tally: Mapping[Signal, int]) -> "SignalCounts":
        return cls(
            buy=tally.get(Signal.BUY, 0),
            sell=tally.get(Signal.SELL, 0),
            neutral=tally.get(Signal.NEUTRAL, 0),
        )

    @property
    def total(self) -> int:
        return self.buy + self.sell + self.neutral


class Recommend(BaseModel):
    """Five-way recommendations from the three score columns."""
    model_config = ConfigDict(frozen=True)

    summary: Signal = Field(..., description="Recommend.All")
    oscillators: Signal = Field(..., description="Recommend.Other")
    moving_averages: Signal = Field(..., description="Recommend.MA")


class RecommendSummary(BaseModel):
    """Aggregated result of one analysis query."""
    model_config = ConfigDict(frozen=True)

    recommend: Recommend
    buy_count: int = 0
    sell_count: int = 0
    neutral_count: int = 0

    oscillator_counts: SignalCounts = Field(default_factory=SignalCounts)
    moving_average_counts: SignalCounts = Field(default_factory=SignalCounts)

    # Per-indicator signals, keyed by indicator name (e.g. "RSI", "EMA10")
    oscillators: dict[str, Signal] = Field(default_factory=dict)
    moving_averages: dict[str, Signal] = Field(default_factory=dict)
