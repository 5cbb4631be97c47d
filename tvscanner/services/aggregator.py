"""
Signal Aggregator.

Runs a scanner data row through the signal classifiers and tallies the
results per indicator class (oscillators, moving averages).

Row values are looked up by column name, using the same column list the
request was built from. A value is *unavailable* when its position is
past the end of the row or the scanner returned null for it.
"""

import warnings
from collections import Counter
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from ..config.columns import (
    ANALYSIS_COLUMNS,
    MA_LIST,
    RECOMMEND_ALL,
    RECOMMEND_MA,
    RECOMMEND_OTHER,
    column_positions,
)
from ..models.scanner_data import Recommend, RecommendSummary, Signal, SignalCounts
from ..shared.exceptions import DomainError, RecommendationError, ShortRowWarning
from ..shared.logging_config import context_logger
from .recommendation import compute_recommend, compute_simple
from .signals import (
    compute_adx,
    compute_ao,
    compute_cci20,
    compute_ma,
    compute_macd,
    compute_mom,
    compute_rsi,
    compute_stoch,
)

Row = Sequence[Optional[float]]


@dataclass(frozen=True)
class IndicatorRule:
    """One row of the decision table: an indicator and the columns it reads."""
    name: str
    classifier: Callable[..., Signal]
    columns: tuple[str, ...]

    def evaluate(self, row: Row, positions: dict[str, int]) -> Optional[Signal]:
        """Classify the indicator, or return None if any input is unavailable."""
        reading = read_values(row, positions, self.columns)
        if reading is None:
            return None
        return self.classifier(*reading)


OSCILLATOR_RULES: tuple[IndicatorRule, ...] = (
    IndicatorRule("RSI", compute_rsi, ("RSI", "RSI[1]")),
    IndicatorRule("STOCH.K", compute_stoch, ("Stoch.K", "Stoch.D", "Stoch.K[1]", "Stoch.D[1]")),
    IndicatorRule("CCI", compute_cci20, ("CCI20", "CCI20[1]")),
    IndicatorRule("ADX", compute_adx, ("ADX", "ADX+DI", "ADX-DI", "ADX+DI[1]", "ADX-DI[1]")),
    IndicatorRule("AO", compute_ao, ("AO", "AO[1]")),
    IndicatorRule("Mom", compute_mom, ("Mom", "Mom[1]")),
    IndicatorRule("MACD", compute_macd, ("MACD.macd", "MACD.signal")),
    IndicatorRule("Stoch.RSI", compute_simple, ("Rec.Stoch.RSI",)),
    IndicatorRule("W%R", compute_simple, ("Rec.WR",)),
    IndicatorRule("BBP", compute_simple, ("Rec.BBPower",)),
    IndicatorRule("UO", compute_simple, ("Rec.UO",)),
)

# Moving averages are compared against close, in MA_LIST order
MOVING_AVERAGE_RULES: tuple[IndicatorRule, ...] = tuple(
    IndicatorRule(name, compute_ma, (name, "close")) for name in MA_LIST
)

MA_SIMPLE_RULES: tuple[IndicatorRule, ...] = (
    IndicatorRule("Ichimoku", compute_simple, ("Rec.Ichimoku",)),
    IndicatorRule("VWMA", compute_simple, ("Rec.VWMA",)),
    IndicatorRule("HullMA", compute_simple, ("Rec.HullMA9",)),
)

# (column, Recommend field)
RECOMMEND_FIELDS: tuple[tuple[str, str], ...] = (
    (RECOMMEND_OTHER, "oscillators"),
    (RECOMMEND_ALL, "summary"),
    (RECOMMEND_MA, "moving_averages"),
)


def read_value(row: Row, positions: dict[str, int], column: str) -> Optional[float]:
    """Value of a column, or None when it is unavailable."""
    index = positions.get(column)
    if index is None or index >= len(row):
        return None
    return row[index]


def read_values(
    row: Row,
    positions: dict[str, int],
    columns: Sequence[str],
) -> Optional[tuple[float, ...]]:
    """Values of several columns, or None if any of them is unavailable."""
    values = []
    for column in columns:
        value = read_value(row, positions, column)
        if value is None:
            return None
        values.append(value)
    return tuple(values)


def compute_recommendations(
    row: Row,
    columns: Sequence[str] = ANALYSIS_COLUMNS,
) -> Recommend:
    """
    Classify the three recommendation score columns.

    Args:
        row: Scanner data row
        columns: Column names the row was requested with

    Returns:
        Recommend with summary, oscillators and moving_averages signals

    Raises:
        RecommendationError: A score is missing or outside [-1, 1]
    """
    positions = column_positions(list(columns))
    computed: dict[str, Signal] = {}

    for column, field_name in RECOMMEND_FIELDS:
        value = read_value(row, positions, column)
        try:
            computed[field_name] = compute_recommend(value)
        except DomainError as e:
            context_logger.error(f"{e} (column {column})")
            raise RecommendationError(column, value) from e

    return Recommend(**computed)


def _tally_rules(
    rules: Sequence[IndicatorRule],
    row: Row,
    positions: dict[str, int],
    computed: dict[str, Signal],
    counter: Counter,
) -> None:
    for rule in rules:
        signal = rule.evaluate(row, positions)
        if signal is None:
            context_logger.debug(f"Skipping {rule.name}: input columns unavailable")
            continue
        computed[rule.name] = signal
        counter[signal] += 1


def _tally_moving_averages(
    row: Row,
    positions: dict[str, int],
    computed: dict[str, Signal],
    counter: Counter,
) -> None:
    # Counting stops at the first unavailable moving average
    for rule in MOVING_AVERAGE_RULES:
        signal = rule.evaluate(row, positions)
        if signal is None:
            context_logger.debug(f"Moving averages stop at {rule.name}: value unavailable")
            break
        computed[rule.name] = signal
        counter[signal] += 1


def aggregate(
    row: Row,
    columns: Sequence[str] = ANALYSIS_COLUMNS,
    debug: bool = False,
) -> RecommendSummary:
    """
    Build the recommendation summary for one analysis row.

    The recommendation scores are classified first; if one of them is
    invalid a RecommendationError is raised and no indicator is
    classified. A row that is shorter than ``columns`` is not an error:
    the missing indicators are left out of the counts and a
    ShortRowWarning is emitted.

    Args:
        row: Scanner data row, values in ``columns`` order
        columns: Column names (without interval suffix) of the request
        debug: Log per-class counts and computed signals

    Returns:
        RecommendSummary with totals summed over both indicator classes
    """
    columns = list(columns)
    positions = column_positions(columns)

    recommend = compute_recommendations(row, columns)

    if len(row) < len(columns):
        message = f"Data row has {len(row)} of {len(columns)} columns; missing indicators are not counted"
        context_logger.warning(message)
        warnings.warn(message, ShortRowWarning, stacklevel=2)

    oscillators_counter: Counter = Counter()
    ma_counter: Counter = Counter()
    computed_oscillators: dict[str, Signal] = {}
    computed_ma: dict[str, Signal] = {}

    # OSCILLATORS
    _tally_rules(OSCILLATOR_RULES, row, positions, computed_oscillators, oscillators_counter)

    # MOVING AVERAGES
    _tally_moving_averages(row, positions, computed_ma, ma_counter)
    _tally_rules(MA_SIMPLE_RULES, row, positions, computed_ma, ma_counter)

    oscillator_counts = SignalCounts.from_tally(oscillators_counter)
    ma_counts = SignalCounts.from_tally(ma_counter)

    summary = RecommendSummary(
        recommend=recommend,
        buy_count=oscillator_counts.buy + ma_counts.buy,
        sell_count=oscillator_counts.sell + ma_counts.sell,
        neutral_count=oscillator_counts.neutral + ma_counts.neutral,
        oscillator_counts=oscillator_counts,
        moving_average_counts=ma_counts,
        oscillators=computed_oscillators,
        moving_averages=computed_ma,
    )

    if debug:
        _log_summary(summary)

    return summary


def _log_summary(summary: RecommendSummary) -> None:
    context_logger.debug(
        f'Summary - "RECOMMENDATION": {summary.recommend.summary.value}, '
        f'"BUY": {summary.buy_count}, "SELL": {summary.sell_count}, "NEUTRAL": {summary.neutral_count}'
    )
    for label, recommendation, counts, computed in (
        ("Oscillators", summary.recommend.oscillators, summary.oscillator_counts, summary.oscillators),
        ("MovingAverages", summary.recommend.moving_averages, summary.moving_average_counts, summary.moving_averages),
    ):
        signals = {name: signal.value for name, signal in computed.items()}
        context_logger.debug(
            f'{label} - "RECOMMENDATION": {recommendation.value}, '
            f'"BUY": {counts.buy}, "SELL": {counts.sell}, "NEUTRAL": {counts.neutral}, '
            f'"COMPUTE": {signals}'
        )
