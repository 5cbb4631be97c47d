"""Configuration module for tvscanner."""

from .settings import ScannerSettings, settings
from .intervals import (
    Interval,
    DEFAULT_INTERVAL,
    INTERVAL_TO_SUFFIX,
    normalize_interval,
    column_suffix,
    with_interval,
)
from .columns import (
    RECOMMENDS_LIST,
    OSCILLATORS_LIST,
    MA_LIST,
    MA_SIMPLE_LIST,
    ICHIMOKU_LIST,
    PIVOTS_LIST,
    ANALYSIS_COLUMNS,
    concat_columns,
    column_positions,
)

__all__ = [
    "ScannerSettings",
    "settings",
    "Interval",
    "DEFAULT_INTERVAL",
    "INTERVAL_TO_SUFFIX",
    "normalize_interval",
    "column_suffix",
    "with_interval",
    "RECOMMENDS_LIST",
    "OSCILLATORS_LIST",
    "MA_LIST",
    "MA_SIMPLE_LIST",
    "ICHIMOKU_LIST",
    "PIVOTS_LIST",
    "ANALYSIS_COLUMNS",
    "concat_columns",
    "column_positions",
]
