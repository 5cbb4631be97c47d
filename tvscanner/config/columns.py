"""
Scanner column vocabulary.

The scanner returns values positionally, in the order the columns were
requested. The aggregator resolves positions from the same lists, so
these lists are the single source of the column order contract.
"""

from typing import Dict, List


# Recommendation scores in [-1, 1]
RECOMMEND_OTHER = "Recommend.Other"  # oscillators
RECOMMEND_ALL = "Recommend.All"      # overall
RECOMMEND_MA = "Recommend.MA"        # moving averages

RECOMMENDS_LIST: List[str] = [RECOMMEND_OTHER, RECOMMEND_ALL, RECOMMEND_MA]

OSCILLATORS_LIST: List[str] = [
    "RSI", "RSI[1]",
    "Stoch.K", "Stoch.D", "Stoch.K[1]", "Stoch.D[1]",
    "CCI20", "CCI20[1]",
    "ADX", "ADX+DI", "ADX-DI", "ADX+DI[1]", "ADX-DI[1]",
    "AO", "AO[1]",
    "Mom", "Mom[1]",
    "MACD.macd", "MACD.signal",
    "Rec.Stoch.RSI", "Stoch.RSI.K",
    "Rec.WR", "W.R",
    "Rec.BBPower", "BBPower",
    "Rec.UO", "UO",
    "close",
]

MA_LIST: List[str] = [
    "EMA10", "SMA10",
    "EMA20", "SMA20",
    "EMA30", "SMA30",
    "EMA50", "SMA50",
    "EMA100", "SMA100",
    "EMA200", "SMA200",
]

MA_SIMPLE_LIST: List[str] = [
    "Rec.Ichimoku", "Ichimoku.BLine",
    "Rec.VWMA", "VWMA",
    "Rec.HullMA9", "HullMA9",
]

ICHIMOKU_LIST: List[str] = ["Rec.Ichimoku", "Ichimoku.BLine"]

PIVOTS_LIST: List[str] = [
    "Pivot.M.Classic.S3", "Pivot.M.Classic.S2", "Pivot.M.Classic.S1",
    "Pivot.M.Classic.Middle",
    "Pivot.M.Classic.R1", "Pivot.M.Classic.R2", "Pivot.M.Classic.R3",
    "Pivot.M.Fibonacci.S3", "Pivot.M.Fibonacci.S2", "Pivot.M.Fibonacci.S1",
    "Pivot.M.Fibonacci.Middle",
    "Pivot.M.Fibonacci.R1", "Pivot.M.Fibonacci.R2", "Pivot.M.Fibonacci.R3",
    "Pivot.M.Camarilla.S3", "Pivot.M.Camarilla.S2", "Pivot.M.Camarilla.S1",
    "Pivot.M.Camarilla.Middle",
    "Pivot.M.Camarilla.R1", "Pivot.M.Camarilla.R2", "Pivot.M.Camarilla.R3",
    "Pivot.M.Woodie.S3", "Pivot.M.Woodie.S2", "Pivot.M.Woodie.S1",
    "Pivot.M.Woodie.Middle",
    "Pivot.M.Woodie.R1", "Pivot.M.Woodie.R2", "Pivot.M.Woodie.R3",
    "Pivot.M.Demark.S1", "Pivot.M.Demark.Middle", "Pivot.M.Demark.R1",
]


def concat_columns(*column_lists: List[str]) -> List[str]:
    """Concatenate column lists into one request column list."""
    columns: List[str] = []
    for column_list in column_lists:
        columns.extend(column_list)
    return columns


# Full analysis query: 3 + 28 + 12 + 6 = 49 columns
ANALYSIS_COLUMNS: List[str] = concat_columns(
    RECOMMENDS_LIST, OSCILLATORS_LIST, MA_LIST, MA_SIMPLE_LIST
)


def column_positions(columns: List[str]) -> Dict[str, int]:
    """Map each column name to its position in a request column list."""
    return {name: index for index, name in enumerate(columns)}
