"""
Central interval configuration for scanner queries.

The scanner selects the candle interval per column: every requested
column gets a suffix such as ``|60`` (one hour). Daily data has no
suffix, which is also the fallback for unknown intervals.
"""

from enum import Enum
from typing import Dict, Optional

from ..shared.logging_config import context_logger


class Interval(str, Enum):
    """
    Supported candle intervals.

    Values are the public interval strings accepted by the client.
    Note that ``1m`` is one minute and ``1M`` is one month.
    """
    M1 = "1m"
    M5 = "5m"
    M15 = "15m"
    H1 = "1h"
    H4 = "4h"
    D1 = "1d"
    W1 = "1W"
    MN = "1M"


DEFAULT_INTERVAL = Interval.D1


# Mapping of accepted spellings to the standard interval (case-sensitive)
INTERVAL_ALIASES: Dict[str, Interval] = {
    # Public format
    "1m": Interval.M1,
    "5m": Interval.M5,
    "15m": Interval.M15,
    "1h": Interval.H1,
    "4h": Interval.H4,
    "1d": Interval.D1,
    "1W": Interval.W1,
    "1M": Interval.MN,

    # Timeframe format (M1, H1, D1, ...)
    "M1": Interval.M1,
    "M5": Interval.M5,
    "M15": Interval.M15,
    "H1": Interval.H1,
    "H4": Interval.H4,
    "D1": Interval.D1,
    "W1": Interval.W1,
    "MN": Interval.MN,

    # Scanner suffix format
    "1": Interval.M1,
    "5": Interval.M5,
    "15": Interval.M15,
    "60": Interval.H1,
    "240": Interval.H4,

    # Alternative spellings
    "1min": Interval.M1,
    "5min": Interval.M5,
    "15min": Interval.M15,
    "1day": Interval.D1,
    "1week": Interval.W1,
    "1month": Interval.MN,
}

# Column suffix per interval; daily is the scanner default and has none
INTERVAL_TO_SUFFIX: Dict[Interval, str] = {
    Interval.M1: "|1",
    Interval.M5: "|5",
    Interval.M15: "|15",
    Interval.H1: "|60",
    Interval.H4: "|240",
    Interval.D1: "",
    Interval.W1: "|1W",
    Interval.MN: "|1M",
}


def normalize_interval(interval: Optional[str]) -> Interval:
    """
    Resolve an interval string to an Interval.

    Unknown or empty values fall back to one day with a warning.

    Args:
        interval: Interval string, e.g. "1h", "H1" or "60"

    Returns:
        The matching Interval, or Interval.D1
    """
    if isinstance(interval, Interval):
        return interval

    resolved = INTERVAL_ALIASES.get((interval or "").strip())
    if resolved is None:
        context_logger.warning(
            f"Interval {interval!r} is empty or not valid, defaulting to 1 day."
        )
        return DEFAULT_INTERVAL
    return resolved


def column_suffix(interval: Optional[str]) -> str:
    """Return the column suffix for an interval ("" for daily)."""
    return INTERVAL_TO_SUFFIX[normalize_interval(interval)]


def with_interval(columns: list[str], interval: Optional[str]) -> list[str]:
    """Append the interval suffix to every column, keeping the order."""
    suffix = column_suffix(interval)
    return [f"{column}{suffix}" for column in columns]
