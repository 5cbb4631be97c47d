"""
Recommendation mapper.

Converts the scanner's continuous recommendation scores and its binary
``Rec.*`` indicator columns into signals.
"""

from typing import Optional

from ..models.scanner_data import Signal
from ..shared.exceptions import DomainError


def compute_recommend(value: Optional[float]) -> Signal:
    """
    Map a recommendation score to a five-way signal.

    Intervals:
        [-1, -0.5)  -> STRONG_SELL
        [-0.5, 0)   -> SELL
        0           -> NEUTRAL
        (0, 0.5]    -> BUY
        (0.5, 1]    -> STRONG_BUY

    Args:
        value: Score from a Recommend.* column

    Returns:
        The matching Signal

    Raises:
        DomainError: value is None, NaN or outside [-1, 1]
    """
    if value is None:
        raise DomainError(value)

    if -1 <= value < -0.5:
        return Signal.STRONG_SELL
    elif -0.5 <= value < 0:
        return Signal.SELL
    elif value == 0:
        return Signal.NEUTRAL
    elif 0 < value <= 0.5:
        return Signal.BUY
    elif 0.5 < value <= 1:
        return Signal.STRONG_BUY

    # NaN fails every comparison and lands here too
    raise DomainError(value)


def compute_simple(value: Optional[float]) -> Signal:
    """Binary indicator: 1 is BUY, -1 is SELL, anything else NEUTRAL."""
    if value == -1:
        return Signal.SELL
    elif value == 1:
        return Signal.BUY
    return Signal.NEUTRAL
