import math
import logging

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero for non-negative scores.

    Python's built-in round() uses banker's rounding (round(2.5) == 2), which
    would move candidates across tier boundaries; scores always round .5 up.

    Args:
        value: Non-negative value to round
        digits: Number of decimal places to keep

    Returns:
        Rounded value (float)
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Half-up rounding to the nearest integer."""
    return int(round_half_up(value))


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
