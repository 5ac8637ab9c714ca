"""
Rounding Utilities
ctf_engine/scoring/utils.py

Integer rounding rules shared by the decay curves.
"""

import math
from decimal import Decimal, ROUND_HALF_UP


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer; .5 goes away from zero (2.5 -> 3, -2.5 -> -3)."""
    # Decimal(value) is the exact binary value, so no extra rounding sneaks in.
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def truncate(value: float) -> int:
    """Drop the fractional part (toward zero)."""
    return int(value)


def score_floor(base_score: int) -> int:
    """Minimum awarded score: 10% of the base score, rounded up."""
    return math.ceil(base_score * 0.1)
