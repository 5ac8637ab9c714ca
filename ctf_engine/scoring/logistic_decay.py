# ctf_engine/scoring/logistic_decay.py
"""
Logistic Decay Scoring Models
-----------------------------
Sigmoid-shaped decay curves fitted to the desired score profile. Both are
capped at the base score, floored at ceil(b × 0.1), and truncated toward zero.

Fast variant (drops quickly, then levels off):
    b × ( −0.1255 / (0.1234 + e^(−15.45 r)) + 1.115 )

Slow variant (holds its value, then drops):
    b × ( 1771 / (1964 + e^(25.28 r)) + 0.09977 )
"""

import math

from ctf_engine.scoring.base import ScoringModel
from ctf_engine.scoring.utils import score_floor, truncate


class FastLogisticDecayScoringModel(ScoringModel):
    """Decays rapidly in the beginning, then slows down."""

    name = "fast_logistic"

    def compute_score(self, base_score: int, solve_rate: float) -> int:
        curve = -0.1255 / (0.1234 + math.exp(-15.45 * solve_rate)) + 1.115
        return truncate(min(base_score, max(score_floor(base_score), base_score * curve)))


class SlowLogisticDecayScoringModel(ScoringModel):
    """Decays slowly in the beginning, then speeds up."""

    name = "slow_logistic"

    def compute_score(self, base_score: int, solve_rate: float) -> int:
        curve = 1771 / (1964 + math.exp(25.28 * solve_rate)) + 0.09977
        return truncate(min(base_score, max(score_floor(base_score), base_score * curve)))
