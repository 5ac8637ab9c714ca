# ctf_engine/scoring/linear_decay.py
"""
Linear Decay Scoring Model
--------------------------
Score falls linearly with the solve rate down to a 10% floor.

Formula:
    score = round_half_away( max( ceil(b × 0.1), b × (r × −1.8 + 1.0) ) )

The floor is reached at r = 0.5; every rate above that awards ceil(b × 0.1).
"""

from ctf_engine.scoring.base import ScoringModel
from ctf_engine.scoring.utils import round_half_away_from_zero, score_floor


class LinearDecayScoringModel(ScoringModel):
    """Challenge scores decay in a linear fashion."""

    name = "linear"

    def compute_score(self, base_score: int, solve_rate: float) -> int:
        decayed = (solve_rate * -1.8 + 1.0) * base_score
        return round_half_away_from_zero(max(score_floor(base_score), decayed))
