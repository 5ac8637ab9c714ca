"""
scoring/ - Challenge scoring

Modules:
    base.py              - ScoringModel interface
    utils.py             - Rounding helpers and the 10% score floor
    linear_decay.py      - Linear decay model
    logistic_decay.py    - Fast and slow logistic decay models
    registry.py          - Name -> model lookup
    score_calculator.py  - Solve-rate bookkeeping (current / next score)
"""

from ctf_engine.scoring.base import ScoringModel
from ctf_engine.scoring.linear_decay import LinearDecayScoringModel
from ctf_engine.scoring.logistic_decay import (
    FastLogisticDecayScoringModel,
    SlowLogisticDecayScoringModel,
)
from ctf_engine.scoring.registry import DEFAULT_SCORING_MODEL, SCORING_MODELS, get_scoring_model
from ctf_engine.scoring.score_calculator import (
    ScoreCalculator,
    ScoreInfo,
    count_baseline_solves,
    is_dynamic,
)

__all__ = [
    "DEFAULT_SCORING_MODEL",
    "FastLogisticDecayScoringModel",
    "LinearDecayScoringModel",
    "SCORING_MODELS",
    "ScoreCalculator",
    "ScoreInfo",
    "ScoringModel",
    "SlowLogisticDecayScoringModel",
    "count_baseline_solves",
    "get_scoring_model",
    "is_dynamic",
]
