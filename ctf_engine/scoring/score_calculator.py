"""
scoring/score_calculator.py - Dynamic score bookkeeping

Feeds solve counts into a scoring model.

Definitions:
    baseline  = number of solves of baseline challenges (base score <= 1),
                used as the participant count when computing solve rates
    rate      = solves / baseline
    dynamic   = challenge with base score > 1; its score decays

For a submission that brings a challenge to `solves` solves, the current
score is computed at solves / baseline and the next (what the following
solver would get) at (solves + 1) / baseline.
"""

from dataclasses import dataclass
from typing import Iterable, List

import structlog

from ctf_engine.models.challenge import CtfChallenge
from ctf_engine.scoring.base import ScoringModel

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ScoreInfo:
    """Score of a challenge now and after one more solve."""
    current: int
    next: int


def is_dynamic(challenge: CtfChallenge) -> bool:
    """Dynamic challenges decay; baseline challenges (base score <= 1) do not."""
    return challenge.base_score > 1


def count_baseline_solves(base_scores: Iterable[int]) -> int:
    """Count solves whose challenge is a baseline challenge (base score <= 1)."""
    return sum(1 for base_score in base_scores if base_score <= 1)


class ScoreCalculator:
    """
    Apply a scoring model to solve counts.

    The calculator is stateless apart from the model; solve counts and the
    baseline come from whoever tracks submissions.
    """

    def __init__(self, model: ScoringModel):
        self.model = model

    def solve_rate(self, solves: int, baseline: int) -> float:
        if baseline <= 0:
            raise ValueError(f"Baseline must be positive, got {baseline}")
        return solves / baseline

    def compute_score_info(self, base_score: int, solves: int, baseline: int) -> ScoreInfo:
        """
        Scores for a challenge that has just reached `solves` solves.

        Args:
            base_score: Challenge base score.
            solves: Solve count including the current one.
            baseline: Baseline solve count (participant estimate).
        """
        current = self.model.compute_score(base_score, self.solve_rate(solves, baseline))
        upcoming = self.model.compute_score(base_score, self.solve_rate(solves + 1, baseline))
        logger.debug(
            "score_computed",
            model=self.model.name,
            base_score=base_score,
            solves=solves,
            baseline=baseline,
            current=current,
            next=upcoming,
        )
        return ScoreInfo(current=current, next=upcoming)

    def compute_solve_scores(self, base_score: int, solve_count: int, baseline: int) -> List[int]:
        """
        Freeze per-solve scores in solve order: the i-th solve (0-based) is
        worth the score at rate i / baseline, so the first solver always gets
        the full curve value at rate 0.
        """
        return [
            self.model.compute_score(base_score, self.solve_rate(index, baseline))
            for index in range(solve_count)
        ]
