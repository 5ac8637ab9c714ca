"""
Scoring Model Interface
ctf_engine/scoring/base.py
"""

from abc import ABC, abstractmethod
from typing import ClassVar


class ScoringModel(ABC):
    """
    Computes the current score of a challenge from its solve rate.

    Implementations are pure: the same (base_score, solve_rate) always gives
    the same result, and instances hold no state.

    Preconditions (not checked): base_score > 0 and 0 <= solve_rate <= 1.
    Results for other inputs are whatever the curve yields.
    """

    name: ClassVar[str]

    @abstractmethod
    def compute_score(self, base_score: int, solve_rate: float) -> int:
        """
        Args:
            base_score: Maximum score of the challenge.
            solve_rate: Fraction of participants who solved the challenge.

        Returns:
            Score currently awarded for the challenge.
        """
        ...
