# tests/test_scoring_models.py

"""
Scoring Model Tests - linear, fast logistic and slow logistic decay curves
"""

import pytest

from ctf_engine.scoring.base import ScoringModel
from ctf_engine.scoring.linear_decay import LinearDecayScoringModel
from ctf_engine.scoring.logistic_decay import (
    FastLogisticDecayScoringModel,
    SlowLogisticDecayScoringModel,
)
from ctf_engine.scoring.registry import (
    DEFAULT_SCORING_MODEL,
    SCORING_MODELS,
    get_scoring_model,
)
from ctf_engine.scoring.utils import round_half_away_from_zero, score_floor, truncate

ALL_MODELS = [
    LinearDecayScoringModel(),
    FastLogisticDecayScoringModel(),
    SlowLogisticDecayScoringModel(),
]


# ROUNDING HELPERS


class TestRoundingHelpers:
    """Tests for the integer conversion helpers."""

    @pytest.mark.parametrize("value, expected", [
        (2.5, 3), (-2.5, -3), (0.5, 1), (1.5, 2), (2.4, 2), (2.6, 3), (-0.4, 0), (100.0, 100),
    ])
    def test_round_half_away_from_zero(self, value, expected):
        assert round_half_away_from_zero(value) == expected

    @pytest.mark.parametrize("value, expected", [(99.77, 99), (-1.5, -1), (1000.0, 1000)])
    def test_truncate(self, value, expected):
        assert truncate(value) == expected

    @pytest.mark.parametrize("base_score, expected", [(1000, 100), (500, 50), (15, 2), (1, 1), (9, 1)])
    def test_score_floor(self, base_score, expected):
        assert score_floor(base_score) == expected


# LINEAR DECAY


class TestLinearDecay:
    """Tests for LinearDecayScoringModel."""

    def setup_method(self):
        self.model = LinearDecayScoringModel()

    def test_full_score_at_zero_rate(self):
        assert self.model.compute_score(1000, 0.0) == 1000
        assert self.model.compute_score(500, 0.0) == 500

    def test_floor_at_full_rate(self):
        assert self.model.compute_score(1000, 1.0) == 100

    @pytest.mark.parametrize("rate, expected", [
        (0.1, 820), (0.25, 550), (0.3, 460), (0.5, 100), (0.6, 100), (0.9, 100),
    ])
    def test_intermediate_rates(self, rate, expected):
        assert self.model.compute_score(1000, rate) == expected

    def test_monotonic_sample(self):
        scores = [self.model.compute_score(1000, r) for r in (0.1, 0.3, 0.6, 0.9)]
        assert scores == sorted(scores, reverse=True)

    def test_baseline_challenge_keeps_one_point(self):
        assert self.model.compute_score(1, 0.0) == 1
        assert self.model.compute_score(1, 1.0) == 1


# LOGISTIC DECAY


class TestFastLogisticDecay:
    """Tests for FastLogisticDecayScoringModel."""

    def setup_method(self):
        self.model = FastLogisticDecayScoringModel()

    def test_capped_at_base_score(self):
        # The fitted curve slightly exceeds 1.0 at rate 0.
        assert self.model.compute_score(1000, 0.0) == 1000

    def test_floor_at_full_rate(self):
        assert self.model.compute_score(1000, 1.0) == 100

    def test_drops_quickly(self):
        score = self.model.compute_score(1000, 0.1)
        assert 700 < score < 780

    def test_monotonic_sample(self):
        scores = [self.model.compute_score(1000, r) for r in (0.0, 0.1, 0.3, 0.6, 0.9, 1.0)]
        assert scores == sorted(scores, reverse=True)


class TestSlowLogisticDecay:
    """Tests for SlowLogisticDecayScoringModel."""

    def setup_method(self):
        self.model = SlowLogisticDecayScoringModel()

    def test_capped_at_base_score(self):
        # 1771 / 1965 + 0.09977 is just over 1.0 at rate 0.
        # So the cap applies and the score is the full 1000, not a near-floor ~100.
        assert self.model.compute_score(1000, 0.0) == 1000

    def test_floor_at_full_rate(self):
        assert self.model.compute_score(1000, 1.0) == 100

    def test_holds_value_early(self):
        assert self.model.compute_score(1000, 0.1) >= 990

    def test_midpoint(self):
        score = self.model.compute_score(1000, 0.3)
        assert 500 < score < 600

    def test_monotonic_sample(self):
        scores = [self.model.compute_score(1000, r) for r in (0.0, 0.1, 0.3, 0.6, 0.9, 1.0)]
        assert scores == sorted(scores, reverse=True)


class TestAllModels:
    """Shared guarantees of every curve."""

    @pytest.mark.parametrize("model", ALL_MODELS, ids=lambda m: m.name)
    def test_small_base_score_floor(self, model):
        assert model.compute_score(15, 1.0) == 2

    @pytest.mark.parametrize("model", ALL_MODELS, ids=lambda m: m.name)
    def test_returns_int(self, model):
        assert type(model.compute_score(1000, 0.42)) is int

    @pytest.mark.parametrize("model", ALL_MODELS, ids=lambda m: m.name)
    def test_pure(self, model):
        assert model.compute_score(777, 0.33) == model.compute_score(777, 0.33)

    def test_interface_is_abstract(self):
        with pytest.raises(TypeError):
            ScoringModel()


# REGISTRY


class TestScoringRegistry:
    """Tests for name-based model lookup."""

    @pytest.mark.parametrize("name, model_class", [
        ("linear", LinearDecayScoringModel),
        ("fast_logistic", FastLogisticDecayScoringModel),
        ("slow_logistic", SlowLogisticDecayScoringModel),
    ])
    def test_lookup(self, name, model_class):
        assert isinstance(get_scoring_model(name), model_class)

    def test_lookup_ignores_case_and_whitespace(self):
        assert isinstance(get_scoring_model(" Linear "), LinearDecayScoringModel)

    def test_default_is_slow_logistic(self):
        assert DEFAULT_SCORING_MODEL == "slow_logistic"
        assert isinstance(get_scoring_model(), SlowLogisticDecayScoringModel)

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown scoring model"):
            get_scoring_model("exponential")

    def test_registry_names_match_models(self):
        for name, model_class in SCORING_MODELS.items():
            assert model_class.name == name
