"""
scoring/registry.py - Scoring model lookup

Maps configuration names (Settings.SCORING_MODEL) to scoring model classes.
"""

from typing import Dict, Type

import structlog

from ctf_engine.scoring.base import ScoringModel
from ctf_engine.scoring.linear_decay import LinearDecayScoringModel
from ctf_engine.scoring.logistic_decay import (
    FastLogisticDecayScoringModel,
    SlowLogisticDecayScoringModel,
)

logger = structlog.get_logger(__name__)

SCORING_MODELS: Dict[str, Type[ScoringModel]] = {
    LinearDecayScoringModel.name: LinearDecayScoringModel,
    FastLogisticDecayScoringModel.name: FastLogisticDecayScoringModel,
    SlowLogisticDecayScoringModel.name: SlowLogisticDecayScoringModel,
}

DEFAULT_SCORING_MODEL = SlowLogisticDecayScoringModel.name


def get_scoring_model(name: str = DEFAULT_SCORING_MODEL) -> ScoringModel:
    """
    Instantiate a scoring model by name.

    Raises:
        ValueError: if no model is registered under the name.
    """
    key = name.strip().lower()
    try:
        model_class = SCORING_MODELS[key]
    except KeyError:
        raise ValueError(
            f"Unknown scoring model {name!r}; expected one of {sorted(SCORING_MODELS)}"
        ) from None
    logger.debug("scoring_model_selected", model=key)
    return model_class()
