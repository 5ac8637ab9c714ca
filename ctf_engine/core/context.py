"""
Event Context - CTF Event Engine
ctf_engine/core/context.py

The loaded event graph plus the active scoring model, built once at startup
and passed to whatever needs it. Nothing here mutates after construction.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import structlog

from ctf_engine.config import Settings, get_settings
from ctf_engine.loader.configuration_loader import YamlCtfConfigurationLoader
from ctf_engine.models.challenge import CtfChallenge, CtfChallengeCategory, CtfEvent
from ctf_engine.scoring.base import ScoringModel
from ctf_engine.scoring.registry import get_scoring_model

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EventContext:
    """Read-only view over the event, its categories and the scoring model."""
    event: CtfEvent
    categories: Tuple[CtfChallengeCategory, ...]
    scoring_model: ScoringModel

    def challenges(self) -> Tuple[CtfChallenge, ...]:
        """All challenges, in document order."""
        return tuple(
            challenge
            for category in self.categories
            for challenge in category.challenges
        )

    def get_challenge(self, challenge_id: str) -> Optional[CtfChallenge]:
        for challenge in self.challenges():
            if challenge.id == challenge_id:
                return challenge
        return None

    def get_category(self, category_id: str) -> Optional[CtfChallengeCategory]:
        for category in self.categories:
            if category.id == category_id:
                return category
        return None

    def compute_score(self, challenge: CtfChallenge, solve_rate: float) -> int:
        return self.scoring_model.compute_score(challenge.base_score, solve_rate)


def create_event_context(
    settings: Optional[Settings] = None,
    loader: Optional[YamlCtfConfigurationLoader] = None,
) -> EventContext:
    """
    Build the event context.

    Args:
        settings: Application settings (defaults to get_settings()).
        loader: Already-constructed loader; when omitted one is built from
            settings.EVENT_CONFIGURATION.

    Raises:
        ConfigurationException: the event definition cannot be loaded.
        ValueError: settings.SCORING_MODEL names no known model.
    """
    settings = settings or get_settings()
    if loader is None:
        loader = YamlCtfConfigurationLoader(settings.EVENT_CONFIGURATION)

    context = EventContext(
        event=loader.load_event_data(),
        categories=loader.load_challenges(),
        scoring_model=get_scoring_model(settings.SCORING_MODEL),
    )
    logger.info(
        "event_context_ready",
        event_name=context.event.name,
        categories=len(context.categories),
        challenges=len(context.challenges()),
        scoring_model=context.scoring_model.name,
    )
    return context
