"""
Models Package - CTF Event Engine
ctf_engine/models/__init__.py

Read-only contracts for the event graph and its enumerations.
"""

from ctf_engine.models.challenge import (
    CtfChallenge,
    CtfChallengeAttachment,
    CtfChallengeCategory,
    CtfChallengeEndpoint,
    CtfChallengeHint,
    CtfEvent,
)
from ctf_engine.models.enumerations import (
    CtfChallengeDifficulty,
    CtfChallengeEndpointType,
    CtfScoringMode,
)

__all__ = [
    "CtfChallenge",
    "CtfChallengeAttachment",
    "CtfChallengeCategory",
    "CtfChallengeDifficulty",
    "CtfChallengeEndpoint",
    "CtfChallengeEndpointType",
    "CtfChallengeHint",
    "CtfEvent",
    "CtfScoringMode",
]
