"""
Object Factory - CTF Event Engine
ctf_engine/loader/object_factory.py

Resolves the challenge contracts to their YAML-backed implementations.
"""

from typing import Any, Dict, Type

from ctf_engine.loader.datatypes import (
    YamlCtfChallenge,
    YamlCtfChallengeAttachment,
    YamlCtfChallengeCategory,
    YamlCtfChallengeEndpoint,
    YamlCtfChallengeHint,
    YamlCtfEvent,
)
from ctf_engine.models.challenge import (
    CtfChallenge,
    CtfChallengeAttachment,
    CtfChallengeCategory,
    CtfChallengeEndpoint,
    CtfChallengeHint,
    CtfEvent,
)

# Closed set: one concrete type per contract.
IMPLEMENTATIONS: Dict[type, type] = {
    CtfEvent: YamlCtfEvent,
    CtfChallengeCategory: YamlCtfChallengeCategory,
    CtfChallenge: YamlCtfChallenge,
    CtfChallengeHint: YamlCtfChallengeHint,
    CtfChallengeAttachment: YamlCtfChallengeAttachment,
    CtfChallengeEndpoint: YamlCtfChallengeEndpoint,
}


class YamlObjectFactory:
    """Creates default-initialized objects for the decoder to populate."""

    def __init__(self, implementations: Dict[type, type] = IMPLEMENTATIONS):
        self._implementations = implementations

    def is_abstract(self, target_type: Any) -> bool:
        return target_type in self._implementations

    def resolve(self, target_type: Type[Any]) -> type:
        """Concrete type used for `target_type`; unknown types map to themselves."""
        return self._implementations.get(target_type, target_type)

    def create(self, target_type: Type[Any]) -> Any:
        return self.resolve(target_type)()
