"""
Challenge Contracts - CTF Event Engine
ctf_engine/models/challenge.py

Read-only contracts for the event graph. Concrete implementations are
produced by the YAML loader; consumers should depend on these only.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Protocol, Tuple, runtime_checkable
from urllib.parse import SplitResult

from ctf_engine.models.enumerations import (
    CtfChallengeDifficulty,
    CtfChallengeEndpointType,
    CtfScoringMode,
)


@runtime_checkable
class CtfEvent(Protocol):
    """Basic information about the CTF event."""

    name: str
    organizers: Tuple[str, ...]
    start_time: Optional[datetime]
    end_time: Optional[datetime]
    scoring: CtfScoringMode
    countries: Tuple[str, ...]


@runtime_checkable
class CtfChallengeHint(Protocol):
    """Author-provided hint, optionally costing points to reveal."""

    contents: str
    cost: Optional[int]
    release_after: timedelta


@runtime_checkable
class CtfChallengeAttachment(Protocol):
    """Downloadable file attached to a challenge."""

    name: str
    type: Optional[str]
    length: int
    sha256: Optional[str]
    sha1: Optional[str]
    download_uri: Optional[SplitResult]
    decompressed_attachment: Optional[CtfChallengeAttachment]


@runtime_checkable
class CtfChallengeEndpoint(Protocol):
    """Network endpoint contestants connect to."""

    type: CtfChallengeEndpointType
    hostname: str
    port: int


@runtime_checkable
class CtfChallenge(Protocol):
    """An individual challenge and its metadata."""

    id: str
    title: str
    flag: str
    difficulty: CtfChallengeDifficulty
    description: str
    hints: Tuple[CtfChallengeHint, ...]
    attachments: Tuple[CtfChallengeAttachment, ...]
    endpoint: Optional[CtfChallengeEndpoint]
    is_hidden: bool
    base_score: int

    @property
    def category(self) -> Optional[CtfChallengeCategory]:
        """Category containing this challenge (non-owning)."""
        ...


@runtime_checkable
class CtfChallengeCategory(Protocol):
    """A category owning an ordered set of challenges."""

    id: str
    name: str
    is_hidden: bool
    ordinality: int
    challenges: Tuple[CtfChallenge, ...]
