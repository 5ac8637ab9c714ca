"""
YAML Datatypes - CTF Event Engine
ctf_engine/loader/datatypes.py

Concrete, frozen implementations of the challenge contracts. Aliases are the
YAML keys; every field has a default so missing keys are tolerated.
"""

import weakref
from datetime import datetime, timedelta
from typing import Optional, Tuple
from urllib.parse import SplitResult

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ctf_engine.models.challenge import (
    CtfChallenge,
    CtfChallengeAttachment,
    CtfChallengeCategory,
    CtfChallengeEndpoint,
    CtfChallengeHint,
)
from ctf_engine.models.enumerations import (
    CtfChallengeDifficulty,
    CtfChallengeEndpointType,
    CtfScoringMode,
)


class CategoryRef:
    """
    Weak handle from a challenge to its category.

    Compares by category id so model equality never walks back up the graph.
    """

    __slots__ = ("_ref", "category_id")

    def __init__(self, category: CtfChallengeCategory):
        self._ref = weakref.ref(category)
        self.category_id = category.id

    def __call__(self) -> Optional[CtfChallengeCategory]:
        return self._ref()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CategoryRef):
            return NotImplemented
        return self.category_id == other.category_id

    def __hash__(self) -> int:
        return hash(self.category_id)


class YamlDatatype(BaseModel):
    """Base for all YAML-backed datatypes."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        extra="ignore",
    )


class YamlCtfEvent(YamlDatatype):
    name: str = Field(default="", alias="name", description="Event name")
    organizers: Tuple[str, ...] = Field(default=(), alias="organizers")
    start_time: Optional[datetime] = Field(default=None, alias="startTime")
    end_time: Optional[datetime] = Field(default=None, alias="endTime")
    scoring: CtfScoringMode = Field(default=CtfScoringMode.JEOPARDY, alias="scoring")
    countries: Tuple[str, ...] = Field(
        default=(),
        alias="countries",
        description="Countries contestants may represent"
    )


class YamlCtfChallengeHint(YamlDatatype):
    contents: str = Field(default="", alias="contents")
    cost: Optional[int] = Field(
        default=None,
        alias="cost",
        description="Points deducted when the hint is revealed"
    )
    release_after: timedelta = Field(
        default=timedelta(0),
        alias="release_after",
        description="Delay after event start before the hint is visible"
    )


class YamlCtfChallengeAttachment(YamlDatatype):
    name: str = Field(default="", alias="filename")
    type: Optional[str] = Field(default=None, alias="type", description="MIME type")
    length: int = Field(default=0, alias="length", description="Size in bytes")
    sha256: Optional[str] = Field(default=None, alias="sha256")
    sha1: Optional[str] = Field(default=None, alias="sha1")
    download_uri: Optional[SplitResult] = Field(default=None, alias="url")
    decompressed_attachment: Optional[CtfChallengeAttachment] = Field(
        default=None,
        alias="decompressed",
        description="Contents of the attachment once unpacked"
    )


class YamlCtfChallengeEndpoint(YamlDatatype):
    type: CtfChallengeEndpointType = Field(default=CtfChallengeEndpointType.UNKNOWN, alias="type")
    hostname: str = Field(default="", alias="host")
    port: int = Field(default=0, alias="port")


class YamlCtfChallenge(YamlDatatype):
    id: str = Field(default="", alias="id")
    title: str = Field(default="", alias="title")
    flag: str = Field(default="", alias="flag")
    difficulty: CtfChallengeDifficulty = Field(default=CtfChallengeDifficulty.NONE, alias="difficulty")
    description: str = Field(default="", alias="description")
    hints: Tuple[CtfChallengeHint, ...] = Field(default=(), alias="hints")
    attachments: Tuple[CtfChallengeAttachment, ...] = Field(default=(), alias="attachments")
    endpoint: Optional[CtfChallengeEndpoint] = Field(default=None, alias="endpoint")
    is_hidden: bool = Field(default=False, alias="hidden")
    base_score: int = Field(default=0, alias="baseScore")

    # Set once by the loader's linking pass.
    _category_ref: Optional[CategoryRef] = PrivateAttr(default=None)

    @property
    def category(self) -> Optional[CtfChallengeCategory]:
        if self._category_ref is None:
            return None
        return self._category_ref()

    @property
    def category_id(self) -> Optional[str]:
        return self._category_ref.category_id if self._category_ref is not None else None

    def attach_category(self, category: CtfChallengeCategory) -> None:
        """Record the containing category. Called only by the linking pass."""
        self._category_ref = CategoryRef(category)


class YamlCtfChallengeCategory(YamlDatatype):
    id: str = Field(default="", alias="id")
    name: str = Field(default="", alias="name")
    is_hidden: bool = Field(default=False, alias="hidden")
    ordinality: int = Field(default=0, alias="ordinality", description="Display order")
    challenges: Tuple[CtfChallenge, ...] = Field(default=(), alias="challenges")
