from enum import Enum, IntEnum


class CtfScoringMode(str, Enum):
    STATIC = "static"                                  # Points never decay
    JEOPARDY = "jeopardy"                              # Points decay for everyone as solves accrue
    FIRST_COME_FIRST_SERVE = "first_come_first_serve"  # Points freeze for a team once it solves

    @property
    def display_name(self) -> str:
        return _SCORING_MODE_NAMES[self]


class CtfChallengeDifficulty(IntEnum):
    NONE = 0             # Not set
    VERY_EASY = 1        # ~99% of active contestants solve it
    EASY = 2             # ~80%
    MEDIUM = 3           # ~50%
    HARD = 4             # ~25%
    VERY_HARD = 5        # ~5%
    ULTRA_NIGHTMARE = 6  # <1%

    @property
    def display_name(self) -> str:
        return _DIFFICULTY_NAMES[self]


class CtfChallengeEndpointType(IntEnum):
    UNKNOWN = 0
    NETCAT = 1
    HTTP = 2
    SSH = 3
    SSL = 4
    HTTPS = 5

    @property
    def display_name(self) -> str:
        return _ENDPOINT_TYPE_NAMES[self]


_SCORING_MODE_NAMES = {
    CtfScoringMode.STATIC: "Jeopardy (static)",
    CtfScoringMode.JEOPARDY: "Jeopardy",
    CtfScoringMode.FIRST_COME_FIRST_SERVE: "Jeopardy (non-persistent decay)",
}

_DIFFICULTY_NAMES = {
    CtfChallengeDifficulty.NONE: "None",
    CtfChallengeDifficulty.VERY_EASY: "Very easy",
    CtfChallengeDifficulty.EASY: "Easy",
    CtfChallengeDifficulty.MEDIUM: "Medium",
    CtfChallengeDifficulty.HARD: "Hard",
    CtfChallengeDifficulty.VERY_HARD: "Very hard",
    CtfChallengeDifficulty.ULTRA_NIGHTMARE: "Ultra Nightmare",
}

_ENDPOINT_TYPE_NAMES = {
    CtfChallengeEndpointType.UNKNOWN: "Unknown endpoint type",
    CtfChallengeEndpointType.NETCAT: "TCP/netcat",
    CtfChallengeEndpointType.HTTP: "HTTP",
    CtfChallengeEndpointType.SSH: "SSH",
    CtfChallengeEndpointType.SSL: "SSL",
    CtfChallengeEndpointType.HTTPS: "HTTPS",
}
