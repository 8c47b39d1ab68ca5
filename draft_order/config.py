"""Configuration data structures and settings for draft order calculation."""

from dataclasses import dataclass
from enum import Enum


class DraftOrderMethod(str, Enum):
    """Supported policies for deriving the draft order."""

    STANDINGS = "standings"
    STANDINGS_MAX_PF = "standings_max_pf"
    SLEEPER_DRAFT = "sleeper_draft"


# Positions allowed to fill each roster slot label
POSITION_ELIGIBILITY = {
    "QB": {"QB"},
    "RB": {"RB"},
    "WR": {"WR"},
    "TE": {"TE"},
    "K": {"K"},
    "DEF": {"DEF"},
    "FLEX": {"RB", "WR", "TE"},
    "SUPER_FLEX": {"QB", "RB", "WR", "TE"},
    "SUPERFLEX": {"QB", "RB", "WR", "TE"},  # Alternative naming
    "REC_FLEX": {"WR", "TE"},
    "WRRB_FLEX": {"WR", "RB"},
    "IDP_FLEX": {"DL", "LB", "DB"},
    "DL": {"DL", "DE", "DT"},
    "LB": {"LB"},
    "DB": {"DB", "CB", "S"},
    "BN": set(),  # Bench - never scores
}

# Fill order for lineup slots (most restrictive first)
SLOT_PRIORITY = {
    "QB": 1,
    "K": 1,
    "DEF": 1,
    "RB": 2,
    "WR": 2,
    "TE": 2,
    "DL": 2,
    "LB": 2,
    "DB": 2,
    "REC_FLEX": 3,
    "WRRB_FLEX": 3,
    "FLEX": 4,
    "IDP_FLEX": 4,
    "SUPER_FLEX": 5,
    "SUPERFLEX": 5,
    "BN": 99,
}
DEFAULT_SLOT_PRIORITY = 50

BENCH_SLOT = "BN"
DEFENSE_POSITION = "DEF"
DEFENSE_ID_MAX_LENGTH = 3  # Team defenses are keyed by abbreviation ("PHI")

# Scoring weeks
REGULAR_SEASON_WEEKS = list(range(1, 15))  # Weeks 1-14
PLAYOFF_WEEKS = [15, 16, 17]

# Finish rank used for playoff teams the bracket could not place
UNRANKED_PLAYOFF_FINISH = 99

DEFAULT_DRAFT_ROUNDS = 4


def season_weeks(include_playoffs: bool = False) -> list[int]:
    """Get the scoring weeks that count toward max potential points.

    Args:
        include_playoffs: If True, include playoff weeks 15-17

    Returns:
        Ordered list of week numbers
    """
    if include_playoffs:
        return REGULAR_SEASON_WEEKS + PLAYOFF_WEEKS
    return list(REGULAR_SEASON_WEEKS)


@dataclass
class DraftConfig:
    """Settings for a single draft order run.

    Attributes:
        method: Draft order policy to apply
        include_playoffs: Count playoff weeks toward max potential points
        draft_rounds: Number of rounds on the board (None = league setting)
        season: Draft season label (None = draft league's season)
    """

    method: DraftOrderMethod = DraftOrderMethod.STANDINGS_MAX_PF
    include_playoffs: bool = False
    draft_rounds: int | None = None
    season: str | None = None

    def __post_init__(self) -> None:
        """Coerce a plain method name into a DraftOrderMethod."""
        self.method = DraftOrderMethod(self.method)

    @property
    def weeks(self) -> list[int]:
        """Scoring weeks for this run."""
        return season_weeks(self.include_playoffs)
