"""League data structures and derived draft order entities."""

from dataclasses import dataclass, field


@dataclass
class Player:
    """Player directory entry.

    Attributes:
        player_id: Provider player identifier
        position: Primary position (QB, RB, WR, TE, K, DEF, DL, LB, DB, ...)
        first_name: Player's first name
        last_name: Player's last name
        team: NFL team abbreviation (None for free agents)
        fantasy_positions: All positions the player is listed at
    """

    player_id: str
    position: str | None
    first_name: str = ""
    last_name: str = ""
    team: str | None = None
    fantasy_positions: list[str] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.player_id


@dataclass
class Roster:
    """Season results for one league roster.

    Points are reported by the provider as an integer part plus a
    hundredths remainder (fpts=1234, fpts_decimal=56 -> 1234.56).

    Attributes:
        roster_id: Stable roster identifier used as foreign key everywhere
        owner_id: User id of the roster's owner
        wins: Regular season wins
        losses: Regular season losses
        ties: Regular season ties
        fpts: Points for, integer part
        fpts_decimal: Points for, hundredths
        ppts: League-reported potential points, integer part
        ppts_decimal: League-reported potential points, hundredths
    """

    roster_id: int
    owner_id: str | None
    wins: int = 0
    losses: int = 0
    ties: int = 0
    fpts: int = 0
    fpts_decimal: int = 0
    ppts: int = 0
    ppts_decimal: int = 0

    @property
    def points_for(self) -> float:
        return self.fpts + self.fpts_decimal / 100

    @property
    def league_max_pf(self) -> float:
        return self.ppts + self.ppts_decimal / 100


@dataclass
class User:
    """League member.

    Attributes:
        user_id: Provider user identifier
        display_name: Account display name
        team_name: Optional custom team name
        avatar: Optional avatar id
    """

    user_id: str
    display_name: str = ""
    team_name: str | None = None
    avatar: str | None = None


@dataclass
class WeeklyMatchupResult:
    """One roster's scoring for one week.

    Attributes:
        roster_id: Roster the result belongs to
        players_points: Player id -> points scored that week
        matchup_id: Head-to-head pairing id (None on a bye)
        points: Points actually credited to the roster
    """

    roster_id: int
    players_points: dict[str, float]
    matchup_id: int | None = None
    points: float = 0.0


@dataclass
class PlayoffMatchup:
    """Winners bracket entry.

    Attributes:
        round: Bracket round number (1 = first round)
        match: Match number within the bracket
        team1: First roster id (None when fed by an earlier match)
        team2: Second roster id (None when fed by an earlier match)
        winner: Winning roster id (None until played)
        loser: Losing roster id (None until played)
        place: Winner finishes in this place, loser in place + 1
    """

    round: int
    match: int
    team1: int | None = None
    team2: int | None = None
    winner: int | None = None
    loser: int | None = None
    place: int | None = None


@dataclass
class TradedPick:
    """Final ownership of a traded future pick.

    Attributes:
        season: Draft season label (e.g. "2025")
        round: Draft round
        roster_id: Roster that originally owned the pick
        owner_id: Roster that currently owns the pick
        previous_owner_id: Roster that owned it before the last trade
    """

    season: str
    round: int
    roster_id: int
    owner_id: int
    previous_owner_id: int | None = None


@dataclass
class PickedPlayer:
    """Player selected with a live draft pick."""

    name: str
    position: str
    team: str | None = None


@dataclass
class LivePick:
    """Selection already made in an in-progress draft.

    Attributes:
        round: Draft round
        draft_slot: Slot within the round (1-based)
        pick_no: Overall pick number (1-based)
        player: Selected player
    """

    round: int
    draft_slot: int
    pick_no: int
    player: PickedPlayer


@dataclass
class DraftSnapshot:
    """Draft as configured by the league provider.

    Attributes:
        draft_id: Provider draft identifier
        season: Draft season label
        status: Provider draft status ("pre_draft", "drafting", "complete")
        slot_to_roster_id: Draft slot -> roster id (None until order is set)
        rounds: Number of rounds configured for the draft
        picks: Selections already made
    """

    draft_id: str
    season: str
    status: str = "pre_draft"
    slot_to_roster_id: dict[int, int] | None = None
    rounds: int | None = None
    picks: list[LivePick] = field(default_factory=list)


@dataclass
class TeamStanding:
    """Team's season summary with its assigned draft position.

    Attributes:
        roster_id: Roster identifier
        owner_id: Owning user id
        display_name: Name shown for the team
        team_name: Optional custom team name
        wins: Regular season wins
        losses: Regular season losses
        ties: Regular season ties
        points_for: Total points scored
        max_pf: Computed max potential points
        league_max_pf: League-reported max potential points
        playoff_finish: Final playoff rank (1 = champion), if resolved
        draft_position: Draft slot (1 = first pick), once assigned
    """

    roster_id: int
    owner_id: str | None
    display_name: str
    team_name: str | None
    wins: int
    losses: int
    ties: int
    points_for: float
    max_pf: float
    league_max_pf: float
    playoff_finish: int | None = None
    draft_position: int | None = None

    @property
    def record(self) -> str:
        if self.ties:
            return f"{self.wins}-{self.losses}-{self.ties}"
        return f"{self.wins}-{self.losses}"

    @property
    def max_pf_difference(self) -> float:
        """Computed max PF minus the league-reported figure."""
        return round(self.max_pf - self.league_max_pf, 2)


@dataclass
class DraftPick:
    """Single (round, slot) pick on the draft board.

    Attributes:
        season: Draft season label
        round: Draft round (1-based)
        pick: Slot within the round (1-based)
        original_owner_id: Roster the pick was assigned to by draft order
        current_owner_id: Roster holding the pick after trades
        original_owner_name: Display name of the original owner
        current_owner_name: Display name of the current owner
        is_traded: True when current owner differs from original owner
        picked_player: Player selected with this pick in a live draft
        is_on_the_clock: True for the pick currently awaiting selection
    """

    season: str
    round: int
    pick: int
    original_owner_id: int
    current_owner_id: int
    original_owner_name: str
    current_owner_name: str
    is_traded: bool
    picked_player: PickedPlayer | None = None
    is_on_the_clock: bool = False

    @property
    def label(self) -> str:
        return f"{self.round}.{self.pick:02d}"


@dataclass
class DraftBoard:
    """Full set of picks for one draft season.

    Attributes:
        season: Draft season label
        rounds: Number of rounds
        picks: Picks ordered by round, then slot
    """

    season: str
    rounds: int
    picks: list[DraftPick]

    @property
    def num_teams(self) -> int:
        if self.rounds <= 0:
            return 0
        return len(self.picks) // self.rounds

    def overall_pick_number(self, pick: DraftPick) -> int:
        """Get 1-based overall pick number for a pick on this board."""
        return (pick.round - 1) * self.num_teams + pick.pick

    def picks_in_round(self, round_num: int) -> list[DraftPick]:
        return [pick for pick in self.picks if pick.round == round_num]

    def traded_picks(self) -> list[DraftPick]:
        return [pick for pick in self.picks if pick.is_traded]

    def picks_owned_by(self, roster_id: int) -> list[DraftPick]:
        return [pick for pick in self.picks if pick.current_owner_id == roster_id]


@dataclass
class LeagueSnapshot:
    """Everything known about one league season, already deserialized.

    Attributes:
        league_id: Provider league identifier
        name: League name
        season: Season label (e.g. "2025")
        roster_positions: Starting lineup slot layout, including bench
        playoff_teams: Number of playoff teams configured
        draft_rounds: Number of rounds configured for the league draft
        rosters: League rosters with season results
        users: League members
        players: Player directory keyed by player id
        matchups_by_week: Week number -> weekly results
        winners_bracket: Winners bracket entries
        traded_picks: Traded future pick records
        draft: Provider draft for the season, if one exists
        previous_league_id: League id of the prior season, if any
    """

    league_id: str
    name: str
    season: str
    roster_positions: list[str]
    playoff_teams: int
    draft_rounds: int
    rosters: list[Roster]
    users: list[User]
    players: dict[str, Player] = field(default_factory=dict)
    matchups_by_week: dict[int, list[WeeklyMatchupResult]] = field(
        default_factory=dict
    )
    winners_bracket: list[PlayoffMatchup] = field(default_factory=list)
    traded_picks: list[TradedPick] = field(default_factory=list)
    draft: DraftSnapshot | None = None
    previous_league_id: str | None = None

    @property
    def roster_ids(self) -> list[int]:
        return [roster.roster_id for roster in self.rosters]
