"""Data input/output module for league snapshots and draft artifacts."""

import csv
import json
import logging
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path
from typing import Any

from draft_order.config import DEFAULT_DRAFT_ROUNDS, REGULAR_SEASON_WEEKS
from draft_order.errors import InvalidInputError
from draft_order.models import (
    DraftBoard,
    DraftSnapshot,
    LeagueSnapshot,
    LivePick,
    PickedPlayer,
    PlayoffMatchup,
    Player,
    Roster,
    TeamStanding,
    TradedPick,
    User,
    WeeklyMatchupResult,
)

logger = logging.getLogger(__name__)

LEAGUE_FILE = "league.json"
ROSTERS_FILE = "rosters.json"
USERS_FILE = "users.json"
PLAYERS_FILE = "players.json"
WINNERS_BRACKET_FILE = "winners_bracket.json"
TRADED_PICKS_FILE = "traded_picks.json"
DRAFT_FILE = "draft.json"
DRAFT_PICKS_FILE = "draft_picks.json"
MATCHUPS_DIR = "matchups"


def _int_or_none(value: Any) -> int | None:
    return int(value) if value is not None else None


def parse_roster(data: dict[str, Any]) -> Roster:
    """Parse a provider roster record."""
    settings = data.get("settings") or {}
    return Roster(
        roster_id=int(data["roster_id"]),
        owner_id=data.get("owner_id"),
        wins=settings.get("wins") or 0,
        losses=settings.get("losses") or 0,
        ties=settings.get("ties") or 0,
        fpts=settings.get("fpts") or 0,
        fpts_decimal=settings.get("fpts_decimal") or 0,
        ppts=settings.get("ppts") or 0,
        ppts_decimal=settings.get("ppts_decimal") or 0,
    )


def parse_user(data: dict[str, Any]) -> User:
    """Parse a provider league user record."""
    metadata = data.get("metadata") or {}
    return User(
        user_id=data["user_id"],
        display_name=data.get("display_name") or "",
        team_name=metadata.get("team_name"),
        avatar=data.get("avatar"),
    )


def parse_player(player_id: str, data: dict[str, Any]) -> Player:
    """Parse a player directory entry."""
    return Player(
        player_id=data.get("player_id") or player_id,
        position=data.get("position"),
        first_name=data.get("first_name") or "",
        last_name=data.get("last_name") or "",
        team=data.get("team"),
        fantasy_positions=list(data.get("fantasy_positions") or []),
    )


def parse_matchup(data: dict[str, Any]) -> WeeklyMatchupResult:
    """Parse one roster's weekly matchup record."""
    return WeeklyMatchupResult(
        roster_id=int(data["roster_id"]),
        players_points=dict(data.get("players_points") or {}),
        matchup_id=_int_or_none(data.get("matchup_id")),
        points=float(data.get("points") or 0.0),
    )


def parse_playoff_matchup(data: dict[str, Any]) -> PlayoffMatchup:
    """Parse a winners bracket entry (r, m, t1, t2, w, l, p)."""
    # t1/t2 hold {"w": m} or {"l": m} references before the feeder match is played
    team1 = data.get("t1")
    team2 = data.get("t2")
    return PlayoffMatchup(
        round=int(data["r"]),
        match=int(data["m"]),
        team1=team1 if isinstance(team1, int) else None,
        team2=team2 if isinstance(team2, int) else None,
        winner=_int_or_none(data.get("w")),
        loser=_int_or_none(data.get("l")),
        place=_int_or_none(data.get("p")),
    )


def parse_traded_pick(data: dict[str, Any]) -> TradedPick:
    """Parse a traded pick record."""
    return TradedPick(
        season=str(data["season"]),
        round=int(data["round"]),
        roster_id=int(data["roster_id"]),
        owner_id=int(data["owner_id"]),
        previous_owner_id=_int_or_none(data.get("previous_owner_id")),
    )


def parse_live_pick(data: dict[str, Any]) -> LivePick:
    """Parse a selection made in a provider draft."""
    metadata = data.get("metadata") or {}
    name = f"{metadata.get('first_name', '')} {metadata.get('last_name', '')}"
    return LivePick(
        round=int(data["round"]),
        draft_slot=int(data["draft_slot"]),
        pick_no=int(data["pick_no"]),
        player=PickedPlayer(
            name=name.strip() or str(data.get("player_id", "")),
            position=metadata.get("position") or "",
            team=metadata.get("team"),
        ),
    )


def parse_draft(
    data: dict[str, Any], picks: Iterable[dict[str, Any]] = ()
) -> DraftSnapshot:
    """Parse a provider draft and the picks made in it so far."""
    slot_to_roster_id = data.get("slot_to_roster_id")
    if slot_to_roster_id is not None:
        slot_to_roster_id = {
            int(slot): int(roster_id)
            for slot, roster_id in slot_to_roster_id.items()
            if roster_id is not None
        }
    settings = data.get("settings") or {}
    return DraftSnapshot(
        draft_id=str(data["draft_id"]),
        season=str(data["season"]),
        status=data.get("status") or "pre_draft",
        slot_to_roster_id=slot_to_roster_id,
        rounds=_int_or_none(settings.get("rounds")),
        picks=[parse_live_pick(pick) for pick in picks],
    )


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidInputError("load_league_snapshot", path.name, str(e)) from e


def _read_optional_json(path: Path, default: Any) -> Any:
    if not path.exists():
        logger.debug(f"Optional snapshot file missing: {path}")
        return default
    return _read_json(path)


def load_matchups(
    directory: Path, weeks: Iterable[int]
) -> dict[int, list[WeeklyMatchupResult]]:
    """Load weekly matchup files (matchups/week_<n>.json).

    Weeks without a file are left out of the result.
    """
    matchups_by_week = {}
    for week in weeks:
        path = directory / MATCHUPS_DIR / f"week_{week}.json"
        if not path.exists():
            logger.debug(f"No matchup file for week {week}")
            continue
        matchups_by_week[week] = [parse_matchup(m) for m in _read_json(path)]
    return matchups_by_week


def load_league_snapshot(
    directory: str | Path, weeks: Iterable[int] = REGULAR_SEASON_WEEKS
) -> LeagueSnapshot:
    """Load a league season from a directory of provider JSON files.

    Args:
        directory: Snapshot directory
        weeks: Weeks of matchup data to load

    Returns:
        Parsed league snapshot

    Raises:
        FileNotFoundError: If a required file (league, rosters, users,
            players) is missing
        InvalidInputError: If a file is not valid JSON or lacks required keys
    """
    directory = Path(directory)
    logger.info(f"Loading league snapshot from {directory}")

    league = _read_json(directory / LEAGUE_FILE)
    try:
        settings = league.get("settings") or {}
        rosters = [parse_roster(r) for r in _read_json(directory / ROSTERS_FILE)]
        users = [parse_user(u) for u in _read_json(directory / USERS_FILE)]
        players = {
            player_id: parse_player(player_id, data)
            for player_id, data in _read_json(directory / PLAYERS_FILE).items()
        }
        winners_bracket = [
            parse_playoff_matchup(m)
            for m in _read_optional_json(directory / WINNERS_BRACKET_FILE, [])
        ]
        traded_picks = [
            parse_traded_pick(t)
            for t in _read_optional_json(directory / TRADED_PICKS_FILE, [])
        ]
        draft_data = _read_optional_json(directory / DRAFT_FILE, None)
        draft = None
        if draft_data:
            draft_picks = _read_optional_json(directory / DRAFT_PICKS_FILE, [])
            draft = parse_draft(draft_data, draft_picks)

        snapshot = LeagueSnapshot(
            league_id=str(league["league_id"]),
            name=league.get("name") or "",
            season=str(league["season"]),
            roster_positions=list(league.get("roster_positions") or []),
            playoff_teams=settings.get("playoff_teams") or 0,
            draft_rounds=settings.get("draft_rounds") or DEFAULT_DRAFT_ROUNDS,
            rosters=rosters,
            users=users,
            players=players,
            matchups_by_week=load_matchups(directory, weeks),
            winners_bracket=winners_bracket,
            traded_picks=traded_picks,
            draft=draft,
            previous_league_id=league.get("previous_league_id"),
        )
    except InvalidInputError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise InvalidInputError(
            "load_league_snapshot", str(directory), f"malformed record: {e!r}"
        ) from e

    logger.info(
        f"Loaded {snapshot.name or snapshot.league_id} ({snapshot.season}): "
        f"{len(rosters)} rosters, {len(snapshot.matchups_by_week)} weeks"
    )
    return snapshot


def create_run_directory(season: str, method: str) -> tuple[str, Path]:
    """Create a timestamped directory for this run's artifacts.

    Args:
        season: Draft season label
        method: Draft order method used

    Returns:
        Tuple of (run_id, artifacts_directory_path)
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{timestamp}_{season}_{method}"

    run_dir = Path("artifacts") / f"run_{run_id}"
    run_dir.mkdir(parents=True, exist_ok=True)

    logger.info(f"Created run directory: {run_dir}")
    return run_id, run_dir


STANDINGS_FIELDS = [
    "draft_position",
    "roster_id",
    "display_name",
    "team_name",
    "record",
    "points_for",
    "max_pf",
    "league_max_pf",
    "max_pf_difference",
    "playoff_finish",
]

BOARD_FIELDS = [
    "season",
    "pick",
    "round",
    "slot",
    "original_owner_id",
    "original_owner_name",
    "current_owner_id",
    "current_owner_name",
    "is_traded",
    "picked_player",
    "picked_position",
    "is_on_the_clock",
]


def save_standings_csv(file_path: Path, standings: list[TeamStanding]) -> None:
    """Save draft order standings to CSV, one row per team."""
    rows = []
    for team in sorted(standings, key=lambda t: t.draft_position or 0):
        rows.append(
            {
                "draft_position": team.draft_position,
                "roster_id": team.roster_id,
                "display_name": team.display_name,
                "team_name": team.team_name or "",
                "record": team.record,
                "points_for": f"{team.points_for:.2f}",
                "max_pf": f"{team.max_pf:.2f}",
                "league_max_pf": f"{team.league_max_pf:.2f}",
                "max_pf_difference": f"{team.max_pf_difference:.2f}",
                "playoff_finish": team.playoff_finish or "",
            }
        )

    with open(file_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=STANDINGS_FIELDS)
        writer.writeheader()
        writer.writerows(rows)


def save_draft_board_csv(file_path: Path, board: DraftBoard) -> None:
    """Save every pick on the draft board to CSV."""
    with open(file_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=BOARD_FIELDS)
        writer.writeheader()
        for pick in board.picks:
            player = pick.picked_player
            writer.writerow(
                {
                    "season": pick.season,
                    "pick": pick.label,
                    "round": pick.round,
                    "slot": pick.pick,
                    "original_owner_id": pick.original_owner_id,
                    "original_owner_name": pick.original_owner_name,
                    "current_owner_id": pick.current_owner_id,
                    "current_owner_name": pick.current_owner_name,
                    "is_traded": pick.is_traded,
                    "picked_player": player.name if player else "",
                    "picked_position": player.position if player else "",
                    "is_on_the_clock": pick.is_on_the_clock,
                }
            )


def save_run_parameters_txt(
    file_path: Path,
    run_id: str,
    standings_dir: str,
    draft_dir: str,
    method: str,
    weeks: list[int],
    season: str,
    rounds: int,
) -> None:
    """Save run parameters to text file."""
    with open(file_path, "w") as f:
        f.write(f"Run ID: {run_id}\n")
        f.write(f"Timestamp: {datetime.now().isoformat()}\n")
        f.write(f"Standings league: {standings_dir}\n")
        f.write(f"Draft league: {draft_dir}\n")
        f.write(f"Method: {method}\n")
        f.write(f"Weeks: {weeks[0]}-{weeks[-1]}\n" if weeks else "Weeks: none\n")
        f.write(f"Season: {season}\n")
        f.write(f"Rounds: {rounds}\n")
