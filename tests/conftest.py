"""Shared fixtures for draft order tests."""

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from draft_order.models import Player, Roster, TeamStanding, User

LEAGUE = {
    "league_id": "L2024",
    "name": "Test League",
    "season": "2024",
    "roster_positions": ["QB", "RB", "WR", "FLEX", "BN"],
    "settings": {"playoff_teams": 2, "draft_rounds": 3, "num_teams": 4},
    "previous_league_id": None,
}

ROSTERS = [
    {
        "roster_id": 1,
        "owner_id": "u1",
        "settings": {
            "wins": 10,
            "losses": 4,
            "ties": 0,
            "fpts": 1500,
            "fpts_decimal": 25,
            "ppts": 1700,
            "ppts_decimal": 50,
        },
    },
    {
        "roster_id": 2,
        "owner_id": "u2",
        "settings": {"wins": 8, "losses": 6, "ties": 0, "fpts": 1400},
    },
    {
        "roster_id": 3,
        "owner_id": "u3",
        "settings": {"wins": 5, "losses": 9, "ties": 0, "fpts": 1300},
    },
    {
        "roster_id": 4,
        "owner_id": "u4",
        "settings": {"wins": 3, "losses": 10, "ties": 1, "fpts": 1200},
    },
]

USERS = [
    {"user_id": "u1", "display_name": "alice", "metadata": {}},
    {"user_id": "u2", "display_name": "bob"},
    {"user_id": "u3", "display_name": "", "metadata": {"team_name": "Carol's Crew"}},
    {"user_id": "u4", "display_name": "dave", "avatar": "abc123"},
]

PLAYERS = {
    "100": {
        "player_id": "100",
        "first_name": "Josh",
        "last_name": "Allen",
        "position": "QB",
        "team": "BUF",
        "fantasy_positions": ["QB"],
    },
    "200": {"player_id": "200", "position": "RB", "team": "SF"},
    "201": {"player_id": "201", "position": "RB", "team": "DET"},
    "300": {"player_id": "300", "position": "WR", "team": "MIA"},
    "301": {"player_id": "301", "position": "WR", "team": "CIN"},
    "400": {"player_id": "400", "position": "QB", "team": "BAL"},
}

WEEK_1 = [
    {
        "roster_id": 3,
        "matchup_id": 1,
        "points": 40.0,
        "players_points": {"100": 20, "200": 10, "300": 8, "201": 5, "PHI": 3},
    },
    {
        "roster_id": 4,
        "matchup_id": 1,
        "points": 30.0,
        "players_points": {"400": 15, "201": 12, "301": 9},
    },
]

WEEK_2 = [
    {"roster_id": 3, "matchup_id": 2, "players_points": {"100": 10.5}},
    {"roster_id": 4, "matchup_id": 2, "players_points": {"400": 30.25, "301": 4}},
]

WINNERS_BRACKET = [
    {"r": 1, "m": 1, "t1": 1, "t2": 2, "w": 1, "l": 2, "p": 1},
]

TRADED_PICKS = [
    {"season": "2024", "round": 1, "roster_id": 3, "owner_id": 1, "previous_owner_id": 3},
]

DRAFT = {
    "draft_id": "D1",
    "season": "2024",
    "status": "drafting",
    "slot_to_roster_id": {"1": 4, "2": 3, "3": 2, "4": 1},
    "settings": {"rounds": 3},
}

DRAFT_PICKS = [
    {
        "round": 1,
        "draft_slot": 1,
        "pick_no": 1,
        "player_id": "100",
        "metadata": {
            "first_name": "Josh",
            "last_name": "Allen",
            "position": "QB",
            "team": "BUF",
        },
    },
]


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


def write_league(directory: Path, with_draft: bool = False) -> Path:
    """Write a four-team league snapshot in provider JSON shape."""
    write_json(directory / "league.json", LEAGUE)
    write_json(directory / "rosters.json", ROSTERS)
    write_json(directory / "users.json", USERS)
    write_json(directory / "players.json", PLAYERS)
    write_json(directory / "winners_bracket.json", WINNERS_BRACKET)
    write_json(directory / "traded_picks.json", TRADED_PICKS)
    write_json(directory / "matchups" / "week_1.json", WEEK_1)
    write_json(directory / "matchups" / "week_2.json", WEEK_2)
    if with_draft:
        write_json(directory / "draft.json", DRAFT)
        write_json(directory / "draft_picks.json", DRAFT_PICKS)
    return directory


@pytest.fixture
def league_dir(tmp_path: Path) -> Path:
    """Snapshot directory for a completed four-team season."""
    return write_league(tmp_path / "league")


@pytest.fixture
def draft_league_dir(tmp_path: Path) -> Path:
    """Snapshot directory including a provider draft in progress."""
    return write_league(tmp_path / "draft_league", with_draft=True)


@pytest.fixture
def player_directory() -> dict[str, Player]:
    """Player directory for lineup tests."""
    return {
        "QB1": Player("QB1", "QB"),
        "QB2": Player("QB2", "QB"),
        "RB1": Player("RB1", "RB"),
        "RB2": Player("RB2", "RB"),
        "RB3": Player("RB3", "RB"),
        "WR1": Player("WR1", "WR"),
        "WR2": Player("WR2", "WR"),
        "WR3": Player("WR3", "WR"),
        "TE1": Player("TE1", "TE"),
        "K1": Player("K1", "K"),
        "LB1": Player("LB1", "LB"),
        "CB1": Player("CB1", "CB"),
    }


@pytest.fixture
def rosters() -> list[Roster]:
    """Six rosters with distinct records."""
    return [
        Roster(roster_id=1, owner_id="u1", wins=11, losses=3, fpts=1600),
        Roster(roster_id=2, owner_id="u2", wins=9, losses=5, fpts=1550),
        Roster(roster_id=3, owner_id="u3", wins=8, losses=6, fpts=1500),
        Roster(roster_id=4, owner_id="u4", wins=7, losses=7, fpts=1450),
        Roster(roster_id=5, owner_id="u5", wins=5, losses=9, fpts=1400, fpts_decimal=50),
        Roster(roster_id=6, owner_id="u6", wins=5, losses=9, fpts=1400, fpts_decimal=10),
    ]


@pytest.fixture
def users() -> list[User]:
    return [User(f"u{i}", f"owner{i}") for i in range(1, 7)]


def _standing(roster_id: int, draft_position: int | None) -> TeamStanding:
    return TeamStanding(
        roster_id=roster_id,
        owner_id=f"u{roster_id}",
        display_name=f"owner{roster_id}",
        team_name=None,
        wins=0,
        losses=0,
        ties=0,
        points_for=0.0,
        max_pf=0.0,
        league_max_pf=0.0,
        draft_position=draft_position,
    )


@pytest.fixture
def make_standing() -> Callable[[int, int | None], TeamStanding]:
    """Factory for minimal standings with a given draft position."""
    return _standing
