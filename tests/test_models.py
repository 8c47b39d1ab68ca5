"""Tests for league data structures."""

from draft_order.models import (
    DraftBoard,
    DraftPick,
    Player,
    Roster,
    TeamStanding,
)


def test_roster_points() -> None:
    """Test integer and hundredths parts are combined."""
    roster = Roster(
        roster_id=1, owner_id="u1", fpts=1234, fpts_decimal=50, ppts=1500, ppts_decimal=25
    )

    assert roster.points_for == 1234.5
    assert roster.league_max_pf == 1500.25


def test_roster_defaults() -> None:
    roster = Roster(roster_id=2, owner_id=None)

    assert roster.wins == 0
    assert roster.points_for == 0.0
    assert roster.league_max_pf == 0.0


def test_player_full_name() -> None:
    assert Player("4046", "QB", "Patrick", "Mahomes").full_name == "Patrick Mahomes"
    assert Player("PHI", "DEF").full_name == "PHI"


def make_team(**overrides: object) -> TeamStanding:
    values: dict = {
        "roster_id": 1,
        "owner_id": "u1",
        "display_name": "alice",
        "team_name": None,
        "wins": 9,
        "losses": 5,
        "ties": 0,
        "points_for": 1500.0,
        "max_pf": 1800.25,
        "league_max_pf": 1795.5,
    }
    values.update(overrides)
    return TeamStanding(**values)


def test_team_standing_record() -> None:
    assert make_team().record == "9-5"
    assert make_team(ties=1).record == "9-5-1"


def test_team_standing_max_pf_difference() -> None:
    assert make_team().max_pf_difference == 4.75
    assert make_team(max_pf=1700.0).max_pf_difference == -95.5


def make_pick(round_num: int, slot: int, owner: int, current: int) -> DraftPick:
    return DraftPick(
        season="2025",
        round=round_num,
        pick=slot,
        original_owner_id=owner,
        current_owner_id=current,
        original_owner_name=f"owner{owner}",
        current_owner_name=f"owner{current}",
        is_traded=owner != current,
    )


def test_draft_pick_label() -> None:
    assert make_pick(1, 3, 1, 1).label == "1.03"
    assert make_pick(12, 10, 1, 1).label == "12.10"


def test_draft_board_helpers() -> None:
    """Test board lookups by round, trade and owner."""
    picks = [
        make_pick(1, 1, 1, 1),
        make_pick(1, 2, 2, 1),
        make_pick(2, 1, 1, 2),
        make_pick(2, 2, 2, 2),
    ]
    board = DraftBoard(season="2025", rounds=2, picks=picks)

    assert board.num_teams == 2
    assert board.picks_in_round(2) == picks[2:]
    assert board.traded_picks() == [picks[1], picks[2]]
    assert board.picks_owned_by(1) == [picks[0], picks[1]]
    assert [board.overall_pick_number(p) for p in picks] == [1, 2, 3, 4]
