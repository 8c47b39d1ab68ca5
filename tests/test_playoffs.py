"""Tests for playoff finish resolution."""

from draft_order.models import PlayoffMatchup
from draft_order.playoffs import participant_team_ids, resolve_finish


def test_single_placement_game() -> None:
    bracket = [PlayoffMatchup(round=3, match=7, team1=5, team2=7, winner=5, loser=7, place=1)]
    assert resolve_finish(bracket) == {5: 1, 7: 2}


def test_multiple_placement_games() -> None:
    """Test championship and third-place game together; other teams unranked."""
    bracket = [
        PlayoffMatchup(round=1, match=1, team1=2, team2=3, winner=2, loser=3),
        PlayoffMatchup(round=1, match=2, team1=5, team2=9, winner=5, loser=9),
        PlayoffMatchup(round=2, match=3, team1=5, team2=7, winner=5, loser=7, place=1),
        PlayoffMatchup(round=2, match=4, team1=2, team2=9, winner=2, loser=9, place=3),
    ]
    finish = resolve_finish(bracket)

    assert finish == {5: 1, 7: 2, 2: 3, 9: 4}
    assert 3 not in finish


def test_undecided_placement_games_are_skipped() -> None:
    bracket = [
        PlayoffMatchup(round=2, match=3, team1=5, team2=7, place=1),
        PlayoffMatchup(round=2, match=4, team1=2, team2=9, winner=2, loser=9, place=3),
    ]
    assert resolve_finish(bracket) == {2: 3, 9: 4}


def test_unplayed_bracket_does_not_use_round_fallback() -> None:
    """Test placement games without results leave every team unranked."""
    bracket = [
        PlayoffMatchup(round=1, match=1, team1=1, team2=4, winner=1, loser=4),
        PlayoffMatchup(round=2, match=2, team1=1, place=1),
    ]
    assert resolve_finish(bracket) == {}


def test_round_fallback_without_places() -> None:
    """Test older brackets are ranked by elimination round."""
    bracket = [
        PlayoffMatchup(round=1, match=1, team1=1, team2=4, winner=1, loser=4),
        PlayoffMatchup(round=1, match=2, team1=2, team2=3, winner=2, loser=3),
        PlayoffMatchup(round=2, match=3, team1=1, team2=2, winner=1, loser=2),
    ]
    assert resolve_finish(bracket) == {1: 1, 2: 2, 4: 3, 3: 4}


def test_round_fallback_six_team_bracket() -> None:
    """Test bye teams reaching the final are ranked by the championship."""
    bracket = [
        PlayoffMatchup(round=1, match=1, team1=3, team2=6, winner=3, loser=6),
        PlayoffMatchup(round=1, match=2, team1=4, team2=5, winner=4, loser=5),
        PlayoffMatchup(round=2, match=3, team1=1, team2=4, winner=1, loser=4),
        PlayoffMatchup(round=2, match=4, team1=2, team2=3, winner=2, loser=3),
        PlayoffMatchup(round=3, match=5, team1=1, team2=2, winner=1, loser=2),
    ]
    finish = resolve_finish(bracket)

    assert finish == {1: 1, 2: 2, 4: 3, 3: 4, 6: 5, 5: 6}


def test_round_fallback_leaves_teams_without_a_loss_unranked() -> None:
    bracket = [
        PlayoffMatchup(round=1, match=1, team1=1, team2=4, winner=1, loser=4),
        PlayoffMatchup(round=2, match=2, team1=1, team2=2),
    ]
    assert resolve_finish(bracket) == {4: 3}


def test_empty_bracket() -> None:
    assert resolve_finish([]) == {}
    assert participant_team_ids([]) == set()


def test_participant_team_ids() -> None:
    """Test participants include both sides of every match, skipping feeders."""
    bracket = [
        PlayoffMatchup(round=1, match=1, team1=3, team2=6, winner=3, loser=6),
        PlayoffMatchup(round=2, match=2, team1=1, team2=None),
        PlayoffMatchup(round=3, match=3, team1=None, team2=None, place=1),
    ]
    assert participant_team_ids(bracket) == {1, 3, 6}
