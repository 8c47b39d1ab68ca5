"""Draft order pipeline combining max PF, draft order and draft board."""

import logging
from dataclasses import dataclass
from pathlib import Path

from draft_order.board import apply_live_picks, build_board
from draft_order.config import DraftConfig, DraftOrderMethod
from draft_order.data_io import (
    create_run_directory,
    load_league_snapshot,
    save_draft_board_csv,
    save_run_parameters_txt,
    save_standings_csv,
)
from draft_order.errors import InvalidInputError
from draft_order.lineup import max_potential_points_for_all
from draft_order.models import DraftBoard, LeagueSnapshot, TeamStanding
from draft_order.standings import calculate_draft_order
from draft_order.validation import validate_draft_result

logger = logging.getLogger(__name__)


@dataclass
class DraftResult:
    """Output of a draft order run.

    Attributes:
        standings: Standings ordered by draft position
        board: Draft board (with live picks applied, if any)
        max_pf_by_roster: Computed max potential points per roster
        method: Draft order method used
    """

    standings: list[TeamStanding]
    board: DraftBoard
    max_pf_by_roster: dict[int, float]
    method: DraftOrderMethod


def compute_draft(
    standings_league: LeagueSnapshot,
    draft_league: LeagueSnapshot | None = None,
    config: DraftConfig | None = None,
) -> DraftResult:
    """Run the draft order calculation without any I/O.

    Standings, matchups and the playoff bracket come from the standings
    league (last season). Traded picks, draft season, draft rounds and any
    provider draft come from the draft league (the upcoming season), which
    defaults to the standings league.

    Args:
        standings_league: Completed season used to rank teams
        draft_league: League whose draft is being ordered
        config: Run settings

    Returns:
        DraftResult with standings, board and max PF values
    """
    draft_league = draft_league or standings_league
    config = config or DraftConfig()

    max_pf_by_roster = max_potential_points_for_all(
        standings_league.roster_ids,
        standings_league.matchups_by_week,
        standings_league.roster_positions,
        standings_league.players,
        config.weeks,
    )
    league_max_pf_by_roster = {
        roster.roster_id: roster.league_max_pf for roster in standings_league.rosters
    }

    standings = calculate_draft_order(
        config.method,
        standings_league.rosters,
        standings_league.users,
        max_pf_by_roster,
        league_max_pf_by_roster,
        winners_bracket=standings_league.winners_bracket,
        num_playoff_teams=standings_league.playoff_teams,
        draft_snapshot=draft_league.draft,
    )

    draft = draft_league.draft
    season = config.season or draft_league.season
    rounds = (
        config.draft_rounds
        or (draft.rounds if draft is not None else None)
        or draft_league.draft_rounds
    )
    board = build_board(standings, draft_league.traded_picks, season, rounds)

    if draft is not None and draft.picks:
        logger.info(f"Draft {draft.draft_id} is {draft.status}, applying live picks")
        board = apply_live_picks(board, draft.picks)

    return DraftResult(
        standings=standings,
        board=board,
        max_pf_by_roster=max_pf_by_roster,
        method=config.method,
    )


def print_draft_summary(result: DraftResult) -> None:
    """Print draft order and traded picks (with per-team pick counts) to stdout."""
    print("\n" + "=" * 60)
    print(f"DRAFT ORDER ({result.method.value})")
    print("=" * 60)

    for team in result.standings:
        finish = f"  finish {team.playoff_finish}" if team.playoff_finish else ""
        print(
            f"{team.draft_position:>3}. {team.display_name:<20} {team.record:>7}  "
            f"PF {team.points_for:>8.2f}  Max PF {team.max_pf:>8.2f}{finish}"
        )

    traded = result.board.traded_picks()
    if traded:
        print(f"\nTraded picks ({result.board.season}):")
        for pick in traded:
            print(
                f"  {pick.label}: {pick.original_owner_name} -> "
                f"{pick.current_owner_name}"
            )

        print("\nPicks per team:")
        for team in result.standings:
            owned = result.board.picks_owned_by(team.roster_id)
            print(f"  {team.display_name}: {len(owned)}")

    on_the_clock = next((p for p in result.board.picks if p.is_on_the_clock), None)
    if on_the_clock:
        print(f"\nOn the clock: {on_the_clock.label} {on_the_clock.current_owner_name}")

    print("=" * 60)


def run_draft_order(
    standings_dir: str,
    draft_dir: str | None = None,
    config: DraftConfig | None = None,
    artifacts_outputs: bool = True,
) -> bool:
    """Load league snapshots, compute the draft and save artifacts.

    Args:
        standings_dir: Snapshot directory of the completed season
        draft_dir: Snapshot directory of the upcoming season (None = same)
        config: Run settings
        artifacts_outputs: Whether to save standings and board CSVs

    Returns:
        True if the draft was computed and passed validation, False otherwise
    """
    config = config or DraftConfig()

    try:
        standings_league = load_league_snapshot(standings_dir, config.weeks)
        draft_league = (
            load_league_snapshot(draft_dir, weeks=[]) if draft_dir else None
        )

        result = compute_draft(standings_league, draft_league, config)
        validation = validate_draft_result(result.standings, result.board)

        if artifacts_outputs:
            run_id, run_dir = create_run_directory(
                result.board.season, result.method.value
            )
            save_standings_csv(run_dir / "standings.csv", result.standings)
            save_draft_board_csv(run_dir / "draft_board.csv", result.board)
            save_run_parameters_txt(
                run_dir / "run_parameters.txt",
                run_id,
                str(Path(standings_dir)),
                str(Path(draft_dir or standings_dir)),
                result.method.value,
                config.weeks,
                result.board.season,
                result.board.rounds,
            )

        print_draft_summary(result)
        for message in validation.messages:
            print(message)

        return validation.all_passed()

    except (InvalidInputError, OSError) as e:
        logger.error(f"Draft order calculation failed: {e}")
        return False
