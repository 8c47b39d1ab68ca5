"""Optimal lineup scoring and max potential points aggregation."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from draft_order.config import (
    BENCH_SLOT,
    DEFAULT_SLOT_PRIORITY,
    DEFENSE_ID_MAX_LENGTH,
    DEFENSE_POSITION,
    POSITION_ELIGIBILITY,
    REGULAR_SEASON_WEEKS,
    SLOT_PRIORITY,
)
from draft_order.models import Player, WeeklyMatchupResult

logger = logging.getLogger(__name__)


@dataclass
class PlayerScore:
    """Scored player considered for a lineup slot."""

    player_id: str
    points: float
    position: str


def is_team_defense_id(player_id: str) -> bool:
    """Check whether an id denotes a team defense unit.

    Team defenses are keyed by their short all-caps team abbreviation
    ("PHI", "SF") instead of a numeric player id.

    Args:
        player_id: Identifier from a weekly scoring record

    Returns:
        True if the id is at most DEFENSE_ID_MAX_LENGTH characters and all
        upper-case letters
    """
    return (
        0 < len(player_id) <= DEFENSE_ID_MAX_LENGTH
        and player_id.isupper()
        and player_id.isalpha()
    )


def classify_player(player_id: str, players: Mapping[str, Player]) -> str | None:
    """Resolve the position of a scored player id.

    Args:
        player_id: Identifier from a weekly scoring record
        players: Player directory keyed by player id

    Returns:
        Position string, BN for directory entries without a position (never
        eligible), DEF for unlisted team defense ids, or None if the id cannot
        be classified
    """
    player = players.get(player_id)
    if player is not None:
        return player.position or BENCH_SLOT
    if is_team_defense_id(player_id):
        return DEFENSE_POSITION
    return None


def build_candidates(
    players_points: Mapping[str, float | None], players: Mapping[str, Player]
) -> list[PlayerScore]:
    """Build lineup candidates sorted by points descending.

    Args:
        players_points: Player id -> points scored (None counts as 0)
        players: Player directory keyed by player id

    Returns:
        Candidates with resolved positions, highest scorer first
    """
    candidates = []
    for player_id, points in players_points.items():
        position = classify_player(player_id, players)
        if position is None:
            logger.debug(f"Dropping unknown player id {player_id}")
            continue
        candidates.append(PlayerScore(player_id, float(points or 0), position))

    candidates.sort(key=lambda c: c.points, reverse=True)
    return candidates


def starting_slots(roster_positions: Iterable[str]) -> list[str]:
    """Get scoring slots ordered by fill priority (most restrictive first).

    Bench slots and labels without an eligibility entry are left out.
    """
    slots = [
        slot
        for slot in roster_positions
        if slot != BENCH_SLOT and POSITION_ELIGIBILITY.get(slot)
    ]
    return sorted(slots, key=lambda s: SLOT_PRIORITY.get(s, DEFAULT_SLOT_PRIORITY))


def optimal_lineup_points(
    players_points: Mapping[str, float | None],
    roster_positions: Iterable[str],
    players: Mapping[str, Player],
) -> float:
    """Calculate optimal lineup points for a single week.

    Slots are filled in priority order, each taking the highest-scoring
    unused player eligible for it. This greedy pass fills restrictive slots
    first so flex slots pick up the remaining value.

    Args:
        players_points: Player id -> points scored that week
        roster_positions: League slot layout, including bench slots
        players: Player directory keyed by player id

    Returns:
        Total points of the assigned lineup (0.0 for no scores)
    """
    if not players_points:
        return 0.0

    candidates = build_candidates(players_points, players)
    used_players: set[str] = set()
    total_points = 0.0

    for slot in starting_slots(roster_positions):
        eligible_positions = POSITION_ELIGIBILITY[slot]
        best = next(
            (
                c
                for c in candidates
                if c.player_id not in used_players
                and c.position in eligible_positions
            ),
            None,
        )
        if best is None:
            continue

        used_players.add(best.player_id)
        total_points += best.points
        logger.debug(f"{slot}: {best.player_id} ({best.position}) {best.points}")

    return total_points


def round_points(value: float) -> float:
    """Round a point total half-up to two decimal places."""
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def find_roster_result(
    week_results: Iterable[WeeklyMatchupResult], roster_id: int
) -> WeeklyMatchupResult | None:
    return next((r for r in week_results if r.roster_id == roster_id), None)


def max_potential_points(
    roster_id: int,
    matchups_by_week: Mapping[int, list[WeeklyMatchupResult]],
    roster_positions: list[str],
    players: Mapping[str, Player],
    weeks: Iterable[int] = REGULAR_SEASON_WEEKS,
) -> float:
    """Calculate total max potential points for a roster across weeks.

    Weeks without data, or without a result for this roster, are skipped.

    Args:
        roster_id: Roster to score
        matchups_by_week: Week number -> weekly results for every roster
        roster_positions: League slot layout
        players: Player directory keyed by player id
        weeks: Week numbers to include

    Returns:
        Sum of weekly optimal lineups, rounded to two decimals
    """
    total = 0.0

    for week in weeks:
        week_results = matchups_by_week.get(week)
        if not week_results:
            logger.debug(f"No matchup data for week {week}")
            continue

        result = find_roster_result(week_results, roster_id)
        if result is None:
            logger.debug(f"Roster {roster_id} has no result in week {week}")
            continue

        total += optimal_lineup_points(
            result.players_points, roster_positions, players
        )

    return round_points(total)


def max_potential_points_for_all(
    roster_ids: Iterable[int],
    matchups_by_week: Mapping[int, list[WeeklyMatchupResult]],
    roster_positions: list[str],
    players: Mapping[str, Player],
    weeks: Iterable[int] = REGULAR_SEASON_WEEKS,
) -> dict[int, float]:
    """Calculate max potential points for every roster.

    Returns:
        Roster id -> max potential points
    """
    weeks = list(weeks)
    max_pf_by_roster = {
        roster_id: max_potential_points(
            roster_id, matchups_by_week, roster_positions, players, weeks
        )
        for roster_id in roster_ids
    }
    logger.debug(f"Max PF calculated for {len(max_pf_by_roster)} rosters")
    return max_pf_by_roster
