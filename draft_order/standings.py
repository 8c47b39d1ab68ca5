"""Draft order calculation from standings, max PF and playoff results."""

import logging
from collections.abc import Mapping, Sequence

from draft_order.config import UNRANKED_PLAYOFF_FINISH, DraftOrderMethod
from draft_order.errors import InvalidInputError
from draft_order.models import (
    DraftSnapshot,
    PlayoffMatchup,
    Roster,
    TeamStanding,
    User,
)
from draft_order.playoffs import participant_team_ids, resolve_finish

logger = logging.getLogger(__name__)


def get_display_name(roster: Roster, users_by_id: Mapping[str, User]) -> str:
    """Get display name for a roster's owner.

    Falls back to the owner's team name, then to "Team <roster_id>".
    """
    user = users_by_id.get(roster.owner_id) if roster.owner_id else None
    if user is None:
        return f"Team {roster.roster_id}"
    return user.display_name or user.team_name or f"Team {roster.roster_id}"


def build_standings(
    rosters: Sequence[Roster],
    users: Sequence[User],
    max_pf_by_roster: Mapping[int, float],
    league_max_pf_by_roster: Mapping[int, float],
    playoff_finish: Mapping[int, int] | None = None,
) -> list[TeamStanding]:
    """Create one unordered TeamStanding per roster.

    Args:
        rosters: League rosters with season results
        users: League members
        max_pf_by_roster: Computed max potential points per roster
        league_max_pf_by_roster: League-reported max potential points per roster
        playoff_finish: Optional roster id -> playoff finish rank

    Returns:
        Standings in roster order, without draft positions
    """
    users_by_id = {user.user_id: user for user in users}
    playoff_finish = playoff_finish or {}

    standings = []
    for roster in rosters:
        user = users_by_id.get(roster.owner_id) if roster.owner_id else None
        standings.append(
            TeamStanding(
                roster_id=roster.roster_id,
                owner_id=roster.owner_id,
                display_name=get_display_name(roster, users_by_id),
                team_name=user.team_name if user else None,
                wins=roster.wins,
                losses=roster.losses,
                ties=roster.ties,
                points_for=roster.points_for,
                max_pf=max_pf_by_roster.get(roster.roster_id, 0.0),
                league_max_pf=league_max_pf_by_roster.get(roster.roster_id, 0.0),
                playoff_finish=playoff_finish.get(roster.roster_id),
            )
        )
    return standings


def assign_draft_positions(standings: Sequence[TeamStanding]) -> list[TeamStanding]:
    """Assign draft positions 1..N in list order."""
    for index, team in enumerate(standings):
        team.draft_position = index + 1
    return list(standings)


def standings_order(
    rosters: Sequence[Roster],
    users: Sequence[User],
    max_pf_by_roster: Mapping[int, float],
    league_max_pf_by_roster: Mapping[int, float],
) -> list[TeamStanding]:
    """Calculate draft order from standings only.

    Fewest wins picks first; ties broken by fewest points for.
    """
    standings = build_standings(
        rosters, users, max_pf_by_roster, league_max_pf_by_roster
    )
    standings.sort(key=lambda t: (t.wins, t.points_for))
    return assign_draft_positions(standings)


def standings_max_pf_order(
    rosters: Sequence[Roster],
    users: Sequence[User],
    max_pf_by_roster: Mapping[int, float],
    league_max_pf_by_roster: Mapping[int, float],
    winners_bracket: Sequence[PlayoffMatchup],
    num_playoff_teams: int,
) -> list[TeamStanding]:
    """Calculate draft order using playoff results and max PF.

    Non-playoff teams pick first, lowest max PF earliest. Playoff teams
    follow in reverse finish order so the champion picks last; playoff teams
    without a resolved finish are ranked UNRANKED_PLAYOFF_FINISH.

    Args:
        rosters: League rosters with season results
        users: League members
        max_pf_by_roster: Computed max potential points per roster
        league_max_pf_by_roster: League-reported max potential points per roster
        winners_bracket: Winners bracket entries
        num_playoff_teams: Number of playoff teams configured for the league

    Returns:
        Standings ordered by draft position
    """
    playoff_teams = participant_team_ids(winners_bracket)
    playoff_finish = resolve_finish(winners_bracket)

    if len(playoff_teams) != num_playoff_teams:
        logger.warning(
            f"Bracket lists {len(playoff_teams)} playoff teams, "
            f"league is configured for {num_playoff_teams}"
        )

    standings = build_standings(
        rosters, users, max_pf_by_roster, league_max_pf_by_roster, playoff_finish
    )

    playoff_standings = [t for t in standings if t.roster_id in playoff_teams]
    non_playoff_standings = [t for t in standings if t.roster_id not in playoff_teams]

    playoff_standings.sort(
        key=lambda t: t.playoff_finish or UNRANKED_PLAYOFF_FINISH, reverse=True
    )
    non_playoff_standings.sort(key=lambda t: t.max_pf)

    logger.debug(
        f"{len(non_playoff_standings)} non-playoff teams, "
        f"{len(playoff_standings)} playoff teams"
    )
    return assign_draft_positions(non_playoff_standings + playoff_standings)


def snapshot_order(
    rosters: Sequence[Roster],
    users: Sequence[User],
    max_pf_by_roster: Mapping[int, float],
    league_max_pf_by_roster: Mapping[int, float],
    draft_snapshot: DraftSnapshot | None,
    playoff_finish: Mapping[int, int] | None = None,
) -> list[TeamStanding]:
    """Read draft order from a draft already configured by the provider.

    Raises:
        InvalidInputError: If the draft order has not been set, or does not
            give every roster exactly one slot in 1..N
    """
    method = DraftOrderMethod.SLEEPER_DRAFT.value
    if draft_snapshot is None:
        raise InvalidInputError(method, "draft_snapshot", "no draft found")
    slot_to_roster_id = draft_snapshot.slot_to_roster_id
    if not slot_to_roster_id:
        raise InvalidInputError(
            method, "slot_to_roster_id", "draft order has not been set yet"
        )

    standings = build_standings(
        rosters, users, max_pf_by_roster, league_max_pf_by_roster, playoff_finish
    )
    by_roster_id = {team.roster_id: team for team in standings}
    num_teams = len(standings)

    if sorted(slot_to_roster_id) != list(range(1, num_teams + 1)):
        raise InvalidInputError(
            method,
            "slot_to_roster_id",
            f"expected slots 1..{num_teams}, got {sorted(slot_to_roster_id)}",
        )
    if sorted(slot_to_roster_id.values()) != sorted(by_roster_id):
        raise InvalidInputError(
            method, "slot_to_roster_id", "slots do not cover every roster once"
        )

    ordered = []
    for slot in sorted(slot_to_roster_id):
        team = by_roster_id[slot_to_roster_id[slot]]
        team.draft_position = slot
        ordered.append(team)
    return ordered


def calculate_draft_order(
    method: DraftOrderMethod | str,
    rosters: Sequence[Roster],
    users: Sequence[User],
    max_pf_by_roster: Mapping[int, float],
    league_max_pf_by_roster: Mapping[int, float],
    winners_bracket: Sequence[PlayoffMatchup] | None = None,
    num_playoff_teams: int | None = None,
    draft_snapshot: DraftSnapshot | None = None,
) -> list[TeamStanding]:
    """Calculate the draft order with the selected policy.

    Args:
        method: Draft order policy
        rosters: League rosters with season results
        users: League members
        max_pf_by_roster: Computed max potential points per roster
        league_max_pf_by_roster: League-reported max potential points per roster
        winners_bracket: Winners bracket (required for standings_max_pf)
        num_playoff_teams: Playoff team count (required for standings_max_pf)
        draft_snapshot: Provider draft (required for sleeper_draft)

    Returns:
        Standings ordered by draft position, positions 1..N

    Raises:
        InvalidInputError: If the method is unknown or its required data is
            missing
    """
    try:
        method = DraftOrderMethod(method)
    except ValueError:
        raise InvalidInputError(
            str(method), "method", "unknown draft order method"
        ) from None

    logger.info(f"Calculating draft order for {len(rosters)} teams ({method.value})")

    if method is DraftOrderMethod.STANDINGS:
        return standings_order(
            rosters, users, max_pf_by_roster, league_max_pf_by_roster
        )

    if method is DraftOrderMethod.STANDINGS_MAX_PF:
        if not winners_bracket:
            raise InvalidInputError(method.value, "winners_bracket")
        if not num_playoff_teams:
            raise InvalidInputError(method.value, "num_playoff_teams")
        return standings_max_pf_order(
            rosters,
            users,
            max_pf_by_roster,
            league_max_pf_by_roster,
            winners_bracket,
            num_playoff_teams,
        )

    playoff_finish = resolve_finish(winners_bracket) if winners_bracket else None
    return snapshot_order(
        rosters,
        users,
        max_pf_by_roster,
        league_max_pf_by_roster,
        draft_snapshot,
        playoff_finish,
    )
