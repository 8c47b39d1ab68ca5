"""Playoff finish resolution from a winners bracket."""

import logging
from collections.abc import Iterable

from draft_order.models import PlayoffMatchup

logger = logging.getLogger(__name__)


def resolve_finish(bracket: Iterable[PlayoffMatchup]) -> dict[int, int]:
    """Calculate final playoff rank for each team in the bracket.

    Placement games carry a place value: the winner finishes in that place
    and the loser in the next one (p=1 championship, p=3 third-place game,
    p=5 fifth-place game).

    Brackets without any place values fall back to round order: the final
    round's decided match gives 1st and 2nd, then losers of earlier rounds
    get 3rd, 4th, ... walking rounds backwards in bracket order. Teams that
    never lose a recorded match (e.g. byes) are left unranked.

    Args:
        bracket: Winners bracket entries

    Returns:
        Roster id -> finish rank (1 = champion)
    """
    bracket = list(bracket)
    finish: dict[int, int] = {}

    for matchup in bracket:
        if matchup.place is not None and matchup.winner and matchup.loser:
            finish[matchup.winner] = matchup.place
            finish[matchup.loser] = matchup.place + 1

    if finish or not bracket:
        return finish

    if any(matchup.place is not None for matchup in bracket):
        # Placement games exist but none has been decided yet
        return finish

    logger.debug("Bracket has no placement games, resolving finish by round")
    return _resolve_finish_by_round(bracket)


def _resolve_finish_by_round(bracket: list[PlayoffMatchup]) -> dict[int, int]:
    finish: dict[int, int] = {}
    max_round = max(matchup.round for matchup in bracket)

    championship = next(
        (m for m in bracket if m.round == max_round and m.winner and m.loser),
        None,
    )
    if championship is not None:
        finish[championship.winner] = 1
        finish[championship.loser] = 2

    next_position = 3
    for round_num in range(max_round - 1, 0, -1):
        for matchup in bracket:
            if matchup.round != round_num or not matchup.loser:
                continue
            if matchup.loser not in finish:
                finish[matchup.loser] = next_position
                next_position += 1

    return finish


def participant_team_ids(bracket: Iterable[PlayoffMatchup]) -> set[int]:
    """Get every roster id that appears on either side of a bracket match."""
    teams: set[int] = set()
    for matchup in bracket:
        if matchup.team1:
            teams.add(matchup.team1)
        if matchup.team2:
            teams.add(matchup.team2)
    return teams
