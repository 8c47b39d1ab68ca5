"""Draft board construction with traded pick ownership."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from draft_order.errors import InvalidInputError
from draft_order.models import DraftBoard, DraftPick, LivePick, TeamStanding, TradedPick

logger = logging.getLogger(__name__)


def current_owner(
    traded_picks: Iterable[TradedPick],
    season: str,
    round_num: int,
    original_owner_id: int,
) -> int:
    """Get current owner of a pick after trades.

    Traded pick records already hold the final owner, so the first record
    matching (season, round, original owner) decides ownership.

    Args:
        traded_picks: Traded pick records
        season: Draft season label
        round_num: Draft round
        original_owner_id: Roster the pick originally belonged to

    Returns:
        Roster id of the current owner (original owner if never traded)
    """
    trade = next(
        (
            t
            for t in traded_picks
            if t.season == season
            and t.round == round_num
            and t.roster_id == original_owner_id
        ),
        None,
    )
    return trade.owner_id if trade else original_owner_id


def position_to_roster(standings: Sequence[TeamStanding]) -> dict[int, int]:
    """Map draft position -> roster id.

    Raises:
        InvalidInputError: If positions are not a permutation of 1..N
    """
    mapping: dict[int, int] = {}
    for team in standings:
        if team.draft_position is None:
            raise InvalidInputError(
                "build_board",
                "draft_position",
                f"roster {team.roster_id} has no draft position",
            )
        if team.draft_position in mapping:
            raise InvalidInputError(
                "build_board",
                "draft_position",
                f"position {team.draft_position} assigned twice",
            )
        mapping[team.draft_position] = team.roster_id

    if sorted(mapping) != list(range(1, len(standings) + 1)):
        raise InvalidInputError(
            "build_board",
            "draft_position",
            f"expected positions 1..{len(standings)}, got {sorted(mapping)}",
        )
    return mapping


def build_board(
    standings: Sequence[TeamStanding],
    traded_picks: Sequence[TradedPick],
    season: str,
    rounds: int,
) -> DraftBoard:
    """Generate the complete draft board.

    Every round lists slots 1..N in draft position order; each pick's
    current owner is resolved through the traded pick records.

    Args:
        standings: Standings with draft positions 1..N assigned
        traded_picks: Traded pick records
        season: Draft season label
        rounds: Number of draft rounds

    Returns:
        Draft board with N x rounds picks

    Raises:
        InvalidInputError: If draft positions are malformed or rounds < 0
    """
    if rounds < 0:
        raise InvalidInputError("build_board", "rounds", f"got {rounds}")

    slots = position_to_roster(standings)
    names = {team.roster_id: team.display_name for team in standings}

    picks = []
    for round_num in range(1, rounds + 1):
        for slot in range(1, len(standings) + 1):
            original_owner_id = slots[slot]
            current_owner_id = current_owner(
                traded_picks, season, round_num, original_owner_id
            )
            picks.append(
                DraftPick(
                    season=season,
                    round=round_num,
                    pick=slot,
                    original_owner_id=original_owner_id,
                    current_owner_id=current_owner_id,
                    original_owner_name=names[original_owner_id],
                    current_owner_name=names.get(
                        current_owner_id, f"Team {current_owner_id}"
                    ),
                    is_traded=original_owner_id != current_owner_id,
                )
            )

    board = DraftBoard(season=season, rounds=rounds, picks=picks)
    logger.info(
        f"Draft board {season}: {len(picks)} picks, "
        f"{len(board.traded_picks())} traded"
    )
    return board


def apply_live_picks(
    board: DraftBoard,
    live_picks: Sequence[LivePick],
    picks_made: int | None = None,
) -> DraftBoard:
    """Overlay an in-progress draft onto a draft board.

    Picks already made get their selected player; the next pick to be made
    is marked on the clock. The input board is left unchanged.

    Args:
        board: Base draft board
        live_picks: Selections made so far, keyed by round and slot
        picks_made: Number of picks made so far (defaults to the highest
            pick_no among live_picks)

    Returns:
        New draft board with live draft fields filled in
    """
    if picks_made is None:
        picks_made = max((p.pick_no for p in live_picks), default=0)
    selections = {(p.round, p.draft_slot): p.player for p in live_picks}
    on_the_clock = picks_made + 1

    picks = []
    for pick in board.picks:
        picked_player = selections.get((pick.round, pick.pick))
        picks.append(
            replace(
                pick,
                picked_player=picked_player,
                is_on_the_clock=(
                    picked_player is None
                    and board.overall_pick_number(pick) == on_the_clock
                ),
            )
        )

    logger.debug(f"Applied {len(selections)} live picks, pick {on_the_clock} is up")
    return replace(board, picks=picks)
