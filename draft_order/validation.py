"""Consistency checks for computed draft orders and draft boards."""

import logging
from collections.abc import Sequence

from draft_order.models import DraftBoard, TeamStanding

logger = logging.getLogger(__name__)


class ValidationResult:
    """Container for validation test results."""

    def __init__(self) -> None:
        """Initialize validation result container."""
        self.passed: bool = True
        self.messages: list[str] = []

    def add_failure(self, message: str) -> None:
        """Add a validation failure message."""
        self.passed = False
        self.messages.append(f"❌ {message}")
        logger.warning(message)

    def add_success(self, message: str) -> None:
        """Add a validation success message."""
        self.messages.append(f"✅ {message}")
        logger.info(message)

    def add_info(self, message: str) -> None:
        """Add informational message."""
        self.messages.append(f"ℹ️  {message}")
        logger.info(message)

    def all_passed(self) -> bool:
        return self.passed


def validate_draft_positions(
    standings: Sequence[TeamStanding],
) -> tuple[bool, list[str]]:
    """Validate that draft positions are exactly 1..N with no duplicates.

    Args:
        standings: Standings with draft positions assigned

    Returns:
        Tuple of (is_valid, list_of_violations)
    """
    violations = []
    positions = [team.draft_position for team in standings]

    for team in standings:
        if team.draft_position is None:
            violations.append(f"Roster {team.roster_id} has no draft position")

    assigned = [p for p in positions if p is not None]
    duplicates = sorted({p for p in assigned if assigned.count(p) > 1})
    if duplicates:
        violations.append(f"Duplicate draft positions: {duplicates}")

    missing = sorted(set(range(1, len(standings) + 1)) - set(assigned))
    if missing:
        violations.append(f"Missing draft positions: {missing}")

    return len(violations) == 0, violations


def validate_draft_board(
    board: DraftBoard, num_teams: int
) -> tuple[bool, list[str]]:
    """Validate that a board has N x rounds picks with slots 1..N per round.

    Args:
        board: Draft board to check
        num_teams: Number of teams in the draft

    Returns:
        Tuple of (is_valid, list_of_violations)
    """
    violations = []
    expected_picks = num_teams * board.rounds

    if len(board.picks) != expected_picks:
        violations.append(
            f"Board has {len(board.picks)} picks, expected {expected_picks}"
        )

    expected_slots = list(range(1, num_teams + 1))
    for round_num in range(1, board.rounds + 1):
        slots = sorted(pick.pick for pick in board.picks_in_round(round_num))
        if slots != expected_slots:
            violations.append(f"Round {round_num} has slots {slots}")

    on_the_clock = [pick.label for pick in board.picks if pick.is_on_the_clock]
    if len(on_the_clock) > 1:
        violations.append(f"Multiple picks on the clock: {on_the_clock}")

    return len(violations) == 0, violations


def validate_draft_result(
    standings: Sequence[TeamStanding], board: DraftBoard
) -> ValidationResult:
    """Run all draft order and board checks.

    Args:
        standings: Standings ordered by draft position
        board: Draft board built from the standings

    Returns:
        ValidationResult with test outcomes
    """
    result = ValidationResult()

    positions_valid, position_violations = validate_draft_positions(standings)
    if positions_valid:
        result.add_success(f"Draft positions 1-{len(standings)} assigned once each")
    else:
        for violation in position_violations:
            result.add_failure(violation)

    board_valid, board_violations = validate_draft_board(board, len(standings))
    if board_valid:
        result.add_success(
            f"Draft board has {len(board.picks)} picks over {board.rounds} rounds"
        )
    else:
        for violation in board_violations:
            result.add_failure(violation)

    traded = board.traded_picks()
    if traded:
        result.add_info(f"{len(traded)} traded picks on the board")

    return result
