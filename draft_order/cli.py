"""Command-line interface for draft order calculation."""

import logging
import sys

import click

from draft_order.config import DraftConfig, DraftOrderMethod
from draft_order.pipeline import run_draft_order


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""

    RED = "\033[91m"
    YELLOW = "\033[93m"
    GREEN = "\033[92m"
    BLUE = "\033[94m"
    RESET = "\033[0m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors and emojis for different log levels."""

    LEVEL_COLORS = {
        "DEBUG": Colors.BLUE,
        "INFO": "",  # No color - plain white/default
        "WARNING": Colors.YELLOW,
        "ERROR": Colors.RED,
        "CRITICAL": Colors.RED,
    }

    LEVEL_EMOJIS = {
        "DEBUG": "🔍 ",
        "INFO": "",
        "WARNING": "⚠️  ",
        "ERROR": "❌ ",
        "CRITICAL": "💥 ",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors and emojis."""
        level_color = self.LEVEL_COLORS.get(record.levelname, "")
        level_emoji = self.LEVEL_EMOJIS.get(record.levelname, "")

        message = record.getMessage()
        if level_color:
            return f"{level_emoji}{level_color}{message}{Colors.RESET}"
        return f"{level_emoji}{message}"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application with colors and emojis.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ColoredFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()  # Remove any existing handlers
    root_logger.addHandler(handler)


@click.command()
@click.argument("standings_dir", type=click.Path(exists=True, file_okay=False))
@click.option(
    "--draft-league",
    "draft_dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Snapshot of the upcoming season's league (default: STANDINGS_DIR)",
)
@click.option(
    "--method",
    type=click.Choice([m.value for m in DraftOrderMethod]),
    default=DraftOrderMethod.STANDINGS_MAX_PF.value,
    show_default=True,
    help="Draft order policy",
)
@click.option(
    "--include-playoffs",
    is_flag=True,
    help="Count playoff weeks 15-17 toward max PF",
)
@click.option(
    "--rounds",
    type=click.IntRange(min=1),
    default=None,
    help="Number of draft rounds (default: league setting)",
)
@click.option(
    "--season",
    type=str,
    default=None,
    help="Draft season label (default: draft league's season)",
)
@click.option(
    "--no-artifacts",
    is_flag=True,
    help="Disable saving standings and draft board CSVs",
)
@click.option("--verbose", is_flag=True, help="Enable verbose (DEBUG level) logging")
def run(
    standings_dir: str,
    draft_dir: str | None,
    method: str,
    include_playoffs: bool,
    rounds: int | None,
    season: str | None,
    no_artifacts: bool,
    verbose: bool,
) -> None:
    """Calculate a draft order and traded-pick-aware draft board."""
    setup_logging(verbose)

    config = DraftConfig(
        method=DraftOrderMethod(method),
        include_playoffs=include_playoffs,
        draft_rounds=rounds,
        season=season,
    )

    success = run_draft_order(
        standings_dir=standings_dir,
        draft_dir=draft_dir,
        config=config,
        artifacts_outputs=not no_artifacts,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    run()
