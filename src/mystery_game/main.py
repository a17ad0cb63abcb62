#!/usr/bin/env python
"""
Mystery Game
Main entry point for playing the mystery game at a terminal.
"""

import os
import sys
import logging
from typing import List, Optional

from dotenv import load_dotenv

from mystery_game.errors import MysteryGameError
from mystery_game.game_state import create_game
from mystery_game.turn_loop import TurnLoop


# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: python -m mystery_game.main [game [seed]]\n"
    "  seed: integer seed for a reproducible game (default: $MYSTERY_SEED or random)"
)


def configure_logging() -> None:
    """Configure logging; MYSTERY_DEBUG turns on debug output."""
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("MYSTERY_DEBUG") else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def parse_seed(value: Optional[str]) -> Optional[int]:
    """
    Parse a seed from the command line or environment.

    Raises:
        ValueError: if the value is not an integer
    """
    if value is None or value == "":
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Seed must be an integer, got {value!r}") from None


def run_game(seed: Optional[int] = None) -> Optional[str]:
    """
    Set up and play one game with the default catalogs.

    Returns:
        The winner's name, or None if input ended first.
    """
    print("\n" + "=" * 60)
    print("🔍 THE MYSTERY GAME 🔍")
    print("=" * 60 + "\n")

    game = create_game(seed=seed)

    print("Participants:")
    for participant in game.participants:
        print(f"  {participant.display_label()}")
    print("Hideouts:")
    for hideout in game.hideouts:
        print(f"  {hideout.display_label()}")
    print("Chambers:")
    for chamber in game.chambers:
        print(f"  {chamber.display_label()}")
    print()

    return TurnLoop(game).run()


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    configure_logging()
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] != "game":
        print(USAGE)
        return

    try:
        seed = parse_seed(args[1] if len(args) > 1 else os.environ.get("MYSTERY_SEED"))
    except ValueError as e:
        print(f"❌ Error: {e}")
        sys.exit(2)

    try:
        winner = run_game(seed)
    except MysteryGameError as e:
        logger.error("Game setup failed: %s", e)
        print(f"❌ Error: {e}")
        sys.exit(2)

    if winner is None:
        print("\n🏁 Input ended before anyone solved the mystery.")
        sys.exit(1)
    sys.exit(0)


if __name__ == "__main__":
    main()
