"""Main entry point for terminal play."""

import argparse
import logging
import random
import sys
from datetime import datetime
from pathlib import Path

from queens_garden.config import GameLogConfig, load_config
from queens_garden.game.engine import ActionResult, GameEngine
from queens_garden.logging import GameLogger
from queens_garden.models.card import Card, Rank, Suit
from queens_garden.models.position import Direction, Position
from queens_garden.rendering.console import ConsoleRenderer
from queens_garden.utils.logger import setup_logging

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  n, s, e, w         move one step (or north, south, east, west)
  go X Y             move to (X, Y); teleports when standing on an Ace
  tp X Y             teleport from an Ace to another Ace or the chamber
  destroy X Y SUIT   use the King of SUIT to clear an adjacent tile
  moves              list legal destinations
  help               show this help
  quit               leave the game"""

DIRECTION_ALIASES: dict[str, Direction] = {
    "n": Direction.NORTH,
    "s": Direction.SOUTH,
    "e": Direction.EAST,
    "w": Direction.WEST,
}


def generate_log_filename(log_dir: str, suit: Suit) -> str:
    """Generate log filename with timestamp and starting suit.

    Format: {ISO timestamp}_{suit}.jsonl

    Args:
        log_dir: Directory for log files.
        suit: Starting Queen's suit.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_{suit.value}.jsonl")


def _parse_position(args: list[str]) -> Position:
    if len(args) < 2:
        raise ValueError("Expected X and Y coordinates")
    return Position(x=int(args[0]), y=int(args[1]))


def execute_command(engine: GameEngine, line: str) -> str:
    """Run one command line against the engine.

    Args:
        engine: Initialized engine
        line: Raw command text

    Returns:
        Message to show the player (empty if nothing to add).
    """
    parts = line.strip().lower().split()
    if not parts:
        return ""
    command, args = parts[0], parts[1:]

    result: ActionResult
    try:
        if command in DIRECTION_ALIASES:
            result = engine.move(DIRECTION_ALIASES[command])
        elif command in {d.value for d in Direction}:
            result = engine.move(command)
        elif command == "go":
            target = _parse_position(args)
            result = engine.move_to_position(target.x, target.y)
        elif command == "tp":
            result = engine.teleport(_parse_position(args))
        elif command == "destroy":
            if len(args) < 3:
                raise ValueError("Expected X, Y and a King's suit")
            king = Card(suit=Suit(args[2]), rank=Rank.KING)
            result = engine.destroy_tile(_parse_position(args), king)
        elif command == "moves":
            moves = engine.valid_moves()
            return "Legal moves: " + (" ".join(str(p) for p in moves) or "none")
        elif command == "help":
            return HELP_TEXT
        else:
            return f"Unknown command: {command} (type 'help')"
    except ValueError as e:
        return f"Invalid input: {e}"

    if not result.success:
        return f"Cannot do that: {result.message}"
    return ""


def play(engine: GameEngine, lines) -> None:
    """Read commands until the game ends, input runs out or the player quits."""
    for line in lines:
        if line.strip().lower() in {"q", "quit", "exit"}:
            break
        message = execute_command(engine, line)
        if message:
            print(message)
        if engine.game_over:
            break


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    parser = argparse.ArgumentParser(
        description="Queen's Garden card-board game"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--suit",
        choices=[s.value for s in Suit],
        default=Suit.HEARTS.value,
        help="Suit of the starting Queen",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the deck shuffle",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )

    args = parser.parse_args()

    # Load config
    config = load_config(args.config)

    # Apply command-line overrides
    if args.verbose:
        config.logging.level = "DEBUG"

    # Determine game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else str(
        Path(config.game_log.output_path).parent
    )

    # Setup logging
    setup_logging(config.logging.level)

    suit = Suit(args.suit)
    if game_log_enabled:
        log_path = generate_log_filename(game_log_dir, suit)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            engine = GameEngine(
                config,
                renderer=ConsoleRenderer(),
                game_logger=game_logger,
                rng=random.Random(args.seed),
            )
            engine.initialize(suit)
            print(HELP_TEXT)
            play(engine, sys.stdin)
        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
