"""Game logger for detailed game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from queens_garden.config import GameLogConfig
from queens_garden.models.board import Board
from queens_garden.models.player import Player
from queens_garden.models.position import Position

from .formatters import format_board, format_cards, format_position


class GameLogger:
    """Logger for detailed game events in JSONL format.

    Each line in the output file is a JSON object representing one event.
    This allows step-by-step replay of the game.
    """

    def __init__(self, config: GameLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Logging configuration. If None, logging is disabled.
        """
        self.config = config or GameLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        """Write an event to the log file.

        Args:
            event: Event dictionary to write as JSON.
        """
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, player: Player, board: Board, deck_size: int) -> None:
        """Log game start with the initial reveal.

        Args:
            player: Player after setup.
            board: Board after the initial reveal.
            deck_size: Cards left in the deck.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "starting_queen": format_cards([player.starting_queen]),
            "health": player.health,
            "board": format_board(board),
            "deck_size": deck_size,
        })

    def log_turn(
        self,
        turn_num: int,
        action: str,
        target: Position,
        damage: int,
        player: Player,
        deck_size: int,
    ) -> None:
        """Log a single successful action.

        Args:
            turn_num: Turn number after the action.
            action: "move", "teleport" or "destroy".
            target: Destination (or destroyed tile) of the action.
            damage: Total damage applied by the action.
            player: Player after the action.
            deck_size: Cards left in the deck.
        """
        self._write({
            "type": "turn",
            "turn": turn_num,
            "action": action,
            "target": format_position(target),
            "damage": damage,
            "health": player.health,
            "position": format_position(player.position),
            "party": format_cards(player.party),
            "kings": format_cards(player.collected_kings),
            "deck_size": deck_size,
        })

    def log_special(
        self,
        turn_num: int,
        event: str,
        detail: dict[str, Any] | None = None,
    ) -> None:
        """Log a special event.

        Args:
            turn_num: Turn number when the event occurred.
            event: Event type (e.g., "queen_collected", "king_collected",
                "tile_destroyed").
            detail: Additional event details.
        """
        record: dict[str, Any] = {
            "type": "special",
            "turn": turn_num,
            "event": event,
        }
        if detail:
            record["detail"] = detail
        self._write(record)

    def log_game_end(self, turn_num: int, victory: bool, player: Player) -> None:
        """Log game end with results.

        Args:
            turn_num: Final turn number.
            victory: True if all Kings were collected.
            player: Final player state.
        """
        self._write({
            "type": "game_end",
            "turn": turn_num,
            "result": "victory" if victory else "defeat",
            "health": player.health,
            "kings": format_cards(player.collected_kings),
        })
