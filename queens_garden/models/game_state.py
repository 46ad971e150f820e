"""Game state models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .board import Board
from .player import Player


class GamePhase(str, Enum):
    """Game lifecycle. VICTORY and DEFEAT are terminal."""

    SETUP = "setup"
    PLAYING = "playing"
    VICTORY = "victory"
    DEFEAT = "defeat"


TERMINAL_PHASES = frozenset({GamePhase.VICTORY, GamePhase.DEFEAT})


class GameState(BaseModel):
    """Read-only snapshot of a game, taken after each action.

    Board and player are copies; changing them does not affect the engine.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    phase: GamePhase
    board: Board
    player: Player
    turn: int = 0
    deck_size: int = 0

    @property
    def game_over(self) -> bool:
        return self.phase in TERMINAL_PHASES

    @property
    def victory(self) -> bool:
        return self.phase == GamePhase.VICTORY

    def __str__(self) -> str:
        parts = [f"Turn {self.turn}", f"HP {self.player.health}/{self.player.max_health}"]
        parts.append(f"Kings {len(self.player.collected_kings)}")
        parts.append(f"Deck {self.deck_size}")
        if self.game_over:
            parts.append("[VICTORY]" if self.victory else "[DEFEAT]")
        return " ".join(parts)
