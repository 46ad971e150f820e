"""Renderer interface.

The game engine talks to its presentation layer only through this class.
Concrete renderers (console, GUI, test recorders) implement it; the engine
never imports one directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from queens_garden.game.engine import GameEngine
    from queens_garden.models.card import Card
    from queens_garden.models.game_state import GameState


class Renderer(ABC):
    """Abstract base class for renderers.

    initialize() and render() are required. The on_* hooks are notifications
    with no-op defaults; their return values are ignored by the engine.
    """

    @abstractmethod
    def initialize(self, engine: GameEngine) -> None:
        """Called once when a game is set up.

        Args:
            engine: The engine that will drive this renderer
        """
        pass

    @abstractmethod
    def render(self, state: GameState) -> None:
        """Draw a snapshot of the game.

        Args:
            state: Snapshot taken after the latest action
        """
        pass

    def on_damage(self, amount: int, new_health: int, source: str | None = None) -> None:
        """Called when the player takes damage."""

    def on_queen_collected(self, card: Card) -> None:
        """Called when a Queen joins the party."""

    def on_king_collected(self, card: Card) -> None:
        """Called when a King is collected."""

    def on_game_over(self, victory: bool) -> None:
        """Called once when the game reaches a terminal phase."""


class NullRenderer(Renderer):
    """Renderer that draws nothing. Used when the engine runs headless."""

    def initialize(self, engine: GameEngine) -> None:
        pass

    def render(self, state: GameState) -> None:
        pass
