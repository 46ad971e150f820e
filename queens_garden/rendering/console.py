"""Text renderer for terminal play."""

from __future__ import annotations

from typing import TYPE_CHECKING

from queens_garden.models.card import RANK_NAMES, SUIT_SYMBOLS

from .base import Renderer

if TYPE_CHECKING:
    from queens_garden.game.engine import GameEngine
    from queens_garden.models.board import Board
    from queens_garden.models.card import Card
    from queens_garden.models.game_state import GameState
    from queens_garden.models.position import Position

# Unexplored margin drawn around the explored region
BOARD_MARGIN = 1


class ConsoleRenderer(Renderer):
    """Display game state to stdout."""

    def __init__(self, show_board: bool = True):
        """Initialize display.

        Args:
            show_board: Whether to draw the board grid on each render
        """
        self.show_board = show_board

    def print_separator(self) -> None:
        """Print a separator line."""
        print("=" * 60)

    def initialize(self, engine: GameEngine) -> None:
        self.print_separator()
        print("QUEEN'S GARDEN")
        self.print_separator()
        print(f"Starting Queen: {engine.player.starting_queen}")
        print(f"Final King suit: {engine.player.final_king_suit().value}")

    def render(self, state: GameState) -> None:
        player = state.player
        print(f"\nTurn {state.turn} | HP {player.health}/{player.max_health} "
              f"| Position {player.position} | Deck {state.deck_size}")
        print(f"Party: {self._format_cards(player.party)}")
        print(f"Immunities: {', '.join(s.value for s in player.immunities()) or '-'}")
        if player.collected_kings:
            kings = [
                f"{k}{'' if player.has_king_ability_used(k) else '*'}"
                for k in player.collected_kings
            ]
            print(f"Kings: {' '.join(kings)}  (* = destroy ability ready)")

        if self.show_board:
            print()
            for line in self.board_lines(state.board, player.position):
                print(line)

        if state.game_over:
            if state.victory:
                print("\nVICTORY! All Kings collected.")
            else:
                print("\nGAME OVER - you died.")

    def board_lines(self, board: Board, player_pos: Position) -> list[str]:
        """Draw the explored board as text rows, north at the top."""
        min_x, max_x, min_y, max_y = board.bounds()
        lines = []
        for y in range(max_y + BOARD_MARGIN, min_y - BOARD_MARGIN - 1, -1):
            row = []
            for x in range(min_x - BOARD_MARGIN, max_x + BOARD_MARGIN + 1):
                tile = board.get_xy(x, y)
                if x == player_pos.x and y == player_pos.y:
                    cell = "[P]"
                elif tile is None:
                    cell = " . "
                elif tile.is_central_chamber:
                    cell = "[C]"
                elif tile.card is None:
                    cell = "[ ]"
                else:
                    cell = self._format_card(tile.card)
                row.append(cell.rjust(4))
            lines.append("".join(row))
        return lines

    def on_damage(self, amount: int, new_health: int, source: str | None = None) -> None:
        source_str = f" from {source}" if source else ""
        print(f"  -> Took {amount} damage{source_str}! Health: {new_health}")

    def on_queen_collected(self, card: Card) -> None:
        print(f"  -> Collected {card}! Added to party.")

    def on_king_collected(self, card: Card) -> None:
        print(f"  -> Collected {card}!")

    def _format_card(self, card: Card) -> str:
        return f"{RANK_NAMES[card.rank]}{SUIT_SYMBOLS[card.suit]}"

    def _format_cards(self, cards: list[Card]) -> str:
        if not cards:
            return "[]"
        return "[" + ", ".join(str(c) for c in cards) + "]"
