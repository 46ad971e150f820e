"""Game engine for Queen's Garden."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from pydantic import ValidationError

from queens_garden.config import Config
from queens_garden.logging import GameLogger, format_card
from queens_garden.models.board import Board
from queens_garden.models.card import Card, CardType, Rank, Suit
from queens_garden.models.deck import Deck
from queens_garden.models.game_state import TERMINAL_PHASES, GamePhase, GameState
from queens_garden.models.player import Player
from queens_garden.models.position import ORIGIN, Direction, Position
from queens_garden.models.tile import Tile
from queens_garden.rendering.base import NullRenderer, Renderer

from .rules import RulesEngine

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGE = "Game is over"
NOT_INITIALIZED_MESSAGE = "Game has not been initialized"

# Damage sources reported to the renderer
SOURCE_TELEPORT = "Teleport"
SOURCE_JACK = "Jack trap"


@dataclass
class ActionResult:
    """Outcome of a player action."""

    success: bool
    message: str = ""
    damage: int = 0  # Total damage applied by the action


class GameEngine:
    """One game session.

    The engine owns the board, deck and player and is the only component
    that changes them. Each action is validated before anything is mutated
    and then runs to completion. Instances share no state, so separate
    sessions can run side by side; a single instance must not receive
    actions from several threads at once.
    """

    def __init__(
        self,
        config: Config | None = None,
        renderer: Renderer | None = None,
        game_logger: GameLogger | None = None,
        rng: random.Random | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            renderer: Presentation layer notified after state changes
            game_logger: GameLogger instance for detailed logging
            rng: Random source for shuffling
        """
        self.config = config or Config()
        self.rules = self.config.rules
        self.renderer = renderer or NullRenderer()
        self.game_logger = game_logger
        self.rng = rng or random.Random()

        self.rules_engine = RulesEngine(self.rules)

        self.board = Board()
        self.deck = Deck()
        self.player: Player | None = None
        self.turn = 0
        self.phase = GamePhase.SETUP

    @property
    def game_over(self) -> bool:
        return self.phase in TERMINAL_PHASES

    @property
    def victory(self) -> bool:
        return self.phase == GamePhase.VICTORY

    def initialize(self, starting_suit: Suit | str, deck: Deck | None = None) -> None:
        """Set up a new game.

        Args:
            starting_suit: Suit of the player's starting Queen
            deck: Pre-ordered deck to draw from as-is. If not provided, a
                full deck without the starting Queen is built and shuffled.

        Raises:
            ValueError: If starting_suit is not a suit.
        """
        try:
            suit = Suit(starting_suit.lower())
        except (AttributeError, ValueError):
            raise ValueError(f"Invalid starting suit: {starting_suit!r}") from None

        starting_queen = Card(suit=suit, rank=Rank.QUEEN)

        if deck is None:
            deck = Deck.create(self.rules, excluded_queen=starting_queen)
            deck.shuffle(self.rng)
        self.deck = deck

        self.player = Player.create(starting_queen, self.rules.starting_health)
        self.board = Board()
        self.turn = 0
        self.phase = GamePhase.PLAYING

        self._reveal_initial_tiles()

        # An initial reveal can place a Jack next to the chamber
        self._check_jack_adjacent_damage(self.player.position)

        logger.info(
            f"Game started with {starting_queen}, "
            f"{len(self.board)} tiles revealed, {self.deck.size()} cards in deck"
        )
        if self.game_logger:
            self.game_logger.log_game_start(self.player, self.board, self.deck.size())

        self.renderer.initialize(self)
        if self.player.is_dead():
            self._end_game(victory=False)
        self.renderer.render(self.get_game_state())

    def move(self, direction: Direction | str) -> ActionResult:
        """Move one step north, south, east or west."""
        rejection = self._check_can_act()
        if rejection:
            return rejection

        try:
            step = Direction(direction.lower())
        except (AttributeError, ValueError):
            return ActionResult(success=False, message=f"Unknown direction: {direction}")

        target = self.player.position.step(step)
        return self.move_to_position(target.x, target.y)

    def move_to_position(self, x: int, y: int) -> ActionResult:
        """Move to a position: an adjacent step or a teleport from an Ace."""
        rejection = self._check_can_act()
        if rejection:
            return rejection

        current = self.player.position
        try:
            target = Position(x=x, y=y)
        except ValidationError:
            return ActionResult(success=False, message=f"Invalid position: ({x}, {y})")

        validation = self.rules_engine.can_move(current, target, self.board, self.player)
        if not validation.is_valid:
            logger.debug(f"Move to {target} rejected: {validation.reason}")
            return ActionResult(success=False, message=validation.reason)

        # Ace to an adjacent Ace or the chamber still counts as a teleport
        is_teleport = self.rules_engine.is_teleport(
            self.board.get(current),
            self.board.get(target),
        )
        return self._resolve_arrival("teleport" if is_teleport else "move", target)

    def teleport(self, target: Position) -> ActionResult:
        """Teleport from the Ace underfoot to another Ace or the central chamber."""
        rejection = self._check_can_act()
        if rejection:
            return rejection

        if not isinstance(target, Position):
            return ActionResult(success=False, message=f"Invalid position: {target}")

        validation = self.rules_engine.can_teleport(
            self.board.get(self.player.position),
            self.board.get(target),
        )
        if not validation.is_valid:
            logger.debug(f"Teleport to {target} rejected: {validation.reason}")
            return ActionResult(success=False, message=validation.reason)

        return self._resolve_arrival("teleport", target)

    def destroy_tile(self, target: Position, king: Card) -> ActionResult:
        """Clear an adjacent tile's card with a collected King's one-shot ability."""
        rejection = self._check_can_act()
        if rejection:
            return rejection

        if not isinstance(king, Card) or king.type != CardType.VICTORY:
            return ActionResult(success=False, message=f"Not a King: {king}")
        if not isinstance(target, Position):
            return ActionResult(success=False, message=f"Invalid position: {target}")

        tile = self.board.get(target)
        if tile is None:
            return ActionResult(success=False, message="Tile does not exist")

        validation = self.rules_engine.can_destroy_tile(king, tile, self.player)
        if not validation.is_valid:
            logger.debug(f"Destroy at {target} rejected: {validation.reason}")
            return ActionResult(success=False, message=validation.reason)

        destroyed = tile.clear()
        self.player.use_king_ability(king)
        self.turn += 1

        logger.info(f"{king} destroyed {destroyed} at {target}")
        if self.game_logger:
            self.game_logger.log_special(
                self.turn,
                "tile_destroyed",
                {
                    "king": format_card(king),
                    "card": format_card(destroyed) if destroyed else "",
                    "position": [target.x, target.y],
                },
            )
            self._log_turn("destroy", target, 0)

        self.renderer.render(self.get_game_state())
        return ActionResult(success=True)

    def valid_moves(self) -> list[Position]:
        """Positions the player can currently move or teleport to."""
        if self.player is None or self.game_over:
            return []
        return self.rules_engine.valid_moves(self.board, self.player)

    def get_game_state(self) -> GameState:
        """Snapshot of the current game.

        Raises:
            RuntimeError: If the game has not been initialized.
        """
        if self.player is None:
            raise RuntimeError(NOT_INITIALIZED_MESSAGE)
        return GameState(
            phase=self.phase,
            board=self.board.copy(),
            player=self.player.model_copy(deep=True),
            turn=self.turn,
            deck_size=self.deck.size(),
        )

    def _check_can_act(self) -> ActionResult | None:
        """Get a rejection if no action may be taken right now."""
        if self.player is None:
            return ActionResult(success=False, message=NOT_INITIALIZED_MESSAGE)
        if self.game_over:
            return ActionResult(success=False, message=GAME_OVER_MESSAGE)
        return None

    def _resolve_arrival(self, action: str, target: Position) -> ActionResult:
        """Run the turn pipeline after a validated move or teleport.

        Order matters: collection and the victory check come before any
        damage, so a winning move never kills the player.
        """
        tile = self.board.get(target)
        entered = tile.model_copy()  # Card on the tile before collection

        self.player.position = target
        self.turn += 1

        if tile.card is not None:
            self._handle_card_collection(tile)

            if self.player.has_won(self.rules.total_kings_to_win):
                self._end_game(victory=True)
                self._log_turn(action, target, 0)
                self.renderer.render(self.get_game_state())
                return ActionResult(success=True, damage=0)

        total_damage = self.rules_engine.calculate_damage(entered, self.player)
        if total_damage > 0:
            self._apply_damage(
                total_damage,
                SOURCE_TELEPORT if action == "teleport" else None,
            )

        if self.rules.reveal_adjacent_on_move:
            self._reveal_adjacent_tiles(target)

        # Includes Jacks revealed just now
        total_damage += self._check_jack_adjacent_damage(target)

        self._check_game_over()

        logger.debug(
            f"Turn {self.turn}: {action} to {target}, {total_damage} damage, "
            f"health {self.player.health}"
        )
        self._log_turn(action, target, total_damage)
        self.renderer.render(self.get_game_state())
        return ActionResult(success=True, damage=total_damage)

    def _reveal_initial_tiles(self) -> None:
        """Reveal one tile in each configured direction from the chamber."""
        for direction in self.rules.initial_reveal_directions:
            position = ORIGIN.step(direction)
            if self.board.is_revealed(position):
                continue
            if not self._reveal(position):
                return

    def _reveal_adjacent_tiles(self, position: Position) -> None:
        """Reveal every unexplored orthogonal neighbour of a position."""
        for neighbor in self.board.unexplored_neighbors(position):
            if not self._reveal(neighbor):
                return

    def _reveal(self, position: Position) -> bool:
        """Draw a card onto an unexplored position.

        Returns:
            False if the deck is empty and nothing was revealed.
        """
        card = self.deck.draw()
        if card is None:
            logger.debug(f"Deck exhausted, {position} stays unexplored")
            return False
        tile = self.board.reveal(position, card)
        logger.debug(f"Revealed {tile}")
        return True

    def _check_jack_adjacent_damage(self, position: Position) -> int:
        """Apply damage from every Jack next to a position.

        Returns:
            Total damage applied.
        """
        total = 0
        for tile in self.board.adjacent_tiles(position):
            if not tile.has_card_type(CardType.TRAP):
                continue
            damage = self.rules_engine.calculate_jack_adjacent_damage(tile.card, self.player)
            if damage > 0:
                self._apply_damage(damage, SOURCE_JACK)
                total += damage
        return total

    def _apply_damage(self, amount: int, source: str | None = None) -> None:
        health = self.player.take_damage(amount)
        logger.debug(f"Took {amount} damage from {source or 'tile'}, health {health}")
        self.renderer.on_damage(amount, health, source)

    def _handle_card_collection(self, tile: Tile) -> None:
        """Collect the Queen or King on a tile the player just entered."""
        card = tile.card
        if card is None:
            return

        if card.type == CardType.COLLECTIBLE:
            validation = self.rules_engine.can_collect_queen(card, self.player)
            if not validation.is_valid:
                return
            self.player.add_queen_to_party(card, self.rules.max_party_size)
            tile.clear()

            logger.info(f"Collected {card}, party {self.player.party}")
            if self.game_logger:
                self.game_logger.log_special(
                    self.turn,
                    "queen_collected",
                    {"card": format_card(card)},
                )
            self.renderer.on_queen_collected(card)

        elif card.type == CardType.VICTORY:
            validation = self.rules_engine.can_collect_king(card, self.player)
            if not validation.is_valid:
                return
            # Immunity to the departing Queen's suit ends here
            self.player.remove_queen_from_party(validation.required_queen)
            self.player.collect_king(card)
            tile.clear()

            logger.info(
                f"Collected {card} using {validation.required_queen}, "
                f"{len(self.player.collected_kings)} Kings"
            )
            if self.game_logger:
                self.game_logger.log_special(
                    self.turn,
                    "king_collected",
                    {
                        "card": format_card(card),
                        "queen": format_card(validation.required_queen),
                    },
                )
            self.renderer.on_king_collected(card)

    def _check_game_over(self) -> None:
        if self.player.is_dead():
            self._end_game(victory=False)
        elif self.player.has_won(self.rules.total_kings_to_win):
            self._end_game(victory=True)

    def _end_game(self, victory: bool) -> None:
        self.phase = GamePhase.VICTORY if victory else GamePhase.DEFEAT
        logger.info(f"Game over after {self.turn} turns: {'victory' if victory else 'defeat'}")
        if self.game_logger:
            self.game_logger.log_game_end(self.turn, victory, self.player)
        self.renderer.on_game_over(victory)

    def _log_turn(self, action: str, target: Position, damage: int) -> None:
        if self.game_logger:
            self.game_logger.log_turn(
                self.turn,
                action,
                target,
                damage,
                self.player,
                self.deck.size(),
            )
