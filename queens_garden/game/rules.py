"""Action validation and damage rules."""

from dataclasses import dataclass

from queens_garden.config import RulesConfig
from queens_garden.models.board import Board
from queens_garden.models.card import Card, CardType
from queens_garden.models.player import Player
from queens_garden.models.position import Position
from queens_garden.models.tile import Tile


@dataclass
class ValidationResult:
    """Result of a rules check."""

    is_valid: bool
    reason: str = ""
    required_queen: Card | None = None  # Queen given up to collect a King


class RulesEngine:
    """Stateless rules checks.

    Every method reads the board and player it is given and never changes
    them. The game engine is the only component that mutates game state.
    """

    def __init__(self, rules: RulesConfig | None = None):
        """Initialize rules engine.

        Args:
            rules: Rules configuration (uses defaults if not provided)
        """
        self.rules = rules or RulesConfig()

    @property
    def party_full_reason(self) -> str:
        return f"Party is full (max {self.rules.max_party_size} Queens)"

    def can_move(
        self,
        from_pos: Position,
        to_pos: Position,
        board: Board,
        player: Player,
    ) -> ValidationResult:
        """Check a move to an adjacent tile or a teleport between Aces.

        Args:
            from_pos: Player's current position
            to_pos: Destination
            board: Current board
            player: Current player

        Returns:
            ValidationResult
        """
        if from_pos == to_pos:
            return ValidationResult(
                is_valid=False,
                reason="Cannot move to the same position",
            )

        target = board.get(to_pos)
        if target is None:
            return ValidationResult(
                is_valid=False,
                reason="Destination tile does not exist",
            )

        current = board.get(from_pos)
        is_adjacent = from_pos.is_adjacent_to(to_pos)
        is_teleport = self.is_teleport(current, target)

        if not is_adjacent and not is_teleport:
            return ValidationResult(
                is_valid=False,
                reason="Can only move to adjacent tiles, or teleport from Ace to Ace/central chamber",
            )

        # Teleport destinations are always enterable
        if is_teleport:
            return ValidationResult(is_valid=True)

        card = target.card
        if card is not None and card.type == CardType.COLLECTIBLE:
            # A Queen only blocks when the party has no room for her
            check = self.can_collect_queen(card, player)
            if not check.is_valid and check.reason == self.party_full_reason:
                return ValidationResult(
                    is_valid=False,
                    reason="Tile is impassable (Queen - party is full)",
                )

        if card is not None and card.type == CardType.VICTORY:
            if not self.can_collect_king(card, player).is_valid:
                return ValidationResult(
                    is_valid=False,
                    reason="Tile is impassable (King - cannot collect)",
                )

        if not target.is_passable:
            return ValidationResult(
                is_valid=False,
                reason="Tile is impassable (wall or Jack)",
            )

        return ValidationResult(is_valid=True)

    def can_teleport(self, from_tile: Tile | None, to_tile: Tile | None) -> ValidationResult:
        """Check an explicit teleport request.

        Teleports start on an Ace and end on another Ace or the central
        chamber. Standing on the central chamber does not allow teleporting.
        """
        if from_tile is None or not from_tile.has_card_type(CardType.TELEPORTER):
            return ValidationResult(
                is_valid=False,
                reason="Must be on an Ace to teleport",
            )
        if to_tile is None or not (
            to_tile.has_card_type(CardType.TELEPORTER) or to_tile.is_central_chamber
        ):
            return ValidationResult(
                is_valid=False,
                reason="Can only teleport to an Ace or central chamber",
            )
        if from_tile.position == to_tile.position:
            return ValidationResult(
                is_valid=False,
                reason="Cannot move to the same position",
            )
        return ValidationResult(is_valid=True)

    def valid_moves(self, board: Board, player: Player) -> list[Position]:
        """List every position the player may currently move or teleport to."""
        origin = player.position
        candidates = [tile.position for tile in board]
        return [
            pos
            for pos in candidates
            if self.can_move(origin, pos, board, player).is_valid
        ]

    def calculate_damage(self, tile: Tile, player: Player) -> int:
        """Damage from entering a tile, by step or by teleport.

        Immunity is read from the party as it is now, so a Queen given up
        earlier in the same action no longer protects.
        """
        card = tile.card
        if card is None:
            return 0
        if player.is_immune_to(card.suit):
            return 0
        if card.type in (CardType.NUMBER, CardType.TELEPORTER):
            return card.value
        # Jacks hurt by adjacency only; Queens and Kings are collected;
        # walls cannot be entered
        return 0

    def calculate_jack_adjacent_damage(self, jack: Card, player: Player) -> int:
        """Damage from standing next to a Jack."""
        if player.is_immune_to(jack.suit):
            return 0
        return self.rules.jack_adjacent_damage

    def can_collect_queen(self, queen: Card, player: Player) -> ValidationResult:
        if len(player.party) >= self.rules.max_party_size:
            return ValidationResult(is_valid=False, reason=self.party_full_reason)

        if any(q.same_card(queen) for q in player.party):
            return ValidationResult(is_valid=False, reason="Queen already in party")

        return ValidationResult(is_valid=True)

    def can_collect_king(self, king: Card, player: Player) -> ValidationResult:
        """Check whether a King can be collected.

        The final King (same color as the starting Queen, other suit) must
        come last. Every King needs a party Queen of the same color but a
        different suit; that Queen is returned as required_queen and leaves
        the party on collection.
        """
        if player.has_king(king):
            return ValidationResult(is_valid=False, reason="King already collected")

        required_others = self.rules.total_kings_to_win - 1
        if (
            king.suit == player.final_king_suit()
            and len(player.collected_kings) < required_others
        ):
            return ValidationResult(
                is_valid=False,
                reason="Must collect all other Kings before the final King",
            )

        required_queen = next(
            (
                q
                for q in player.party
                if q.color == king.color and q.suit != king.suit
            ),
            None,
        )
        if required_queen is None:
            return ValidationResult(
                is_valid=False,
                reason="Need Queen of same color but different suit",
            )

        return ValidationResult(is_valid=True, required_queen=required_queen)

    def can_destroy_tile(self, king: Card, target: Tile, player: Player) -> ValidationResult:
        """Check use of a King's one-shot destroy ability on a tile."""
        if not player.has_king(king):
            return ValidationResult(is_valid=False, reason="King not collected")

        if player.has_king_ability_used(king):
            return ValidationResult(is_valid=False, reason="King ability already used")

        if not target.is_adjacent_to(player.position):
            return ValidationResult(is_valid=False, reason="Tile must be adjacent")

        if target.is_central_chamber:
            return ValidationResult(is_valid=False, reason="Cannot destroy central chamber")

        if target.has_card_type(CardType.COLLECTIBLE):
            return ValidationResult(is_valid=False, reason="Cannot destroy Queens")

        if target.has_card_type(CardType.VICTORY):
            return ValidationResult(is_valid=False, reason="Cannot destroy Kings")

        return ValidationResult(is_valid=True)

    def is_teleport(self, current: Tile | None, target: Tile | None) -> bool:
        """Check if moving from current to target counts as a teleport."""
        if current is None or not current.has_card_type(CardType.TELEPORTER):
            return False
        if target is None:
            return False
        return target.has_card_type(CardType.TELEPORTER) or target.is_central_chamber
