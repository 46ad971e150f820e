"""Player model."""

from pydantic import BaseModel, Field

from .card import SUIT_COLORS, Card, Rank, Suit
from .position import ORIGIN, Position


class Player(BaseModel):
    """Player state for one game."""

    starting_queen: Card
    party: list[Card] = Field(default_factory=list)  # Queens, max party size
    collected_kings: list[Card] = Field(default_factory=list)
    health: int = 20
    max_health: int = 20
    position: Position = ORIGIN

    # Kings whose one-shot destroy ability has been spent, by (suit, rank)
    used_king_abilities: set[tuple[Suit, Rank]] = Field(default_factory=set)

    @classmethod
    def create(cls, starting_queen: Card, health: int) -> "Player":
        """Create a player at the central chamber with the starting Queen."""
        return cls(
            starting_queen=starting_queen,
            party=[starting_queen.clone()],
            health=health,
            max_health=health,
        )

    def immunities(self) -> list[Suit]:
        """Suits the player is immune to (one per Queen in the party)."""
        return [queen.suit for queen in self.party]

    def is_immune_to(self, suit: Suit) -> bool:
        return suit in self.immunities()

    def add_queen_to_party(self, queen: Card, max_party_size: int) -> bool:
        """Add a Queen to the party.

        Returns:
            False if the party is already full.
        """
        if len(self.party) >= max_party_size:
            return False
        self.party.append(queen.clone())
        return True

    def remove_queen_from_party(self, queen: Card) -> bool:
        """Remove the party Queen with the same suit and rank.

        Returns:
            False if no such Queen is in the party.
        """
        for i, q in enumerate(self.party):
            if q.same_card(queen):
                del self.party[i]
                return True
        return False

    def has_king(self, king: Card) -> bool:
        return any(k.same_card(king) for k in self.collected_kings)

    def collect_king(self, king: Card) -> None:
        self.collected_kings.append(king.clone())

    def has_king_ability_used(self, king: Card) -> bool:
        return king.key in self.used_king_abilities

    def use_king_ability(self, king: Card) -> None:
        self.used_king_abilities.add(king.key)

    def take_damage(self, amount: int) -> int:
        """Reduce health, never below zero.

        Returns:
            Health after the damage.
        """
        self.health = max(0, self.health - amount)
        return self.health

    def is_dead(self) -> bool:
        return self.health <= 0

    def has_won(self, total_kings_to_win: int) -> bool:
        return len(self.collected_kings) >= total_kings_to_win

    def final_king_suit(self) -> Suit:
        """Suit of the King that must be collected last.

        This is the suit with the same color as, but different from, the
        starting Queen's suit.
        """
        color = self.starting_queen.color
        return next(
            suit
            for suit, suit_color in SUIT_COLORS.items()
            if suit_color == color and suit != self.starting_queen.suit
        )

    def __str__(self) -> str:
        return (
            f"Player at {self.position} HP {self.health}/{self.max_health} "
            f"party={self.party} kings={self.collected_kings}"
        )
