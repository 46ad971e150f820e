"""Board tile model."""

from pydantic import BaseModel

from .card import Card, CardType
from .position import ORIGIN, Position

IMPASSABLE_TYPES = frozenset({CardType.WALL, CardType.TRAP})


class Tile(BaseModel):
    """A revealed board cell.

    A tile without a card is empty and always passable. Tiles are never
    removed from the board; collecting or destroying a card only clears it.
    """

    x: int
    y: int
    card: Card | None = None

    @property
    def position(self) -> Position:
        return Position(x=self.x, y=self.y)

    @property
    def is_empty(self) -> bool:
        return self.card is None

    @property
    def is_central_chamber(self) -> bool:
        return self.position == ORIGIN

    @property
    def is_passable(self) -> bool:
        """Walls (tens) and traps (jacks) block movement."""
        if self.card is None:
            return True
        return self.card.type not in IMPASSABLE_TYPES

    def has_card_type(self, card_type: CardType) -> bool:
        """Check if the tile holds a card of the given type."""
        return self.card is not None and self.card.type == card_type

    def adjacent_positions(self) -> list[Position]:
        return self.position.neighbors()

    def is_adjacent_to(self, position: Position) -> bool:
        return self.position.is_adjacent_to(position)

    def clear(self) -> Card | None:
        """Remove and return the card on this tile."""
        card, self.card = self.card, None
        return card

    def __str__(self) -> str:
        if self.is_central_chamber:
            return "Central Chamber"
        if self.card is None:
            return f"Empty tile at {self.position}"
        return f"{self.card} at {self.position}"
