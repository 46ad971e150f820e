"""Card model."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, model_validator

from .position import Position


class Suit(str, Enum):
    """Card suit."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"


class Color(str, Enum):
    """Suit color."""

    RED = "red"
    BLACK = "black"


class Rank(str, Enum):
    """Card rank.

    Ranks 2-4 are removed from the game deck, so only 5-9 remain as
    number cards. The ten is a face card here (a wall), not a number.
    """

    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ACE = "ace"
    JACK = "jack"
    QUEEN = "queen"
    KING = "king"
    TEN = "ten"


class CardType(str, Enum):
    """Behaviour class derived from rank."""

    NUMBER = "number"
    TELEPORTER = "teleporter"  # Ace
    TRAP = "trap"  # Jack
    COLLECTIBLE = "collectible"  # Queen
    VICTORY = "victory"  # King
    WALL = "wall"  # Ten


NUMBER_RANKS = (Rank.FIVE, Rank.SIX, Rank.SEVEN, Rank.EIGHT, Rank.NINE)

RANK_VALUES: dict[Rank, int] = {
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.ACE: 1,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.TEN: 10,
}

RANK_TYPES: dict[Rank, CardType] = {
    Rank.ACE: CardType.TELEPORTER,
    Rank.JACK: CardType.TRAP,
    Rank.QUEEN: CardType.COLLECTIBLE,
    Rank.KING: CardType.VICTORY,
    Rank.TEN: CardType.WALL,
}

RANK_NAMES: dict[Rank, str] = {
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.TEN: "10",
}

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}

SUIT_COLORS: dict[Suit, Color] = {
    Suit.HEARTS: Color.RED,
    Suit.DIAMONDS: Color.RED,
    Suit.CLUBS: Color.BLACK,
    Suit.SPADES: Color.BLACK,
}


def number_rank(value: int) -> Rank:
    """Get the number rank for a face value.

    Raises:
        ValueError: If the value is not a number rank of this game.
    """
    rank = Rank(str(value))
    if rank not in NUMBER_RANKS:
        raise ValueError(f"{value} is not a number rank")
    return rank


class Card(BaseModel, frozen=True):
    """Single card.

    Cards are value objects. Placing a card on the board or handing it to
    the player produces a new instance, so board and player state never
    share a card.
    """

    suit: Suit
    rank: Rank
    value: int
    revealed: bool = False
    position: Position | None = None

    @model_validator(mode="before")
    @classmethod
    def _derive_value(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("value") is None and "rank" in data:
            data = dict(data)
            data["value"] = RANK_VALUES[Rank(data["rank"])]
        return data

    @property
    def type(self) -> CardType:
        """Behaviour class of this card."""
        return RANK_TYPES.get(self.rank, CardType.NUMBER)

    @property
    def color(self) -> Color:
        """Color of this card's suit."""
        return SUIT_COLORS[self.suit]

    @property
    def key(self) -> tuple[Suit, Rank]:
        """Identity of this card (at most one card per suit and rank exists)."""
        return (self.suit, self.rank)

    def is_face_card(self) -> bool:
        """Check if this is an ace, jack, queen or king."""
        return self.rank in (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING)

    def same_card(self, other: "Card") -> bool:
        """Check if two cards have the same suit and rank."""
        return self.key == other.key

    def clone(self) -> "Card":
        """Create an independent copy of this card."""
        return self.model_copy(deep=True)

    def placed_at(self, position: Position) -> "Card":
        """Copy of this card revealed at a board position."""
        return self.model_copy(update={"revealed": True, "position": position})

    def __str__(self) -> str:
        return f"{SUIT_SYMBOLS[self.suit]}{RANK_NAMES[self.rank]}"

    def __repr__(self) -> str:
        return str(self)
