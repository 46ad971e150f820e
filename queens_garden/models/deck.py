"""Draw pile."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Iterator

from .card import Card, Rank, Suit, number_rank

if TYPE_CHECKING:
    from queens_garden.config import RulesConfig

# Per-suit order after the number cards
FACE_RANKS = (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.TEN)


class Deck:
    """Ordered pool of undrawn cards. The front of the list is drawn next."""

    def __init__(self, cards: list[Card] | None = None):
        """Initialize deck.

        Args:
            cards: Cards in draw order.
        """
        self._cards: list[Card] = list(cards) if cards else []

    @classmethod
    def create(
        cls,
        rules: RulesConfig,
        excluded_queen: Card | None = None,
    ) -> Deck:
        """Build the unshuffled game deck.

        Cards are ordered suit-major, then numbers, ace, jack, queen, king,
        ten. The queen sharing a suit with excluded_queen is left out since
        it starts in the player's party.

        Args:
            rules: Rules providing number ranks and the Ace value.
            excluded_queen: The player's starting Queen.

        Returns:
            New Deck.
        """
        cards: list[Card] = []
        for suit in Suit:
            for value in rules.deck_number_ranks():
                cards.append(Card(suit=suit, rank=number_rank(value)))
            for rank in FACE_RANKS:
                if (
                    rank == Rank.QUEEN
                    and excluded_queen is not None
                    and excluded_queen.suit == suit
                ):
                    continue
                if rank == Rank.ACE:
                    cards.append(Card(suit=suit, rank=rank, value=rules.ace_value))
                else:
                    cards.append(Card(suit=suit, rank=rank))
        return cls(cards)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle in place (Fisher-Yates).

        Args:
            rng: Random source (a fresh unseeded one if not provided).
        """
        rng = rng or random.Random()
        for i in range(len(self._cards) - 1, 0, -1):
            j = rng.randint(0, i)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def draw(self) -> Card | None:
        """Remove and return the front card, or None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop(0)

    def draw_many(self, count: int) -> list[Card]:
        """Draw up to count cards, stopping early if the deck runs out."""
        drawn: list[Card] = []
        for _ in range(count):
            card = self.draw()
            if card is None:
                break
            drawn.append(card)
        return drawn

    def remove(self, card: Card) -> Card | None:
        """Remove the card with the same suit and rank, if present."""
        for i, c in enumerate(self._cards):
            if c.same_card(card):
                return self._cards.pop(i)
        return None

    def size(self) -> int:
        return len(self._cards)

    def is_empty(self) -> bool:
        return len(self._cards) == 0

    def to_list(self) -> list[Card]:
        """Get cards in draw order."""
        return list(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return "[" + ", ".join(str(c) for c in self._cards) + "]"

    def __repr__(self) -> str:
        return f"Deck({self._cards!r})"
