"""Formatters for game log output."""

from queens_garden.models.board import Board
from queens_garden.models.card import Card, Rank, Suit
from queens_garden.models.position import Position

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "D",
    Suit.CLUBS: "C",
    Suit.SPADES: "S",
}

# Rank codes for log output
RANK_CODES: dict[Rank, str] = {
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "S7" for the 7 of spades, "HQ" for the
        Queen of hearts).
    """
    return f"{SUIT_CODES[card.suit]}{RANK_CODES[card.rank]}"


def format_cards(cards: list[Card]) -> str:
    """Format cards to a comma-separated string.

    Args:
        cards: Cards to format.

    Returns:
        Comma-separated card strings (e.g., "HQ,DQ").
        Empty string if no cards.
    """
    return ",".join(format_card(c) for c in cards)


def format_position(position: Position) -> list[int]:
    """Format a position as an [x, y] pair."""
    return [position.x, position.y]


def format_board(board: Board) -> dict[str, str]:
    """Format revealed tiles to dict.

    Args:
        board: Board to format.

    Returns:
        Dict mapping "x,y" to the card code, or "" for an empty tile.
    """
    return {
        f"{tile.x},{tile.y}": format_card(tile.card) if tile.card else ""
        for tile in board
    }
