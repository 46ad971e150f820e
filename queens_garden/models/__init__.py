"""Game models."""

from .board import Board
from .card import Card, CardType, Color, Rank, Suit
from .deck import Deck
from .game_state import GamePhase, GameState
from .player import Player
from .position import ORIGIN, Direction, Position
from .tile import Tile

__all__ = [
    "Board",
    "Card",
    "CardType",
    "Color",
    "Rank",
    "Suit",
    "Deck",
    "GamePhase",
    "GameState",
    "Player",
    "ORIGIN",
    "Direction",
    "Position",
    "Tile",
]
