"""Game logging module."""

from .formatters import format_board, format_card, format_cards, format_position
from .game_logger import GameLogger

__all__ = [
    "GameLogger",
    "format_board",
    "format_card",
    "format_cards",
    "format_position",
]
