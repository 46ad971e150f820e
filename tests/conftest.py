"""Shared fixtures for Queen's Garden tests."""

import pytest

from queens_garden.config import Config
from queens_garden.game.engine import GameEngine
from queens_garden.models.card import Card, Rank, Suit
from queens_garden.models.deck import Deck
from queens_garden.rendering.base import Renderer

SUIT_LETTERS = {
    "H": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "S": Suit.SPADES,
}

RANK_LETTERS = {
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "A": Rank.ACE,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}


def card(code: str) -> Card:
    """Build a card from a short code such as "S7", "HQ" or "C10"."""
    return Card(suit=SUIT_LETTERS[code[0]], rank=RANK_LETTERS[code[1:]])


def make_deck(*codes: str) -> Deck:
    """Build a deck that draws the given cards in order."""
    return Deck([card(c) for c in codes])


class RecordingRenderer(Renderer):
    """Renderer that records every call it receives."""

    def __init__(self):
        self.events: list[tuple] = []
        self.states = []

    def initialize(self, engine):
        self.events.append(("initialize",))

    def render(self, state):
        self.states.append(state)
        self.events.append(("render", state.turn))

    def on_damage(self, amount, new_health, source=None):
        self.events.append(("damage", amount, new_health, source))

    def on_queen_collected(self, card):
        self.events.append(("queen", card))

    def on_king_collected(self, card):
        self.events.append(("king", card))

    def on_game_over(self, victory):
        self.events.append(("game_over", victory))

    def of_kind(self, kind: str) -> list[tuple]:
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def engine(renderer):
    """Engine with default rules and a recording renderer (not initialized)."""
    return GameEngine(Config(), renderer=renderer)
