"""Tests for positions, tiles and the board."""

import pytest

from queens_garden.models.board import Board
from queens_garden.models.position import ORIGIN, Direction, Position
from queens_garden.models.tile import Tile

from conftest import card


class TestPosition:
    """Tests for Position and Direction."""

    def test_step(self):
        """Test stepping in each direction (north is +y)."""
        assert ORIGIN.step(Direction.NORTH) == Position(x=0, y=1)
        assert ORIGIN.step(Direction.SOUTH) == Position(x=0, y=-1)
        assert ORIGIN.step(Direction.EAST) == Position(x=1, y=0)
        assert ORIGIN.step(Direction.WEST) == Position(x=-1, y=0)

    def test_neighbors_order(self):
        """Test neighbours come north, south, east, west."""
        assert Position(x=2, y=3).neighbors() == [
            Position(x=2, y=4),
            Position(x=2, y=2),
            Position(x=3, y=3),
            Position(x=1, y=3),
        ]

    def test_adjacency_is_orthogonal(self):
        """Test diagonals and distant positions are not adjacent."""
        assert ORIGIN.is_adjacent_to(Position(x=0, y=1))
        assert not ORIGIN.is_adjacent_to(Position(x=1, y=1))
        assert not ORIGIN.is_adjacent_to(Position(x=0, y=2))
        assert not ORIGIN.is_adjacent_to(ORIGIN)

    def test_hashable(self):
        """Test positions work as dict keys."""
        positions = {Position(x=1, y=2): "a"}
        assert positions[Position(x=1, y=2)] == "a"


class TestTile:
    """Tests for Tile class."""

    def test_empty_tile(self):
        """Test a tile without a card."""
        tile = Tile(x=1, y=0)
        assert tile.is_empty
        assert tile.is_passable
        assert not tile.is_central_chamber

    def test_central_chamber(self):
        """Test the origin tile is the central chamber."""
        assert Tile(x=0, y=0).is_central_chamber

    @pytest.mark.parametrize("code", ["C10", "CJ"])
    def test_walls_and_traps_block(self, code):
        """Test tens and jacks are impassable."""
        assert not Tile(x=1, y=0, card=card(code)).is_passable

    @pytest.mark.parametrize("code", ["C5", "CA", "CQ", "CK"])
    def test_other_cards_passable(self, code):
        """Test other cards do not block on their own."""
        assert Tile(x=1, y=0, card=card(code)).is_passable

    def test_clear(self):
        """Test clearing returns the card and leaves an empty passable tile."""
        tile = Tile(x=1, y=0, card=card("C10"))
        assert tile.clear() == card("C10")
        assert tile.is_empty
        assert tile.is_passable
        assert tile.clear() is None

    def test_adjacency(self):
        """Test tile adjacency queries."""
        tile = Tile(x=1, y=1)
        assert tile.is_adjacent_to(Position(x=1, y=2))
        assert not tile.is_adjacent_to(Position(x=2, y=2))
        assert len(tile.adjacent_positions()) == 4


class TestBoard:
    """Tests for Board class."""

    def test_new_board_has_only_chamber(self):
        """Test a new board holds just the empty central chamber."""
        board = Board()
        assert len(board) == 1
        assert board.central_chamber.is_central_chamber
        assert board.central_chamber.is_empty
        assert ORIGIN in board

    def test_unexplored_is_none(self):
        """Test unexplored positions have no tile."""
        board = Board()
        assert board.get(Position(x=5, y=5)) is None
        assert not board.is_revealed(Position(x=5, y=5))

    def test_reveal(self):
        """Test revealing places a revealed copy of the card."""
        board = Board()
        drawn = card("S7")
        tile = board.reveal(Position(x=0, y=1), drawn)

        assert board.get(Position(x=0, y=1)) is tile
        assert tile.card == drawn.placed_at(Position(x=0, y=1))
        assert tile.card.revealed
        assert not drawn.revealed

    def test_reveal_twice_rejected(self):
        """Test a revealed position can never be replaced."""
        board = Board()
        board.reveal(Position(x=0, y=1), card("S7"))
        with pytest.raises(ValueError):
            board.reveal(Position(x=0, y=1), card("S8"))
        with pytest.raises(ValueError):
            board.reveal(ORIGIN, card("S8"))

    def test_unexplored_neighbors(self):
        """Test only missing neighbours are listed."""
        board = Board()
        board.reveal(Position(x=0, y=1), card("S7"))
        assert board.unexplored_neighbors(ORIGIN) == [
            Position(x=0, y=-1),
            Position(x=1, y=0),
            Position(x=-1, y=0),
        ]

    def test_adjacent_tiles(self):
        """Test adjacent tiles skip unexplored positions."""
        board = Board()
        board.reveal(Position(x=1, y=0), card("SJ"))
        tiles = board.adjacent_tiles(ORIGIN)
        assert [t.position for t in tiles] == [Position(x=1, y=0)]

    def test_bounds(self):
        """Test bounds of the explored region."""
        board = Board()
        board.reveal(Position(x=0, y=1), card("S7"))
        board.reveal(Position(x=-1, y=0), card("S8"))
        assert board.bounds() == (-1, 0, 0, 1)

    def test_copy_is_deep(self):
        """Test changing a copy leaves the original alone."""
        board = Board()
        board.reveal(Position(x=0, y=1), card("S7"))
        copy = board.copy()
        copy.get(Position(x=0, y=1)).clear()
        copy.reveal(Position(x=0, y=2), card("S8"))

        assert board.get(Position(x=0, y=1)).card is not None
        assert Position(x=0, y=2) not in board
