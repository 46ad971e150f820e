"""Tests for the console renderer."""

from queens_garden.game.engine import GameEngine
from queens_garden.models.board import Board
from queens_garden.models.position import ORIGIN, Position
from queens_garden.rendering import ConsoleRenderer, NullRenderer

from conftest import card, make_deck


class TestConsoleRenderer:
    """Tests for ConsoleRenderer output."""

    def test_board_lines(self):
        """Test rows run north to south with a margin of unexplored cells."""
        board = Board()
        board.reveal(Position(x=0, y=1), card("S7"))
        board.reveal(Position(x=1, y=0), card("D10"))
        board.get(Position(x=1, y=0)).clear()

        lines = ConsoleRenderer().board_lines(board, ORIGIN)

        assert len(lines) == 4
        assert "7" in lines[1]
        assert "[P]" in lines[2]
        assert "[ ]" in lines[2]
        assert "[C]" not in "".join(lines)
        assert lines[0].split() == [".", ".", ".", "."]

    def test_chamber_shown_when_player_away(self):
        board = Board()
        board.reveal(Position(x=0, y=1), card("S7"))
        lines = ConsoleRenderer().board_lines(board, Position(x=0, y=1))
        assert "[C]" in lines[2]

    def test_game_output(self, capsys):
        """Test setup, damage and victory messages reach stdout."""
        engine = GameEngine(renderer=ConsoleRenderer(show_board=False))
        engine.initialize("hearts", deck=make_deck("S7", "H5", "H6", "H8"))
        out = capsys.readouterr().out
        assert "QUEEN'S GARDEN" in out
        assert "Final King suit: diamonds" in out
        assert "Turn 0 | HP 20/20" in out

        engine.move("north")
        out = capsys.readouterr().out
        assert "Took 7 damage! Health: 13" in out
        assert "Turn 1 | HP 13/20" in out


def test_null_renderer_is_silent(capsys):
    engine = GameEngine(renderer=NullRenderer())
    engine.initialize("hearts", deck=make_deck("S7", "H5", "H6", "H8"))
    engine.move("north")
    assert capsys.readouterr().out == ""
