"""Sparse, lazily revealed game board."""

from typing import Iterator

from .card import Card
from .position import ORIGIN, Position
from .tile import Tile


class Board:
    """Mapping from positions to revealed tiles.

    The domain is unbounded. A position without a tile is unexplored, which
    is distinct from an explored empty tile. The central chamber at the
    origin exists from construction and never holds a card.
    """

    def __init__(self, tiles: dict[Position, Tile] | None = None):
        """Initialize board.

        Args:
            tiles: Existing tiles to copy. The central chamber is added if
                missing.
        """
        self._tiles: dict[Position, Tile] = (
            {pos: tile.model_copy(deep=True) for pos, tile in tiles.items()}
            if tiles
            else {}
        )
        if ORIGIN not in self._tiles:
            self._tiles[ORIGIN] = Tile(x=ORIGIN.x, y=ORIGIN.y)

    @property
    def central_chamber(self) -> Tile:
        return self._tiles[ORIGIN]

    def get(self, position: Position) -> Tile | None:
        """Get the tile at a position, or None if unexplored."""
        return self._tiles.get(position)

    def get_xy(self, x: int, y: int) -> Tile | None:
        return self._tiles.get(Position(x=x, y=y))

    def is_revealed(self, position: Position) -> bool:
        return position in self._tiles

    def reveal(self, position: Position, card: Card) -> Tile:
        """Materialize a tile holding a freshly drawn card.

        Args:
            position: Unexplored position to reveal.
            card: Card drawn for this position.

        Returns:
            The new tile.

        Raises:
            ValueError: If the position already has a tile.
        """
        if position in self._tiles:
            raise ValueError(f"Tile at {position} is already revealed")
        tile = Tile(x=position.x, y=position.y, card=card.placed_at(position))
        self._tiles[position] = tile
        return tile

    def unexplored_neighbors(self, position: Position) -> list[Position]:
        """Orthogonal neighbours of a position that have no tile yet."""
        return [p for p in position.neighbors() if p not in self._tiles]

    def adjacent_tiles(self, position: Position) -> list[Tile]:
        """Revealed tiles orthogonally adjacent to a position."""
        return [self._tiles[p] for p in position.neighbors() if p in self._tiles]

    def bounds(self) -> tuple[int, int, int, int]:
        """Get (min_x, max_x, min_y, max_y) of the explored region."""
        xs = [p.x for p in self._tiles]
        ys = [p.y for p in self._tiles]
        return min(xs), max(xs), min(ys), max(ys)

    def copy(self) -> "Board":
        """Create a deep copy of this board."""
        return Board(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, position: Position) -> bool:
        return position in self._tiles

    def __str__(self) -> str:
        return f"Board({len(self._tiles)} tiles)"

    def __repr__(self) -> str:
        return f"Board({list(self._tiles.values())!r})"
