"""Board coordinates and movement directions."""

from enum import Enum

from pydantic import BaseModel


class Direction(str, Enum):
    """Orthogonal movement direction. North is +y."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) offset for one step in this direction."""
        return DIRECTION_DELTAS[self]


DIRECTION_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


class Position(BaseModel, frozen=True):
    """Integer board coordinate, usable as a dict key."""

    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        """Position one step away in the given direction."""
        dx, dy = direction.delta
        return Position(x=self.x + dx, y=self.y + dy)

    def neighbors(self) -> list["Position"]:
        """The four orthogonal neighbours (north, south, east, west)."""
        return [self.step(d) for d in Direction]

    def is_adjacent_to(self, other: "Position") -> bool:
        """Check if other is exactly one orthogonal step away."""
        return abs(self.x - other.x) + abs(self.y - other.y) == 1

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


ORIGIN = Position(x=0, y=0)
