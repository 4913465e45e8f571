"""
Grid value types: positions, directions and the wrap policy of the board.

Everything here is pure. The board is a square of ``size`` cells; under the
default ``WrapPolicy.WRAP`` it is topologically a torus, under
``WrapPolicy.BOUNDED`` leaving it is a wall collision.
"""

import math
from enum import Enum
from typing import NamedTuple, Tuple

from .constants import DEFAULT_GRID_SIZE


class GridPosition(NamedTuple):
    """A cell on the board. Compares equal to a plain ``(x, y)`` tuple."""

    x: int
    y: int

    def offset(self, direction: "Direction") -> "GridPosition":
        dx, dy = direction.vector
        return GridPosition(self.x + dx, self.y + dy)


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def vector(self) -> Tuple[int, int]:
        """Unit step. Up is +y, matching (0, 0) at the bottom left."""
        return _VECTORS[self]

    @property
    def angle(self) -> float:
        """Heading in radians, for renderers that rotate the head sprite."""
        return _ANGLES[self]

    @classmethod
    def from_str(cls, raw: str) -> "Direction":
        value = str(raw).strip().upper()
        try:
            return cls(value)
        except ValueError as e:
            raise ValueError(f"invalid direction: {raw!r}") from e


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_VECTORS = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_ANGLES = {
    Direction.UP: math.pi / 2,
    Direction.DOWN: -math.pi / 2,
    Direction.LEFT: math.pi,
    Direction.RIGHT: 0.0,
}


class WrapPolicy(Enum):
    WRAP = "wrap"
    BOUNDED = "bounded"

    @classmethod
    def from_str(cls, raw: str) -> "WrapPolicy":
        value = str(raw).strip().lower()
        try:
            return cls(value)
        except ValueError as e:
            available = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown wrap policy '{raw}'. Available policies: {available}"
            ) from e


def wrap(pos: Tuple[int, int], grid_size: int) -> GridPosition:
    """Fold a position back onto the board."""
    x, y = pos
    return GridPosition(
        ((x % grid_size) + grid_size) % grid_size,
        ((y % grid_size) + grid_size) % grid_size,
    )


def axis_distance(a: int, b: int, grid_size: int) -> int:
    """The shorter of the direct and wrap-around distances along one axis."""
    d = abs(a - b)
    return min(d, grid_size - d)


def toroidal_distance(a: Tuple[int, int], b: Tuple[int, int], grid_size: int) -> int:
    return axis_distance(a[0], b[0], grid_size) + axis_distance(a[1], b[1], grid_size)


def manhattan_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class Grid(NamedTuple):
    """Board dimensions plus the policy for leaving them."""

    size: int = DEFAULT_GRID_SIZE
    wrap_policy: WrapPolicy = WrapPolicy.WRAP

    def in_bounds(self, pos: Tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def wrap(self, pos: Tuple[int, int]) -> GridPosition:
        return wrap(pos, self.size)

    def step(self, pos: Tuple[int, int], direction: Direction) -> Tuple[GridPosition, bool]:
        """
        Move one cell from ``pos``.

        Returns:
            ``(position, hit_wall)``. ``hit_wall`` is only ever True under
            the bounded policy; the position is wrapped either way.
        """
        raw = GridPosition(*pos).offset(direction)
        hit_wall = self.wrap_policy is WrapPolicy.BOUNDED and not self.in_bounds(raw)
        return self.wrap(raw), hit_wall

    def distance(self, a: Tuple[int, int], b: Tuple[int, int]) -> int:
        if self.wrap_policy is WrapPolicy.BOUNDED:
            return manhattan_distance(a, b)
        return toroidal_distance(a, b, self.size)
