from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from .board import BoardInfo, Point
from .rng import RandomGen


class Movement(Enum):
    NORTH = 'North'
    SOUTH = 'South'
    EAST = 'East'
    WEST = 'West'


_STEPS: Dict[Movement, Tuple[int, int]] = {
    Movement.NORTH: (-1, 0),
    Movement.SOUTH: (1, 0),
    Movement.EAST: (0, 1),
    Movement.WEST: (0, -1),
}

_OPPOSITES: Dict[Movement, Movement] = {
    Movement.NORTH: Movement.SOUTH,
    Movement.SOUTH: Movement.NORTH,
    Movement.EAST: Movement.WEST,
    Movement.WEST: Movement.EAST,
}


def opposite(m: Movement) -> Movement:
    """Returns the movement pointing the other way."""
    return _OPPOSITES[m]


def wrap_coord(coord: int, size: int) -> int:
    """Wraps a 1-indexed coordinate onto 1..size."""
    return (coord - 1) % size + 1


def step(p: Point, m: Movement) -> Point:
    """Steps one cell without wrapping; the result may be off the board."""
    dr, dc = _STEPS[m]
    return p[0] + dr, p[1] + dc


def advance(p: Point, m: Movement, bi: BoardInfo) -> Point:
    """Steps one cell and wraps both axes, so the board behaves as a torus."""
    r, c = step(p, m)
    return wrap_coord(r, bi.height), wrap_coord(c, bi.width)


def is_at_wall(p: Point, m: Movement, bi: BoardInfo) -> bool:
    """True when the unwrapped step would leave the board. Movement is never blocked by it."""
    return not bi.in_bounds(step(p, m))


def random_point(bi: BoardInfo, gen: RandomGen) -> Tuple[Point, RandomGen]:
    """Draws a uniformly random point on the board."""
    r, gen = gen.randint(1, bi.height)
    c, gen = gen.randint(1, bi.width)
    return (r, c), gen
