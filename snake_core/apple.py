from __future__ import annotations

from typing import Tuple

from .board import BoardInfo, Point
from .errors import InvalidState
from .geometry import random_point
from .rng import RandomGen
from .snake import SnakeSeq, contains


def has_free_cell(bi: BoardInfo, snake: SnakeSeq) -> bool:
    return bi.area > len(snake)


def place_apple(bi: BoardInfo, snake: SnakeSeq, gen: RandomGen) -> Tuple[Point, RandomGen]:
    """Draws random points until one is off the snake.

    Requires bi.area > len(snake); a full board raises InvalidState instead of
    drawing forever.
    """
    if not has_free_cell(bi, snake):
        raise InvalidState(f'No free cell for an apple: snake of length {len(snake)} on {bi.height}x{bi.width}')
    p, gen = random_point(bi, gen)
    while contains(p, snake):
        p, gen = random_point(bi, gen)
    return p, gen
