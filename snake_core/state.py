from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from . import config
from .apple import has_free_cell, place_apple
from .board import BoardInfo, Point
from .errors import InvalidState
from .geometry import Movement, advance, opposite
from .rng import RandomGen, mk_rng
from .snake import SnakeSeq, contains


@dataclass(frozen=True)
class GameState:
    """Everything a tick needs: the snake, the apple, the heading and the generator for the next apple."""
    snake: SnakeSeq
    apple: Point
    movement: Movement
    rng: RandomGen

    def with_movement(self, movement: Movement) -> 'GameState':
        return GameState(self.snake, self.apple, movement, self.rng)


def validate_state(bi: BoardInfo, gs: GameState) -> None:
    """Raises InvalidState if the state cannot exist on this board."""
    for p in gs.snake.cells():
        if not bi.in_bounds(p):
            raise InvalidState(f'Snake cell {p} is off the {bi.height}x{bi.width} board')
    if not bi.in_bounds(gs.apple):
        raise InvalidState(f'Apple {gs.apple} is off the {bi.height}x{bi.width} board')
    if contains(gs.apple, gs.snake):
        raise InvalidState(f'Apple {gs.apple} is on the snake')


def new_game(
    bi: BoardInfo,
    seed: int,
    heading: Optional[Movement] = None,
    body_length: Optional[int] = None,
) -> GameState:
    """Creates the starting state: head in the centre, body trailing behind the heading, apple placed at random."""
    heading = heading or Movement(config.DEFAULT_HEADING)
    body_length = config.DEFAULT_INITIAL_BODY if body_length is None else body_length
    if body_length < 0:
        raise InvalidState(f'Body length must not be negative, got {body_length}')
    head = ((bi.height + 1) // 2, (bi.width + 1) // 2)
    body: List[Point] = []
    p = head
    for _ in range(body_length):
        p = advance(p, opposite(heading), bi)
        body.append(p)
    # SnakeSeq rejects a body that wrapped onto itself.
    snake = SnakeSeq(head, tuple(body))
    if not has_free_cell(bi, snake):
        raise InvalidState(f'A {bi.height}x{bi.width} board cannot hold a snake of length {len(snake)} and an apple')
    apple, gen = place_apple(bi, snake, mk_rng(seed))
    return GameState(snake=snake, apple=apple, movement=heading, rng=gen)
