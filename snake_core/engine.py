from __future__ import annotations

import logging
from typing import Tuple

from .apple import has_free_cell, place_apple
from .board import BOARD_FULL, COLLISION, BoardInfo, GameOver, Point, RenderBoard, RenderMessage
from .delta import emit_delta
from .geometry import Movement, advance, opposite
from .snake import SnakeSeq, push_head, slide
from .state import GameState

logger = logging.getLogger(__name__)


def next_head(bi: BoardInfo, gs: GameState) -> Point:
    """Where the head goes on this tick. Always wraps, never blocked by a wall."""
    return advance(gs.snake.head, gs.movement, bi)


def collides(candidate: Point, snake: SnakeSeq, growing: bool) -> bool:
    """Checks the candidate head against the snake as it will be once the tail has moved."""
    if candidate == snake.head and snake.body:
        return True
    blocking = snake.body if growing else snake.body[:-1]
    return candidate in blocking


def is_reversal(gs: GameState, m: Movement) -> bool:
    """True when m points straight back into the neck."""
    return bool(gs.snake.body) and m == opposite(gs.movement)


def turn(gs: GameState, m: Movement) -> GameState:
    """Changes the heading. Reversals are accepted; callers that forbid them check is_reversal first."""
    if m == gs.movement:
        return gs
    return gs.with_movement(m)


def move(bi: BoardInfo, gs: GameState) -> Tuple[RenderMessage, GameState]:
    """
    Advances the game by one tick.
    Returns the render message and the next state. On GameOver the input state
    comes back unchanged.
    """
    snake = gs.snake
    candidate = next_head(bi, gs)
    eating = candidate == gs.apple

    if collides(candidate, snake, growing=eating):
        logger.info('Snake of length %d hit itself at %s', len(snake), candidate)
        return GameOver(COLLISION), gs

    if eating:
        grown = push_head(snake, candidate)
        if not has_free_cell(bi, grown):
            logger.info('Snake of length %d filled the board', len(grown))
            return GameOver(BOARD_FULL), gs
        apple, gen = place_apple(bi, grown, gs.rng)
        logger.debug('Apple eaten at %s, new apple at %s, length %d', candidate, apple, len(grown))
        delta = emit_delta(snake.head, candidate, new_apple=apple)
        return RenderBoard(delta), GameState(grown, apple, gs.movement, gen)

    moved, vacated = slide(snake, candidate)
    delta = emit_delta(snake.head, candidate, vacated=vacated)
    return RenderBoard(delta), GameState(moved, gs.apple, gs.movement, gs.rng)
