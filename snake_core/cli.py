from __future__ import annotations

import argparse
import logging
from typing import Iterator, Optional

from . import config
from .board import BOARD_FULL, BoardInfo, GameOver
from .engine import is_reversal, move, turn
from .geometry import Movement
from .render import RenderState
from .state import GameState, new_game

logger = logging.getLogger(__name__)

KEYS = {
    'n': Movement.NORTH,
    's': Movement.SOUTH,
    'e': Movement.EAST,
    'w': Movement.WEST,
}


def parse_heading(text: str) -> Optional[Movement]:
    """Maps a key or a movement name to a Movement. Empty input or '.' keeps the current heading."""
    text = text.strip()
    if text in ('', '.'):
        return None
    for m in Movement:
        if text.lower() == m.value.lower():
            return m
    if len(text) == 1 and text.lower() in KEYS:
        return KEYS[text.lower()]
    raise ValueError(f'Unknown heading: {text!r}')


def _scripted(moves: str) -> Iterator[Optional[Movement]]:
    for ch in moves:
        if ch.isspace():
            continue
        yield parse_heading(ch)


def _prompted() -> Iterator[Optional[Movement]]:
    while True:
        text = input('Heading (n/s/e/w, enter to keep, q to quit): ')
        if text.strip().lower() == 'q':
            return
        try:
            yield parse_heading(text)
        except ValueError:
            print('Could not parse. Try again.')


def play(bi: BoardInfo, state: GameState, headings: Iterator[Optional[Movement]]) -> GameState:
    """Runs ticks until the headings run out or the game ends, printing the board after each one."""
    view = RenderState.from_game_state(bi, state)
    print(view.pretty())
    for heading in headings:
        if heading is not None:
            if is_reversal(state, heading):
                print(f'Cannot reverse from {state.movement.value} to {heading.value}.')
            else:
                state = turn(state, heading)
        message, state = move(bi, state)
        view.apply(message)
        print()
        print(view.pretty())
        if isinstance(message, GameOver):
            print('Board full, you win!' if message.reason == BOARD_FULL else 'You ran into yourself.')
            break
    print(f'Final length: {len(state.snake)}')
    return state


def main() -> None:
    parser = argparse.ArgumentParser(description='Terminal snake driven one tick per heading')
    parser.add_argument('--height', type=int, default=config.DEFAULT_HEIGHT, help='Board rows')
    parser.add_argument('--width', type=int, default=config.DEFAULT_WIDTH, help='Board columns')
    parser.add_argument('--seed', type=int, default=0, help='RNG seed for apple placement')
    parser.add_argument('--heading', choices=[m.value for m in Movement], default=config.DEFAULT_HEADING,
                        help='Initial heading')
    parser.add_argument('--moves', default=None,
                        help="Scripted headings, one letter per tick (n/s/e/w, '.' keeps heading)")
    parser.add_argument('--verbose', action='store_true', help='Log every tick at DEBUG level')
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format='%(asctime)s [%(levelname)s] %(message)s',
    )

    bi = BoardInfo(height=args.height, width=args.width)
    state = new_game(bi, args.seed, heading=Movement(args.heading))
    logger.debug('New %dx%d game, seed %d, apple at %s', bi.height, bi.width, args.seed, state.apple)
    headings = _scripted(args.moves) if args.moves is not None else _prompted()
    play(bi, state, headings)
