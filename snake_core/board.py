from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from .errors import InvalidState

Point = Tuple[int, int]  # (row, col), 1-indexed


class CellKind(Enum):
    EMPTY = 'Empty'
    SNAKE = 'Snake'
    SNAKE_HEAD = 'SnakeHead'
    APPLE = 'Apple'


DeltaBoard = Tuple[Tuple[Point, CellKind], ...]


@dataclass(frozen=True)
class BoardInfo:
    """Fixed dimensions of the board. Rows run 1..height, columns 1..width."""
    height: int
    width: int

    def __post_init__(self) -> None:
        if self.height < 1 or self.width < 1:
            raise InvalidState(f'Board must be at least 1x1, got {self.height}x{self.width}')

    @property
    def area(self) -> int:
        return self.height * self.width

    def in_bounds(self, p: Point) -> bool:
        """Checks that a point lies on the board."""
        r, c = p
        return 1 <= r <= self.height and 1 <= c <= self.width

    def coords(self) -> Iterable[Point]:
        """Iterates over all points on the board, row by row."""
        for r in range(1, self.height + 1):
            for c in range(1, self.width + 1):
                yield (r, c)


@dataclass(frozen=True)
class RenderBoard:
    """Cells the renderer must repaint after a tick."""
    delta: DeltaBoard


COLLISION = 'collision'
BOARD_FULL = 'board_full'


@dataclass(frozen=True)
class GameOver:
    """The game ended; nothing on the board changes.

    reason is COLLISION when the snake ran into itself and BOARD_FULL when it
    grew over the last free cell.
    """
    reason: str = COLLISION


RenderMessage = Union[RenderBoard, GameOver]
