from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .board import Point
from .errors import InvalidState


@dataclass(frozen=True)
class SnakeSeq:
    """A non-empty snake: a mandatory head plus the body ordered from neck to tail."""
    head: Point
    body: Tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        cells = (self.head,) + tuple(self.body)
        if len(set(cells)) != len(cells):
            raise InvalidState(f'Snake overlaps itself: {cells}')

    @property
    def tail(self) -> Optional[Point]:
        """The last body cell, or None for a head-only snake."""
        return self.body[-1] if self.body else None

    def __len__(self) -> int:
        return 1 + len(self.body)

    def cells(self) -> Iterable[Point]:
        yield self.head
        yield from self.body


def contains(p: Point, s: SnakeSeq) -> bool:
    """Checks if a point is the head or any part of the body."""
    return p == s.head or p in s.body


def push_head(s: SnakeSeq, new_head: Point) -> SnakeSeq:
    """Moves the head to new_head; the old head becomes the neck."""
    return SnakeSeq(new_head, (s.head,) + s.body)


def drop_tail(s: SnakeSeq) -> SnakeSeq:
    # A head-only snake is returned as is.
    if not s.body:
        return s
    return SnakeSeq(s.head, s.body[:-1])


def slide(s: SnakeSeq, new_head: Point) -> Tuple[SnakeSeq, Point]:
    """push_head followed by drop_tail in one step.

    Returns the moved snake and the cell it vacated. The new head may land on
    the cell the tail leaves; for a head-only snake the vacated cell is the old head.
    """
    trail = (s.head,) + s.body
    return SnakeSeq(new_head, trail[:-1]), trail[-1]
