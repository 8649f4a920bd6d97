from __future__ import annotations

from typing import Dict, List, Optional, Set

from .board import CellKind, DeltaBoard, Point


def emit_delta(
    prev_head: Point,
    new_head: Point,
    vacated: Optional[Point] = None,
    new_apple: Optional[Point] = None,
) -> DeltaBoard:
    """
    Lists the cells a tick changed, with their new kind.
    Pass vacated when the tail was dropped and new_apple when the apple was eaten.
    Order is new head, old head, then the vacated cell or the new apple.
    Cells that end up with the kind they started with are left out, which covers
    a head chasing its own tail and a head-only snake on a 1-wide board.
    """
    before: Dict[Point, CellKind] = {}
    if new_apple is not None:
        before[new_apple] = CellKind.EMPTY
    before[new_head] = CellKind.APPLE if new_apple is not None else CellKind.EMPTY
    if vacated is not None:
        before[vacated] = CellKind.SNAKE
    before[prev_head] = CellKind.SNAKE_HEAD

    after: Dict[Point, CellKind] = {}
    if vacated is not None:
        after[vacated] = CellKind.EMPTY
    after[prev_head] = CellKind.EMPTY if prev_head == vacated else CellKind.SNAKE
    if new_apple is not None:
        after[new_apple] = CellKind.APPLE
    after[new_head] = CellKind.SNAKE_HEAD

    order = [new_head, prev_head, vacated, new_apple]
    out: List = []
    seen: Set[Point] = set()
    for p in order:
        if p is None or p in seen:
            continue
        seen.add(p)
        if after[p] != before[p]:
            out.append((p, after[p]))
    return tuple(out)
