from __future__ import annotations

from typing import Dict, List

from .board import BoardInfo, CellKind, DeltaBoard, GameOver, Point, RenderBoard, RenderMessage
from .state import GameState

GLYPHS: Dict[CellKind, str] = {
    CellKind.EMPTY: '-',
    CellKind.SNAKE: '0',
    CellKind.SNAKE_HEAD: '$',
    CellKind.APPLE: 'X',
}


def initial_delta(gs: GameState) -> DeltaBoard:
    """Every non-empty cell of a state, for painting a fresh board."""
    cells: List = [(gs.snake.head, CellKind.SNAKE_HEAD)]
    cells.extend((p, CellKind.SNAKE) for p in gs.snake.body)
    cells.append((gs.apple, CellKind.APPLE))
    return tuple(cells)


class RenderState:
    """Full picture of the board as a renderer keeps it, updated only through render messages."""

    def __init__(self, bi: BoardInfo) -> None:
        self.board_info = bi
        self.cells: Dict[Point, CellKind] = {p: CellKind.EMPTY for p in bi.coords()}
        self.game_over = False

    @classmethod
    def from_game_state(cls, bi: BoardInfo, gs: GameState) -> 'RenderState':
        rs = cls(bi)
        rs.apply(RenderBoard(initial_delta(gs)))
        return rs

    def apply(self, message: RenderMessage) -> None:
        if isinstance(message, GameOver):
            self.game_over = True
            return
        for p, kind in message.delta:
            self.cells[p] = kind

    def diff(self, other: 'RenderState') -> Dict[Point, CellKind]:
        """Cells whose kind differs in other, with the kind they have there."""
        return {p: k for p, k in other.cells.items() if self.cells.get(p) != k}

    def pretty(self) -> str:
        """Generates the board as text, one line per row."""
        lines: List[str] = []
        for r in range(1, self.board_info.height + 1):
            row = [GLYPHS[self.cells[(r, c)]] for c in range(1, self.board_info.width + 1)]
            lines.append(' '.join(row))
        if self.game_over:
            lines.append('GAME OVER')
        return '\n'.join(lines)
