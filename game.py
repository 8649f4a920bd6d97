from __future__ import annotations

# Facade module that re-exports the snake core.
# Used by the Flask app and the tests; single-responsibility modules live under snake_core/*.

# Prefer relative imports when loaded as part of a package, then the top-level package.
try:
    from .snake_core.board import (  # type: ignore
        BOARD_FULL,
        COLLISION,
        BoardInfo,
        CellKind,
        DeltaBoard,
        GameOver,
        Point,
        RenderBoard,
        RenderMessage,
    )
    from .snake_core.errors import InvalidState  # type: ignore
    from .snake_core.rng import RandomGen, mk_rng  # type: ignore
    from .snake_core.geometry import (  # type: ignore
        Movement,
        opposite,
        wrap_coord,
        advance,
        is_at_wall,
        random_point,
    )
    from .snake_core.snake import SnakeSeq, contains, push_head, drop_tail, slide  # type: ignore
    from .snake_core.apple import place_apple, has_free_cell  # type: ignore
    from .snake_core.delta import emit_delta  # type: ignore
    from .snake_core.state import GameState, new_game, validate_state  # type: ignore
    from .snake_core.engine import next_head, collides, is_reversal, turn, move  # type: ignore
    from .snake_core.render import RenderState, initial_delta  # type: ignore
except ImportError:
    from snake_core.board import (  # type: ignore
        BOARD_FULL,
        COLLISION,
        BoardInfo,
        CellKind,
        DeltaBoard,
        GameOver,
        Point,
        RenderBoard,
        RenderMessage,
    )
    from snake_core.errors import InvalidState  # type: ignore
    from snake_core.rng import RandomGen, mk_rng  # type: ignore
    from snake_core.geometry import (  # type: ignore
        Movement,
        opposite,
        wrap_coord,
        advance,
        is_at_wall,
        random_point,
    )
    from snake_core.snake import SnakeSeq, contains, push_head, drop_tail, slide  # type: ignore
    from snake_core.apple import place_apple, has_free_cell  # type: ignore
    from snake_core.delta import emit_delta  # type: ignore
    from snake_core.state import GameState, new_game, validate_state  # type: ignore
    from snake_core.engine import next_head, collides, is_reversal, turn, move  # type: ignore
    from snake_core.render import RenderState, initial_delta  # type: ignore


def main() -> None:
    # CLI driver delegated to snake_core.cli
    try:
        from .snake_core.cli import main as _main  # type: ignore
    except ImportError:
        from snake_core.cli import main as _main  # type: ignore
    _main()


if __name__ == '__main__':
    main()
