from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from repo root or as module
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

# Import the game facade
try:
    from .game import (  # type: ignore
        BoardInfo,
        CellKind,
        DeltaBoard,
        GameOver,
        GameState,
        InvalidState,
        Movement,
        RandomGen,
        RenderState,
        SnakeSeq,
        initial_delta,
        is_reversal,
        move,
        new_game,
        turn,
        validate_state,
    )
    from .snake_core import config  # type: ignore
except ImportError:
    from game import (  # type: ignore
        BoardInfo,
        CellKind,
        DeltaBoard,
        GameOver,
        GameState,
        InvalidState,
        Movement,
        RandomGen,
        RenderState,
        SnakeSeq,
        initial_delta,
        is_reversal,
        move,
        new_game,
        turn,
        validate_state,
    )
    from snake_core import config  # type: ignore

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Payload errors answered with 400 instead of 500
BAD_INPUT = (InvalidState, KeyError, TypeError, ValueError)


# ---------- JSON helpers ----------

def _point(obj: Any) -> tuple:
    if not isinstance(obj, (list, tuple)) or len(obj) != 2:
        raise InvalidState(f"point must be a [row, col] pair, got {obj!r}")
    r, c = obj
    return (int(r), int(c))


def _sized_board(height: int, width: int) -> BoardInfo:
    """Builds a BoardInfo no larger than config.MAX_SIDE on either side."""
    if height > config.MAX_SIDE or width > config.MAX_SIDE:
        raise InvalidState(f"board {height}x{width} exceeds the {config.MAX_SIDE} cell limit per side")
    return BoardInfo(height=height, width=width)


def board_to_json(bi: BoardInfo) -> Dict[str, Any]:
    return {"height": int(bi.height), "width": int(bi.width)}


def board_from_json(obj: Dict[str, Any]) -> BoardInfo:
    return _sized_board(int(obj["height"]), int(obj["width"]))


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "snake": {
            "head": [int(s.snake.head[0]), int(s.snake.head[1])],
            "body": [[int(r), int(c)] for (r, c) in s.snake.body],
        },
        "apple": [int(s.apple[0]), int(s.apple[1])],
        "movement": s.movement.value,
        "rng": str(s.rng.seed),  # string keeps 64-bit seeds exact in JavaScript clients
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    sn = obj["snake"]
    snake = SnakeSeq(_point(sn["head"]), tuple(_point(p) for p in sn.get("body", [])))
    return GameState(
        snake=snake,
        apple=_point(obj["apple"]),
        movement=Movement(str(obj["movement"])),
        rng=RandomGen(int(obj["rng"])),
    )


def delta_to_json(delta: DeltaBoard) -> List[Dict[str, Any]]:
    return [{"cell": [int(r), int(c)], "kind": kind.value} for ((r, c), kind) in delta]


def _parse_movement(value: Any) -> Optional[Movement]:
    if value is None:
        return None
    return Movement(str(value))


def _load(body: Dict[str, Any]) -> tuple:
    bi = board_from_json(body["board"])
    state = json_to_state(body["state"])
    validate_state(bi, state)
    return bi, state


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _bad_request(e: Exception) -> Any:
    logger.warning("Rejected payload: %s", e)
    return jsonify({"ok": False, "error": f"bad request: {e}"}), 400


# ---------- Game API ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    try:
        bi = _sized_board(
            int(body.get("height", config.DEFAULT_HEIGHT)),
            int(body.get("width", config.DEFAULT_WIDTH)),
        )
        seed = int(body.get("seed", 0))
        heading = _parse_movement(body.get("heading"))
        state = new_game(bi, seed, heading=heading)
    except BAD_INPUT as e:
        return _bad_request(e)
    view = RenderState.from_game_state(bi, state)
    return jsonify({
        "ok": True,
        "board": board_to_json(bi),
        "state": state_to_json(state),
        "cells": delta_to_json(initial_delta(state)),
        "text": view.pretty(),
    })


@app.post("/api/tick")
def api_tick() -> Any:
    body = _body()
    try:
        bi, state = _load(body)
        heading = _parse_movement(body.get("movement"))
    except BAD_INPUT as e:
        return _bad_request(e)

    if heading is not None:
        if is_reversal(state, heading) and body.get("allowReverse") is not True:
            return jsonify({
                "ok": False,
                "error": f"Cannot reverse from {state.movement.value} to {heading.value}",
                "state": state_to_json(state),
            }), 400
        state = turn(state, heading)

    view = RenderState.from_game_state(bi, state)
    message, next_state = move(bi, state)
    view.apply(message)
    game_over = isinstance(message, GameOver)
    return jsonify({
        "ok": True,
        "gameOver": game_over,
        "reason": message.reason if game_over else None,
        "delta": [] if game_over else delta_to_json(message.delta),
        "state": state_to_json(next_state),
        "length": len(next_state.snake),
        "text": view.pretty(),
    })


@app.post("/api/render")
def api_render() -> Any:
    body = _body()
    try:
        bi, state = _load(body)
    except BAD_INPUT as e:
        return _bad_request(e)
    view = RenderState.from_game_state(bi, state)
    cells = [
        {"cell": [r, c], "kind": kind.value}
        for (r, c), kind in sorted(view.cells.items())
        if kind is not CellKind.EMPTY
    ]
    return jsonify({"ok": True, "text": view.pretty(), "cells": cells})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s [%(levelname)s] %(message)s")
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")), debug=debug)
