"""
Snake core Python package.

This package holds the game-state engine of the terminal snake game as
pure-logic helpers, kept apart from the terminal driver and the web API.
Modules:
- board.py: Point, BoardInfo, CellKind, render messages
- rng.py: RandomGen (generator state threaded by value)
- geometry.py: Movement, wrap-around stepping, random points
- snake.py: SnakeSeq and membership queries
- apple.py: apple placement
- delta.py: minimal cell diff
- state.py: GameState and the initial game
- engine.py: one tick of movement
- render.py: reference full-board renderer
"""
