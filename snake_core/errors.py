from __future__ import annotations


class InvalidState(ValueError):
    """Raised when a caller breaks a precondition of the engine (bad board, overlapping snake, full board)."""
