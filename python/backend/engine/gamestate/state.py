"""Tracks the mutable state of a puzzle being played or replayed."""

from __future__ import annotations

import time

from backend.engine.gamesolver.node import Move
from backend.models.board import Board, Layout


class GameState:
    """Holds the board, its starting layout, and the moves made so far."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.start: Layout = board.capture_layout()
        self.history: list[Move] = []
        self._start_time: float = time.time()

    @property
    def elapsed_time(self) -> float:
        return time.time() - self._start_time

    # -- moves ----------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    def record(self, move: Move) -> None:
        self.history.append(move)

    def pop(self) -> Move | None:
        return self.history.pop() if self.history else None

    def reset(self) -> None:
        self.history.clear()
        self._start_time = time.time()

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
