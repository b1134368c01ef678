"""Core gameplay logic — applies piece moves and checks the goal."""

from __future__ import annotations

from collections.abc import Iterable

from backend.engine.gamesolver import Move, SolutionPath, Solver, Strategy
from backend.engine.gamestate import GameState
from backend.engine.movegen import legal_moves, refresh_moves
from backend.models.board import Board, Direction


class GamePlay:
    """Orchestrates a single session on one board.

    Moves can come from the player or from the solver. A solution fetched
    by :meth:`next_move` is kept as a plan and followed one move per call
    until the player does something else.
    """

    def __init__(self, board: Board) -> None:
        refresh_moves(board)
        self.state = GameState(board)
        self._plan: list[Move] = []

    @property
    def board(self) -> Board:
        return self.state.board

    # -- movement -------------------------------------------------------------

    def move(self, piece_id: int, direction: Direction) -> bool:
        """Slide piece *piece_id* one square in *direction*.

        Returns True if the move was valid and applied.
        """
        board = self.board
        if not board.move(board.piece(piece_id), direction):
            return False
        move = Move(piece_id, direction)
        self.state.record(move)
        if self._plan and self._plan[0] == move:
            self._plan.pop(0)
        else:
            self._plan.clear()
        return True

    def nudge(self, piece_id: int) -> Direction | None:
        """Move *piece_id* in the first of its legal directions, if any."""
        piece = self.board.piece(piece_id)
        if not piece.moves:
            return None
        direction = piece.moves[0]
        self.move(piece_id, direction)
        return direction

    def play(self, moves: Iterable[Move]) -> int:
        """Apply *moves* in order, stopping at the first invalid one.

        Returns how many moves were applied.
        """
        applied = 0
        for piece_id, direction in moves:
            if not self.move(piece_id, direction):
                break
            applied += 1
        return applied

    def undo(self) -> bool:
        self._plan.clear()
        last = self.state.pop()
        if last is None:
            return False
        board = self.board
        return board.move(board.piece(last.piece_id), last.direction.opposite)

    def restart(self) -> None:
        self._plan.clear()
        self.board.apply_layout(self.state.start)
        refresh_moves(self.board)
        self.state.reset()

    # -- solver assistance ----------------------------------------------------

    def next_move(self, strategy: Strategy | str = Strategy.ITERATIVE) -> Move | None:
        """Play the next move towards the goal from the current layout.

        Returns the move, or None when the board is solved or the goal
        cannot be reached from here.
        """
        if not self._plan:
            solution = Solver.solve(self.board, strategy)
            if solution is None:
                return None
            self._plan = list(solution.steps)
        if not self._plan:
            return None
        move = self._plan[0]
        self.move(*move)
        return move

    def solve(self, strategy: Strategy | str = Strategy.ITERATIVE) -> SolutionPath | None:
        """Finish the puzzle from the current layout with the solver's moves."""
        solution = Solver.solve(self.board, strategy)
        if solution is not None:
            self.play(solution)
        return solution

    # -- queries --------------------------------------------------------------

    def available_moves(self) -> list[Move]:
        return [Move(pid, d) for pid, d in legal_moves(self.board)]

    def hint(self) -> Move | None:
        return Solver.hint(self.board)

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
