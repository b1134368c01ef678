"""Sliding block puzzle solver.

Breadth-first search over single-square slides. Each queued node holds a
layout and one legal move from it; processing a node resets the board to
that layout, performs the move and checks the result against the goal.
Layouts already reached (up to swapping same-type pieces) are not expanded
again.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import StrEnum

from backend import config
from backend.engine.gamesolver.node import (
    Move,
    SearchNode,
    SearchStats,
    SolutionPath,
)
from backend.engine.movegen import refresh_moves
from backend.engine.visited import LayoutTrie
from backend.models.board import Board, Direction, Layout

logger = logging.getLogger(__name__)


class Strategy(StrEnum):
    ITERATIVE = "iterative"
    RECURSIVE = "recursive"


class _Search:
    """State of one breadth-first run against a board."""

    def __init__(self, board: Board, progress_interval: int) -> None:
        self.board = board
        self.trie = LayoutTrie.for_board(board)
        self.pending: deque[SearchNode] = deque()
        self.stats = SearchStats()
        self.progress_interval = max(progress_interval, 1)

    def seed(self) -> SearchNode:
        board = self.board
        refresh_moves(board)
        layout = board.capture_layout()
        root = SearchNode.root(layout)
        self._enqueue_children(root, layout)
        return root

    def step(self) -> SearchNode | None:
        """Process the oldest pending node; return a terminal node on success."""
        board = self.board
        node = self.pending.popleft()
        stats = self.stats
        stats.expanded += 1
        if node.depth > stats.max_depth:
            stats.max_depth = node.depth
        if stats.expanded % self.progress_interval == 0:
            logger.debug(
                "Expanded %d nodes (depth %d, %d pending, %d layouts seen)",
                stats.expanded, node.depth, len(self.pending), len(self.trie),
            )

        board.apply_layout(node.layout)
        if not board.move(board.pieces[node.piece_id], node.direction):
            raise RuntimeError(
                f"Queued move {node.move} is illegal in its own layout."
            )

        layout = board.capture_layout()
        if board.matches(layout):
            return node.child(None, Direction.NONE, layout)

        if self.trie.add_layout(layout, board.pieces):
            stats.duplicates += 1
            node.detach()
            return None

        self._enqueue_children(node, layout)
        return None

    def run_iterative(self) -> SearchNode | None:
        while self.pending:
            found = self.step()
            if found is not None:
                return found
        return None

    def run_recursive(self) -> SearchNode | None:
        # One frame per processed node; deep searches hit RecursionError.
        if not self.pending:
            return None
        found = self.step()
        if found is not None:
            return found
        return self.run_recursive()

    def _enqueue_children(self, node: SearchNode, layout: Layout) -> None:
        for piece in self.board.pieces:
            for direction in piece.moves:
                self.pending.append(node.child(piece.id, direction, layout))
                self.stats.generated += 1


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        strategy: Strategy | str = Strategy.ITERATIVE,
        progress_interval: int = config.PROGRESS_INTERVAL,
    ) -> SolutionPath | None:
        """Return a path from *board*'s current layout to its goal.

        Returns ``None`` when the goal is unreachable. The board is put
        back in its starting layout afterwards.
        """
        strategy = Strategy(strategy)
        start = board.capture_layout()
        refresh_moves(board)

        if board.matches(start):
            logger.info("Board already matches the goal")
            return SolutionPath(SearchNode.root(start).child(None, Direction.NONE, start))

        search = _Search(board, progress_interval)
        search.seed()
        logger.info(
            "Searching %d×%d board with %d pieces of %d types (%s)",
            board.height, board.width, len(board.pieces), len(board.types),
            strategy.value,
        )

        try:
            if strategy is Strategy.RECURSIVE:
                terminal = search.run_recursive()
            else:
                terminal = search.run_iterative()
        finally:
            board.apply_layout(start)
            refresh_moves(board)

        stats = search.stats
        stats.distinct = len(search.trie)

        if terminal is None:
            logger.info(
                "No solution after expanding %d nodes (%d distinct layouts)",
                stats.expanded, stats.distinct,
            )
            return None

        solution = SolutionPath(terminal, stats)
        logger.info(
            "Solved in %d moves after expanding %d nodes (%d distinct layouts, %d duplicates)",
            len(solution), stats.expanded, stats.distinct, stats.duplicates,
        )
        return solution

    @staticmethod
    def hint(board: Board) -> Move | None:
        """Return the first move of a solution, or ``None`` if solved / unsolvable."""
        solution = Solver.solve(board)
        if solution is None or not solution.steps:
            return None
        return solution.steps[0]

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach its goal layout."""
        return Solver.solve(board) is not None
