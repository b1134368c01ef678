"""Builds stock puzzles and scrambled, guaranteed-solvable boards."""

from __future__ import annotations

import random

from backend.engine.movegen import legal_moves, refresh_moves
from backend.models.board import EMPTY, Board, Direction


class GameGenerator:
    """Creates puzzles, scrambling from a solved layout where needed."""

    @staticmethod
    def solved() -> Board:
        """Return the classic ten-piece set in its goal layout.

        ::

            V V V V
            V V V V
            H H s s
            s B B .
            s B B .
        """
        board = Board(5, 4)
        big = board.add_type(2, 2)
        tall = board.add_type(2, 1)
        wide = board.add_type(1, 2)
        small = board.add_type(1, 1)

        for col in range(4):
            board.add_piece(tall, 0, col)
        board.add_piece(wide, 2, 0)
        for row, col in ((2, 2), (2, 3), (3, 0), (4, 0)):
            board.add_piece(small, row, col)
        board.add_piece(big, 3, 1)

        GameGenerator.freeze_goal(board)
        return board

    @staticmethod
    def classic() -> Board:
        """The "Forget-me-not" opening: bring the 2×2 block to the exit.

        The goal is the nearest arrangement with the block at the bottom
        centre, 116 slides away.

        ::

            V B B V        V V V V
            V B B V        V V V V
            V H H V   ->   s s H H
            V s s V        . B B s
            s . . s        . B B s
        """
        board = Board(5, 4)
        big = board.add_type(2, 2)
        tall = board.add_type(2, 1)
        wide = board.add_type(1, 2)
        small = board.add_type(1, 1)

        board.add_piece(big, 0, 1)
        for row, col in ((0, 0), (0, 3), (2, 0), (2, 3)):
            board.add_piece(tall, row, col)
        board.add_piece(wide, 2, 1)
        for row, col in ((3, 1), (3, 2), (4, 0), (4, 3)):
            board.add_piece(small, row, col)

        for col in range(4):
            board.set_goal(tall.id, 0, col)
        board.set_goal(wide.id, 2, 2)
        for row, col in ((2, 0), (2, 1), (3, 3), (4, 3)):
            board.set_goal(small.id, row, col)
        board.set_goal(big.id, 3, 1)
        refresh_moves(board)
        return board

    @staticmethod
    def corner() -> Board:
        """A lone 1×1 piece that has to cross the board diagonally."""
        board = Board(5, 4)
        board.add_piece(board.add_type(1, 1), 0, 0)
        board.set_goal(0, 4, 3)
        refresh_moves(board)
        return board

    @staticmethod
    def nook() -> Board:
        """A 2×2 block that must tuck into the bottom-right of a 3×3 box.

        ::

            B B s        s . .
            B B .   ->   . B B
            s . .        s B B
        """
        board = Board(3, 3)
        big = board.add_type(2, 2)
        small = board.add_type(1, 1)
        board.add_piece(big, 0, 0)
        board.add_piece(small, 0, 2)
        board.add_piece(small, 2, 0)
        board.set_goal(big.id, 1, 1)
        board.set_goal(small.id, 0, 0)
        board.set_goal(small.id, 2, 0)
        refresh_moves(board)
        return board

    @staticmethod
    def scramble(board: Board, moves: int, rng: random.Random | None = None) -> None:
        """Apply *moves* random legal slides to *board* in place.

        Immediately undoing the previous slide is avoided when anything
        else is possible.
        """
        rng = rng or random.Random()
        refresh_moves(board)
        prev: tuple[int, Direction] | None = None

        for _ in range(moves):
            options = legal_moves(board)
            if not options:
                return
            if prev in options and len(options) > 1:
                options.remove(prev)
            piece_id, direction = rng.choice(options)
            board.move(board.pieces[piece_id], direction)
            prev = (piece_id, direction.opposite)

    @staticmethod
    def generate(moves: int = 60, seed: int | None = None) -> Board:
        """Return a scrambled classic board whose goal is the solved layout."""
        rng = random.Random(seed)
        while True:
            board = GameGenerator.solved()
            GameGenerator.scramble(board, moves, rng)
            # Ensure the board is not already solved
            if moves == 0 or not board.is_solved():
                return board

    @staticmethod
    def stock(name: str, moves: int = 60, seed: int | None = None) -> Board:
        """Return a stock puzzle by name (see ``STOCK_PUZZLES``)."""
        if name == "classic":
            return GameGenerator.classic()
        if name == "klotski":
            return GameGenerator.generate(moves, seed)
        if name == "corner":
            return GameGenerator.corner()
        if name == "nook":
            return GameGenerator.nook()
        raise ValueError(
            f"Unknown stock puzzle {name!r}; choose from {', '.join(STOCK_PUZZLES)}."
        )

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def freeze_goal(board: Board) -> None:
        """Make the board's current layout its goal."""
        board.goal = [EMPTY] * board.cell_count
        for p in board.pieces:
            board.set_goal(p.type.id, p.row, p.col)
        refresh_moves(board)


STOCK_PUZZLES = ("classic", "klotski", "corner", "nook")
