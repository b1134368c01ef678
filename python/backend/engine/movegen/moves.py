"""Legal-move generation for board pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from backend.models.direction import SLIDES

if TYPE_CHECKING:
    from backend.models.board import Board
    from backend.models.direction import Direction
    from backend.models.piece import Piece


def store_moves(board: Board, piece: Piece) -> None:
    """Replace *piece*'s legal-move list with the slides that fit right now."""
    piece.moves.clear()
    for direction in SLIDES:
        dr, dc = direction.offset
        if board.fits(piece, piece.row + dr, piece.col + dc):
            piece.moves.append(direction)


def refresh_moves(board: Board) -> None:
    """Recompute legal moves for every piece on *board*.

    One piece sliding can open or close moves for any other, so this runs
    for the whole board after each successful move.
    """
    for piece in board.pieces:
        store_moves(board, piece)


def legal_moves(board: Board) -> list[tuple[int, Direction]]:
    """Return ``(piece_id, direction)`` for every stored legal move, in order."""
    return [(p.id, d) for p in board.pieces for d in p.moves]
