from backend.models.board import EMPTY, Board, Direction, Layout
from backend.models.piece import Piece, PieceType

__all__ = ["EMPTY", "Board", "Direction", "Layout", "Piece", "PieceType"]
