"""Piece shapes and piece instances."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from backend.models.direction import Direction


@dataclass(frozen=True)
class PieceType:
    """A rectangular shape shared by every piece registered against it.

    ``id`` is the type's index in the board's type list; the goal layout
    refers to types by this number.
    """

    id: int
    height: int
    width: int

    @property
    def area(self) -> int:
        return self.height * self.width


@dataclass(eq=False)
class Piece:
    """One piece on the board, anchored at its top-left cell."""

    id: int
    type: PieceType
    row: int
    col: int
    moves: list[Direction] = field(default_factory=list)

    @property
    def position(self) -> tuple[int, int]:
        return self.row, self.col

    def cells(self) -> list[tuple[int, int]]:
        """Return every (row, col) covered by this piece."""
        return [
            (r, c)
            for r in range(self.row, self.row + self.type.height)
            for c in range(self.col, self.col + self.type.width)
        ]
