"""Board model for the sliding block puzzle."""

from __future__ import annotations

from backend.engine.movegen import moves as movegen
from backend.models.direction import SLIDES, Direction
from backend.models.piece import Piece, PieceType

__all__ = [
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "EMPTY",
    "SLIDES",
    "Board",
    "Direction",
    "Layout",
]

DEFAULT_HEIGHT = 5
DEFAULT_WIDTH = 4

# Marks a vacant grid cell, and a cell with no anchored piece in a layout.
EMPTY = -1

# Flattened row-major snapshot: the id of the piece anchored at each cell.
Layout = tuple[int, ...]


class Board:
    """A rectangular grid of rectangular pieces plus the layout to reach.

    ``grid`` holds the *type* id covering each cell (or ``EMPTY``).
    ``goal`` is a flattened row-major array of type ids anchored at each
    cell; every cell of it is a constraint.
    """

    def __init__(self, height: int = DEFAULT_HEIGHT, width: int = DEFAULT_WIDTH) -> None:
        if height < 1 or width < 1:
            raise ValueError(
                f"Board dimensions must be positive, got {height}×{width}."
            )
        self.height = height
        self.width = width
        self.grid: list[list[int]] = [[EMPTY] * width for _ in range(height)]
        self.pieces: list[Piece] = []
        self.types: list[PieceType] = []
        self.goal: list[int] = [EMPTY] * (height * width)

    # -- construction helpers -------------------------------------------------

    def add_type(self, height: int, width: int) -> PieceType:
        """Register the next piece type; ids follow registration order."""
        piece_type = PieceType(id=len(self.types), height=height, width=width)
        self.types.append(piece_type)
        return piece_type

    def add_piece(self, piece_type: PieceType | int, row: int, col: int) -> Piece:
        """Place the next piece and mark its footprint on the grid.

        Bounds and overlap are not checked here; the loader does that.
        """
        if isinstance(piece_type, int):
            piece_type = self.types[piece_type]
        piece = Piece(id=len(self.pieces), type=piece_type, row=row, col=col)
        self.pieces.append(piece)
        self._mark(piece, place=True)
        return piece

    def set_goal(self, type_id: int, row: int, col: int) -> None:
        """Require a piece of *type_id* to be anchored at (row, col)."""
        self.goal[row * self.width + col] = type_id

    def copy(self) -> Board:
        board = Board(self.height, self.width)
        for t in self.types:
            board.add_type(t.height, t.width)
        for p in self.pieces:
            board.add_piece(p.type.id, p.row, p.col)
        board.goal = self.goal[:]
        movegen.refresh_moves(board)
        return board

    # -- queries --------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.height * self.width

    def piece(self, piece_id: int) -> Piece:
        if not 0 <= piece_id < len(self.pieces):
            raise ValueError(f"Unknown piece id {piece_id}.")
        return self.pieces[piece_id]

    def piece_at(self, row: int, col: int) -> Piece | None:
        """Return the piece covering (row, col), if any."""
        if self.grid[row][col] == EMPTY:
            return None
        for p in self.pieces:
            if (
                p.row <= row < p.row + p.type.height
                and p.col <= col < p.col + p.type.width
            ):
                return p
        return None

    def fits(self, piece: Piece, row: int, col: int) -> bool:
        """Check whether *piece* could sit with its anchor at (row, col).

        The piece's own current footprint counts as vacant.
        """
        height, width = piece.type.height, piece.type.width
        if row < 0 or col < 0 or row + height > self.height or col + width > self.width:
            return False
        for r in range(row, row + height):
            for c in range(col, col + width):
                if self.grid[r][c] == EMPTY:
                    continue
                if not (
                    piece.row <= r < piece.row + height
                    and piece.col <= c < piece.col + width
                ):
                    return False
        return True

    def goal_grid(self) -> list[list[int]]:
        """Return the grid of type ids the goal layout would produce."""
        grid = [[EMPTY] * self.width for _ in range(self.height)]
        for i, tid in enumerate(self.goal):
            if tid == EMPTY:
                continue
            row, col = divmod(i, self.width)
            t = self.types[tid]
            for r in range(row, min(row + t.height, self.height)):
                for c in range(col, min(col + t.width, self.width)):
                    grid[r][c] = tid
        return grid

    def in_goal_position(self, piece: Piece) -> bool:
        return self.goal[piece.row * self.width + piece.col] == piece.type.id

    def is_solved(self) -> bool:
        return self.matches(self.capture_layout())

    def matches(self, layout: Layout) -> bool:
        """Check *layout* against the goal, cell by cell."""
        pieces = self.pieces
        for pid, tid in zip(layout, self.goal):
            if pid == EMPTY:
                if tid != EMPTY:
                    return False
            elif pieces[pid].type.id != tid:
                return False
        return True

    # -- layouts --------------------------------------------------------------

    def capture_layout(self) -> Layout:
        """Snapshot the id of the piece anchored at every cell."""
        cells = [EMPTY] * self.cell_count
        for p in self.pieces:
            cells[p.row * self.width + p.col] = p.id
        return tuple(cells)

    def apply_layout(self, layout: Layout) -> None:
        """Reposition every piece to match *layout*.

        Legal-move lists are left untouched.
        """
        if len(layout) != self.cell_count:
            raise ValueError(
                f"Expected a layout of {self.cell_count} cells, got {len(layout)}."
            )
        for row in self.grid:
            row[:] = [EMPTY] * self.width
        for i, pid in enumerate(layout):
            if pid == EMPTY:
                continue
            p = self.pieces[pid]
            p.row, p.col = divmod(i, self.width)
            self._mark(p, place=True)

    # -- movement -------------------------------------------------------------

    def move(self, piece: Piece, direction: Direction) -> bool:
        """Slide *piece* one square in *direction*.

        Returns False and leaves the board untouched if the move is blocked.
        On success the legal moves of every piece are recomputed.
        """
        if direction is Direction.NONE:
            raise ValueError("Cannot move a piece in Direction.NONE.")

        self._mark(piece, place=False)
        entering = self._entering_cells(piece, direction)
        ok = entering is not None and all(
            self.grid[r][c] == EMPTY for r, c in entering
        )
        if ok:
            dr, dc = direction.offset
            piece.row += dr
            piece.col += dc
        self._mark(piece, place=True)

        if ok:
            movegen.refresh_moves(self)
        return ok

    # -- helpers --------------------------------------------------------------

    def _entering_cells(
        self, piece: Piece, direction: Direction
    ) -> list[tuple[int, int]] | None:
        """Cells the piece would newly cover, or None if it would leave the board."""
        top, left = piece.row, piece.col
        height, width = piece.type.height, piece.type.width

        if direction is Direction.LEFT:
            if left == 0:
                return None
            return [(r, left - 1) for r in range(top, top + height)]
        if direction is Direction.RIGHT:
            if left + width > self.width - 1:
                return None
            return [(r, left + width) for r in range(top, top + height)]
        if direction is Direction.UP:
            if top == 0:
                return None
            return [(top - 1, c) for c in range(left, left + width)]
        if top + height + 1 > self.height:
            return None
        return [(top + height, c) for c in range(left, left + width)]

    def _mark(self, piece: Piece, place: bool) -> None:
        value = piece.type.id if place else EMPTY
        for r in range(piece.row, piece.row + piece.type.height):
            row = self.grid[r]
            for c in range(piece.col, piece.col + piece.type.width):
                row[c] = value
