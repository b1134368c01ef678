"""Puzzle definition files and solution export.

A puzzle file has one colon-separated directive per line; the first
character picks the directive::

    H:5            board height (rows)
    W:4            board width (columns)
    T:big:2:2      next piece type: label, width, height
    P:0:1:0        next piece: type id, column, row
    S:0:1:3        goal anchor: type id, column, row

Lines starting with anything else are ignored. Types and pieces are
numbered in the order they appear.
"""

from __future__ import annotations

import json
from pathlib import Path

from backend.engine.gamesolver.node import SolutionPath
from backend.engine.movegen import refresh_moves
from backend.models.board import EMPTY, Board


class PuzzleFormatError(ValueError):
    """Raised for a puzzle file the solver cannot trust."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        super().__init__(f"line {line}: {message}" if line is not None else message)


def _ints(toks: list[str], count: int, lineno: int) -> list[int]:
    if len(toks) < count + 1:
        raise PuzzleFormatError(
            f"expected {count} field(s) after {toks[0]!r}", lineno
        )
    try:
        return [int(t) for t in toks[1 : count + 1]]
    except ValueError:
        raise PuzzleFormatError(f"non-integer field in {':'.join(toks)!r}", lineno) from None


def parse_puzzle(text: str) -> Board:
    """Build a board (with legal moves computed) from puzzle-file text."""
    board: Board | None = None
    height = width = -1

    def require_board(lineno: int) -> Board:
        if board is None:
            raise PuzzleFormatError("H and W must come before pieces and goals", lineno)
        return board

    for lineno, raw in enumerate(text.splitlines(), 1):
        line = raw.strip()
        if not line:
            continue
        toks = line.split(":")
        kind = toks[0][:1]

        if kind in ("H", "W"):
            if board is not None:
                raise PuzzleFormatError("board size given twice", lineno)
            (val,) = _ints(toks, 1, lineno)
            if val < 1:
                raise PuzzleFormatError(f"board size must be positive, got {val}", lineno)
            if kind == "H":
                height = val
            else:
                width = val
            if height != -1 and width != -1:
                board = Board(height, width)

        elif kind == "T":
            b = require_board(lineno)
            if len(toks) < 4:
                raise PuzzleFormatError("expected T:<label>:<width>:<height>", lineno)
            w, h = _ints([toks[0]] + toks[2:], 2, lineno)
            if not (1 <= h <= b.height and 1 <= w <= b.width):
                raise PuzzleFormatError(f"type {w}×{h} does not fit the board", lineno)
            b.add_type(h, w)

        elif kind == "P":
            b = require_board(lineno)
            type_id, col, row = _ints(toks, 3, lineno)
            if not 0 <= type_id < len(b.types):
                raise PuzzleFormatError(f"unknown type id {type_id}", lineno)
            piece_type = b.types[type_id]
            if (
                row < 0 or col < 0
                or row + piece_type.height > b.height
                or col + piece_type.width > b.width
            ):
                raise PuzzleFormatError(f"piece at ({row}, {col}) leaves the board", lineno)
            for r in range(row, row + piece_type.height):
                for c in range(col, col + piece_type.width):
                    other = b.piece_at(r, c)
                    if other is not None:
                        raise PuzzleFormatError(
                            f"piece at ({row}, {col}) overlaps piece {other.id}",
                            lineno,
                        )
            b.add_piece(piece_type, row, col)

        elif kind == "S":
            b = require_board(lineno)
            type_id, col, row = _ints(toks, 3, lineno)
            if not 0 <= type_id < len(b.types):
                raise PuzzleFormatError(f"unknown type id {type_id}", lineno)
            if not (0 <= row < b.height and 0 <= col < b.width):
                raise PuzzleFormatError(f"goal anchor ({row}, {col}) is off the board", lineno)
            b.set_goal(type_id, row, col)

    if board is None:
        raise PuzzleFormatError("missing board size (H and W)")
    refresh_moves(board)
    return board


def load_puzzle(path: Path | str) -> Board:
    return parse_puzzle(Path(path).read_text(encoding="utf-8"))


def dump_puzzle(board: Board) -> str:
    """Render *board* (current layout and goal) back into puzzle-file text."""
    lines = [f"H:{board.height}", f"W:{board.width}"]
    lines += [f"T:{t.id}:{t.width}:{t.height}" for t in board.types]
    lines += [f"P:{p.type.id}:{p.col}:{p.row}" for p in board.pieces]
    for i, tid in enumerate(board.goal):
        if tid != EMPTY:
            row, col = divmod(i, board.width)
            lines.append(f"S:{tid}:{col}:{row}")
    return "\n".join(lines) + "\n"


def save_solution(path: Path | str, solution: SolutionPath) -> None:
    """Write *solution* as JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(solution.to_dict(), indent=2) + "\n")
