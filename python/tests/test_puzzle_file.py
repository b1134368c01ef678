"""Tests for loading puzzle files and exporting solutions."""

from __future__ import annotations

import json

import pytest

from backend.engine.gamesolver import Solver
from backend.io import PuzzleFormatError, dump_puzzle, parse_puzzle, save_solution
from backend.models.board import EMPTY, Direction


NOOK = """\
# comment lines and blanks are skipped

H:3
W:3
T:big:2:2
T:small:1:1
P:0:0:0
P:1:2:0
P:1:0:2
S:0:1:1
S:1:0:0
S:1:0:2
"""


class TestParse:
    def test_dimensions_types_and_pieces(self):
        board = parse_puzzle(NOOK)
        assert (board.height, board.width) == (3, 3)
        assert [(t.height, t.width) for t in board.types] == [(2, 2), (1, 1)]
        assert [p.position for p in board.pieces] == [(0, 0), (0, 2), (2, 0)]
        assert [p.type.id for p in board.pieces] == [0, 1, 1]

    def test_goal_anchors(self):
        board = parse_puzzle(NOOK)
        assert board.goal == [1, EMPTY, EMPTY, EMPTY, 0, EMPTY, 1, EMPTY, EMPTY]

    def test_type_fields_are_width_then_height(self):
        board = parse_puzzle("H:4\nW:4\nT:bar:3:1\nP:0:0:2\n")
        assert (board.types[0].height, board.types[0].width) == (1, 3)
        assert board.grid[2] == [0, 0, 0, EMPTY]

    def test_width_may_come_first(self):
        board = parse_puzzle("W:2\nH:5\n")
        assert (board.height, board.width) == (5, 2)

    def test_legal_moves_are_ready(self):
        board = parse_puzzle(NOOK)
        assert board.piece(1).moves == [Direction.DOWN]


class TestErrors:
    @pytest.mark.parametrize(
        "text, line",
        [
            ("T:a:1:1\n", 1),
            ("H:3\nW:3\nP:0:0:0\n", 3),
            ("H:3\nW:3\nT:a:1:1\nP:0:3:0\n", 4),
            ("H:3\nW:3\nT:a:2:2\nP:0:0:0\nP:0:1:1\n", 5),
            ("H:3\nW:3\nT:a:1:1\nS:0:0:3\n", 4),
            ("H:3\nW:x\n", 2),
            ("H:0\n", 1),
            ("H:3\nW:3\nH:4\n", 3),
            ("H:3\nW:3\nT:a:4:1\n", 3),
            ("H:3\nW:3\nP:0\n", 3),
        ],
    )
    def test_reports_line_number(self, text, line):
        with pytest.raises(PuzzleFormatError) as info:
            parse_puzzle(text)
        assert info.value.line == line
        assert f"line {line}" in str(info.value)

    def test_missing_size(self):
        with pytest.raises(PuzzleFormatError):
            parse_puzzle("# nothing here\n")

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_puzzle("")


def test_dump_reloads_to_same_board(load_fixture):
    board = load_fixture("ladder")
    again = parse_puzzle(dump_puzzle(board))
    assert again.capture_layout() == board.capture_layout()
    assert again.goal == board.goal
    assert again.grid == board.grid


def test_save_solution(tmp_path, swap_board):
    path = tmp_path / "out" / "solution.json"
    save_solution(path, Solver.solve(swap_board))
    data = json.loads(path.read_text())
    assert data["length"] == 2
    assert data["moves"][0] == {"piece": 0, "direction": "down"}
