"""Tests for the board model: placement, legality, moves, layouts, goals."""

from __future__ import annotations

import copy

import pytest

from backend.engine.movegen import refresh_moves
from backend.models.board import EMPTY, Board, Direction


def _placed(board: Board, piece_id: int, row: int, col: int) -> list[list[int]]:
    """Grid of a fresh board with the same pieces, one of them moved."""
    fresh = Board(board.height, board.width)
    for t in board.types:
        fresh.add_type(t.height, t.width)
    for p in board.pieces:
        if p.id == piece_id:
            fresh.add_piece(p.type.id, row, col)
        else:
            fresh.add_piece(p.type.id, p.row, p.col)
    return fresh.grid


class TestConstruction:
    def test_rejects_empty_dimensions(self):
        with pytest.raises(ValueError):
            Board(0, 4)

    def test_default_dimensions(self):
        board = Board()
        assert (board.height, board.width) == (5, 4)
        assert board.goal == [EMPTY] * 20

    def test_type_ids_follow_registration_order(self):
        board = Board(3, 3)
        a = board.add_type(1, 2)
        b = board.add_type(2, 1)
        assert (a.id, b.id) == (0, 1)
        assert board.types == [a, b]

    def test_piece_ids_match_list_index(self, tall_board):
        assert [p.id for p in tall_board.pieces] == [0, 1]
        for i, p in enumerate(tall_board.pieces):
            assert tall_board.pieces[i] is p

    def test_placement_marks_type_ids(self, tall_board):
        assert tall_board.grid == [[0, EMPTY], [0, 1]]

    def test_piece_lookup(self, tall_board):
        assert tall_board.piece(1).type.id == 1
        with pytest.raises(ValueError):
            tall_board.piece(2)

    def test_piece_at(self, tall_board):
        assert tall_board.piece_at(1, 0).id == 0
        assert tall_board.piece_at(0, 1) is None


class TestFits:
    def test_own_footprint_counts_as_vacant(self, tall_board):
        tall = tall_board.piece(0)
        assert tall_board.fits(tall, 0, 0)

    def test_out_of_bounds(self, tall_board):
        tall = tall_board.piece(0)
        assert not tall_board.fits(tall, -1, 0)
        assert not tall_board.fits(tall, 1, 0)
        assert not tall_board.fits(tall, 0, 2)

    def test_blocked_by_other_piece(self, tall_board):
        assert not tall_board.fits(tall_board.piece(0), 0, 1)

    def test_open_cell(self, tall_board):
        assert tall_board.fits(tall_board.piece(1), 0, 1)


class TestMove:
    def test_successful_move_updates_grid_and_position(self, tall_board):
        small = tall_board.piece(1)
        assert tall_board.move(small, Direction.UP)
        assert small.position == (0, 1)
        assert tall_board.grid == [[0, 1], [0, EMPTY]]

    def test_failed_move_leaves_grid_untouched(self, tall_board):
        before = copy.deepcopy(tall_board.grid)
        tall = tall_board.piece(0)
        # Top row is clear, bottom row is blocked: the move must not half-apply.
        assert not tall_board.move(tall, Direction.RIGHT)
        assert tall_board.grid == before
        assert tall.position == (0, 0)

    def test_cannot_leave_any_edge(self):
        board = Board(1, 1)
        piece = board.add_piece(board.add_type(1, 1), 0, 0)
        for direction in (Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN):
            assert not board.move(piece, direction)
        assert board.grid == [[0]]

    def test_right_and_down_stop_at_far_edge(self):
        board = Board(3, 3)
        piece = board.add_piece(board.add_type(2, 2), 1, 1)
        assert not board.move(piece, Direction.RIGHT)
        assert not board.move(piece, Direction.DOWN)
        assert board.move(piece, Direction.LEFT)
        assert board.move(piece, Direction.UP)
        assert piece.position == (0, 0)

    def test_none_direction_rejected(self, tall_board):
        with pytest.raises(ValueError):
            tall_board.move(tall_board.piece(1), Direction.NONE)

    def test_success_refreshes_every_piece(self):
        board = Board(2, 3)
        bar = board.add_piece(board.add_type(1, 2), 0, 0)
        dot = board.add_piece(board.add_type(1, 1), 0, 2)
        refresh_moves(board)
        assert Direction.RIGHT not in bar.moves
        assert board.move(dot, Direction.DOWN)
        assert Direction.RIGHT in bar.moves

    @pytest.mark.parametrize("direction", [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN])
    @pytest.mark.parametrize("piece_id", [0, 1])
    def test_fits_agrees_with_move(self, tall_board, piece_id, direction):
        piece = tall_board.piece(piece_id)
        dr, dc = direction.offset
        target = (piece.row + dr, piece.col + dc)
        before = copy.deepcopy(tall_board.grid)
        expected = tall_board.fits(piece, *target)

        assert tall_board.move(piece, direction) is expected
        if expected:
            assert tall_board.grid == _placed(tall_board, piece_id, *target)
            assert piece.position == target
        else:
            assert tall_board.grid == before


class TestLayouts:
    def test_capture_records_anchor_piece_ids(self, tall_board):
        assert tall_board.capture_layout() == (0, EMPTY, EMPTY, 1)

    def test_apply_capture_is_identity(self, load_fixture):
        board = load_fixture("ladder")
        grid = copy.deepcopy(board.grid)
        positions = [p.position for p in board.pieces]
        board.apply_layout(board.capture_layout())
        assert board.grid == grid
        assert [p.position for p in board.pieces] == positions

    def test_apply_restores_earlier_layout(self, tall_board):
        start = tall_board.capture_layout()
        grid = copy.deepcopy(tall_board.grid)
        tall_board.move(tall_board.piece(1), Direction.UP)
        tall_board.apply_layout(start)
        assert tall_board.grid == grid
        assert tall_board.piece(1).position == (1, 1)

    def test_apply_rejects_wrong_size(self, tall_board):
        with pytest.raises(ValueError):
            tall_board.apply_layout((0, 1))


class TestGoal:
    def test_exact_match(self, swap_board):
        assert swap_board.matches((EMPTY, EMPTY, 0, 1))
        assert swap_board.matches((EMPTY, EMPTY, 1, 0))

    def test_piece_where_goal_is_empty(self, swap_board):
        assert not swap_board.matches((0, EMPTY, EMPTY, 1))

    def test_empty_where_goal_expects_piece(self, swap_board):
        assert not swap_board.matches((EMPTY, EMPTY, EMPTY, 1))

    def test_wrong_type(self, load_fixture):
        board = load_fixture("jammed")
        assert not board.matches(board.capture_layout())
        assert board.matches((1, 0, EMPTY))

    def test_is_solved_uses_current_layout(self, swap_board):
        assert not swap_board.is_solved()
        swap_board.move(swap_board.piece(0), Direction.DOWN)
        swap_board.move(swap_board.piece(1), Direction.DOWN)
        assert swap_board.is_solved()

    def test_goal_grid(self, load_fixture):
        board = load_fixture("nook")
        assert board.goal_grid() == [
            [1, EMPTY, EMPTY],
            [EMPTY, 0, 0],
            [1, 0, 0],
        ]

    def test_in_goal_position(self, load_fixture):
        board = load_fixture("nook")
        assert board.in_goal_position(board.piece(2))
        assert not board.in_goal_position(board.piece(0))


class TestCopy:
    def test_copy_is_independent(self, tall_board):
        clone = tall_board.copy()
        clone.move(clone.piece(1), Direction.UP)
        assert tall_board.piece(1).position == (1, 1)
        assert clone.goal == tall_board.goal
        assert clone.piece(1).position == (0, 1)
