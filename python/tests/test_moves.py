"""Tests for legal-move generation."""

from __future__ import annotations

from backend.engine.movegen import legal_moves, refresh_moves, store_moves
from backend.models.board import Board, Direction


def test_lone_piece_in_corner(corner_board):
    piece = corner_board.piece(0)
    assert piece.moves == [Direction.RIGHT, Direction.DOWN]


def test_moves_follow_left_right_up_down_order():
    board = Board(3, 3)
    piece = board.add_piece(board.add_type(1, 1), 1, 1)
    store_moves(board, piece)
    assert piece.moves == [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]


def test_store_moves_replaces_previous_list(tall_board):
    small = tall_board.piece(1)
    small.moves.append(Direction.LEFT)
    store_moves(tall_board, small)
    assert small.moves == [Direction.UP]


def test_store_moves_leaves_grid_alone(tall_board):
    grid = [row[:] for row in tall_board.grid]
    for piece in tall_board.pieces:
        store_moves(tall_board, piece)
    assert tall_board.grid == grid


def test_wide_piece_needs_whole_edge_clear():
    board = Board(3, 3)
    big = board.add_piece(board.add_type(2, 2), 0, 0)
    board.add_piece(board.add_type(1, 1), 1, 2)
    refresh_moves(board)
    assert big.moves == [Direction.DOWN]


def test_fully_packed_board_has_no_moves(load_fixture):
    board = load_fixture("boxed")
    assert legal_moves(board) == []


def test_legal_moves_lists_pieces_in_id_order(swap_board):
    assert legal_moves(swap_board) == [(0, Direction.DOWN), (1, Direction.DOWN)]


def test_refresh_after_external_reposition(swap_board):
    layout = (1, 0, -1, -1)
    swap_board.apply_layout(layout)
    refresh_moves(swap_board)
    assert legal_moves(swap_board) == [(0, Direction.DOWN), (1, Direction.DOWN)]
    swap_board.apply_layout((-1, 0, 1, -1))
    refresh_moves(swap_board)
    assert swap_board.piece(0).moves == [Direction.LEFT, Direction.DOWN]
    assert swap_board.piece(1).moves == [Direction.RIGHT, Direction.UP]
