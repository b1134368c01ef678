"""Pytest configuration and fixtures for the sliding block tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from backend.engine.movegen import refresh_moves
from backend.io import load_puzzle
from backend.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


@pytest.fixture
def load_fixture():
    """Return a loader for puzzle files under ``fixtures/``."""

    def _load(name: str) -> Board:
        return load_puzzle(FIXTURES_DIR / f"{name}.txt")

    return _load


@pytest.fixture
def corner_board(load_fixture) -> Board:
    return load_fixture("corner")


@pytest.fixture
def swap_board(load_fixture) -> Board:
    return load_fixture("swap")


@pytest.fixture
def tall_board() -> Board:
    """2×2 board: a 2×1 piece in the left column, a 1×1 at the bottom right.

    ::

        0 .
        0 1
    """
    board = Board(2, 2)
    tall = board.add_type(2, 1)
    small = board.add_type(1, 1)
    board.add_piece(tall, 0, 0)
    board.add_piece(small, 1, 1)
    refresh_moves(board)
    return board
