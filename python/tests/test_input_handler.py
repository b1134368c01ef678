"""Tests for play-mode command parsing."""

from __future__ import annotations

import pytest

from backend.models.board import Direction
from frontend.cli.input_handler import Command, parse_command, read_command


@pytest.mark.parametrize(
    "line, expected",
    [
        ("3", Command("move", 3)),
        ("12 Left", Command("move", 12, Direction.LEFT)),
        ("  0   d ", Command("move", 0, Direction.DOWN)),
        ("4 r", Command("move", 4, Direction.RIGHT)),
        ("h", Command("hint")),
        ("NEXT", Command("next")),
        ("s", Command("solve")),
        ("u", Command("back")),
        ("restart", Command("restart")),
        ("q", Command("quit")),
    ],
)
def test_parse_command(line, expected):
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["", "   ", "3 sideways", "3 left now", "q now", "jump", "-1"])
def test_unrecognised_input(line):
    assert parse_command(line).action == ""


def test_read_command_uses_reader():
    prompts = []

    def reader(prompt):
        prompts.append(prompt)
        return "2 up"

    assert read_command(">> ", reader=reader) == Command("move", 2, Direction.UP)
    assert prompts == [">> "]


def test_end_of_input_quits():
    def reader(prompt):
        raise EOFError

    assert read_command(reader=reader) == Command("quit")
