"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Prints the start and goal layouts, solves, lists the moves, and can
replay them as an animation or one keypress at a time. Play mode lets the
user slide pieces by hand and ask the solver for help from any layout.
"""

from __future__ import annotations

import sys
import time
from pathlib import Path

from backend import config
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import SolutionPath, Solver, Strategy
from backend.io import save_solution
from backend.models.board import EMPTY, Board
from frontend.cli.input_handler import PLAY_HELP, get_key, get_key_timeout, read_command


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_SYMBOLS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _symbol(type_id: int) -> str:
    return _SYMBOLS[type_id] if type_id < len(_SYMBOLS) else "#"


# -- board rendering ----------------------------------------------------------


def render_grid(
    grid: list[list[int]], highlight: set[tuple[int, int]] | None = None
) -> str:
    """Return a boxed text grid, one symbol per type id and ``·`` for EMPTY."""
    highlight = highlight or set()
    width = len(grid[0]) if grid else 0
    sep = "+" + "-" * (width * 2 + 1) + "+"
    lines = [sep]
    for r, row in enumerate(grid):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == EMPTY:
                cells.append(f"{_DIM}·{_R}")
            elif (r, c) in highlight:
                cells.append(f"{_G}{_symbol(val)}{_R}")
            else:
                cells.append(_symbol(val))
        lines.append("| " + " ".join(cells) + " |")
    lines.append(sep)
    return "\n".join(lines)


def render_board(board: Board) -> str:
    """Current layout, with pieces already at a goal anchor in green."""
    placed = {
        cell
        for p in board.pieces
        if board.in_goal_position(p)
        for cell in p.cells()
    }
    return render_grid(board.grid, placed)


def _side_by_side(left: str, right: str, gap: int = 6) -> str:
    ls, rs = left.splitlines(), right.splitlines()
    pad = max(len(_strip(x)) for x in ls)
    out = []
    for i in range(max(len(ls), len(rs))):
        a = ls[i] if i < len(ls) else ""
        b = rs[i] if i < len(rs) else ""
        out.append("  " + a + " " * (pad - len(_strip(a)) + gap) + b)
    return "\n".join(out)


def _strip(text: str) -> str:
    for code in (_G, _Y, _C, _DIM, _BOLD, _R):
        text = text.replace(code, "")
    return text


def _format_steps(solution: SolutionPath) -> str:
    lines = []
    for i, (piece_id, direction) in enumerate(solution, 1):
        lines.append(f"  {i:>4}. piece {piece_id:<3} {direction.value}")
    return "\n".join(lines)


# -- replay -------------------------------------------------------------------


def _show_replay(game: GamePlay, total: int, note: str = "") -> None:
    _clear()
    print(f"  {_C}=== Replaying solution ==={_R}")
    print()
    print(_side_by_side(render_board(game.board), render_grid(game.board.goal_grid())))
    print()
    print(f"  Move {_Y}{game.state.moves}{_R}/{total}  {note}")
    sys.stdout.flush()


def _animate(game: GamePlay, solution: SolutionPath, delay: float) -> None:
    total = len(solution)
    _show_replay(game, total)
    for piece_id, direction in solution:
        if get_key_timeout(delay) == "quit":
            return
        game.move(piece_id, direction)
        _show_replay(game, total, f"({_symbol(game.board.piece(piece_id).type.id)} {direction.value})")


def _step_through(game: GamePlay, solution: SolutionPath) -> None:
    steps = solution.steps
    _show_replay(game, len(steps), f"{_DIM}space/→ next  b/← back  r restart  q quit{_R}")
    while True:
        action = get_key()
        done = game.state.moves
        if action == "quit":
            return
        if action == "next":
            if done >= len(steps):
                return
            game.move(*steps[done])
        elif action == "back":
            game.undo()
        elif action == "restart":
            game.restart()
        _show_replay(game, len(steps))


# -- play mode ----------------------------------------------------------------


def _piece_ids(board: Board) -> list[list[int]]:
    grid = [[EMPTY] * board.width for _ in range(board.height)]
    for p in board.pieces:
        for r, c in p.cells():
            grid[r][c] = p.id
    return grid


def _show_play(game: GamePlay, note: str = "") -> None:
    board = game.board
    _clear()
    print(f"  {_C}=== Play ==={_R}   moves: {_Y}{game.state.moves}{_R}")
    print()
    print(_side_by_side(render_grid(_piece_ids(board)), render_grid(board.goal_grid())))
    print(f"  {_DIM}pieces{' ' * (board.width * 2 + 3)}goal{_R}")
    print()
    for p in board.pieces:
        if p.moves:
            dirs = " ".join(d.value for d in p.moves)
            print(f"  piece {p.id:<3} [{_symbol(p.id)}]  {dirs}")
    print()
    if note:
        print(f"  {note}")
    print(f"  {_DIM}{PLAY_HELP}{_R}")
    sys.stdout.flush()


def _play(game: GamePlay, strategy: Strategy) -> int:
    note = ""
    while not game.is_won:
        _show_play(game, note)
        command = read_command("  > ")
        action = command.action
        note = ""

        if action == "quit":
            print(f"  Stopped after {game.state.moves} moves.")
            return 0
        if action == "move":
            pid = command.piece_id
            if not 0 <= pid < len(game.board.pieces):
                note = f"{_Y}No piece {pid}.{_R}"
            elif command.direction is None:
                if game.nudge(pid) is None:
                    note = f"{_Y}Piece {pid} cannot move.{_R}"
            elif not game.move(pid, command.direction):
                note = f"{_Y}Piece {pid} cannot move {command.direction.value}.{_R}"
        elif action == "hint":
            hint = game.hint()
            note = (
                f"{_Y}No solution from here.{_R}" if hint is None
                else f"Hint: piece {hint.piece_id} {hint.direction.value}"
            )
        elif action == "next":
            step = game.next_move(strategy)
            note = (
                f"{_Y}No solution from here.{_R}" if step is None
                else f"Moved piece {step.piece_id} {step.direction.value}"
            )
        elif action == "solve":
            solution = game.solve(strategy)
            if solution is None:
                note = f"{_Y}No solution from here.{_R}"
        elif action == "back":
            if not game.undo():
                note = "Nothing to undo."
        elif action == "restart":
            game.restart()
        else:
            note = f"{_Y}Unknown command.{_R}"

    _show_play(game, note)
    print(f"  {_G}Puzzle solved in {game.state.moves} moves!{_R}")
    return 0


# -- entry point --------------------------------------------------------------


def run(
    board: Board,
    strategy: Strategy = Strategy.ITERATIVE,
    animate: bool = False,
    step: bool = False,
    delay: float = config.ANIMATION_DELAY,
    output: Path | None = None,
    play: bool = False,
) -> int:
    """Solve *board* and report on stdout. Returns a process exit code.

    With *play* the user moves pieces instead, asking the solver for hints.
    """
    print()
    print(f"  {_BOLD}S L I D I N G   B L O C K S{_R}   {board.height}×{board.width}, "
          f"{len(board.pieces)} pieces")
    print()
    print(_side_by_side(render_board(board), render_grid(board.goal_grid())))
    print(f"  {_DIM}start{' ' * (board.width * 2 + 4)}goal{_R}")
    print()

    if play:
        return _play(GamePlay(board), strategy)

    started = time.perf_counter()
    solution = Solver.solve(board, strategy)
    elapsed = time.perf_counter() - started

    if solution is None:
        print(f"  {_Y}No solution: the goal layout cannot be reached.{_R}")
        return 1

    stats = solution.stats
    print(f"  {_G}Solved in {len(solution)} moves!{_R}  "
          f"{_DIM}({elapsed:.2f}s, {stats.expanded} nodes, {stats.distinct} layouts){_R}")
    if solution.steps:
        print()
        print(_format_steps(solution))
    print()

    if output is not None:
        save_solution(output, solution)
        print(f"  Solution written to {output}")

    game = GamePlay(board)
    if animate:
        _animate(game, solution, delay)
    elif step:
        _step_through(game, solution)
    return 0
