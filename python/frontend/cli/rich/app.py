"""Rich terminal frontend — coloured grids, tables, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import time
from pathlib import Path

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend import config
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import SolutionPath, Solver, Strategy
from backend.io import save_solution
from backend.models.board import EMPTY, Board
from frontend.cli.input_handler import PLAY_HELP, get_key, get_key_timeout, read_command

console = Console()

_PALETTE = (
    "red3", "dodger_blue2", "gold3", "green3", "magenta3", "dark_orange3",
    "cyan3", "orchid", "chartreuse3", "slate_blue1", "light_salmon3", "turquoise4",
)


def _colour(type_id: int) -> str:
    return _PALETTE[type_id % len(_PALETTE)]


# -- board rendering ----------------------------------------------------------


def render_grid(grid: list[list[int]], title: str, pieces: dict[tuple[int, int], int] | None = None) -> Panel:
    """Return a panel with one coloured cell per grid square.

    *pieces* maps cells to piece ids, printed inside the cell when given.
    """
    table = Table(
        show_header=False,
        show_edge=False,
        box=None,
        padding=(0, 0),
    )
    for _ in range(len(grid[0]) if grid else 0):
        table.add_column(width=3, justify="center")

    for r, row in enumerate(grid):
        cells: list[Text] = []
        for c, val in enumerate(row):
            if val == EMPTY:
                cells.append(Text(" · ", style="dim"))
                continue
            label = str(pieces[(r, c)]) if pieces and (r, c) in pieces else ""
            cells.append(Text(f"{label:^3}", style=f"bold white on {_colour(val)}"))
        table.add_row(*cells)

    return Panel(table, title=title, box=rich.box.HEAVY, border_style="bright_blue", expand=False)


def render_board(board: Board, title: str = "Board") -> Panel:
    labels = {cell: p.id for p in board.pieces for cell in p.cells()}
    return render_grid(board.grid, title, labels)


def _boards(board: Board, title: str = "Now") -> Columns:
    return Columns([render_board(board, title), render_grid(board.goal_grid(), "Goal")], padding=(0, 4))


def _steps_table(solution: SolutionPath) -> Table:
    table = Table(box=rich.box.SIMPLE_HEAD, show_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Piece", justify="right", style="bold")
    table.add_column("Direction", style="cyan")
    for i, (piece_id, direction) in enumerate(solution, 1):
        table.add_row(str(i), str(piece_id), direction.value)
    return table


# -- replay -------------------------------------------------------------------


def _draw_replay(game: GamePlay, total: int, status: str = "") -> None:
    console.clear()
    progress = Text()
    progress.append(f"  Move {game.state.moves}/{total} ", style="bold cyan")
    progress.append(status, style="dim")
    panel = Panel(
        Group(Align.center(_boards(game.board)), Align.center(progress)),
        title="[bold cyan]Replaying solution[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


def _animate(game: GamePlay, solution: SolutionPath, delay: float) -> None:
    total = len(solution)
    _draw_replay(game, total)
    for piece_id, direction in solution:
        if get_key_timeout(delay) == "quit":
            return
        game.move(piece_id, direction)
        _draw_replay(game, total, f"(piece {piece_id} {direction.value})")


def _step_through(game: GamePlay, solution: SolutionPath) -> None:
    steps = solution.steps
    _draw_replay(game, len(steps), "space/→ next  b/← back  r restart  q quit")
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
        _draw_replay(game, len(steps))


# -- play mode ----------------------------------------------------------------


def _moves_table(board: Board) -> Table:
    table = Table(box=rich.box.SIMPLE_HEAD, show_edge=False)
    table.add_column("Piece", justify="right", style="bold")
    table.add_column("Can move", style="cyan")
    for p in board.pieces:
        if p.moves:
            table.add_row(str(p.id), " ".join(d.value for d in p.moves))
    return table


def _draw_play(game: GamePlay, note: str = "") -> None:
    console.clear()
    footer = Text()
    footer.append(f"Moves: {game.state.moves}\n", style="bold cyan")
    if note:
        footer.append(f"{note}\n", style="yellow")
    footer.append(PLAY_HELP, style="dim")
    panel = Panel(
        Group(
            Align.center(_boards(game.board)),
            Align.center(_moves_table(game.board)),
            Align.center(footer),
        ),
        title="[bold cyan]Play[/bold cyan]",
        border_style="cyan",
        padding=(1, 2),
    )
    console.print(Align.center(panel))


def _play(game: GamePlay, strategy: Strategy) -> int:
    note = ""
    while not game.is_won:
        _draw_play(game, note)
        command = read_command("> ", reader=console.input)
        action = command.action
        note = ""

        if action == "quit":
            console.print(f"Stopped after {game.state.moves} moves.")
            return 0
        if action == "move":
            pid = command.piece_id
            if not 0 <= pid < len(game.board.pieces):
                note = f"No piece {pid}."
            elif command.direction is None:
                if game.nudge(pid) is None:
                    note = f"Piece {pid} cannot move."
            elif not game.move(pid, command.direction):
                note = f"Piece {pid} cannot move {command.direction.value}."
        elif action == "hint":
            hint = game.hint()
            note = (
                "No solution from here." if hint is None
                else f"Hint: piece {hint.piece_id} {hint.direction.value}"
            )
        elif action == "next":
            step = game.next_move(strategy)
            note = (
                "No solution from here." if step is None
                else f"Moved piece {step.piece_id} {step.direction.value}"
            )
        elif action == "solve":
            if game.solve(strategy) is None:
                note = "No solution from here."
        elif action == "back":
            if not game.undo():
                note = "Nothing to undo."
        elif action == "restart":
            game.restart()
        else:
            note = "Unknown command."

    _draw_play(game, note)
    console.print(f"[bold green]Puzzle solved in {game.state.moves} moves![/bold green]")
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
    """Solve *board*, report with Rich. Returns a process exit code.

    With *play* the user moves pieces instead, asking the solver for hints.
    """
    console.print()
    console.print(
        Panel(
            Align.center(_boards(board, "Start")),
            title="[bold]S L I D I N G   B L O C K S[/bold]",
            subtitle=f"{board.height}×{board.width}, {len(board.pieces)} pieces",
            border_style="bright_blue",
            padding=(1, 2),
        )
    )

    if play:
        return _play(GamePlay(board), strategy)

    started = time.perf_counter()
    with console.status("[bold cyan]Searching…[/bold cyan]"):
        solution = Solver.solve(board, strategy)
    elapsed = time.perf_counter() - started

    if solution is None:
        console.print("[bold red]No solution:[/bold red] the goal layout cannot be reached.")
        return 1

    stats = solution.stats
    console.print(
        f"[bold green]Solved in {len(solution)} moves![/bold green] "
        f"[dim]({elapsed:.2f}s, {stats.expanded} nodes, {stats.distinct} layouts)[/dim]"
    )
    if solution.steps:
        console.print(_steps_table(solution))

    if output is not None:
        save_solution(output, solution)
        console.print(f"Solution written to [bold]{output}[/bold]")

    game = GamePlay(board)
    if animate:
        _animate(game, solution, delay)
    elif step:
        _step_through(game, solution)
    return 0
