"""Keyboard input for the terminal frontends.

Replays read single keypresses (arrow keys and letters, no Enter needed)
through tty+termios on macOS / Linux and msvcrt on Windows. When stdin is
not a terminal every read reports ``"next"`` so replays still run to the
end. Play mode reads whole command lines instead.
"""

from __future__ import annotations

import os
import sys
import time
from typing import NamedTuple

from backend.models.direction import SLIDES, Direction


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    " ": "next",
    "n": "next",
    "N": "next",
    "\r": "next",
    "\n": "next",
    "b": "back",
    "B": "back",
    "r": "restart",
    "R": "restart",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
}

# ESC [ <letter>
_ARROW_MAP: dict[str, str] = {
    "C": "next",  # right
    "B": "next",  # down
    "D": "back",  # left
    "A": "back",  # up
}


def interactive() -> bool:
    return sys.stdin.isatty()


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return ``"next"``, ``"back"``,
    ``"restart"``, ``"quit"`` or ``""`` for anything else."""
    if not interactive():
        return "next"

    ch = _getch()
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape
    return _KEY_MAP.get(ch, "")


def get_key_timeout(timeout: float) -> str | None:
    """Wait up to *timeout* seconds for a keypress.

    Returns the action (as ``get_key``) or ``None`` if nothing was pressed.
    """
    if not interactive():
        time.sleep(timeout)
        return None

    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch == "\x1b":
            # Arrow keys arrive as ESC [ <letter>; os.read keeps select honest.
            r2, _, _ = select.select([fd], [], [], 0.1)
            if r2 and os.read(fd, 1).decode("utf-8", errors="ignore") == "[":
                r3, _, _ = select.select([fd], [], [], 0.1)
                if r3:
                    ch3 = os.read(fd, 1).decode("utf-8", errors="ignore")
                    return _ARROW_MAP.get(ch3, "")
                return ""
            return "quit"
        return _KEY_MAP.get(ch, "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- play-mode commands ----------------------------------------------------------

PLAY_HELP = (
    "<piece> [left|right|up|down] move a piece   h hint   n next   "
    "s solve   u undo   r restart   q quit"
)

_COMMAND_MAP: dict[str, str] = {
    "h": "hint",
    "hint": "hint",
    "n": "next",
    "next": "next",
    "s": "solve",
    "solve": "solve",
    "u": "back",
    "undo": "back",
    "b": "back",
    "r": "restart",
    "restart": "restart",
    "q": "quit",
    "quit": "quit",
}

_DIRECTION_MAP: dict[str, Direction] = {d.value: d for d in SLIDES}
_DIRECTION_MAP.update({d.value[0]: d for d in SLIDES})


class Command(NamedTuple):
    action: str
    piece_id: int | None = None
    direction: Direction | None = None


def parse_command(line: str) -> Command:
    """Turn one line of play-mode input into a :class:`Command`.

    ``"3"`` moves piece 3 in its first legal direction, ``"3 left"`` (or
    ``"3 l"``) in that direction. Unrecognised input gives action ``""``.
    """
    words = line.lower().split()
    if not words:
        return Command("")
    head, rest = words[0], words[1:]

    if head.isdigit():
        if not rest:
            return Command("move", int(head))
        if len(rest) == 1 and rest[0] in _DIRECTION_MAP:
            return Command("move", int(head), _DIRECTION_MAP[rest[0]])
        return Command("")

    if rest:
        return Command("")
    return Command(_COMMAND_MAP.get(head, ""))


def read_command(prompt: str = "> ", reader=input) -> Command:
    """Prompt for one command; end of input counts as ``quit``."""
    try:
        line = reader(prompt)
    except EOFError:
        return Command("quit")
    return parse_command(line)
