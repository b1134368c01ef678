from backend.io.puzzle_file import (
    PuzzleFormatError,
    dump_puzzle,
    load_puzzle,
    parse_puzzle,
    save_solution,
)

__all__ = ["PuzzleFormatError", "dump_puzzle", "load_puzzle", "parse_puzzle", "save_solution"]
