from backend.engine.gamesolver.node import Move, SearchNode, SearchStats, SolutionPath
from backend.engine.gamesolver.solver import Solver, Strategy

__all__ = ["Move", "SearchNode", "SearchStats", "SolutionPath", "Solver", "Strategy"]
