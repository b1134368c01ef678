"""Search-tree nodes and the solution path rebuilt from them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import NamedTuple

from backend.models.board import Direction, Layout


class Move(NamedTuple):
    piece_id: int
    direction: Direction


@dataclass(eq=False)
class SearchNode:
    """A pending move plus the layout it applies to.

    ``layout`` is the snapshot *before* the move; the resulting layout is
    recomputed when the node is processed. The root and the terminal node
    of a solution carry no move.
    """

    parent: SearchNode | None
    piece_id: int | None
    direction: Direction
    layout: Layout
    depth: int = 0

    @classmethod
    def root(cls, layout: Layout) -> SearchNode:
        return cls(parent=None, piece_id=None, direction=Direction.NONE, layout=layout)

    def child(
        self, piece_id: int | None, direction: Direction, layout: Layout
    ) -> SearchNode:
        return SearchNode(
            parent=self,
            piece_id=piece_id,
            direction=direction,
            layout=layout,
            depth=self.depth + 1,
        )

    @property
    def move(self) -> Move | None:
        if self.piece_id is None:
            return None
        return Move(self.piece_id, self.direction)

    def detach(self) -> None:
        """Drop the parent link; a detached node is never part of a path."""
        self.parent = None

    def lineage(self) -> list[SearchNode]:
        """Return the chain of nodes from the root down to this one."""
        chain: list[SearchNode] = []
        node: SearchNode | None = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain


@dataclass
class SearchStats:
    expanded: int = 0
    generated: int = 0
    duplicates: int = 0
    distinct: int = 0
    max_depth: int = 0


class SolutionPath:
    """Ordered moves from the starting layout to one matching the goal."""

    def __init__(self, terminal: SearchNode, stats: SearchStats | None = None) -> None:
        self.terminal = terminal
        self.stats = stats or SearchStats()
        self.nodes = terminal.lineage()
        self.steps: list[Move] = [n.move for n in self.nodes if n.move is not None]

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Move]:
        return iter(self.steps)

    def __repr__(self) -> str:
        return f"SolutionPath(moves={len(self.steps)})"

    @property
    def start(self) -> Layout:
        return self.nodes[0].layout

    @property
    def final(self) -> Layout:
        return self.terminal.layout

    def layouts(self) -> list[Layout]:
        """Every snapshot from the start to the goal, one more than the moves."""
        return [n.layout for n in self.nodes[1:]]

    def to_dict(self) -> dict:
        return {
            "length": len(self.steps),
            "moves": [
                {"piece": m.piece_id, "direction": m.direction.value}
                for m in self.steps
            ],
        }
