"""Trie of previously seen board layouts, keyed by piece type.

Pieces of the same type are interchangeable, so layouts are stored by the
type anchored at each cell rather than by piece id. Two layouts that only
swap same-type pieces share a single path through the trie.
"""

from __future__ import annotations

from collections.abc import Sequence

from backend.models.board import EMPTY, Board, Layout
from backend.models.piece import Piece


def canonical_key(
    layout: Layout, pieces: Sequence[Piece], num_types: int
) -> tuple[int, ...]:
    """Translate piece ids in *layout* into type ids.

    Cells with no anchored piece become *num_types*, one past the last
    type id.
    """
    return tuple(
        num_types if pid == EMPTY else pieces[pid].type.id for pid in layout
    )


class TrieNode:
    __slots__ = ("children",)

    def __init__(self, arity: int) -> None:
        self.children: list[TrieNode | None] = [None] * arity


class LayoutTrie:
    """Fixed-arity trie with one level per board cell.

    *num_types* and *cells* are fixed at construction. Every child list
    has ``num_types + 1`` slots, the last one standing for an empty cell.
    """

    def __init__(self, num_types: int, cells: int) -> None:
        if num_types < 0 or cells < 1:
            raise ValueError(
                f"Invalid trie shape: {num_types} types over {cells} cells."
            )
        self.num_types = num_types
        self.cells = cells
        self.arity = num_types + 1
        self.root = TrieNode(self.arity)
        self.size = 0

    @classmethod
    def for_board(cls, board: Board) -> LayoutTrie:
        return cls(len(board.types), board.cell_count)

    def __len__(self) -> int:
        return self.size

    def add(self, key: Sequence[int]) -> bool:
        """Insert *key*, returning True if it was already present.

        Walks one cell at a time from index 0, creating missing children
        along the way; the key was seen before only if nothing had to be
        created.
        """
        if len(key) != self.cells:
            raise ValueError(
                f"Expected a key of {self.cells} cells, got {len(key)}."
            )
        arity = self.arity
        node = self.root
        seen = True
        for symbol in key:
            if not 0 <= symbol < arity:
                raise ValueError(
                    f"Symbol {symbol} outside 0..{self.num_types}."
                )
            child = node.children[symbol]
            if child is None:
                child = node.children[symbol] = TrieNode(arity)
                seen = False
            node = child
        if not seen:
            self.size += 1
        return seen

    def add_layout(self, layout: Layout, pieces: Sequence[Piece]) -> bool:
        """Canonicalise *layout* and :meth:`add` it."""
        return self.add(canonical_key(layout, pieces, self.num_types))

