"""Labelled directed graph that converts to an indexed path.

The detector works on a path: a list whose positions are the node ids.
Real inputs are usually keyed by name instead, e.g.

    {"object1": ["object2"], "object2": ["object3"], "object3": ["object1"]}

Graph stores nodes of any hashable type T in insertion order, keeps
their successor lists, and hands out a stable index for every node.
labels() lines up with to_path(), so results can be mapped back.
"""
from __future__ import annotations

from typing import Generic, Hashable, Iterable, Mapping, TypeVar

T = TypeVar("T", bound=Hashable)


class Graph(Generic[T]):
    """Directed graph backed by adjacency lists.

    Node indices follow insertion order and never change, since nodes
    cannot be removed.
    """

    __slots__ = ("_fwd", "_index")

    def __init__(self) -> None:
        self._fwd: dict[T, list[T]] = {}
        self._index: dict[T, int] = {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[T, Iterable[T]]) -> Graph[T]:
        """Build a graph from {label: [successor labels]}.

        Keys are added first, in mapping order, so a key's index is its
        position in the mapping.  Successors that never appear as keys
        are appended after them.
        """
        g: Graph[T] = cls()
        for src in mapping:
            g.add_node(src)
        for src, dsts in mapping.items():
            for dst in dsts:
                g.add_edge(src, dst)
        return g

    # ---- mutation --------------------------------------------------------

    def add_node(self, node: T) -> None:
        """Add *node* if it does not already exist."""
        if node not in self._fwd:
            self._index[node] = len(self._fwd)
            self._fwd[node] = []

    def add_edge(self, src: T, dst: T) -> None:
        """Add a directed edge src -> dst, creating missing nodes.

        Adding the same edge twice is a no-op.
        """
        self.add_node(src)
        self.add_node(dst)
        if not self.has_edge(src, dst):
            self._fwd[src].append(dst)

    # ---- queries ---------------------------------------------------------

    def has_edge(self, src: T, dst: T) -> bool:
        return src in self._fwd and dst in self._fwd[src]

    def successors(self, node: T) -> list[T]:
        """Direct successors (neighbors along outgoing edges)."""
        return list(self._fwd.get(node, []))

    def labels(self) -> list[T]:
        """Node labels by index."""
        return list(self._fwd)

    def to_path(self) -> list[list[int]]:
        """Successors-form path: entry i lists the indices node i points to."""
        return [
            [self._index[dst] for dst in self.successors(node)]
            for node in self._fwd
        ]

    @property
    def node_count(self) -> int:
        return len(self._fwd)

    @property
    def edge_count(self) -> int:
        return sum(len(dsts) for dsts in self._fwd.values())

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node: T) -> bool:  # type: ignore[override]
        return node in self._fwd

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
