"""Node shapes and successor resolution.

A path is a plain sequence, and each entry can take one of three shapes:

  POINTER     -- a single int, the one successor index
  SUCCESSORS  -- a list/tuple of successor indices
  RECORD      -- a mapping with an out-edge key and (before
                 normalization) an in-edge key, both optional

classify_node() is the only place that inspects the Python type of a
node.  Everything else asks it, so the frontier stepper and the
normalizer never grow their own isinstance ladders.
"""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum

from floyd_cycles.domain.types import Index, Node


class NodeKind(Enum):
    POINTER = "pointer"
    SUCCESSORS = "successors"
    RECORD = "record"


class NodeShapeError(TypeError):
    """Raised when a node is not an int, a sequence of ints, or a mapping."""

    def __init__(self, node: object, index: Index | None = None) -> None:
        self.node = node
        self.index = index
        where = f" at index {index}" if index is not None else ""
        super().__init__(
            f"Unsupported node{where}: {node!r} "
            f"(expected int, sequence of int, or mapping)"
        )


def classify_node(node: Node, index: Index | None = None) -> NodeKind:
    """Return the shape of *node*.

    None counts as an empty record.  bool is rejected even though it is
    an int subclass, as are str and bytes even though they are sequences.
    """
    if isinstance(node, bool):
        raise NodeShapeError(node, index)
    if isinstance(node, int):
        return NodeKind.POINTER
    if node is None or isinstance(node, Mapping):
        return NodeKind.RECORD
    if isinstance(node, Sequence) and not isinstance(node, (str, bytes)):
        return NodeKind.SUCCESSORS
    raise NodeShapeError(node, index)


def successors_of(node: Node, out_field: str = "out") -> tuple[Index, ...]:
    """Successor indices of *node*, in declaration order."""
    kind = classify_node(node)
    if kind is NodeKind.POINTER:
        return (node,)
    if kind is NodeKind.SUCCESSORS:
        return tuple(node)
    if node is None:
        return ()
    return tuple(node.get(out_field) or ())


def predecessors_of(node: Node, in_field: str = "in") -> tuple[Index, ...]:
    """In-edge indices declared on a record node.

    Pointer and successor nodes cannot declare in-edges.
    """
    if node is None or classify_node(node) is not NodeKind.RECORD:
        return ()
    return tuple(node.get(in_field) or ())
