"""Turn in-edges into out-edges.

Record nodes may declare edges from either end: {"out": [2]} on node 1
and {"in": [1]} on node 2 describe the same edge 1 -> 2.  The detector
only follows out-edges, so before it runs every in-edge i <- p is
rewritten as an out-edge p -> i on the predecessor.

The caller's path is left alone.  We copy the list and every record we
touch, then merge new out-edges by ordered union so an edge declared
both ways shows up once.
"""
from __future__ import annotations

import logging

from floyd_cycles.domain.options import DEFAULT_OPTIONS, DetectOptions
from floyd_cycles.domain.types import Index, Node, Path
from floyd_cycles.graph.nodes import NodeKind, classify_node, predecessors_of

log = logging.getLogger(__name__)


def _union(existing: tuple[Index, ...], index: Index) -> list[Index]:
    if index in existing:
        return list(existing)
    return [*existing, index]


def _add_out_edge(node: Node, index: Index, out_field: str) -> Node:
    """Return a copy of *node* with an out-edge to *index*."""
    kind = classify_node(node)
    if kind is NodeKind.POINTER:
        # a pointer that gains a second successor becomes a list
        return _union((node,), index)
    if kind is NodeKind.SUCCESSORS:
        return _union(tuple(node), index)
    record = dict(node or {})
    record[out_field] = _union(tuple(record.get(out_field) or ()), index)
    return record


def normalize_path(path: Path, options: DetectOptions | None = None) -> list[Node]:
    """Return a copy of *path* that declares every edge as an out-edge.

    For each node i and each predecessor p in its in-edge field, i is
    added to the out-edges of p.  Afterwards no node carries the in-edge
    field.  Nodes without in-edges keep the out-edges they already had.
    """
    opts = options or DEFAULT_OPTIONS
    out_field, in_field = opts.out_edge_field, opts.in_edge_field

    normalized: list[Node] = [
        dict(node) if classify_node(node, i) is NodeKind.RECORD and node is not None
        else node
        for i, node in enumerate(path)
    ]

    moved = 0
    for index, node in enumerate(path):
        for pred in predecessors_of(node, in_field):
            normalized[pred] = _add_out_edge(normalized[pred], index, out_field)
            moved += 1

    for node in normalized:
        if isinstance(node, dict):
            node.pop(in_field, None)

    log.debug("Normalized %d node(s), moved %d in-edge(s)", len(normalized), moved)
    return normalized
