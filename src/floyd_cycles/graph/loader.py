"""Load a path from decoded JSON.

Two input forms are accepted:

  [1, [2, 3], {"out": [0]}, ...]       an indexed path, used as is
  {"a": ["b"], "b": ["a"], ...}        a labelled graph, converted
                                       through Graph.to_path()

Node shapes and the indices inside them are checked here, once, so
the detector itself never has to.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import IO, Any, Hashable

from floyd_cycles.domain.types import Node
from floyd_cycles.graph.adjacency import Graph
from floyd_cycles.graph.nodes import NodeKind, NodeShapeError, classify_node


class GraphFormatError(ValueError):
    """Raised when input cannot be read as a path or a labelled graph."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        super().__init__(message)


@dataclass(slots=True)
class LoadedPath:
    """A path plus the labels of its indices (None for indexed input)."""
    path: list[Node]
    labels: list[Hashable] | None = None

    def label(self, index: int) -> Hashable:
        if self.labels is None:
            return index
        return self.labels[index]


def _check_index(value: Any, size: int, i: int) -> None:
    # bool is an int subclass; negative ints would wrap around the list
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < size:
        raise GraphFormatError(
            f"Node {i} refers to {value!r}, expected an index in 0..{size - 1}",
            index=i,
        )


def _check_node(node: Node, size: int, i: int, fields: tuple[str, ...]) -> None:
    try:
        kind = classify_node(node, i)
    except NodeShapeError as exc:
        raise GraphFormatError(str(exc), index=i) from exc

    if kind is NodeKind.POINTER:
        indices = [node]
    elif kind is NodeKind.SUCCESSORS:
        indices = list(node)
    else:
        indices = []
        for name in fields:
            value = (node or {}).get(name)
            if value is None:
                continue
            if not isinstance(value, list):
                raise GraphFormatError(
                    f"Node {i} field {name!r} must be a list, got {value!r}",
                    index=i,
                )
            indices.extend(value)
    for value in indices:
        _check_index(value, size, i)


def load_path(data: Any, out_field: str = "out", in_field: str = "in") -> LoadedPath:
    """Turn a decoded JSON value into a LoadedPath.

    Every index in an indexed path must point inside the path.  Record
    nodes are checked under *out_field* and *in_field*; other keys are
    ignored.
    """
    if isinstance(data, list):
        for i, node in enumerate(data):
            _check_node(node, len(data), i, (out_field, in_field))
        return LoadedPath(path=data)

    if isinstance(data, dict):
        for label, dsts in data.items():
            # JSON object keys are always strings, so labels must be too
            if not isinstance(dsts, list) or not all(isinstance(d, str) for d in dsts):
                raise GraphFormatError(
                    f"Successors of {label!r} must be a list of labels, got {dsts!r}"
                )
        graph: Graph[str] = Graph.from_mapping(data)
        return LoadedPath(path=graph.to_path(), labels=graph.labels())

    raise GraphFormatError(
        f"Expected a JSON array or object, got {type(data).__name__}"
    )


def read_path(fp: IO[str], out_field: str = "out", in_field: str = "in") -> LoadedPath:
    """Parse JSON from *fp* and load it.

    json.JSONDecodeError propagates unchanged.
    """
    return load_path(json.load(fp), out_field, in_field)
