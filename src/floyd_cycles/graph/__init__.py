"""Floyd cycle detection over indexed paths."""

from floyd_cycles.graph.adjacency import Graph
from floyd_cycles.graph.detect import detect_cycles
from floyd_cycles.graph.floyd import Cycle, floyd
from floyd_cycles.graph.frontier import intersect, make_stepper, step
from floyd_cycles.graph.loader import GraphFormatError, LoadedPath, load_path, read_path
from floyd_cycles.graph.nodes import (
    NodeKind,
    NodeShapeError,
    classify_node,
    predecessors_of,
    successors_of,
)
from floyd_cycles.graph.normalize import normalize_path

__all__ = [
    "Cycle",
    "Graph",
    "GraphFormatError",
    "LoadedPath",
    "NodeKind",
    "NodeShapeError",
    "classify_node",
    "detect_cycles",
    "floyd",
    "intersect",
    "load_path",
    "make_stepper",
    "normalize_path",
    "predecessors_of",
    "read_path",
    "step",
    "successors_of",
]
