"""Frontier stepping.

A frontier is the set of node indices reachable after some number of
steps.  We keep it as an insertion-ordered tuple instead of a set: the
membership is what matters, but a stable order means "the first index
of an intersection" comes out the same on every run.

One step is two separate passes:
  1.  Collect successors of every index, dropping repeats.
  2.  Drop anything in the exclusion set.
"""
from __future__ import annotations

from typing import Callable, Iterable

from floyd_cycles.domain.types import Frontier, Index, Path
from floyd_cycles.graph.nodes import successors_of

Stepper = Callable[[Iterable[Index]], Frontier]


def _dedupe(indices: Iterable[Index]) -> Frontier:
    return tuple(dict.fromkeys(indices))


def step(
    path: Path,
    frontier: Iterable[Index],
    out_field: str = "out",
    exclude: frozenset[Index] = frozenset(),
) -> Frontier:
    """Return the frontier one step after *frontier*.

    Indices without successors contribute nothing.  Indices outside
    the path are not checked; that is the caller's job.
    """
    reached = _dedupe(
        succ
        for index in frontier
        for succ in successors_of(path[index], out_field)
    )
    if not exclude:
        return reached
    return tuple(i for i in reached if i not in exclude)


def make_stepper(
    path: Path,
    out_field: str = "out",
    exclude: frozenset[Index] = frozenset(),
) -> Stepper:
    """Bind *path* and options once and return a one-argument step function."""

    def _step(frontier: Iterable[Index]) -> Frontier:
        return step(path, frontier, out_field, exclude)

    return _step


def intersect(a: Frontier, b: Frontier) -> Frontier:
    """Members of *a* that are also in *b*, in *a*'s order."""
    if not a or not b:
        return ()
    members = set(b)
    return tuple(i for i in a if i in members)
