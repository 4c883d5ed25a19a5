"""Floyd cycle detection generalized to nodes with many successors.

The classic tortoise-and-hare walks a linked list with two pointers.
Here a node can have zero, one or many successors, so each "pointer" is
a frontier: the set of indices reachable after k steps.  The three
phases stay the same:

  1.  Meet.     Tortoise advances one step, hare two, until their
                frontiers share an index.  If the tortoise frontier
                runs dry first, nothing reachable loops back: no cycle.
  2.  Find mu.  Reset the tortoise to {start}, move both one step at a
                time.  The step count at which they meet again is the
                distance from start to the cycle entry.
  3.  Find lambda.  From an entry index, walk a frontier forward
                until it contains that index again.  The step count
                is the cycle length.  Entry indices are tried in
                frontier order; one that never comes back is not on
                a cycle and is skipped.

With several successors per node, phase 1 can also meet on a node that
two branches of a DAG both reach (0 -> 1 -> 2 and 0 -> 2), and phase 2
can converge on an index that sits ahead of the cycle rather than on
it.  When phase 2 never converges, or no entry index lies on a cycle,
the search falls back to scanning the frontiers from start level by
level for the nearest index that does.  A cycle is therefore reported
exactly when one is reachable, and it always returns to its own
first_index.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from floyd_cycles.domain.options import DEFAULT_OPTIONS, DetectOptions
from floyd_cycles.domain.types import Frontier, Index, Path
from floyd_cycles.graph.frontier import Stepper, intersect, make_stepper
from floyd_cycles.graph.normalize import normalize_path

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Cycle:
    """A cycle reachable from some start index."""
    first_index: Index       # entry node of the cycle
    steps_from_start: int    # mu
    length: int              # lambda

    def to_dict(self) -> dict[str, int]:
        return {
            "firstIndex": self.first_index,
            "stepsFromStart": self.steps_from_start,
            "length": self.length,
        }


def _meet(nxt: Stepper, start: Index) -> Frontier | None:
    tortoise = nxt((start,))
    hare = nxt(nxt((start,)))
    while not intersect(tortoise, hare):
        if not tortoise:
            return None
        tortoise = nxt(tortoise)
        hare = nxt(nxt(hare))
    return hare


def _entry(nxt: Stepper, start: Index, hare: Frontier) -> tuple[Frontier, int] | None:
    tortoise: Frontier = (start,)
    mu = 0
    seen: set[tuple[frozenset[Index], frozenset[Index]]] = set()
    while not (entry := intersect(tortoise, hare)):
        state = (frozenset(tortoise), frozenset(hare))
        if not tortoise or not hare or state in seen:
            return None
        seen.add(state)
        tortoise = nxt(tortoise)
        hare = nxt(hare)
        mu += 1
    return entry, mu


def _length(nxt: Stepper, entry: Index) -> int | None:
    lagging: Frontier = (entry,)
    lam = 1
    leading = nxt(lagging)
    seen: set[frozenset[Index]] = set()
    while not intersect(lagging, leading):
        state = frozenset(leading)
        if not leading or state in seen:
            return None
        seen.add(state)
        leading = nxt(leading)
        lam += 1
    return lam


def _nearest(nxt: Stepper, start: Index) -> Cycle | None:
    """Walk out from *start* level by level to the first index on a cycle.

    Every frontier state is visited at most once, so this ends even on
    graphs where phases 2 and 3 cannot converge.
    """
    frontier: Frontier = (start,)
    steps = 0
    seen: set[frozenset[Index]] = set()
    while frontier and (state := frozenset(frontier)) not in seen:
        seen.add(state)
        for index in frontier:
            lam = _length(nxt, index)
            if lam is not None:
                return Cycle(first_index=index, steps_from_start=steps, length=lam)
        frontier = nxt(frontier)
        steps += 1
    return None


def floyd(
    path: Path,
    start: Index = 0,
    options: DetectOptions | None = None,
) -> Cycle | None:
    """Find the cycle reachable from *start*, or return None.

    Indices in options.exclude_indices are never stepped into.  When
    options.normalize_path is set, in-edges are turned into out-edges
    first (the caller's path is not modified).
    """
    opts = options or DEFAULT_OPTIONS
    if opts.normalize_path:
        path = normalize_path(path, opts)

    nxt = make_stepper(path, opts.out_edge_field, opts.exclude_indices)

    hare = _meet(nxt, start)
    if hare is None:
        log.debug("start=%d: no cycle reachable", start)
        return None

    found = _entry(nxt, start, hare)
    if found is None:
        log.debug("start=%d: frontiers met but never converged on an entry", start)
        return _nearest(nxt, start)
    entry, mu = found

    for first in entry:
        lam = _length(nxt, first)
        if lam is not None:
            break
    else:
        log.debug("start=%d: no index of %r lies on a cycle", start, entry)
        return _nearest(nxt, start)

    cycle = Cycle(first_index=first, steps_from_start=mu, length=lam)
    log.debug("start=%d: %s", start, cycle)
    return cycle
