"""Run floyd() from every index to cover disconnected parts of a path.

A single start only sees what is reachable from it.  Trying each index
in turn finds cycles in every component.  Once a cycle is found its
entry index is excluded from later searches, so walking back into the
same cycle dead-ends at the entry instead of reporting it again.

Only entry indices are excluded, not every member of a found cycle.
That is enough to break each found cycle, and it leaves the other
members reachable, so a different cycle that shares them can still be
found from a later start.
"""
from __future__ import annotations

import logging
from dataclasses import replace

from floyd_cycles.domain.options import DEFAULT_OPTIONS, DetectOptions
from floyd_cycles.domain.types import Path
from floyd_cycles.graph.floyd import Cycle, floyd
from floyd_cycles.graph.normalize import normalize_path

log = logging.getLogger(__name__)


def detect_cycles(path: Path, options: DetectOptions | None = None) -> list[Cycle]:
    """Return every distinct cycle found, in the order of their starts."""
    opts = options or DEFAULT_OPTIONS
    if opts.normalize_path:
        path = normalize_path(path, opts)

    # already normalized above; floyd() must not do it again per start
    base = replace(opts, normalize_path=False)
    entries: list[int] = []
    cycles: list[Cycle] = []
    for start in range(len(path)):
        cycle = floyd(path, start, base.with_excluded(entries))
        if cycle is not None:
            entries.append(cycle.first_index)
            cycles.append(cycle)

    log.debug("Found %d cycle(s) in %d node(s)", len(cycles), len(path))
    return cycles
