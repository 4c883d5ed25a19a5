"""Options and type aliases shared by the graph algorithms."""

from floyd_cycles.domain.options import DEFAULT_OPTIONS, DetectOptions

__all__ = [
    "DEFAULT_OPTIONS",
    "DetectOptions",
]
