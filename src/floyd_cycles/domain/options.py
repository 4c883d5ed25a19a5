"""Detection options.

One immutable options object travels with every call.  Callers that
want a different exclusion set build a new one with with_excluded()
rather than editing a shared default.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable


@dataclass(frozen=True, slots=True)
class DetectOptions:
    """Options accepted by floyd(), detect_cycles() and normalize_path().

    out_edge_field / in_edge_field name the keys read from record nodes.
    normalize_path turns in-edges into out-edges before detection.
    exclude_indices are never entered by the frontier step.
    """
    out_edge_field: str = "out"
    in_edge_field: str = "in"
    normalize_path: bool = False
    exclude_indices: frozenset[int] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # accept any iterable from callers, store a frozenset
        if not isinstance(self.exclude_indices, frozenset):
            object.__setattr__(
                self, "exclude_indices", frozenset(self.exclude_indices)
            )

    def with_excluded(self, indices: Iterable[int]) -> DetectOptions:
        """Return a copy whose exclusion set also contains *indices*."""
        return replace(self, exclude_indices=self.exclude_indices | frozenset(indices))


DEFAULT_OPTIONS = DetectOptions()
