"""Tests for DetectOptions."""
from __future__ import annotations

import dataclasses

import pytest

from floyd_cycles.domain.options import DEFAULT_OPTIONS, DetectOptions


class TestDetectOptions:
    def test_defaults(self) -> None:
        assert DEFAULT_OPTIONS.out_edge_field == "out"
        assert DEFAULT_OPTIONS.in_edge_field == "in"
        assert DEFAULT_OPTIONS.normalize_path is False
        assert DEFAULT_OPTIONS.exclude_indices == frozenset()

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_OPTIONS.normalize_path = True  # type: ignore[misc]

    def test_with_excluded_returns_copy(self) -> None:
        base = DetectOptions(exclude_indices=frozenset({1}))
        wider = base.with_excluded([2, 3])
        assert wider.exclude_indices == frozenset({1, 2, 3})
        assert base.exclude_indices == frozenset({1})
        assert wider.out_edge_field == base.out_edge_field

    def test_iterable_exclusions_frozen(self) -> None:
        opts = DetectOptions(exclude_indices={4, 5})  # type: ignore[arg-type]
        assert isinstance(opts.exclude_indices, frozenset)
