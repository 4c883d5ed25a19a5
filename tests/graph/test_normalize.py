"""Tests for in-edge to out-edge normalization."""
from __future__ import annotations

import copy

from floyd_cycles.domain.options import DetectOptions
from floyd_cycles.graph.normalize import normalize_path


class TestNormalizePath:
    def test_in_edges_become_out_edges(self, in_edge_path: list) -> None:
        result = normalize_path(in_edge_path)
        assert result == [
            {"out": [3]},
            {"out": [2, 3, 4]},
            {},
            {"out": [3, 1, 2]},
            {"out": [1]},
        ]

    def test_no_in_field_left(self, in_edge_path: list) -> None:
        for node in normalize_path(in_edge_path):
            assert "in" not in node

    def test_caller_path_untouched(self, in_edge_path: list) -> None:
        before = copy.deepcopy(in_edge_path)
        result = normalize_path(in_edge_path)
        assert in_edge_path == before
        assert result is not in_edge_path

    def test_union_does_not_duplicate(self) -> None:
        # edge 0 -> 1 declared from both ends
        path = [{"out": [1]}, {"in": [0]}]
        assert normalize_path(path) == [{"out": [1]}, {}]

    def test_idempotent(self, in_edge_path: list) -> None:
        once = normalize_path(in_edge_path)
        assert normalize_path(once) == once

    def test_nodes_without_in_edges_keep_out_edges(self) -> None:
        path = [{"out": [1]}, {"out": [0]}]
        assert normalize_path(path) == [{"out": [1]}, {"out": [0]}]

    def test_pointer_and_list_predecessors_widen(self) -> None:
        path = [1, [0], {"in": [0, 1]}]
        assert normalize_path(path) == [[1, 2], [0, 2], {}]

    def test_none_predecessor_becomes_record(self) -> None:
        path = [None, {"in": [0]}]
        assert normalize_path(path) == [{"out": [1]}, {}]

    def test_custom_field_names(self) -> None:
        opts = DetectOptions(out_edge_field="to", in_edge_field="from")
        path = [{"to": [1]}, {"from": [2]}, {"in": [0]}]
        result = normalize_path(path, opts)
        # "in" is not the configured in-edge key here, so it is left alone
        assert result == [{"to": [1]}, {}, {"in": [0], "to": [1]}]

    def test_empty_path(self) -> None:
        assert normalize_path([]) == []
