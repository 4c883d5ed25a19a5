"""Shared fixtures for the graph tests."""
from __future__ import annotations

import pytest

@pytest.fixture
def number_path() -> list:
    """0 -> 1 -> 2 -> 3 -> 4 -> 0, pointer form."""
    return [1, 2, 3, 4, 0]


@pytest.fixture
def simple_cycle() -> list:
    """0 -> 1 -> 2 -> 3 -> 0"""
    return [[1], [2], [3], [0]]


@pytest.fixture
def chain_path() -> list:
    """0 -> 1 -> 2 -> 3, dead end."""
    return [[1], [2], [3], []]


@pytest.fixture
def tail_cycle() -> list:
    """0 -> 1 -> 2 -> 3 -> 1: tail of one, cycle {1, 2, 3}."""
    return [1, 2, 3, 1]


@pytest.fixture
def branching_path() -> list:
    """0 -> {1, 3}, 1 -> 2 -> 3 -> 1"""
    return [[1, 3], [2], [3], [1]]


@pytest.fixture
def in_edge_path() -> list:
    """Edges declared from both ends; needs normalization."""
    return [
        {},
        {"in": [3], "out": [2, 3]},
        {"in": [3]},
        {"in": [0], "out": [3]},
        {"in": [1], "out": [1]},
    ]


@pytest.fixture
def out_edge_path() -> list:
    """in_edge_path with every edge written as an out-edge."""
    return [[3], [2, 3, 4], [], [3, 1, 2], [1]]


@pytest.fixture
def disconnected_path() -> list:
    """0 -> 1 and a separate 2 <-> 3."""
    return [{"out": [1]}, {}, {"out": [3]}, {"out": [2]}]


@pytest.fixture
def diamond_path() -> list:
    """
    0 -> 1 -> 2
    0 -> 2
    """
    return [[1, 2], [2], []]
