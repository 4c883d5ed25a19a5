"""Shared type aliases used across the package."""
from __future__ import annotations

from typing import Any, Sequence, TypeAlias

Index: TypeAlias = int
# int | Sequence[int] | Mapping[str, Sequence[int]] | None
Node: TypeAlias = Any
Path: TypeAlias = Sequence[Node]
Frontier: TypeAlias = tuple[int, ...]
