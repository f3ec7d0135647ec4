"""Crossing-difficulty bound ``k``."""

from __future__ import annotations

import math
from typing import Sequence

from .model import DEFAULT_DENSITY_CONSTANT
from .planarity import is_planar


def density_bound(
    vertex_count: int, edge_count: int, density_constant: float = DEFAULT_DENSITY_CONSTANT
) -> int:
    """Return ``ceil((E / (C * V)) ** 2)``, or ``0`` for an empty graph."""

    if vertex_count <= 0:
        return 0
    ratio = float(edge_count) / (density_constant * float(vertex_count))
    return int(math.ceil(ratio * ratio))


def estimate_k(
    vertex_count: int,
    edge_count: int,
    adjacency: Sequence[Sequence[int]],
    density_constant: float = DEFAULT_DENSITY_CONSTANT,
) -> int:
    """Return ``0`` for planar graphs and the density bound otherwise."""

    if vertex_count <= 0:
        return 0
    if is_planar(adjacency):
        return 0
    return density_bound(vertex_count, edge_count, density_constant)


__all__ = ["density_bound", "estimate_k"]
