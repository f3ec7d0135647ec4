"""Edge crossing counts for straight-line placements."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from .model import Point2D

logger = logging.getLogger(__name__)


def _canonical_edges(adjacency: Sequence[Sequence[int]]) -> List[Tuple[int, int]]:
    edges: List[Tuple[int, int]] = []
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            if u < v:
                edges.append((u, v))
    return edges


def edge_pairs(adjacency: Sequence[Sequence[int]]) -> np.ndarray:
    """Return every edge pair that may cross as rows ``(u, v, x, y)``.

    Only pairs with ``u < v``, ``x < y`` and ``u < x`` are listed, and pairs
    sharing an endpoint are skipped. Duplicate edges produce duplicate rows.
    """

    edges = _canonical_edges(adjacency)
    rows: List[Tuple[int, int, int, int]] = []
    for u, v in edges:
        for x, y in edges:
            if x <= u:
                continue
            if u == y or v == x or v == y:
                continue
            rows.append((u, v, x, y))
    if not rows:
        return np.zeros((0, 4), dtype=np.intp)
    return np.asarray(rows, dtype=np.intp)


def _ccw(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> np.ndarray:
    return (c[..., 1] - a[..., 1]) * (b[..., 0] - a[..., 0]) > (b[..., 1] - a[..., 1]) * (
        c[..., 0] - a[..., 0]
    )


def count_crossings_batch(layouts: np.ndarray, pairs: np.ndarray) -> np.ndarray:
    """Count crossings for a stack of layouts of shape ``(batch, V, 2)``."""

    layouts = np.asarray(layouts, dtype=float)
    batch = layouts.shape[0]
    if pairs.shape[0] == 0:
        return np.zeros(batch, dtype=np.int64)
    a = layouts[:, pairs[:, 0], :]
    b = layouts[:, pairs[:, 1], :]
    c = layouts[:, pairs[:, 2], :]
    d = layouts[:, pairs[:, 3], :]
    crossing = (_ccw(a, c, d) != _ccw(b, c, d)) & (_ccw(a, b, c) != _ccw(a, b, d))
    return crossing.sum(axis=1, dtype=np.int64)


def count_crossings(positions: Sequence[Point2D], adjacency: Sequence[Sequence[int]]) -> int:
    """Count strictly crossing pairs of non-adjacent edges under ``positions``."""

    if len(positions) == 0:
        return 0
    pairs = edge_pairs(adjacency)
    layout = np.asarray(positions, dtype=float).reshape(1, len(positions), 2)
    return int(count_crossings_batch(layout, pairs)[0])


__all__ = ["count_crossings", "count_crossings_batch", "edge_pairs"]
