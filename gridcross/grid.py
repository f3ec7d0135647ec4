"""Jittered coordinate grid and its spiral traversal."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .model import GridIndex, Point2D

ORIGIN: Point2D = (0.0, 0.0)


def grid_side(vertex_count: int) -> int:
    """Return ``r = ceil(sqrt(V)) + 1``."""

    return int(math.ceil(math.sqrt(max(vertex_count, 0)))) + 1


@dataclass(frozen=True)
class CoordinateGrid:
    """Row-major ``side x side`` grid of jittered points.

    ``coords`` is a read-only ``(side * side, 2)`` array shared by every
    heuristic of one layout call.
    """

    side: int
    coords: np.ndarray

    def __len__(self) -> int:
        return int(self.coords.shape[0])

    def contains(self, index: int) -> bool:
        return 0 <= index < len(self)

    def point(self, index: GridIndex) -> Point2D:
        if not self.contains(index):
            return ORIGIN
        x, y = self.coords[index]
        return (float(x), float(y))

    def cell_of(self, index: GridIndex) -> Tuple[int, int]:
        """Return the ``(column, row)`` cell obtained by truncating the jittered point."""

        x, y = self.point(index)
        return int(x), int(y)

    def positions(self, assignment: Sequence[GridIndex]) -> List[Point2D]:
        return [self.point(index) for index in assignment]

    def layout_array(self, assignment: Sequence[GridIndex]) -> np.ndarray:
        return np.asarray(self.positions(assignment), dtype=float).reshape(len(assignment), 2)


def build_grid(vertex_count: int, rng: np.random.Generator, jitter: float = 2.0) -> CoordinateGrid:
    """Build the jittered grid for ``vertex_count`` vertices.

    Point ``i * r + j`` is ``(j, i)`` plus uniform noise in ``[-jitter, jitter]``
    on each axis; noise is drawn x first, then y, cell by cell.
    """

    side = grid_side(vertex_count)
    rows, cols = np.divmod(np.arange(side * side), side)
    base = np.column_stack((cols, rows)).astype(float)
    noise = rng.uniform(-jitter, jitter, size=(side * side, 2))
    coords = base + noise
    coords.flags.writeable = False
    return CoordinateGrid(side=side, coords=coords)


def spiral_order(side: int) -> List[GridIndex]:
    """Return grid indices of a ``side x side`` grid in clockwise spiral order."""

    order: List[GridIndex] = []
    top, bottom = 0, side - 1
    left, right = 0, side - 1

    while top <= bottom and left <= right:
        for j in range(left, right + 1):
            order.append(top * side + j)
        top += 1

        for i in range(top, bottom + 1):
            order.append(i * side + right)
        right -= 1

        if top <= bottom:
            for j in range(right, left - 1, -1):
                order.append(bottom * side + j)
            bottom -= 1

        if left <= right:
            for i in range(bottom, top - 1, -1):
                order.append(i * side + left)
            left += 1

    return order


__all__ = ["CoordinateGrid", "ORIGIN", "build_grid", "grid_side", "spiral_order"]
