"""Constructive vertex-to-cell placement strategies.

Every strategy walks the grid in spiral order and returns an injective
assignment ``vertex -> grid index`` for vertices ``0..V-1``.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .logging_utils import apply_debug_logging
from .model import Assignment, GridIndex

logger = logging.getLogger(__name__)


def _unused(slots: int) -> List[bool]:
    return [False] * slots


def spiral_assignment(vertex_count: int, order: Sequence[GridIndex]) -> Assignment:
    """Place vertex ``i`` on the ``i``-th cell of the spiral."""

    return [order[v] for v in range(vertex_count)]


def degree_greedy_assignment(
    vertex_count: int, adjacency: Sequence[Sequence[int]], order: Sequence[GridIndex]
) -> Assignment:
    """Place vertices by descending degree along the spiral (ties by id)."""

    ranked = sorted(range(vertex_count), key=lambda v: (-len(adjacency[v]), v))
    assignment: Assignment = [-1] * vertex_count
    for slot, v in enumerate(ranked):
        assignment[v] = order[slot]
    return assignment


def barycentric_assignment(
    vertex_count: int, adjacency: Sequence[Sequence[int]], order: Sequence[GridIndex]
) -> Assignment:
    """Place each vertex on the free cell whose index is nearest its placed neighbours' mean.

    Vertices are visited in id order. A vertex without placed neighbours takes
    the next free cell of the spiral. Among equally near cells the one met
    first in spiral order wins.
    """

    assignment: Assignment = [-1] * vertex_count
    used = _unused(len(order))

    for v in range(vertex_count):
        placed = [assignment[u] for u in adjacency[v] if assignment[u] != -1]
        chosen: Optional[GridIndex] = None

        if placed:
            mean = sum(placed) / len(placed)
            best = float("inf")
            for index in order:
                if used[index]:
                    continue
                gap = abs(index - mean)
                if gap < best:
                    best = gap
                    chosen = index

        if chosen is None:
            chosen = next(index for index in order if not used[index])

        assignment[v] = chosen
        used[chosen] = True

    return assignment


apply_debug_logging(globals(), logger=logger)
