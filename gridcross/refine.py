"""Stress-reducing local search over grid assignments.

Starting from a constructive assignment, repeatedly pick a random edge that
is longer than the target length and try to swap one of its endpoints with a
vertex sitting near the other endpoint. Only strictly improving swaps are
executed; there is no annealing schedule.
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .geometry import distance
from .grid import CoordinateGrid
from .logging_utils import apply_debug_logging
from .model import Assignment, CancelToken, RefineResult, check_cancelled

logger = logging.getLogger(__name__)


def target_distance(vertex_count: int, edge_count: int) -> float:
    """Return the ideal edge length ``sqrt(2E / (pi * V))``."""

    if vertex_count <= 0:
        return 0.0
    return math.sqrt((2.0 * edge_count) / (math.pi * vertex_count))


def vertex_stress(
    vertex: int,
    adjacency: Sequence[Sequence[int]],
    assignment: Sequence[int],
    grid: CoordinateGrid,
) -> float:
    """Sum of distances from ``vertex`` to its placed neighbours."""

    here = grid.point(assignment[vertex])
    stress = 0.0
    for neighbour in adjacency[vertex]:
        if assignment[neighbour] != -1:
            stress += distance(here, grid.point(assignment[neighbour]))
    return stress


def _swap_gain(
    u: int,
    w: int,
    adjacency: Sequence[Sequence[int]],
    assignment: Assignment,
    grid: CoordinateGrid,
) -> float:
    before = vertex_stress(u, adjacency, assignment, grid) + vertex_stress(w, adjacency, assignment, grid)
    assignment[u], assignment[w] = assignment[w], assignment[u]
    after = vertex_stress(u, adjacency, assignment, grid) + vertex_stress(w, adjacency, assignment, grid)
    assignment[u], assignment[w] = assignment[w], assignment[u]
    return before - after


def _edges(adjacency: Sequence[Sequence[int]]) -> List[Tuple[int, int]]:
    return [(u, v) for u, neighbours in enumerate(adjacency) for v in neighbours if u < v]


def refine_assignment(
    adjacency: Sequence[Sequence[int]],
    initial: Sequence[int],
    grid: CoordinateGrid,
    target_d: float,
    rng: np.random.Generator,
    *,
    max_iterations: int = 2500,
    cancel_token: Optional[CancelToken] = None,
) -> RefineResult:
    """Shorten over-long edges by greedy pairwise swaps."""

    assignment: Assignment = list(initial)
    occupant: List[int] = [-1] * len(grid)
    for v, index in enumerate(assignment):
        if grid.contains(index):
            occupant[index] = v

    edges = _edges(adjacency)
    radius = int(math.ceil(target_d))
    side = grid.side
    gains: List[float] = []
    iterations = 0
    converged = False

    for iterations in range(1, max_iterations + 1):
        check_cancelled(cancel_token)

        bad_edges = [
            (u, v)
            for u, v in edges
            if distance(grid.point(assignment[u]), grid.point(assignment[v])) > target_d
        ]
        if not bad_edges:
            converged = True
            iterations -= 1
            break

        u, v = bad_edges[int(rng.integers(len(bad_edges)))]
        cx, cy = grid.cell_of(assignment[v])

        best_w = -1
        best_gain = 0.0
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                col, row = cx + dx, cy + dy
                if col < 0 or col >= side or row < 0 or row >= side:
                    continue
                w = occupant[row * side + col]
                if w == -1 or w == u or w == v:
                    continue
                gain = _swap_gain(u, w, adjacency, assignment, grid)
                if gain > best_gain:
                    best_gain = gain
                    best_w = w

        if best_w != -1:
            p_u, p_w = assignment[u], assignment[best_w]
            assignment[u], assignment[best_w] = p_w, p_u
            occupant[p_u] = best_w
            occupant[p_w] = u
            gains.append(best_gain)

    logger.debug(
        "Refinement finished iterations=%d swaps=%d converged=%s target_d=%.4f",
        iterations,
        len(gains),
        converged,
        target_d,
    )
    return RefineResult(assignment=assignment, iterations=iterations, converged=converged, gains=gains)


# vertex_stress sits in the swap search inner loop.
apply_debug_logging(globals(), logger=logger, skip=("vertex_stress",))


__all__ = ["refine_assignment", "target_distance", "vertex_stress"]
