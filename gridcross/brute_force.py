"""Exhaustive placement search for small graphs."""

from __future__ import annotations

import logging
from itertools import islice, permutations
from typing import Optional, Sequence, Tuple

import numpy as np

from .crossings import count_crossings_batch, edge_pairs
from .grid import CoordinateGrid
from .logging_utils import apply_debug_logging
from .model import Assignment, CancelToken, check_cancelled

logger = logging.getLogger(__name__)


def brute_force_assignment(
    vertex_count: int,
    adjacency: Sequence[Sequence[int]],
    grid: CoordinateGrid,
    *,
    batch_size: int = 4096,
    cancel_token: Optional[CancelToken] = None,
) -> Tuple[Assignment, int]:
    """Try every permutation of the first ``vertex_count`` grid cells.

    Permutations are visited in lexicographic order and vertex ``i`` sits on
    cell ``perm[i]``. The lowest crossing count wins; on a tie the later
    permutation replaces the earlier one. Returns ``(assignment, crossings)``.
    """

    if vertex_count <= 0:
        return [], 0

    pairs = edge_pairs(adjacency)
    cells = np.asarray(grid.coords[:vertex_count], dtype=float)
    best: Assignment = list(range(vertex_count))
    best_crossings: Optional[int] = None
    visited = 0

    stream = permutations(range(vertex_count))
    while True:
        check_cancelled(cancel_token)
        chunk = list(islice(stream, batch_size))
        if not chunk:
            break
        perms = np.asarray(chunk, dtype=np.intp)
        counts = count_crossings_batch(cells[perms], pairs)
        visited += len(chunk)

        # Last occurrence of the minimum, so later permutations win ties.
        last = len(counts) - 1 - int(np.argmin(counts[::-1]))
        value = int(counts[last])
        if best_crossings is None or value <= best_crossings:
            best_crossings = value
            best = [int(cell) for cell in perms[last]]

    logger.debug(
        "Brute force visited %d permutations, best crossings=%s", visited, best_crossings
    )
    return best, int(best_crossings or 0)


apply_debug_logging(globals(), logger=logger)


__all__ = ["brute_force_assignment"]
