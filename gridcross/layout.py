"""Layout façade running every heuristic and selecting the returned placement."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .bounds import estimate_k
from .brute_force import brute_force_assignment
from .config import get_layout_options
from .crossings import count_crossings
from .graph import AdjacencyLike, normalize_adjacency
from .grid import CoordinateGrid, build_grid, spiral_order
from .heuristics import barycentric_assignment, degree_greedy_assignment, spiral_assignment
from .logging_utils import apply_debug_logging
from .model import (
    CANDIDATE_ORDER,
    Adjacency,
    CancelToken,
    Candidate,
    Heuristic,
    LayoutOptions,
    LayoutResult,
    check_cancelled,
)
from .refine import refine_assignment, target_distance

logger = logging.getLogger(__name__)


def build_candidates(
    vertex_count: int,
    edge_count: int,
    adjacency: Adjacency,
    grid: CoordinateGrid,
    rng: np.random.Generator,
    options: LayoutOptions,
    *,
    cancel_token: Optional[CancelToken] = None,
) -> List[Candidate]:
    """Return the Spiral, Degree-Greedy, Barycentric and Refined candidates, in that order."""

    order = spiral_order(grid.side)
    assignments = {
        Heuristic.SPIRAL: spiral_assignment(vertex_count, order),
        Heuristic.DEGREE_GREEDY: degree_greedy_assignment(vertex_count, adjacency, order),
        Heuristic.BARYCENTRIC: barycentric_assignment(vertex_count, adjacency, order),
    }
    check_cancelled(cancel_token)

    refined = refine_assignment(
        adjacency,
        assignments[Heuristic.BARYCENTRIC],
        grid,
        target_distance(vertex_count, edge_count),
        rng,
        max_iterations=options.max_refine_iterations,
        cancel_token=cancel_token,
    )
    assignments[Heuristic.REFINED] = refined.assignment
    logger.debug(
        "Refined assignment after %d iteration(s), %d swap(s)", refined.iterations, refined.swaps
    )

    candidates: List[Candidate] = []
    for heuristic in CANDIDATE_ORDER:
        check_cancelled(cancel_token)
        assignment = assignments[heuristic]
        crossings = count_crossings(grid.positions(assignment), adjacency)
        logger.debug("Candidate %s crossings=%d", heuristic.name, crossings)
        candidates.append(Candidate(heuristic=heuristic, assignment=assignment, crossings=crossings))
    return candidates


def select_best_index(crossings: Sequence[int]) -> int:
    """Return the index of the fewest crossings; later candidates win ties."""

    best_index = 0
    best_value = crossings[0]
    for idx in range(1, len(crossings)):
        if crossings[idx] <= best_value:
            best_value = crossings[idx]
            best_index = idx
    return best_index


def choose_candidate(candidates: Sequence[Candidate], heuristic_choice: int) -> Candidate:
    """Resolve a caller choice (clamped to ``0..4``) to one candidate."""

    choice = Heuristic.from_choice(heuristic_choice)
    if choice == Heuristic.AUTO:
        return candidates[select_best_index([candidate.crossings for candidate in candidates])]
    for candidate in candidates:
        if candidate.heuristic == choice:
            return candidate
    raise LookupError(f"no candidate produced for {choice.name}")  # pragma: no cover - guarded by CANDIDATE_ORDER


def _apply_brute_force(
    chosen: Candidate,
    vertex_count: int,
    adjacency: Adjacency,
    grid: CoordinateGrid,
    options: LayoutOptions,
    cancel_token: Optional[CancelToken],
) -> Candidate:
    if vertex_count >= options.brute_force_limit:
        return chosen
    assignment, crossings = brute_force_assignment(
        vertex_count,
        adjacency,
        grid,
        batch_size=options.brute_force_batch,
        cancel_token=cancel_token,
    )
    if crossings < chosen.crossings:
        logger.info(
            "Brute force overrides %s (%d -> %d crossings)",
            chosen.heuristic.name,
            chosen.crossings,
            crossings,
        )
        return Candidate(heuristic=Heuristic.BRUTE_FORCE, assignment=assignment, crossings=crossings)
    return chosen


def compute_layout(
    vertex_count: int,
    edge_count: int,
    adjacency: AdjacencyLike,
    heuristic_choice: int = 0,
    *,
    options: Optional[LayoutOptions] = None,
    cancel_token: Optional[CancelToken] = None,
) -> LayoutResult:
    """Place ``vertex_count`` vertices on a jittered grid and compute ``k``.

    ``heuristic_choice`` selects ``0`` automatic, ``1`` Spiral, ``2``
    Degree-Greedy, ``3`` Barycentric or ``4`` Refined; other values are
    clamped. Graphs with fewer than ``options.brute_force_limit`` vertices
    are also solved exhaustively and the exhaustive placement replaces the
    selected one when it has strictly fewer crossings.
    """

    options = options if options is not None else get_layout_options()
    if vertex_count <= 0:
        logger.info("Empty graph; nothing to lay out")
        return LayoutResult(k=0, positions=[])

    check_cancelled(cancel_token)
    rows = normalize_adjacency(vertex_count, adjacency)
    logger.info(
        "Computing layout for V=%d E=%d heuristic_choice=%s seed=%s",
        vertex_count,
        edge_count,
        heuristic_choice,
        options.seed,
    )

    k = estimate_k(vertex_count, edge_count, rows, options.density_constant)

    rng = np.random.default_rng(options.seed)
    grid = build_grid(vertex_count, rng, options.jitter)
    candidates = build_candidates(
        vertex_count, edge_count, rows, grid, rng, options, cancel_token=cancel_token
    )
    chosen = choose_candidate(candidates, heuristic_choice)
    chosen = _apply_brute_force(chosen, vertex_count, rows, grid, options, cancel_token)
    check_cancelled(cancel_token)

    positions: List[Tuple[float, float]] = grid.positions(chosen.assignment[:vertex_count])
    candidate_crossings: Dict[Heuristic, int] = {
        candidate.heuristic: candidate.crossings for candidate in candidates
    }
    logger.info(
        "Layout done k=%d heuristic=%s crossings=%d", k, chosen.heuristic.name, chosen.crossings
    )
    return LayoutResult(
        k=k,
        positions=positions,
        heuristic=chosen.heuristic,
        crossings=chosen.crossings,
        candidate_crossings=candidate_crossings,
    )


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "build_candidates",
    "choose_candidate",
    "compute_layout",
    "select_best_index",
]
