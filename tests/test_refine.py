import math

import numpy as np
import pytest

from gridcross.grid import build_grid, spiral_order
from gridcross.heuristics import barycentric_assignment
from gridcross.model import CancelToken, LayoutCancelled
from gridcross.refine import refine_assignment, target_distance, vertex_stress


def _adjacency(vertex_count, edges):
    adjacency = [[] for _ in range(vertex_count)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _lattice(vertex_count):
    return build_grid(vertex_count, np.random.default_rng(0), jitter=0.0)


def test_target_distance():
    assert target_distance(5, 10) == pytest.approx(math.sqrt(20 / (5 * math.pi)))
    assert target_distance(0, 3) == 0.0
    assert target_distance(4, 0) == 0.0


def test_vertex_stress_counts_placed_neighbours_only():
    grid = _lattice(4)  # side 3
    adjacency = _adjacency(4, [(0, 1), (0, 2), (0, 3)])
    assignment = [0, 1, 3, -1]

    assert vertex_stress(0, adjacency, assignment, grid) == pytest.approx(2.0)


def test_graph_without_edges_converges_immediately():
    grid = _lattice(3)
    result = refine_assignment([[], [], []], [0, 1, 3], grid, 0.0, np.random.default_rng(1))

    assert result.converged
    assert result.iterations == 0
    assert result.assignment == [0, 1, 3]
    assert result.gains == []


def test_short_edges_are_left_alone():
    grid = _lattice(4)
    adjacency = _adjacency(4, [(0, 1)])
    result = refine_assignment(adjacency, [0, 1, 4, 2], grid, 1.5, np.random.default_rng(1))

    assert result.converged
    assert result.assignment == [0, 1, 4, 2]


def test_single_improving_swap_then_stall():
    grid = _lattice(4)  # side 3, cell i -> (i % 3, i // 3)
    adjacency = _adjacency(4, [(0, 1)])
    initial = [0, 8, 4, 2]

    result = refine_assignment(
        adjacency, initial, grid, target_distance(4, 1), np.random.default_rng(5), max_iterations=10
    )

    assert result.assignment == [4, 8, 0, 2]
    assert result.gains == [pytest.approx(math.sqrt(2.0))]
    assert result.swaps == 1
    assert result.iterations == 10
    assert not result.converged


def test_iteration_cap_is_respected():
    grid = build_grid(16, np.random.default_rng(3))
    adjacency = _adjacency(16, [(i, (i + 5) % 16) for i in range(16)])
    initial = barycentric_assignment(16, adjacency, spiral_order(grid.side))

    result = refine_assignment(adjacency, initial, grid, 0.0, np.random.default_rng(3), max_iterations=7)

    assert result.iterations == 7
    assert not result.converged


def test_refinement_keeps_assignment_injective_and_gains_positive():
    grid = build_grid(20, np.random.default_rng(123456))
    edges = [(i, (i * 7 + 3) % 20) for i in range(20) if i != (i * 7 + 3) % 20]
    adjacency = _adjacency(20, edges)
    initial = barycentric_assignment(20, adjacency, spiral_order(grid.side))

    result = refine_assignment(
        adjacency, initial, grid, target_distance(20, len(edges)), np.random.default_rng(11)
    )

    assert result.iterations <= 2500
    assert sorted(result.assignment) == sorted(initial)
    assert all(gain > 0.0 for gain in result.gains)


def test_refinement_is_deterministic_for_a_seed():
    grid = build_grid(10, np.random.default_rng(9))
    adjacency = _adjacency(10, [(i, (i + 3) % 10) for i in range(10)])
    initial = barycentric_assignment(10, adjacency, spiral_order(grid.side))
    target = target_distance(10, 10)

    first = refine_assignment(adjacency, initial, grid, target, np.random.default_rng(42))
    second = refine_assignment(adjacency, initial, grid, target, np.random.default_rng(42))

    assert first.assignment == second.assignment
    assert first.gains == second.gains


def test_cancelled_token_stops_refinement():
    grid = _lattice(4)
    token = CancelToken()
    token.cancel()

    with pytest.raises(LayoutCancelled):
        refine_assignment(
            _adjacency(4, [(0, 1)]), [0, 8, 4, 2], grid, 0.1, np.random.default_rng(0), cancel_token=token
        )
