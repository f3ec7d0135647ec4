import logging

import numpy as np
import pytest

import gridcross.layout as layout_module
from gridcross import (
    CancelToken,
    Heuristic,
    LayoutCancelled,
    LayoutOptions,
    build_candidates,
    build_grid,
    choose_candidate,
    compute_layout,
    get_layout_options,
    select_best_index,
    set_layout_options,
)
from gridcross.model import Candidate


def _adjacency(vertex_count, edges):
    adjacency = [[] for _ in range(vertex_count)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def _complete(n):
    return _adjacency(n, [(u, v) for u in range(n) for v in range(u + 1, n)])


def _cycle(n, step=1):
    return _adjacency(n, [(i, (i + step) % n) for i in range(n)])


def test_empty_graph_returns_zero_and_no_positions():
    k, positions = compute_layout(0, 0, [], 0)

    assert k == 0
    assert positions == []


def test_k5_is_non_planar_with_k_one():
    result = compute_layout(5, 10, _complete(5), 0)

    assert result.k == 1
    assert len(result.positions) == 5


def test_k4_is_planar_but_keeps_one_crossing_on_convex_cells():
    result = compute_layout(4, 6, _complete(4), 0)

    assert result.k == 0
    assert len(result.positions) == 4
    assert result.crossings <= min(result.candidate_crossings.values())
    # Brute force only permutes the first four cells, and with the default
    # seed those sit in convex position, so both diagonals must cross.
    assert result.crossings == 1


def test_positions_are_grid_points():
    adjacency = _cycle(12, step=5)
    result = compute_layout(12, 12, adjacency, 0)
    grid = build_grid(12, np.random.default_rng(get_layout_options().seed))
    cells = {tuple(row) for row in grid.coords.tolist()}

    assert len(result.positions) == 12
    assert len(set(result.positions)) == 12
    assert all(position in cells for position in result.positions)


def test_candidates_are_injective_over_the_grid():
    adjacency = _cycle(30, step=7)
    options = LayoutOptions()
    rng = np.random.default_rng(options.seed)
    grid = build_grid(30, rng)

    candidates = build_candidates(30, 30, adjacency, grid, rng, options)

    assert [c.heuristic for c in candidates] == [
        Heuristic.SPIRAL,
        Heuristic.DEGREE_GREEDY,
        Heuristic.BARYCENTRIC,
        Heuristic.REFINED,
    ]
    for candidate in candidates:
        assert len(set(candidate.assignment)) == 30
        assert all(0 <= cell < len(grid) for cell in candidate.assignment)


def test_select_best_index_prefers_later_on_ties():
    assert select_best_index([3, 3, 3, 3]) == 3
    assert select_best_index([1, 2, 1, 5]) == 2
    assert select_best_index([0, 1, 2, 3]) == 0
    assert select_best_index([4, 2, 2, 3]) == 2


def test_choose_candidate_clamps_choice():
    candidates = [
        Candidate(Heuristic.SPIRAL, [0], 2),
        Candidate(Heuristic.DEGREE_GREEDY, [1], 1),
        Candidate(Heuristic.BARYCENTRIC, [2], 1),
        Candidate(Heuristic.REFINED, [3], 4),
    ]

    assert choose_candidate(candidates, 0).heuristic == Heuristic.BARYCENTRIC
    assert choose_candidate(candidates, -3).heuristic == Heuristic.BARYCENTRIC
    assert choose_candidate(candidates, 1).heuristic == Heuristic.SPIRAL
    assert choose_candidate(candidates, 2).heuristic == Heuristic.DEGREE_GREEDY
    assert choose_candidate(candidates, 4).heuristic == Heuristic.REFINED
    assert choose_candidate(candidates, 17).heuristic == Heuristic.REFINED


def test_auto_choice_on_full_tie_selects_refined():
    result = compute_layout(3, 0, [[], [], []], 0)

    assert set(result.candidate_crossings.values()) == {0}
    assert result.heuristic == Heuristic.REFINED


def test_explicit_choice_is_kept_when_brute_force_is_not_better():
    result = compute_layout(3, 0, [[], [], []], 1)
    grid = build_grid(3, np.random.default_rng(get_layout_options().seed))

    assert result.heuristic == Heuristic.SPIRAL
    assert result.positions == grid.positions([0, 1, 2])


def test_brute_force_overrides_explicit_choice_when_strictly_better(monkeypatch):
    monkeypatch.setattr(layout_module, "count_crossings", lambda positions, adjacency: 5)

    result = compute_layout(4, 1, _adjacency(4, [(0, 1)]), 2)

    assert result.heuristic == Heuristic.BRUTE_FORCE
    assert result.crossings == 0
    assert len(result.positions) == 4


def test_brute_force_is_skipped_for_large_graphs(monkeypatch):
    monkeypatch.setattr(layout_module, "count_crossings", lambda positions, adjacency: 5)

    result = compute_layout(4, 1, _adjacency(4, [(0, 1)]), 2, options=LayoutOptions(brute_force_limit=4))

    assert result.heuristic == Heuristic.DEGREE_GREEDY
    assert result.crossings == 5


def test_layout_is_reproducible_and_seeded():
    adjacency = _cycle(11, step=4)

    first = compute_layout(11, 11, adjacency, 0)
    second = compute_layout(11, 11, adjacency, 0)
    other = compute_layout(11, 11, adjacency, 0, options=LayoutOptions(seed=7))

    assert first.positions == second.positions
    assert first.positions != other.positions


def test_default_options_are_configurable():
    original = get_layout_options()
    try:
        set_layout_options(LayoutOptions(seed=99))
        assert get_layout_options().seed == 99
        configured = compute_layout(11, 11, _cycle(11, step=4), 3)
        explicit = compute_layout(11, 11, _cycle(11, step=4), 3, options=LayoutOptions(seed=99))
        assert configured.positions == explicit.positions
    finally:
        set_layout_options(original)


def test_mapping_adjacency_and_missing_vertices():
    as_list = compute_layout(4, 2, [[1], [0, 2], [1], []], 0)
    as_mapping = compute_layout(4, 2, {0: [1], 1: [0, 2], 2: [1]}, 0)

    assert as_list.positions == as_mapping.positions


def test_out_of_range_neighbours_are_dropped(caplog):
    with caplog.at_level(logging.WARNING, logger="gridcross.graph"):
        result = compute_layout(3, 1, [[1, 7], [0], [-2]], 0)

    assert len(result.positions) == 3
    assert "Dropped 2 neighbour id(s)" in caplog.text


def test_duplicate_edges_do_not_crash():
    adjacency = _adjacency(5, [(0, 1), (0, 1), (1, 2), (2, 3), (3, 4), (3, 4)])

    result = compute_layout(5, 6, adjacency, 0)

    assert len(result.positions) == 5


def test_cancelled_token_aborts_layout():
    token = CancelToken()
    token.cancel()

    with pytest.raises(LayoutCancelled):
        compute_layout(5, 10, _complete(5), 0, cancel_token=token)


def test_invalid_options_are_rejected():
    with pytest.raises(ValueError):
        LayoutOptions(jitter=-1.0)
    with pytest.raises(ValueError):
        LayoutOptions(brute_force_batch=0)
