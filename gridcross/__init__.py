from .model import (
    Candidate,
    CancelToken,
    Heuristic,
    LayoutCancelled,
    LayoutOptions,
    LayoutResult,
    RefineResult,
)
from .config import get_layout_options, set_layout_options
from .geometry import ccw, distance, segments_intersect
from .crossings import count_crossings, count_crossings_batch, edge_pairs
from .planarity import is_planar
from .bounds import density_bound, estimate_k
from .grid import CoordinateGrid, build_grid, grid_side, spiral_order
from .heuristics import barycentric_assignment, degree_greedy_assignment, spiral_assignment
from .refine import refine_assignment, target_distance, vertex_stress
from .brute_force import brute_force_assignment
from .graph import Graph, GraphValidationError, normalize_adjacency, parse_edge_list
from .layout import build_candidates, choose_candidate, compute_layout, select_best_index
from .worker import LayoutWorker

__all__ = [
    'Candidate',
    'CancelToken',
    'Heuristic',
    'LayoutCancelled',
    'LayoutOptions',
    'LayoutResult',
    'RefineResult',
    'get_layout_options',
    'set_layout_options',
    'ccw',
    'distance',
    'segments_intersect',
    'count_crossings',
    'count_crossings_batch',
    'edge_pairs',
    'is_planar',
    'density_bound',
    'estimate_k',
    'CoordinateGrid',
    'build_grid',
    'grid_side',
    'spiral_order',
    'barycentric_assignment',
    'degree_greedy_assignment',
    'spiral_assignment',
    'refine_assignment',
    'target_distance',
    'vertex_stress',
    'brute_force_assignment',
    'Graph',
    'GraphValidationError',
    'normalize_adjacency',
    'parse_edge_list',
    'build_candidates',
    'choose_candidate',
    'compute_layout',
    'select_best_index',
    'LayoutWorker',
]
