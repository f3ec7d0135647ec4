from __future__ import annotations

import logging
from typing import Sequence

import networkx as nx

logger = logging.getLogger(__name__)


def build_simple_graph(adjacency: Sequence[Sequence[int]]) -> nx.Graph:
    """Return a simple ``networkx`` graph with one node per adjacency row.

    Self-loops are dropped and parallel edges collapse into one.
    """

    graph = nx.Graph()
    graph.add_nodes_from(range(len(adjacency)))
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            if u < v:
                graph.add_edge(u, v)
    return graph


def is_planar(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return ``True`` when the graph described by ``adjacency`` is planar."""

    graph = build_simple_graph(adjacency)
    planar, _embedding = nx.check_planarity(graph)
    logger.debug(
        "Planarity check nodes=%d edges=%d planar=%s",
        graph.number_of_nodes(),
        graph.number_of_edges(),
        planar,
    )
    return bool(planar)


__all__ = ["build_simple_graph", "is_planar"]
