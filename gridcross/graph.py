"""Graph input helpers used at the boundary of the layout engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .model import Adjacency

logger = logging.getLogger(__name__)

AdjacencyLike = Union[Mapping[int, Sequence[int]], Sequence[Sequence[int]]]
EdgePair = Tuple[int, int]


class GraphValidationError(ValueError):
    pass


def normalize_adjacency(vertex_count: int, adjacency: AdjacencyLike) -> Adjacency:
    """Return ``vertex_count`` neighbour lists built from ``adjacency``.

    Accepts a sequence indexed by vertex or a mapping; missing vertices get
    no neighbours. Neighbour ids outside ``[0, vertex_count)`` are dropped
    with a warning.
    """

    rows: Adjacency = []
    dropped = 0
    for v in range(vertex_count):
        if isinstance(adjacency, Mapping):
            raw = adjacency.get(v, ())
        else:
            raw = adjacency[v] if v < len(adjacency) else ()
        row: List[int] = []
        for neighbour in raw:
            neighbour = int(neighbour)
            if 0 <= neighbour < vertex_count:
                row.append(neighbour)
            else:
                dropped += 1
        rows.append(row)
    if dropped:
        logger.warning(
            "Dropped %d neighbour id(s) outside [0, %d) from adjacency", dropped, vertex_count
        )
    return rows


@dataclass
class Graph:
    """Undirected graph on vertices ``0..vertex_count-1`` stored as neighbour lists."""

    vertex_count: int
    adjacency: Adjacency = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.adjacency) < self.vertex_count:
            self.adjacency = list(self.adjacency) + [
                [] for _ in range(self.vertex_count - len(self.adjacency))
            ]

    @classmethod
    def from_edges(cls, edges: Iterable[EdgePair], vertex_count: Optional[int] = None) -> "Graph":
        pairs = [(int(u), int(v)) for u, v in edges]
        if vertex_count is None:
            vertex_count = max((max(u, v) for u, v in pairs), default=-1) + 1
        adjacency: Adjacency = [[] for _ in range(vertex_count)]
        for u, v in pairs:
            if not (0 <= u < vertex_count and 0 <= v < vertex_count):
                raise GraphValidationError(
                    f"edge {u}-{v} references a vertex outside [0, {vertex_count})"
                )
            adjacency[u].append(v)
            adjacency[v].append(u)
        return cls(vertex_count=vertex_count, adjacency=adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(row) for row in self.adjacency) // 2

    def degree(self, vertex: int) -> int:
        return len(self.adjacency[vertex])

    def edges(self) -> List[EdgePair]:
        return [(u, v) for u, row in enumerate(self.adjacency) for v in row if u < v]

    def validate(self) -> None:
        if self.vertex_count < 0:
            raise GraphValidationError(f"vertex count must be non-negative (got {self.vertex_count})")
        if len(self.adjacency) != self.vertex_count:
            raise GraphValidationError(
                f"adjacency has {len(self.adjacency)} rows, expected {self.vertex_count}"
            )
        for u, row in enumerate(self.adjacency):
            for v in row:
                if not 0 <= v < self.vertex_count:
                    raise GraphValidationError(
                        f"vertex {u} lists neighbour {v} outside [0, {self.vertex_count})"
                    )
                if self.adjacency[v].count(u) != row.count(v):
                    raise GraphValidationError(f"edge {u}-{v} is not listed symmetrically")


def parse_edge_list(text: str) -> Graph:
    """Parse ``u v`` lines into a :class:`Graph`.

    Lines without exactly two fields are ignored. The vertex count is one
    more than the largest id seen.
    """

    edges: List[EdgePair] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        parts = line.split()
        if len(parts) != 2:
            continue
        try:
            u, v = int(parts[0]), int(parts[1])
        except ValueError as exc:
            raise GraphValidationError(f"[line {lineno}] expected two integer ids, got {line.strip()!r}") from exc
        if u < 0 or v < 0:
            raise GraphValidationError(f"[line {lineno}] vertex ids must be non-negative")
        edges.append((u, v))
    return Graph.from_edges(edges)


__all__ = [
    "AdjacencyLike",
    "EdgePair",
    "Graph",
    "GraphValidationError",
    "normalize_adjacency",
    "parse_edge_list",
]
