"""Core data structures for the layout engine."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Iterator, List, Optional, Tuple

Vertex = int
GridIndex = int
Point2D = Tuple[float, float]
Assignment = List[GridIndex]
Adjacency = List[List[Vertex]]

DEFAULT_SEED = 123456
DEFAULT_DENSITY_CONSTANT = 4.108


class Heuristic(IntEnum):
    """Placement strategies, numbered as the caller selects them."""

    AUTO = 0
    SPIRAL = 1
    DEGREE_GREEDY = 2
    BARYCENTRIC = 3
    REFINED = 4
    # Output tag only; never accepted as a choice.
    BRUTE_FORCE = 5

    @classmethod
    def from_choice(cls, choice: int) -> "Heuristic":
        """Clamp ``choice`` into ``[AUTO, REFINED]``."""

        value = int(choice)
        if value < cls.AUTO:
            value = cls.AUTO
        if value > cls.REFINED:
            value = cls.REFINED
        return cls(value)


CANDIDATE_ORDER: Tuple[Heuristic, ...] = (
    Heuristic.SPIRAL,
    Heuristic.DEGREE_GREEDY,
    Heuristic.BARYCENTRIC,
    Heuristic.REFINED,
)


class LayoutCancelled(RuntimeError):
    """Raised when a layout computation observes a cancelled token."""


class CancelToken:
    """Cooperative cancellation flag shared between a caller and one computation."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise LayoutCancelled("layout computation was cancelled")


def check_cancelled(token: Optional[CancelToken]) -> None:
    if token is not None:
        token.raise_if_cancelled()


@dataclass
class LayoutOptions:
    """Tunable knobs of the layout pipeline."""

    seed: int = DEFAULT_SEED
    jitter: float = 2.0
    density_constant: float = DEFAULT_DENSITY_CONSTANT
    max_refine_iterations: int = 2500
    brute_force_limit: int = 10
    brute_force_batch: int = 4096

    def __post_init__(self) -> None:
        if self.jitter < 0:
            raise ValueError(f"jitter must be non-negative (got {self.jitter})")
        if self.density_constant <= 0:
            raise ValueError(f"density_constant must be positive (got {self.density_constant})")
        if self.max_refine_iterations < 0:
            raise ValueError(
                f"max_refine_iterations must be non-negative (got {self.max_refine_iterations})"
            )
        if self.brute_force_batch < 1:
            raise ValueError(f"brute_force_batch must be at least 1 (got {self.brute_force_batch})")


@dataclass
class Candidate:
    """An owned assignment tagged with the heuristic that produced it."""

    heuristic: Heuristic
    assignment: Assignment
    crossings: int


@dataclass
class RefineResult:
    assignment: Assignment
    iterations: int
    converged: bool
    gains: List[float] = field(default_factory=list)

    @property
    def swaps(self) -> int:
        return len(self.gains)


@dataclass
class LayoutResult:
    """Outcome of :func:`gridcross.layout.compute_layout`.

    Unpacks as ``k, positions`` for callers that only need the pair.
    """

    k: int
    positions: List[Point2D]
    heuristic: Optional[Heuristic] = None
    crossings: int = 0
    candidate_crossings: Dict[Heuristic, int] = field(default_factory=dict)

    def __iter__(self) -> Iterator[object]:
        yield self.k
        yield self.positions


__all__ = [
    "Adjacency",
    "Assignment",
    "CANDIDATE_ORDER",
    "CancelToken",
    "Candidate",
    "DEFAULT_DENSITY_CONSTANT",
    "DEFAULT_SEED",
    "GridIndex",
    "Heuristic",
    "LayoutCancelled",
    "LayoutOptions",
    "LayoutResult",
    "Point2D",
    "RefineResult",
    "Vertex",
    "check_cancelled",
]
