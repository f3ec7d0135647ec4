from __future__ import annotations

import math
from typing import Tuple

Point2D = Tuple[float, float]


def ccw(a: Point2D, b: Point2D, c: Point2D) -> bool:
    """Return ``True`` when ``a -> b -> c`` turns counter-clockwise (strictly)."""

    return (c[1] - a[1]) * (b[0] - a[0]) > (b[1] - a[1]) * (c[0] - a[0])


def segments_intersect(a: Point2D, b: Point2D, c: Point2D, d: Point2D) -> bool:
    """Return ``True`` when segment ``a-b`` strictly crosses segment ``c-d``.

    Endpoints must alternate on both sides of each other's supporting line.
    Collinear or touching configurations are not reported.
    """

    return ccw(a, c, d) != ccw(b, c, d) and ccw(a, b, c) != ccw(a, b, d)


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


__all__ = ["Point2D", "ccw", "distance", "segments_intersect"]
