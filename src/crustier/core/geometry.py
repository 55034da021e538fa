"""Planar point type and coordinate helpers.

Coordinates are plain floats in whatever user space the caller draws in.
No unit conversion happens here; renderers decide how user space maps to
pixels. Implementations use only the Python standard library (math).
"""

from __future__ import annotations

from math import ceil, cos, isfinite, radians, sin, tau
from typing import Iterable, NamedTuple, Sequence, Tuple

__all__ = [
    "Point",
    "arc_points",
    "arc_sweep",
    "ShapeError",
    "as_point",
    "as_points",
    "is_finite_point",
]


class ShapeError(ValueError):
    """Raised when a shape is constructed from invalid input."""


class Point(NamedTuple):
    """Immutable (x, y) coordinate pair.

    Being a tuple, a Point compares equal to ``(x, y)`` and unpacks like one.
    """

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def as_point(value: Point | Sequence[float]) -> Point:
    """Coerce a 2-sequence of reals to a :class:`Point`.

    Raises:
        ShapeError: if *value* does not hold exactly two numeric items.
    """
    if isinstance(value, Point):
        return value
    if isinstance(value, (str, bytes)):
        raise ShapeError(f"point must be a pair of numbers, got {value!r}")
    try:
        items = tuple(value)
    except TypeError:
        raise ShapeError(f"point must be a pair of numbers, got {value!r}") from None
    if len(items) != 2:
        raise ShapeError(f"point must have 2 coordinates, got {len(items)}")
    x, y = items
    if isinstance(x, bool) or isinstance(y, bool):
        raise ShapeError(f"point coordinates must be numbers, got {value!r}")
    try:
        return Point(float(x), float(y))
    except (TypeError, ValueError):
        raise ShapeError(f"point coordinates must be numbers, got {value!r}") from None


def as_points(values: Iterable[Point | Sequence[float]]) -> Tuple[Point, ...]:
    return tuple(as_point(v) for v in values)


def is_finite_point(p: Point) -> bool:
    return isfinite(p.x) and isfinite(p.y)


def arc_sweep(start_angle: float, end_angle: float, clockwise: bool) -> float:
    """Signed angle swept going from *start_angle* to *end_angle*.

    Angles are radians measured from +x toward +y. Clockwise sweeps are
    negative, matching y-up path APIs. A request spanning a full turn or
    more yields a full circle in the requested direction.
    """
    span = end_angle - start_angle
    if abs(span) >= tau:
        return -tau if clockwise else tau
    if clockwise:
        return -((start_angle - end_angle) % tau)
    return span % tau


def arc_points(
    center: Point,
    radius: float,
    start_angle: float,
    end_angle: float,
    clockwise: bool,
    max_step_deg: float = 5.0,
) -> list[Point]:
    """Flatten an arc into a polyline whose segments span <= *max_step_deg*.

    Always returns at least two points (start and end of the arc).
    """
    sweep = arc_sweep(start_angle, end_angle, clockwise)
    step = radians(max_step_deg)
    n = max(1, ceil(abs(sweep) / step))
    cx, cy = center
    out: list[Point] = []
    for i in range(n + 1):
        a = start_angle + sweep * i / n
        out.append(Point(cx + radius * cos(a), cy + radius * sin(a)))
    return out
