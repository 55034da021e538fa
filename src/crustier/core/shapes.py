"""Drawable shapes.

A shape describes itself to any :class:`~crustier.render.renderer.Renderer`
using only the renderer's move/line/arc vocabulary. Adding a new kind of
shape therefore never requires touching a renderer: any object with
``draw(renderer)`` and ``is_equal(other)`` participates.

Shapes are frozen dataclasses and validate their fields at construction so
that ``draw`` stays total.

Example:
    from crustier.core.shapes import Circle, Diagram, Polygon
    from crustier.render.recording import RecordingRenderer

    diagram = Diagram([Circle((0, 0), 1.0), Polygon([(0, 0), (1, 0), (0, 1)])])
    renderer = RecordingRenderer()
    diagram.draw(renderer)
    print("\\n".join(renderer.operations))
"""

from __future__ import annotations

import math
from collections import abc
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence, Tuple, runtime_checkable

from crustier.core.geometry import (
    Point,
    ShapeError,
    as_point,
    as_points,
    is_finite_point,
)
from crustier.render.renderer import Renderer

__all__ = [
    "Drawable",
    "Circle",
    "Polygon",
    "Diagram",
    "ShapeError",
    "shapes_equal",
    "diagram_of",
]


@runtime_checkable
class Drawable(Protocol):
    def draw(self, renderer: Renderer) -> None:
        ...

    def is_equal(self, other: object) -> bool:
        ...


def shapes_equal(a: Drawable, b: object) -> bool:
    """Structural equality between two shapes of unknown concrete type."""
    return a.is_equal(b)


def _require_finite(p: Point, what: str) -> Point:
    if not is_finite_point(p):
        raise ShapeError(f"{what} must be finite, got {p}")
    return p


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def __post_init__(self) -> None:
        center = _require_finite(as_point(self.center), "center")
        object.__setattr__(self, "center", center)
        try:
            r = float(self.radius)
        except (TypeError, ValueError):
            raise ShapeError(f"radius must be numeric, got {self.radius!r}") from None
        if not math.isfinite(r) or r < 0.0:
            raise ShapeError(f"radius must be a finite number >= 0, got {r}")
        object.__setattr__(self, "radius", r)

    def draw(self, renderer: Renderer) -> None:
        renderer.add_arc(self.center, self.radius, 0.0, math.tau)

    def is_equal(self, other: object) -> bool:
        return isinstance(other, Circle) and self == other


@dataclass(frozen=True)
class Polygon:
    corners: Tuple[Point, ...]

    def __post_init__(self) -> None:
        corners = as_points(self.corners)
        if not corners:
            raise ShapeError("polygon needs at least one corner")
        for c in corners:
            _require_finite(c, "corner")
        object.__setattr__(self, "corners", corners)

    def draw(self, renderer: Renderer) -> None:
        # Starting at the last corner closes the outline with the final line.
        renderer.move_to(self.corners[-1])
        for p in self.corners:
            renderer.line_to(p)

    def is_equal(self, other: object) -> bool:
        return isinstance(other, Polygon) and self == other


def _check_acyclic(elements: Iterable[Any], path: set[int]) -> None:
    """Reject element graphs in which a composite reaches itself.

    Only objects exposing an ``elements`` sequence are descended into, so
    third-party composites are covered as long as they follow that naming.
    """
    for el in elements:
        children = getattr(el, "elements", None)
        if not isinstance(children, abc.Iterable) or isinstance(
            children, (str, bytes)
        ):
            continue
        key = id(el)
        if key in path:
            raise ShapeError(f"diagram element {type(el).__name__} contains itself")
        path.add(key)
        try:
            _check_acyclic(children, path)
        finally:
            path.discard(key)


@dataclass(frozen=True, eq=False)
class Diagram:
    """Ordered composite of shapes, drawn into one shared renderer."""

    elements: Tuple[Drawable, ...]

    def __post_init__(self) -> None:
        if isinstance(self.elements, (str, bytes)):
            raise ShapeError("diagram elements must be a sequence of shapes")
        try:
            elements = tuple(self.elements)
        except TypeError:
            raise ShapeError("diagram elements must be a sequence of shapes") from None
        for el in elements:
            if not isinstance(el, Drawable):
                raise ShapeError(f"not a drawable shape: {el!r}")
        _check_acyclic(elements, set())
        object.__setattr__(self, "elements", elements)

    def draw(self, renderer: Renderer) -> None:
        for element in self.elements:
            element.draw(renderer)

    def is_equal(self, other: object) -> bool:
        if not isinstance(other, Diagram):
            return False
        return len(self.elements) == len(other.elements) and all(
            a.is_equal(b) for a, b in zip(self.elements, other.elements)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Diagram):
            return NotImplemented
        return self.is_equal(other)

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self.elements)


def diagram_of(*shapes: Drawable | Sequence[Drawable]) -> Diagram:
    """Build a diagram from shapes or nested lists of shapes.

    Nested lists become nested diagrams, which keeps grouping explicit:
    ``diagram_of(a, [b, c])`` equals ``Diagram([a, Diagram([b, c])])``.
    """
    out: list[Drawable] = []
    for s in shapes:
        if isinstance(s, (list, tuple)):
            out.append(diagram_of(*s))
        else:
            out.append(s)  # type: ignore[arg-type]
    return Diagram(tuple(out))
