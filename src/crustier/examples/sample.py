"""Sample drawing: a circle with an inscribed triangle."""

from __future__ import annotations

from crustier.core.shapes import Circle, Diagram, Polygon

CIRCLE = Circle(center=(187.5, 333.5), radius=93.75)

TRIANGLE = Polygon(
    corners=[
        (187.5, 427.25),
        (268.69, 286.625),
        (106.31, 286.625),
    ]
)


def sample_diagram() -> Diagram:
    return Diagram([CIRCLE, TRIANGLE])
