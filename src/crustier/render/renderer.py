"""Framework-agnostic Renderer and DisplayBackend protocols.

A Renderer is the sink every shape draws into. Its vocabulary is the small
path-construction set shared by most 2D drawing APIs (move, line, arc), so
adapters onto pygame, a PDF context or a recording list stay thin.

Renderers are mutable and not thread-safe. Use one instance per thread and
merge the results afterwards (see
:func:`crustier.render.recording.merge_recordings`).
"""

from __future__ import annotations

from typing import Protocol, Tuple

from crustier.core.geometry import Point

# Winding used when a caller does not pick one.
DEFAULT_CLOCKWISE = True

Color = Tuple[int, int, int, int]


class Renderer(Protocol):
    def move_to(self, point: Point) -> None:
        ...

    def line_to(self, point: Point) -> None:
        ...

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool = DEFAULT_CLOCKWISE,
    ) -> None:
        ...


class DisplayBackend(Protocol):
    def size(self) -> Tuple[int, int]:
        ...

    def begin_frame(self) -> Renderer:
        ...

    def end_frame(self) -> None:
        ...

    def save_png(self, path: str) -> None:
        ...
