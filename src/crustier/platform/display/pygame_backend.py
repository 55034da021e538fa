"""Pygame-based Renderer adapter and DisplayBackend with headless support.

:class:`PygameRenderer` forwards the renderer vocabulary onto a pygame
surface. pygame has no path API, so the adapter keeps a pen position the
way 2D path contexts do: ``move_to`` sets it, ``line_to`` strokes from it,
and ``add_arc`` strokes a connecting segment from the pen to the arc's start
before stroking the arc itself (flattened into short segments).

It's suitable for deterministic, headless tests by setting the environment
variable SDL_VIDEODRIVER=dummy before importing pygame.

Example:
    import os
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    from crustier.platform.display.pygame_backend import PygameDisplayBackend

    backend = PygameDisplayBackend(size=(375, 667))
    renderer = backend.begin_frame()
    diagram.draw(renderer)
    backend.end_frame()
    backend.save_png("/tmp/diagram.png")
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Optional, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame as pg  # noqa: E402

from crustier.core.geometry import Point, arc_points  # noqa: E402
from crustier.render.renderer import (  # noqa: E402
    DEFAULT_CLOCKWISE,
    Color,
    DisplayBackend,
    Renderer,
)

logger = logging.getLogger(__name__)


def _pygame_color(c: Color) -> Tuple[int, int, int, int]:
    r, g, b, a = c
    return int(r), int(g), int(b), int(a)


class PygameRenderer(Renderer):
    def __init__(
        self,
        surface: Any,
        *,
        color: Color = (0, 0, 0, 255),
        width: int = 1,
        max_step_deg: float = 5.0,
    ) -> None:
        self._surface = surface
        self._color = _pygame_color(color)
        self._width = max(1, int(width))
        self._max_step_deg = float(max_step_deg)
        self._pen: Optional[Point] = None

    @property
    def pen(self) -> Optional[Point]:
        """Current point of the path, or None before the first call."""
        return self._pen

    def move_to(self, point: Point) -> None:
        self._pen = Point(*point)

    def line_to(self, point: Point) -> None:
        p = Point(*point)
        if self._pen is not None:
            pg.draw.line(self._surface, self._color, self._pen, p, self._width)
        # A line with no current point only establishes one.
        self._pen = p

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        clockwise: bool = DEFAULT_CLOCKWISE,
    ) -> None:
        pts = arc_points(
            Point(*center),
            radius,
            start_angle,
            end_angle,
            clockwise,
            max_step_deg=self._max_step_deg,
        )
        if self._pen is not None and self._pen != pts[0]:
            pg.draw.line(self._surface, self._color, self._pen, pts[0], self._width)
        pg.draw.lines(self._surface, self._color, False, pts, self._width)
        self._pen = pts[-1]


class PygameDisplayBackend(DisplayBackend):
    """Pygame implementation of DisplayBackend with offscreen surface.

    Drawing always targets an offscreen SRCALPHA surface; when a window is
    requested, ``end_frame`` blits that surface to it and flips.
    """

    def __init__(
        self,
        size: Tuple[int, int] = (375, 667),
        *,
        create_window: bool = False,
        title: str = "Diagram",
        background: Color = (255, 255, 255, 255),
        color: Color = (0, 0, 0, 255),
        line_width: int = 1,
        max_step_deg: float = 5.0,
    ) -> None:
        if os.environ.get("SDL_VIDEODRIVER") == "dummy":
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

        self._width, self._height = int(size[0]), int(size[1])
        if self._width <= 0 or self._height <= 0:
            raise ValueError(f"display size must be positive, got {size}")

        try:
            if not pg.get_init():
                pg.init()
            self._surface = pg.Surface((self._width, self._height), flags=pg.SRCALPHA)
        except pg.error as e:
            raise RuntimeError(f"cannot initialise pygame display: {e}") from e
        self._background = _pygame_color(background)
        self._color = color
        self._line_width = line_width
        self._max_step_deg = max_step_deg

        self._window_surface = None
        if create_window and os.environ.get("SDL_VIDEODRIVER") != "dummy":
            try:
                self._window_surface = pg.display.set_mode((self._width, self._height))
                pg.display.set_caption(title)
            except pg.error as e:
                logger.warning(
                    "window creation failed, falling back to offscreen: %s", e
                )
                self._window_surface = None

        logger.debug(
            "pygame backend ready size=%dx%d window=%s",
            self._width,
            self._height,
            self._window_surface is not None,
        )

    @property
    def has_window(self) -> bool:
        return self._window_surface is not None

    @property
    def surface(self) -> Any:
        return self._surface

    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    def begin_frame(self) -> PygameRenderer:
        self._surface.fill(self._background)
        return PygameRenderer(
            self._surface,
            color=self._color,
            width=self._line_width,
            max_step_deg=self._max_step_deg,
        )

    def end_frame(self) -> None:
        if self._window_surface is not None:
            self._window_surface.blit(self._surface, (0, 0))
            pg.display.flip()

    def save_png(self, path: str) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        try:
            pg.image.save(self._surface, path)
        except pg.error as e:
            raise OSError(f"cannot save {path}: {e}") from e
        logger.info("saved %s", path)
