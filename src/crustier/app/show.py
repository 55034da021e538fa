"""Show a drawing on a real surface.

:func:`show_diagram` owns a pygame display backend, hands its renderer to a
caller-supplied draw callback, and then saves and/or presents the result.
The callback only ever sees the Renderer protocol, never pygame.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Callable, Optional

from crustier.config import RuntimeConfig, make_runtime_config
from crustier.platform.display.pygame_backend import PygameDisplayBackend, pg
from crustier.render.renderer import Renderer

logger = logging.getLogger(__name__)

DrawFn = Callable[[Renderer], None]


def make_backend(
    cfg: RuntimeConfig, *, create_window: bool = False
) -> PygameDisplayBackend:
    return PygameDisplayBackend(
        size=cfg.size,
        create_window=create_window,
        title=cfg.title,
        background=cfg.background_color,
        color=cfg.stroke_color,
        line_width=cfg.line_width_px,
        max_step_deg=cfg.arc_max_step_deg,
    )


def _wait_for_close() -> None:
    clock = pg.time.Clock()
    while True:
        for event in pg.event.get():
            if event.type == pg.QUIT:
                return
            if event.type == pg.KEYDOWN and event.key in (pg.K_ESCAPE, pg.K_q):
                return
        clock.tick(30)


def show_diagram(
    title: str | None,
    draw: DrawFn,
    *,
    png_path: Optional[str] = None,
    window: bool = False,
    config: RuntimeConfig | None = None,
) -> PygameDisplayBackend:
    """Draw once into a pygame surface, then save and/or display it.

    Args:
        title: Window caption; falls back to the configured title.
        draw: Callback receiving the Renderer to draw into.
        png_path: When set, the frame is written there as PNG.
        window: Open a window and block until it is closed.
        config: Runtime config; built from persisted settings when omitted.

    Returns:
        The backend, so callers can inspect or save the surface again.
    """
    cfg = config if config is not None else make_runtime_config()
    if title is not None:
        cfg = dataclasses.replace(cfg, title=title)
    backend = make_backend(cfg, create_window=window)
    renderer = backend.begin_frame()
    draw(renderer)
    backend.end_frame()
    if png_path:
        backend.save_png(png_path)
    if window:
        if backend.has_window:
            _wait_for_close()
        else:
            logger.warning("no window available; skipping interactive display")
    return backend
