"""Runtime configuration helpers.

Merges the persisted Settings store with optional CLI overrides into the
RuntimeConfig used by the preview entry points.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .render.renderer import Color
from .settings.schema import Settings
from .settings.store import SettingsStore


@dataclass(slots=True)
class RuntimeConfig:
    size: Tuple[int, int]
    title: str
    line_width_px: int
    stroke_color: Color
    background_color: Color
    arc_max_step_deg: float


def parse_size(text: str) -> Tuple[int, int]:
    """Parse ``"WxH"`` into a positive (width, height) pair."""
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"size must look like WIDTHxHEIGHT, got {text!r}")
    try:
        w, h = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"size must look like WIDTHxHEIGHT, got {text!r}") from None
    if w <= 0 or h <= 0:
        raise ValueError(f"size must be positive, got {text!r}")
    return (w, h)


def make_runtime_config(
    *, args: Optional[object] = None, settings: Settings | None = None
) -> RuntimeConfig:
    """Build a RuntimeConfig from persisted settings and CLI overrides.

    Persisted Settings provide user defaults; attributes present on *args*
    (an argparse.Namespace-like object) override them for this run. Only
    ``size`` and ``title`` are overridable from the command line.
    """
    if settings is None:
        settings = SettingsStore.load()

    size = settings.canvas_size
    title = settings.title
    if args is not None:
        a_size = getattr(args, "size", None)
        if a_size is not None:
            size = parse_size(a_size) if isinstance(a_size, str) else tuple(a_size)
        a_title = getattr(args, "title", None)
        if a_title is not None:
            title = str(a_title)

    return RuntimeConfig(
        size=(int(size[0]), int(size[1])),
        title=title,
        line_width_px=settings.line_width_px,
        stroke_color=settings.stroke_color,
        background_color=settings.background_color,
        arc_max_step_deg=settings.arc_max_step_deg,
    )
